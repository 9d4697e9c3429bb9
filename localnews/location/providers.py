"""Location provider interface and implementations."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..errors import PermissionDenied
from ..models import LocationFix

OnSuccess = Callable[[Optional[LocationFix]], None]
OnFailure = Callable[[Exception], None]


class LocationProvider(ABC):
    """Abstract base class for device location providers.

    Providers report the last known fix through callbacks; a ``None`` fix
    means the provider has no reading.
    """

    @abstractmethod
    def has_permission(self) -> bool:
        """Whether location access is currently granted."""
        pass

    @abstractmethod
    def request_permission(self) -> bool:
        """Ask for location access once, returning the outcome."""
        pass

    @abstractmethod
    def request_last_location(self, on_success: OnSuccess, on_failure: OnFailure) -> None:
        """Request the last known fix."""
        pass


class ConfiguredLocationProvider(LocationProvider):
    """Location provider backed by a fixed coordinate from configuration."""

    def __init__(
        self,
        latitude: Optional[float],
        longitude: Optional[float],
        permission_granted: bool = False,
    ) -> None:
        """Initialize configured provider."""
        self.latitude = latitude
        self.longitude = longitude
        self.permission_granted = permission_granted

    def has_permission(self) -> bool:
        return self.permission_granted

    def request_permission(self) -> bool:
        return self.permission_granted

    def request_last_location(self, on_success: OnSuccess, on_failure: OnFailure) -> None:
        if not self.permission_granted:
            on_failure(PermissionDenied("Location permission not granted"))
            return

        if self.latitude is None or self.longitude is None:
            on_success(None)
            return

        on_success(LocationFix(latitude=self.latitude, longitude=self.longitude))


class MockLocationProvider(LocationProvider):
    """Mock provider for testing and demos."""

    def __init__(
        self,
        fix: Optional[LocationFix] = None,
        error: Optional[Exception] = None,
        permission_granted: bool = True,
        grant_on_request: bool = False,
    ) -> None:
        """Initialize mock provider."""
        self.fix = fix
        self.error = error
        self.permission_granted = permission_granted
        self.grant_on_request = grant_on_request
        self.permission_requests = 0
        self.location_requests = 0

    def has_permission(self) -> bool:
        return self.permission_granted

    def request_permission(self) -> bool:
        self.permission_requests += 1
        if self.grant_on_request:
            self.permission_granted = True
        return self.permission_granted

    def request_last_location(self, on_success: OnSuccess, on_failure: OnFailure) -> None:
        self.location_requests += 1
        if self.error is not None:
            on_failure(self.error)
        else:
            on_success(self.fix)
