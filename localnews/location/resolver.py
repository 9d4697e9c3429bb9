"""Current location resolution."""

import asyncio
from typing import Optional

from rich.console import Console

from ..errors import LocationError, LocationUnavailable, PermissionDenied, ProviderError
from ..models import LocationFix
from .providers import LocationProvider

console = Console(stderr=True)


class LocationResolver:
    """Turn the provider's callback API into a single awaitable fix."""

    def __init__(self, provider: LocationProvider, timeout: Optional[float] = None) -> None:
        """Initialize location resolver."""
        self.provider = provider
        self.timeout = timeout

    def request_permission(self) -> bool:
        """Ask the provider for location access.

        A denial is returned as ``False``; the resolver never asks again on
        its own.
        """
        if self.provider.has_permission():
            return True
        return self.provider.request_permission()

    async def resolve_current_location(self) -> LocationFix:
        """Get the current location fix.

        Raises:
            PermissionDenied: location access is not granted
            LocationUnavailable: the provider has no last known fix
            ProviderError: the provider failed for any other reason
        """
        if not self.provider.has_permission():
            raise PermissionDenied("Location permission not granted")

        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()

        def on_success(fix: Optional[LocationFix]) -> None:
            if future.done():
                return
            if fix is None:
                future.set_exception(LocationUnavailable("Location is null"))
            else:
                future.set_result(fix)

        def on_failure(error: Exception) -> None:
            if future.done():
                return
            if isinstance(error, LocationError):
                future.set_exception(error)
            else:
                future.set_exception(ProviderError(f"Location provider failed: {error}"))

        # Providers may call back from another thread
        def threadsafe(callback):
            def wrapper(value):
                if loop.is_closed():
                    return
                try:
                    running = asyncio.get_running_loop()
                except RuntimeError:
                    running = None
                if running is loop:
                    callback(value)
                else:
                    loop.call_soon_threadsafe(callback, value)
            return wrapper

        try:
            self.provider.request_last_location(threadsafe(on_success), threadsafe(on_failure))
        except LocationError:
            raise
        except Exception as e:
            raise ProviderError(f"Location provider failed: {e}") from e

        try:
            if self.timeout is None:
                return await future
            return await asyncio.wait_for(future, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            console.print(f"[yellow]No location fix after {self.timeout}s[/yellow]")
            raise LocationUnavailable("Timed out waiting for a location fix") from e
