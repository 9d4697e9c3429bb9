"""Exceptions raised by the Local News components."""


class LocalNewsError(Exception):
    """Base class for all Local News errors."""


class LocationError(LocalNewsError):
    """Base class for location resolution failures."""


class PermissionDenied(LocationError):
    """Location permission is not granted."""


class LocationUnavailable(LocationError):
    """The provider has no last-known fix."""


class ProviderError(LocationError):
    """The location provider failed."""


class NetworkError(LocalNewsError):
    """Transport failure, timeout or unsuccessful HTTP status."""


class MalformedResponse(LocalNewsError):
    """A response body did not have the expected shape."""


class StoreError(LocalNewsError):
    """The local article store failed."""
