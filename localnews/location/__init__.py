"""Device location access."""

from .providers import ConfiguredLocationProvider, LocationProvider, MockLocationProvider
from .resolver import LocationResolver

__all__ = [
    "ConfiguredLocationProvider",
    "LocationProvider",
    "LocationResolver",
    "MockLocationProvider",
]
