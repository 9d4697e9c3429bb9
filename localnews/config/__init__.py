"""Configuration management for Local News."""

from .loader import Config, load_config, save_config
from .models import (
    ConfigModel,
    FetchConfig,
    GeocodeConfig,
    LocationConfig,
    NetworkConfig,
    NewsConfig,
    PostgresConfig,
)

__all__ = [
    "Config",
    "ConfigModel",
    "FetchConfig",
    "GeocodeConfig",
    "LocationConfig",
    "NetworkConfig",
    "NewsConfig",
    "PostgresConfig",
    "load_config",
    "save_config",
]
