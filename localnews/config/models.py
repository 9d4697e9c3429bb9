"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field


class PostgresConfig(BaseModel):
    """Postgres configuration."""

    host: str = Field("localhost", description="Database host")
    port: int = Field(5432, description="Database port")
    database: str = Field("localnews", description="Database name")
    user: str = Field("localnews_user", description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    password_env: Optional[str] = Field(None, description="Environment variable for password")


class GeocodeConfig(BaseModel):
    """Reverse geocoding API configuration."""

    base_url: str = Field(
        "https://api.geoapify.com/v1/geocode/reverse",
        description="Reverse geocoding endpoint",
    )
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    api_key_env: Optional[str] = Field(
        "LOCALNEWS_GEOAPIFY_KEY", description="Environment variable for API key"
    )
    timeout: float = Field(10.0, description="Request timeout in seconds", gt=0)


class NewsConfig(BaseModel):
    """News search API configuration."""

    base_url: str = Field("https://newsapi.org/v2", description="News API base URL")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    api_key_env: Optional[str] = Field(
        "LOCALNEWS_NEWSAPI_KEY", description="Environment variable for API key"
    )
    connect_timeout: float = Field(10.0, description="Connect timeout in seconds", gt=0)
    read_timeout: float = Field(10.0, description="Read timeout in seconds", gt=0)
    default_country: str = Field("in", description="Country code for top headlines")


class LocationConfig(BaseModel):
    """Location provider configuration."""

    latitude: Optional[float] = Field(None, description="Fixed latitude", ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(None, description="Fixed longitude", ge=-180.0, le=180.0)
    permission_granted: bool = Field(False, description="Whether location access is allowed")
    timeout: Optional[float] = Field(None, description="Seconds to wait for a fix", gt=0)


class NetworkConfig(BaseModel):
    """Connectivity check configuration."""

    probe_host: str = Field("1.1.1.1", description="Host used to probe connectivity")
    probe_port: int = Field(53, description="Port used to probe connectivity")
    probe_timeout: float = Field(3.0, description="Probe timeout in seconds", gt=0)
    probe_reachability: bool = Field(
        False, description="Also require a TCP connection to the probe host"
    )


class FetchConfig(BaseModel):
    """Fetch flow behaviour."""

    offline_fallback: bool = Field(
        True, description="Load saved articles when the location or geocode step fails"
    )


class ConfigModel(BaseModel):
    """Main configuration model."""

    workspace_root: str = Field("~/LocalNews", description="Root directory for local state")
    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    geocode: GeocodeConfig = Field(default_factory=GeocodeConfig)
    news: NewsConfig = Field(default_factory=NewsConfig)
    location: LocationConfig = Field(default_factory=LocationConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
