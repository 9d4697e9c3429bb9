"""Reverse geocoding client."""

import json
from typing import Optional

import httpx
from pydantic import ValidationError
from rich.console import Console

from ..errors import MalformedResponse, NetworkError
from .models import GeocodeFeature, GeocodeResponse

console = Console(stderr=True)

GEOAPIFY_REVERSE_URL = "https://api.geoapify.com/v1/geocode/reverse"


class GeocodeClient:
    """Resolve coordinates to a county name."""

    def __init__(
        self,
        api_key: str,
        base_url: str = GEOAPIFY_REVERSE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize geocode client."""
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    def _parse_city_name(self, body: str) -> str:
        """Read ``features[0].properties.county``, or "" when nothing matched.

        Only the first feature is inspected; later entries may have any shape.
        """
        try:
            response = GeocodeResponse.model_validate(json.loads(body))
            if not response.features:
                return ""
            first = GeocodeFeature.model_validate(response.features[0])
        except (json.JSONDecodeError, ValidationError) as e:
            raise MalformedResponse(f"Unexpected geocode response: {e}") from e

        county = first.properties.county
        if county is None:
            raise MalformedResponse("First geocode feature has no county")
        return county

    async def reverse_geocode(self, latitude: float, longitude: float) -> str:
        """Get the county name for a coordinate pair.

        Returns an empty string when the service finds no features.

        Raises:
            NetworkError: transport failure, timeout or unsuccessful status
            MalformedResponse: body is not the expected JSON shape
        """
        params = {"lat": latitude, "lon": longitude, "apiKey": self.api_key}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            console.print(f"[red]Geocode request failed: HTTP {e.response.status_code}[/red]")
            raise NetworkError(f"Geocode request failed: HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            console.print(f"[red]Geocode request failed: {e}[/red]")
            raise NetworkError(f"Geocode request failed: {e}") from e

        return self._parse_city_name(response.text)
