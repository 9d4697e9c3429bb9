import httpx
import pytest

from localnews.clients import GeocodeClient
from localnews.errors import MalformedResponse, NetworkError
from tests.conftest import json_transport


def make_client(payload, status_code=200, calls=None):
    return GeocodeClient(api_key="geo-key", transport=json_transport(payload, status_code, calls))


@pytest.mark.asyncio
async def test_reverse_geocode_returns_first_county():
    calls = []
    client = make_client(
        {
            "features": [
                {"properties": {"county": "Bengaluru Urban", "city": "Bengaluru"}},
                {"properties": {"county": "Other"}},
            ]
        },
        calls=calls,
    )

    city = await client.reverse_geocode(12.97, 77.59)

    assert city == "Bengaluru Urban"
    params = calls[0].url.params
    assert calls[0].url.path == "/v1/geocode/reverse"
    assert params["lat"] == "12.97"
    assert params["lon"] == "77.59"
    assert params["apiKey"] == "geo-key"


@pytest.mark.asyncio
async def test_reverse_geocode_empty_features_is_sentinel():
    client = make_client({"features": []})

    assert await client.reverse_geocode(0.0, 0.0) == ""


@pytest.mark.asyncio
async def test_reverse_geocode_missing_county_is_malformed():
    client = make_client({"features": [{"properties": {"city": "Nowhere"}}]})

    with pytest.raises(MalformedResponse):
        await client.reverse_geocode(1.0, 2.0)


@pytest.mark.asyncio
async def test_reverse_geocode_missing_features_is_malformed():
    client = make_client({"type": "FeatureCollection"})

    with pytest.raises(MalformedResponse):
        await client.reverse_geocode(1.0, 2.0)


@pytest.mark.asyncio
async def test_reverse_geocode_non_json_is_malformed():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"<html>"))
    client = GeocodeClient(api_key="k", transport=transport)

    with pytest.raises(MalformedResponse):
        await client.reverse_geocode(1.0, 2.0)


@pytest.mark.asyncio
async def test_reverse_geocode_http_error_is_network_error():
    client = make_client({"error": "Unauthorized"}, status_code=401)

    with pytest.raises(NetworkError):
        await client.reverse_geocode(1.0, 2.0)


@pytest.mark.asyncio
async def test_reverse_geocode_transport_failure_is_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = GeocodeClient(api_key="k", transport=httpx.MockTransport(handler))

    with pytest.raises(NetworkError):
        await client.reverse_geocode(1.0, 2.0)


@pytest.mark.asyncio
async def test_reverse_geocode_ignores_later_features():
    client = make_client(
        {
            "features": [
                {"properties": {"county": "Bengaluru Urban"}},
                {"type": "Feature"},
                {"properties": {"county": 42}},
            ]
        }
    )

    assert await client.reverse_geocode(12.97, 77.59) == "Bengaluru Urban"


@pytest.mark.asyncio
async def test_reverse_geocode_first_feature_without_properties_is_malformed():
    client = make_client({"features": [{"type": "Feature"}]})

    with pytest.raises(MalformedResponse):
        await client.reverse_geocode(1.0, 2.0)
