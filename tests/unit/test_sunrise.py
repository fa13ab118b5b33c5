"""Tests for the sunrise-sunset.org client."""
from datetime import datetime, timezone

import httpx
import pytest

from bedtime.errors import ApiError
from bedtime.services.sunrise import fetch_sunrise

OK_BODY = {
    "status": "OK",
    "results": {
        "sunrise": "2024-06-02T03:43:12+00:00",
        "sunset": "2024-06-02T20:15:40+00:00",
    },
}


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestFetchSunrise:
    @pytest.mark.asyncio
    async def test_parses_sunrise(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.url.params)
            return httpx.Response(200, json=OK_BODY)

        async with _client(handler) as client:
            got = await fetch_sunrise(client, 51.5, -0.12, "2024-06-02")

        assert got == datetime(2024, 6, 2, 3, 43, 12, tzinfo=timezone.utc)
        assert seen == {"lat": "51.5", "lng": "-0.12", "date": "2024-06-02", "formatted": "0"}

    @pytest.mark.asyncio
    async def test_status_not_ok(self):
        async with _client(lambda r: httpx.Response(200, json={"status": "INVALID_DATE", "results": ""})) as client:
            with pytest.raises(ApiError, match="response error"):
                await fetch_sunrise(client, 51.5, -0.12, "not-a-date")

    @pytest.mark.asyncio
    async def test_http_error(self):
        async with _client(lambda r: httpx.Response(503)) as client:
            with pytest.raises(ApiError, match="Sunrise–Sunset API error"):
                await fetch_sunrise(client, 51.5, -0.12, "2024-06-02")

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        async with _client(handler) as client:
            with pytest.raises(ApiError, match="Sunrise–Sunset API error"):
                await fetch_sunrise(client, 51.5, -0.12, "2024-06-02")

    @pytest.mark.asyncio
    async def test_body_not_an_object(self):
        async with _client(lambda r: httpx.Response(200, json=["nope"])) as client:
            with pytest.raises(ApiError, match="not a JSON object"):
                await fetch_sunrise(client, 51.5, -0.12, "2024-06-02")

    @pytest.mark.asyncio
    async def test_results_not_an_object(self):
        body = {"status": "OK", "results": ["2024-06-02T03:43:12+00:00"]}
        async with _client(lambda r: httpx.Response(200, json=body)) as client:
            with pytest.raises(ApiError, match="no usable sunrise"):
                await fetch_sunrise(client, 51.5, -0.12, "2024-06-02")

    @pytest.mark.asyncio
    async def test_missing_sunrise(self):
        async with _client(lambda r: httpx.Response(200, json={"status": "OK", "results": {}})) as client:
            with pytest.raises(ApiError, match="no usable sunrise"):
                await fetch_sunrise(client, 51.5, -0.12, "2024-06-02")
