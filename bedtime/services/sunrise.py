"""sunrise-sunset.org client (no API key required)."""
from __future__ import annotations

import logging
from datetime import datetime

import httpx

from bedtime.config import settings
from bedtime.errors import ApiError

log = logging.getLogger(__name__)


async def fetch_sunrise(
    client: httpx.AsyncClient, lat: float, lon: float, date_iso: str
) -> datetime:
    """Return the sunrise instant on *date_iso* (YYYY-MM-DD) as an aware datetime."""
    params = {
        "lat": lat,
        "lng": lon,
        "date": date_iso,
        "formatted": 0,  # ISO 8601 timestamps instead of "6:12:03 AM"
    }
    try:
        resp = await client.get(settings.SUNRISE_API_URL, params=params)
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        log.warning("Sunrise lookup for %s failed: %s", date_iso, e)
        raise ApiError("Sunrise–Sunset API error") from e

    if not isinstance(data, dict):
        raise ApiError("Sunrise–Sunset response is not a JSON object")
    if data.get("status") != "OK":
        log.warning("Sunrise API returned status %r", data.get("status"))
        raise ApiError("Sunrise–Sunset response error")

    results = data.get("results")
    raw = results.get("sunrise") if isinstance(results, dict) else None
    try:
        return datetime.fromisoformat(raw)
    except (TypeError, ValueError) as e:
        raise ApiError(f"Sunrise–Sunset response has no usable sunrise: {raw!r}") from e
