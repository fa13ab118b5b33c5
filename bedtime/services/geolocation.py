"""Approximate device location from an IP geolocation service.

Stands in for a browser's location prompt: one awaitable call that either
yields coordinates or raises GeolocationError.
"""
from __future__ import annotations

import logging
import math

import httpx

from bedtime.config import settings
from bedtime.errors import GeolocationError

log = logging.getLogger(__name__)


async def locate(client: httpx.AsyncClient) -> tuple[float, float]:
    """Return (latitude, longitude) rounded to 4 decimal places."""
    if not settings.GEOLOCATION_ENABLED:
        raise GeolocationError("Geolocation is not available on this server.")

    try:
        resp = await client.get(settings.GEOLOCATION_URL)
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        log.warning("Geolocation lookup failed: %s", e)
        raise GeolocationError() from e

    # ipapi.co signals failures in-band: {"error": true, "reason": "..."}
    if not isinstance(data, dict) or data.get("error"):
        reason = data.get("reason") if isinstance(data, dict) else None
        log.warning("Geolocation service refused: %s", reason)
        raise GeolocationError()

    try:
        lat = float(data["latitude"])
        lon = float(data["longitude"])
    except (KeyError, TypeError, ValueError) as e:
        raise GeolocationError() from e
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise GeolocationError()

    return round(lat, 4), round(lon, 4)
