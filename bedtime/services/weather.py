"""Open-Meteo hourly forecast client (no API key required)."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx

from bedtime.config import settings
from bedtime.errors import ApiError
from bedtime.models import HourlySample

log = logging.getLogger(__name__)

HOURLY_FIELDS = "temperature_2m,relative_humidity_2m"
# Older responses (and the original query) spell it without the underscore.
_HUMIDITY_KEYS = ("relative_humidity_2m", "relativehumidity_2m")


def _response_zone(data: dict) -> tzinfo:
    """Zone for the local timestamps; a named zone keeps DST changes right."""
    name = data.get("timezone")
    if isinstance(name, str) and name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            log.debug("Unknown Open-Meteo timezone %r, using fixed offset", name)
    try:
        offset = int(data.get("utc_offset_seconds", 0))
    except (TypeError, ValueError) as e:
        raise ApiError("Open-Meteo returned a bad utc_offset_seconds") from e
    return timezone(timedelta(seconds=offset))


def parse_hourly(data: dict) -> list[HourlySample]:
    """Zip Open-Meteo's parallel hourly arrays into samples.

    With ``timezone=auto`` timestamps come back as local wall-clock strings
    in the zone the response names; ``utc_offset_seconds`` is the fallback
    when that zone is unknown. Hours where either metric is null are dropped.
    """
    if not isinstance(data, dict):
        raise ApiError("Open-Meteo response is not a JSON object")
    hourly = data.get("hourly")
    if not isinstance(hourly, dict):
        raise ApiError("Open-Meteo response has no hourly block")

    times = hourly.get("time")
    temps = hourly.get("temperature_2m")
    hums = next((hourly[k] for k in _HUMIDITY_KEYS if k in hourly), None)
    if not isinstance(times, list) or not isinstance(temps, list) or not isinstance(hums, list):
        raise ApiError("Open-Meteo response is missing hourly time/temperature/humidity")
    if not len(times) == len(temps) == len(hums):
        raise ApiError("Open-Meteo hourly arrays have mismatched lengths")

    tz = _response_zone(data)

    samples: list[HourlySample] = []
    skipped = 0
    for t, temp, hum in zip(times, temps, hums):
        if temp is None or hum is None:
            skipped += 1
            continue
        try:
            ts = datetime.fromisoformat(t)
        except (TypeError, ValueError) as e:
            raise ApiError(f"Open-Meteo returned a bad timestamp: {t!r}") from e
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=tz)
        try:
            samples.append(HourlySample(time=ts, temperature=temp, humidity=hum))
        except ValueError as e:
            raise ApiError(f"Open-Meteo returned a non-numeric value at {t!r}") from e

    if skipped:
        log.debug("Skipped %d hourly samples with null values", skipped)
    return samples


async def fetch_hourly_weather(
    client: httpx.AsyncClient,
    lat: float,
    lon: float,
    start_date_iso: str,
    end_date_iso: str,
) -> list[HourlySample]:
    """Fetch hourly temperature + humidity for whole days start..end inclusive."""
    params = {
        "latitude": lat,
        "longitude": lon,
        "hourly": HOURLY_FIELDS,
        "timezone": "auto",
        "start_date": start_date_iso,
        "end_date": end_date_iso,
    }
    try:
        resp = await client.get(settings.OPEN_METEO_URL, params=params)
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        log.warning(
            "Open-Meteo lookup %s..%s failed: %s", start_date_iso, end_date_iso, e
        )
        raise ApiError("Open-Meteo API error") from e

    return parse_hourly(data)
