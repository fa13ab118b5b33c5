"""The submit pipeline: window → concurrent fetches → stats → comfort note."""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime

import httpx

from bedtime.comfort import classify
from bedtime.errors import NoDataError
from bedtime.models import SleepPlan, SleepRequest
from bedtime.night import aggregate
from bedtime.services import sunrise, weather
from bedtime.window import compute_window

log = logging.getLogger(__name__)


async def plan_night(
    client: httpx.AsyncClient,
    request: SleepRequest,
    now: datetime | None = None,
) -> SleepPlan:
    """Build a SleepPlan for *request*.

    Raises ApiError if either lookup fails (first failure wins) and
    NoDataError if the forecast has no hour inside the sleep window.
    """
    tz = request.tzinfo
    now = now.astimezone(tz) if now is not None else datetime.now(tz)

    window = compute_window(
        now, request.wake_hour, request.wake_minute, request.sleep_hours
    )
    wake_date = window.wake.date().isoformat()
    bed_date = window.bedtime.date().isoformat()

    # Whole-day range on purpose: aggregate() does the exact filtering.
    sunrise_at, samples = await asyncio.gather(
        sunrise.fetch_sunrise(client, request.latitude, request.longitude, wake_date),
        weather.fetch_hourly_weather(
            client, request.latitude, request.longitude, bed_date, wake_date
        ),
    )

    stats = aggregate(samples, window.bedtime, window.wake)
    if stats is None:
        log.warning(
            "No weather samples between %s and %s (%d fetched)",
            window.bedtime.isoformat(),
            window.wake.isoformat(),
            len(samples),
        )
        raise NoDataError()

    plan = SleepPlan(
        request=request,
        window=window,
        sunrise=sunrise_at,
        stats=stats,
        comfort=classify(stats),
    )
    log.info(
        "Planned night at %.4f,%.4f: bed %s wake %s, avg %.1f°C / %.0f%%",
        request.latitude,
        request.longitude,
        window.bedtime.isoformat(timespec="minutes"),
        window.wake.isoformat(timespec="minutes"),
        stats.avg_temp,
        stats.avg_humidity,
    )
    return plan
