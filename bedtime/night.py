"""Reduce an hourly forecast to overnight temperature/humidity stats."""
from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from bedtime.models import HourlySample, NightStats


def aggregate(
    samples: Iterable[HourlySample], start: datetime, end: datetime
) -> NightStats | None:
    """Average and peak conditions for samples in ``[start, end]``.

    Returns None when no sample falls inside the window.
    """
    count = 0
    temp_sum = hum_sum = 0.0
    max_temp = max_hum = float("-inf")

    for s in samples:
        if not start <= s.time <= end:
            continue
        count += 1
        temp_sum += s.temperature
        hum_sum += s.humidity
        max_temp = max(max_temp, s.temperature)
        max_hum = max(max_hum, s.humidity)

    if count == 0:
        return None

    return NightStats(
        avg_temp=temp_sum / count,
        avg_humidity=hum_sum / count,
        max_temp=max_temp,
        max_humidity=max_hum,
    )
