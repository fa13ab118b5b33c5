"""Bedtime and sleep window arithmetic."""
from __future__ import annotations

import math
from datetime import datetime, time, timedelta, timezone

from bedtime.errors import InputValidationError, InvalidInput
from bedtime.models import SleepWindow

# "Go to bed between (bedtime - BEDTIME_BUFFER) and bedtime."
BEDTIME_BUFFER = timedelta(minutes=30)
# Longer requests are out of domain: the window would span more than a day.
MAX_SLEEP_HOURS = 24.0


def parse_wake_time(value: str) -> tuple[int, int]:
    """Split a 24-hour "HH:MM" string into (hour, minute)."""
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(p.isascii() and p.isdigit() for p in parts):
        raise InputValidationError(f"Wake-up time must look like HH:MM, got {value!r}.")
    hour, minute = int(parts[0]), int(parts[1])
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InputValidationError(f"Wake-up time {value!r} is not a valid time of day.")
    return hour, minute


def _check_inputs(wake_hour, wake_minute, sleep_hours) -> None:
    for name, val, hi in (("wake_hour", wake_hour, 23), ("wake_minute", wake_minute, 59)):
        if isinstance(val, bool) or not isinstance(val, int) or not 0 <= val <= hi:
            raise InvalidInput(f"{name} must be an integer in 0..{hi}, got {val!r}")
    if (
        isinstance(sleep_hours, bool)
        or not isinstance(sleep_hours, (int, float))
        or not math.isfinite(sleep_hours)
        or not 0 < sleep_hours <= MAX_SLEEP_HOURS
    ):
        raise InvalidInput(
            f"sleep_hours must be a number in (0, {MAX_SLEEP_HOURS:g}], got {sleep_hours!r}"
        )


def _elapsed_before(dt: datetime, delta: timedelta) -> datetime:
    """The instant *delta* of real time before *dt*, in dt's zone."""
    if dt.tzinfo is None:
        return dt - delta
    return (dt.astimezone(timezone.utc) - delta).astimezone(dt.tzinfo)


def compute_window(
    now: datetime, wake_hour: int, wake_minute: int, sleep_hours: float
) -> SleepWindow:
    """Wake tomorrow at wake_hour:wake_minute and back-compute bedtime.

    The wake instant lives in ``now``'s zone. For aware datetimes the
    offsets are real elapsed time, so bedtime is exactly ``sleep_hours``
    before wake even across a DST change.
    """
    _check_inputs(wake_hour, wake_minute, sleep_hours)

    wake = datetime.combine(
        now.date() + timedelta(days=1),
        time(wake_hour, wake_minute),
        tzinfo=now.tzinfo,
    )
    bedtime = _elapsed_before(wake, timedelta(hours=sleep_hours))
    return SleepWindow(
        bedtime=bedtime,
        wake=wake,
        bedtime_buffer_start=_elapsed_before(bedtime, BEDTIME_BUFFER),
    )
