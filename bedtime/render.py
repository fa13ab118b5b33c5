"""Text formatting for the result panel."""
from __future__ import annotations

from datetime import datetime, tzinfo

from bedtime.models import PlanView, SleepPlan

NBSP = "\u00a0"


def format_time(dt: datetime, tz: tzinfo | None = None) -> str:
    """12-hour clock, e.g. "10:30 PM" (AM/PM kept on the same line)."""
    if tz is not None and dt.tzinfo is not None:
        dt = dt.astimezone(tz)
    hour = dt.hour % 12 or 12
    marker = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d}{NBSP}{marker}"


def format_temp(value: float) -> str:
    return f"{value:.1f} °C"


def format_humidity(value: float) -> str:
    return f"{value:.0f} %"


def format_duration(hours: float) -> str:
    return f"{hours:.1f} hours"


def render_plan(plan: SleepPlan) -> PlanView:
    """Format every output slot, with times shown in the request's zone."""
    tz = plan.request.tzinfo
    w = plan.window
    return PlanView(
        bedtime_window=(
            f"Go to bed between {format_time(w.bedtime_buffer_start, tz)}"
            f" and {format_time(w.bedtime, tz)}."
        ),
        sleep_window=(
            f"You’ll likely be asleep between {format_time(w.bedtime, tz)}"
            f" and {format_time(w.wake, tz)}."
        ),
        sunrise=format_time(plan.sunrise, tz),
        sleep_duration=format_duration(plan.request.sleep_hours),
        avg_temp=format_temp(plan.stats.avg_temp),
        avg_humidity=format_humidity(plan.stats.avg_humidity),
        comfort_note=plan.comfort,
    )
