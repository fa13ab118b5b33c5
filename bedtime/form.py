"""Turn raw form fields into a validated SleepRequest."""
from __future__ import annotations

import math
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import ValidationError

from bedtime.config import settings
from bedtime.errors import InputValidationError
from bedtime.models import PlanForm, SleepRequest
from bedtime.window import MAX_SLEEP_HOURS, parse_wake_time


def _number(value) -> float | None:
    """Parse a form number; None for blank, non-numeric or non-finite."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    return num if math.isfinite(num) else None


def parse_form(form: PlanForm | Any) -> SleepRequest:
    """Validate a submitted form; a raw JSON body is accepted too."""
    if not isinstance(form, PlanForm):
        try:
            form = PlanForm.model_validate(form if form is not None else {})
        except ValidationError as e:
            raise InputValidationError() from e

    lat = _number(form.latitude)
    lon = _number(form.longitude)
    hours = _number(form.sleep_hours)
    wake = (form.wake_time or "").strip()

    if lat is None or lon is None or not wake or not hours or hours <= 0:
        raise InputValidationError()
    if hours > MAX_SLEEP_HOURS:
        raise InputValidationError(f"Sleep hours must be at most {MAX_SLEEP_HOURS:g}.")
    if not -90 <= lat <= 90:
        raise InputValidationError("Latitude must be between -90 and 90.")
    if not -180 <= lon <= 180:
        raise InputValidationError("Longitude must be between -180 and 180.")

    wake_hour, wake_minute = parse_wake_time(wake)

    tz_name = (form.timezone or "").strip() or settings.TZ
    try:
        ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InputValidationError(f"Unknown time zone: {tz_name}.") from e

    return SleepRequest(
        latitude=lat,
        longitude=lon,
        wake_hour=wake_hour,
        wake_minute=wake_minute,
        sleep_hours=hours,
        timezone=tz_name,
    )
