"""Typed values passed between the planning stages.

All models are frozen: each submission builds fresh instances and nothing
downstream mutates them.
"""
from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict


class PlanForm(BaseModel):
    """Raw form fields as submitted. Strings or numbers, possibly blank."""

    latitude: float | str | None = None
    longitude: float | str | None = None
    wake_time: str | None = None  # "HH:MM", 24-hour
    sleep_hours: float | str | None = None
    timezone: str | None = None


class SleepRequest(BaseModel):
    """Validated form input."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    wake_hour: int
    wake_minute: int
    sleep_hours: float
    timezone: str

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


class SleepWindow(BaseModel):
    model_config = ConfigDict(frozen=True)

    bedtime: datetime
    wake: datetime
    bedtime_buffer_start: datetime


class HourlySample(BaseModel):
    model_config = ConfigDict(frozen=True)

    time: datetime
    temperature: float  # °C
    humidity: float  # relative humidity, 0-100


class NightStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    avg_temp: float
    avg_humidity: float
    max_temp: float
    max_humidity: float


class SleepPlan(BaseModel):
    """Everything one submission produces, before formatting."""

    model_config = ConfigDict(frozen=True)

    request: SleepRequest
    window: SleepWindow
    sunrise: datetime
    stats: NightStats
    comfort: str


class PlanView(BaseModel):
    """Formatted text for each output slot of the result panel."""

    model_config = ConfigDict(frozen=True)

    bedtime_window: str
    sleep_window: str
    sunrise: str
    sleep_duration: str
    avg_temp: str
    avg_humidity: str
    comfort_note: str
