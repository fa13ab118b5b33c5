"""Shared test fixtures."""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from bedtime.config import Settings
from bedtime.models import NightStats, SleepPlan, SleepRequest, SleepWindow
from bedtime.panel import PanelState, panel

LONDON = ZoneInfo("Europe/London")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Known-good settings regardless of the developer's environment."""
    monkeypatch.setattr(Settings, "TZ", "Europe/London")
    monkeypatch.setattr(Settings, "API_KEY", "")
    monkeypatch.setattr(Settings, "GEOLOCATION_ENABLED", True)
    monkeypatch.setattr(Settings, "SUNRISE_API_URL", "https://api.sunrise-sunset.org/json")
    monkeypatch.setattr(Settings, "OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast")
    monkeypatch.setattr(Settings, "GEOLOCATION_URL", "https://ipapi.co/json/")
    monkeypatch.setattr(Settings, "HTTP_TIMEOUT", 5.0)


@pytest.fixture(autouse=True)
def _fresh_panel():
    """The result panel is process-wide; start every test from a blank page."""
    panel._state = PanelState()
    yield
    panel._state = PanelState()


@pytest.fixture
def sleep_request() -> SleepRequest:
    return SleepRequest(
        latitude=51.5074,
        longitude=-0.1278,
        wake_hour=7,
        wake_minute=0,
        sleep_hours=8.0,
        timezone="Europe/London",
    )


@pytest.fixture
def sample_plan(sleep_request) -> SleepPlan:
    """A plan for the night of 1→2 June 2024 in London (BST, UTC+1)."""
    return SleepPlan(
        request=sleep_request,
        window=SleepWindow(
            bedtime=datetime(2024, 6, 1, 23, 0, tzinfo=LONDON),
            wake=datetime(2024, 6, 2, 7, 0, tzinfo=LONDON),
            bedtime_buffer_start=datetime(2024, 6, 1, 22, 30, tzinfo=LONDON),
        ),
        sunrise=datetime(2024, 6, 2, 3, 43, tzinfo=timezone.utc),
        stats=NightStats(avg_temp=16.25, avg_humidity=71.4, max_temp=18.0, max_humidity=82.0),
        comfort=(
            "Conditions look reasonable for sleep."
            " Humidity is also fairly high, which can make sleep feel sticky."
        ),
    )
