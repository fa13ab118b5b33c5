from __future__ import annotations

import logging
import os
import sys
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger(__name__)


def _env(primary: str, *fallbacks: str, default: str = "") -> str:
    """Read env var with fallback aliases."""
    val = os.getenv(primary)
    if val is not None:
        return val
    for fb in fallbacks:
        val = os.getenv(fb)
        if val is not None:
            return val
    return default


def _flag(key: str, default: str = "true") -> bool:
    return os.getenv(key, default).lower() in ("true", "1", "yes")


class Settings:
    # --- Auth / Server ---
    API_KEY: str = os.getenv("BEDTIME_API_KEY", "")
    HOST: str = os.getenv("BEDTIME_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("BEDTIME_PORT", "8200"))

    # Zone the wake time is entered in and results are displayed in,
    # unless a request names its own.
    TZ: str = _env("BEDTIME_TZ", "TZ", default="America/New_York")

    # --- External APIs ---
    SUNRISE_API_URL: str = os.getenv(
        "SUNRISE_API_URL", "https://api.sunrise-sunset.org/json"
    )
    OPEN_METEO_URL: str = os.getenv(
        "OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast"
    )
    GEOLOCATION_URL: str = os.getenv("GEOLOCATION_URL", "https://ipapi.co/json/")
    GEOLOCATION_ENABLED: bool = _flag("GEOLOCATION_ENABLED")

    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "10"))

    @classmethod
    def validate(cls) -> None:
        """Log problems with the configured values; exit if unusable."""
        fatal = False
        try:
            ZoneInfo(cls.TZ)
        except (ZoneInfoNotFoundError, ValueError):
            log.error("TZ %r is not a known IANA time zone", cls.TZ)
            fatal = True
        if cls.HTTP_TIMEOUT <= 0:
            log.error("HTTP_TIMEOUT must be positive, got %s", cls.HTTP_TIMEOUT)
            fatal = True
        if not cls.GEOLOCATION_ENABLED:
            log.warning("GEOLOCATION_ENABLED is off — /api/location will always fail")
        if not cls.API_KEY:
            log.info("BEDTIME_API_KEY unset — API key check disabled")
        if fatal:
            sys.exit(1)


settings = Settings()
