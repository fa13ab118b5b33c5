"""Error taxonomy for the planning pipeline.

Every error carries a user-facing message; routes render ``str(err)`` into
the panel's error banner.
"""
from __future__ import annotations


class PlanError(Exception):
    """Base class for errors surfaced to the user."""


class InputValidationError(PlanError):
    """Missing or malformed form input. Blocks the computation."""

    def __init__(
        self,
        message: str = "Please fill in latitude, longitude, wake-up time, and sleep hours.",
    ) -> None:
        super().__init__(message)


class InvalidInput(InputValidationError):
    """Out-of-domain numeric input reaching the window calculator."""


class GeolocationError(PlanError):
    """Location lookup unavailable or failed. Manual entry still works."""

    def __init__(
        self,
        message: str = "Could not get your location. You can enter it manually.",
    ) -> None:
        super().__init__(message)


class ApiError(PlanError):
    """Transport or payload failure of an external API."""


class NoDataError(PlanError):
    """No hourly weather sample falls inside the sleep window."""

    def __init__(
        self,
        message: str = "Could not find weather data for the selected window.",
    ) -> None:
        super().__init__(message)
