from __future__ import annotations

import logging
import time
from typing import Any

from pydantic import BaseModel

from bedtime.models import PlanView

log = logging.getLogger(__name__)


class PanelState(BaseModel):
    """Snapshot of everything the page shows."""

    request_id: int = 0
    loading: bool = False
    error: str | None = None
    notice: str | None = None
    results: PlanView | None = None
    updated_at: float | None = None


class ResultPanel:
    """Named output slots for a single-user page.

    Each submission takes a request id from ``begin()``; outcomes for any
    older id are dropped so a slow response can never overwrite a newer one.
    """

    def __init__(self) -> None:
        self._state = PanelState()

    @property
    def latest(self) -> int:
        return self._state.request_id

    def begin(self) -> int:
        """Start a submission: clear the banner, hide results, show loading."""
        self._state = PanelState(
            request_id=self._state.request_id + 1,
            loading=True,
            notice=self._state.notice,
            updated_at=time.time(),
        )
        return self._state.request_id

    def _is_stale(self, request_id: int) -> bool:
        if request_id != self._state.request_id:
            log.debug(
                "Discarding outcome of request %d (latest is %d)",
                request_id,
                self._state.request_id,
            )
            return True
        return False

    def show(self, request_id: int, view: PlanView) -> bool:
        if self._is_stale(request_id):
            return False
        self._state = self._state.model_copy(
            update={
                "loading": False,
                "error": None,
                "results": view,
                "updated_at": time.time(),
            }
        )
        return True

    def show_error(self, request_id: int, message: str) -> bool:
        """Replace results with an error banner. Always clears loading."""
        if self._is_stale(request_id):
            return False
        self._state = self._state.model_copy(
            update={
                "loading": False,
                "error": message,
                "results": None,
                "updated_at": time.time(),
            }
        )
        return True

    def notify(self, message: str | None) -> None:
        """Set or clear the non-blocking notice. Results stay visible."""
        self._state = self._state.model_copy(update={"notice": message})

    def snapshot(self) -> dict[str, Any]:
        return self._state.model_dump()


panel = ResultPanel()
