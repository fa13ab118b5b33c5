from __future__ import annotations

import time

from fastapi import APIRouter

from bedtime.panel import panel

router = APIRouter()

_start_time = time.time()
_VERSION = "0.1.0"


@router.get("/healthz")
async def healthz():
    state = panel.snapshot()
    return {
        "status": "ok",
        "version": _VERSION,
        "uptime_seconds": round(time.time() - _start_time),
        "last_request_id": state["request_id"],
        "last_updated_at": state["updated_at"],
        "last_error": state["error"],
    }
