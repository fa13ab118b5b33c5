from __future__ import annotations

import hmac

from fastapi import HTTPException, Request

from bedtime.config import settings

# Reachable without a key even when BEDTIME_API_KEY is set.
OPEN_PATHS = frozenset({"/healthz"})


async def verify_api_key(request: Request) -> None:
    """Dependency that enforces X-API-KEY when BEDTIME_API_KEY is set."""
    if not settings.API_KEY or request.url.path in OPEN_PATHS:
        return
    key = request.headers.get("X-API-KEY", "")
    if not hmac.compare_digest(key.encode(), settings.API_KEY.encode()):
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
