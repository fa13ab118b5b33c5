from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from bedtime.errors import GeolocationError
from bedtime.panel import panel
from bedtime.services import geolocation

router = APIRouter(prefix="/api")


@router.get("/location")
async def get_location(request: Request):
    """Best-effort coordinates to prefill the form."""
    try:
        lat, lon = await geolocation.locate(request.app.state.http)
    except GeolocationError as e:
        panel.notify(str(e))
        raise HTTPException(status_code=503, detail=str(e))
    panel.notify(None)
    return {"latitude": lat, "longitude": lon}
