"""Bedtime planner — local API that suggests a bedtime and checks the night ahead."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI

from bedtime.auth import verify_api_key
from bedtime.config import Settings, settings
from bedtime.routes import health, location, plan

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("bedtime")


@asynccontextmanager
async def lifespan(app: FastAPI):
    Settings.validate()

    client = httpx.AsyncClient(timeout=httpx.Timeout(settings.HTTP_TIMEOUT))
    app.state.http = client

    log.info("Bedtime planner started — tz %s, port %s", settings.TZ, settings.PORT)
    yield

    await client.aclose()
    log.info("Bedtime planner shutdown complete")


app = FastAPI(
    title="Bedtime Planner",
    version="0.1.0",
    lifespan=lifespan,
    dependencies=[Depends(verify_api_key)],
)

app.include_router(health.router)
app.include_router(plan.router)
app.include_router(location.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bedtime.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info",
    )
