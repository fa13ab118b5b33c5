from __future__ import annotations

import logging

from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request

from bedtime.errors import ApiError, InputValidationError, NoDataError
from bedtime.form import parse_form
from bedtime.panel import panel
from bedtime.planner import plan_night
from bedtime.render import render_plan

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

GENERIC_ERROR = "Something went wrong. Please try again."


def _fail(request_id: int, status: int, message: str) -> HTTPException:
    panel.show_error(request_id, message)
    return HTTPException(status_code=status, detail=message)


@router.get("/plan")
async def get_plan():
    return panel.snapshot()


@router.post("/plan")
async def submit_plan(request: Request, body: Any = Body(None)):
    # Body is validated inside the handler so malformed forms still reach
    # the panel's error banner.
    request_id = panel.begin()
    client = request.app.state.http
    try:
        sleep_request = parse_form(body)
        plan = await plan_night(client, sleep_request)
    except InputValidationError as e:
        raise _fail(request_id, 422, str(e))
    except (ApiError, NoDataError) as e:
        raise _fail(request_id, 502, str(e))
    except Exception:
        log.exception("Plan request %d failed unexpectedly", request_id)
        raise _fail(request_id, 500, GENERIC_ERROR)

    view = render_plan(plan)
    applied = panel.show(request_id, view)
    return {
        "request_id": request_id,
        "applied": applied,
        "view": view.model_dump(),
        "plan": plan.model_dump(mode="json"),
    }
