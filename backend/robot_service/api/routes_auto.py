from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from robot_service.deps import get_scheduler
from robot_service.schemas.robots import AutoStatusOut, StartAutoOut, StartAutoRequest, StopAutoOut
from robot_service.services.auto_step import AutoStepScheduler
from robot_service.utils.time import isoformat_or_none

router = APIRouter()


@router.post("/start-auto", response_model=StartAutoOut)
async def start_auto(
    body: Optional[StartAutoRequest] = None,
    scheduler: AutoStepScheduler = Depends(get_scheduler),
):
    """Replace any running auto-step schedule with a new one."""
    body = body or StartAutoRequest()
    meters, interval_ms = scheduler.start(body.meters, body.interval_ms)
    return StartAutoOut(meters=meters, interval_ms=interval_ms)


@router.post("/stop-auto", response_model=StopAutoOut)
async def stop_auto(scheduler: AutoStepScheduler = Depends(get_scheduler)):
    scheduler.stop()
    return StopAutoOut()


@router.get("/auto", response_model=AutoStatusOut)
async def auto_status(scheduler: AutoStepScheduler = Depends(get_scheduler)):
    return AutoStatusOut(
        status="running" if scheduler.running else "idle",
        meters=scheduler.meters,
        interval_ms=scheduler.interval_ms,
        ticks=scheduler.ticks,
        last_tick_at=isoformat_or_none(scheduler.last_tick_at),
    )
