from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from robot_service import __version__
from robot_service.deps import get_fleet, get_scheduler
from robot_service.services.auto_step import AutoStepScheduler
from robot_service.services.fleet import Fleet

router = APIRouter()


@router.get("/health")
def health(
    request: Request,
    fleet: Fleet = Depends(get_fleet),
    scheduler: AutoStepScheduler = Depends(get_scheduler),
):
    """Health check endpoint with fleet status."""
    return {
        "status": "ok",
        "environment": request.app.state.settings.environment,
        "robots": len(fleet),
        "auto_running": scheduler.running,
        "version": __version__,
    }
