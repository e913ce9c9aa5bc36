from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from robot_service.api.routes_ws import WsHub
from robot_service.deps import get_fleet, get_hub
from robot_service.schemas.robots import Bounds, MoveRequest, ResetRequest, RobotsOut, WorldOut
from robot_service.services.fleet import Fleet

router = APIRouter()


@router.get("/robots", response_model=RobotsOut)
async def get_robots(fleet: Fleet = Depends(get_fleet)):
    return RobotsOut(robots=fleet.list())


@router.post("/move", response_model=RobotsOut)
async def move_robots(
    body: Optional[MoveRequest] = None,
    fleet: Fleet = Depends(get_fleet),
    hub: WsHub = Depends(get_hub),
):
    """Step every robot once; bad or missing `meters` uses the default."""
    body = body or MoveRequest()
    robots = fleet.step_all(body.meters)
    await hub.broadcast_robots(robots)
    return RobotsOut(robots=robots)


@router.post("/reset", response_model=RobotsOut)
async def reset_robots(
    body: Optional[ResetRequest] = None,
    fleet: Fleet = Depends(get_fleet),
    hub: WsHub = Depends(get_hub),
):
    """Re-spawn the fleet with `count` robots (default when missing or invalid)."""
    body = body or ResetRequest()
    robots = fleet.respawn(body.count)
    await hub.broadcast_robots(robots)
    return RobotsOut(robots=robots)


@router.get("/world", response_model=WorldOut)
async def get_world(fleet: Fleet = Depends(get_fleet)):
    """Confinement polygon the robots live in, for drawing on the map."""
    min_lat, min_lng, max_lat, max_lng = fleet.polygon.bounds()
    return WorldOut(
        polygon=list(fleet.polygon.vertices),
        bounds=Bounds(min_lat=min_lat, min_lng=min_lng, max_lat=max_lat, max_lng=max_lng),
    )
