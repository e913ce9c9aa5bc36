from __future__ import annotations

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from robot_service.utils.numbers import finite_or_none


class _LenientNumbers(BaseModel):
    """Request body whose numeric fields degrade to None instead of a 422.

    The fleet and scheduler substitute their configured defaults for None.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _finite_or_none(cls, v: Any) -> Optional[float]:
        return finite_or_none(v)


class MoveRequest(_LenientNumbers):
    meters: Optional[float] = None


class ResetRequest(_LenientNumbers):
    count: Optional[float] = None


class StartAutoRequest(_LenientNumbers):
    meters: Optional[float] = None
    interval_ms: Optional[float] = Field(default=None, alias="intervalMs")


class RobotsOut(BaseModel):
    robots: List[Tuple[float, float]]


class StartAutoOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "started"
    meters: float
    interval_ms: float = Field(serialization_alias="intervalMs")


class StopAutoOut(BaseModel):
    status: str = "stopped"


class AutoStatusOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str  # running|idle
    meters: Optional[float] = None
    interval_ms: Optional[float] = Field(default=None, serialization_alias="intervalMs")
    ticks: int = 0
    last_tick_at: Optional[str] = Field(default=None, serialization_alias="lastTickAt")


class Bounds(BaseModel):
    min_lat: float
    min_lng: float
    max_lat: float
    max_lng: float


class WorldOut(BaseModel):
    polygon: List[Tuple[float, float]]
    bounds: Bounds
