from __future__ import annotations

import asyncio
import datetime as dt
import logging
from typing import Any, Awaitable, Callable, List, Optional, Tuple

from robot_service.services.fleet import Fleet
from robot_service.services.geo_polygon import Position
from robot_service.utils.numbers import finite_or, finite_or_none
from robot_service.utils.time import utc_now

logger = logging.getLogger("robot_service.auto_step")

TickCallback = Callable[[List[Position]], Awaitable[None]]


class AutoStepScheduler:
    """Owns the single periodic auto-step task.

    Idle when no task is armed, Running otherwise. `start` replaces any
    running schedule and `stop` cancels it; both are synchronous so no tick of
    a cancelled schedule can run after they return. Must be driven from
    inside a running event loop.
    """

    def __init__(
        self,
        fleet: Fleet,
        default_meters: float = 1.0,
        default_interval_ms: float = 60000.0,
        on_tick: Optional[TickCallback] = None,
    ):
        self.fleet = fleet
        self.default_meters = float(default_meters)
        self.default_interval_ms = float(default_interval_ms)
        self._on_tick = on_tick
        self._task: Optional[asyncio.Task] = None
        self.meters: Optional[float] = None
        self.interval_ms: Optional[float] = None
        self.ticks = 0
        self.last_tick_at: Optional[dt.datetime] = None

    def bind_on_tick(self, on_tick: Optional[TickCallback]) -> None:
        self._on_tick = on_tick

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, meters: Any = None, interval_ms: Any = None) -> Tuple[float, float]:
        """Arm a schedule stepping the fleet by `meters` every `interval_ms`.

        Returns the effective (meters, interval_ms) after falling back to the
        defaults for missing or invalid values.
        """
        m = finite_or(meters, self.default_meters)
        interval = finite_or_none(interval_ms)
        if interval is None or interval <= 0:
            interval = self.default_interval_ms

        loop = asyncio.get_running_loop()
        # Cancel and re-arm without yielding to the loop in between
        self._cancel()
        self.meters = m
        self.interval_ms = interval
        self._task = loop.create_task(self._loop(m, interval / 1000.0))
        logger.info("Auto-step started: %s m every %s ms", m, interval)
        return m, interval

    def stop(self) -> bool:
        """Cancel the running schedule. Returns False when already idle."""
        was_running = self._cancel()
        if was_running:
            logger.info("Auto-step stopped")
        return was_running

    async def aclose(self) -> None:
        """Stop and wait for the cancelled task to unwind."""
        task = self._task
        self.stop()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    def _cancel(self) -> bool:
        task, self._task = self._task, None
        self.meters = None
        self.interval_ms = None
        if task is None or task.done():
            return False
        task.cancel()
        return True

    async def _loop(self, meters: float, interval_s: float) -> None:
        me = asyncio.current_task()
        while True:
            await asyncio.sleep(interval_s)
            # A replaced or stopped schedule never ticks again
            if self._task is not me:
                return
            await self._tick(meters)

    async def _tick(self, meters: float) -> None:
        try:
            positions = self.fleet.step_all(meters)
            self.ticks += 1
            self.last_tick_at = utc_now()
            logger.debug("Auto-step tick %d moved %d robots", self.ticks, len(positions))
            if self._on_tick is not None:
                await self._on_tick(positions)
        except Exception:
            logger.exception("Auto-step tick failed; schedule continues")
