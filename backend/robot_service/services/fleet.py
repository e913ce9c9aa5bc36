from __future__ import annotations

import logging
import random
import threading
from typing import Any, Iterable, List, Optional, Sequence

from robot_service.services.geo_polygon import GeoPolygon, Position
from robot_service.services.placement import sample_point
from robot_service.services.step_model import step
from robot_service.utils.numbers import finite_or, finite_or_none

logger = logging.getLogger("robot_service.fleet")


class Fleet:
    """Owns the live robot positions inside one confinement polygon.

    A robot's identity is its index; `respawn` replaces every position and
    therefore every identity. All reads and writes go through one lock so the
    fleet can be shared by request handlers, worker threads and the auto-step
    task without ever exposing a half-rewritten list.
    """

    def __init__(
        self,
        polygon: GeoPolygon,
        default_count: int = 20,
        default_meters: float = 1.0,
        rng: Optional[random.Random] = None,
        positions: Optional[Iterable[Sequence[float]]] = None,
    ):
        self.polygon = polygon
        self.default_count = int(default_count)
        self.default_meters = float(default_meters)
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._positions: List[Position] = [(float(p[0]), float(p[1])) for p in positions or []]

    def __len__(self) -> int:
        with self._lock:
            return len(self._positions)

    def list(self) -> List[Position]:
        with self._lock:
            return list(self._positions)

    def _coerce_count(self, count: Any) -> int:
        number = finite_or_none(count)
        if number is None or number < 0:
            return self.default_count
        return int(number)

    def respawn(self, count: Any = None) -> List[Position]:
        """Replace the fleet with `count` freshly sampled robots.

        Missing, non-numeric, non-finite or negative counts use the default;
        `respawn(0)` empties the fleet.
        """
        n = self._coerce_count(count)
        fresh = [sample_point(self.polygon, self._rng) for _ in range(n)]
        with self._lock:
            self._positions = fresh
            snapshot = list(fresh)
        logger.info("Respawned %d robots", n)
        return snapshot

    def _step_one(self, position: Position, meters: float) -> Position:
        candidate = step(position, meters, self._rng)
        if self.polygon.contains(candidate):
            return candidate
        # Bounce back: retry from the same origin with the distance negated.
        # The bearing is drawn afresh, so this is not a mirror of the first try.
        retry = step(position, -meters, self._rng)
        if self.polygon.contains(retry):
            return retry
        return position

    def step_all(self, meters: Any = None) -> List[Position]:
        """Move every robot by `meters` and return the new positions.

        A robot whose step and bounce-back both leave the polygon stays put.
        Robots already outside are not pulled back in.
        """
        m = finite_or(meters, self.default_meters)
        with self._lock:
            self._positions = [self._step_one(p, m) for p in self._positions]
            return list(self._positions)
