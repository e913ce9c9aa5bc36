from __future__ import annotations

import logging
import random
from typing import Optional

from robot_service.services.geo_polygon import GeoPolygon, Position

logger = logging.getLogger("robot_service.placement")

MAX_TRIALS = 1000


def sample_point(polygon: GeoPolygon, rng: Optional[random.Random] = None) -> Position:
    """Return a point drawn uniformly inside `polygon`.

    Rejection sampling over the vertex bounding box, capped at MAX_TRIALS
    draws. When every draw is rejected (only for near-zero-area rings) the
    vertex mean is returned instead. That fallback point is NOT guaranteed to
    satisfy `polygon.contains`; callers must tolerate it.
    """
    rng = rng or random
    min_lat, min_lng, max_lat, max_lng = polygon.bounds()
    for _ in range(MAX_TRIALS):
        lat = min_lat + rng.random() * (max_lat - min_lat)
        lng = min_lng + rng.random() * (max_lng - min_lng)
        if polygon.contains((lat, lng)):
            return (lat, lng)

    fallback = polygon.centroid()
    logger.warning(
        "Rejection sampling exhausted after %d trials; using vertex mean %s", MAX_TRIALS, fallback
    )
    return fallback
