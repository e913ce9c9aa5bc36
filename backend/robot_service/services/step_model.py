from __future__ import annotations

import math
import random
from typing import Optional, Sequence

from robot_service.services.geo_polygon import Position

METERS_PER_DEG_LAT = 111320.0


def step(position: Sequence[float], meters: float, rng: Optional[random.Random] = None) -> Position:
    """Translate `position` by `meters` along a uniformly random bearing.

    Flat-Earth local approximation: a degree of latitude is 111,320 m
    everywhere and a degree of longitude shrinks with cos(latitude). No
    antimeridian wrap, no polar handling.
    """
    rng = rng or random
    lat, lng = float(position[0]), float(position[1])
    bearing = rng.random() * 2 * math.pi
    meters_per_deg_lng = METERS_PER_DEG_LAT * math.cos(math.radians(lat))
    delta_lat = meters * math.cos(bearing) / METERS_PER_DEG_LAT
    delta_lng = meters * math.sin(bearing) / meters_per_deg_lng
    return (lat + delta_lat, lng + delta_lng)
