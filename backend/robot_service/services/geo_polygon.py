from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

# (lat, lng) in decimal degrees
Position = Tuple[float, float]

# Keeps the ray-casting interpolation finite on horizontal edges
_EPS = 1e-12


class GeoPolygon:
    """Closed confinement ring of (lat, lng) vertices.

    The last vertex implicitly connects back to the first. The ring is not
    checked for degeneracy: collinear or zero-area rings are accepted and
    simply contain nothing (or almost nothing) under the even-odd rule.
    """

    def __init__(self, vertices: Iterable[Sequence[float]]):
        ring = tuple((float(v[0]), float(v[1])) for v in vertices)
        if len(ring) < 3:
            raise ValueError(f"polygon needs at least 3 vertices, got {len(ring)}")
        for lat, lng in ring:
            if not (math.isfinite(lat) and math.isfinite(lng)):
                raise ValueError(f"polygon vertex is not finite: ({lat}, {lng})")
        self._vertices: Tuple[Position, ...] = ring

    @property
    def vertices(self) -> Tuple[Position, ...]:
        return self._vertices

    def contains(self, point: Sequence[float]) -> bool:
        """Even-odd ray casting toward the west of `point`."""
        lat, lng = float(point[0]), float(point[1])
        inside = False
        vs = self._vertices
        j = len(vs) - 1
        for i in range(len(vs)):
            lat_i, lng_i = vs[i]
            lat_j, lng_j = vs[j]
            if (lat_i > lat) != (lat_j > lat):
                cross_lng = (lng_j - lng_i) * (lat - lat_i) / (lat_j - lat_i + _EPS) + lng_i
                if lng < cross_lng:
                    inside = not inside
            j = i
        return inside

    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_lat, min_lng, max_lat, max_lng) of the vertices."""
        lats = [v[0] for v in self._vertices]
        lngs = [v[1] for v in self._vertices]
        return min(lats), min(lngs), max(lats), max(lngs)

    def centroid(self) -> Position:
        """Arithmetic mean of the vertices (not the area centroid)."""
        n = len(self._vertices)
        return (
            sum(v[0] for v in self._vertices) / n,
            sum(v[1] for v in self._vertices) / n,
        )

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"GeoPolygon({list(self._vertices)!r})"


# Downtown Los Angeles, (lat, lng) order
DOWNTOWN_LA = GeoPolygon(
    [
        (34.055, -118.275),
        (34.055, -118.225),
        (34.02, -118.225),
        (34.02, -118.275),
    ]
)
