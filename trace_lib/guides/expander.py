"""Dense interpolation of sparse guide waypoints.

Point-to-path distance is approximated by a nearest-neighbour search over
densely interpolated guide points rather than a true point-to-segment
distance, so every sparse guide is expanded once per exercise.

Example:
    >>> [p.to_tuple() for p in expand_guide([(0, 0), (10, 0)], step=5)]
    [(0.0, 0.0), (5.0, 0.0), (10.0, 0.0)]
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, List

from ..domain.geometry import Point

DEFAULT_STEP = 4.0


def expand_guide(guide: Sequence[Any], step: float = DEFAULT_STEP) -> List[Point]:
    """Interpolate a sparse guide into evenly spaced points.

    Each waypoint pair (a, b) contributes ceil(|ab| / step) + 1 points at
    t = 0 .. 1, so a segment's end point is repeated as the next segment's
    start. Zero-length segments still contribute both endpoints.

    Args:
        guide: Ordered waypoints as Points, (x, y) pairs or {'x', 'y'} mappings.
        step: Maximum spacing between consecutive dense points.

    Returns:
        Dense points from the first to the last waypoint. Empty when the
        guide has fewer than 2 waypoints.

    Raises:
        ValueError: If step is not positive.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step!r}")

    waypoints = [Point.coerce(p) for p in guide]
    if len(waypoints) < 2:
        return []

    dense: List[Point] = []
    for a, b in zip(waypoints, waypoints[1:]):
        steps = max(1, math.ceil(a.distance_to(b) / step))
        for s in range(steps + 1):
            dense.append(a.lerp(b, s / steps))
    return dense
