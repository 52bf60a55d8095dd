"""Geometric value objects for tracing exercises."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    """Immutable 2D point in canvas coordinates (origin top-left)."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: Point, t: float) -> Point:
        """Linear interpolation towards other; t=0 is self, t=1 is other."""
        return Point(self.x + (other.x - self.x) * t,
                     self.y + (other.y - self.y) * t)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Tuple[float, float]) -> Point:
        """Create from tuple."""
        return cls(t[0], t[1])

    @classmethod
    def coerce(cls, value: Any) -> Point:
        """Build a Point from a Point, an (x, y) pair or an {'x', 'y'} mapping.

        Raises:
            TypeError: If value has none of the supported shapes.
            ValueError: If a pair does not have exactly two coordinates.
        """
        if isinstance(value, Point):
            return value
        if isinstance(value, Mapping):
            if 'x' not in value or 'y' not in value:
                raise ValueError(f"Point mapping needs 'x' and 'y' keys: {value!r}")
            return cls(float(value['x']), float(value['y']))
        if isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, str):
            if len(value) != 2:
                raise ValueError(f"Point needs exactly 2 coordinates, got {value!r}")
            return cls(float(value[0]), float(value[1]))
        raise TypeError(f"Cannot interpret {type(value).__name__} as a point")


@dataclass(frozen=True)
class BBox:
    """Immutable axis-aligned bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    def padded(self, pad: float) -> BBox:
        """Return a box grown by pad on every side."""
        return BBox(self.x_min - pad, self.y_min - pad,
                    self.x_max + pad, self.y_max + pad)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Convert to tuple for compatibility."""
        return (self.x_min, self.y_min, self.x_max, self.y_max)


@dataclass
class Stroke:
    """One pen-down to pen-up gesture as an ordered sequence of points."""
    points: List[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx) -> Point:
        return self.points[idx]

    def append(self, point: Point) -> None:
        self.points.append(point)

    def decimated(self, every: int) -> List[Point]:
        """Every Nth point, starting with the first."""
        if every < 1:
            raise ValueError(f"decimation must be >= 1, got {every!r}")
        return self.points[::every]

    @classmethod
    def from_tuples(cls, tuples: List[Tuple[float, float]]) -> Stroke:
        """Create from list of tuples."""
        return cls([Point.from_tuple(t) for t in tuples])

    @classmethod
    def coerce(cls, value: Any) -> Stroke:
        """Build a Stroke from a Stroke or any sequence of point-like values."""
        if isinstance(value, Stroke):
            return value
        if isinstance(value, Mapping) and 'points' in value:
            value = value['points']
        return cls([Point.coerce(p) for p in value])


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Stack points into an Nx2 float array (empty input gives shape (0, 2))."""
    if len(points) == 0:
        return np.empty((0, 2), dtype=float)
    return np.array([(p.x, p.y) for p in points], dtype=float)
