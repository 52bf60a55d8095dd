"""Score components for tracing accuracy.

Each component measures one aspect of a drawing against a dense guide:

    - Proximity: how closely drawn points hug the guide path (0-100)
    - Coverage: how much of the guide path was traced over (0-100)
    - Stray: fraction of drawn points outside the padded guide box (0-1)

Design Patterns:
    Components share the ScoreComponent interface and a GuideContext that
    holds everything derived from the guide alone (point array, KD-tree,
    padded bounding box), so the guide-side work is done once per guide
    and reused across drawings.

Typical usage:
    context = GuideContext.from_points(dense_guide)
    drawn = points_to_array(sample_strokes(strokes))
    proximity = ProximityComponent().compute(drawn, context)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy.spatial import cKDTree

from ..config import DEFAULT_CONFIG, ScoringConfig
from ..domain.geometry import BBox, Point, points_to_array


@dataclass
class GuideContext:
    """Guide-side data shared by all score components.

    Attributes:
        guide_points: Nx2 array of dense guide coordinates.
        guide_tree: KD-tree over guide_points for nearest-guide queries.
        padded_bbox: Guide bounding box grown by the stray padding.
        config: Thresholds used by the components.
    """
    guide_points: np.ndarray
    guide_tree: cKDTree
    padded_bbox: BBox
    config: ScoringConfig = DEFAULT_CONFIG

    def __len__(self) -> int:
        return len(self.guide_points)

    @classmethod
    def from_points(cls, dense_guide: Sequence[Point],
                    config: ScoringConfig = DEFAULT_CONFIG) -> GuideContext:
        """Build a context from dense guide points.

        Raises:
            ValueError: If dense_guide is empty.
        """
        arr = points_to_array([Point.coerce(p) for p in dense_guide])
        if len(arr) == 0:
            raise ValueError("Cannot build a guide context from an empty guide")
        x_min, y_min = arr.min(axis=0)
        x_max, y_max = arr.max(axis=0)
        bbox = BBox(float(x_min), float(y_min), float(x_max), float(y_max))
        return cls(
            guide_points=arr,
            guide_tree=cKDTree(arr),
            padded_bbox=bbox.padded(config.bbox_padding),
            config=config,
        )


class ScoreComponent(ABC):
    """Base class for a single tracing score component.

    Subclasses must implement compute().

    Example:
        >>> class EndpointComponent(ScoreComponent):
        ...     def compute(self, drawn, context):
        ...         return endpoint_credit
    """

    name: str = 'component'

    @abstractmethod
    def compute(self, drawn: np.ndarray, context: GuideContext) -> float:
        """Compute the component value.

        Args:
            drawn: Nx2 array of sampled drawn points (N >= 1).
            context: GuideContext built from the dense guide.
        """
        pass


class ProximityComponent(ScoreComponent):
    """Average per-point credit for staying near the guide, scaled to 0-100.

    A drawn point within on_track_radius of its nearest guide point earns
    full credit; credit then falls linearly to zero at far_away_radius.
    """

    name = 'proximity'

    def point_credits(self, drawn: np.ndarray, context: GuideContext) -> np.ndarray:
        """Per-point credit in [0, 1] for each drawn point."""
        cfg = context.config
        dists, _ = context.guide_tree.query(drawn)
        ramp = 1.0 - (dists - cfg.on_track_radius) / (cfg.far_away_radius - cfg.on_track_radius)
        return np.clip(np.where(dists <= cfg.on_track_radius, 1.0, ramp), 0.0, 1.0)

    def compute(self, drawn: np.ndarray, context: GuideContext) -> float:
        if len(drawn) == 0:
            return 0.0
        return float(np.mean(self.point_credits(drawn, context)) * 100.0)


class CoverageComponent(ScoreComponent):
    """Percentage of sampled guide points with a drawn point nearby.

    Only every guide_decimation-th dense guide point is checked. A guide
    sample is covered when some drawn point lies within coverage_radius.
    """

    name = 'coverage'

    def guide_samples(self, context: GuideContext) -> np.ndarray:
        return context.guide_points[::context.config.guide_decimation]

    def compute(self, drawn: np.ndarray, context: GuideContext) -> float:
        samples = self.guide_samples(context)
        if len(drawn) == 0 or len(samples) == 0:
            return 0.0
        dists, _ = cKDTree(drawn).query(samples)
        covered = np.count_nonzero(dists <= context.config.coverage_radius)
        return float(covered / len(samples) * 100.0)


class StrayComponent(ScoreComponent):
    """Fraction of drawn points outside the padded guide bounding box."""

    name = 'stray'

    def compute(self, drawn: np.ndarray, context: GuideContext) -> float:
        if len(drawn) == 0:
            return 0.0
        box = context.padded_bbox
        outside = ((drawn[:, 0] < box.x_min) | (drawn[:, 0] > box.x_max) |
                   (drawn[:, 1] < box.y_min) | (drawn[:, 1] > box.y_max))
        return float(np.mean(outside))
