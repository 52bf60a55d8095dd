"""Stroke-accuracy scoring against a reference guide.

A drawing (list of strokes) is compared with a dense guide through three
components (proximity, coverage, stray ratio). Hard gates are evaluated
before the components are blended:

    - proximity < min_proximity
    - coverage / 100 < min_coverage
    - stray ratio > max_stray

If any gate fires the score is capped at gate_cap.
Otherwise the score is the weighted blend

    proximity * 0.50 + coverage * 0.35 + (1 - stray) * 100 * 0.15

Key functions:
    - sample_strokes: Flatten and decimate drawn strokes
    - calculate_accuracy: Score against a sparse guide
    - calculate_accuracy_from_points: Score against a pre-expanded guide

Typical usage:
    from trace_lib.scoring.accuracy import AccuracyScorer

    scorer = AccuracyScorer()
    breakdown = scorer.evaluate(strokes, LETTER_GUIDES['A'])
    print(breakdown.score, breakdown.gates)
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Sequence

from ..config import DEFAULT_CONFIG, ScoringConfig
from ..domain.geometry import Point, Stroke, points_to_array
from ..domain.results import ScoreBreakdown
from ..guides.expander import expand_guide
from .components import (
    CoverageComponent,
    GuideContext,
    ProximityComponent,
    StrayComponent,
)

_logger = logging.getLogger(__name__)

GATE_PROXIMITY = 'proximity'
GATE_COVERAGE = 'coverage'
GATE_STRAY = 'stray'


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def sample_strokes(strokes: Sequence[Any], decimation: int = 3) -> List[Point]:
    """Flatten strokes into one point list, keeping every Nth point per stroke.

    Each stroke is decimated independently starting from its first point,
    and strokes keep their original order.

    Args:
        strokes: Stroke objects or sequences of point-like values.
        decimation: Keep every Nth point (1 keeps all points).

    Returns:
        Sampled drawn points in chronological order.
    """
    if decimation < 1:
        raise ValueError(f"decimation must be >= 1, got {decimation!r}")
    sampled: List[Point] = []
    for stroke in strokes:
        sampled.extend(Stroke.coerce(stroke).decimated(decimation))
    return sampled


class AccuracyScorer:
    """Scores drawings against guides using proximity, coverage and stray gates.

    The scorer itself is stateless apart from its config; all methods are
    pure functions of their inputs.

    Attributes:
        config: Thresholds, weights and decimation factors.
    """

    def __init__(self, config: ScoringConfig = DEFAULT_CONFIG):
        self.config = config
        self.proximity = ProximityComponent()
        self.coverage = CoverageComponent()
        self.stray = StrayComponent()

    def context_for(self, dense_guide: Sequence[Any]) -> GuideContext | None:
        """Guide context for a dense guide, or None if it has < 2 points."""
        if len(dense_guide) < 2:
            return None
        return GuideContext.from_points(dense_guide, self.config)

    def evaluate(self, strokes: Sequence[Any], guide: Sequence[Any]) -> ScoreBreakdown:
        """Score a drawing against a sparse guide, expanding it first."""
        if not strokes or len(guide) < 2:
            return ScoreBreakdown(score=0)
        return self.evaluate_points(strokes, expand_guide(guide, self.config.guide_step))

    def evaluate_points(self, strokes: Sequence[Any],
                        dense_guide: Sequence[Any] | GuideContext) -> ScoreBreakdown:
        """Score a drawing against a pre-expanded guide.

        Args:
            strokes: Drawn strokes in chronological order.
            dense_guide: Dense guide points, or a GuideContext built from them
                when the same guide is scored many times.

        Raises:
            ValueError: If a GuideContext was built with another config.

        Returns:
            ScoreBreakdown with the final score. Degenerate inputs (no
            strokes, no sampled points, fewer than 2 guide points) give 0.
        """
        if isinstance(dense_guide, GuideContext) and dense_guide.config != self.config:
            raise ValueError("Guide context was built with a different ScoringConfig")
        if not strokes:
            return ScoreBreakdown(score=0)

        if isinstance(dense_guide, GuideContext):
            context = dense_guide if len(dense_guide) >= 2 else None
        else:
            context = self.context_for(dense_guide)
        if context is None:
            return ScoreBreakdown(score=0)

        drawn = points_to_array(sample_strokes(strokes, self.config.stroke_decimation))
        if len(drawn) == 0:
            return ScoreBreakdown(score=0, guide_samples=len(context))

        prox = self.proximity.compute(drawn, context)
        cov = self.coverage.compute(drawn, context)
        stray = self.stray.compute(drawn, context)

        gates = self.failed_gates(prox, cov, stray)
        score = self.combine(prox, cov, stray, gated=bool(gates))

        _logger.debug(
            "Accuracy: proximity=%.1f coverage=%.1f stray=%.3f gates=%s -> %d",
            prox, cov, stray, ','.join(gates) or 'none', score,
        )
        return ScoreBreakdown(
            score=score,
            proximity=prox,
            coverage=cov,
            stray_ratio=stray,
            drawn_samples=len(drawn),
            guide_samples=len(context),
            gates=gates,
        )

    def failed_gates(self, proximity: float, coverage: float, stray: float) -> tuple[str, ...]:
        """Names of the hard gates triggered by the component values."""
        cfg = self.config
        gates = []
        if proximity < cfg.min_proximity:
            gates.append(GATE_PROXIMITY)
        if coverage / 100.0 < cfg.min_coverage:
            gates.append(GATE_COVERAGE)
        if stray > cfg.max_stray:
            gates.append(GATE_STRAY)
        return tuple(gates)

    def combine(self, proximity: float, coverage: float, stray: float, gated: bool) -> int:
        """Blend component values into the final integer score.

        In the gated branch the stray term contributes directly on a
        0-gated_stray_points scale and the result is capped at gate_cap.
        """
        cfg = self.config
        if gated:
            raw = (proximity * cfg.proximity_weight + coverage * cfg.coverage_weight +
                   (1.0 - stray) * cfg.gated_stray_points)
            return round_half_up(min(cfg.gate_cap, max(0.0, raw)))

        stray_score = (1.0 - stray) * 100.0
        raw = (proximity * cfg.proximity_weight + coverage * cfg.coverage_weight +
               stray_score * cfg.stray_weight)
        return round_half_up(min(100.0, max(0.0, raw)))

    def score(self, strokes: Sequence[Any], guide: Sequence[Any]) -> int:
        return self.evaluate(strokes, guide).score

    def score_points(self, strokes: Sequence[Any],
                     dense_guide: Sequence[Any] | GuideContext) -> int:
        return self.evaluate_points(strokes, dense_guide).score


def calculate_accuracy(strokes: Sequence[Any], guide: Sequence[Any],
                       config: ScoringConfig = DEFAULT_CONFIG) -> int:
    """Accuracy score (0-100) of a drawing against a sparse guide."""
    return AccuracyScorer(config).score(strokes, guide)


def calculate_accuracy_from_points(strokes: Sequence[Any], dense_guide: Sequence[Any],
                                   config: ScoringConfig = DEFAULT_CONFIG) -> int:
    """Accuracy score (0-100) of a drawing against an already expanded guide."""
    return AccuracyScorer(config).score_points(strokes, dense_guide)
