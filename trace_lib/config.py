"""Tuned constants for tracing and dot-sequence scoring.

All distances are in canvas units. The defaults were calibrated on the
420x330 practice canvas with a stroke and guide decimation of 3; use
ScoringConfig.scaled() when scoring on a canvas of a different size.

Typical usage example:

    from trace_lib.config import ScoringConfig

    config = ScoringConfig.from_json('tuning.json')
    hi_res = config.scaled(2.0)
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

# Practice canvas dimensions shared by guides and drawn input
CANVAS_WIDTH = 420
CANVAS_HEIGHT = 330

# Fields of ScoringConfig that are distances and follow canvas rescaling
_DISTANCE_FIELDS = (
    'on_track_radius', 'far_away_radius', 'coverage_margin',
    'bbox_padding', 'guide_step',
)


@dataclass(frozen=True)
class ScoringConfig:
    """Thresholds and weights for the stroke-accuracy scorer.

    Attributes:
        on_track_radius: Drawn points within this distance of the guide get
            full proximity credit.
        far_away_radius: Drawn points beyond this distance get no credit.
            Credit decays linearly between the two radii.
        coverage_margin: Added to on_track_radius to get the radius within
            which a guide sample counts as covered.
        bbox_padding: Padding around the guide bounding box before a drawn
            point is considered stray.
        min_proximity: Proximity score (0-100) below which the score is gated.
        min_coverage: Coverage fraction (0-1) below which the score is gated.
        max_stray: Stray fraction (0-1) above which the score is gated.
        gate_cap: Ceiling applied to gated scores.
        proximity_weight: Weight of proximity in the blended score.
        coverage_weight: Weight of coverage in the blended score.
        stray_weight: Weight of the stray score in the blended score.
        gated_stray_points: Points contributed by a stray-free drawing in the
            gated formula.
        stroke_decimation: Keep every Nth point of each drawn stroke.
        guide_decimation: Check every Nth dense guide point for coverage.
        guide_step: Interpolation step used when expanding sparse guides.
    """
    on_track_radius: float = 18.0
    far_away_radius: float = 40.0
    coverage_margin: float = 10.0
    bbox_padding: float = 28.0
    min_proximity: float = 45.0
    min_coverage: float = 0.65
    max_stray: float = 0.20
    gate_cap: float = 40.0
    proximity_weight: float = 0.50
    coverage_weight: float = 0.35
    stray_weight: float = 0.15
    gated_stray_points: float = 15.0
    stroke_decimation: int = 3
    guide_decimation: int = 3
    guide_step: float = 4.0

    def __post_init__(self):
        for name in ('stroke_decimation', 'guide_decimation'):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be an integer >= 1, got {value!r}")
        if self.guide_step <= 0:
            raise ValueError(f"guide_step must be positive, got {self.guide_step!r}")
        if not 0 <= self.on_track_radius < self.far_away_radius:
            raise ValueError(
                "expected 0 <= on_track_radius < far_away_radius, got "
                f"{self.on_track_radius!r} and {self.far_away_radius!r}"
            )
        for name in ('min_coverage', 'max_stray'):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value!r}")

    @property
    def coverage_radius(self) -> float:
        """Radius within which a guide sample counts as traced."""
        return self.on_track_radius + self.coverage_margin

    def scaled(self, factor: float) -> ScoringConfig:
        """Return a copy with every distance constant multiplied by factor.

        Score thresholds, weights and decimation factors are unit-free and
        are left untouched.
        """
        if factor <= 0:
            raise ValueError(f"scale factor must be positive, got {factor!r}")
        return replace(self, **{name: getattr(self, name) * factor
                                for name in _DISTANCE_FIELDS})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScoringConfig:
        """Create a config from a mapping, defaulting missing keys.

        Raises:
            ValueError: If the mapping contains unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown scoring config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: str | Path) -> ScoringConfig:
        """Load a config from a JSON object stored at path."""
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Scoring config in {path} must be a JSON object")
        return cls.from_dict(data)


@dataclass(frozen=True)
class DotConfig:
    """Tap handling and scoring constants for the dot-connection exercise.

    Attributes:
        max_tap_distance: Taps farther than this from every dot are ignored.
        debounce_ms: Repeat taps on the same dot within this window are ignored.
        wrong_tap_penalty: Points subtracted per wrong tap.
        max_score: Score for a run without wrong taps.
        min_score: Floor for the final score.
        completion_delay_ms: Cosmetic delay before the result is shown.
        wrong_flash_ms: How long a wrongly tapped dot stays highlighted.
    """
    max_tap_distance: float = 80.0
    debounce_ms: float = 300.0
    wrong_tap_penalty: int = 8
    max_score: int = 100
    min_score: int = 30
    completion_delay_ms: float = 600.0
    wrong_flash_ms: float = 500.0

    def __post_init__(self):
        if self.max_tap_distance <= 0:
            raise ValueError(
                f"max_tap_distance must be positive, got {self.max_tap_distance!r}")
        if self.debounce_ms < 0:
            raise ValueError(f"debounce_ms must be >= 0, got {self.debounce_ms!r}")
        if not 0 <= self.min_score <= self.max_score:
            raise ValueError(
                f"expected 0 <= min_score <= max_score, got {self.min_score!r} "
                f"and {self.max_score!r}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DotConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown dot config keys: {', '.join(unknown)}")
        return cls(**data)


DEFAULT_CONFIG = ScoringConfig()
DEFAULT_DOT_CONFIG = DotConfig()
