"""Result value objects produced by the scorers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class FeedbackTier(Enum):
    """Feedback bands, from most positive to the retry tier."""
    EXCELLENT = 'excellent'
    GOOD = 'good'
    KEEP_TRYING = 'keep_trying'
    TRY_AGAIN = 'try_again'


@dataclass(frozen=True)
class Feedback:
    """Human-readable feedback for a score."""
    tier: FeedbackTier
    label: str
    message: str
    color: str
    emoji: str

    def to_dict(self) -> dict:
        return {
            'tier': self.tier.value,
            'label': self.label,
            'message': self.message,
            'color': self.color,
            'emoji': self.emoji,
        }


@dataclass(frozen=True)
class ScoreBreakdown:
    """Component values behind a tracing score.

    Attributes:
        score: Final integer score in [0, 100].
        proximity: Average per-point proximity credit scaled to 0-100.
        coverage: Percentage of sampled guide points that were traced over.
        stray_ratio: Fraction (0-1) of drawn points outside the padded guide box.
        drawn_samples: Number of drawn points after decimation.
        guide_samples: Number of dense guide points.
        gates: Names of the hard gates that fired ('proximity', 'coverage',
            'stray'). Empty when the blended score was used.
    """
    score: int
    proximity: float = 0.0
    coverage: float = 0.0
    stray_ratio: float = 0.0
    drawn_samples: int = 0
    guide_samples: int = 0
    gates: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def gated(self) -> bool:
        return bool(self.gates)

    def to_dict(self) -> dict:
        return {
            'score': self.score,
            'proximity': round(self.proximity, 2),
            'coverage': round(self.coverage, 2),
            'stray_ratio': round(self.stray_ratio, 4),
            'drawn_samples': self.drawn_samples,
            'guide_samples': self.guide_samples,
            'gates': list(self.gates),
        }


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of one completed exercise attempt.

    Attributes:
        score: Integer score, [0, 100] for tracing and [30, 100] for dots.
        duration: Whole seconds from attempt start to completion.
        breakdown: Component values for tracing attempts, None for dots.
    """
    score: int
    duration: int
    breakdown: ScoreBreakdown | None = None

    @property
    def feedback(self) -> Feedback:
        from ..scoring.feedback import score_feedback
        return score_feedback(self.score)

    def to_dict(self) -> dict:
        data = {
            'score': self.score,
            'duration': self.duration,
            'feedback': self.feedback.to_dict(),
        }
        if self.breakdown is not None:
            data['breakdown'] = self.breakdown.to_dict()
        return data
