"""Scoring for tracing and connect-the-dots exercises.

components: Proximity, coverage and stray components over a GuideContext.
accuracy: AccuracyScorer with hard gates and the blended tracing score.
dots: DotSequenceSession state machine and its wrong-tap scoring rule.
feedback: Score to feedback-tier lookup.
"""

from .accuracy import (
    AccuracyScorer,
    calculate_accuracy,
    calculate_accuracy_from_points,
    round_half_up,
    sample_strokes,
)
from .components import (
    CoverageComponent,
    GuideContext,
    ProximityComponent,
    ScoreComponent,
    StrayComponent,
)
from .dots import DotSequenceSession, TapOutcome, dot_score
from .feedback import score_feedback

__all__ = [
    'AccuracyScorer', 'calculate_accuracy', 'calculate_accuracy_from_points',
    'sample_strokes', 'round_half_up',
    'GuideContext', 'ScoreComponent', 'ProximityComponent', 'CoverageComponent',
    'StrayComponent',
    'DotSequenceSession', 'TapOutcome', 'dot_score',
    'score_feedback',
]
