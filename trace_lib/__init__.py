"""Motor-skill practice scoring.

Scores freehand tracing of letters, digits and shapes against reference
guides, and runs the connect-the-dots exercise. The package consumes drawn
strokes and tap positions from whatever input layer hosts it and returns
integer scores; it does no rendering or storage.

The package is organized into the following modules:
    domain: Value objects (Point, BBox, Stroke) and result types.
    guides: Guide expansion, the built-in guide catalog and GuideRepository.
    scoring: Accuracy scorer with hard gates, dot-sequence sessions and
        feedback tiers.
    api: Attempt-level services for hosting exercises.
    config: Tuned thresholds (ScoringConfig, DotConfig).

Example usage:
    Scoring a drawing::

        from trace_lib import calculate_accuracy, LETTER_GUIDES

        strokes = [[(120, 40), (120, 60), (120, 80)]]
        score = calculate_accuracy(strokes, LETTER_GUIDES['L'])

    Running an attempt::

        from trace_lib.api import ExerciseService

        attempt = ExerciseService().start_tracing('shape', 'square')
        attempt.add_stroke(points)
        result = attempt.finish()
        print(result.score, result.duration, result.feedback.label)

Attributes:
    __version__ (str): Package version string.
"""

from .api import ExerciseService, TracingAttempt
from .config import DEFAULT_CONFIG, DEFAULT_DOT_CONFIG, DotConfig, ScoringConfig
from .domain import BBox, Feedback, FeedbackTier, Point, ScoreBreakdown, ScoreResult, Stroke
from .guides import (
    DOT_PATTERNS,
    LETTER_GUIDES,
    NUMBER_GUIDES,
    SHAPE_GUIDES,
    GuideRepository,
    expand_guide,
)
from .scoring import (
    AccuracyScorer,
    DotSequenceSession,
    TapOutcome,
    calculate_accuracy,
    calculate_accuracy_from_points,
    sample_strokes,
    score_feedback,
)

__all__ = [
    # Domain objects
    'Point', 'BBox', 'Stroke', 'ScoreBreakdown', 'ScoreResult', 'Feedback', 'FeedbackTier',
    # Configuration
    'ScoringConfig', 'DotConfig', 'DEFAULT_CONFIG', 'DEFAULT_DOT_CONFIG',
    # Guides
    'expand_guide', 'GuideRepository',
    'LETTER_GUIDES', 'NUMBER_GUIDES', 'SHAPE_GUIDES', 'DOT_PATTERNS',
    # Scoring
    'AccuracyScorer', 'calculate_accuracy', 'calculate_accuracy_from_points',
    'sample_strokes', 'DotSequenceSession', 'TapOutcome', 'score_feedback',
    # Services
    'ExerciseService', 'TracingAttempt',
]

__version__ = '1.0.0'
