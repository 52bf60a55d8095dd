"""Domain objects for tracing exercises.

This module provides the value objects shared by the guide expander, the
scorers and the service layer.

Geometry classes:
    Point: Immutable 2D point in canvas coordinates.
    BBox: Immutable axis-aligned bounding box.
    Stroke: One pen-down to pen-up gesture.

Result classes:
    ScoreBreakdown: Proximity, coverage, stray ratio and fired gates.
    ScoreResult: Final score plus duration of an attempt.
    Feedback, FeedbackTier: Human-readable feedback for a score.

Example usage:
    Working with geometry::

        from trace_lib.domain import Point, Stroke

        stroke = Stroke.coerce([{'x': 10, 'y': 20}, (12, 24), Point(15, 30)])
        print(f"Sampled points: {stroke.decimated(3)}")
"""

from .geometry import BBox, Point, Stroke, points_to_array
from .results import Feedback, FeedbackTier, ScoreBreakdown, ScoreResult

__all__ = [
    'Point', 'BBox', 'Stroke', 'points_to_array',
    'ScoreBreakdown', 'ScoreResult', 'Feedback', 'FeedbackTier',
]
