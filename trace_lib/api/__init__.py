"""Service layer for hosting exercises.

TracingAttempt: stroke capture and scoring for one tracing attempt.
ExerciseService: guide lookup and attempt creation.
"""

from .services import ExerciseService, TracingAttempt

__all__ = ['ExerciseService', 'TracingAttempt']
