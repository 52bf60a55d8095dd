"""Service layer for exercise attempts.

This module ties guides and scorers together for the code that hosts the
exercises (screens, an API backend, the CLI). It knows nothing about
rendering or storage: it receives pointer samples and returns ScoreResults.

The module contains two main classes:
    TracingAttempt: Captures strokes for one letter/number/shape attempt
        and scores them when the learner is done.
    ExerciseService: Resolves (kind, label) to a guide and starts attempts
        or scores complete drawings directly.

Example usage:
    Driving a tracing attempt::

        from trace_lib.api.services import ExerciseService

        service = ExerciseService()
        attempt = service.start_tracing('letter', 'L')
        attempt.pen_down(120, 40)
        attempt.pen_move(120, 160)
        attempt.pen_up()
        if attempt.can_finish:
            result = attempt.finish()
            print(result.score, result.feedback.label)

    Scoring a whole drawing at once::

        breakdown = service.score_drawing('shape', 'circle', strokes)
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Sequence

from ..config import DEFAULT_CONFIG, DEFAULT_DOT_CONFIG, DotConfig, ScoringConfig
from ..domain.geometry import Point, Stroke
from ..domain.results import ScoreBreakdown, ScoreResult
from ..guides.repository import DOTS, KINDS, SHAPE, GuideRepository
from ..scoring.accuracy import AccuracyScorer, round_half_up
from ..scoring.components import GuideContext
from ..scoring.dots import DotSequenceSession

_logger = logging.getLogger(__name__)


class TracingAttempt:
    """One attempt at tracing a guide.

    Strokes are captured as pen-down / pen-move / pen-up events (or added
    whole with add_stroke) and scored by finish(). The guide context is
    built once and reused by every finish() after a reset().
    A prebuilt GuideContext may be passed instead of dense points; it must
    come from the same scorer config.

    Attributes:
        label: Exercise label, e.g. 'A', '7' or 'circle'.
        strokes: Completed strokes in chronological order.
        min_stroke_points: Strokes with fewer points are discarded on pen-up.
        result: ScoreResult after finish(), None before.
    """

    def __init__(self, dense_guide: Sequence[Point] | GuideContext, label: str = '',
                 scorer: AccuracyScorer | None = None,
                 min_stroke_points: int = 1,
                 clock: Callable[[], float] = time.monotonic):
        self.label = label
        self.scorer = scorer or AccuracyScorer()
        self.min_stroke_points = min_stroke_points
        if isinstance(dense_guide, GuideContext):
            self._context = dense_guide if len(dense_guide) >= 2 else None
        else:
            self._context = self.scorer.context_for(dense_guide)
        if self._context is None:
            _logger.warning("Tracing attempt %r has no usable guide; it will score 0", label)
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        """Discard all strokes and any result, and restart the timer."""
        self.strokes: list[Stroke] = []
        self._current: Stroke | None = None
        self.result: ScoreResult | None = None
        self._started_at = self._clock()

    @property
    def is_finished(self) -> bool:
        return self.result is not None

    @property
    def can_finish(self) -> bool:
        """True once at least one stroke has been completed."""
        return bool(self.strokes) and not self.is_finished

    def _check_open(self) -> None:
        if self.is_finished:
            raise RuntimeError(f"Attempt {self.label!r} is finished; call reset() first")

    def pen_down(self, x: float, y: float) -> None:
        """Start a new stroke; an unfinished stroke is closed first."""
        self._check_open()
        if self._current is not None:
            self.pen_up()
        self._current = Stroke([Point(x, y)])

    def pen_move(self, x: float, y: float) -> None:
        """Extend the current stroke; ignored when the pen is up."""
        self._check_open()
        if self._current is not None:
            self._current.append(Point(x, y))

    def pen_up(self) -> None:
        """Close the current stroke, keeping it if it has enough points."""
        self._check_open()
        stroke, self._current = self._current, None
        if stroke is not None and len(stroke) >= self.min_stroke_points:
            self.strokes.append(stroke)

    def add_stroke(self, points: Sequence[Any]) -> None:
        """Append a complete stroke given as point-like values."""
        self._check_open()
        stroke = Stroke.coerce(points)
        if len(stroke) >= self.min_stroke_points:
            self.strokes.append(stroke)

    def evaluate(self) -> ScoreBreakdown:
        """Score the current strokes without finishing the attempt."""
        if self._context is None:
            return ScoreBreakdown(score=0)
        return self.scorer.evaluate_points(self.strokes, self._context)

    def finish(self) -> ScoreResult:
        """Score the attempt and record its duration.

        An open stroke is closed first. Finishing with no strokes is allowed
        and scores 0.
        """
        self._check_open()
        if self._current is not None:
            self.pen_up()
        breakdown = self.evaluate()
        duration = round_half_up(self._clock() - self._started_at)
        self.result = ScoreResult(score=breakdown.score, duration=duration, breakdown=breakdown)
        _logger.info("Tracing %r finished: score=%d, %d strokes, %ds",
                     self.label, breakdown.score, len(self.strokes), duration)
        return self.result


class ExerciseService:
    """Entry point for starting and scoring exercises.

    Attributes:
        repository: GuideRepository used to resolve exercise guides.
        config: ScoringConfig for tracing exercises.
        dot_config: DotConfig for connect-the-dots exercises.
    """

    def __init__(self, repository: GuideRepository | None = None,
                 config: ScoringConfig = DEFAULT_CONFIG,
                 dot_config: DotConfig = DEFAULT_DOT_CONFIG,
                 clock: Callable[[], float] = time.monotonic):
        self.repository = repository or GuideRepository.default()
        self.config = config
        self.dot_config = dot_config
        self.scorer = AccuracyScorer(config)
        self._clock = clock
        self._contexts: dict[tuple[str, str], tuple[tuple[Point, ...], GuideContext | None]] = {}

    def _dense_guide(self, kind: str, label: str) -> Sequence[Point]:
        if kind not in KINDS or kind == DOTS:
            raise ValueError(f"Unknown tracing kind {kind!r}")
        dense = self.repository.dense(kind, label, self.config.guide_step)
        if dense is None:
            raise ValueError(f"No {kind} guide named {label!r}")
        return dense

    def guide_context(self, kind: str, label: str) -> GuideContext | None:
        """Cached GuideContext for a tracing guide (None if it is degenerate).

        Entries are keyed to the dense tuple the repository hands out, so a
        guide registered again under the same label gets a fresh context.
        """
        dense = self._dense_guide(kind, label)
        cached = self._contexts.get((kind, label))
        if cached is not None and cached[0] is dense:
            return cached[1]
        context = self.scorer.context_for(dense)
        self._contexts[(kind, label)] = (dense, context)
        return context

    def start_tracing(self, kind: str, label: str) -> TracingAttempt:
        """Start a tracing attempt for a letter, number or shape.

        Raises:
            ValueError: If kind or label is unknown.
        """
        context = self.guide_context(kind, label)
        guide = context if context is not None else ()
        # Shape canvases drop taps that never became a line
        min_points = 2 if kind == SHAPE else 1
        return TracingAttempt(guide, label=label, scorer=self.scorer,
                              min_stroke_points=min_points, clock=self._clock)

    def start_dots(self, pattern: str) -> DotSequenceSession:
        """Start a connect-the-dots attempt for a named pattern.

        Raises:
            ValueError: If the pattern is unknown.
        """
        dots = self.repository.get(DOTS, pattern)
        if dots is None:
            raise ValueError(f"No dot pattern named {pattern!r}")
        return DotSequenceSession(dots, config=self.dot_config, clock=self._clock)

    def score_drawing(self, kind: str, label: str, strokes: Sequence[Any]) -> ScoreBreakdown:
        """Score a complete drawing against a named guide."""
        context = self.guide_context(kind, label)
        if context is None:
            return ScoreBreakdown(score=0)
        return self.scorer.evaluate_points(strokes, context)

    def catalog(self) -> dict[str, list[str]]:
        """Available exercise labels per kind."""
        return {kind: self.repository.list_labels(kind) for kind in KINDS}
