"""Connect-the-dots session state and scoring.

Dots must be tapped strictly in index order. A tap selects the nearest dot
within max_tap_distance; tapping any dot other than the next expected one
(including an already connected dot) counts as a wrong tap. Repeat taps on
the same dot inside the debounce window are dropped so a finger held or
dragged over a dot registers once.

Final score: max(min_score, max_score - wrong_tap_penalty * wrong_taps).

A session belongs to one exercise attempt and is not safe for concurrent
mutation; call reset() to start a new attempt.

Typical usage example:

    session = DotSequenceSession(DOT_PATTERNS['house'])
    for x, y in taps:
        session.tap(x, y)
    if session.is_complete:
        print(session.result.score, session.result.duration)
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence

from ..config import DEFAULT_DOT_CONFIG, DotConfig
from ..domain.geometry import Point
from ..domain.results import ScoreResult
from .accuracy import round_half_up

_logger = logging.getLogger(__name__)


class TapOutcome(Enum):
    """What a single tap did to the session."""
    IGNORED = 'ignored'        # no dot in range, or session already complete
    DEBOUNCED = 'debounced'    # same dot tapped again inside the debounce window
    CORRECT = 'correct'        # next expected dot connected
    WRONG = 'wrong'            # some other dot tapped
    COMPLETED = 'completed'    # last dot connected


@dataclass(frozen=True)
class _TapRecord:
    index: int
    time: float


def dot_score(wrong_taps: int, config: DotConfig = DEFAULT_DOT_CONFIG) -> int:
    """Score for a completed pattern given its wrong-tap count."""
    return max(config.min_score, config.max_score - config.wrong_tap_penalty * wrong_taps)


class DotSequenceSession:
    """Mutable state of one connect-the-dots attempt.

    Attributes:
        dots: Target dots in the order they must be tapped.
        config: Tap radius, debounce window and scoring constants.
        connected: Indices connected so far; always the prefix 0..k-1.
        wrong_taps: Number of taps on a dot other than the next one.
        result: ScoreResult once the pattern is complete, else None.
    """

    def __init__(self, dots: Sequence[Any], config: DotConfig = DEFAULT_DOT_CONFIG,
                 clock: Callable[[], float] = time.monotonic):
        """Start a new attempt.

        Args:
            dots: Target positions as Points, (x, y) pairs or {'x', 'y'} mappings.
            config: DotConfig with tap and scoring constants.
            clock: Returns the current time in seconds; injectable for tests.

        Raises:
            ValueError: If dots is empty.
        """
        self.dots: tuple[Point, ...] = tuple(Point.coerce(d) for d in dots)
        if not self.dots:
            raise ValueError("A dot pattern needs at least one dot")
        self.config = config
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        """Clear progress and restart the timer; valid in any state."""
        self.connected: list[int] = []
        self.wrong_taps = 0
        self.result: ScoreResult | None = None
        self._last_tap: _TapRecord | None = None
        self._last_wrong: _TapRecord | None = None
        self._started_at = self._clock()
        self._completed_at: float | None = None

    @property
    def next_index(self) -> int:
        """Index of the dot that must be tapped next."""
        return len(self.connected)

    @property
    def is_complete(self) -> bool:
        return len(self.connected) == len(self.dots)

    @property
    def progress(self) -> float:
        """Fraction of dots connected, 0.0 to 1.0."""
        return len(self.connected) / len(self.dots)

    @property
    def flashing_index(self) -> int | None:
        """Index of a wrongly tapped dot still inside its highlight window."""
        if self._last_wrong is None:
            return None
        elapsed_ms = (self._clock() - self._last_wrong.time) * 1000.0
        if elapsed_ms < self.config.wrong_flash_ms:
            return self._last_wrong.index
        return None

    @property
    def result_ready(self) -> bool:
        """True once the cosmetic completion delay has elapsed."""
        if self._completed_at is None:
            return False
        elapsed_ms = (self._clock() - self._completed_at) * 1000.0
        return elapsed_ms >= self.config.completion_delay_ms

    def nearest_dot(self, x: float, y: float) -> int | None:
        """Index of the nearest dot strictly within max_tap_distance, or None."""
        best_idx = None
        best_dist = self.config.max_tap_distance
        for i, dot in enumerate(self.dots):
            d = math.hypot(dot.x - x, dot.y - y)
            if d < best_dist:
                best_dist = d
                best_idx = i
        return best_idx

    def tap(self, x: float, y: float) -> TapOutcome:
        """Register a tap (or drag sample) at canvas position (x, y)."""
        if self.is_complete:
            return TapOutcome.IGNORED

        idx = self.nearest_dot(x, y)
        if idx is None:
            return TapOutcome.IGNORED

        now = self._clock()
        last = self._last_tap
        if last is not None and last.index == idx and (now - last.time) * 1000.0 < self.config.debounce_ms:
            return TapOutcome.DEBOUNCED
        self._last_tap = _TapRecord(idx, now)

        if idx != self.next_index:
            self.wrong_taps += 1
            self._last_wrong = _TapRecord(idx, now)
            _logger.debug("Wrong tap on dot %d (expected %d), total %d",
                          idx, self.next_index, self.wrong_taps)
            return TapOutcome.WRONG

        self.connected.append(idx)
        if not self.is_complete:
            return TapOutcome.CORRECT

        self._completed_at = now
        self.result = ScoreResult(
            score=dot_score(self.wrong_taps, self.config),
            duration=round_half_up(now - self._started_at),
        )
        _logger.info("Dot pattern complete: %d dots, %d wrong taps, score=%d, %ds",
                     len(self.dots), self.wrong_taps, self.result.score, self.result.duration)
        return TapOutcome.COMPLETED
