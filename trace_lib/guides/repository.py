"""Guide repository for looking up exercise guides.

The repository stores sparse guides grouped by exercise kind ('letter',
'number', 'shape', 'dots') and hands out dense expansions, memoized per
(kind, label, step) so each guide is interpolated at most once per step.

Example usage:
    Basic repository operations::

        from trace_lib.guides.repository import GuideRepository

        repo = GuideRepository.default()
        sparse = repo.get('letter', 'A')
        dense = repo.dense('shape', 'circle')

    Bulk loading from dictionaries::

        repo = GuideRepository.from_dict({
            'letter': {'L': [(120, 40), (120, 285), (280, 285)]},
        })
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from ..domain.geometry import Point
from .catalog import DOT_PATTERNS, LETTER_GUIDES, NUMBER_GUIDES, SHAPE_GUIDES
from .expander import DEFAULT_STEP, expand_guide

_logger = logging.getLogger(__name__)

LETTER = 'letter'
NUMBER = 'number'
SHAPE = 'shape'
DOTS = 'dots'
KINDS = (LETTER, NUMBER, SHAPE, DOTS)


class GuideRepository:
    """Repository of sparse guides with memoized dense expansion.

    Attributes:
        _guides: Mapping of kind -> label -> tuple of sparse waypoints.
        _dense_cache: Mapping of (kind, label, step) -> dense points.
    """

    def __init__(self):
        self._guides: dict[str, dict[str, tuple[Point, ...]]] = {kind: {} for kind in KINDS}
        self._dense_cache: dict[tuple[str, str, float], tuple[Point, ...]] = {}

    def register(self, kind: str, label: str, waypoints: Sequence[Any]) -> None:
        """Register (or replace) the sparse guide for a label.

        Replacing a guide drops its cached expansions.

        Raises:
            ValueError: If kind is not one of KINDS.
        """
        if kind not in self._guides:
            raise ValueError(f"Unknown guide kind {kind!r}; expected one of {KINDS}")
        self._guides[kind][label] = tuple(Point.coerce(p) for p in waypoints)
        for key in [k for k in self._dense_cache if k[0] == kind and k[1] == label]:
            del self._dense_cache[key]

    def get(self, kind: str, label: str) -> tuple[Point, ...] | None:
        """Sparse waypoints for a label, or None if not registered."""
        return self._guides.get(kind, {}).get(label)

    def dense(self, kind: str, label: str, step: float = DEFAULT_STEP) -> tuple[Point, ...] | None:
        """Dense expansion of a registered guide, or None if not registered.

        Dot patterns are target positions rather than paths and are never
        expanded; asking for their dense form returns the dots unchanged.
        """
        sparse = self.get(kind, label)
        if sparse is None:
            return None
        if kind == DOTS:
            return sparse

        key = (kind, label, float(step))
        cached = self._dense_cache.get(key)
        if cached is None:
            cached = tuple(expand_guide(sparse, step))
            if len(cached) < 2:
                _logger.warning("Guide %s/%s expands to %d points", kind, label, len(cached))
            self._dense_cache[key] = cached
        return cached

    def list_labels(self, kind: str) -> list[str]:
        """Registered labels for a kind, in registration order."""
        return list(self._guides.get(kind, {}))

    def __contains__(self, key: tuple[str, str]) -> bool:
        kind, label = key
        return label in self._guides.get(kind, {})

    @classmethod
    def from_dict(cls, guides: dict[str, dict[str, Sequence[Any]]]) -> GuideRepository:
        """Create a repository from kind -> label -> waypoints definitions."""
        repo = cls()
        for kind, by_label in guides.items():
            for label, waypoints in by_label.items():
                repo.register(kind, label, waypoints)
        return repo

    @classmethod
    def default(cls) -> GuideRepository:
        """Repository preloaded with the built-in letters, digits, shapes and dots."""
        return cls.from_dict({
            LETTER: LETTER_GUIDES,
            NUMBER: NUMBER_GUIDES,
            SHAPE: SHAPE_GUIDES,
            DOTS: DOT_PATTERNS,
        })
