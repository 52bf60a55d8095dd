"""Reference guides for tracing exercises.

expander: Dense interpolation of sparse waypoints (expand_guide).
catalog: Built-in letter, digit, shape and dot-pattern guides.
repository: GuideRepository with memoized dense expansion.
"""

from .catalog import DOT_PATTERNS, LETTER_GUIDES, NUMBER_GUIDES, SHAPE_GUIDES
from .expander import DEFAULT_STEP, expand_guide
from .repository import DOTS, KINDS, LETTER, NUMBER, SHAPE, GuideRepository

__all__ = [
    'expand_guide', 'DEFAULT_STEP', 'GuideRepository',
    'LETTER_GUIDES', 'NUMBER_GUIDES', 'SHAPE_GUIDES', 'DOT_PATTERNS',
    'LETTER', 'NUMBER', 'SHAPE', 'DOTS', 'KINDS',
]
