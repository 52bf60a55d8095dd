"""Unit tests for trace_lib.guides.repository and the built-in catalog."""

import pytest

from trace_lib.domain.geometry import Point
from trace_lib.guides.catalog import (
    DOT_PATTERNS,
    LETTER_GUIDES,
    NUMBER_GUIDES,
    SHAPE_GUIDES,
    circle_guide,
    heart_guide,
)
from trace_lib.guides.repository import DOTS, LETTER, NUMBER, SHAPE, GuideRepository


class TestCatalog:

    def test_all_letters_and_digits(self):
        assert sorted(LETTER_GUIDES) == list('ABCDEFGHIJKLMNOPQRSTUVWXYZ')
        assert sorted(NUMBER_GUIDES) == list('0123456789')

    def test_shapes_and_dot_patterns(self):
        assert set(SHAPE_GUIDES) == {'circle', 'square', 'triangle', 'star', 'heart', 'diamond'}
        assert set(DOT_PATTERNS) == {'dog', 'house', 'star', 'fish'}

    def test_guides_inside_canvas(self):
        for guides in (LETTER_GUIDES, NUMBER_GUIDES, SHAPE_GUIDES, DOT_PATTERNS):
            for label, pts in guides.items():
                for x, y in pts:
                    assert 0 <= x <= 420 and 0 <= y <= 330, label

    def test_circle_is_closed(self):
        pts = circle_guide()
        assert len(pts) == 46
        assert pts[0] == pytest.approx(pts[-1])
        for x, y in pts:
            assert ((x - 210) ** 2 + (y - 165) ** 2) ** 0.5 == pytest.approx(115)

    def test_heart_ends_at_tip(self):
        pts = heart_guide()
        assert pts[-1] == (210, 268)
        assert len(pts) == 21 + 21 + 1


class TestGuideRepository:

    def test_default_has_catalog(self):
        repo = GuideRepository.default()
        assert repo.list_labels(LETTER)[0] == 'A'
        assert len(repo.list_labels(NUMBER)) == 10
        assert (SHAPE, 'heart') in repo
        assert (DOTS, 'fish') in repo

    def test_get_unknown_is_none(self):
        repo = GuideRepository.default()
        assert repo.get(LETTER, 'a') is None
        assert repo.dense(SHAPE, 'hexagon') is None
        assert repo.get('glyph', 'A') is None

    def test_register_unknown_kind(self):
        with pytest.raises(ValueError):
            GuideRepository().register('glyph', 'A', [(0, 0), (1, 1)])

    def test_dense_is_memoized(self):
        repo = GuideRepository.default()
        first = repo.dense(LETTER, 'A')
        assert repo.dense(LETTER, 'A') is first
        assert repo.dense(LETTER, 'A', step=8) is not first

    def test_dense_matches_expansion(self):
        repo = GuideRepository.from_dict({LETTER: {'-': [(0, 0), (10, 0)]}})
        assert list(repo.dense(LETTER, '-', step=5)) == [Point(0, 0), Point(5, 0), Point(10, 0)]

    def test_reregister_invalidates_cache(self):
        repo = GuideRepository.from_dict({SHAPE: {'bar': [(0, 0), (10, 0)]}})
        before = repo.dense(SHAPE, 'bar')
        repo.register(SHAPE, 'bar', [(0, 0), (20, 0)])
        after = repo.dense(SHAPE, 'bar')
        assert after is not before
        assert after[-1] == Point(20, 0)

    def test_dots_are_not_expanded(self):
        repo = GuideRepository.default()
        assert len(repo.dense(DOTS, 'house')) == len(DOT_PATTERNS['house'])

    def test_single_waypoint_guide_expands_to_nothing(self):
        repo = GuideRepository.from_dict({SHAPE: {'dot': [(5, 5)]}})
        assert repo.dense(SHAPE, 'dot') == ()
