"""Unit tests for trace_lib.scoring.feedback."""

import unittest

from trace_lib.domain.results import FeedbackTier, ScoreBreakdown, ScoreResult
from trace_lib.scoring.feedback import score_feedback


class TestScoreFeedback(unittest.TestCase):
    """Band edges: 85, 70 and 50."""

    def test_bands(self):
        cases = [
            (100, FeedbackTier.EXCELLENT),
            (85, FeedbackTier.EXCELLENT),
            (84, FeedbackTier.GOOD),
            (70, FeedbackTier.GOOD),
            (69, FeedbackTier.KEEP_TRYING),
            (50, FeedbackTier.KEEP_TRYING),
            (49, FeedbackTier.TRY_AGAIN),
            (0, FeedbackTier.TRY_AGAIN),
        ]
        for score, tier in cases:
            with self.subTest(score=score):
                self.assertIs(score_feedback(score).tier, tier)

    def test_gated_scores_never_positive(self):
        """Anything at or below the gate cap lands in the retry tier."""
        for score in range(0, 41):
            self.assertIs(score_feedback(score).tier, FeedbackTier.TRY_AGAIN)

    def test_labels(self):
        self.assertEqual(score_feedback(90).label, 'Excellent!')
        self.assertEqual(score_feedback(10).label, 'Try Again!')


class TestScoreResult(unittest.TestCase):

    def test_feedback_property(self):
        result = ScoreResult(score=72, duration=9)
        self.assertIs(result.feedback.tier, FeedbackTier.GOOD)

    def test_to_dict(self):
        breakdown = ScoreBreakdown(score=40, proximity=100.0, coverage=17.647,
                                   stray_ratio=0.0, drawn_samples=4, guide_samples=101,
                                   gates=('coverage',))
        data = ScoreResult(score=40, duration=3, breakdown=breakdown).to_dict()
        self.assertEqual(data['score'], 40)
        self.assertEqual(data['duration'], 3)
        self.assertEqual(data['feedback']['tier'], 'try_again')
        self.assertEqual(data['breakdown']['gates'], ['coverage'])
        self.assertEqual(data['breakdown']['coverage'], 17.65)

    def test_to_dict_without_breakdown(self):
        self.assertNotIn('breakdown', ScoreResult(score=92, duration=20).to_dict())

    def test_breakdown_gated_flag(self):
        self.assertFalse(ScoreBreakdown(score=90).gated)
        self.assertTrue(ScoreBreakdown(score=40, gates=('stray',)).gated)
