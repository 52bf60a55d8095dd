"""Score to feedback lookup."""

from __future__ import annotations

from ..domain.results import Feedback, FeedbackTier

# (minimum score, feedback) from the most positive tier down
FEEDBACK_TABLE: tuple[tuple[int, Feedback], ...] = (
    (85, Feedback(FeedbackTier.EXCELLENT, 'Excellent!',
                  'Amazing tracing! You stayed right on the guide!', '#4CAF50', '\N{GLOWING STAR}')),
    (70, Feedback(FeedbackTier.GOOD, 'Good Job!',
                  'Great work! Most of your drawing followed the path.', '#4A90D9',
                  '\N{THUMBS UP SIGN}')),
    (50, Feedback(FeedbackTier.KEEP_TRYING, 'Keep Trying!',
                  'Getting closer! Try to follow the dotted guide line.', '#FF9800',
                  '\N{FLEXED BICEPS}')),
)

RETRY_FEEDBACK = Feedback(FeedbackTier.TRY_AGAIN, 'Try Again!',
                          'Stay close to the dotted guide path. You can do it!', '#FF5252',
                          '\N{ANTICLOCKWISE DOWNWARDS AND UPWARDS OPEN CIRCLE ARROWS}')


def score_feedback(score: float) -> Feedback:
    """Feedback for a score: >=85 excellent, >=70 good, >=50 keep trying, else retry."""
    for threshold, feedback in FEEDBACK_TABLE:
        if score >= threshold:
            return feedback
    return RETRY_FEEDBACK
