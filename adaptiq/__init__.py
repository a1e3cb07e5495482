"""
AdaptIQ: adaptive-difficulty MCQ quizzes.

The difficulty controller lives in adaptiq.models.difficulty; a quiz attempt
is driven by adaptiq.models.quiz_session.QuizSession.
"""

from .models import (
    AdaptiveDecision,
    DifficultyTier,
    InvalidTier,
    MCQ,
    PROMOTION_THRESHOLD,
    QuizSession,
    TIER_ORDER,
    next_state,
)

__version__ = "0.1.0"

__all__ = [
    "AdaptiveDecision",
    "DifficultyTier",
    "InvalidTier",
    "MCQ",
    "PROMOTION_THRESHOLD",
    "QuizSession",
    "TIER_ORDER",
    "next_state",
]
