"""
Data models for adaptive quizzes.

This module contains core data models:
- DifficultyTier / next_state: the adaptive difficulty controller
- MCQ: multiple-choice questions as served by the question API
- QuizSession: one quiz attempt driving the controller
"""

from .difficulty import (
    PROMOTION_THRESHOLD,
    TIER_ORDER,
    AdaptiveDecision,
    DifficultyTier,
    InvalidTier,
    next_state,
)
from .mcq import MCQ, Reference
from .quiz_session import (
    AnswerFeedback,
    AnswerLog,
    QuestionResponse,
    QuestionSource,
    QuizSession,
    advance_streak,
)

__all__ = [
    "PROMOTION_THRESHOLD",
    "TIER_ORDER",
    "AdaptiveDecision",
    "DifficultyTier",
    "InvalidTier",
    "next_state",
    "MCQ",
    "Reference",
    "AnswerFeedback",
    "AnswerLog",
    "QuestionResponse",
    "QuestionSource",
    "QuizSession",
    "advance_streak",
]
