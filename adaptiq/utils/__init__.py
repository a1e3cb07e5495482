"""
Utility modules for AdaptIQ.

This module contains utility functions:
- validation: JSON Schema validation of quiz session snapshots
- progress: Analytics over a session's answers
- question_bank: In-memory question source and answer log
"""

from .validation import (
    SchemaValidator,
    ValidationResult,
    validate_quiz_session,
)
from .progress import (
    answer_timeline,
    difficulty_accuracy,
    difficulty_distribution,
    longest_streaks,
    session_analytics,
)
from .question_bank import (
    InMemoryAnswerLog,
    InMemoryQuestionBank,
)

__all__ = [
    # Validation
    "SchemaValidator",
    "ValidationResult",
    "validate_quiz_session",
    # Analytics
    "answer_timeline",
    "difficulty_accuracy",
    "difficulty_distribution",
    "longest_streaks",
    "session_analytics",
    # Collaborators
    "InMemoryAnswerLog",
    "InMemoryQuestionBank",
]
