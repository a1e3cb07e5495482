"""
Quiz analytics helpers for dashboards and reporting.

Provides:
- Attempt counts and accuracy per difficulty tier
- Answer timeline
- Longest correct/incorrect runs
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ..models.difficulty import TIER_ORDER
from ..models.quiz_session import QuestionResponse, QuizSession


def difficulty_distribution(responses: Sequence[QuestionResponse]) -> Dict[str, int]:
    """
    Count answered questions per difficulty tier.

    Example:
        >>> difficulty_distribution(session.responses)
        {'easy': 4, 'medium': 3, 'hard': 0}
    """
    counts = {tier.value: 0 for tier in TIER_ORDER}
    for response in responses:
        counts[response.difficulty.value] += 1
    return counts


def difficulty_accuracy(responses: Sequence[QuestionResponse]) -> Dict[str, float]:
    """
    Percentage of correct answers per difficulty tier.

    Tiers with no attempts report 0.0.
    """
    attempts = difficulty_distribution(responses)
    correct = {tier.value: 0 for tier in TIER_ORDER}
    for response in responses:
        if response.is_correct:
            correct[response.difficulty.value] += 1

    return {
        tier: round(100 * correct[tier] / attempts[tier], 2) if attempts[tier] else 0.0
        for tier in attempts
    }


def answer_timeline(responses: Sequence[QuestionResponse]) -> List[Dict[str, Any]]:
    """One entry per answer, 1-based index, in submission order."""
    return [
        {"index": i, "difficulty": r.difficulty.value, "correct": r.is_correct}
        for i, r in enumerate(responses, start=1)
    ]


def longest_streaks(responses: Sequence[QuestionResponse]) -> Dict[str, int]:
    """
    Longest runs of consecutive correct and incorrect answers.

    Counted from the answers themselves, so tier-change resets do not
    shorten a run.
    """
    best = {"correct": 0, "incorrect": 0}
    run_key, run_len = None, 0
    for response in responses:
        key = "correct" if response.is_correct else "incorrect"
        run_len = run_len + 1 if key == run_key else 1
        run_key = key
        best[key] = max(best[key], run_len)
    return best


def session_analytics(session: QuizSession) -> Dict[str, Any]:
    """
    Analytics payload for a quiz session.

    Returns:
        Dict with total_attempts, correct, incorrect, accuracy (percent of
        attempts, 2 decimals), timeline, difficulty_distribution and
        difficulty_accuracy
    """
    responses = session.responses
    total = len(responses)
    correct = sum(1 for r in responses if r.is_correct)

    return {
        "total_attempts": total,
        "correct": correct,
        "incorrect": total - correct,
        "accuracy": round(100 * correct / total, 2) if total else 0.0,
        "timeline": answer_timeline(responses),
        "difficulty_distribution": difficulty_distribution(responses),
        "difficulty_accuracy": difficulty_accuracy(responses),
    }
