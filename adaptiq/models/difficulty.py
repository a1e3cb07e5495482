"""
Adaptive difficulty controller.

Decides the difficulty tier of the next question from the learner's signed
streak of consecutive correct (positive) or incorrect (negative) answers:

- streak >= threshold: move up one tier (stay at the top), reset the streak
- streak <= -threshold: move down one tier (stay at the bottom), reset the streak
- otherwise: keep the tier, keep accumulating
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


# Consecutive same-outcome answers needed to change tier
PROMOTION_THRESHOLD = 3


class InvalidTier(ValueError):
    """Raised when a value is not one of the defined difficulty tiers."""

    def __init__(self, tier):
        self.tier = tier
        super().__init__(
            f"Invalid difficulty tier: {tier!r} (expected one of "
            f"{[t.value for t in TIER_ORDER]})"
        )


class DifficultyTier(str, Enum):
    """Question difficulty, ordered EASY < MEDIUM < HARD."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union["DifficultyTier", str]) -> "DifficultyTier":
        """
        Coerce a tier or tier name ("easy", "Easy", "EASY") to a DifficultyTier.

        Raises:
            InvalidTier: If value does not name a tier
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidTier(value)

    @property
    def rank(self) -> int:
        """Position in TIER_ORDER (0 = easiest)."""
        return TIER_ORDER.index(self)

    def promoted(self) -> "DifficultyTier":
        """Next harder tier, or self at the top."""
        return TIER_ORDER[min(self.rank + 1, len(TIER_ORDER) - 1)]

    def demoted(self) -> "DifficultyTier":
        """Next easier tier, or self at the bottom."""
        return TIER_ORDER[max(self.rank - 1, 0)]

    def __lt__(self, other):
        if not isinstance(other, DifficultyTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, DifficultyTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, DifficultyTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, DifficultyTier):
            return NotImplemented
        return self.rank >= other.rank


TIER_ORDER = (DifficultyTier.EASY, DifficultyTier.MEDIUM, DifficultyTier.HARD)


@dataclass(frozen=True)
class AdaptiveDecision:
    """
    Controller output.

    Attributes:
        next_tier: Tier for the next question
        reset_streak: Whether the caller must zero its streak counter
    """
    next_tier: DifficultyTier
    reset_streak: bool

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"next_tier": self.next_tier.value, "reset_streak": self.reset_streak}


def next_state(
    current_tier: Union[DifficultyTier, str],
    streak: int,
    threshold: int = PROMOTION_THRESHOLD,
) -> AdaptiveDecision:
    """
    Decide the next question's tier from the current tier and signed streak.

    Pure function: no state is read or written.

    Args:
        current_tier: Tier of the question just answered
        streak: Signed streak including the answer just given
        threshold: Streak magnitude that triggers a tier change

    Returns:
        AdaptiveDecision with the next tier and the reset flag

    Raises:
        InvalidTier: If current_tier is not a defined tier
        TypeError: If streak is not an integer
        ValueError: If threshold is not a positive integer

    Example:
        >>> next_state(DifficultyTier.EASY, 3)
        AdaptiveDecision(next_tier=<DifficultyTier.MEDIUM: 'medium'>, reset_streak=True)
    """
    tier = DifficultyTier.parse(current_tier)

    if isinstance(streak, bool) or not isinstance(streak, int):
        raise TypeError(f"streak must be an integer, got {type(streak).__name__}")
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 1:
        raise ValueError(f"threshold must be a positive integer, got {threshold!r}")

    if streak >= threshold:
        return AdaptiveDecision(next_tier=tier.promoted(), reset_streak=True)
    if streak <= -threshold:
        return AdaptiveDecision(next_tier=tier.demoted(), reset_streak=True)
    return AdaptiveDecision(next_tier=tier, reset_streak=False)
