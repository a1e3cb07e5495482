"""
In-memory question source and answer log.

Stand-ins for the question-serving and progress-logging APIs, so a quiz
session can be driven end-to-end without a backend (demos, tests).
"""

from __future__ import annotations

import random
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

from loguru import logger

from ..models.difficulty import TIER_ORDER, DifficultyTier
from ..models.mcq import MCQ


class InMemoryQuestionBank:
    """
    Serves questions per course and tier.

    A tier's questions are served in order (or shuffled) without repeats
    until the pool is exhausted, then the pool starts over. When a course has
    nothing at the requested tier, the nearest tier with questions is used,
    preferring the easier neighbour on ties.
    """

    def __init__(
        self,
        questions: Optional[Dict[str, Iterable[MCQ]]] = None,
        shuffle: bool = False,
        seed: Optional[int] = None,
    ):
        """
        Initialize the bank.

        Args:
            questions: Mapping of course_id to questions
            shuffle: Serve each pool in random order
            seed: Random seed for reproducible shuffling
        """
        self.shuffle = shuffle
        self._rng = random.Random(seed)
        self._pools: Dict[str, Dict[DifficultyTier, List[MCQ]]] = defaultdict(
            lambda: {tier: [] for tier in TIER_ORDER}
        )
        self._queues: Dict[Tuple[str, DifficultyTier], List[MCQ]] = {}

        for course_id, mcqs in (questions or {}).items():
            for mcq in mcqs:
                self.add(course_id, mcq)

    def add(self, course_id: str, mcq: MCQ):
        """Add a question to a course's pool for its difficulty."""
        self._pools[course_id][mcq.difficulty].append(mcq)

        # Join the rotation in progress so served questions are not repeated early
        queue = self._queues.get((course_id, mcq.difficulty))
        if queue:
            if self.shuffle:
                queue.insert(self._rng.randint(0, len(queue)), mcq)
            else:
                queue.append(mcq)

    def count(self, course_id: str, tier: Optional[DifficultyTier] = None) -> int:
        """Number of questions for a course, optionally at one tier."""
        if course_id not in self._pools:
            return 0
        pools = self._pools[course_id]
        if tier is not None:
            return len(pools[DifficultyTier.parse(tier)])
        return sum(len(pool) for pool in pools.values())

    def next_question(self, course_id: str, tier: DifficultyTier) -> Tuple[MCQ, str]:
        """
        Return the next question for a course near the requested tier.

        Returns:
            (question, tier actually served)

        Raises:
            LookupError: If the course has no questions
        """
        tier = DifficultyTier.parse(tier)
        if self.count(course_id) == 0:
            raise LookupError(f"No questions available for course {course_id!r}")

        served = self._nearest_tier(course_id, tier)
        if served != tier:
            logger.debug(f"No {tier.value} questions for {course_id}, serving {served.value}")

        key = (course_id, served)
        queue = self._queues.get(key)
        if not queue:
            queue = list(self._pools[course_id][served])
            if self.shuffle:
                self._rng.shuffle(queue)
            self._queues[key] = queue

        return queue.pop(0), served.value

    def _nearest_tier(self, course_id: str, tier: DifficultyTier) -> DifficultyTier:
        """Closest tier with questions, easier first on ties."""
        pools = self._pools[course_id]
        candidates = sorted(
            (t for t in TIER_ORDER if pools[t]),
            key=lambda t: (abs(t.rank - tier.rank), t.rank),
        )
        return candidates[0]


class InMemoryAnswerLog:
    """Collects answer payloads in a list."""

    def __init__(self):
        self.records: List[Dict[str, Any]] = []

    def record(self, payload: Dict[str, Any]) -> None:
        self.records.append(payload)

    def __len__(self) -> int:
        return len(self.records)
