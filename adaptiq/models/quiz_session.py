"""
Adaptive Quiz Session - Drives the difficulty controller for one quiz attempt.

Owns the (tier, streak, score, total answered) state of a single attempt,
fetches questions from a question source at the current tier and records
answers to an optional answer log.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol, Tuple

from loguru import logger

from ..config import config
from .difficulty import DifficultyTier, next_state
from .mcq import MCQ


class QuestionSource(Protocol):
    """Serves the next question for a course at a requested tier."""

    def next_question(self, course_id: str, tier: DifficultyTier) -> Tuple[MCQ, str]:
        """Return the question and the tier it was actually served at."""
        ...


class AnswerLog(Protocol):
    """Receives answered questions for progress tracking."""

    def record(self, payload: Dict[str, Any]) -> None:
        ...


def advance_streak(streak: int, is_correct: bool) -> int:
    """
    Update a signed streak with one answer.

    A correct answer extends a correct run or starts a new one at 1;
    an incorrect answer extends an incorrect run or starts a new one at -1.
    """
    if is_correct:
        return streak + 1 if streak >= 0 else 1
    return streak - 1 if streak <= 0 else -1


@dataclass(frozen=True)
class AnswerFeedback:
    """Outcome of the last submitted answer, for display."""
    is_correct: bool
    correct_index: int
    selected_index: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_correct": self.is_correct,
            "correct_index": self.correct_index,
            "selected_index": self.selected_index,
        }


@dataclass
class QuestionResponse:
    """
    Learner's response to a question.

    Attributes:
        question_text: Question text (for reference)
        knowledge_id: Knowledge component the question assesses
        difficulty: Tier the question was served at
        selected_index: Option the learner picked
        is_correct: Whether the answer is correct
        streak: Streak after this answer, before any reset
        next_difficulty: Tier decided for the following question
        streak_reset: Whether the streak was zeroed after this answer
        timestamp: When the answer was submitted (ISO 8601, UTC)
    """
    question_text: str
    knowledge_id: str
    difficulty: DifficultyTier
    selected_index: int
    is_correct: bool
    streak: int
    next_difficulty: DifficultyTier
    streak_reset: bool
    timestamp: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "question_text": self.question_text,
            "knowledge_id": self.knowledge_id,
            "difficulty": self.difficulty.value,
            "selected_index": self.selected_index,
            "is_correct": self.is_correct,
            "streak": self.streak,
            "next_difficulty": self.next_difficulty.value,
            "streak_reset": self.streak_reset,
            "timestamp": self.timestamp,
        }


class QuizSession:
    """
    One adaptive quiz attempt.

    Features:
    - Start at the configured initial tier with a zero streak
    - Move up a tier after a run of correct answers, down after a run of
      incorrect ones (see adaptiq.models.difficulty.next_state)
    - Track score and finish after max_questions answers
    - Keep a per-answer history for analytics

    Not thread-safe: one session is driven by one sequential stream of
    fetch/submit calls.
    """

    def __init__(
        self,
        course_id: str,
        learner_id: str = "anonymous",
        max_questions: Optional[int] = None,
        starting_tier: Optional[DifficultyTier | str] = None,
        threshold: Optional[int] = None,
        session_id: Optional[str] = None,
    ):
        """
        Initialize a quiz session.

        Args:
            course_id: Course the questions are drawn from
            learner_id: Learner taking the quiz
            max_questions: Questions in the attempt (default: config)
            starting_tier: Initial tier (default: config)
            threshold: Streak magnitude that changes tier (default: config)
            session_id: Session ID starting with "qs-" (auto-generated if None)

        Raises:
            ValueError: If course_id is empty, session_id lacks the "qs-"
                prefix, or max_questions or threshold is not a positive integer
            InvalidTier: If starting_tier is not a defined tier
        """
        if not course_id or not course_id.strip():
            raise ValueError("course_id cannot be empty")

        if session_id is not None and not session_id.startswith("qs-"):
            raise ValueError(f"session_id must start with 'qs-', got {session_id!r}")
        self.session_id = session_id or f"qs-{uuid.uuid4()}"
        self.course_id = course_id
        self.learner_id = learner_id
        self.starting_tier = DifficultyTier.parse(
            starting_tier or config.assessment.initial_difficulty
        )
        self.threshold = threshold if threshold is not None else config.assessment.promotion_threshold
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int) or self.threshold < 1:
            raise ValueError(f"threshold must be a positive integer, got {self.threshold!r}")
        self.created_at = datetime.now(timezone.utc).isoformat()

        self.reset(max_questions)

    def reset(self, max_questions: Optional[int] = None):
        """
        Restart the attempt from the starting tier with a zero streak.

        Args:
            max_questions: New attempt length (default: keep the current one,
                or the configured default for a new session)
        """
        if max_questions is None:
            max_questions = getattr(self, "max_questions", config.assessment.max_questions)
        if isinstance(max_questions, bool) or not isinstance(max_questions, int) or max_questions < 1:
            raise ValueError(f"max_questions must be a positive integer, got {max_questions!r}")

        self.max_questions = max_questions
        self.tier = self.starting_tier
        self.streak = 0
        self.score = 0
        self.total_answered = 0
        self.is_finished = False
        self.completed_at: Optional[str] = None
        self.current_mcq: Optional[MCQ] = None
        self.last_feedback: Optional[AnswerFeedback] = None
        self.responses: List[QuestionResponse] = []
        self.difficulty_progression: List[DifficultyTier] = [self.tier]

        logger.info(
            f"Quiz session {self.session_id} started: course={self.course_id}, "
            f"learner={self.learner_id}, questions={self.max_questions}, tier={self.tier.value}"
        )

    def fetch_next_question(self, source: QuestionSource) -> Optional[MCQ]:
        """
        Fetch the next question at the current tier.

        The tier reported by the source for the served question becomes the
        session's tier.

        Returns:
            The new current question, or None if the session is finished
        """
        if self.is_finished:
            return None

        mcq, served_tier = source.next_question(self.course_id, self.tier)
        served_tier = DifficultyTier.parse(served_tier)
        if served_tier != self.tier:
            logger.debug(
                f"Session {self.session_id}: requested {self.tier.value}, "
                f"served {served_tier.value}"
            )
            self._set_tier(served_tier)

        self.current_mcq = mcq
        self.last_feedback = None
        return mcq

    def submit_answer(
        self,
        selected_index: int,
        answer_log: Optional[AnswerLog] = None,
    ) -> AnswerFeedback:
        """
        Submit the learner's answer to the current question.

        Args:
            selected_index: Index of the chosen option
            answer_log: Optional collaborator notified of the answer

        Returns:
            AnswerFeedback for the submitted answer

        Raises:
            RuntimeError: If there is no question to answer, it was already
                answered, or the session is finished
            ValueError: If selected_index is not a valid option index
        """
        if self.is_finished:
            raise RuntimeError(f"Quiz session {self.session_id} is already finished")
        if self.current_mcq is None:
            raise RuntimeError("No current question to answer")
        if self.last_feedback is not None:
            raise RuntimeError("Current question already answered")

        mcq = self.current_mcq
        if isinstance(selected_index, bool) or not isinstance(selected_index, int):
            raise ValueError(f"selected_index must be an integer, got {selected_index!r}")
        if not 0 <= selected_index < len(mcq.options):
            raise ValueError(
                f"selected_index {selected_index} out of range for {len(mcq.options)} options"
            )

        is_correct = mcq.is_correct(selected_index)
        answered_tier = self.tier
        streak = advance_streak(self.streak, is_correct)

        decision = next_state(answered_tier, streak, threshold=self.threshold)
        logger.debug(
            f"Session {self.session_id}: correct={is_correct}, streak={streak}, "
            f"{answered_tier.value} -> {decision.next_tier.value}, reset={decision.reset_streak}"
        )

        self.streak = 0 if decision.reset_streak else streak
        self._set_tier(decision.next_tier)
        if is_correct:
            self.score += 1
        self.total_answered += 1

        self.last_feedback = AnswerFeedback(
            is_correct=is_correct,
            correct_index=mcq.answer_index,
            selected_index=selected_index,
        )
        self.responses.append(
            QuestionResponse(
                question_text=mcq.question,
                knowledge_id=mcq.knowledge_id,
                difficulty=answered_tier,
                selected_index=selected_index,
                is_correct=is_correct,
                streak=streak,
                next_difficulty=decision.next_tier,
                streak_reset=decision.reset_streak,
                timestamp=datetime.now(timezone.utc).isoformat(),
            )
        )

        if self.total_answered >= self.max_questions:
            self.is_finished = True
            self.completed_at = datetime.now(timezone.utc).isoformat()
            logger.info(
                f"Quiz session {self.session_id} finished: "
                f"{self.score}/{self.max_questions} ({self.accuracy}%)"
            )

        if answer_log is not None:
            payload = {
                "user_id": self.learner_id,
                "question": mcq.to_dict(),
                "selected_index": selected_index,
                "course_id": self.course_id,
            }
            try:
                answer_log.record(payload)
            except Exception as e:
                # Local state stays authoritative when the log is unavailable
                logger.error(f"Error submitting answer for session {self.session_id}: {e}")

        return self.last_feedback

    @property
    def accuracy(self) -> int:
        """Percentage of max_questions answered correctly."""
        return round(self.score / self.max_questions * 100)

    def summary(self) -> Dict[str, Any]:
        """Result overview for the end-of-quiz screen."""
        return {
            "session_id": self.session_id,
            "course_id": self.course_id,
            "learner_id": self.learner_id,
            "score": self.score,
            "total_answered": self.total_answered,
            "max_questions": self.max_questions,
            "accuracy": self.accuracy,
            "is_finished": self.is_finished,
            "final_difficulty": self.tier.value,
            "difficulty_progression": [t.value for t in self.difficulty_progression],
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert quiz session to a JSON-compatible snapshot."""
        return {
            "session_id": self.session_id,
            "created_at": self.created_at,
            "completed_at": self.completed_at,
            "course_id": self.course_id,
            "learner_id": self.learner_id,
            "starting_difficulty": self.starting_tier.value,
            "threshold": self.threshold,
            "difficulty": self.tier.value,
            "streak": self.streak,
            "score": self.score,
            "total_answered": self.total_answered,
            "max_questions": self.max_questions,
            "is_finished": self.is_finished,
            "last_feedback": self.last_feedback.to_dict() if self.last_feedback else None,
            "difficulty_progression": [t.value for t in self.difficulty_progression],
            "responses": [r.to_dict() for r in self.responses],
        }

    def _set_tier(self, tier: DifficultyTier):
        """Adopt a tier, recording it in the progression when it changes."""
        if tier != self.tier:
            self.tier = tier
            self.difficulty_progression.append(tier)
