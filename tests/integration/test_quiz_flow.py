"""
Integration tests: a full quiz attempt driven through the question bank.
"""

from adaptiq.models.difficulty import DifficultyTier
from adaptiq.models.quiz_session import QuizSession
from adaptiq.utils.progress import session_analytics
from adaptiq.utils.question_bank import InMemoryAnswerLog
from adaptiq.utils.validation import validate_quiz_session

EASY, MEDIUM, HARD = DifficultyTier.EASY, DifficultyTier.MEDIUM, DifficultyTier.HARD


def test_full_attempt(question_bank):
    """Climb to hard, fall back to medium, finish and validate the snapshot."""
    log = InMemoryAnswerLog()
    session = QuizSession(course_id="c-101", learner_id="learner-7", max_questions=12)

    # 6 correct: easy -> medium -> hard; 3 wrong: hard -> medium; 3 correct: back to hard
    answers = [1] * 6 + [0] * 3 + [1] * 3
    served = []
    while not session.is_finished:
        mcq = session.fetch_next_question(question_bank)
        served.append(mcq.difficulty)
        session.submit_answer(answers[session.total_answered], answer_log=log)

    assert served == [EASY] * 3 + [MEDIUM] * 3 + [HARD] * 3 + [MEDIUM] * 3
    assert session.tier is HARD
    assert session.streak == 0
    assert session.score == 9
    assert session.accuracy == 75
    assert [t.value for t in session.difficulty_progression] == [
        "easy", "medium", "hard", "medium", "hard",
    ]
    assert len(log) == 12
    assert session.fetch_next_question(question_bank) is None

    result = validate_quiz_session(session.to_dict())
    assert result.valid, result.errors

    analytics = session_analytics(session)
    assert analytics["difficulty_distribution"] == {"easy": 3, "medium": 6, "hard": 3}
    assert analytics["difficulty_accuracy"]["hard"] == 0.0


def test_restart_after_finish(question_bank):
    """A finished attempt can be restarted from easy."""
    session = QuizSession(course_id="c-101", max_questions=3)
    while not session.is_finished:
        session.fetch_next_question(question_bank)
        session.submit_answer(1)
    assert session.tier is MEDIUM

    session.reset()

    assert not session.is_finished
    assert session.tier is EASY
    assert session.fetch_next_question(question_bank).difficulty is EASY
