"""
Unit tests for quiz session snapshot validation.
"""

import json

import pytest

from adaptiq.models.quiz_session import QuizSession
from adaptiq.utils.validation import SchemaValidator, validate_quiz_session


@pytest.fixture
def snapshot(question_bank):
    """Snapshot of a session with four answers."""
    session = QuizSession(course_id="c-101", learner_id="learner-1", max_questions=5)
    for selected in (1, 1, 1, 0):
        session.fetch_next_question(question_bank)
        session.submit_answer(selected)
    return session.to_dict()


class TestSchemaValidator:
    """Test suite for SchemaValidator."""

    def test_validates_against_schema_file(self, tmp_path):
        """Test a custom schema file."""
        schema_file = tmp_path / "test.schema.json"
        schema_file.write_text(
            json.dumps(
                {
                    "$schema": "http://json-schema.org/draft-07/schema#",
                    "type": "object",
                    "properties": {"test": {"type": "string"}},
                    "required": ["test"],
                }
            )
        )
        validator = SchemaValidator(schema_file)

        assert validator.validate({"test": "ok"})
        result = validator.validate({})
        assert not result
        assert "'test' is a required property" in result.errors[0]
        assert "Validation failed" in str(result)


class TestValidateQuizSession:
    """Test suite for validate_quiz_session."""

    def test_fresh_session_is_valid(self):
        """Test a new session's snapshot passes."""
        result = validate_quiz_session(QuizSession(course_id="c-101").to_dict())
        assert result.valid, result.errors

    def test_custom_session_id_is_valid(self):
        """Test a session built with its own ID produces a valid snapshot."""
        session = QuizSession(course_id="c-101", session_id="qs-attempt-42")
        result = validate_quiz_session(session.to_dict())
        assert result.valid, result.errors

    def test_played_session_is_valid(self, snapshot):
        """Test a played session's snapshot passes."""
        result = validate_quiz_session(snapshot)
        assert result.valid, result.errors

    def test_finished_session_is_valid(self, question_bank):
        """Test a finished session's snapshot passes."""
        session = QuizSession(course_id="c-101", max_questions=2)
        for _ in range(2):
            session.fetch_next_question(question_bank)
            session.submit_answer(1)
        result = validate_quiz_session(session.to_dict())
        assert result.valid, result.errors

    def test_unknown_tier(self, snapshot):
        """Test tiers outside the enumeration are rejected by the schema."""
        snapshot["difficulty"] = "expert"
        result = validate_quiz_session(snapshot)
        assert not result.valid
        assert any("difficulty" in e for e in result.errors)

    def test_unknown_field(self, snapshot):
        """Test extra fields are rejected."""
        snapshot["global_store"] = {}
        assert not validate_quiz_session(snapshot).valid

    def test_score_exceeds_answers(self, snapshot):
        """Test score cannot exceed total_answered."""
        snapshot["score"] = 9
        result = validate_quiz_session(snapshot)
        assert not result.valid
        assert any("cannot exceed total_answered" in e for e in result.errors)

    def test_response_count_mismatch(self, snapshot):
        """Test responses must match total_answered."""
        snapshot["responses"].pop()
        result = validate_quiz_session(snapshot)
        assert any("responses has 3 entries" in e for e in result.errors)

    def test_progression_must_end_at_current_tier(self, snapshot):
        """Test the progression's last tier is the current tier."""
        snapshot["difficulty_progression"].append("hard")
        result = validate_quiz_session(snapshot)
        assert any("difficulty_progression ends at" in e for e in result.errors)

    def test_finished_flag_consistency(self, snapshot):
        """Test is_finished agrees with the answer count."""
        snapshot["is_finished"] = True
        result = validate_quiz_session(snapshot)
        assert any("is_finished" in e for e in result.errors)
