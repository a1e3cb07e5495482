"""
Schema validation utilities for AdaptIQ.

Validates quiz session snapshots against a JSON Schema (Draft 7, with format
checking) and checks the cross-field rules a schema cannot express.
"""

import json
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft7Validator, FormatChecker, ValidationError

from ..config import config


class ValidationResult:
    """
    Result of a validation attempt.

    Attributes:
        valid: Whether data passed validation
        errors: List of error messages
        data: The validated data
    """

    def __init__(self, valid: bool, errors: list[str], data: Any = None):
        self.valid = valid
        self.errors = errors
        self.data = data

    def __bool__(self) -> bool:
        """Allow using result in boolean context."""
        return self.valid

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.valid:
            return "✓ Validation passed"
        return f"✗ Validation failed with {len(self.errors)} error(s):\n" + "\n".join(
            f"  - {error}" for error in self.errors
        )


class SchemaValidator:
    """
    JSON Schema validator.

    Usage:
        validator = SchemaValidator("path/to/schema.json")
        result = validator.validate(data)
        if not result:
            print(result.errors)
    """

    def __init__(self, schema_path: Path | str):
        """
        Initialize validator with a schema file.

        Args:
            schema_path: Path to JSON Schema file
        """
        self.schema_path = Path(schema_path)
        with open(self.schema_path, "r", encoding="utf-8") as f:
            self.schema = json.load(f)
        self.validator = Draft7Validator(self.schema, format_checker=FormatChecker())

    def validate(self, data: dict) -> ValidationResult:
        """
        Validate data against schema.

        Args:
            data: Data to validate

        Returns:
            ValidationResult with validation status and any errors
        """
        errors = [self._format_error(error) for error in self.validator.iter_errors(data)]
        return ValidationResult(valid=not errors, errors=errors, data=data)

    def _format_error(self, error: ValidationError) -> str:
        """Convert ValidationError to a readable message with its location."""
        path = " -> ".join(str(p) for p in error.path) if error.path else "root"
        schema_path = "/".join(str(p) for p in error.schema_path)
        return f"At '{path}': {error.message} [validator={error.validator}, schema_path=/{schema_path}]"


_session_validator: Optional[SchemaValidator] = None


def get_session_validator() -> SchemaValidator:
    """Get or create the cached quiz session validator."""
    global _session_validator
    if _session_validator is None:
        _session_validator = SchemaValidator(config.paths.quiz_session_schema)
    return _session_validator


def _consistency_errors(data: dict) -> list[str]:
    """Cross-field checks on a schema-valid snapshot."""
    errors = []
    score = data["score"]
    total = data["total_answered"]
    max_questions = data["max_questions"]
    responses = data["responses"]

    if score > total:
        errors.append(f"score ({score}) cannot exceed total_answered ({total})")
    if total > max_questions:
        errors.append(f"total_answered ({total}) cannot exceed max_questions ({max_questions})")
    if len(responses) != total:
        errors.append(
            f"responses has {len(responses)} entries but total_answered is {total}"
        )
    correct = sum(1 for r in responses if r["is_correct"])
    if correct != score:
        errors.append(f"score ({score}) does not match correct responses ({correct})")
    if data["difficulty_progression"][-1] != data["difficulty"]:
        errors.append(
            f"difficulty_progression ends at {data['difficulty_progression'][-1]!r} "
            f"but difficulty is {data['difficulty']!r}"
        )
    if data["is_finished"] != (total >= max_questions):
        errors.append(
            f"is_finished is {data['is_finished']} with {total}/{max_questions} answered"
        )
    return errors


def validate_quiz_session(data: dict) -> ValidationResult:
    """
    Validate a quiz session snapshot (QuizSession.to_dict()).

    Args:
        data: Snapshot to validate

    Returns:
        ValidationResult; consistency checks run only when the schema passes
    """
    result = get_session_validator().validate(data)
    if not result:
        return result

    errors = _consistency_errors(data)
    return ValidationResult(valid=not errors, errors=errors, data=data)
