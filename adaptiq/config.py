"""
Configuration management for AdaptIQ.

This module centralizes all configuration settings:
- Overrides loaded from environment variables (and a local .env file)
- Sensible defaults matching the quiz client's behavior
- Single source of truth for thresholds, quiz lengths and paths
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AssessmentConfig:
    """Adaptive quiz configuration."""

    # Difficulty levels, easiest first
    difficulty_levels: tuple = ("easy", "medium", "hard")
    initial_difficulty: str = "easy"

    # Consecutive same-outcome answers needed to move one tier
    promotion_threshold: int = field(
        default_factory=lambda: int(os.getenv("ADAPTIQ_PROMOTION_THRESHOLD", "3"))
    )

    # Quiz length
    max_questions: int = field(
        default_factory=lambda: int(os.getenv("ADAPTIQ_MAX_QUESTIONS", "25"))
    )
    quiz_length_options: tuple = (15, 20, 25, 30)


@dataclass
class PathConfig:
    """File system paths for packaged resources."""

    package_root: Path = field(default_factory=lambda: Path(__file__).parent)

    schemas_dir: Path = field(init=False)
    quiz_session_schema: Path = field(init=False)

    def __post_init__(self):
        """Initialize computed paths."""
        self.schemas_dir = self.package_root / "schemas"
        self.quiz_session_schema = self.schemas_dir / "quiz_session.schema.json"


@dataclass
class LoggingConfig:
    """Logging configuration (consumed by adaptiq.logging)."""

    log_level: str = field(
        default_factory=lambda: os.getenv("ADAPTIQ_LOG_LEVEL", "INFO").upper()
    )
    log_format: str = (
        "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan> - {message}"
    )


class Config:
    """
    Main configuration class. Singleton pattern.

    Usage:
        from adaptiq.config import config

        threshold = config.assessment.promotion_threshold
        errors = config.validate()
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.paths = PathConfig()
            cls._instance.assessment = AssessmentConfig()
            cls._instance.logging = LoggingConfig()
        return cls._instance

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        assessment = self.assessment

        if assessment.promotion_threshold < 1:
            errors.append(
                f"promotion_threshold must be >= 1, got {assessment.promotion_threshold}"
            )

        if assessment.max_questions < 1:
            errors.append(f"max_questions must be >= 1, got {assessment.max_questions}")

        if assessment.initial_difficulty not in assessment.difficulty_levels:
            errors.append(
                f"initial_difficulty must be one of {list(assessment.difficulty_levels)}, "
                f"got {assessment.initial_difficulty!r}"
            )

        bad_lengths = [n for n in assessment.quiz_length_options if n < 1]
        if bad_lengths:
            errors.append(f"quiz_length_options must all be >= 1, got {bad_lengths}")

        if self.logging.log_level not in LOG_LEVELS:
            errors.append(
                f"log_level must be one of {list(LOG_LEVELS)}, got {self.logging.log_level!r}"
            )

        if not self.paths.quiz_session_schema.exists():
            errors.append(f"Quiz session schema not found: {self.paths.quiz_session_schema}")

        return errors


# Global config instance
config = Config()
