"""
Shared pytest fixtures and configuration for AdaptIQ tests.

This file is automatically discovered by pytest and provides
fixtures available to all tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent))

from adaptiq.models.mcq import MCQ  # noqa: E402
from adaptiq.utils.question_bank import InMemoryQuestionBank  # noqa: E402


def make_mcq(difficulty="easy", answer_index=1, n=0, knowledge_id="k-arith"):
    """Build a small MCQ for tests."""
    return MCQ(
        question=f"{difficulty} question {n}: what is {n} + 1?",
        options=[str(n), str(n + 1), str(n + 2), str(n + 3)],
        answer_index=answer_index,
        difficulty=difficulty,
        knowledge_id=knowledge_id,
        validated=True,
    )


@pytest.fixture
def mcq_factory():
    """Fixture providing the make_mcq builder."""
    return make_mcq


@pytest.fixture
def mcq_payload():
    """
    Fixture providing an MCQ as the question API returns it.

    Returns:
        dict: PascalCase payload
    """
    return {
        "mcqId": "mcq-001",
        "Question": "Which layer of the OSI model handles routing?",
        "Options": ["Data link", "Network", "Transport", "Session"],
        "AnswerIndex": 1,
        "Difficulty": "Medium",
        "KnowledgeId": "k-osi-layers",
        "Validated": True,
        "Reference": {"Unit": "2", "Chapter": "Networking", "Section": "2.3"},
    }


@pytest.fixture
def question_bank():
    """
    Fixture providing a bank with five questions per tier for course "c-101".

    Every question's correct option is index 1.
    """
    bank = InMemoryQuestionBank()
    for tier in ("easy", "medium", "hard"):
        for n in range(5):
            bank.add("c-101", make_mcq(tier, n=n))
    return bank


@pytest.fixture(autouse=True)
def quiet_logs():
    """Keep loguru output out of test runs."""
    from loguru import logger

    logger.remove()
    yield
    logger.remove()


# Pytest hooks for better test output


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
