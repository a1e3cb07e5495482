"""
Multiple-choice question model as served by the question API.

The API speaks PascalCase JSON (``Question``, ``Options``, ``AnswerIndex``...);
``MCQ.from_dict`` / ``MCQ.to_dict`` translate to and from that shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .difficulty import DifficultyTier


@dataclass
class Reference:
    """Location of the question's source material in the course notes."""
    unit: str = ""
    chapter: str = ""
    section: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Reference":
        return cls(
            unit=data.get("Unit", ""),
            chapter=data.get("Chapter", ""),
            section=data.get("Section", ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"Unit": self.unit, "Chapter": self.chapter, "Section": self.section}


@dataclass
class MCQ:
    """
    A single multiple-choice question.

    Attributes:
        question: Question text
        options: Answer options, in display order
        answer_index: Index of the correct option
        difficulty: Tier the question belongs to
        knowledge_id: Knowledge component the question assesses
        validated: Whether the question passed automatic validation
        mcq_id: Backend identifier (absent for unsaved questions)
        approved: Reviewer approval, if reviewed
        reference: Where in the notes the answer can be found
        change_explanation: Reviewer note on the latest edit
        validation_report: Raw validation output from the backend
    """
    question: str
    options: List[str]
    answer_index: int
    difficulty: DifficultyTier
    knowledge_id: str = ""
    validated: bool = False
    mcq_id: Optional[str] = None
    approved: Optional[bool] = None
    reference: Optional[Reference] = None
    change_explanation: Optional[str] = None
    validation_report: Any = field(default=None, repr=False)

    def __post_init__(self):
        """Normalize difficulty and check the answer index."""
        self.difficulty = DifficultyTier.parse(self.difficulty)

        if not self.question or not self.question.strip():
            raise ValueError("Question text cannot be empty")
        if len(self.options) < 2:
            raise ValueError(f"MCQ needs at least 2 options, got {len(self.options)}")
        if isinstance(self.answer_index, bool) or not isinstance(self.answer_index, int):
            raise ValueError(f"answer_index must be an integer, got {self.answer_index!r}")
        if not 0 <= self.answer_index < len(self.options):
            raise ValueError(
                f"answer_index {self.answer_index} out of range for {len(self.options)} options"
            )

    def is_correct(self, selected_index: int) -> bool:
        """Check a selected option index against the answer."""
        return selected_index == self.answer_index

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MCQ":
        """
        Build an MCQ from the API payload.

        Raises:
            ValueError: If a required field is missing or invalid
        """
        missing = [k for k in ("Question", "Options", "AnswerIndex", "Difficulty") if k not in data]
        if missing:
            raise ValueError(f"MCQ payload missing required fields: {missing}")

        reference = data.get("Reference")
        return cls(
            question=data["Question"],
            options=list(data["Options"]),
            answer_index=data["AnswerIndex"],
            difficulty=data["Difficulty"],
            knowledge_id=data.get("KnowledgeId", ""),
            validated=bool(data.get("Validated", False)),
            mcq_id=data.get("mcqId"),
            approved=data.get("Approved"),
            reference=Reference.from_dict(reference) if reference else None,
            change_explanation=data.get("ChangeExplanation"),
            validation_report=data.get("ValidationReport"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API payload shape."""
        result = {
            "Question": self.question,
            "Options": list(self.options),
            "AnswerIndex": self.answer_index,
            "Difficulty": self.difficulty.value.capitalize(),
            "KnowledgeId": self.knowledge_id,
            "Validated": self.validated,
        }
        if self.mcq_id is not None:
            result["mcqId"] = self.mcq_id
        if self.approved is not None:
            result["Approved"] = self.approved
        if self.reference is not None:
            result["Reference"] = self.reference.to_dict()
        if self.change_explanation is not None:
            result["ChangeExplanation"] = self.change_explanation
        if self.validation_report is not None:
            result["ValidationReport"] = self.validation_report
        return result
