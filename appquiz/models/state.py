"""Quiz State - Runtime state of one quiz attempt."""

from dataclasses import dataclass, field
from typing import Any

from .enums import SessionPhase
from .schemas import AnswerRecord, Module


@dataclass
class QuizSession:
    """Mutable state of a quiz attempt over one module.

    Only QuizEngine mutates a session. The module is borrowed read-only.

    Attributes:
        module: Module under quiz (None while selecting)
        current_question_index: 0-based index of the question being asked
        num_correct: Correct answers so far
        num_wrong: Wrong answers so far
        transcript: Answer records in submission order
        phase: Lifecycle phase
        choices: Choice set drawn when the current question was entered
    """

    module: Module | None = None
    current_question_index: int = 0
    num_correct: int = 0
    num_wrong: int = 0
    transcript: list[AnswerRecord] = field(default_factory=list)
    phase: SessionPhase = SessionPhase.SELECTING
    choices: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.phase is SessionPhase.COMPLETED

    @property
    def total(self) -> int:
        return len(self.module.questions) if self.module is not None else 0

    def clear(self) -> None:
        """Return every field to its initial value."""
        self.module = None
        self.current_question_index = 0
        self.num_correct = 0
        self.num_wrong = 0
        self.transcript = []
        self.phase = SessionPhase.SELECTING
        self.choices = []

    def to_dict(self) -> dict[str, Any]:
        """Snapshot for presentation layers."""
        return {
            "phase": self.phase.value,
            "module_id": self.module.id if self.module else None,
            "module_name": self.module.name if self.module else None,
            "current_question_index": self.current_question_index,
            "total": self.total,
            "num_correct": self.num_correct,
            "num_wrong": self.num_wrong,
        }
