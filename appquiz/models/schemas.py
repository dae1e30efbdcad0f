"""Quiz Schemas - Pydantic models for modules, answers and API payloads."""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import SessionPhase

# =============================================================================
# DATA MODEL
# =============================================================================


class Question(BaseModel):
    """Prompt/answer pair inside a module."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Question id (unique within its module)")
    question_text: str = Field(..., alias="questionText", description="Prompt shown to the user")
    answer: str = Field(..., description="Correct answer text")

    @classmethod
    def new(cls, question_text: str, answer: str) -> "Question":
        """Build a question with a fresh id."""
        return cls(id=str(uuid4()).upper(), question_text=question_text, answer=answer)


class Module(BaseModel):
    """Named, ordered collection of questions.

    Question order is insertion order and drives quiz sequencing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Stable module id")
    name: str = Field(..., description="Display name")
    questions: list[Question] = Field(default_factory=list, description="Questions in insertion order")

    @classmethod
    def new(cls, name: str) -> "Module":
        """Build an empty module with a fresh id."""
        return cls(id=str(uuid4()).upper(), name=name, questions=[])

    def find_question(self, question_id: str) -> Question | None:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


class AnswerRecord(BaseModel):
    """One submitted answer; produced by the engine, never persisted."""

    model_config = ConfigDict(frozen=True)

    question_text: str
    user_answer: str
    correct_answer: str
    is_correct: bool


class QuizResult(BaseModel):
    """Aggregated outcome of a completed session."""

    num_correct: int = Field(..., ge=0)
    num_wrong: int = Field(..., ge=0)
    total: int = Field(..., ge=1, description="Number of questions in the module")
    transcript: list[AnswerRecord] = Field(default_factory=list)

    @computed_field
    @property
    def percentage(self) -> float:
        return round(self.num_correct / self.total * 100, 1)


# =============================================================================
# API PAYLOADS
# =============================================================================


class CreateModuleRequest(BaseModel):
    """Request to create a module."""

    name: str = Field(..., min_length=1, description="Module name")


class RenameModuleRequest(BaseModel):
    """Request to rename a module."""

    name: str = Field(..., min_length=1, description="New module name")


class QuestionRequest(BaseModel):
    """Request to add or replace a question."""

    question_text: str = Field(..., min_length=1, alias="questionText")
    answer: str = Field(..., min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class StartQuizRequest(BaseModel):
    """Request to start a quiz over a stored module."""

    module_id: str = Field(..., description="Module to quiz")


class ResetQuizRequest(BaseModel):
    """Request to reset the session, optionally starting another module."""

    module_id: str | None = Field(None, description="Module to start right after reset")


class SubmitAnswerRequest(BaseModel):
    """Request to answer the current question."""

    answer: str = Field(..., description="Chosen answer text")


class QuizStatusResponse(BaseModel):
    """Snapshot of the session."""

    phase: SessionPhase
    module_id: str | None = None
    module_name: str | None = None
    current_question_index: int = 0
    total: int = 0
    num_correct: int = 0
    num_wrong: int = 0


class CurrentQuestionResponse(BaseModel):
    """Current question with its choices in display order."""

    index: int = Field(..., description="0-based question index")
    total: int = Field(..., description="Questions in the module")
    question_id: str
    question_text: str
    choices: list[str] = Field(..., description="One or two answer choices")


class SubmitAnswerResponse(BaseModel):
    """Outcome of a submitted answer."""

    record: AnswerRecord
    status: QuizStatusResponse
    reveal_delay_ms: int = Field(
        ..., description="Suggested pause before showing the next question"
    )
