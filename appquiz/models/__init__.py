"""Quiz Models - Enums, Schemas and State."""

from .enums import SessionPhase
from .schemas import (
    AnswerRecord,
    CreateModuleRequest,
    CurrentQuestionResponse,
    Module,
    Question,
    QuestionRequest,
    QuizResult,
    QuizStatusResponse,
    RenameModuleRequest,
    ResetQuizRequest,
    StartQuizRequest,
    SubmitAnswerRequest,
    SubmitAnswerResponse,
)
from .state import QuizSession

__all__ = [
    # Enums
    "SessionPhase",
    # Data model
    "Module",
    "Question",
    "AnswerRecord",
    "QuizResult",
    # API payloads
    "CreateModuleRequest",
    "RenameModuleRequest",
    "QuestionRequest",
    "StartQuizRequest",
    "ResetQuizRequest",
    "SubmitAnswerRequest",
    "QuizStatusResponse",
    "CurrentQuestionResponse",
    "SubmitAnswerResponse",
    # State
    "QuizSession",
]
