"""appquiz - Module-based two-choice quiz application.

Architecture:
- models/: Enums, pydantic schemas, QuizSession
- engine/: ChoiceGenerator, QuizEngine
- storage/: ModuleStore (JSON file)
- router.py: FastAPI endpoints
- cli.py: Console runner
"""

from .config import QuizConfig, get_config, reload_config
from .engine import ChoiceGenerator, QuizEngine
from .exceptions import (
    ConfigurationError,
    InvalidStateError,
    QuizError,
    StorageError,
    UnknownModuleError,
    UnknownQuestionError,
)
from .models import AnswerRecord, Module, Question, QuizResult, QuizSession, SessionPhase
from .storage import ModuleStore

__version__ = "0.1.0"

__all__ = [
    # Models
    "Module",
    "Question",
    "AnswerRecord",
    "QuizResult",
    "QuizSession",
    "SessionPhase",
    # Engines
    "ChoiceGenerator",
    "QuizEngine",
    # Storage
    "ModuleStore",
    # Config
    "QuizConfig",
    "get_config",
    "reload_config",
    # Errors
    "QuizError",
    "ConfigurationError",
    "InvalidStateError",
    "UnknownModuleError",
    "UnknownQuestionError",
    "StorageError",
]
