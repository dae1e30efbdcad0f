"""Quiz Engines - Choice generation and session state machine."""

from .choice_engine import ChoiceGenerator
from .session_engine import QuizEngine

__all__ = ["ChoiceGenerator", "QuizEngine"]
