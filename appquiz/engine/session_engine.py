"""Quiz Session Engine - State machine driving a quiz over one module."""

import logging
import random

from ..exceptions import ConfigurationError, InvalidStateError
from ..models.enums import SessionPhase
from ..models.schemas import AnswerRecord, Module, Question, QuizResult
from ..models.state import QuizSession
from .choice_engine import ChoiceGenerator

logger = logging.getLogger(__name__)


class QuizEngine:
    """Drives a QuizSession through selecting, active and completed.

    Every operation is synchronous and performs no I/O. Any pause between
    an answer and the next question belongs to the caller: submit_answer
    returns immediately and the caller renders the next question whenever
    its own timer fires.

    Example:
        >>> engine = QuizEngine(rng=random.Random(42))
        >>> session = engine.start(module)
        >>> sorted(engine.choices_for(session))
        ['Paris', 'Rome']
        >>> engine.submit_answer(session, "Paris").num_correct
        1
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        choices: ChoiceGenerator | None = None,
    ):
        """Initialize engine.

        Args:
            rng: Seedable random source shared with the default choice generator
            choices: Custom choice generator (takes precedence over rng)
        """
        self.rng = rng if rng is not None else random.Random()
        self.choices = choices if choices is not None else ChoiceGenerator(self.rng)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def new_session(self) -> QuizSession:
        """Return an empty session waiting for a module."""
        return QuizSession()

    def start(self, module: Module, session: QuizSession | None = None) -> QuizSession:
        """Start a quiz over a module.

        Args:
            module: Module to quiz (must hold at least one question)
            session: Session in the selecting phase to reuse (new one if omitted)

        Returns:
            Session in the active phase, positioned on the first question

        Raises:
            ConfigurationError: The module has no questions
            InvalidStateError: The given session is not selecting
        """
        if session is None:
            session = self.new_session()
        self._require(session, SessionPhase.SELECTING, "start")

        if not module.questions:
            raise ConfigurationError(f"Module '{module.name}' ({module.id}) has no questions")

        session.clear()
        session.module = module
        session.phase = SessionPhase.ACTIVE
        session.choices = self.choices.draw(module, 0)

        logger.info(f"Quiz started: module={module.id} questions={len(module.questions)}")
        return session

    def reset(self, session: QuizSession, module: Module | None = None) -> QuizSession:
        """Discard progress and go back to selecting.

        Valid in any phase.

        Args:
            session: Session to reset
            module: Module to start right away (stays selecting if omitted)

        Returns:
            The same session object
        """
        previous = session.module.id if session.module else None
        session.clear()
        logger.info(f"Quiz reset: previous_module={previous}")

        if module is not None:
            return self.start(module, session)
        return session

    # =========================================================================
    # ACTIVE PHASE
    # =========================================================================

    def current_question(self, session: QuizSession) -> Question:
        """Return the question being asked."""
        self._require(session, SessionPhase.ACTIVE, "current_question")
        return session.module.questions[session.current_question_index]

    def choices_for(self, session: QuizSession) -> list[str]:
        """Return the current choices in a fresh random order.

        The decoy is fixed when the question is entered; only the display
        order changes between calls.
        """
        self._require(session, SessionPhase.ACTIVE, "choices_for")
        return self.choices.shuffle(session.choices)

    def submit_answer(self, session: QuizSession, answer: str) -> QuizSession:
        """Record an answer and advance.

        Args:
            session: Active session
            answer: Chosen answer text (compared by exact equality)

        Returns:
            The same session, advanced to the next question or completed

        Raises:
            InvalidStateError: The session is not active
        """
        self._require(session, SessionPhase.ACTIVE, "submit_answer")

        module = session.module
        index = session.current_question_index
        question = module.questions[index]
        is_correct = answer == question.answer

        session.transcript.append(
            AnswerRecord(
                question_text=question.question_text,
                user_answer=answer,
                correct_answer=question.answer,
                is_correct=is_correct,
            )
        )
        if is_correct:
            session.num_correct += 1
        else:
            session.num_wrong += 1

        logger.debug(f"Answer {index + 1}/{len(module.questions)} correct={is_correct}")

        if index == len(module.questions) - 1:
            session.phase = SessionPhase.COMPLETED
            session.choices = []
            logger.info(
                f"Quiz completed: module={module.id} "
                f"correct={session.num_correct} wrong={session.num_wrong}"
            )
        else:
            session.current_question_index = index + 1
            session.choices = self.choices.draw(module, index + 1)

        return session

    # =========================================================================
    # COMPLETED PHASE
    # =========================================================================

    def result(self, session: QuizSession) -> QuizResult:
        """Return counters and transcript of a completed session."""
        self._require(session, SessionPhase.COMPLETED, "result")
        return QuizResult(
            num_correct=session.num_correct,
            num_wrong=session.num_wrong,
            total=len(session.module.questions),
            transcript=list(session.transcript),
        )

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _require(self, session: QuizSession, expected: SessionPhase, operation: str) -> None:
        if session.phase is not expected:
            raise InvalidStateError(operation, expected.value, session.phase.value)
