"""Quiz Router - FastAPI endpoints for modules and the quiz session."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

import app_state

from .config import QuizConfig
from .engine.session_engine import QuizEngine
from .exceptions import (
    ConfigurationError,
    InvalidStateError,
    StorageError,
    UnknownModuleError,
    UnknownQuestionError,
)
from .models.schemas import (
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
from .models.state import QuizSession
from .storage.module_store import ModuleStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Quiz"])

# Endpoints and providers are coroutines with no awaits: each request runs to
# completion on the event loop, so the shared session and store never interleave.


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


async def get_module_store() -> ModuleStore:
    """Dependency returning the configured ModuleStore."""
    return app_state.get_store()


async def get_quiz_engine() -> QuizEngine:
    return app_state.get_engine()


async def get_quiz_session() -> QuizSession:
    return app_state.get_session()


async def get_quiz_config() -> QuizConfig:
    return app_state.get_settings()


def _http_error(e: Exception) -> HTTPException:
    """Map domain errors to HTTP status codes."""
    if isinstance(e, (UnknownModuleError, UnknownQuestionError)):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ConfigurationError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, InvalidStateError):
        return HTTPException(status_code=409, detail=str(e))
    return HTTPException(status_code=500, detail=str(e))


def _status(session: QuizSession) -> QuizStatusResponse:
    return QuizStatusResponse(**session.to_dict())


# =============================================================================
# MODULE ENDPOINTS
# =============================================================================


@router.get("/modules", response_model=list[Module])
async def list_modules(store: ModuleStore = Depends(get_module_store)):
    """List every module with its questions."""
    return store.load_modules()


@router.post("/modules", response_model=Module, status_code=201)
async def create_module(
    request: CreateModuleRequest,
    store: ModuleStore = Depends(get_module_store),
):
    try:
        return store.add_module(request.name)
    except StorageError as e:
        raise _http_error(e) from e


@router.get("/modules/{module_id}", response_model=Module)
async def get_module(module_id: str, store: ModuleStore = Depends(get_module_store)):
    try:
        return store.get_module(module_id)
    except UnknownModuleError as e:
        raise _http_error(e) from e


@router.patch("/modules/{module_id}", response_model=Module)
async def rename_module(
    module_id: str,
    request: RenameModuleRequest,
    store: ModuleStore = Depends(get_module_store),
):
    try:
        return store.rename_module(module_id, request.name)
    except (UnknownModuleError, StorageError) as e:
        raise _http_error(e) from e


@router.delete("/modules/{module_id}", status_code=204)
async def delete_module(module_id: str, store: ModuleStore = Depends(get_module_store)):
    try:
        store.delete_module(module_id)
    except (UnknownModuleError, StorageError) as e:
        raise _http_error(e) from e
    return Response(status_code=204)


@router.post("/modules/{module_id}/questions", response_model=Question, status_code=201)
async def add_question(
    module_id: str,
    request: QuestionRequest,
    store: ModuleStore = Depends(get_module_store),
):
    """Append a question to the end of the module."""
    try:
        return store.add_question(module_id, request.question_text, request.answer)
    except (UnknownModuleError, StorageError) as e:
        raise _http_error(e) from e


@router.put("/modules/{module_id}/questions/{question_id}", response_model=Question)
async def update_question(
    module_id: str,
    question_id: str,
    request: QuestionRequest,
    store: ModuleStore = Depends(get_module_store),
):
    try:
        return store.update_question(
            module_id, question_id, request.question_text, request.answer
        )
    except (UnknownModuleError, UnknownQuestionError, StorageError) as e:
        raise _http_error(e) from e


@router.delete("/modules/{module_id}/questions/{question_id}", status_code=204)
async def delete_question(
    module_id: str,
    question_id: str,
    store: ModuleStore = Depends(get_module_store),
):
    try:
        store.delete_question(module_id, question_id)
    except (UnknownModuleError, UnknownQuestionError, StorageError) as e:
        raise _http_error(e) from e
    return Response(status_code=204)


# =============================================================================
# QUIZ ENDPOINTS
# =============================================================================


@router.post("/quiz/start", response_model=QuizStatusResponse)
async def start_quiz(
    request: StartQuizRequest,
    store: ModuleStore = Depends(get_module_store),
    engine: QuizEngine = Depends(get_quiz_engine),
    session: QuizSession = Depends(get_quiz_session),
):
    """Start a quiz over a stored module.

    - The module needs at least one question (400 otherwise)
    - A session already in progress must be reset first (409)
    """
    try:
        module = store.get_module(request.module_id)
        engine.start(module, session)
    except (UnknownModuleError, ConfigurationError, InvalidStateError) as e:
        logger.warning(f"Quiz not started: {e}")
        raise _http_error(e) from e

    return _status(session)


@router.get("/quiz/status", response_model=QuizStatusResponse)
async def quiz_status(session: QuizSession = Depends(get_quiz_session)):
    return _status(session)


@router.get("/quiz/current", response_model=CurrentQuestionResponse)
async def current_question(
    engine: QuizEngine = Depends(get_quiz_engine),
    session: QuizSession = Depends(get_quiz_session),
):
    """Return the current question with its choices shuffled.

    The order changes on every call; the decoy is fixed per question.
    """
    try:
        question = engine.current_question(session)
        choices = engine.choices_for(session)
    except InvalidStateError as e:
        raise _http_error(e) from e

    return CurrentQuestionResponse(
        index=session.current_question_index,
        total=session.total,
        question_id=question.id,
        question_text=question.question_text,
        choices=choices,
    )


@router.post("/quiz/answer", response_model=SubmitAnswerResponse)
async def submit_answer(
    request: SubmitAnswerRequest,
    engine: QuizEngine = Depends(get_quiz_engine),
    session: QuizSession = Depends(get_quiz_session),
    config: QuizConfig = Depends(get_quiz_config),
):
    """Grade the answer to the current question and advance.

    reveal_delay_ms tells the client how long to wait before fetching
    /quiz/current; the server never sleeps.
    """
    try:
        engine.submit_answer(session, request.answer)
    except InvalidStateError as e:
        raise _http_error(e) from e

    return SubmitAnswerResponse(
        record=session.transcript[-1],
        status=_status(session),
        reveal_delay_ms=config.feedback_delay_ms,
    )


@router.get("/quiz/result", response_model=QuizResult)
async def quiz_result(
    engine: QuizEngine = Depends(get_quiz_engine),
    session: QuizSession = Depends(get_quiz_session),
):
    try:
        return engine.result(session)
    except InvalidStateError as e:
        raise _http_error(e) from e


@router.post("/quiz/reset", response_model=QuizStatusResponse)
async def reset_quiz(
    request: ResetQuizRequest | None = None,
    store: ModuleStore = Depends(get_module_store),
    engine: QuizEngine = Depends(get_quiz_engine),
    session: QuizSession = Depends(get_quiz_session),
):
    """Discard progress; with module_id, start that module right away."""
    module_id = request.module_id if request else None
    try:
        module = store.get_module(module_id) if module_id else None
        engine.reset(session, module)
    except (UnknownModuleError, ConfigurationError) as e:
        raise _http_error(e) from e

    return _status(session)
