"""Core module - shared state for the HTTP server."""

from __future__ import annotations

import logging
import random
from typing import Optional

from appquiz.config import QuizConfig, get_config
from appquiz.engine import QuizEngine
from appquiz.models import QuizSession
from appquiz.storage import ModuleStore

logger = logging.getLogger(__name__)

# =============================================================================
# GLOBAL INSTANCES
# =============================================================================

# Single user: one store, one engine and one quiz session per process
store: Optional[ModuleStore] = None
engine: Optional[QuizEngine] = None
session: Optional[QuizSession] = None


def get_store() -> ModuleStore:
    """Get ModuleStore instance, seeding the module file on first use."""
    global store

    if store is None:
        config = get_config()
        store = ModuleStore(config.data_path, template_path=config.template_path)
        store.ensure_seeded()
        logger.info(f"Module store ready: {config.data_path}")

    return store


def get_engine() -> QuizEngine:
    """Get QuizEngine instance, seeded from config when QUIZ_SEED is set."""
    global engine

    if engine is None:
        config = get_config()
        engine = QuizEngine(rng=random.Random(config.seed))

    return engine


def get_session() -> QuizSession:
    """Get the quiz session, creating an empty one on first use."""
    global session

    if session is None:
        session = get_engine().new_session()

    return session


def get_settings() -> QuizConfig:
    return get_config()


def clear_state() -> None:
    """Drop every instance so the next request rebuilds them."""
    global store, engine, session
    store = None
    engine = None
    session = None
