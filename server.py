"""
appquiz Server - FastAPI app for the module quiz

Single-user HTTP surface with:
- Module and question management backed by a JSON file
- One in-memory quiz session (start, answer, result, reset)
- Health check
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import app_state
from appquiz import __version__
from appquiz.config import get_config
from appquiz.router import router as quiz_router

config = get_config()
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the module file before serving requests."""
    app_state.get_store()
    logger.info(f"appquiz {__version__} started")
    yield
    app_state.clear_state()


app = FastAPI(
    title="appquiz",
    description="Module-based two-choice quiz",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router)


@app.get("/health")
async def health():
    """Health check."""
    session = app_state.get_session()
    return {
        "status": "healthy",
        "version": __version__,
        "phase": session.phase.value,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
