# =============================================================================
# CONFTEST - Shared fixtures for the quiz tests
# =============================================================================
# Sample modules, seeded engines and temp stores
# =============================================================================

import json
import random
from pathlib import Path

import pytest


# =============================================================================
# MODULE FIXTURES
# =============================================================================


@pytest.fixture
def geo_module():
    """Two-question module from the reference scenario."""
    from appquiz.models import Module, Question

    return Module(
        id="m1",
        name="Geo",
        questions=[
            Question(id="q1", question_text="Capital of France?", answer="Paris"),
            Question(id="q2", question_text="Capital of Italy?", answer="Rome"),
        ],
    )


@pytest.fixture
def single_module():
    """Module with one question (degenerate single-choice quiz)."""
    from appquiz.models import Module, Question

    return Module(
        id="m-single",
        name="Solo",
        questions=[Question(id="q1", question_text="Capital of France?", answer="Paris")],
    )


@pytest.fixture
def empty_module():
    from appquiz.models import Module

    return Module(id="m-empty", name="Empty", questions=[])


@pytest.fixture
def large_module():
    """Module with five distinct answers."""
    from appquiz.models import Module, Question

    answers = ["Paris", "Rome", "Tokyo", "Madrid", "Berlin"]
    return Module(
        id="m-large",
        name="Capitals",
        questions=[
            Question(id=f"q{i}", question_text=f"Question {i}?", answer=a)
            for i, a in enumerate(answers)
        ],
    )


@pytest.fixture
def duplicate_module():
    """Three questions share 'Paris', one answers 'Rome'."""
    from appquiz.models import Module, Question

    return Module(
        id="m-dup",
        name="Duplicates",
        questions=[
            Question(id="q1", question_text="Capital of France?", answer="Paris"),
            Question(id="q2", question_text="City of Light?", answer="Paris"),
            Question(id="q3", question_text="Seat of the Louvre?", answer="Paris"),
            Question(id="q4", question_text="Capital of Italy?", answer="Rome"),
        ],
    )


# =============================================================================
# ENGINE FIXTURES
# =============================================================================


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def engine(rng):
    """QuizEngine with a seeded random source."""
    from appquiz.engine import QuizEngine

    return QuizEngine(rng=rng)


# =============================================================================
# STORAGE FIXTURES
# =============================================================================


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    """Template with one two-question module."""
    path = tmp_path / "template.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "m1",
                    "name": "Geo",
                    "questions": [
                        {"id": "q1", "questionText": "Capital of France?", "answer": "Paris"},
                        {"id": "q2", "questionText": "Capital of Italy?", "answer": "Rome"},
                    ],
                }
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def store(tmp_path: Path, template_file: Path):
    """Seeded ModuleStore in a temp directory."""
    from appquiz.storage import ModuleStore

    s = ModuleStore(tmp_path / "data" / "data.json", template_path=template_file)
    s.ensure_seeded()
    return s
