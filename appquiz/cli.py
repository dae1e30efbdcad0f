"""Console runner - play a quiz module in the terminal."""

from __future__ import annotations

import argparse
import logging
import random
import time
from collections.abc import Callable
from pathlib import Path

from .config import QuizConfig, get_config
from .engine import QuizEngine
from .exceptions import ConfigurationError, UnknownModuleError
from .models import QuizResult
from .storage import ModuleStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appquiz",
        description="Two-choice quiz over stored modules",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        help="Module file (default: QUIZ_DATA_DIR/QUIZ_DATA_FILE)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for decoy selection and shuffling (default: QUIZ_SEED)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List modules")

    play = sub.add_parser("play", help="Take a quiz")
    play.add_argument("module_id", help="Id of the module to quiz")
    play.add_argument(
        "--delay-ms",
        type=int,
        help="Pause after each answer (default: QUIZ_FEEDBACK_DELAY_MS)",
    )
    return parser


def print_result(result: QuizResult, out: Callable[[str], None] = print) -> None:
    out("=" * 60)
    out(f"Score: {result.num_correct}/{result.total} ({result.percentage}%)")
    out("-" * 60)
    for i, record in enumerate(result.transcript, start=1):
        mark = "OK " if record.is_correct else "X  "
        out(f"{mark}{i}. {record.question_text}")
        if not record.is_correct:
            out(f"     your answer: {record.user_answer} | correct: {record.correct_answer}")
    out("=" * 60)


def _read_choice(choices: list[str], read: Callable[[str], str], out: Callable[[str], None]) -> str:
    while True:
        raw = read(f"Choice (1-{len(choices)}): ").strip()
        if raw.isdigit() and 1 <= int(raw) <= len(choices):
            return choices[int(raw) - 1]
        out("Invalid choice")


def play(
    engine: QuizEngine,
    store: ModuleStore,
    module_id: str,
    delay_ms: int,
    read: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
    sleep: Callable[[float], None] = time.sleep,
) -> QuizResult:
    """Run a full quiz in the terminal and return its result.

    The pause after each answer happens here, between two engine calls.
    """
    module = store.get_module(module_id)
    session = engine.start(module)
    out(f"Module: {module.name} ({session.total} questions)")

    while not session.is_complete:
        question = engine.current_question(session)
        choices = engine.choices_for(session)
        out("")
        out(f"[{session.current_question_index + 1}/{session.total}] {question.question_text}")
        for i, choice in enumerate(choices, start=1):
            out(f"  {i}) {choice}")

        answer = _read_choice(choices, read, out)
        engine.submit_answer(session, answer)
        record = session.transcript[-1]
        out("Correct!" if record.is_correct else f"Wrong, the answer was: {record.correct_answer}")

        if not session.is_complete and delay_ms > 0:
            sleep(delay_ms / 1000)

    result = engine.result(session)
    print_result(result, out)
    return result


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config: QuizConfig = get_config()
    logging.basicConfig(level=config.log_level, format="%(levelname)s [%(name)s] %(message)s")

    data_path = args.data_file or config.data_path
    store = ModuleStore(data_path, template_path=config.template_path)
    store.ensure_seeded()

    if args.command == "list":
        modules = store.load_modules()
        if not modules:
            print("No modules")
        for module in modules:
            print(f"{module.id}  {module.name} ({len(module.questions)} questions)")
        return 0

    seed = args.seed if args.seed is not None else config.seed
    delay_ms = args.delay_ms if args.delay_ms is not None else config.feedback_delay_ms
    engine = QuizEngine(rng=random.Random(seed))

    try:
        play(engine, store, args.module_id, delay_ms)
    except (UnknownModuleError, ConfigurationError) as e:
        print(f"Error: {e}")
        return 2
    except (KeyboardInterrupt, EOFError):
        print("\nQuiz abandoned")
        return 130
    return 0
