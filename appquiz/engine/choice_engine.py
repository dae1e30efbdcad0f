"""Choice Engine - Builds the answer choices shown for a question."""

import logging
import random

from ..models.schemas import Module

logger = logging.getLogger(__name__)


class ChoiceGenerator:
    """Builds the one-or-two answer choices for a question.

    The correct answer is paired with a single decoy drawn uniformly from
    the answers of the other questions in the module. Answers equal to the
    correct one are dropped from the pool entirely, so a module whose other
    questions all share the same answer yields a single choice.

    Example:
        >>> gen = ChoiceGenerator(random.Random(7))
        >>> sorted(gen.generate_choices(module, 0))
        ['Paris', 'Rome']
    """

    def __init__(self, rng: random.Random | None = None):
        """Initialize with a random source.

        Args:
            rng: Seedable random source (a fresh unseeded one if omitted)
        """
        self.rng = rng if rng is not None else random.Random()

    def decoy_pool(self, module: Module, question_index: int) -> list[str]:
        """Return the candidate decoys for a question, sorted.

        Args:
            module: Module holding the question
            question_index: Index of the question

        Returns:
            Distinct answers of other questions that differ from the correct one
        """
        correct = module.questions[question_index].answer
        pool = {
            q.answer
            for i, q in enumerate(module.questions)
            if i != question_index and q.answer != correct
        }
        # Sorted so that a seeded rng picks the same decoy across runs
        return sorted(pool)

    def draw(self, module: Module, question_index: int) -> list[str]:
        """Pick the choice set (correct answer first, then the decoy if any).

        Args:
            module: Module holding the question
            question_index: Index of the question

        Returns:
            List with the correct answer and at most one decoy
        """
        correct = module.questions[question_index].answer
        pool = self.decoy_pool(module, question_index)
        if not pool:
            logger.debug(f"No decoy available for question {question_index} of {module.id}")
            return [correct]
        return [correct, self.rng.choice(pool)]

    def shuffle(self, choices: list[str]) -> list[str]:
        """Return a uniformly shuffled copy of the choices."""
        ordered = list(choices)
        self.rng.shuffle(ordered)
        return ordered

    def generate_choices(self, module: Module, question_index: int) -> list[str]:
        """Draw a choice set and shuffle it into display order."""
        return self.shuffle(self.draw(module, question_index))
