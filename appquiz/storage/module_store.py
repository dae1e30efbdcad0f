"""Module Store - JSON file persistence for quiz modules."""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable

from pydantic import TypeAdapter, ValidationError

from ..exceptions import StorageError, UnknownModuleError, UnknownQuestionError
from ..models.schemas import Module, Question

logger = logging.getLogger(__name__)

_MODULE_LIST = TypeAdapter(list[Module])


class ModuleStore:
    """Reads and writes the module list as a single JSON document.

    On first use the document is seeded from a template file. Every
    mutating call loads the whole list, replaces one entry and writes it
    back atomically.

    File format:
        [{"id": ..., "name": ..., "questions": [{"id", "questionText", "answer"}]}]

    Example:
        >>> store = ModuleStore(Path("~/.appquiz/data.json"), template_path=BUNDLED_TEMPLATE)
        >>> store.ensure_seeded()
        >>> module = store.add_module("Geography")
        >>> store.add_question(module.id, "Capital of France?", "Paris")
    """

    def __init__(self, data_path: Path, template_path: Path | None = None):
        """Initialize store.

        Args:
            data_path: Module file location
            template_path: File copied to data_path when it does not exist yet
        """
        self.data_path = Path(data_path)
        self.template_path = Path(template_path) if template_path else None

    # =========================================================================
    # SEEDING
    # =========================================================================

    def ensure_seeded(self) -> None:
        """Copy the template into place if the module file is missing."""
        if self.data_path.exists():
            return

        self.data_path.parent.mkdir(parents=True, exist_ok=True)

        if self.template_path is not None and self.template_path.exists():
            try:
                shutil.copyfile(self.template_path, self.data_path)
                logger.info(f"Module file seeded from {self.template_path}")
                return
            except OSError as e:
                logger.error(f"Error copying template {self.template_path}: {e}")
        else:
            logger.warning(f"Template not found ({self.template_path}), starting with no modules")

        self.save_modules([])

    # =========================================================================
    # DOCUMENT I/O
    # =========================================================================

    def load_modules(self) -> list[Module]:
        """Load every module.

        Returns:
            Modules in file order, or an empty list if the file is missing
            or cannot be decoded
        """
        if not self.data_path.exists():
            logger.error(f"Module file not found: {self.data_path}")
            return []

        try:
            # Raw bytes: pydantic rejects invalid UTF-8 with the other decode errors
            return _MODULE_LIST.validate_json(self.data_path.read_bytes())
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.error(f"Error decoding module file {self.data_path}: {e}")
            return []

    def save_modules(self, modules: list[Module]) -> None:
        """Write every module, replacing the file atomically.

        Raises:
            StorageError: The file could not be written
        """
        payload = [m.model_dump(by_alias=True) for m in modules]
        tmp_name = None
        try:
            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.data_path.parent, prefix=".modules-", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.data_path)
        except Exception as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            logger.error(f"Failed to save modules to {self.data_path}: {e}")
            raise StorageError(f"Failed to save modules: {e}") from e

        logger.debug(f"{len(modules)} modules saved to {self.data_path}")

    # =========================================================================
    # MODULES
    # =========================================================================

    def get_module(self, module_id: str) -> Module:
        """Return a module by id.

        Raises:
            UnknownModuleError: No module has this id
        """
        for module in self.load_modules():
            if module.id == module_id:
                return module
        raise UnknownModuleError(module_id)

    def add_module(self, name: str) -> Module:
        """Append a new empty module and return it."""
        module = Module.new(name)
        modules = self.load_modules()
        modules.append(module)
        self.save_modules(modules)
        logger.info(f"Module created: {module.id} ({name})")
        return module

    def rename_module(self, module_id: str, name: str) -> Module:
        """Change a module's name, keeping its id and questions."""
        return self._replace(module_id, lambda m: m.model_copy(update={"name": name}))

    def delete_module(self, module_id: str) -> None:
        """Remove a module and its questions."""
        modules = self.load_modules()
        remaining = [m for m in modules if m.id != module_id]
        if len(remaining) == len(modules):
            raise UnknownModuleError(module_id)
        self.save_modules(remaining)
        logger.info(f"Module deleted: {module_id}")

    # =========================================================================
    # QUESTIONS
    # =========================================================================

    def add_question(self, module_id: str, question_text: str, answer: str) -> Question:
        """Append a question to the end of a module."""
        question = Question.new(question_text, answer)
        self._replace(
            module_id,
            lambda m: m.model_copy(update={"questions": [*m.questions, question]}),
        )
        return question

    def update_question(
        self, module_id: str, question_id: str, question_text: str, answer: str
    ) -> Question:
        """Replace a question's text and answer in place."""
        updated = Question(id=question_id, question_text=question_text, answer=answer)

        def apply(module: Module) -> Module:
            if module.find_question(question_id) is None:
                raise UnknownQuestionError(module_id, question_id)
            questions = [updated if q.id == question_id else q for q in module.questions]
            return module.model_copy(update={"questions": questions})

        self._replace(module_id, apply)
        return updated

    def delete_question(self, module_id: str, question_id: str) -> None:
        """Remove a question from a module."""

        def apply(module: Module) -> Module:
            if module.find_question(question_id) is None:
                raise UnknownQuestionError(module_id, question_id)
            questions = [q for q in module.questions if q.id != question_id]
            return module.model_copy(update={"questions": questions})

        self._replace(module_id, apply)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _replace(self, module_id: str, apply: Callable[[Module], Module]) -> Module:
        modules = self.load_modules()
        for i, module in enumerate(modules):
            if module.id == module_id:
                modules[i] = apply(module)
                self.save_modules(modules)
                return modules[i]
        raise UnknownModuleError(module_id)
