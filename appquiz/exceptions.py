"""Quiz Exceptions - Error taxonomy for the quiz application."""


class QuizError(Exception):
    """Base exception for the quiz application."""


class ConfigurationError(QuizError):
    """Raised when a module cannot be quizzed (e.g. it has no questions)."""


class InvalidStateError(QuizError):
    """Raised when a session operation is called outside its valid phase."""

    def __init__(self, operation: str, expected: str, actual: str):
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{operation}() requires session phase '{expected}', got '{actual}'"
        )


class UnknownModuleError(QuizError):
    """Raised when a module id is not present in the store."""

    def __init__(self, module_id: str):
        self.module_id = module_id
        super().__init__(f"Module {module_id} not found")


class UnknownQuestionError(QuizError):
    """Raised when a question id is not present in its module."""

    def __init__(self, module_id: str, question_id: str):
        self.module_id = module_id
        self.question_id = question_id
        super().__init__(f"Question {question_id} not found in module {module_id}")


class StorageError(QuizError):
    """Raised when the module file cannot be written."""
