"""Quiz Enums - Session phases."""

from enum import Enum


class SessionPhase(str, Enum):
    """Lifecycle phases of a quiz session."""

    SELECTING = "selecting"  # No module chosen yet
    ACTIVE = "active"  # Answering questions
    COMPLETED = "completed"  # Every question answered
