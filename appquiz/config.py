# =============================================================================
# CONFIGURATION - appquiz
# =============================================================================
# Centralized settings read from environment variables
# =============================================================================

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

BUNDLED_TEMPLATE = Path(__file__).parent / "data" / "modules.json"

DEFAULT_DATA_DIR = Path.home() / ".appquiz"
DEFAULT_DATA_FILE = "data.json"
DEFAULT_FEEDBACK_DELAY_MS = 1000
DEFAULT_LOG_LEVEL = "INFO"


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {raw!r}, using {default}")
        return default


@dataclass
class QuizConfig:
    """Application settings.

    Attributes:
        data_dir: Directory holding the module file
        data_file: Module file name inside data_dir
        template_path: JSON copied into place on first launch
        seed: Seed for the quiz random source (None = unseeded)
        feedback_delay_ms: Pause suggested to UIs before the next question
        log_level: Root logging level
    """

    data_dir: Path = DEFAULT_DATA_DIR
    data_file: str = DEFAULT_DATA_FILE
    template_path: Path = BUNDLED_TEMPLATE
    seed: int | None = None
    feedback_delay_ms: int = DEFAULT_FEEDBACK_DELAY_MS
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def data_path(self) -> Path:
        return self.data_dir / self.data_file

    @classmethod
    def from_env(cls) -> "QuizConfig":
        """Build config from environment variables."""
        data_dir = os.environ.get("QUIZ_DATA_DIR", "").strip()
        template = os.environ.get("QUIZ_TEMPLATE_PATH", "").strip()
        delay = _env_int("QUIZ_FEEDBACK_DELAY_MS", DEFAULT_FEEDBACK_DELAY_MS)
        if delay < 0:
            delay = DEFAULT_FEEDBACK_DELAY_MS

        return cls(
            data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
            data_file=os.environ.get("QUIZ_DATA_FILE", "").strip() or DEFAULT_DATA_FILE,
            template_path=Path(template).expanduser() if template else BUNDLED_TEMPLATE,
            seed=_env_int("QUIZ_SEED", None),
            feedback_delay_ms=delay,
            log_level=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "storage": {
                "data_path": str(self.data_path),
                "template_path": str(self.template_path),
            },
            "quiz": {
                "seed": self.seed,
                "feedback_delay_ms": self.feedback_delay_ms,
            },
            "logging": {"level": self.log_level},
        }


# =============================================================================
# SINGLETON
# =============================================================================

_config: QuizConfig | None = None


def get_config() -> QuizConfig:
    """Return the process-wide config, loading it on first use."""
    global _config
    if _config is None:
        _config = QuizConfig.from_env()
    return _config


def reload_config() -> QuizConfig:
    """Re-read the environment and replace the cached config."""
    global _config
    _config = QuizConfig.from_env()
    return _config
