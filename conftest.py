# =============================================================================
# CONFTEST - Global pytest fixtures
# =============================================================================
# Isolates every test from the user's real module file and config
# =============================================================================

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to the path
sys.path.insert(0, str(Path(__file__).parent))


# =============================================================================
# ENVIRONMENT FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_env(tmp_path: Path):
    """Point config at a temp data dir and drop cached singletons."""
    import app_state
    from appquiz.config import reload_config

    env_vars = {
        "QUIZ_DATA_DIR": str(tmp_path / "appquiz-data"),
        "QUIZ_FEEDBACK_DELAY_MS": "0",
        "QUIZ_SEED": "1234",
        "LOG_LEVEL": "ERROR",
    }
    with patch.dict(os.environ, env_vars):
        reload_config()
        app_state.clear_state()
        yield
    app_state.clear_state()
    reload_config()
