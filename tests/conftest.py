"""
foldkit Test Configuration and Fixtures

Fixture Categories:
- Paths: project root and fixture files
- Global state: configuration, environment and reducer registry reset
- Sample data: numbers and grid walks used across tests
"""

import logging
from pathlib import Path

import pytest

from foldkit.config import reset_config, reset_environment
from foldkit.models import Move, Position
from foldkit.reducers import get_registry

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


# =============================================================================
# Global State
# =============================================================================


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch):
    """Isolate tests from cached configuration, .env values and registrations."""
    import foldkit.config.environment as env_module
    from foldkit.config import ENV_VAR_OVERRIDES

    reset_config()
    reset_environment()
    get_registry().reset()

    for var in [*ENV_VAR_OVERRIDES, "FOLDKIT_CONFIG"]:
        monkeypatch.delenv(var, raising=False)

    # Keep a developer's .env out of the tests
    monkeypatch.setattr(env_module, "_dotenv_loaded", True)

    yield

    reset_config()
    reset_environment()
    get_registry().reset()

    package_logger = logging.getLogger("foldkit")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


# =============================================================================
# Sample Data
# =============================================================================


@pytest.fixture
def numbers() -> list[int]:
    return [1, 2, 3, 4, 5]


@pytest.fixture
def add():
    """Element-first addition reducer."""
    return lambda x, acc: acc + x


@pytest.fixture
def moves() -> list[Move]:
    """A walk that ends at (2, 3)."""
    return [
        Move(dx=1, dy=0),
        Move(dx=0, dy=2),
        Move(dx=-1, dy=0),
        Move(dx=2, dy=1),
    ]


@pytest.fixture
def origin() -> Position:
    return Position()
