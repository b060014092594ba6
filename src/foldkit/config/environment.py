"""
Environment Variable Handling.

Loads ``.env`` files into the process environment using python-dotenv,
so ``FOLDKIT_*`` overrides and ``${VAR}`` references in YAML can come
from a local file.
"""

from pathlib import Path

from dotenv import load_dotenv

# Track whether dotenv has been loaded
_dotenv_loaded: bool = False


def ensure_dotenv_loaded(env_file: str = ".env") -> bool:
    """Ensure .env file is loaded into os.environ.

    Args:
        env_file: Path to .env file (relative or absolute)

    Returns:
        True if a .env file was loaded, False otherwise
    """
    global _dotenv_loaded

    if _dotenv_loaded:
        return True

    env_paths = [
        Path(env_file),
        Path.cwd() / env_file,
    ]

    for env_path in env_paths:
        if env_path.exists():
            load_dotenv(env_path, override=False)
            _dotenv_loaded = True
            return True

    # No .env file found, use the process environment as-is
    _dotenv_loaded = True
    return False


def load_environment(env_file: str = ".env") -> bool:
    """Load environment variables for configuration.

    Args:
        env_file: Path to .env file

    Returns:
        True if a .env file was loaded
    """
    return ensure_dotenv_loaded(env_file)


def reset_environment() -> None:
    """Forget that .env was loaded.

    Useful for testing or reloading after .env changes.
    """
    global _dotenv_loaded
    _dotenv_loaded = False
