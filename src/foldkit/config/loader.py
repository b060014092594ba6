"""
Configuration Loader.

Reads ``foldkit.yaml``, expands ``${VAR}`` references, applies ``FOLDKIT_*``
environment overrides and validates the result as a ``FoldkitConfig``.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from foldkit.config.environment import load_environment
from foldkit.config.models import FoldkitConfig

logger = logging.getLogger(__name__)

# Default configuration file locations, searched in order
DEFAULT_CONFIG_PATHS = [
    "foldkit.yaml",
    "foldkit.yml",
    ".foldkit.yaml",
    ".foldkit.yml",
]

# Environment variable for config path
CONFIG_ENV_VAR = "FOLDKIT_CONFIG"

# Environment variable -> (section, key); a None section is a top-level key
ENV_VAR_OVERRIDES = {
    "FOLDKIT_LOG_LEVEL": ("logging", "level"),
    "FOLDKIT_LOG_FILE": ("logging", "file"),
    "FOLDKIT_TRACE_ENABLED": ("trace", "enabled"),
    "FOLDKIT_TRACE_MAX_STEPS": ("trace", "max_steps"),
    "FOLDKIT_DEFAULT_REDUCER": ("reducers", "default"),
    "FOLDKIT_DEBUG": (None, "debug"),
}

# ${VAR}, ${VAR:-default} or ${VAR:default}
ENV_PATTERN = re.compile(r"\$\{(\w+)(?::-?([^}]*))?\}")

MAX_REPORTED_ERRORS = 5


class ConfigurationError(Exception):
    """Raised when configuration is invalid.

    Attributes:
        errors: Pydantic error dicts, if validation failed
        path: Config file the error came from, if any
    """

    def __init__(
        self,
        message: str,
        errors: list[dict] | None = None,
        path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []
        self.path = path

    def __str__(self) -> str:
        lines = [super().__str__() + (f" (file: {self.path})" if self.path else "")]
        for err in self.errors[:MAX_REPORTED_ERRORS]:
            field = ".".join(str(part) for part in err.get("loc", ()))
            lines.append(f"  - {field}: {err.get('msg', 'Unknown error')}")
        hidden = len(self.errors) - MAX_REPORTED_ERRORS
        if hidden > 0:
            lines.append(f"  ... and {hidden} more errors")
        return "\n".join(lines)


def coerce_scalar(value: str) -> Any:
    """Read an environment string the way YAML would read a scalar.

    "" becomes None, "true"/"off" become booleans and numbers become
    int or float. Anything that would parse as a collection stays a string.
    """
    if value == "":
        return None
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        return value
    if isinstance(parsed, (bool, int, float)):
        return parsed
    return value


def expand_env(value: str) -> Any:
    """Expand ``${VAR}`` references in a config string.

    A value that is exactly one reference takes the type of the resolved
    text; references inside longer strings are substituted as text.
    Unresolved references without a default are left untouched.
    """

    def lookup(match: re.Match[str]) -> str | None:
        return os.environ.get(match.group(1), match.group(2))

    whole = ENV_PATTERN.fullmatch(value)
    if whole:
        resolved = lookup(whole)
        return value if resolved is None else coerce_scalar(resolved)

    def replace(match: re.Match[str]) -> str:
        resolved = lookup(match)
        return match.group(0) if resolved is None else resolved

    return ENV_PATTERN.sub(replace, value)


def _prepare(data: Any) -> Any:
    """Expand env references and drop None entries so model defaults apply."""
    if isinstance(data, dict):
        prepared = {key: _prepare(item) for key, item in data.items()}
        return {key: item for key, item in prepared.items() if item is not None}
    if isinstance(data, list):
        return [_prepare(item) for item in data]
    if isinstance(data, str):
        return expand_env(data)
    return data


class ConfigLoader:
    """Loads ``FoldkitConfig`` from YAML and the environment.

    Usage:
        config = ConfigLoader("foldkit.yaml").load()

        # Discover from FOLDKIT_CONFIG, default file names, or defaults
        loader = ConfigLoader()
        config = loader.load_from_env()
        config = loader.reload()
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        env_file: str = ".env",
    ) -> None:
        self._config_path = Path(config_path) if config_path else None
        self._env_file = env_file
        self._config: FoldkitConfig | None = None
        self._loaded = False

    @property
    def loaded_from_path(self) -> Path | None:
        """File the current configuration came from, None for defaults."""
        return self._config_path if self._loaded else None

    def get(self) -> FoldkitConfig:
        """Get the loaded configuration.

        Raises:
            RuntimeError: If configuration has not been loaded yet.
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() or load_from_env() first.")
        return self._config

    def load(self, path: str | Path | None = None) -> FoldkitConfig:
        """Load and validate configuration.

        Args:
            path: Config file, overriding the one given at construction.
                With no file at all, defaults plus environment overrides
                are used.

        Raises:
            ConfigurationError: If config is invalid
            FileNotFoundError: If config file not found
        """
        if path is not None:
            self._config_path = Path(path)

        load_environment(self._env_file)

        raw = self._read_file() if self._config_path else {}
        data = _prepare(raw)
        self._apply_env_overrides(data)

        try:
            self._config = FoldkitConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e.error_count()} errors",
                errors=e.errors(),
                path=self._config_path,
            ) from e

        self._loaded = True
        logger.debug("Loaded configuration from %s", self._config_path or "defaults")
        return self._config

    def load_from_env(self) -> FoldkitConfig:
        """Discover and load configuration.

        Search order: the FOLDKIT_CONFIG variable, the default file names
        in the working directory, then built-in defaults.

        Raises:
            ConfigurationError: If config is invalid
            FileNotFoundError: If FOLDKIT_CONFIG names a missing file
        """
        load_environment(self._env_file)

        env_config_path = os.environ.get(CONFIG_ENV_VAR)
        if env_config_path:
            if not Path(env_config_path).exists():
                raise FileNotFoundError(
                    f"Config file specified by {CONFIG_ENV_VAR} not found: {env_config_path}"
                )
            self._config_path = Path(env_config_path)
        else:
            self._config_path = next(
                (Path(p) for p in DEFAULT_CONFIG_PATHS if Path(p).exists()),
                None,
            )

        return self.load()

    def reload(self) -> FoldkitConfig:
        """Load again from the same source, picking up file and env changes.

        Raises:
            RuntimeError: If nothing was loaded and no path was given
        """
        if not self._loaded and self._config_path is None:
            raise RuntimeError(
                "Cannot reload: no configuration loaded. Call load() or load_from_env() first."
            )
        self._config = None
        return self.load()

    def save(self, path: str | Path | None = None) -> None:
        """Write the current configuration as YAML.

        Raises:
            ValueError: If no config loaded or no path specified
        """
        if self._config is None:
            raise ValueError("No configuration loaded")

        save_path = Path(path) if path else self._config_path
        if save_path is None:
            raise ValueError("No path specified for saving")

        with open(save_path, "w") as f:
            yaml.safe_dump(self._config.to_yaml_dict(), f, default_flow_style=False, sort_keys=False)

    def _read_file(self) -> dict[str, Any]:
        if not self._config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self._config_path}")

        try:
            with open(self._config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", path=self._config_path) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config root must be a mapping, got {type(data).__name__}",
                path=self._config_path,
            )
        return data

    @staticmethod
    def _apply_env_overrides(data: dict[str, Any]) -> None:
        for env_var, (section, key) in ENV_VAR_OVERRIDES.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if section is None:
                target = data
            else:
                if not isinstance(data.get(section), dict):
                    data[section] = {}
                target = data[section]
            target[key] = coerce_scalar(env_value)


# Global loader instance for caching
_global_loader: ConfigLoader | None = None
_global_config: FoldkitConfig | None = None


def load_config(
    config_path: str | Path | None = None,
    env_file: str = ".env",
) -> FoldkitConfig:
    """Load configuration from file and make it the global configuration."""
    global _global_loader, _global_config

    _global_loader = ConfigLoader(config_path, env_file)
    _global_config = _global_loader.load()
    return _global_config


def load_config_from_env(env_file: str = ".env") -> FoldkitConfig:
    """Discover and load configuration, making it the global configuration."""
    global _global_loader, _global_config

    _global_loader = ConfigLoader(env_file=env_file)
    _global_config = _global_loader.load_from_env()
    return _global_config


def get_config() -> FoldkitConfig:
    """Get the global configuration.

    Raises:
        RuntimeError: If configuration not loaded
    """
    if _global_config is None:
        raise RuntimeError(
            "Configuration not loaded. Call load_config() or load_config_from_env() first."
        )
    return _global_config


def reload_config() -> FoldkitConfig:
    """Reload the global configuration from its original source.

    Raises:
        RuntimeError: If no configuration was previously loaded
    """
    global _global_config

    if _global_loader is None:
        raise RuntimeError(
            "Cannot reload: no configuration loaded. "
            "Call load_config() or load_config_from_env() first."
        )

    _global_config = _global_loader.reload()
    return _global_config


def reset_config() -> None:
    """Reset global configuration. Useful for testing."""
    global _global_loader, _global_config
    _global_loader = None
    _global_config = None


def get_loader() -> ConfigLoader | None:
    """Get the global config loader instance, if any."""
    return _global_loader
