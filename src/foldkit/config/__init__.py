"""
foldkit - Configuration Management

This module provides configuration management including:
- YAML configuration loading and validation
- Environment variable handling (.env files, FOLDKIT_* overrides)
- Configuration defaults and overrides
"""

from foldkit.config.environment import (
    ensure_dotenv_loaded,
    load_environment,
    reset_environment,
)
from foldkit.config.loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATHS,
    ENV_VAR_OVERRIDES,
    ConfigLoader,
    ConfigurationError,
    get_config,
    get_loader,
    load_config,
    load_config_from_env,
    reload_config,
    reset_config,
)
from foldkit.config.models import (
    FoldkitConfig,
    LoggingConfig,
    LogLevel,
    ReducersConfig,
    TraceConfig,
)

__all__ = [
    # Config models
    "LogLevel",
    "LoggingConfig",
    "TraceConfig",
    "ReducersConfig",
    "FoldkitConfig",
    # Loader
    "ConfigLoader",
    "ConfigurationError",
    "load_config",
    "load_config_from_env",
    "get_config",
    "reload_config",
    "reset_config",
    "get_loader",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATHS",
    "ENV_VAR_OVERRIDES",
    # Environment
    "load_environment",
    "ensure_dotenv_loaded",
    "reset_environment",
]
