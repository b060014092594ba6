"""
Configuration Data Models.

Defines all configuration schemas using Pydantic for validation
and type safety.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level for the foldkit logger
        format: Log record format string
        file: Optional file to also write logs to
    """

    level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging level",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    file: str | None = Field(
        default=None,
        description="Log file path (optional)",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.upper()
        return v


class TraceConfig(BaseModel):
    """Configuration for traced reductions.

    Attributes:
        enabled: Show traces by default in the CLI
        max_steps: Maximum steps recorded per trace
    """

    enabled: bool = Field(
        default=False,
        description="Trace reductions by default",
    )
    max_steps: int = Field(
        default=1000,
        ge=1,
        description="Maximum recorded steps per trace",
    )


class ReducersConfig(BaseModel):
    """Configuration for reducer selection.

    Attributes:
        default: Reducer used when none is named
    """

    default: str = Field(
        default="add",
        description="Default reducer name",
    )

    @field_validator("default")
    @classmethod
    def validate_default(cls, v: str) -> str:
        """Validate that the reducer name is not empty."""
        if not v.strip():
            raise ValueError("Default reducer name cannot be empty")
        return v.strip()


class FoldkitConfig(BaseModel):
    """Root configuration.

    Attributes:
        logging: Logging configuration
        trace: Trace configuration
        reducers: Reducer selection
        debug: Enable debug mode
    """

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
    trace: TraceConfig = Field(
        default_factory=TraceConfig,
        description="Trace configuration",
    )
    reducers: ReducersConfig = Field(
        default_factory=ReducersConfig,
        description="Reducer selection",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-friendly dictionary.

        Returns:
            Dict suitable for YAML serialization
        """
        return self.model_dump(mode="json", exclude_none=True)
