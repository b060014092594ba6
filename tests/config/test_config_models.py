"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from foldkit.config.models import (
    FoldkitConfig,
    LoggingConfig,
    LogLevel,
    ReducersConfig,
    TraceConfig,
)


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self):
        config = LoggingConfig()

        assert config.level == LogLevel.WARNING
        assert config.file is None
        assert "%(message)s" in config.format

    def test_lowercase_level(self):
        assert LoggingConfig(level="debug").level == LogLevel.DEBUG

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestTraceConfig:
    """Tests for TraceConfig model."""

    def test_defaults(self):
        config = TraceConfig()

        assert config.enabled is False
        assert config.max_steps == 1000

    def test_max_steps_must_be_positive(self):
        with pytest.raises(ValidationError):
            TraceConfig(max_steps=0)


class TestReducersConfig:
    """Tests for ReducersConfig model."""

    def test_default(self):
        assert ReducersConfig().default == "add"

    def test_strips_name(self):
        assert ReducersConfig(default=" max ").default == "max"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ReducersConfig(default="  ")


class TestFoldkitConfig:
    """Tests for the root configuration."""

    def test_all_defaults(self):
        config = FoldkitConfig()

        assert config.debug is False
        assert config.logging == LoggingConfig()
        assert config.trace == TraceConfig()

    def test_nested_dicts(self):
        config = FoldkitConfig(trace={"enabled": True}, reducers={"default": "count"})

        assert config.trace.enabled is True
        assert config.reducers.default == "count"

    def test_to_yaml_dict(self):
        data = FoldkitConfig().to_yaml_dict()

        assert data["logging"]["level"] == "WARNING"
        assert "file" not in data["logging"]
        assert data["trace"]["max_steps"] == 1000
