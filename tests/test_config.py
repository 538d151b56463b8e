"""Tests for settings and logging configuration."""

import logging

import pytest

from text_transform.config import (
    DEFAULT_MAX_INPUT_SIZE,
    get_settings,
    load_settings,
    reset_settings,
)
from text_transform.exceptions import ConfigError


class TestLoadSettings:
    """Test reading settings from an environment mapping."""

    def test_defaults(self):
        """Test an empty environment gives the defaults."""
        settings = load_settings(env={})
        assert settings.debug is False
        assert settings.max_input_size == DEFAULT_MAX_INPUT_SIZE
        assert settings.api_host == "127.0.0.1"
        assert settings.api_port == 8000

    def test_values(self):
        """Test values are parsed from strings."""
        settings = load_settings(env={
            "TXTX_DEBUG": "yes",
            "TXTX_MAX_INPUT_SIZE": "500",
            "TXTX_API_HOST": " 0.0.0.0 ",
            "TXTX_API_PORT": "9000",
        })
        assert settings.debug is True
        assert settings.max_input_size == 500
        assert settings.api_host == "0.0.0.0"
        assert settings.api_port == 9000

    @pytest.mark.parametrize("key,value", [
        ("TXTX_MAX_INPUT_SIZE", "lots"),
        ("TXTX_MAX_INPUT_SIZE", "0"),
        ("TXTX_API_PORT", "-1"),
        ("TXTX_API_PORT", "70000"),
    ])
    def test_invalid_values(self, key, value):
        """Test bad values raise ConfigError naming the variable."""
        with pytest.raises(ConfigError) as exc_info:
            load_settings(env={key: value})
        assert exc_info.value.config_key == key

    def test_env_file(self, tmp_path, monkeypatch):
        """Test a .env file is loaded."""
        env_file = tmp_path / ".env"
        env_file.write_text("TXTX_MAX_INPUT_SIZE=42\n")
        monkeypatch.delenv("TXTX_MAX_INPUT_SIZE", raising=False)
        settings = load_settings(env_file=env_file)
        assert settings.max_input_size == 42


class TestSettingsSingleton:
    """Test the cached settings instance."""

    def test_cached_until_reset(self, monkeypatch):
        """Test get_settings caches and reset_settings clears."""
        monkeypatch.setenv("TXTX_MAX_INPUT_SIZE", "10")
        first = get_settings()
        assert first.max_input_size == 10
        monkeypatch.setenv("TXTX_MAX_INPUT_SIZE", "20")
        assert get_settings() is first
        assert get_settings(force_reload=True).max_input_size == 20
        reset_settings()
        assert get_settings().max_input_size == 20


class TestLogging:
    """Test logging helpers."""

    def test_logger_namespace(self):
        """Test loggers live under the package namespace."""
        from text_transform.logging_config import get_logger

        assert get_logger("runner").name == "text_transform.runner"
        assert get_logger("text_transform.api").name == "text_transform.api"

    def test_setup_logging_level(self):
        """Test setup_logging sets the level and one console handler."""
        from text_transform.logging_config import setup_logging

        logger = setup_logging(logging.INFO)
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        logger = setup_logging(logging.DEBUG, quiet=True)
        assert logger.handlers == []

    def test_truncating_formatter(self):
        """Test long messages are shortened."""
        from text_transform.logging_config import TruncatingFormatter

        formatter = TruncatingFormatter("%(message)s", max_length=10)
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "x" * 25, None, None)
        assert formatter.format(record) == "x" * 10 + "... [15 more chars]"
