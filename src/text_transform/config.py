"""
Text Transform Configuration

Settings are read from the environment after an optional .env file has been
loaded with python-dotenv. Environment variables always win over .env values.

Usage:
    from text_transform.config import get_settings

    settings = get_settings()
    settings.max_input_size
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from text_transform.exceptions import ConfigError
from text_transform.logging_config import get_logger

logger = get_logger("config")

DEFAULT_MAX_INPUT_SIZE = 100_000
DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 8000


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the CLI and REST API."""

    debug: bool = False
    max_input_size: int = DEFAULT_MAX_INPUT_SIZE
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("true", "yes", "1", "on")


def _parse_positive_int(key: str, value: Optional[str], default: int) -> int:
    if value is None or value.strip() == "":
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        raise ConfigError(f"{key} must be an integer", config_key=key, details=f"Got {value!r}")
    if parsed <= 0:
        raise ConfigError(f"{key} must be positive", config_key=key, details=f"Got {parsed}")
    return parsed


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    env_file: Optional[Path] = None,
) -> Settings:
    """
    Build settings from environment variables.

    Args:
        env: Mapping to read instead of os.environ (used by tests)
        env_file: Explicit .env path; defaults to a .env in the working directory

    Returns:
        Settings instance.

    Raises:
        ConfigError: If a value cannot be parsed.
    """
    if env is None:
        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv()
        env = os.environ

    port = _parse_positive_int("TXTX_API_PORT", env.get("TXTX_API_PORT"), DEFAULT_API_PORT)
    if port > 65535:
        raise ConfigError("TXTX_API_PORT must be a valid TCP port", config_key="TXTX_API_PORT")

    settings = Settings(
        debug=_parse_bool(env.get("TXTX_DEBUG")),
        max_input_size=_parse_positive_int(
            "TXTX_MAX_INPUT_SIZE", env.get("TXTX_MAX_INPUT_SIZE"), DEFAULT_MAX_INPUT_SIZE
        ),
        api_host=(env.get("TXTX_API_HOST") or DEFAULT_API_HOST).strip(),
        api_port=port,
    )
    logger.debug("Loaded settings: %s", settings)
    return settings


# Singleton instance
_settings: Optional[Settings] = None


def get_settings(force_reload: bool = False) -> Settings:
    """Get the settings singleton."""
    global _settings

    if _settings is None or force_reload:
        _settings = load_settings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (for testing)."""
    global _settings
    _settings = None
