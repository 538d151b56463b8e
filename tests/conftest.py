"""Shared fixtures for text-transform tests."""

import asyncio

import pytest

from text_transform.runner import build_toolkit


@pytest.fixture(scope="session")
def toolkit():
    """Registries built from the packaged catalog."""
    return build_toolkit()


@pytest.fixture(scope="session")
def registry(toolkit):
    return toolkit.tools


@pytest.fixture(scope="session")
def functions(toolkit):
    return toolkit.functions


@pytest.fixture
def call(functions):
    """Resolve a function by name and call it, awaiting coroutine results."""

    def _call(name, text="", options=None):
        result = functions.resolve(name)(text, options)
        if asyncio.iscoroutine(result):
            result = asyncio.run(result)
        return result

    return _call


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's TXTX_* settings out of tests."""
    from text_transform.config import reset_settings

    for key in ("TXTX_DEBUG", "TXTX_MAX_INPUT_SIZE", "TXTX_API_HOST", "TXTX_API_PORT"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
