"""
Text Transform Runner

The caller side of dynamic dispatch:

    1. resolve a Tool through the tool registry
    2. resolve ``tool.transform_fn`` through the function registry
    3. call ``fn(input, options)`` and await the result if it is awaitable

Usage:
    from text_transform.runner import get_toolkit, run_tool_sync

    toolkit = get_toolkit()
    tool = toolkit.tools.get_tool("ciphers", "rot13")
    run_tool_sync(toolkit, tool, "Hello")  # "Uryyb"
"""

import asyncio
import inspect
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional

from text_transform.catalog import load_catalog
from text_transform.exceptions import (
    CatalogError,
    InputTooLargeError,
    ToolUnavailableError,
    format_problems,
)
from text_transform.functions import FunctionRegistry, build_function_registry
from text_transform.logging_config import get_logger
from text_transform.models import Tool
from text_transform.registry import ToolRegistry

logger = get_logger("runner")


@dataclass(frozen=True)
class Toolkit:
    """The pair of registries a caller needs."""

    tools: ToolRegistry
    functions: FunctionRegistry


def build_toolkit(strict: bool = True) -> Toolkit:
    """Build registries from packaged data.

    Args:
        strict: Raise CatalogError if any tool names an unregistered function

    Returns:
        Toolkit instance.
    """
    categories, catalog = load_catalog()
    tools = ToolRegistry(categories, catalog)
    functions = build_function_registry()

    unresolved = tools.find_unresolved_functions(functions)
    if unresolved:
        problems = [f"{tool_id} -> {name}" for tool_id, name in unresolved]
        if strict:
            raise CatalogError(
                f"{len(unresolved)} tool function(s) are not registered",
                details=format_problems(problems),
                remediation="Register the missing functions in text_transform.functions",
            )
        logger.warning("Unregistered tool functions: %s", format_problems(problems))

    return Toolkit(tools=tools, functions=functions)


@lru_cache(maxsize=1)
def get_toolkit() -> Toolkit:
    """Get the shared default toolkit (built on first use)."""
    return build_toolkit()


def resolve_options(tool: Tool, supplied: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Declared option defaults overlaid with the caller's values."""
    options = tool.default_options()
    if supplied:
        options.update(supplied)
    return options


def missing_required_options(tool: Tool, supplied: Optional[Mapping[str, Any]] = None) -> List[str]:
    """Keys of required options (no default) absent from ``supplied``."""
    supplied = supplied or {}
    return [
        option.key for option in tool.options
        if option.required and supplied.get(option.key) in (None, "")
    ]


def check_input_size(text: str, max_size: int) -> None:
    """Raise InputTooLargeError if ``text`` is longer than ``max_size`` characters."""
    if len(text) > max_size:
        raise InputTooLargeError(len(text), max_size)


async def _invoke(fn: Any, text: str, options: Optional[Mapping[str, Any]]) -> str:
    result = fn(text, options)
    if inspect.isawaitable(result):
        result = await result
    return result


async def run_tool(
    toolkit: Toolkit,
    tool: Tool,
    text: str = "",
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Run ``tool`` on ``text`` with its defaults overlaid by ``options``.

    Raises:
        ToolUnavailableError: If the tool's function is not registered

    Exceptions raised by the transformation propagate unchanged.
    """
    fn = toolkit.functions.resolve(tool.transform_fn)
    if fn is None:
        raise ToolUnavailableError(tool.id, tool.transform_fn)
    return await _invoke(fn, text, resolve_options(tool, options))


def run_tool_sync(
    toolkit: Toolkit,
    tool: Tool,
    text: str = "",
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Synchronous wrapper around run_tool for callers without an event loop."""
    return asyncio.run(run_tool(toolkit, tool, text, options))


async def run_function(
    functions: FunctionRegistry,
    name: str,
    text: str = "",
    options: Optional[Mapping[str, Any]] = None,
) -> Optional[str]:
    """Run a function by registry name. Returns None if the name is unknown."""
    fn = functions.resolve(name)
    if fn is None:
        return None
    return await _invoke(fn, text, options)


def run_function_sync(
    functions: FunctionRegistry,
    name: str,
    text: str = "",
    options: Optional[Mapping[str, Any]] = None,
) -> Optional[str]:
    return asyncio.run(run_function(functions, name, text, options))
