"""Tests for tool dispatch."""

import asyncio

import pytest

from text_transform.exceptions import InputTooLargeError, ToolUnavailableError
from text_transform.functions import FunctionRegistry
from text_transform.runner import (
    Toolkit,
    check_input_size,
    missing_required_options,
    resolve_options,
    run_function,
    run_function_sync,
    run_tool,
    run_tool_sync,
)


class TestRunTool:
    """Test running catalog tools end to end."""

    def test_rot13_round_trip(self, toolkit):
        """Test the documented ROT13 example."""
        tool = toolkit.tools.get_tool("ciphers", "rot13")
        encoded = run_tool_sync(toolkit, tool, "Hello")
        assert encoded == "Uryyb"
        assert run_tool_sync(toolkit, tool, encoded) == "Hello"

    def test_reverse_function_inverts(self, toolkit):
        """Test a tool's reverse function undoes it."""
        tool = toolkit.tools.get_tool_by_id("base64-encode")
        encoded = run_tool_sync(toolkit, tool, "round trip")
        reverse = toolkit.functions.resolve(tool.reverse_fn)
        assert reverse(encoded) == "round trip"

    def test_defaults_apply(self, toolkit):
        """Test declared defaults are used when no options are given."""
        tool = toolkit.tools.get_tool_by_id("caesar-encode")
        assert run_tool_sync(toolkit, tool, "abc") == "def"
        assert run_tool_sync(toolkit, tool, "abc", {"shift": 1}) == "bcd"

    def test_async_tool(self, toolkit):
        """Test awaitable results are awaited."""
        tool = toolkit.tools.get_tool_by_id("md5-hash")
        result = asyncio.run(run_tool(toolkit, tool, "hello"))
        assert result == "5d41402abc4b2a76b9719d911017c592"

    def test_generator_needs_no_input(self, toolkit):
        """Test generators run on empty input."""
        tool = toolkit.tools.get_tool_by_id("generate-uuid-v4")
        assert len(run_tool_sync(toolkit, tool)) == 36

    def test_unregistered_function(self, toolkit):
        """Test a tool whose function is missing raises ToolUnavailableError."""
        empty = Toolkit(tools=toolkit.tools, functions=FunctionRegistry())
        tool = toolkit.tools.get_tool_by_id("rot13")
        with pytest.raises(ToolUnavailableError) as exc_info:
            run_tool_sync(empty, tool, "Hello")
        assert exc_info.value.tool_id == "rot13"
        assert exc_info.value.function_name == "rot13"


class TestRunFunction:
    """Test running functions by registry name."""

    def test_known_name(self, functions):
        """Test a registered name runs."""
        assert run_function_sync(functions, "toSnakeCase", "helloWorld") == "hello_world"

    def test_unknown_name(self, functions):
        """Test an unknown name yields None."""
        assert asyncio.run(run_function(functions, "nope", "x")) is None


class TestOptions:
    """Test option resolution and validation helpers."""

    def test_resolve_overlays_defaults(self, registry):
        """Test supplied options override declared defaults."""
        tool = registry.get_tool_by_id("caesar-encode")
        assert resolve_options(tool) == {"shift": 3}
        assert resolve_options(tool, {"shift": 7}) == {"shift": 7}

    def test_missing_required(self, registry):
        """Test options without a default must be supplied."""
        tool = registry.get_tool_by_id("generate-hmac-sha256")
        assert missing_required_options(tool) == ["key"]
        assert missing_required_options(tool, {"key": ""}) == ["key"]
        assert missing_required_options(tool, {"key": "secret"}) == []

    def test_no_required_options(self, registry):
        """Test tools with defaults for everything never report missing options."""
        assert missing_required_options(registry.get_tool_by_id("rot13")) == []

    def test_input_size(self):
        """Test the input size guard."""
        check_input_size("abc", 3)
        with pytest.raises(InputTooLargeError) as exc_info:
            check_input_size("abcd", 3)
        assert exc_info.value.size == 4
        assert exc_info.value.max_size == 3
