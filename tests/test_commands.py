"""Tests for short commands."""

import asyncio

import pytest

from text_transform.commands import (
    COMMANDS,
    GROUP_ORDER,
    InputOption,
    execute_command,
    find_unresolved_commands,
    get_command,
    get_commands_by_group,
    list_commands,
)
from text_transform.exceptions import CommandError


def run(functions, *args, **kwargs):
    return asyncio.run(execute_command(functions, *args, **kwargs))


class TestCommandTable:
    """Test the command table itself."""

    def test_every_function_registered(self, functions):
        """Test each command and subcommand maps to a registered function."""
        assert find_unresolved_commands(functions) == []

    def test_lookup(self):
        """Test commands are found by name."""
        assert get_command("camel").function == "toCamelCase"
        assert get_command("nope") is None

    def test_list_is_sorted(self):
        """Test list_commands sorts by name."""
        names = [command.name for command in list_commands()]
        assert names == sorted(names)
        assert len(names) == len(COMMANDS)

    def test_groups(self):
        """Test grouping follows the display order."""
        grouped = get_commands_by_group()
        assert list(grouped) == list(GROUP_ORDER)
        assert "base64" in [command.name for command in grouped["encoding"]]

    def test_subcommands(self):
        """Test subcommand resolution and defaults."""
        base64 = get_command("base64")
        assert base64.function_for() == "base64Encode"
        assert base64.function_for("decode") == "base64Decode"
        assert get_command("timestamp").function_for("tounix") == "dateToUnixTimestamp"

    def test_unknown_subcommand(self):
        """Test an undefined subcommand raises CommandError."""
        with pytest.raises(CommandError, match="Unknown subcommand: sideways for command: base64"):
            get_command("base64").function_for("sideways")

    def test_usage_hint(self):
        """Test usage hints list the subcommands."""
        assert get_command("base64").usage_hint() == "Use: txtx run base64 [encode|decode] <input>"
        assert get_command("camel").usage_hint() == "Use: txtx run camel <input>"


class TestBuildOptions:
    """Test how flags and positional input become options."""

    def test_flag_defaults(self):
        """Test keyed commands fall back to the default key."""
        assert get_command("xor").build_options("abc") == {"key": "key"}
        assert get_command("xor").build_options("abc", key="k") == {"key": "k"}

    def test_unset_flag_is_omitted(self):
        """Test flags without a default are left out when not given."""
        assert get_command("caesar").build_options("abc") == {}
        assert get_command("caesar").build_options("abc", shift=5) == {"shift": 5}

    def test_input_option(self):
        """Test generators read an option from the positional input."""
        assert get_command("password").build_options("24") == {"length": 24}
        assert get_command("password").build_options("lots") == {}
        assert get_command("randstr").build_options("") == {"length": 16}

    def test_input_option_parse(self):
        """Test positional parsing by type."""
        assert InputOption("size", int).parse(" 8 ") == 8
        assert InputOption("size", int).parse("x") is None
        assert InputOption("prefix").parse("pk") == "pk"
        assert InputOption("prefix").parse("  ") is None


class TestExecuteCommand:
    """Test running commands."""

    def test_simple_command(self, functions):
        """Test a single-function command."""
        assert run(functions, "camel", text="hello world") == "helloWorld"

    def test_subcommand(self, functions):
        """Test a subcommand selects its function."""
        assert run(functions, "base64", "decode", "aGVsbG8=") == "hello"
        assert run(functions, "base64", text="hello") == "aGVsbG8="

    def test_shift_flag(self, functions):
        """Test the shift flag reaches the cipher."""
        assert run(functions, "caesar", text="abc", shift=1) == "bcd"
        assert run(functions, "caesar", "decode", "bcd", shift=1) == "abc"

    def test_fixed_options(self, functions):
        """Test commands with fixed options."""
        assert "requests.get(" in run(functions, "curl2py", text="curl https://example.com")

    def test_generator_input(self, functions):
        """Test generator commands with a positional value."""
        assert len(run(functions, "password", text="24")) == 24
        assert run(functions, "apikey", text="pk").startswith("pk_")

    def test_async_command(self, functions):
        """Test awaitable functions are awaited."""
        assert run(functions, "md5", text="hello") == "5d41402abc4b2a76b9719d911017c592"

    def test_structured_result_is_text(self, functions):
        """Test non-string results come back as strings."""
        assert '"hex": "#ff0000"' in run(functions, "parsecolor", text="#ff0000")

    def test_unknown_command(self, functions):
        """Test unknown commands raise CommandError."""
        with pytest.raises(CommandError, match="Unknown command 'nope'"):
            run(functions, "nope", text="x")
