"""Tests for the txtx CLI."""

import json
import subprocess
import sys

import pytest
from click.testing import CliRunner

from text_transform.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCLI:
    """Test CLI entry points and basic functionality."""

    def test_version(self):
        """Test --version flag."""
        result = subprocess.run(
            [sys.executable, "-m", "text_transform.cli", "--version"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "version" in result.stdout.lower()

    def test_help(self):
        """Test --help flag."""
        result = subprocess.run(
            [sys.executable, "-m", "text_transform.cli", "--help"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        for command in ("list", "search", "info", "tool", "run", "commands", "serve"):
            assert command in result.stdout

    def test_run_help(self, runner):
        """Test run --help."""
        result = runner.invoke(main, ["run", "--help"])
        assert result.exit_code == 0
        assert "--key" in result.output
        assert "--shift" in result.output


class TestBrowse:
    """Test listing, searching and describing tools."""

    def test_list_json(self, runner):
        """Test list --json groups tools by category slug."""
        result = runner.invoke(main, ["list", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data) == 8
        assert sum(len(tools) for tools in data.values()) == 105
        assert "rot13" in [tool["id"] for tool in data["ciphers"]]

    def test_list_one_category(self, runner):
        """Test --category limits the listing."""
        result = runner.invoke(main, ["list", "-c", "ciphers", "--json"])
        assert result.exit_code == 0
        assert list(json.loads(result.output)) == ["ciphers"]

    def test_list_unknown_category(self, runner):
        """Test an unknown category exits with an error."""
        result = runner.invoke(main, ["list", "-c", "nope"])
        assert result.exit_code == 1
        assert "Unknown category 'nope'" in result.output

    def test_categories(self, runner):
        """Test the categories table."""
        result = runner.invoke(main, ["categories"])
        assert result.exit_code == 0
        assert "encoding" in result.output

    def test_search(self, runner):
        """Test search finds matching tools."""
        result = runner.invoke(main, ["search", "spoiler"])
        assert result.exit_code == 0
        assert "rot13" in result.output

    def test_search_no_results(self, runner):
        """Test search reports no matches."""
        result = runner.invoke(main, ["search", "zzzzzz"])
        assert result.exit_code == 0
        assert "No tools match 'zzzzzz'" in result.output

    def test_info_json(self, runner):
        """Test info --json dumps the tool record."""
        result = runner.invoke(main, ["info", "ciphers", "caesar-encode", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["transform_fn"] == "caesarEncode"
        assert data["options"][0]["key"] == "shift"

    def test_info_unknown(self, runner):
        """Test info on an unknown tool exits with an error."""
        result = runner.invoke(main, ["info", "ciphers", "nope"])
        assert result.exit_code == 1
        assert "Unknown tool 'ciphers/nope'" in result.output


class TestToolCommand:
    """Test running catalog tools from the CLI."""

    def test_positional_input(self, runner):
        """Test words are joined into the input."""
        result = runner.invoke(main, ["tool", "naming-conventions", "to-camel-case", "hello", "world"])
        assert result.exit_code == 0
        assert result.output.strip() == "helloWorld"

    def test_stdin_input(self, runner):
        """Test piped input is read when no text is given."""
        result = runner.invoke(main, ["tool", "ciphers", "rot13"], input="Hello\n")
        assert result.exit_code == 0
        assert result.output.strip() == "Uryyb"

    def test_options(self, runner):
        """Test -o key=value options are typed and passed through."""
        result = runner.invoke(main, ["tool", "ciphers", "caesar-encode", "-o", "shift=1", "-i", "abc"])
        assert result.exit_code == 0
        assert result.output.strip() == "bcd"

    def test_unknown_option(self, runner):
        """Test undeclared options are rejected."""
        result = runner.invoke(main, ["tool", "ciphers", "rot13", "-o", "shift=1", "-i", "abc"])
        assert result.exit_code == 1
        assert "Unknown option 'shift'" in result.output

    def test_bad_number(self, runner):
        """Test number options must parse."""
        result = runner.invoke(main, ["tool", "ciphers", "caesar-encode", "-o", "shift=lots", "-i", "abc"])
        assert result.exit_code == 1
        assert "expects a number" in result.output

    def test_missing_required_option(self, runner):
        """Test required options must be supplied."""
        result = runner.invoke(main, ["tool", "crypto", "generate-hmac-sha256", "-i", "msg"])
        assert result.exit_code == 1
        assert "Missing required option(s): key" in result.output

    def test_generator_without_input(self, runner):
        """Test generators run with no input."""
        result = runner.invoke(main, ["tool", "crypto", "generate-uuid-v4"])
        assert result.exit_code == 0
        assert len(result.output.strip()) == 36

    def test_no_input(self, runner):
        """Test transformations require input."""
        result = runner.invoke(main, ["tool", "ciphers", "rot13"])
        assert result.exit_code == 1
        assert "No input provided" in result.output

    def test_input_too_large(self, runner, monkeypatch):
        """Test the configured size limit is enforced."""
        monkeypatch.setenv("TXTX_MAX_INPUT_SIZE", "5")
        result = runner.invoke(main, ["tool", "ciphers", "rot13", "-i", "abcdefgh"])
        assert result.exit_code == 1
        assert "maximum size of 5 characters" in result.output

    def test_unknown_tool(self, runner):
        """Test unknown tools exit with an error."""
        result = runner.invoke(main, ["tool", "ciphers", "nope", "-i", "x"])
        assert result.exit_code == 1
        assert "Unknown tool 'ciphers/nope'" in result.output


class TestRunCommand:
    """Test short commands from the CLI."""

    def test_simple(self, runner):
        """Test a single-function command."""
        result = runner.invoke(main, ["run", "camel", "hello world"])
        assert result.exit_code == 0
        assert result.output.strip() == "helloWorld"

    def test_subcommand(self, runner):
        """Test the second word selects a subcommand."""
        result = runner.invoke(main, ["run", "base64", "decode", "aGVsbG8="])
        assert result.exit_code == 0
        assert result.output.strip() == "hello"

    def test_word_that_is_not_a_subcommand(self, runner):
        """Test words that are not subcommands are input."""
        result = runner.invoke(main, ["run", "base64", "hello"])
        assert result.exit_code == 0
        assert result.output.strip() == "aGVsbG8="

    def test_shift_flag(self, runner):
        """Test --shift reaches the cipher."""
        result = runner.invoke(main, ["run", "caesar", "decode", "-s", "1", "bcd"])
        assert result.exit_code == 0
        assert result.output.strip() == "abc"

    def test_key_flag(self, runner):
        """Test --key reaches keyed commands."""
        result = runner.invoke(main, ["run", "vigenere", "-k", "KEY", "HELLO"])
        assert result.exit_code == 0
        assert result.output.strip() == "RIJVS"

    def test_generator(self, runner):
        """Test generator commands run without input."""
        result = runner.invoke(main, ["run", "password", "20"])
        assert result.exit_code == 0
        assert len(result.output.rstrip("\n")) == 20

    def test_no_input(self, runner):
        """Test non-generator commands require input."""
        result = runner.invoke(main, ["run", "camel"])
        assert result.exit_code == 1
        assert "No input provided" in result.output

    def test_unknown_command(self, runner):
        """Test unknown commands exit with an error."""
        result = runner.invoke(main, ["run", "nope", "x"])
        assert result.exit_code == 1
        assert "Unknown command 'nope'" in result.output

    def test_commands_listing(self, runner):
        """Test the grouped command listing."""
        result = runner.invoke(main, ["commands"])
        assert result.exit_code == 0
        assert "Encoding:" in result.output
        assert "base64 [encode|decode]" in result.output
