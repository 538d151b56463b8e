"""Tests for text-transform exceptions."""

import pytest


class TestTextTransformExceptions:
    """Test custom exception types."""

    def test_base_error_message(self):
        """Test base TextTransformError with message only."""
        from text_transform.exceptions import TextTransformError

        error = TextTransformError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.remediation is None
        assert error.details is None
        assert str(error) == "Something went wrong"

    def test_base_error_with_remediation_and_details(self):
        """Test TextTransformError renders details and remediation."""
        from text_transform.exceptions import TextTransformError

        error = TextTransformError("Broken", remediation="Try again", details="timeout")
        assert str(error) == "Broken\nDetails: timeout\nTo fix: Try again"

    def test_catalog_error_source(self):
        """Test CatalogError points at its source file."""
        from text_transform.exceptions import CatalogError

        error = CatalogError("Bad tool", source="tools/ciphers.yaml")
        assert error.source == "tools/ciphers.yaml"
        assert "To fix: Check the catalog definitions in tools/ciphers.yaml" in str(error)

    def test_registry_errors(self):
        """Test function registry errors carry the name."""
        from text_transform.exceptions import (
            DuplicateFunctionError,
            FunctionRegistryError,
            RegistryFrozenError,
        )

        duplicate = DuplicateFunctionError("rot13")
        frozen = RegistryFrozenError("rot13")
        assert duplicate.name == frozen.name == "rot13"
        assert isinstance(duplicate, FunctionRegistryError)
        assert isinstance(frozen, FunctionRegistryError)
        assert "rot13" in duplicate.message

    def test_tool_unavailable(self):
        """Test ToolUnavailableError names the tool and function."""
        from text_transform.exceptions import ToolUnavailableError

        error = ToolUnavailableError("rot13", "rot13Fn")
        assert error.message == "Tool 'rot13' is not available"
        assert "rot13Fn" in error.details

    def test_input_too_large(self):
        """Test the size limit message uses thousands separators."""
        from text_transform.exceptions import InputTooLargeError

        error = InputTooLargeError(150_000, 100_000)
        assert error.message == "Input exceeds maximum size of 100,000 characters"
        assert error.details == "150,000 characters"

    def test_config_error(self):
        """Test ConfigError with config key."""
        from text_transform.exceptions import ConfigError

        error = ConfigError("Invalid port", config_key="TXTX_API_PORT")
        assert error.config_key == "TXTX_API_PORT"
        assert "TXTX_API_PORT" in str(error)

    @pytest.mark.parametrize("count,expected", [
        (2, "a0, a1"),
        (7, "a0, a1, a2, a3, a4 and 2 more"),
    ])
    def test_format_problems(self, count, expected):
        """Test long problem lists are truncated."""
        from text_transform.exceptions import format_problems

        assert format_problems([f"a{i}" for i in range(count)]) == expected

    def test_all_inherit_from_base(self):
        """Test every error can be caught as TextTransformError."""
        from text_transform.exceptions import (
            CatalogError,
            CommandError,
            ConfigError,
            InputTooLargeError,
            TextTransformError,
            ToolUnavailableError,
        )

        for error_type in (CatalogError, CommandError, ConfigError, InputTooLargeError, ToolUnavailableError):
            assert issubclass(error_type, TextTransformError)
