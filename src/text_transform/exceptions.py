"""
Text Transform Exceptions

Custom exception types carrying remediation hints.

Lookups never raise for absence: a missing category, tool or function
name is returned as None. These exceptions cover defects in catalog data,
misuse of the function registry, and caller-side guards.
"""

from typing import List, Optional


class TextTransformError(Exception):
    """Base exception for all text-transform errors."""

    def __init__(
        self,
        message: str,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        """Initialize the error.

        Args:
            message: Human-readable error message
            remediation: Suggested fix
            details: Technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.remediation = remediation
        self.details = details

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.remediation:
            parts.append(f"To fix: {self.remediation}")
        return "\n".join(parts)


class CatalogError(TextTransformError):
    """Inconsistent or malformed catalog data."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.source = source
        if not remediation and source:
            remediation = f"Check the catalog definitions in {source}"
        super().__init__(message, remediation, details)


class FunctionRegistryError(TextTransformError):
    """Function registry misuse."""


class DuplicateFunctionError(FunctionRegistryError):
    """A transform function name was registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Transform function '{name}' is already registered",
            remediation="Give each registered function a unique name",
        )


class RegistryFrozenError(FunctionRegistryError):
    """Registration attempted after the registry was frozen."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Cannot register '{name}': the function registry is frozen",
            remediation="Register functions while building the registry, before freeze()",
        )


class ToolUnavailableError(TextTransformError):
    """A tool declares a transform function that is not registered."""

    def __init__(self, tool_id: str, function_name: str):
        self.tool_id = tool_id
        self.function_name = function_name
        super().__init__(
            f"Tool '{tool_id}' is not available",
            details=f"Transform function '{function_name}' is not registered",
        )


class CommandError(TextTransformError):
    """Unknown short command or subcommand."""

    def __init__(self, message: str, remediation: Optional[str] = None):
        super().__init__(message, remediation=remediation)


class InputTooLargeError(TextTransformError):
    """Input exceeds the configured size limit."""

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"Input exceeds maximum size of {max_size:,} characters",
            remediation="Split the input or raise TXTX_MAX_INPUT_SIZE",
            details=f"{size:,} characters",
        )


class ConfigError(TextTransformError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.config_key = config_key
        if not remediation and config_key:
            remediation = f"Check the value of '{config_key}' in your environment or .env"
        super().__init__(message, remediation, details)


def format_problems(problems: List[str], limit: int = 5) -> str:
    """Join problem descriptions, truncating long lists."""
    shown = ", ".join(problems[:limit])
    if len(problems) > limit:
        shown += f" and {len(problems) - limit} more"
    return shown
