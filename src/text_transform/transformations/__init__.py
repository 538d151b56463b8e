"""
Transform function library.

Plain functions grouped by category. Each takes the input text first; extra
parameters are keyword arguments with defaults. Registry adapters in
``text_transform.functions`` give them one uniform calling contract.
"""

from text_transform.transformations import (
    ciphers,
    colors,
    converters,
    crypto,
    encoding,
    formatters,
    generators,
    naming_conventions,
)

__all__ = [
    "ciphers",
    "colors",
    "converters",
    "crypto",
    "encoding",
    "formatters",
    "generators",
    "naming_conventions",
]
