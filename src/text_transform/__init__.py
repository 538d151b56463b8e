"""
Text Transform: developer text and data transformation tools

A catalog of 100+ pure transformations with one uniform calling contract.
"""

try:
    from importlib.metadata import version
    __version__ = version("text-transform")
except Exception:
    __version__ = "0.0.0"  # Fallback for development

__all__ = ["__version__"]
