"""
Tool catalog: every tool record, in declaration order.

The catalog is assembled from independently declared sub-lists (one per
category file) and holds no indexes; lookups belong to the tool registry.
"""

from typing import Iterable, Iterator, Tuple

from text_transform.models import Tool


class ToolCatalog:
    """Immutable, ordered sequence of tools."""

    def __init__(self, tools: Iterable[Tool] = ()):
        self._tools: Tuple[Tool, ...] = tuple(tools)

    @classmethod
    def from_sources(cls, *sources: Iterable[Tool]) -> "ToolCatalog":
        """Concatenate sub-catalogs, preserving the order of each."""
        return cls(tool for source in sources for tool in source)

    @property
    def tools(self) -> Tuple[Tool, ...]:
        return self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools)

    def __repr__(self) -> str:
        return f"ToolCatalog({len(self)} tools)"
