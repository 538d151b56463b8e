"""
Text Transform Tool Registry

Read-only query layer over the category and tool catalogs. Indexes are
built once at construction; inconsistent catalog data (duplicate ids or
slugs, unknown categories) fails fast with CatalogError.

None of the lookups raise for absence: unknown ids and slugs yield None
or an empty list.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from text_transform.catalog import CategoryCatalog, ToolCatalog, load_catalog
from text_transform.exceptions import CatalogError, format_problems
from text_transform.functions import FunctionRegistry
from text_transform.logging_config import get_logger
from text_transform.models import (
    Category,
    CategoryWithCount,
    Tool,
    ToolSlugPair,
    ToolWithCategory,
)

logger = get_logger("registry")

# Curated showcase list, in display order
POPULAR_TOOL_IDS: Tuple[str, ...] = (
    "base64-encode",
    "json-to-yaml",
    "to-camel-case",
    "sha256-hash",
    "generate-password",
    "hex-to-rgb",
    "format-json",
    "rot13",
)

DEFAULT_RELATED_LIMIT = 5


class ToolRegistry:
    """Lookups, listings and search over the tool catalog."""

    def __init__(
        self,
        categories: CategoryCatalog,
        tools: Union[ToolCatalog, Sequence[Tool]],
        popular_ids: Iterable[str] = POPULAR_TOOL_IDS,
    ):
        self._categories = categories
        self._tools: Tuple[Tool, ...] = tuple(tools)
        self._popular_ids: Tuple[str, ...] = tuple(popular_ids)

        self._by_id: Dict[str, Tool] = {}
        self._by_slug: Dict[str, Tool] = {}
        self._by_category: Dict[str, List[Tool]] = {
            category_id: [] for category_id in categories.list_category_ids()
        }

        problems = []
        for tool in self._tools:
            if tool.id in self._by_id:
                problems.append(f"duplicate tool id '{tool.id}'")
                continue
            if tool.slug in self._by_slug:
                other = self._by_slug[tool.slug]
                problems.append(f"tool slug '{tool.slug}' used by both '{other.id}' and '{tool.id}'")
                continue
            if tool.category_id not in self._by_category:
                problems.append(f"tool '{tool.id}' references unknown category '{tool.category_id}'")
                continue
            self._by_id[tool.id] = tool
            self._by_slug[tool.slug] = tool
            self._by_category[tool.category_id].append(tool)

        if problems:
            raise CatalogError(
                f"Inconsistent tool catalog: {len(problems)} problem(s)",
                details=format_problems(problems),
                remediation="Fix the tool definitions so ids and slugs are unique and categories exist",
            )

        logger.debug(
            "Tool registry ready: %d tools in %d categories", len(self._tools), len(categories)
        )

    @classmethod
    def from_package_data(cls) -> "ToolRegistry":
        """Build a registry from the packaged YAML catalog."""
        categories, tools = load_catalog()
        return cls(categories, tools)

    @property
    def categories(self) -> CategoryCatalog:
        return self._categories

    # Lookup

    def get_tool_by_id(self, tool_id: str) -> Optional[Tool]:
        return self._by_id.get(tool_id)

    def get_tool_by_slug(self, slug: str) -> Optional[Tool]:
        """Tool slugs are globally unique, so this is unambiguous."""
        return self._by_slug.get(slug)

    def get_tool(self, category_slug: str, tool_slug: str) -> Optional[Tool]:
        """Resolve a (category slug, tool slug) address.

        Returns None if either slug is unknown or the tool lives in a
        different category.
        """
        category = self._categories.get_category_by_slug(category_slug)
        if category is None:
            return None
        tool = self._by_slug.get(tool_slug)
        if tool is None or tool.category_id != category.id:
            return None
        return tool

    def get_tool_with_category(self, tool_id: str) -> Optional[ToolWithCategory]:
        tool = self._by_id.get(tool_id)
        if tool is None:
            return None
        category = self._categories.get_category_by_id(tool.category_id)
        if category is None:
            return None
        return ToolWithCategory(**tool.model_dump(), category=category)

    # Listing

    def get_tools_by_category(self, category_id: str) -> List[Tool]:
        return list(self._by_category.get(category_id, ()))

    def get_tools_by_category_slug(self, category_slug: str) -> List[Tool]:
        category = self._categories.get_category_by_slug(category_slug)
        if category is None:
            return []
        return self.get_tools_by_category(category.id)

    def list_all_tools(self) -> List[Tool]:
        return list(self._tools)

    def list_all_categories(self) -> List[Category]:
        return list(self._categories)

    def list_categories_with_counts(self) -> List[CategoryWithCount]:
        return [
            CategoryWithCount(**category.model_dump(), tool_count=self.category_tool_count(category.id))
            for category in self._categories
        ]

    def total_tool_count(self) -> int:
        return len(self._tools)

    def category_tool_count(self, category_id: str) -> int:
        return len(self._by_category.get(category_id, ()))

    # Search and relations

    def search_tools(self, query: str) -> List[Tool]:
        """Case-insensitive AND search over name, description and keywords.

        Every whitespace-separated term must appear as a substring. A blank
        query matches nothing.
        """
        normalized = query.strip().lower()
        if not normalized:
            return []
        terms = normalized.split()
        return [
            tool for tool in self._tools
            if all(term in tool.search_text() for term in terms)
        ]

    def get_all_tool_slugs(self) -> List[ToolSlugPair]:
        """Every (category slug, tool slug) pair, for URL generation."""
        pairs = []
        for tool in self._tools:
            category = self._categories.get_category_by_id(tool.category_id)
            pairs.append(ToolSlugPair(
                category=category.slug if category else tool.category_id,
                tool=tool.slug,
            ))
        return pairs

    def get_related_tools(self, tool_id: str, limit: int = DEFAULT_RELATED_LIMIT) -> List[Tool]:
        """Other tools in the same category, in catalog order."""
        tool = self._by_id.get(tool_id)
        if tool is None or limit <= 0:
            return []
        related = [other for other in self._by_category[tool.category_id] if other.id != tool_id]
        return related[:limit]

    def get_popular_tools(self) -> List[Tool]:
        """Curated tools; ids missing from the catalog are skipped."""
        return [self._by_id[tool_id] for tool_id in self._popular_ids if tool_id in self._by_id]

    # Integrity

    def find_unresolved_functions(self, functions: FunctionRegistry) -> List[Tuple[str, str]]:
        """List (tool id, function name) pairs not registered in ``functions``.

        Covers both ``transform_fn`` and ``reverse_fn``.
        """
        missing = []
        for tool in self._tools:
            if not functions.has(tool.transform_fn):
                missing.append((tool.id, tool.transform_fn))
            if tool.reverse_fn and not functions.has(tool.reverse_fn):
                missing.append((tool.id, tool.reverse_fn))
        return missing

    def __len__(self) -> int:
        return len(self._tools)

    def __repr__(self) -> str:
        return f"ToolRegistry({len(self._tools)} tools, {len(self._categories)} categories)"
