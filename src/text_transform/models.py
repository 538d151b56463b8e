"""
Text Transform Catalog Models

Immutable records describing categories and tools. Tools declare *what*
they are (name, options, keywords) and name their implementation through
``transform_fn``; the callable itself lives in the function registry.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


OptionType = Literal["text", "number", "select", "checkbox"]


class Category(BaseModel):
    """A top-level grouping of tools."""

    id: str = Field(description="Stable category identifier")
    name: str = Field(description="Display name")
    description: str = Field(description="One-line summary")
    icon: str = Field(description="Short glyph shown next to the name")
    slug: str = Field(description="URL path segment")

    class Config:
        frozen = True


class SelectOption(BaseModel):
    """One choice of a select option."""

    label: str
    value: str

    class Config:
        frozen = True


class ToolOption(BaseModel):
    """
    A configurable parameter of a tool.

    The transform function receives the option under ``key`` inside its
    options mapping.
    """

    key: str = Field(description="Key in the options mapping")
    label: str = Field(description="Display label")
    type: OptionType = Field(description="Input widget type")
    default: Optional[Any] = Field(
        default=None,
        description="Value used when the caller supplies none",
    )
    options: List[SelectOption] = Field(
        default_factory=list,
        description="Choices for select options",
    )
    placeholder: Optional[str] = None
    min: Optional[float] = None
    max: Optional[float] = None

    class Config:
        frozen = True

    @property
    def required(self) -> bool:
        """Options without a default must be supplied by the caller."""
        return self.default is None


class Tool(BaseModel):
    """A single transformation as seen by catalog consumers."""

    id: str = Field(description="Globally unique tool identifier")
    name: str = Field(description="Display name")
    description: str = Field(description="What the tool does")
    category_id: str = Field(description="Id of the owning category")
    slug: str = Field(description="URL path segment, unique within the category")
    transform_fn: str = Field(description="Function registry name of the implementation")
    is_async: bool = Field(default=False, description="Implementation returns an awaitable")
    is_generator: bool = Field(default=False, description="Implementation ignores its input")
    options: List[ToolOption] = Field(default_factory=list)
    keywords: List[str] = Field(
        min_length=1,
        description="Search terms; at least one is required",
    )
    reverse_fn: Optional[str] = Field(
        default=None,
        description="Function registry name of the inverse transformation",
    )
    input_placeholder: Optional[str] = None
    output_placeholder: Optional[str] = None

    class Config:
        frozen = True

    def default_options(self) -> Dict[str, Any]:
        """Map each declared option key to its default, skipping options without one."""
        return {opt.key: opt.default for opt in self.options if opt.default is not None}

    def search_text(self) -> str:
        """Lowercased haystack used by registry search."""
        return " ".join([self.name, self.description, *self.keywords]).lower()


class CategoryWithCount(Category):
    """Category plus the number of tools it holds."""

    tool_count: int = Field(ge=0)


class ToolWithCategory(Tool):
    """Tool plus its resolved category record."""

    category: Category


class ToolSlugPair(BaseModel):
    """Category and tool slug, enough to address a tool by URL."""

    category: str
    tool: str

    class Config:
        frozen = True
