"""Tests for catalog models and the YAML catalog loader."""

import pytest
from pydantic import ValidationError

from text_transform.catalog import CategoryCatalog, ToolCatalog, load_catalog, load_tool_file
from text_transform.exceptions import CatalogError
from text_transform.models import Category, Tool, ToolOption


def make_category(id="text", slug=None):
    return Category(id=id, name=id.title(), description="d", icon="*", slug=slug or id)


def make_tool(id="upper", category_id="text", slug=None, **kwargs):
    return Tool(
        id=id,
        name=id.title(),
        description=f"{id} tool",
        category_id=category_id,
        slug=slug or id,
        transform_fn=kwargs.pop("transform_fn", id),
        keywords=kwargs.pop("keywords", [id]),
        **kwargs,
    )


class TestModels:
    """Test catalog record models."""

    def test_tool_is_frozen(self):
        """Test that tools cannot be modified after creation."""
        tool = make_tool()
        with pytest.raises(ValidationError):
            tool.name = "changed"

    def test_tool_requires_keywords(self):
        """Test that a tool needs at least one keyword."""
        with pytest.raises(ValidationError):
            make_tool(keywords=[])

    def test_option_type_is_checked(self):
        """Test that unknown option types are rejected."""
        with pytest.raises(ValidationError):
            ToolOption(key="x", label="X", type="slider")

    def test_option_without_default_is_required(self):
        """Test the required flag follows the default."""
        assert ToolOption(key="key", label="Key", type="text").required
        assert not ToolOption(key="n", label="N", type="number", default=3).required

    def test_default_options(self):
        """Test defaults map skips options without a default."""
        tool = make_tool(options=[
            ToolOption(key="shift", label="Shift", type="number", default=3),
            ToolOption(key="key", label="Key", type="text"),
        ])
        assert tool.default_options() == {"shift": 3}

    def test_search_text_is_lowercase(self):
        """Test the search haystack covers name, description and keywords."""
        tool = make_tool(id="rot", keywords=["Caesar"])
        haystack = tool.search_text()
        assert "rot tool" in haystack
        assert "caesar" in haystack


class TestCategoryCatalog:
    """Test the category catalog."""

    def test_lookups(self):
        """Test id and slug lookups."""
        catalog = CategoryCatalog([make_category("text", "text-tools")])
        assert catalog.get_category_by_id("text").slug == "text-tools"
        assert catalog.get_category_by_slug("text-tools").id == "text"
        assert catalog.get_category_by_slug("text") is None
        assert catalog.get_category_by_id("missing") is None

    def test_duplicate_id(self):
        """Test duplicate category ids are rejected."""
        with pytest.raises(CatalogError, match="Duplicate category id"):
            CategoryCatalog([make_category("a", "a"), make_category("a", "b")])

    def test_duplicate_slug(self):
        """Test duplicate category slugs are rejected."""
        with pytest.raises(CatalogError, match="Duplicate category slug"):
            CategoryCatalog([make_category("a", "same"), make_category("b", "same")])

    def test_order_is_preserved(self):
        """Test categories keep declaration order."""
        catalog = CategoryCatalog([make_category("b"), make_category("a")])
        assert catalog.list_category_ids() == ["b", "a"]
        assert len(catalog) == 2


class TestToolCatalog:
    """Test tool catalog assembly."""

    def test_from_sources_concatenates_in_order(self):
        """Test sub-catalogs are concatenated preserving their order."""
        first = [make_tool("a"), make_tool("b")]
        second = [make_tool("c")]
        catalog = ToolCatalog.from_sources(first, second)
        assert [tool.id for tool in catalog] == ["a", "b", "c"]
        assert len(catalog) == 3


class TestLoader:
    """Test loading YAML catalog files."""

    def test_packaged_catalog_loads(self):
        """Test the shipped catalog has every category and tool."""
        categories, tools = load_catalog()
        assert len(categories) == 8
        assert len(tools) == 105

    def test_file_category_is_inherited(self, tmp_path):
        """Test tools inherit the file-level category."""
        path = tmp_path / "text.yaml"
        path.write_text(
            "category: text\n"
            "tools:\n"
            "  - id: upper\n"
            "    name: Upper\n"
            "    description: Uppercase\n"
            "    slug: upper\n"
            "    transform_fn: upper\n"
            "    keywords: [upper]\n"
        )
        tools = load_tool_file(path)
        assert tools[0].category_id == "text"

    def test_invalid_tool_names_file_and_tool(self, tmp_path):
        """Test a malformed tool reports where it came from."""
        path = tmp_path / "bad.yaml"
        path.write_text(
            "category: text\n"
            "tools:\n"
            "  - id: broken\n"
            "    name: Broken\n"
        )
        with pytest.raises(CatalogError) as exc_info:
            load_tool_file(path)
        assert "broken" in exc_info.value.message
        assert "bad.yaml" in exc_info.value.message
        assert exc_info.value.source == str(path)

    def test_invalid_yaml(self, tmp_path):
        """Test YAML syntax errors become CatalogError."""
        path = tmp_path / "broken.yaml"
        path.write_text("tools: [unclosed\n")
        with pytest.raises(CatalogError, match="Invalid YAML"):
            load_tool_file(path)

    def test_missing_categories_file(self, tmp_path):
        """Test a missing categories file is reported."""
        with pytest.raises(CatalogError, match="not found"):
            load_catalog(tmp_path)

    def test_category_without_tool_file(self, tmp_path):
        """Test categories without a tool file simply have no tools."""
        (tmp_path / "categories.yaml").write_text(
            "categories:\n"
            "  - {id: text, name: Text, description: d, icon: T, slug: text}\n"
        )
        categories, tools = load_catalog(tmp_path)
        assert len(categories) == 1
        assert len(tools) == 0
