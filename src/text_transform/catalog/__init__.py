"""
Text Transform Catalog

Category and tool metadata, declared in packaged YAML files and loaded
into immutable records.
"""

from text_transform.catalog.categories import CategoryCatalog
from text_transform.catalog.loader import DATA_DIR, load_catalog, load_categories, load_tool_file
from text_transform.catalog.tools import ToolCatalog

__all__ = [
    "CategoryCatalog",
    "ToolCatalog",
    "DATA_DIR",
    "load_catalog",
    "load_categories",
    "load_tool_file",
]
