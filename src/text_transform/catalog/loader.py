"""
Catalog loader.

Reads the packaged YAML catalog:

    data/categories.yaml        ordered category list
    data/tools/<category>.yaml  tools of one category

Tool files are read in category order, so the concatenated catalog lists
tools category by category in declaration order.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import ValidationError

from text_transform.catalog.categories import CategoryCatalog
from text_transform.catalog.tools import ToolCatalog
from text_transform.exceptions import CatalogError
from text_transform.logging_config import get_logger
from text_transform.models import Category, Tool

logger = get_logger("catalog")

DATA_DIR = Path(__file__).parent / "data"


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise CatalogError(f"Catalog file not found: {path.name}", source=str(path))
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {path.name}", source=str(path), details=str(e))
    if not isinstance(data, dict):
        raise CatalogError(f"Expected a mapping at the top of {path.name}", source=str(path))
    return data


def _validation_details(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def load_categories(path: Optional[Path] = None) -> List[Category]:
    """Load the ordered category list."""
    path = path or DATA_DIR / "categories.yaml"
    data = _read_yaml(path)
    categories = []
    for index, entry in enumerate(data.get("categories") or []):
        try:
            categories.append(Category(**entry))
        except (TypeError, ValidationError) as e:
            details = _validation_details(e) if isinstance(e, ValidationError) else str(e)
            raise CatalogError(
                f"Invalid category #{index + 1} in {path.name}",
                source=str(path),
                details=details,
            )
    return categories


def load_tool_file(path: Path) -> List[Tool]:
    """Load one category's tools.

    Tools inherit the file-level ``category`` as their ``category_id``
    unless they declare their own.
    """
    data = _read_yaml(path)
    default_category = data.get("category")
    tools = []
    for index, entry in enumerate(data.get("tools") or []):
        if not isinstance(entry, dict):
            raise CatalogError(f"Tool #{index + 1} in {path.name} is not a mapping", source=str(path))
        record = dict(entry)
        if default_category and "category_id" not in record:
            record["category_id"] = default_category
        try:
            tools.append(Tool(**record))
        except ValidationError as e:
            raise CatalogError(
                f"Invalid tool '{record.get('id', index + 1)}' in {path.name}",
                source=str(path),
                details=_validation_details(e),
            )
    return tools


def load_catalog(data_dir: Optional[Path] = None) -> Tuple[CategoryCatalog, ToolCatalog]:
    """Load categories and every category's tool file.

    Categories without a tool file simply have no tools.
    """
    data_dir = data_dir or DATA_DIR
    categories = CategoryCatalog(load_categories(data_dir / "categories.yaml"))

    sources = []
    for category_id in categories.list_category_ids():
        tool_file = data_dir / "tools" / f"{category_id}.yaml"
        if not tool_file.exists():
            logger.debug("No tool file for category %s", category_id)
            continue
        sources.append(load_tool_file(tool_file))

    tools = ToolCatalog.from_sources(*sources)
    logger.debug("Loaded %d categories and %d tools from %s", len(categories), len(tools), data_dir)
    return categories, tools
