"""
Category catalog: the fixed, ordered set of tool categories.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from text_transform.exceptions import CatalogError
from text_transform.models import Category


class CategoryCatalog:
    """Ordered categories with id and slug lookups.

    Lookups return None for unknown keys; they never raise.
    """

    def __init__(self, categories: Iterable[Category]):
        self._categories: Tuple[Category, ...] = tuple(categories)
        self._by_id: Dict[str, Category] = {}
        self._by_slug: Dict[str, Category] = {}

        for category in self._categories:
            if category.id in self._by_id:
                raise CatalogError(f"Duplicate category id: {category.id}")
            if category.slug in self._by_slug:
                raise CatalogError(f"Duplicate category slug: {category.slug}")
            self._by_id[category.id] = category
            self._by_slug[category.slug] = category

    @property
    def categories(self) -> Tuple[Category, ...]:
        return self._categories

    def get_category_by_id(self, category_id: str) -> Optional[Category]:
        return self._by_id.get(category_id)

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return self._by_slug.get(slug)

    def list_category_ids(self) -> List[str]:
        return [category.id for category in self._categories]

    def list_category_slugs(self) -> List[str]:
        return [category.slug for category in self._categories]

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __repr__(self) -> str:
        return f"CategoryCatalog({len(self)} categories)"
