from __future__ import annotations

from typing import Optional

from template_finder.config import settings
from template_finder.errors import InvalidConfiguration, TemplateNotFound
from template_finder.schemas import Catalog, CatalogItem, Category


class CatalogStore:
    """
    Owns the current catalog snapshot.

    Snapshots are never mutated: an edit builds a new Catalog with the version
    bumped, so a ranking pass that already holds the old snapshot keeps a
    consistent view.
    """

    def __init__(self, catalog: Catalog) -> None:
        self._snapshot = catalog
        self.debug = settings.debug_log

    @property
    def snapshot(self) -> Catalog:
        return self._snapshot

    @property
    def version(self) -> int:
        return self._snapshot.version

    def get(self, name: str) -> CatalogItem:
        item = self._snapshot.find(name)
        if item is None:
            raise TemplateNotFound(name)
        return item

    def replace_item(self, name: str, body: str, new_name: Optional[str] = None) -> CatalogItem:
        old = self.get(name)
        target_name = name if new_name is None else new_name
        if not target_name.strip():
            raise InvalidConfiguration("Template name cannot be empty")
        if target_name != name and self._snapshot.find(target_name) is not None:
            raise InvalidConfiguration(f"Duplicate template name '{target_name}'")

        updated = CatalogItem(name=target_name, body=body, category_key=old.category_key)
        categories: dict[str, Category] = {}
        for key, category in self._snapshot.categories.items():
            if key == old.category_key:
                items = [updated if x.name == name else x for x in category.items]
                category = Category(key=key, title=category.title, items=items)
            categories[key] = category

        self._snapshot = Catalog(categories=categories, version=self._snapshot.version + 1)
        if self.debug:
            print(
                f"[DEBUG][CATALOG] replaced name='{name}' new_name='{target_name}' "
                f"version={self._snapshot.version}"
            )
        return updated
