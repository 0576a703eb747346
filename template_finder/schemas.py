from __future__ import annotations

from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel


class CatalogItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    body: str = ""
    category_key: str = ""


class Category(BaseModel):
    key: str
    title: str
    items: list[CatalogItem] = Field(default_factory=list)


class Catalog(BaseModel):
    categories: dict[str, Category] = Field(default_factory=dict)
    version: int = Field(default=0, ge=0)

    def keys(self) -> list[str]:
        return list(self.categories.keys())

    def iter_items(self) -> Iterator[CatalogItem]:
        # Category order first, then item order inside each category.
        for category in self.categories.values():
            yield from category.items

    def find(self, name: str) -> Optional[CatalogItem]:
        for item in self.iter_items():
            if item.name == name:
                return item
        return None


class ScoredItem(BaseModel):
    item: CatalogItem
    score: float = Field(ge=0.0)
    position: int = 0


class ItemEntry(BaseModel):
    name: str
    body: str = ""


class CategoryEntry(BaseModel):
    title: str = ""
    items: list[ItemEntry] = Field(default_factory=list)


class CatalogFile(RootModel[dict[str, CategoryEntry]]):
    """On-disk catalog shape: category key -> {title, items}."""
