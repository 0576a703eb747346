"""
Catalog loader: reads and validates a template catalog JSON file.

Expected shape:
    {
        "<category key>": {
            "title": "<display title>",
            "items": [{"name": "...", "body": "..."}, ...]
        },
        ...
    }
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from template_finder.config import settings
from template_finder.errors import InvalidConfiguration
from template_finder.schemas import Catalog, CatalogFile, CatalogItem, Category
from template_finder.search.ranker import RECOMMENDED_KEY

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "templates.json"

# Reserved for the synthesized recommendation category.
RESERVED_KEYS = {RECOMMENDED_KEY}


def load_catalog(path: str | Path) -> Catalog:
    """
    Load a catalog JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidConfiguration: If the JSON is invalid or has the wrong shape
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    try:
        with catalog_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfiguration(f"Invalid JSON in catalog file: {e}") from e

    catalog = build_catalog(raw)
    if settings.debug_log:
        print(
            f"[DEBUG][CATALOG] loaded path='{catalog_path}' "
            f"categories={len(catalog.categories)} items={sum(1 for _ in catalog.iter_items())}"
        )
    return catalog


def build_catalog(raw: Any) -> Catalog:
    try:
        parsed = CatalogFile.model_validate(raw)
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid catalog: {e}") from e

    categories: dict[str, Category] = {}
    seen: set[str] = set()
    for key, entry in parsed.root.items():
        if key in RESERVED_KEYS:
            raise InvalidConfiguration(f"Category key '{key}' is reserved")
        items: list[CatalogItem] = []
        for raw_item in entry.items:
            if raw_item.name in seen:
                raise InvalidConfiguration(f"Duplicate template name '{raw_item.name}'")
            seen.add(raw_item.name)
            items.append(CatalogItem(name=raw_item.name, body=raw_item.body, category_key=key))
        categories[key] = Category(key=key, title=entry.title or key, items=items)

    return Catalog(categories=categories)


def load_default_catalog() -> Catalog:
    return load_catalog(settings.catalog_path or DEFAULT_CATALOG_PATH)
