from __future__ import annotations

from typing import Callable, Literal, Optional

from template_finder.catalog.loader import load_default_catalog
from template_finder.catalog.store import CatalogStore
from template_finder.config import settings
from template_finder.errors import TemplateNotFound
from template_finder.schemas import Catalog, CatalogItem
from template_finder.search.ranker import build_view, recommend, resolve_active_category
from template_finder.search.scorer import RelevanceScorer
from template_finder.state.history import QueryHistory, RecentItems, check_limit

CategoryState = Literal["normal", "auto-switched"]


class SearchService:
    """
    One logical search session over a template catalog.

    Owns the query history and recently used templates; callers must not
    share an instance between sessions.
    """

    def __init__(
        self,
        store: CatalogStore | None = None,
        on_select: Optional[Callable[[CatalogItem], None]] = None,
        history_size: int | None = None,
        recent_size: int | None = None,
        recommend_limit: int | None = None,
    ) -> None:
        self.store = store or CatalogStore(load_default_catalog())
        self.history = QueryHistory(settings.history_size if history_size is None else history_size)
        self.recents = RecentItems(settings.recent_size if recent_size is None else recent_size)
        self.recommend_limit = check_limit(
            "recommend limit", settings.recommend_limit if recommend_limit is None else recommend_limit
        )
        self.scorer = RelevanceScorer()
        self.on_select = on_select
        self.debug = settings.debug_log

        self.query = ""
        self.view: Catalog = self.store.snapshot
        keys = self.view.keys()
        self.active_category: Optional[str] = keys[0] if keys else None
        self.category_state: CategoryState = "normal"

    def search(self, query: str | None) -> Catalog:
        self.query = (query or "").strip()
        self._refresh()
        if self.debug:
            print(
                f"[DEBUG][SERVICE] query='{self.query}' categories={self.view.keys()} "
                f"active='{self.active_category}' state='{self.category_state}'"
            )
        return self.view

    def recommend(self, query: str | None = None) -> list[CatalogItem]:
        text = self.query if query is None else query
        return recommend(
            self.store.snapshot,
            text,
            self.history.snapshot(),
            self.recents.snapshot(),
            scorer=self.scorer,
            limit=self.recommend_limit,
        )

    def set_active_category(self, key: str | None) -> Optional[str]:
        self.active_category = key
        self.category_state = "normal"
        self._resolve_active()
        return self.active_category

    def visible_items(self) -> list[CatalogItem]:
        category = self.view.categories.get(self.active_category or "")
        return list(category.items) if category else []

    def submit_query(self, query: str | None) -> bool:
        return self.history.add(query)

    def select(self, name: str) -> CatalogItem:
        item = self.store.get(name)
        self.recents.push(item)
        self.history.add(self.query)
        self._refresh()
        if self.debug:
            print(f"[DEBUG][SERVICE] selected='{item.name}' recents={self.recents.names()}")
        if self.on_select is not None:
            self.on_select(item)
        return item

    def edit_item(self, name: str, body: str, new_name: str | None = None) -> CatalogItem:
        updated = self.store.replace_item(name, body, new_name=new_name)
        self.scorer.invalidate(name)
        self.recents.refresh(name, updated)
        self._refresh()
        if self.debug:
            print(f"[DEBUG][SERVICE] edited='{name}' version={self.store.version}")
        return updated

    def find(self, name: str) -> CatalogItem:
        item = self.view.find(name) or self.store.snapshot.find(name)
        if item is None:
            raise TemplateNotFound(name)
        return item

    def reset(self) -> None:
        self.history.clear()
        self.recents.clear()
        self._refresh()

    def _refresh(self) -> None:
        # Snapshots keep one pass from seeing a history list changed mid-computation.
        self.view = build_view(
            self.store.snapshot,
            self.query,
            self.history.snapshot(),
            self.recents.snapshot(),
            scorer=self.scorer,
            limit=self.recommend_limit,
        )
        self._resolve_active()

    def _resolve_active(self) -> None:
        resolved = resolve_active_category(self.active_category, self.view)
        if resolved != self.active_category:
            self.active_category = resolved
            self.category_state = "auto-switched"
