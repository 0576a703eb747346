from __future__ import annotations

from typing import Iterable, Optional, Sequence

from template_finder.schemas import Catalog, CatalogItem, Category, ScoredItem
from template_finder.search.scorer import RelevanceScorer
from template_finder.search.similarity import SIMILARITY_THRESHOLD, similarity
from template_finder.search.tokenizer import TokenSet, tokenize, tokenize_many

RECOMMENDED_KEY = "recommended"
RECOMMENDED_TITLE = "Recommended"
DEFAULT_RECOMMEND_LIMIT = 5


def rank(
    catalog: Catalog,
    query: str,
    history: Iterable[str] = (),
    recents: Sequence[CatalogItem] = (),
    scorer: Optional[RelevanceScorer] = None,
    limit: int = DEFAULT_RECOMMEND_LIMIT,
) -> list[ScoredItem]:
    recents = tuple(recents)
    if not query and not recents:
        return []

    scorer = scorer or RelevanceScorer()
    query_tokens = tokenize(query)
    history_tokens = tokenize_many(tuple(history))

    scored: list[ScoredItem] = []
    for position, item in enumerate(catalog.iter_items()):
        score = scorer.score(item, query_tokens, history_tokens, recents)
        if score > 0:
            scored.append(ScoredItem(item=item, score=score, position=position))

    # Stable sort keeps catalog order among equal scores; position makes it explicit.
    scored.sort(key=lambda x: (-x.score, x.position))
    return scored[: max(0, limit)]


def recommend(
    catalog: Catalog,
    query: str,
    history: Iterable[str] = (),
    recents: Sequence[CatalogItem] = (),
    scorer: Optional[RelevanceScorer] = None,
    limit: int = DEFAULT_RECOMMEND_LIMIT,
) -> list[CatalogItem]:
    return [x.item for x in rank(catalog, query, history, recents, scorer=scorer, limit=limit)]


def matches_all_tokens(query_tokens: TokenSet, item_tokens: TokenSet) -> bool:
    """Every query token needs at least one item token above the threshold."""
    return all(
        any(similarity(q, t) > SIMILARITY_THRESHOLD for t in item_tokens)
        for q in query_tokens
    )


def filter_catalog(
    catalog: Catalog,
    query: str,
    scorer: Optional[RelevanceScorer] = None,
) -> Catalog:
    if not query:
        return catalog

    scorer = scorer or RelevanceScorer()
    query_tokens = tokenize(query)
    categories: dict[str, Category] = {}
    for key, category in catalog.categories.items():
        kept = [item for item in category.items if matches_all_tokens(query_tokens, scorer.item_tokens(item))]
        if kept:
            categories[key] = Category(key=key, title=category.title, items=kept)
    return Catalog(categories=categories, version=catalog.version)


def build_view(
    catalog: Catalog,
    query: str,
    history: Iterable[str] = (),
    recents: Sequence[CatalogItem] = (),
    scorer: Optional[RelevanceScorer] = None,
    limit: int = DEFAULT_RECOMMEND_LIMIT,
) -> Catalog:
    """Filtered catalog with the recommended pseudo-category appended when it has items."""
    scorer = scorer or RelevanceScorer()
    filtered = filter_catalog(catalog, query, scorer=scorer)
    recommended = recommend(catalog, query, history, recents, scorer=scorer, limit=limit)
    if not recommended:
        return filtered

    categories = dict(filtered.categories)
    categories[RECOMMENDED_KEY] = Category(key=RECOMMENDED_KEY, title=RECOMMENDED_TITLE, items=recommended)
    return Catalog(categories=categories, version=catalog.version)


def resolve_active_category(active: Optional[str], view: Catalog) -> Optional[str]:
    if active in view.categories:
        return active
    if RECOMMENDED_KEY in view.categories:
        return RECOMMENDED_KEY
    keys = view.keys()
    if keys:
        return keys[0]
    return active
