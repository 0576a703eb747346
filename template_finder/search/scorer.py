"""
Relevance scoring of one catalog item against a query and the search history.

Scoring rule (per item):
- Query token vs item token, similarity > 0.6: + similarity * 2
- History token vs item token, similarity > 0.6: + similarity * 1
- Item name equal to a recently used item's name: + 1

Scores are only comparable inside one ranking pass.
"""
from __future__ import annotations

import hashlib
from typing import Iterable, Sequence

from template_finder.schemas import CatalogItem
from template_finder.search.similarity import SIMILARITY_THRESHOLD, similarity
from template_finder.search.tokenizer import TokenSet, tokenize

QUERY_WEIGHT = 2.0
HISTORY_WEIGHT = 1.0
RECENT_BONUS = 1.0


def tokenize_item(item: CatalogItem) -> TokenSet:
    # Name tokens come first so they win the dedup.
    return tuple(dict.fromkeys(tokenize(item.name) + tokenize(item.body)))


def _weighted_matches(tokens: Iterable[str], item_tokens: TokenSet, weight: float) -> float:
    total = 0.0
    for token in tokens:
        for item_token in item_tokens:
            value = similarity(token, item_token)
            if value > SIMILARITY_THRESHOLD:
                total += value * weight
    return total


def score_tokens(
    item: CatalogItem,
    item_tokens: TokenSet,
    query_tokens: Iterable[str],
    history_tokens: Iterable[str],
    recent_items: Sequence[CatalogItem],
) -> float:
    score = _weighted_matches(query_tokens, item_tokens, QUERY_WEIGHT)
    score += _weighted_matches(history_tokens, item_tokens, HISTORY_WEIGHT)
    if any(recent.name == item.name for recent in recent_items):
        score += RECENT_BONUS
    return score


def score_item(
    item: CatalogItem,
    query_tokens: Iterable[str],
    history_tokens: Iterable[str],
    recent_items: Sequence[CatalogItem],
) -> float:
    return score_tokens(item, tokenize_item(item), query_tokens, history_tokens, recent_items)


class RelevanceScorer:
    """
    Scorer with a per-item token cache.

    Entries are keyed by item name plus a digest of its content, so an edited
    item never reuses the tokens of its previous text.
    """

    def __init__(self) -> None:
        self._cache: dict[tuple[str, str], TokenSet] = {}

    @staticmethod
    def _key(item: CatalogItem) -> tuple[str, str]:
        digest = hashlib.sha1(f"{item.name}\x00{item.body}".encode("utf-8")).hexdigest()
        return item.name, digest

    def item_tokens(self, item: CatalogItem) -> TokenSet:
        key = self._key(item)
        tokens = self._cache.get(key)
        if tokens is None:
            tokens = tokenize_item(item)
            self._cache[key] = tokens
        return tokens

    def invalidate(self, name: str) -> int:
        stale = [key for key in self._cache if key[0] == name]
        for key in stale:
            del self._cache[key]
        return len(stale)

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def score(
        self,
        item: CatalogItem,
        query_tokens: Iterable[str],
        history_tokens: Iterable[str],
        recent_items: Sequence[CatalogItem],
    ) -> float:
        return score_tokens(item, self.item_tokens(item), query_tokens, history_tokens, recent_items)
