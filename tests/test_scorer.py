import pytest

from template_finder.schemas import CatalogItem
from template_finder.search.scorer import RelevanceScorer, score_item, tokenize_item
from template_finder.search.tokenizer import tokenize, tokenize_many

TITLE_ITEM = CatalogItem(name="标题样式", body="# 大标题\n正文内容", category_key="heading")


def test_item_tokens_name_first_then_body():
    assert tokenize_item(TITLE_ITEM) == ("标", "题", "样", "式", "大", "正", "文", "内", "容")


def test_query_tokens_weighted_double():
    assert score_item(TITLE_ITEM, tokenize("标题"), (), ()) == pytest.approx(4.0)


def test_history_tokens_weighted_single():
    history_tokens = tokenize_many(["样式"])
    assert score_item(TITLE_ITEM, tokenize("标题"), history_tokens, ()) == pytest.approx(6.0)


def test_recent_item_bonus_matches_by_name():
    recent = CatalogItem(name="标题样式", body="older body")
    assert score_item(TITLE_ITEM, (), (), [recent]) == pytest.approx(1.0)
    other = CatalogItem(name="Simple table")
    assert score_item(TITLE_ITEM, (), (), [other]) == 0.0


def test_fuzzy_latin_match_counts_similarity():
    item = CatalogItem(name="alpha", body="beta")
    assert score_item(item, tokenize("alpha"), (), ()) == pytest.approx(2.0)
    assert score_item(item, tokenize("alpho"), (), ()) == pytest.approx(1.6)
    # 0.6 exactly is below the threshold
    assert score_item(CatalogItem(name="table"), tokenize("tabel"), (), ()) == 0.0


def test_empty_inputs_score_zero():
    assert score_item(TITLE_ITEM, (), (), ()) == 0.0
    assert score_item(CatalogItem(name=""), tokenize("anything"), (), ()) == 0.0


def test_scorer_caches_item_tokens():
    scorer = RelevanceScorer()
    first = scorer.item_tokens(TITLE_ITEM)
    second = scorer.item_tokens(TITLE_ITEM)
    assert first is second
    assert len(scorer) == 1
    assert scorer.score(TITLE_ITEM, tokenize("标题"), (), ()) == pytest.approx(4.0)


def test_scorer_never_reuses_tokens_of_edited_item():
    scorer = RelevanceScorer()
    scorer.item_tokens(TITLE_ITEM)
    edited = CatalogItem(name="标题样式", body="plain text", category_key="heading")
    assert scorer.item_tokens(edited) == ("标", "题", "样", "式", "plain", "text")
    assert scorer.invalidate("标题样式") == 2
    assert len(scorer) == 0
