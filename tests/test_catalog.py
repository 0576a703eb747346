import json

import pytest
from pydantic import ValidationError

from template_finder.catalog.loader import build_catalog, load_catalog, load_default_catalog
from template_finder.catalog.store import CatalogStore
from template_finder.errors import InvalidConfiguration, TemplateNotFound


def test_load_default_catalog():
    catalog = load_default_catalog()
    assert catalog.keys()[0] == "heading"
    item = catalog.find("标题样式")
    assert item is not None
    assert item.body == "# 大标题\n正文内容"
    assert item.category_key == "heading"
    names = [x.name for x in catalog.iter_items()]
    assert len(names) == len(set(names))


def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps({"code": {"title": "Code", "items": [{"name": "Shell", "body": "ls"}]}}),
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert catalog.keys() == ["code"]
    assert catalog.categories["code"].items[0].category_key == "code"
    assert catalog.version == 0


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "missing.json")


def test_load_catalog_invalid_json(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        load_catalog(path)


@pytest.mark.parametrize(
    "raw",
    [
        [],
        {"code": "not an object"},
        {"code": {"title": "Code", "items": "nope"}},
        {"code": {"title": "Code", "items": [{"body": "no name"}]}},
        {"code": {"title": "Code", "items": [{"name": 3}]}},
        {"recommended": {"title": "Mine", "items": []}},
        {
            "a": {"title": "A", "items": [{"name": "dup"}]},
            "b": {"title": "B", "items": [{"name": "dup"}]},
        },
    ],
)
def test_build_catalog_rejects_bad_shapes(raw):
    with pytest.raises(InvalidConfiguration):
        build_catalog(raw)


def test_build_catalog_title_defaults_to_key():
    catalog = build_catalog({"misc": {"items": []}})
    assert catalog.categories["misc"].title == "misc"


def test_replace_item_builds_new_snapshot(catalog):
    store = CatalogStore(catalog)
    old = store.snapshot
    updated = store.replace_item("Simple table", "a | b", new_name="Tiny table")

    assert updated.category_key == "table"
    assert store.version == 1
    assert [x.name for x in store.snapshot.categories["table"].items] == ["Tiny table", "table compare"]
    assert old.find("Simple table").body == "name value"
    assert old.version == 0


def test_replace_item_errors(catalog):
    store = CatalogStore(catalog)
    with pytest.raises(TemplateNotFound):
        store.replace_item("missing", "x")
    with pytest.raises(InvalidConfiguration):
        store.replace_item("Simple table", "x", new_name="table compare")
    with pytest.raises(InvalidConfiguration):
        store.replace_item("Simple table", "x", new_name="  ")
    assert store.version == 0


def test_build_catalog_wraps_validation_error():
    with pytest.raises(InvalidConfiguration) as exc_info:
        build_catalog({"code": {"title": "Code", "items": [{"body": "no name"}]}})
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_build_catalog_ignores_extra_item_fields():
    catalog = build_catalog({"code": {"title": "Code", "items": [{"name": "Shell", "body": "ls", "icon": "x"}]}})
    assert catalog.find("Shell").body == "ls"
