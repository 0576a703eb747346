import pytest

from template_finder.catalog.loader import build_catalog


@pytest.fixture
def catalog():
    return build_catalog(
        {
            "heading": {
                "title": "Headings",
                "items": [
                    {"name": "标题样式", "body": "# 大标题\n正文内容"},
                    {"name": "Section outline", "body": "overview details summary"},
                ],
            },
            "table": {
                "title": "Tables",
                "items": [
                    {"name": "Simple table", "body": "name value"},
                    {"name": "table compare", "body": "feature speed cost"},
                ],
            },
        }
    )
