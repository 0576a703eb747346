import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from template_finder.services.search_service import SearchService


def main() -> None:
    service = SearchService()
    for term in ["标题", "tabel", "code block", "列表"]:
        view = service.search(term)
        print(f"query={term} categories={view.keys()} active={service.active_category}")
        for item in service.visible_items()[:3]:
            print(f"- {item.name} | category={item.category_key}")
        picked = service.visible_items()
        if picked:
            service.select(picked[0].name)
        print("---")
    print(f"history={service.history.snapshot()}")
    print(f"recents={service.recents.names()}")
    print(f"recommended for empty query={[x.name for x in service.recommend('')]}")


if __name__ == "__main__":
    main()
