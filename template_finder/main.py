import gradio as gr

from template_finder.config import settings
from template_finder.errors import TemplateNotFound
from template_finder.schemas import CatalogItem, Category
from template_finder.search.ranker import RECOMMENDED_KEY
from template_finder.services.search_service import SearchService

CATEGORY_ICONS = {
    RECOMMENDED_KEY: "⭐",
    "heading": "🔠",
    "list": "📋",
    "table": "📊",
    "code": "💻",
    "quote": "💬",
    "media": "🖼️",
}
DEFAULT_ICON = "📄"


def category_icon(key: str) -> str:
    return CATEGORY_ICONS.get(key, DEFAULT_ICON)


def category_label(category: Category) -> str:
    return f"{category_icon(category.key)} {category.title} ({len(category.items)})"


def _category_update(service: SearchService):
    choices = [(category_label(c), c.key) for c in service.view.categories.values()]
    return gr.update(choices=choices, value=service.active_category)


def _items_update(service: SearchService):
    names = [item.name for item in service.visible_items()]
    return gr.update(choices=names, value=names[0] if names else None)


def preview_markdown(service: SearchService, name: str | None) -> str:
    if not name:
        return ""
    try:
        return service.find(name).body
    except TemplateNotFound:
        return ""


def on_query(query: str, service: SearchService):
    service.search(query)
    return _category_update(service), _items_update(service), service


def on_category(key: str, service: SearchService):
    if key != service.active_category:
        service.set_active_category(key)
    return _items_update(service), service


class InsertionTarget:
    """Receives selected templates; stands in for the editor the body is inserted into."""

    def __init__(self) -> None:
        self.text = ""

    def __call__(self, item: CatalogItem) -> None:
        self.text = item.body


def new_session() -> SearchService:
    return SearchService(on_select=InsertionTarget())


def on_use(name: str, service: SearchService):
    if name:
        service.select(name)
    target = service.on_select
    text = target.text if isinstance(target, InsertionTarget) else ""
    return text, _category_update(service), _items_update(service), service


def build_demo() -> gr.Blocks:
    initial = new_session()
    with gr.Blocks(title="Template Finder") as demo:
        gr.Markdown(
            """
            # Template Finder
            Type a few words (English or 中文) to filter the markdown templates.
            Templates you use and queries you ran feed the Recommended list.
            """
        )
        state = gr.State(initial)
        query = gr.Textbox(label="Search", placeholder="e.g. 标题, table, code block")
        with gr.Row():
            with gr.Column(scale=1):
                category = gr.Radio(
                    choices=[(category_label(c), c.key) for c in initial.view.categories.values()],
                    value=initial.active_category,
                    label="Categories",
                )
            with gr.Column(scale=2):
                names = [item.name for item in initial.visible_items()]
                template = gr.Radio(choices=names, value=names[0] if names else None, label="Templates")
                preview = gr.Markdown(preview_markdown(initial, names[0] if names else None))
                use_btn = gr.Button("Use template", variant="primary")
                inserted = gr.Textbox(label="Inserted text", lines=6)

        query.change(on_query, inputs=[query, state], outputs=[category, template, state])
        category.change(on_category, inputs=[category, state], outputs=[template, state])
        template.change(preview_markdown, inputs=[state, template], outputs=[preview])
        use_btn.click(on_use, inputs=[template, state], outputs=[inserted, category, template, state])
    return demo


if __name__ == "__main__":
    app = build_demo()
    app.launch(server_name=settings.gradio_server_name, server_port=settings.gradio_server_port)
