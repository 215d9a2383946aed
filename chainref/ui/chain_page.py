"""NiceGUI page for asking questions and browsing the returned chain."""

from collections.abc import Callable

from nicegui import ui

from chainref.client.config import UIConfig, get_ui_config
from chainref.client.http import ChainApiClient
from chainref.controller.query_controller import QueryController
from chainref.models.schemas import ChainEntry, QueryResult, ViewState

BLANK_QUESTION_MESSAGE = "Please enter a question"
IDLE_MESSAGE = "No results yet. Ask a question above."
EMPTY_CHAIN_MESSAGE = "No passages found for this question."

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
    }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .chain-card { border-left: 4px solid #667eea; }

    .cross-theme { background: #f3f4f6; border-radius: 8px; }
</style>
"""


def validate_question(question: str | None) -> str | None:
    """Return an input error for a blank question, or None if it can be sent."""
    if not question or not question.strip():
        return BLANK_QUESTION_MESSAGE
    return None


def bind_refresh(controller: QueryController, refresh: Callable[[], None]) -> Callable[[], None]:
    """Re-render once per published state change.

    ``loading`` flips on every submit from a settled state and on every
    completion of the latest query, and the controller writes all three
    signals before notifying, so following ``loading`` alone sees each
    change exactly once.

    Returns:
        Function that stops the refreshes.
    """
    return controller.loading.subscribe(lambda _: refresh())


def render_entry(entry: ChainEntry) -> None:
    with ui.card().classes("w-full chain-card"):
        ui.label(entry.reference).classes("text-base font-semibold")
        ui.label(entry.text).classes("text-sm")
        ui.label(entry.linking_phrase).classes("text-xs text-gray-500 italic")
        for connection in entry.cross_theme_connections:
            with ui.column().classes("w-full cross-theme px-3 py-2 gap-1"):
                ui.label(f"{connection.theme} · {connection.reference}").classes(
                    "text-xs font-medium text-indigo-600"
                )
                ui.label(connection.text).classes("text-xs")


def render_result(result: QueryResult) -> None:
    ui.label(result.theme).classes("text-xs uppercase tracking-wide text-gray-400")
    ui.label(result.summary).classes("text-sm text-gray-700")
    for entry in result.chain:
        render_entry(entry)


def register_page(api_client: ChainApiClient, config: UIConfig | None = None) -> None:
    """Register the chain page at ``/``.

    Each browser client gets its own QueryController sharing ``api_client``.

    Args:
        api_client: Backend client injected into every page's controller.
        config: Optional UI configuration. Loads from environment if not provided.
    """
    config = config or get_ui_config()

    @ui.page("/")
    def chain_page() -> None:
        ui.add_head_html(CUSTOM_CSS)
        controller = QueryController(api_client)

        @ui.refreshable
        def results_view() -> None:
            state = controller.view_state
            if state is ViewState.LOADING:
                with ui.row().classes("w-full justify-center py-2"):
                    ui.spinner(size="lg")
            elif state is ViewState.ERROR:
                ui.label(controller.error.value or "").classes("text-sm text-red-600")
            elif state is ViewState.IDLE:
                ui.label(IDLE_MESSAGE).classes("text-sm text-gray-500")
            elif state is ViewState.EMPTY:
                render_result(controller.result.value)
                ui.label(EMPTY_CHAIN_MESSAGE).classes("text-sm text-gray-500")
            else:
                render_result(controller.result.value)

        bind_refresh(controller, results_view.refresh)

        def search() -> None:
            input_error = validate_question(question_field.value)
            if input_error:
                question_field.props(f'error error-message="{input_error}"')
                return
            question_field.props(remove="error")
            controller.submit(question_field.value, theme_field.value or config.default_theme)

        def clear_error() -> None:
            question_field.props(remove="error")

        with ui.column().classes("w-full max-w-3xl mx-auto app-container my-8"):
            with ui.row().classes("w-full header px-5 py-4 items-center"):
                ui.icon("link").classes("text-white text-3xl")
                ui.label(config.title).classes("text-lg font-semibold text-white")

            with ui.column().classes("w-full p-5 gap-3"):
                question_field = (
                    ui.textarea(label="Ask a Bible question")
                    .props("autogrow outlined")
                    .classes("w-full")
                    .on("update:model-value", clear_error)
                )
                theme_field = ui.input(label="Theme", value=config.default_theme).classes(
                    "w-full"
                )
                ui.button("Search", on_click=search).classes("w-full")

                results_view()
