import asyncio
import gradio as gr
from typing import Any, Dict
from study_assistant.core.controller import RequestLifecycleController
from study_assistant.core.errors import ConfigurationError, ValidationError
from study_assistant.core.schemas import StudyRequest
from study_assistant.core.state import Failure, Idle
from study_assistant.core.study_service import StudyMaterialsService
from study_assistant.ui.formatter import format_materials_heading, format_tool_view, tool_choices
from study_assistant.ui.sessions import SessionRegistry
from study_assistant.ui.theme import APPLY_THEME_JS, ThemeProvider
from study_assistant.ui.css import custom_css
from study_assistant.config import settings as config
import logging

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "⏳ **Generating your study materials...** This can take up to a minute."
WELCOME_QUESTION = "What subject and topic are you studying today?"


def page_view(controller: RequestLifecycleController) -> Dict[str, Any]:
    """
    Derive what the page shows from the controller's current state.

    Returns:
        Dict of visibility flags and text for every dynamic component
    """
    materials = controller.materials
    error = controller.error
    return {
        "show_new_topic": materials is not None,
        "error": error,
        "show_welcome": isinstance(controller.state, (Idle, Failure)),
        "show_loading": controller.is_loading,
        "show_materials": materials is not None,
        "heading": format_materials_heading(controller.subject, controller.topic),
        "selected_tool": controller.selected_tool.value if controller.selected_tool else None,
        "tool_view": format_tool_view(materials, controller.selected_tool),
    }


def render_page(controller: RequestLifecycleController):
    """Gradio updates in the order of the page outputs list."""
    view = page_view(controller)
    return (
        gr.update(visible=view["show_new_topic"]),
        gr.update(value=f"**Error:** {view['error']}" if view["error"] else "", visible=bool(view["error"])),
        gr.update(visible=view["show_welcome"]),
        gr.update(visible=view["show_loading"]),
        gr.update(visible=view["show_materials"]),
        gr.update(value=view["heading"]),
        gr.update(value=view["selected_tool"]),
        gr.update(value=view["tool_view"]),
    )


class StudyPageHandlers:
    """
    Event handlers for the study page.

    Each handler looks up the caller's controller by Gradio session hash, so
    concurrent visitors never share request state.
    """

    def __init__(self, sessions: SessionRegistry, theme_provider: ThemeProvider):
        self.sessions = sessions
        self.theme_provider = theme_provider

    def load(self, request: gr.Request):
        return render_page(self.sessions.get(request.session_hash))

    async def submit(self, subject, topic, request: gr.Request):
        """Yields the Loading view first, then the terminal view."""
        controller = self.sessions.get(request.session_hash)

        try:
            StudyRequest.from_input(subject, topic)
        except ValidationError as e:
            gr.Warning(str(e))
            yield render_page(controller)
            return

        try:
            task = controller.submit(subject, topic)
        except ConfigurationError as e:
            logger.warning(f"Submit blocked: {e}")
            yield render_page(controller)
            return

        yield render_page(controller)
        # Shielded so a cancelled handler (client gone) doesn't cancel the fetch
        await asyncio.shield(task)
        yield render_page(controller)

    def select_tool(self, label, request: gr.Request):
        controller = self.sessions.get(request.session_hash)
        if label:
            controller.select_tool(label)
        return format_tool_view(controller.materials, controller.selected_tool)

    def reset(self, request: gr.Request):
        """Reset the session and clear both input boxes."""
        controller = self.sessions.get(request.session_hash)
        controller.reset()
        return render_page(controller) + ("", "")

    def unload(self, request: gr.Request):
        self.sessions.drop(request.session_hash)

    def toggle_theme(self):
        self.theme_provider.toggle()
        return self.theme_provider.theme.value, gr.update(value=self.theme_provider.toggle_label())


def create_gradio_ui(settings=None, service=None):
    """
    Build the AI Study Assistant page.

    Args:
        settings: Configuration object (defaults to study_assistant.config.settings)
        service: AI content service; built from settings when a credential is configured

    Returns:
        Gradio Blocks app
    """
    settings = settings or config
    api_key = getattr(settings, 'API_KEY', None)

    if service is None and api_key:
        service = StudyMaterialsService.from_config(settings)
    if not api_key:
        print("⚠ Warning: API_KEY is not set, study material generation is disabled")

    theme_provider = ThemeProvider(getattr(settings, 'DEFAULT_THEME', 'dark'))
    sessions = SessionRegistry(lambda: RequestLifecycleController(service, api_key))
    handlers = StudyPageHandlers(sessions, theme_provider)

    initial_view = page_view(RequestLifecycleController(service, api_key))

    theme = gr.themes.Soft(
        primary_hue="sky",
        secondary_hue="cyan",
        neutral_hue="slate",
    )

    with gr.Blocks(title="AI Study Assistant") as demo:
        theme_value = gr.Textbox(value=theme_provider.theme.value, visible=False)

        with gr.Row(equal_height=True):
            new_topic_btn = gr.Button(
                "New Topic",
                variant="primary",
                size="sm",
                scale=1,
                visible=initial_view["show_new_topic"],
            )
            gr.Markdown("# AI Study Assistant", elem_id="app-title")
            theme_btn = gr.Button(theme_provider.toggle_label(), size="sm", scale=1)

        error_banner = gr.Markdown(
            value=f"**Error:** {initial_view['error']}" if initial_view["error"] else "",
            visible=bool(initial_view["error"]),
            elem_id="error-banner",
        )

        with gr.Column(visible=initial_view["show_welcome"], elem_id="welcome-panel") as welcome_panel:
            gr.Markdown(WELCOME_QUESTION, elem_id="welcome-question")
            with gr.Row():
                subject_input = gr.Textbox(
                    label="Subject",
                    placeholder="e.g. Biology",
                    lines=1,
                    max_lines=1,
                )
                topic_input = gr.Textbox(
                    label="Topic",
                    placeholder="e.g. Mitosis",
                    lines=1,
                    max_lines=1,
                )
            submit_btn = gr.Button("🚀 Generate Study Materials", variant="primary")

        loading_indicator = gr.Markdown(
            LOADING_MESSAGE,
            visible=initial_view["show_loading"],
            elem_id="loading-indicator",
        )

        with gr.Column(visible=initial_view["show_materials"]) as materials_panel:
            materials_heading = gr.Markdown(initial_view["heading"])
            tool_selector = gr.Radio(
                choices=tool_choices(),
                value=None,
                show_label=False,
                elem_id="tool-selector",
            )
            tool_view = gr.Markdown(initial_view["tool_view"], elem_id="tool-view")

        gr.Markdown("© 2025 AI Study Assistant.", elem_id="app-footer")

        page_outputs = [
            new_topic_btn,
            error_banner,
            welcome_panel,
            loading_indicator,
            materials_panel,
            materials_heading,
            tool_selector,
            tool_view,
        ]

        # Wire up events
        demo.load(handlers.load, outputs=page_outputs)
        demo.load(None, inputs=[theme_value], js=APPLY_THEME_JS)

        for trigger in (submit_btn.click, subject_input.submit, topic_input.submit):
            trigger(
                handlers.submit,
                inputs=[subject_input, topic_input],
                outputs=page_outputs,
                show_progress="hidden",
                concurrency_limit=None,
            )

        tool_selector.change(
            handlers.select_tool,
            inputs=[tool_selector],
            outputs=[tool_view],
            show_progress="hidden",
        )

        new_topic_btn.click(
            handlers.reset,
            outputs=page_outputs + [subject_input, topic_input],
        )

        theme_btn.click(
            handlers.toggle_theme,
            outputs=[theme_value, theme_btn],
        ).then(
            None,
            inputs=[theme_value],
            js=APPLY_THEME_JS,
        )

        demo.unload(handlers.unload)

    # Attach theme and css to demo for Gradio 6.0
    demo.theme = theme
    demo.css = custom_css
    return demo
