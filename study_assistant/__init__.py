"""
AI Study Assistant - generate study material for any subject and topic

This package provides a single-page Gradio app that:
- Collects a subject and topic from the user
- Asks Google Gemini for a structured study document
- Renders it as selectable views: summary, mind map, diagrams,
  memory shortcuts, quiz, visual resources and extra tips

Main Modules:
- config: Environment-driven settings
- core: Data model, AI content service and request lifecycle controller
- ui: Gradio page, Markdown renderers and theme preference
- app: Main application entry point

Usage:
    # Run the Gradio UI
    python -m study_assistant.app.main

    # Or drive the controller directly
    from study_assistant.core import RequestLifecycleController, StudyMaterialsService
    from study_assistant.config import settings
    controller = RequestLifecycleController(StudyMaterialsService.from_config(settings), settings.API_KEY)
    state = await controller.submit("Biology", "Mitosis")
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
