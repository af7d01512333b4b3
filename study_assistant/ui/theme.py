"""Light/dark theme preference shared by the whole UI."""
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


# Gradio renders its dark palette when the body carries the "dark" class
APPLY_THEME_JS = """
(theme) => {
    document.body.classList.toggle('dark', theme === 'dark');
    return theme;
}
"""


class ThemeProvider:
    """Process-wide UI theme. Holds no business logic."""

    def __init__(self, theme=Theme.DARK):
        try:
            self.theme = Theme(theme)
        except ValueError:
            logger.warning(f"Unknown theme {theme!r}, falling back to dark")
            self.theme = Theme.DARK

    @property
    def is_dark(self) -> bool:
        return self.theme == Theme.DARK

    def toggle(self) -> Theme:
        self.theme = Theme.LIGHT if self.is_dark else Theme.DARK
        return self.theme

    def toggle_label(self) -> str:
        """Button label offering the other theme."""
        return "☀️ Light" if self.is_dark else "🌙 Dark"
