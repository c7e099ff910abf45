"""
dark_theme.py - Dark theme implementation.

Provides a dark color scheme for projector-friendly classroom demos.
"""

from .theme import BaseTheme


class DarkTheme(BaseTheme):
    """Dark theme with high-contrast text on a dark canvas."""

    def __init__(self):
        super().__init__()
        self._define_colors()
        self._define_brushes()
        self._define_fonts()
        self._define_stylesheets()

    @property
    def name(self) -> str:
        return "Dark Theme"

    @property
    def is_dark(self) -> bool:
        return True

    def _define_colors(self):
        """Define all color values for dark mode."""
        self._colors = {
            # ===== Canvas Colors =====
            "canvas_background": "#1E1E1E",  # Dark background
            "canvas_text": "#F5F5F5",  # Near white
            # ===== UI Colors =====
            "background_primary": "#1E1E1E",  # Dark background
            "background_secondary": "#2D2D2D",  # Slightly lighter
            "text_primary": "#D4D4D4",  # Light gray text
            "text_secondary": "#999999",  # Medium gray
        }

    def _define_brushes(self):
        """Define all brush configurations."""
        self._brushes = {
            "canvas_background": {"color": "canvas_background", "alpha": 255},
        }

    def _define_fonts(self):
        """Define all font configurations."""
        self._fonts = {
            "size_label": {"size": 9, "bold": False},
        }

    def _define_stylesheets(self):
        """Define all stylesheet strings."""
        self._stylesheets = {
            "control_panel": """
                QWidget#controlPanel {
                    background-color: #2D2D2D;
                }
            """,
            "muted_label": "QLabel { color: #999; }",
        }
