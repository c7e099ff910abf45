"""
light_theme.py - Default light theme implementation.

All color values for the canvas and controls are centralized here.
"""
from .theme import BaseTheme


class LightTheme(BaseTheme):
    """Light theme - the default application theme."""

    def __init__(self):
        super().__init__()
        self._define_colors()
        self._define_brushes()
        self._define_fonts()
        self._define_stylesheets()

    @property
    def name(self) -> str:
        return "Light Theme"

    def _define_colors(self):
        """Define all color values."""
        self._colors = {
            # ===== Canvas Colors =====
            'canvas_background': '#FFFFFF',        # White
            'canvas_text': '#000000',              # Black, like the classroom canvas

            # ===== UI Colors =====
            'background_primary': '#FFFFFF',       # White
            'background_secondary': '#F0F0F0',     # Light gray
            'text_primary': '#000000',             # Black
            'text_secondary': '#666666',           # Medium gray
        }

    def _define_brushes(self):
        """Define all brush configurations."""
        self._brushes = {
            'canvas_background': {
                'color': 'canvas_background',
                'alpha': 255
            },
        }

    def _define_fonts(self):
        """Define all font configurations."""
        self._fonts = {
            'size_label': {
                'size': 9,
                'bold': False
            },
        }

    def _define_stylesheets(self):
        """Define all stylesheet strings."""
        self._stylesheets = {
            'control_panel': """
                QWidget#controlPanel {
                    background-color: #f0f0f0;
                }
            """,
            'muted_label': "QLabel { color: #666; }",
        }
