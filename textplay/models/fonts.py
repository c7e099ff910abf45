"""
Font definitions shared by the model, controller and widgets.

This module contains no Qt dependencies. Font families are plain names
exactly as they appear in the font dropdown.
"""

# Font families offered in the dropdown, in display order
FONT_STYLES = (
    "Courier",
    "Helvetica",
    "Times Roman",
    "Zapfino",
    "Geneva",
    "Arial",
    "Futura",
)

# Font size range driven by the slider (points)
MIN_FONT_SIZE = 10
MAX_FONT_SIZE = 48

# Pending defaults used before the user touches any control
DEFAULT_FONT_SIZE = 10
DEFAULT_FONT_STYLE = "Courier"


def clamp_font_size(size) -> int:
    """Return ``size`` as an int limited to the slider range."""
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, int(size)))


def is_valid_font_style(name) -> bool:
    return name in FONT_STYLES
