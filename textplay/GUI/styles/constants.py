"""
constants.py - Centralized constants for the application.

This file is the SINGLE SOURCE OF TRUTH for window and widget geometry.
Font families and the font size range live in models.fonts.
"""

# Window layout
DEFAULT_WINDOW_SIZE = (500, 420)
WINDOW_TITLE = "TextPlay"

# Control panel
TEXT_FIELD_COLUMNS = 20        # Visible characters in the text field
SLIDER_TICK_INTERVAL = 2       # Points between slider tick marks
REMOVE_BUTTON_LABEL = "Remove last text"

# Canvas
TEXT_Z_VALUE = 10              # Drawn texts sit above the background

# Status bar
STATUS_MESSAGE_MS = 2000       # How long transient status messages stay visible
