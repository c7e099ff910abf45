"""
Styles module - Centralized styling system for the TextPlay application.

Usage:
    from textplay.GUI.styles import DEFAULT_WINDOW_SIZE, theme_manager

    theme = theme_manager.current_theme
    color = theme.color('canvas_text')
    brush = theme.brush('canvas_background')
    style = theme.stylesheet('control_panel')

    # Re-theme a widget on every switch until it is destroyed
    theme_manager.bind_widget(widget, widget._apply_theme)

    # Switch themes at runtime
    theme_manager.set_theme(DarkTheme())
"""

# Core constants (always available, theme-independent)
from .constants import (DEFAULT_WINDOW_SIZE, REMOVE_BUTTON_LABEL,
                        SLIDER_TICK_INTERVAL, STATUS_MESSAGE_MS,
                        TEXT_FIELD_COLUMNS, TEXT_Z_VALUE, WINDOW_TITLE)
from .dark_theme import DarkTheme
from .light_theme import LightTheme
# Theme system
from .theme import BaseTheme, ThemeProtocol
from .theme_manager import THEME_KEYS, ThemeManager, theme_manager

__all__ = [
    # Constants
    "DEFAULT_WINDOW_SIZE",
    "WINDOW_TITLE",
    "TEXT_FIELD_COLUMNS",
    "SLIDER_TICK_INTERVAL",
    "REMOVE_BUTTON_LABEL",
    "TEXT_Z_VALUE",
    "STATUS_MESSAGE_MS",
    # Theme system
    "ThemeProtocol",
    "BaseTheme",
    "ThemeManager",
    "theme_manager",
    "LightTheme",
    "DarkTheme",
    "THEME_KEYS",
]
