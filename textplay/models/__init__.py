"""
Pure Python data models for TextPlay.

This package contains Qt-free data classes for the text playground.
All models use only Python standard library types (no PyQt6 dependencies).
"""

from .displayed_text import DisplayedTextData
from .fonts import (
    DEFAULT_FONT_SIZE,
    DEFAULT_FONT_STYLE,
    FONT_STYLES,
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    clamp_font_size,
    is_valid_font_style,
)
from .text_play import STATE_ACTIVE, STATE_IDLE, TextPlayModel

__all__ = [
    "DisplayedTextData",
    "TextPlayModel",
    "FONT_STYLES",
    "MIN_FONT_SIZE",
    "MAX_FONT_SIZE",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_FONT_STYLE",
    "STATE_IDLE",
    "STATE_ACTIVE",
    "clamp_font_size",
    "is_valid_font_style",
]
