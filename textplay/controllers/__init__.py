"""
Controllers for TextPlay.

This package contains Qt-free controller classes that turn UI events
into model and canvas changes using an observer pattern.
"""

from .canvas_protocol import TextCanvas
from .events import FontSelected, PointerClick, RemovePressed, SizeChanged, UIEvent
from .interaction_controller import InteractionController

__all__ = [
    "InteractionController",
    "TextCanvas",
    "UIEvent",
    "PointerClick",
    "RemovePressed",
    "FontSelected",
    "SizeChanged",
]
