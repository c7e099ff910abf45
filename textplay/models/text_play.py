"""
TextPlayModel - State behind the text playground.

This module contains no Qt dependencies. It holds the pending font
defaults and the single reference to the most recently created text.
"""

from dataclasses import dataclass
from typing import Optional

from .displayed_text import DisplayedTextData
from .fonts import DEFAULT_FONT_SIZE, DEFAULT_FONT_STYLE

STATE_IDLE = "idle"
STATE_ACTIVE = "active"


@dataclass
class TextPlayModel:
    """
    Pending font defaults plus the current text object.

    ``current`` is an owned optional reference, never a collection. Texts
    created earlier may still be drawn on the canvas, but the model
    forgets them as soon as a newer text takes their place.
    """

    font_size: int = DEFAULT_FONT_SIZE
    font_style: str = DEFAULT_FONT_STYLE
    current: Optional[DisplayedTextData] = None

    @property
    def state(self) -> str:
        """Return ``"idle"`` without a current text, ``"active"`` otherwise."""
        return STATE_IDLE if self.current is None else STATE_ACTIVE

    def new_text(self, text: str, position: tuple[float, float]) -> DisplayedTextData:
        """Build a text at ``position`` that inherits the pending defaults."""
        x, y = position
        return DisplayedTextData(
            text=text,
            x=float(x),
            y=float(y),
            font_family=self.font_style,
            font_size=self.font_size,
        )
