"""Data class for a text object drawn on the canvas."""

from dataclasses import dataclass, field
from typing import Any

from .fonts import DEFAULT_FONT_SIZE, DEFAULT_FONT_STYLE


@dataclass
class DisplayedTextData:
    """A single rendered text object.

    Content and anchor are fixed when the text is created; the font family
    and size can change while the text is the controller's current object.
    ``handle`` is whatever the canvas returned from ``draw`` and is only
    meaningful to that canvas.
    """

    text: str = ""
    x: float = 0.0
    y: float = 0.0
    font_family: str = DEFAULT_FONT_STYLE
    font_size: int = DEFAULT_FONT_SIZE
    handle: Any = field(default=None, repr=False, compare=False)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "font_family": self.font_family,
            "font_size": self.font_size,
        }
