"""
UI events understood by the InteractionController.

Each widget signal is translated into one of these frozen dataclasses and
passed to ``InteractionController.dispatch``. No Qt dependencies.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PointerClick:
    """Left click on the canvas at scene coordinates (x, y)."""

    x: float
    y: float

    @property
    def point(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class RemovePressed:
    """The "Remove last text" button was pressed."""


@dataclass(frozen=True)
class FontSelected:
    """A font family was chosen from the dropdown."""

    name: str


@dataclass(frozen=True)
class SizeChanged:
    """The font size slider moved."""

    value: int


UIEvent = Union[PointerClick, RemovePressed, FontSelected, SizeChanged]
