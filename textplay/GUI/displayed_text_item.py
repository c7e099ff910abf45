"""Text object drawn on the playground canvas."""

from ..models.fonts import DEFAULT_FONT_SIZE, DEFAULT_FONT_STYLE
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QGraphicsTextItem

from .styles import TEXT_Z_VALUE


class DisplayedTextItem(QGraphicsTextItem):
    """A non-editable text placed at a fixed anchor on the canvas.

    The anchor is the top-left corner of the glyphs, so the document
    margin is removed. Mouse buttons are not accepted: a click that lands
    on existing text still reaches the canvas and creates a new text.
    """

    def __init__(self, text="", x=0.0, y=0.0, font_family=DEFAULT_FONT_STYLE,
                 font_size=DEFAULT_FONT_SIZE, color="#000000"):
        super().__init__(text)
        self.document().setDocumentMargin(0)
        self.setPos(x, y)
        self.setDefaultTextColor(QColor(color))

        font = QFont(font_family)
        font.setPointSize(font_size)
        self.setFont(font)

        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setZValue(TEXT_Z_VALUE)

    # -- Font ------------------------------------------------------------------

    @property
    def font_family(self):
        return self.font().family()

    @property
    def font_size(self):
        return self.font().pointSize()

    def set_font_family(self, family):
        """Change the family, keeping size and position."""
        font = self.font()
        font.setFamily(family)
        self.setFont(font)

    def set_font_size(self, size):
        """Change the point size, keeping family and position."""
        font = self.font()
        font.setPointSize(size)
        self.setFont(font)
