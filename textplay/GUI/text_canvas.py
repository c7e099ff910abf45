"""Drawing canvas that hosts the playground texts."""

import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QApplication, QFrame, QGraphicsScene, QGraphicsView

from .displayed_text_item import DisplayedTextItem
from .styles import DEFAULT_WINDOW_SIZE, theme_manager

logger = logging.getLogger(__name__)


class SceneTextCanvas:
    """TextCanvas implementation backed by a QGraphicsScene.

    ``draw`` returns the DisplayedTextItem that ``restyle``, ``resize``
    and ``erase`` later receive as their handle.
    """

    def __init__(self, scene):
        self.scene = scene
        self.texts = []  # DisplayedTextItem, in drawing order

    def draw(self, text, position, style, size):
        """Add a text item at ``position`` and return it."""
        x, y = position
        item = DisplayedTextItem(text, x, y, font_family=style, font_size=size,
                                 color=theme_manager.current_theme.color_hex("canvas_text"))
        self.scene.addItem(item)
        self.texts.append(item)
        return item

    def restyle(self, item, style):
        item.set_font_family(style)

    def resize(self, item, size):
        item.set_font_size(size)

    def erase(self, item):
        """Remove a text item from the scene."""
        if item not in self.texts:
            logger.warning("Ignoring erase of a text not drawn on this canvas")
            return
        self.texts.remove(item)
        self.scene.removeItem(item)

    def drawn_items(self):
        """Return the texts currently drawn, oldest first."""
        return list(self.texts)


class TextCanvasView(QGraphicsView):
    """Canvas widget for the text playground.

    Scene coordinates match widget coordinates (origin at the top-left,
    no scrolling), so a click position can be used directly as a text
    anchor.
    """

    # Emitted on a completed left click with scene coordinates
    canvasClicked = pyqtSignal(float, float)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.scene = QGraphicsScene(self)
        self.scene.setSceneRect(0, 0, *DEFAULT_WINDOW_SIZE)
        self.setScene(self.scene)
        self.text_canvas = SceneTextCanvas(self.scene)
        self._press_pos = None  # viewport position of a pending left press

        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)

        theme_manager.bind_widget(self, self._apply_theme)

    def drawn_items(self):
        return self.text_canvas.drawn_items()

    # -- Events ----------------------------------------------------------------

    def mousePressEvent(self, event):
        if event is None:
            return
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.position().toPoint()
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        """Emit canvasClicked when a left press is released where it started.

        A release further than the platform drag distance from the press
        is a drag, not a click.
        """
        if event is None:
            return
        if event.button() == Qt.MouseButton.LeftButton and self._press_pos is not None:
            release_pos = event.position().toPoint()
            moved = (release_pos - self._press_pos).manhattanLength()
            self._press_pos = None
            if moved <= QApplication.startDragDistance():
                scene_pos = self.mapToScene(release_pos)
                self.canvasClicked.emit(scene_pos.x(), scene_pos.y())
        super().mouseReleaseEvent(event)

    def resizeEvent(self, event):
        """Keep the scene rect equal to the viewport so (0, 0) stays top-left."""
        super().resizeEvent(event)
        viewport = self.viewport()
        if viewport is not None:
            self.scene.setSceneRect(0, 0, viewport.width(), viewport.height())

    # -- Theme -----------------------------------------------------------------

    def _apply_theme(self, theme):
        self.setBackgroundBrush(theme.brush("canvas_background"))
        text_color = theme.color("canvas_text")
        for item in self.drawn_items():
            item.setDefaultTextColor(text_color)
