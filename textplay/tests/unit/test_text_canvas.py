"""
Tests for TextCanvasView, SceneTextCanvas and DisplayedTextItem.
"""

import pytest
from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtGui import QColor

from textplay.GUI.displayed_text_item import DisplayedTextItem
from textplay.GUI.styles import DarkTheme, theme_manager
from textplay.GUI.text_canvas import TextCanvasView


@pytest.fixture(autouse=True)
def _restore(restore_light_theme):
    yield


@pytest.fixture
def view(qtbot):
    widget = TextCanvasView()
    qtbot.addWidget(widget)
    widget.resize(500, 300)
    widget.show()
    qtbot.waitExposed(widget)
    return widget


class TestDisplayedTextItem:
    def test_initial_font_and_position(self, qapp):
        item = DisplayedTextItem("Hi", 12.0, 34.0, font_family="Arial", font_size=20)
        assert item.toPlainText() == "Hi"
        assert (item.x(), item.y()) == (12.0, 34.0)
        assert item.font_family == "Arial"
        assert item.font_size == 20

    def test_set_font_family_keeps_size_and_position(self, qapp):
        item = DisplayedTextItem("Hi", 5.0, 6.0, font_family="Courier", font_size=30)
        item.set_font_family("Futura")
        assert item.font_family == "Futura"
        assert item.font_size == 30
        assert (item.x(), item.y()) == (5.0, 6.0)

    def test_set_font_size_keeps_family(self, qapp):
        item = DisplayedTextItem("Hi", font_family="Geneva", font_size=10)
        item.set_font_size(48)
        assert item.font_size == 48
        assert item.font_family == "Geneva"

    def test_does_not_take_mouse_clicks(self, qapp):
        item = DisplayedTextItem("Hi")
        assert item.acceptedMouseButtons() == Qt.MouseButton.NoButton

    def test_color(self, qapp):
        item = DisplayedTextItem("Hi", color="#123456")
        assert item.defaultTextColor() == QColor("#123456")


class TestSceneTextCanvas:
    def test_draw_adds_item_to_scene(self, view):
        item = view.text_canvas.draw("Hello", (40.0, 50.0), "Helvetica", 18)
        assert isinstance(item, DisplayedTextItem)
        assert item.scene() is view.scene
        assert (item.x(), item.y()) == (40.0, 50.0)
        assert item.font_family == "Helvetica"
        assert item.font_size == 18
        assert view.drawn_items() == [item]

    def test_draw_uses_theme_text_color(self, view):
        item = view.text_canvas.draw("Hello", (0, 0), "Courier", 10)
        assert item.defaultTextColor() == theme_manager.current_theme.color("canvas_text")

    def test_restyle_and_resize(self, view):
        item = view.text_canvas.draw("Hello", (0, 0), "Courier", 10)
        view.text_canvas.restyle(item, "Arial")
        view.text_canvas.resize(item, 40)
        assert item.font_family == "Arial"
        assert item.font_size == 40

    def test_erase_removes_only_that_item(self, view):
        first = view.text_canvas.draw("One", (0, 0), "Courier", 10)
        second = view.text_canvas.draw("Two", (10, 10), "Courier", 10)
        view.text_canvas.erase(second)
        assert view.drawn_items() == [first]
        assert second.scene() is None
        assert first.scene() is view.scene

    def test_erase_unknown_item_is_ignored(self, view, caplog):
        stray = DisplayedTextItem("stray")
        view.text_canvas.erase(stray)
        assert view.drawn_items() == []
        assert "Ignoring erase" in caplog.text

    def test_drawn_items_returns_copy(self, view):
        view.text_canvas.draw("One", (0, 0), "Courier", 10)
        items = view.drawn_items()
        items.clear()
        assert len(view.drawn_items()) == 1


class TestTextCanvasView:
    def test_left_click_emits_scene_position(self, view, qtbot):
        with qtbot.waitSignal(view.canvasClicked) as blocker:
            qtbot.mouseClick(view.viewport(), Qt.MouseButton.LeftButton, pos=QPoint(30, 40))
        assert blocker.args == [30.0, 40.0]

    def test_press_alone_does_not_emit(self, view, qtbot):
        received = []
        view.canvasClicked.connect(lambda x, y: received.append((x, y)))
        qtbot.mousePress(view.viewport(), Qt.MouseButton.LeftButton, pos=QPoint(30, 40))
        assert received == []
        qtbot.mouseRelease(view.viewport(), Qt.MouseButton.LeftButton, pos=QPoint(30, 40))
        assert received == [(30.0, 40.0)]

    def test_drag_is_not_a_click(self, view, qtbot):
        received = []
        view.canvasClicked.connect(lambda x, y: received.append((x, y)))
        qtbot.mousePress(view.viewport(), Qt.MouseButton.LeftButton, pos=QPoint(30, 40))
        qtbot.mouseRelease(view.viewport(), Qt.MouseButton.LeftButton, pos=QPoint(200, 150))
        assert received == []

    def test_right_click_ignored(self, view, qtbot):
        received = []
        view.canvasClicked.connect(lambda x, y: received.append((x, y)))
        qtbot.mouseClick(view.viewport(), Qt.MouseButton.RightButton, pos=QPoint(30, 40))
        assert received == []

    def test_click_on_existing_text_still_emits(self, view, qtbot):
        view.text_canvas.draw("Big text", (20.0, 20.0), "Courier", 48)
        with qtbot.waitSignal(view.canvasClicked) as blocker:
            qtbot.mouseClick(view.viewport(), Qt.MouseButton.LeftButton, pos=QPoint(25, 25))
        assert blocker.args == [25.0, 25.0]

    def test_theme_change_recolors_texts(self, view):
        item = view.text_canvas.draw("Hello", (0, 0), "Courier", 10)
        theme_manager.set_theme(DarkTheme())
        assert item.defaultTextColor() == DarkTheme().color("canvas_text")
        assert view.backgroundBrush().color() == DarkTheme().color("canvas_background")
