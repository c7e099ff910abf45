"""
Shared test fixtures for the TextPlay test suite.

The controller fixtures are pure Python and drive a recording fake canvas
(no Qt dependencies). Widget tests use pytest-qt's ``qtbot``.
"""

import os
import sys
from pathlib import Path

# Ensure the project root is on sys.path so the textplay package imports
# when running individual test files without installing it.
_root_dir = str(Path(__file__).resolve().parents[2])
if _root_dir not in sys.path:
    sys.path.insert(0, _root_dir)

# Widget tests run headless unless a platform is chosen explicitly
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from textplay.controllers.interaction_controller import InteractionController


class FakeCanvas:
    """TextCanvas stand-in that records every call it receives."""

    def __init__(self):
        self.calls = []
        self.drawn = []  # handles still on the canvas
        self._next_handle = 0

    def draw(self, text, position, style, size):
        self._next_handle += 1
        handle = f"text-{self._next_handle}"
        self.calls.append(("draw", text, position, style, size))
        self.drawn.append(handle)
        return handle

    def restyle(self, handle, style):
        self.calls.append(("restyle", handle, style))

    def resize(self, handle, size):
        self.calls.append(("resize", handle, size))

    def erase(self, handle):
        self.calls.append(("erase", handle))
        self.drawn.remove(handle)

    def calls_named(self, name):
        return [c for c in self.calls if c[0] == name]


class TextField:
    """Mutable stand-in for the text field's live content."""

    def __init__(self, value=""):
        self.value = value

    def __call__(self):
        return self.value


@pytest.fixture
def canvas():
    return FakeCanvas()


@pytest.fixture
def text_field():
    return TextField("Hello")


@pytest.fixture
def controller(canvas, text_field):
    return InteractionController(canvas, text_field)


@pytest.fixture
def events(controller):
    """Record every (event, data) pair the controller emits."""
    recorded = []
    controller.add_observer(lambda event, data: recorded.append((event, data)))
    return recorded


@pytest.fixture
def restore_light_theme():
    """Put the shared theme manager back on the light theme afterwards."""
    yield
    from textplay.GUI.styles import LightTheme, theme_manager

    theme_manager.set_theme(LightTheme())


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Point MainWindow's QSettings at a throwaway INI file."""
    from textplay.GUI.main_window_settings import SettingsMixin
    from PyQt6.QtCore import QSettings

    path = str(tmp_path / "settings.ini")
    monkeypatch.setattr(
        SettingsMixin, "_settings", lambda self: QSettings(path, QSettings.Format.IniFormat)
    )
    return path
