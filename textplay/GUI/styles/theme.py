"""
theme.py - Theme protocol and base class.

Defines the contract that all themes must fulfill.
"""

from typing import Dict, Protocol

from PyQt6.QtGui import QBrush, QColor, QFont


class ThemeProtocol(Protocol):
    """Protocol defining the theme interface."""

    @property
    def name(self) -> str:
        """Theme name for display."""
        ...

    @property
    def is_dark(self) -> bool:
        ...

    def color(self, key: str) -> QColor:
        """Get a QColor by semantic key."""
        ...

    def color_hex(self, key: str) -> str:
        """Get a hex color string by semantic key."""
        ...

    def brush(self, key: str) -> QBrush:
        """Get a pre-configured QBrush by semantic key."""
        ...

    def font(self, key: str) -> QFont:
        """Get a pre-configured QFont by semantic key."""
        ...

    def stylesheet(self, key: str) -> str:
        """Get a stylesheet string by semantic key."""
        ...

    def generate_dark_stylesheet(self) -> str:
        ...


class BaseTheme:
    """Base class for themes with shared functionality."""

    def __init__(self):
        self._colors: Dict[str, str] = {}  # key -> hex string
        self._brushes: Dict[str, Dict] = {}  # key -> brush config dict
        self._fonts: Dict[str, Dict] = {}  # key -> font config dict
        self._stylesheets: Dict[str, str] = {}  # key -> stylesheet string

    @property
    def name(self) -> str:
        return "Base Theme"

    @property
    def is_dark(self) -> bool:
        return False

    def color(self, key: str) -> QColor:
        """Get QColor by key. Falls back to magenta if not found (debug)."""
        hex_color = self._colors.get(key, "#FF00FF")
        return QColor(hex_color)

    def color_hex(self, key: str) -> str:
        """Get hex color string by key."""
        return self._colors.get(key, "#FF00FF")

    def color_rgba(self, key: str, alpha: int = 255) -> QColor:
        """Get QColor with specified alpha."""
        qc = self.color(key)
        qc.setAlpha(alpha)
        return qc

    def brush(self, key: str) -> QBrush:
        """Get QBrush by key."""
        config = self._brushes.get(key, {})
        color_key = config.get("color", "background_primary")
        alpha = config.get("alpha", 255)

        color = self.color_rgba(color_key, alpha)
        return QBrush(color)

    def font(self, key: str) -> QFont:
        """Get QFont by key."""
        config = self._fonts.get(key, {})
        font = QFont()

        if "family" in config:
            font.setFamily(config["family"])
        if "size" in config:
            font.setPointSize(config["size"])
        if config.get("bold", False):
            font.setBold(True)

        return font

    def stylesheet(self, key: str) -> str:
        """Get stylesheet string by key."""
        return self._stylesheets.get(key, "")

    def generate_dark_stylesheet(self) -> str:
        """Generate a global dark stylesheet from theme colors.

        Returns an empty string for light themes.
        """
        if not self.is_dark:
            return ""

        bg1 = self.color_hex("background_primary")
        bg2 = self.color_hex("background_secondary")
        fg = self.color_hex("text_primary")
        # Derive mid-tone colors from the background
        bg_mid = QColor(bg2).lighter(120).name()
        border = QColor(bg2).lighter(150).name()

        return (
            f"QMainWindow, QWidget {{ background-color: {bg1}; color: {fg}; }}"
            f" QMenuBar {{ background-color: {bg2}; color: {fg}; }}"
            f" QMenuBar::item:selected {{ background-color: {bg_mid}; }}"
            f" QMenu {{ background-color: {bg2}; color: {fg}; }}"
            f" QMenu::item:selected {{ background-color: {bg_mid}; }}"
            f" QLabel {{ color: {fg}; }}"
            f" QPushButton {{"
            f"   background-color: {bg_mid}; color: {fg};"
            f"   border: 1px solid {border}; padding: 4px 12px; border-radius: 3px;"
            f" }}"
            f" QPushButton:hover {{ background-color: {QColor(bg_mid).lighter(110).name()}; }}"
            f" QLineEdit, QComboBox {{"
            f"   background-color: {bg2}; color: {fg};"
            f"   border: 1px solid {border};"
            f" }}"
            f" QSlider::groove:horizontal {{ background-color: {bg2}; height: 4px; }}"
            f" QSlider::handle:horizontal {{ background-color: {border}; width: 10px; margin: -4px 0; }}"
            f" QStatusBar {{ background-color: {bg2}; color: {fg}; }}"
        )
