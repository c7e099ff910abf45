"""Main application window with MVC architecture"""

import logging

from ..controllers.events import FontSelected, PointerClick, RemovePressed, SizeChanged
from ..controllers.interaction_controller import InteractionController
from ..models.text_play import TextPlayModel
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from .control_panel import ControlPanel
from .keybindings import KeybindingsRegistry
from .main_window_menus import MenuBarMixin
from .main_window_settings import SettingsMixin
from .main_window_view import ViewOperationsMixin
from .styles import DEFAULT_WINDOW_SIZE, STATUS_MESSAGE_MS, WINDOW_TITLE
from .text_canvas import TextCanvasView

logger = logging.getLogger(__name__)


class MainWindow(MenuBarMixin, ViewOperationsMixin, SettingsMixin, QMainWindow):
    """Main application window with MVC architecture

    This class handles UI construction and turns widget signals into UI
    events. State changes are delegated to the InteractionController.
    """

    def __init__(self, theme=None, keybindings=None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setGeometry(100, 100, *DEFAULT_WINDOW_SIZE)

        # Keybindings registry (load before UI so shortcuts are applied)
        self.keybindings = keybindings or KeybindingsRegistry()

        # Create model (single source of truth)
        self.model = TextPlayModel()

        # Build UI
        self.init_ui()

        # The controller draws on the canvas and pulls text from the panel
        self.controller = InteractionController(
            self.canvas.text_canvas, self.control_panel.text, self.model
        )

        self.create_menu_bar()

        # Wire up connections
        self._connect_signals()

        # Restore state; an explicit theme wins over the saved one
        self._restore_settings()
        if theme is not None:
            self._set_theme(theme)
        else:
            self._apply_theme()

        self._report_keybinding_conflicts()
        self._update_font_status()

    def _connect_signals(self):
        """Connect signals between UI components"""
        self.canvas.canvasClicked.connect(self._on_canvas_clicked)
        self.control_panel.removeRequested.connect(self._on_remove_requested)
        self.control_panel.fontStyleSelected.connect(self._on_font_selected)
        self.control_panel.fontSizeChanged.connect(self._on_size_changed)
        self.controller.add_observer(self._on_controller_event)

    def init_ui(self):
        """Initialize user interface"""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.canvas = TextCanvasView()
        layout.addWidget(self.canvas, 1)

        self.control_panel = ControlPanel()
        layout.addWidget(self.control_panel)

        self.font_status_label = QLabel()
        status_bar = self.statusBar()
        if status_bar:
            status_bar.addPermanentWidget(self.font_status_label)

    # --- Widget signal handlers ---

    def _on_canvas_clicked(self, x, y):
        self.controller.dispatch(PointerClick(x, y))

    def _on_remove_requested(self):
        self.controller.dispatch(RemovePressed())

    def _on_font_selected(self, name):
        self.controller.dispatch(FontSelected(name))

    def _on_size_changed(self, value):
        self.controller.dispatch(SizeChanged(value))

    # --- Controller observer ---

    def _on_controller_event(self, event: str, data) -> None:
        """Keep menus and the status bar in sync with the controller."""
        self.remove_last_action.setEnabled(self.controller.has_current)

        status_bar = self.statusBar()
        if event == 'text_created':
            if status_bar:
                status_bar.showMessage(
                    f"Added text at ({data.x:.0f}, {data.y:.0f})", STATUS_MESSAGE_MS
                )
        elif event == 'text_removed':
            if status_bar:
                status_bar.showMessage("Removed last text", STATUS_MESSAGE_MS)
        elif event in ('font_style_changed', 'font_size_changed'):
            self._update_font_status()

    def _update_font_status(self):
        self.font_status_label.setText(
            f"{self.controller.font_style}, {self.controller.font_size} pt"
        )
