"""Menu bar construction and keybinding management for MainWindow."""

import logging

from PyQt6.QtGui import QAction, QActionGroup

from .keybindings import ACTION_LABELS
from .styles import theme_manager

logger = logging.getLogger(__name__)


class MenuBarMixin:
    """Mixin providing menu bar construction and keybinding application."""

    def create_menu_bar(self):
        """Create menu bar with File, Edit and View menus"""
        menubar = self.menuBar()
        if menubar is None:
            return

        kb = self.keybindings

        # File menu
        file_menu = menubar.addMenu("&File")
        if file_menu is None:
            return

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(kb.get("file.exit"))
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")
        if edit_menu is None:
            return

        self.remove_last_action = QAction(ACTION_LABELS["edit.remove_last"], self)
        self.remove_last_action.setShortcut(kb.get("edit.remove_last"))
        self.remove_last_action.setEnabled(False)
        self.remove_last_action.triggered.connect(self._on_remove_requested)
        edit_menu.addAction(self.remove_last_action)

        # View menu
        view_menu = menubar.addMenu("&View")
        if view_menu is None:
            return

        theme_menu = view_menu.addMenu("&Theme")
        self.theme_action_group = QActionGroup(self)
        self.theme_action_group.setExclusive(True)
        self.theme_actions = {}
        for display_name, key in theme_manager.get_available_themes():
            action = QAction(display_name, self)
            action.setCheckable(True)
            action.setChecked(key == theme_manager.get_theme_key())
            action.triggered.connect(lambda checked, k=key: self._set_theme(k))
            self.theme_action_group.addAction(action)
            theme_menu.addAction(action)
            self.theme_actions[key] = action

        toggle_theme_action = QAction(ACTION_LABELS["view.toggle_theme"], self)
        toggle_theme_action.setShortcut(kb.get("view.toggle_theme"))
        toggle_theme_action.triggered.connect(self._toggle_theme)
        view_menu.addAction(toggle_theme_action)

    def _report_keybinding_conflicts(self):
        for shortcut, actions in self.keybindings.get_conflicts():
            logger.warning("Shortcut %s is bound to several actions: %s",
                           shortcut, ", ".join(actions))
