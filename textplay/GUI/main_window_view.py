"""Theme switching for MainWindow."""

from .styles import theme_manager


class ViewOperationsMixin:
    """Mixin providing theme switching."""

    def _set_theme(self, theme_key: str):
        """Switch the application theme ("light" or "dark")."""
        theme_manager.set_theme_by_key(theme_key)
        action = self.theme_actions.get(theme_manager.get_theme_key())
        if action is not None:
            action.setChecked(True)
        self._apply_theme()

    def _toggle_theme(self):
        self._set_theme("light" if theme_manager.current_theme.is_dark else "dark")

    def _apply_theme(self):
        """Apply the current theme to window-level widgets.

        The canvas and control panel follow theme changes on their own.
        """
        self.setStyleSheet(theme_manager.current_theme.generate_dark_stylesheet())
