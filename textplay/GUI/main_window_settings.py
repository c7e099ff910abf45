"""Settings persistence and window lifecycle for MainWindow."""

from PyQt6.QtCore import QSettings

from .styles import THEME_KEYS, theme_manager

SETTINGS_ORG = "TextPlay"
SETTINGS_APP = "TextPlay"


class SettingsMixin:
    """Mixin providing QSettings persistence and closeEvent.

    Only window geometry and the theme are remembered. The font controls
    always start at their defaults.
    """

    def _settings(self):
        return QSettings(SETTINGS_ORG, SETTINGS_APP)

    def _save_settings(self):
        """Save user preferences via QSettings"""
        settings = self._settings()
        settings.setValue("window/geometry", self.saveGeometry())
        settings.setValue("view/theme", theme_manager.get_theme_key())

    def _restore_settings(self):
        """Restore user preferences from QSettings"""
        settings = self._settings()

        geometry = settings.value("window/geometry")
        if geometry:
            self.restoreGeometry(geometry)

        saved_theme = settings.value("view/theme")
        if saved_theme in THEME_KEYS:
            self._set_theme(saved_theme)

    def closeEvent(self, event):
        """Save settings before closing"""
        self._save_settings()
        super().closeEvent(event)
