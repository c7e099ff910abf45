"""
keybindings.py - Keyboard shortcuts for the TextPlay menus.

Defaults are built in. Any of them can be overridden by editing
``~/.textplay/keybindings.json``, a JSON object mapping action names to
shortcut strings. The application only ever reads that file.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Default keybindings: action_name -> shortcut string
DEFAULTS = {
    "file.exit": "Ctrl+Q",
    "edit.remove_last": "Ctrl+R",
    "view.toggle_theme": "Ctrl+T",
}

# Menu text for each action
ACTION_LABELS = {
    "file.exit": "Exit",
    "edit.remove_last": "Remove Last Text",
    "view.toggle_theme": "Toggle Dark Theme",
}

_CONFIG_FILE = Path.home() / ".textplay" / "keybindings.json"


class KeybindingsRegistry:
    """Menu shortcuts: the defaults merged with the user's overrides."""

    def __init__(self, config_path=None):
        self.config_path = Path(config_path) if config_path else _CONFIG_FILE
        self._bindings = dict(DEFAULTS)
        self._bindings.update(self._read_overrides())

    def get(self, action_name):
        """Return the shortcut for ``action_name``, or "" if it has none."""
        return self._bindings.get(action_name, "")

    def get_conflicts(self):
        """Return (shortcut, [action, ...]) for every shortcut bound more than once.

        Shortcuts compare case-insensitively; unbound actions never conflict.
        """
        by_shortcut = {}
        for action, shortcut in self._bindings.items():
            if shortcut:
                by_shortcut.setdefault(shortcut.lower(), []).append(action)
        return [(s, actions) for s, actions in by_shortcut.items() if len(actions) > 1]

    def _read_overrides(self):
        if not self.config_path.exists():
            return {}
        try:
            with open(self.config_path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to load keybindings config: %s", e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring keybindings config that is not a JSON object")
            return {}

        overrides = {}
        for action, shortcut in data.items():
            if action not in DEFAULTS:
                logger.debug("Ignoring unknown keybinding %r", action)
            elif not isinstance(shortcut, str):
                logger.warning("Ignoring non-string shortcut for %s", action)
            else:
                overrides[action] = shortcut
        return overrides
