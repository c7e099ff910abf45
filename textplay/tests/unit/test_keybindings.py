"""
Unit tests for keybindings.py - KeybindingsRegistry.
"""

import json

import pytest
from textplay.GUI.keybindings import ACTION_LABELS, DEFAULTS, KeybindingsRegistry


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "kb.json"


def write_config(path, data):
    path.write_text(json.dumps(data))


class TestDefaults:
    def test_defaults_without_config_file(self, config_path):
        reg = KeybindingsRegistry(config_path=config_path)
        assert reg.get("file.exit") == "Ctrl+Q"
        assert reg.get("edit.remove_last") == "Ctrl+R"
        assert reg.get("view.toggle_theme") == "Ctrl+T"

    def test_get_unknown_action(self, config_path):
        reg = KeybindingsRegistry(config_path=config_path)
        assert reg.get("nonexistent.action") == ""

    def test_missing_file_not_created(self, config_path):
        KeybindingsRegistry(config_path=config_path)
        assert not config_path.exists()

    def test_every_action_has_label(self):
        assert set(ACTION_LABELS) == set(DEFAULTS)


class TestOverrides:
    def test_override_replaces_default(self, config_path):
        write_config(config_path, {"edit.remove_last": "Delete"})
        reg = KeybindingsRegistry(config_path=config_path)
        assert reg.get("edit.remove_last") == "Delete"
        assert reg.get("file.exit") == "Ctrl+Q"

    def test_empty_string_unbinds(self, config_path):
        write_config(config_path, {"view.toggle_theme": ""})
        reg = KeybindingsRegistry(config_path=config_path)
        assert reg.get("view.toggle_theme") == ""

    def test_unknown_actions_ignored(self, config_path):
        write_config(config_path, {"file.new": "Ctrl+N", "file.exit": "Alt+F4"})
        reg = KeybindingsRegistry(config_path=config_path)
        assert reg.get("file.new") == ""
        assert reg.get("file.exit") == "Alt+F4"

    def test_non_string_shortcut_ignored(self, config_path, caplog):
        write_config(config_path, {"file.exit": 42})
        reg = KeybindingsRegistry(config_path=config_path)
        assert reg.get("file.exit") == "Ctrl+Q"
        assert "file.exit" in caplog.text

    def test_corrupt_file_keeps_defaults(self, config_path, caplog):
        config_path.write_text("{not json")
        reg = KeybindingsRegistry(config_path=config_path)
        assert reg.get("file.exit") == "Ctrl+Q"
        assert "Failed to load keybindings" in caplog.text

    def test_non_object_ignored(self, config_path):
        write_config(config_path, ["Ctrl+X"])
        reg = KeybindingsRegistry(config_path=config_path)
        assert reg.get("file.exit") == "Ctrl+Q"


class TestConflicts:
    def test_no_conflicts_by_default(self, config_path):
        assert KeybindingsRegistry(config_path=config_path).get_conflicts() == []

    def test_conflicts_detected_case_insensitively(self, config_path):
        write_config(config_path, {"view.toggle_theme": "ctrl+r"})
        conflicts = KeybindingsRegistry(config_path=config_path).get_conflicts()
        assert len(conflicts) == 1
        shortcut, actions = conflicts[0]
        assert shortcut == "ctrl+r"
        assert sorted(actions) == ["edit.remove_last", "view.toggle_theme"]

    def test_unbound_actions_never_conflict(self, config_path):
        write_config(config_path, {"file.exit": "", "view.toggle_theme": ""})
        assert KeybindingsRegistry(config_path=config_path).get_conflicts() == []
