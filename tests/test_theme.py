"""Tests for the YAML color theme."""

import pytest

from s_todo import theme


@pytest.fixture(autouse=True)
def reset_theme():
    yield
    theme.load_theme()


class TestColorPair:
    def test_resolve(self):
        pair = theme.ColorPair("white", "black")
        assert pair.resolve(True) == "white"
        assert pair.resolve(False) == "black"


class TestLoadTheme:
    def test_defaults_loaded_on_import(self):
        assert theme.ACTIVE_BORDER.dark == "yellow"
        assert theme.ROW_HIGHLIGHT.dark == "reverse"

    def test_override_merges(self, tmp_path):
        path = tmp_path / "theme.yaml"
        path.write_text("panel:\n  active_border:\n    dark: red\n", encoding="utf-8")
        theme.load_theme(path)
        assert theme.ACTIVE_BORDER.dark == "red"
        # untouched keys keep their defaults
        assert theme.INACTIVE_BORDER.dark == "#5c6370"

    def test_missing_override_ignored(self, tmp_path):
        theme.load_theme(tmp_path / "missing.yaml")
        assert theme.ACTIVE_BORDER.dark == "yellow"

    def test_invalid_yaml_ignored(self, tmp_path):
        path = tmp_path / "theme.yaml"
        path.write_text("panel: [unclosed", encoding="utf-8")
        theme.load_theme(path)
        assert theme.ACTIVE_BORDER.dark == "yellow"

    def test_wrong_types_fall_back(self, tmp_path):
        path = tmp_path / "theme.yaml"
        path.write_text("panel: 3\nrow:\n  completed: grey\n", encoding="utf-8")
        theme.load_theme(path)
        assert theme.ACTIVE_BORDER.dark == "yellow"
        assert theme.ROW_COMPLETED == theme.ColorPair("white", "black")


class TestMergeTheme:
    def test_entry_keys_update_defaults(self):
        base = {"panel": {"active_border": {"dark": "yellow", "light": "olive"}}, "help": {}}
        merged = theme._merge_theme(base, {"panel": {"active_border": {"light": "navy"}}})
        assert merged["panel"]["active_border"] == {"dark": "yellow", "light": "navy"}
        assert merged["help"] == {}
        assert base["panel"]["active_border"]["light"] == "olive"

    def test_non_mapping_section_ignored(self):
        base = {"row": {"working": {"dark": "green", "light": "green"}}}
        assert theme._merge_theme(base, {"row": "red"}) == base
