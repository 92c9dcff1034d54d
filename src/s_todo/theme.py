"""YAML-based color theme for S-Todo.

Loads colors from default_theme.yaml and optionally merges a user
override file on top.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NamedTuple

import yaml


class ColorPair(NamedTuple):
    """A pair of colors for dark and light themes."""

    dark: str
    light: str

    def resolve(self, is_dark: bool) -> str:
        return self.dark if is_dark else self.light


# ── Module-level variables (populated by _apply) ──────────────────

ACTIVE_BORDER: ColorPair
INACTIVE_BORDER: ColorPair
ROW_HIGHLIGHT: ColorPair
ROW_COMPLETED: ColorPair
ROW_WORKING: ColorPair
HELP_TEXT: ColorPair
POPUP_BORDER: ColorPair


# ── Internal helpers ──────────────────────────────────────────────

def _load_yaml(path: Path) -> dict:
    """Load a YAML file and return a dict (empty dict on error)."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


def _pair(d: object) -> ColorPair:
    """Convert a {dark: ..., light: ...} dict to a ColorPair."""
    if not isinstance(d, dict):
        return ColorPair("white", "black")
    return ColorPair(str(d.get("dark", "white")), str(d.get("light", "black")))


def _section(data: dict, key: str) -> dict:
    value = data.get(key, {})
    return value if isinstance(value, dict) else {}


def _merge_theme(base: dict, override: dict) -> dict:
    """Layer *override* on *base* per section and entry (returns a new dict).

    A mapping entry updates the default's dark/light keys, anything else
    replaces it. Sections that are not mappings are ignored.
    """
    result = {}
    for name in base.keys() | override.keys():
        section = dict(_section(base, name))
        for key, val in _section(override, name).items():
            old = section.get(key)
            if isinstance(old, dict) and isinstance(val, dict):
                section[key] = {**old, **val}
            else:
                section[key] = val
        result[name] = section
    return result


def _apply(data: dict) -> None:
    """Map parsed YAML data onto module-level constants."""
    mod = sys.modules[__name__]

    panel = _section(data, "panel")
    mod.ACTIVE_BORDER = _pair(panel.get("active_border", {}))
    mod.INACTIVE_BORDER = _pair(panel.get("inactive_border", {}))

    row = _section(data, "row")
    mod.ROW_HIGHLIGHT = _pair(row.get("highlight", {}))
    mod.ROW_COMPLETED = _pair(row.get("completed", {}))
    mod.ROW_WORKING = _pair(row.get("working", {}))

    mod.HELP_TEXT = _pair(_section(data, "help").get("text", {}))
    mod.POPUP_BORDER = _pair(_section(data, "popup").get("border", {}))


# ── Public API ────────────────────────────────────────────────────

def load_theme(override_path: Path | None = None) -> None:
    """Load the default theme and optionally merge user overrides.

    1. Load ``default_theme.yaml`` bundled with the package.
    2. If *override_path* points at an existing file, layer it on top.
    3. Apply the merged data to module-level constants.
    """
    data = _load_yaml(Path(__file__).parent / "default_theme.yaml")

    if override_path is not None and override_path.is_file():
        override = _load_yaml(override_path)
        if override:
            data = _merge_theme(data, override)

    _apply(data)


# Apply default theme on module import
load_theme()
