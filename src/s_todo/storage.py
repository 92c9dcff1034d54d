"""JSON persistence for the project list.

Best effort both ways: a missing or malformed file loads as the built-in
default, and a failed save is logged and otherwise ignored.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from s_todo.models import AppData, default_data
from s_todo.timer import Clock, system_clock

logger = logging.getLogger(__name__)

APP_DIR_NAME = "s_todo"
DATA_FILE = "data.json"
FALLBACK_DATA_FILE = "s_todo_data.json"


def default_data_path() -> Path:
    """~/.config/s_todo/data.json, or ./s_todo_data.json without a home."""
    home = os.environ.get("HOME")
    if home:
        return Path(home) / ".config" / APP_DIR_NAME / DATA_FILE
    return Path(".") / FALLBACK_DATA_FILE


def load_data(path: Path, clock: Clock = system_clock) -> AppData:
    """Read *path*. Anything short of a well-formed document yields the default."""
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.info("No data loaded from %s: %s", path, e)
        return default_data(clock)

    try:
        return AppData.from_dict(json.loads(raw.decode("utf-8")), clock)
    except (ValueError, KeyError, TypeError, AttributeError, OverflowError) as e:
        logger.warning("Ignoring malformed data file %s: %s", path, e)
        return default_data(clock)


def save_data(data: AppData, path: Path) -> None:
    """Write *data* to *path* atomically (temp file + rename). Never raises."""
    try:
        content = json.dumps(data.to_dict(), ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        logger.warning("Could not serialize data: %s", e)
        return

    try:
        target_dir = path.parent
        target_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=target_dir, suffix=".tmp", prefix=".s-todo-")
    except OSError as e:
        logger.warning("Could not save %s: %s", path, e)
        return

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except OSError as e:
        logger.warning("Could not save %s: %s", path, e)
        try:
            os.unlink(tmp_path)
        except OSError:
            pass


class JsonStore:
    """Persistence boundary bound to a single file: ``load()`` and ``save(data)``."""

    def __init__(self, path: Path | None = None, clock: Clock = system_clock) -> None:
        self.path = path if path is not None else default_data_path()
        self._clock = clock

    def load(self) -> AppData:
        return load_data(self.path, self._clock)

    def save(self, data: AppData) -> None:
        save_data(data, self.path)
