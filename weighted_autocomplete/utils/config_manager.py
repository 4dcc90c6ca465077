# config_manager.py - JSON config manager

import json
import logging
import os

from rich.console import Console
from rich.table import Table

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 5,  # top k shown by cli/tui
    "show_weights": True,
    "search_url": "https://www.google.com/search?q=",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _cast(default, val):
    """Coerce a string to the type of the default value."""
    if isinstance(default, bool):
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"not a boolean: {val!r}")
    if isinstance(default, int) and isinstance(val, bool):
        raise ValueError(f"not an integer: {val!r}")
    return type(default)(val)


def _coerce(key, val):
    """Cast val for option key and check its range."""
    out = _cast(DEFAULTS[key], val)
    if key == "max_suggestions" and out < 0:
        raise ValueError(f"max_suggestions must be >= 0, got {out}")
    return out


class Config:
    def __init__(self, path="config.json", autosave=True):
        self.path = path
        self.autosave = autosave
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if self.path and os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("config %s unreadable, using defaults: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("config %s is not a JSON object, using defaults", self.path)
                return
            for k, v in loaded.items():
                if k not in self.data:
                    logger.debug("ignoring unknown config key %r", k)
                    continue
                try:
                    self.data[k] = _coerce(k, v)
                except (TypeError, ValueError) as e:
                    logger.warning("config %s: bad value for %r, keeping default: %s", self.path, k, e)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self, console: Console = None):
        console = console or Console()
        table = Table(title="config")
        table.add_column("key")
        table.add_column("value")
        for k, v in self.data.items():
            table.add_row(k, str(v))
        console.print(table)

    def set(self, key, val):
        """Set an option, casting to the type of its default. Raises KeyError/ValueError."""
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        self.data[key] = _coerce(key, val)
        if self.autosave:
            self.save()
        return self.data[key]
