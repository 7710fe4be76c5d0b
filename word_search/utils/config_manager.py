# config_manager.py - JSON config manager

import json
import os

from word_search.core.errors import ConfigError

DEFAULTS = {
    "word_file": None,        # loaded when no path is given on the command line
    "max_suggestions": 0,     # 0 = show every completion
    "show_ranks": True,
    "log_path": os.path.join("logs", "word_search.log"),
    "log_level": "WARNING",
}


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"cannot read config {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"config {self.path} must hold a JSON object")
        for key, val in loaded.items():
            # known options get the same type checks as set()
            self.data[key] = _coerce(key, val) if key in DEFAULTS else val

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def as_dict(self):
        return dict(self.data)

    def set(self, key, val):
        """Set an option, coercing strings to the type of its default, then save."""
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}", key=key)
        self.data[key] = _coerce(key, val)
        self.save()


def _coerce(key, val):
    default = DEFAULTS[key]
    if default is None or val is None:
        return val
    kind = type(default)
    if kind is bool and isinstance(val, str):
        low = val.strip().lower()
        if low in ("1", "true", "yes", "on"):
            return True
        if low in ("0", "false", "no", "off"):
            return False
        raise ConfigError(f"bad value for {key}: {val!r}", key=key)
    try:
        return kind(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"bad value for {key}: {val!r}", key=key) from e
