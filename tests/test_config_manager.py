# tests/test_config_manager.py
import json

import pytest
from word_search.core.errors import ConfigError
from word_search.utils.config_manager import Config, DEFAULTS


def test_missing_file_writes_defaults(tmp_path):
    path = tmp_path / "sub" / "config.json"
    cfg = Config(str(path))
    assert cfg.as_dict() == DEFAULTS
    assert json.loads(path.read_text(encoding="utf8")) == DEFAULTS


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_suggestions": 3, "word_file": "w.txt"}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("max_suggestions") == 3
    assert cfg.get("word_file") == "w.txt"
    assert cfg.get("show_ranks") is True


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2", encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(path))


def test_non_object_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(path))


def test_set_coerces_and_saves(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    cfg.set("max_suggestions", "7")
    cfg.set("show_ranks", "off")
    assert Config(str(path)).get("max_suggestions") == 7
    assert Config(str(path)).get("show_ranks") is False


@pytest.mark.parametrize("key,val", [("nope", 1), ("max_suggestions", "lots"), ("show_ranks", "maybe")])
def test_set_rejects(tmp_path, key, val):
    cfg = Config(str(tmp_path / "config.json"))
    with pytest.raises(ConfigError):
        cfg.set(key, val)


def test_file_values_are_type_checked(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_suggestions": "3", "show_ranks": "false"}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("max_suggestions") == 3
    assert cfg.get("show_ranks") is False


def test_bad_file_value_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_suggestions": "many"}), encoding="utf8")
    with pytest.raises(ConfigError) as ei:
        Config(str(path))
    assert ei.value.key == "max_suggestions"


def test_unknown_file_keys_kept_as_is(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf8")
    assert Config(str(path)).get("theme") == "dark"
