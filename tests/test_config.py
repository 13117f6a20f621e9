"""Test loading the user configuration file."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from homeend.config import (
    NavigationConfig,
    default_config_path,
    load_config,
    validate_setting,
)
from homeend.constants import EditorConstants


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults():
    config = NavigationConfig()
    assert config.mark_ring_size == EditorConstants.DEFAULT_MARK_RING_SIZE
    assert config.page_context_lines == EditorConstants.DEFAULT_PAGE_CONTEXT_LINES
    assert config.log_level == "WARNING"
    assert config.numeric_log_level == logging.WARNING


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "nope.json") == NavigationConfig()


def test_values_are_loaded(tmp_path):
    path = write_config(tmp_path, {
        "mark_ring_size": 4,
        "page_context_lines": 0,
        "log_level": "debug",
    })

    config = load_config(path)

    assert config.mark_ring_size == 4
    assert config.page_context_lines == 0
    assert config.log_level == "DEBUG"
    assert config.numeric_log_level == logging.DEBUG


def test_invalid_values_fall_back_to_defaults(tmp_path, caplog):
    path = write_config(tmp_path, {
        "mark_ring_size": 0,
        "page_context_lines": "two",
        "log_level": "LOUD",
    })

    with caplog.at_level(logging.WARNING, logger="homeend.config"):
        config = load_config(path)

    assert config == NavigationConfig()
    assert "mark_ring_size" in caplog.text


def test_unknown_keys_are_ignored(tmp_path):
    path = write_config(tmp_path, {"colour": "green", "mark_ring_size": 8})
    config = load_config(path)
    assert config.mark_ring_size == 8
    assert not hasattr(config, "colour")


def test_corrupt_file_gives_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="homeend.config"):
        config = load_config(path)

    assert config == NavigationConfig()
    assert "Could not load config" in caplog.text


def test_non_dict_file_gives_defaults(tmp_path):
    path = write_config(tmp_path, [1, 2, 3])
    assert load_config(path) == NavigationConfig()


@pytest.mark.parametrize("key, value, valid", [
    ("mark_ring_size", 1, True),
    ("mark_ring_size", 0, False),
    ("mark_ring_size", True, False),
    ("mark_ring_size", 2.5, False),
    ("page_context_lines", 0, True),
    ("page_context_lines", -1, False),
    ("log_level", "info", True),
    ("log_level", 10, False),
    ("unknown", 1, False),
])
def test_validate_setting(key, value, valid):
    assert validate_setting(key, value) is valid


def test_default_path_uses_user_config_dir(tmp_path):
    with patch("homeend.config.platformdirs.user_config_dir", return_value=str(tmp_path)) as config_dir:
        path = default_config_path()
    config_dir.assert_called_once_with("homeend")
    assert path == Path(tmp_path) / "config.json"


def test_load_config_without_path_reads_default(tmp_path):
    path = write_config(tmp_path, {"mark_ring_size": 3})
    with patch("homeend.config.default_config_path", return_value=path):
        assert load_config().mark_ring_size == 3
