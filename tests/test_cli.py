"""Test the command line entry point."""

import logging
from unittest.mock import patch

from homeend.__main__ import main, setup_logging
from homeend.config import NavigationConfig


def test_version(capsys):
    with patch("homeend.__main__.get_version_string", return_value="homeend 1.2.3"):
        assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "homeend 1.2.3"


def test_too_many_arguments(capsys):
    assert main(["a.txt", "b.txt"]) == 2
    assert "usage:" in capsys.readouterr().err


def test_unknown_option(capsys):
    assert main(["--frobnicate"]) == 2
    assert "usage:" in capsys.readouterr().err


def test_log_file_needs_path(capsys):
    assert main(["--log-file"]) == 2
    assert "usage:" in capsys.readouterr().err


def test_runs_editor_on_file(tmp_path):
    log_file = tmp_path / "homeend.log"
    with patch("homeend.config.load_config", return_value=NavigationConfig()), \
            patch("homeend.__main__.setup_logging") as setup, \
            patch("homeend.editor.Editor") as editor_class:
        assert main(["--log-file", str(log_file), "doc.txt"]) == 0

    setup.assert_called_once_with(str(log_file), logging.WARNING)
    editor = editor_class.return_value
    editor.load_file.assert_called_once_with("doc.txt")
    editor.run.assert_called_once_with()


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "homeend.log"
    logger = logging.getLogger("homeend")
    handlers = list(logger.handlers)
    try:
        setup_logging(str(log_file), logging.INFO)
        logging.getLogger("homeend.navigation").info("hello from navigation")
        for handler in logger.handlers:
            handler.flush()
    finally:
        for handler in list(logger.handlers):
            if handler not in handlers:
                handler.close()
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    text = log_file.read_text(encoding="utf-8")
    assert "INFO | homeend.navigation | hello from navigation" in text


def test_version_string():
    from homeend import version
    with patch.object(version, "get_version", return_value="1.0"):
        with patch.object(version, "_git_commit", return_value=None):
            assert version.get_version_string() == "homeend 1.0"
        with patch.object(version, "_git_commit", return_value="abc1234"):
            assert version.get_version_string() == "homeend 1.0 (abc1234)"
