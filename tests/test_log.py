"""Tests for logging configuration."""

import logging

import pytest

from termedit.log import configure_logging, default_log_path


@pytest.fixture
def package_logger():
    logger = logging.getLogger("termedit")
    old_level = logger.level
    old_handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in old_handlers:
            handler.close()
    logger.handlers = old_handlers
    logger.setLevel(old_level)


def test_log_file_from_environment(tmp_path, monkeypatch, package_logger):
    path = tmp_path / "logs" / "editor.log"
    monkeypatch.setenv("TERMEDIT_LOG_FILE", str(path))
    monkeypatch.setenv("TERMEDIT_LOG_LEVEL", "debug")

    handler = configure_logging()

    assert isinstance(handler, logging.FileHandler)
    assert package_logger.level == logging.DEBUG
    logging.getLogger("termedit.editor").debug("hello from the editor")
    handler.flush()
    assert "hello from the editor" in path.read_text(encoding="utf-8")


def test_default_level_is_warning(tmp_path, monkeypatch, package_logger):
    monkeypatch.setenv("TERMEDIT_LOG_FILE", str(tmp_path / "x.log"))
    monkeypatch.delenv("TERMEDIT_LOG_LEVEL", raising=False)
    configure_logging()
    assert package_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_warning(tmp_path, monkeypatch, package_logger):
    monkeypatch.setenv("TERMEDIT_LOG_FILE", str(tmp_path / "x.log"))
    monkeypatch.setenv("TERMEDIT_LOG_LEVEL", "chatty")
    configure_logging()
    assert package_logger.level == logging.WARNING


def test_unwritable_location_disables_logging(tmp_path, monkeypatch, package_logger):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    monkeypatch.setenv("TERMEDIT_LOG_FILE", str(blocker / "sub" / "x.log"))
    handler = configure_logging()
    assert isinstance(handler, logging.NullHandler)


def test_default_path_is_named_after_app():
    path = default_log_path()
    assert path.name == "termedit.log"
