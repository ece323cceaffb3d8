"""Unit tests for mdlinks.utils (home dir, version, logging)."""

import importlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from mdlinks.utils import get_home_dir, logger

# The package re-exports the function under the module name
version_module = importlib.import_module("mdlinks.utils.get_package_version")


@pytest.fixture
def fresh_logging(monkeypatch):
    """Allow configure_logging to run again and drop handlers it adds."""
    monkeypatch.setattr(logger, "_CONFIGURED", False)
    mdlinks_logger = logging.getLogger("mdlinks")
    handlers_before = list(mdlinks_logger.handlers)
    level_before = mdlinks_logger.level
    yield mdlinks_logger
    for handler in list(mdlinks_logger.handlers):
        if handler not in handlers_before:
            handler.close()
            mdlinks_logger.removeHandler(handler)
    mdlinks_logger.setLevel(level_before)


def test_get_home_dir_from_env(mdlinks_home):
    assert get_home_dir() == mdlinks_home.resolve()


def test_get_home_dir_default(monkeypatch):
    monkeypatch.delenv("MDLINKS_HOME")
    assert get_home_dir() == Path.home() / ".mdlinks"


def test_get_package_version_unknown(monkeypatch):
    def not_installed(name):
        raise version_module.importlib.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(version_module, "_VERSION_CACHE", None)
    monkeypatch.setattr(version_module.importlib.metadata, "version", not_installed)

    assert version_module.get_package_version() == "unknown"


def test_configure_logging_writes_rotating_file(tmp_path, fresh_logging):
    logger.configure_logging(home=tmp_path / "logs", level="DEBUG")

    handlers = [h for h in fresh_logging.handlers if isinstance(h, RotatingFileHandler)]
    assert len(handlers) == 1
    assert handlers[0].maxBytes == 5 * 1024 * 1024
    assert handlers[0].backupCount == 3
    assert fresh_logging.level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.WARNING

    logging.getLogger("mdlinks.api.link.check_file").info("Processing: README.md")
    handlers[0].flush()
    assert "Processing: README.md" in (tmp_path / "logs" / "mdlinks.log").read_text(encoding="utf-8")


def test_configure_logging_only_once(tmp_path, fresh_logging):
    logger.configure_logging(home=tmp_path)
    count = len(fresh_logging.handlers)

    logger.configure_logging(home=tmp_path, level="WARNING")

    assert len(fresh_logging.handlers) == count
    assert fresh_logging.level == logging.WARNING


def test_set_log_level(fresh_logging):
    logger.set_log_level("ERROR")
    assert fresh_logging.level == logging.ERROR
