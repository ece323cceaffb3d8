"""Shared pytest configuration and fixtures for all tests."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no network or external services")
    config.addinivalue_line("markers", "link: link extraction and checking")
    config.addinivalue_line("markers", "config: configuration loading and commands")
    config.addinivalue_line("markers", "cli: command line interface")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def mdlinks_home(tmp_path: Path, monkeypatch) -> Path:
    """Point MDLINKS_HOME at a per-test directory so no test touches ~/.mdlinks."""
    home = tmp_path / "mdlinks_home"
    home.mkdir()
    monkeypatch.setenv("MDLINKS_HOME", str(home))
    return home


@pytest.fixture
def write_config(mdlinks_home: Path) -> Callable[[dict], Path]:
    """Write a config.json into MDLINKS_HOME and return its path."""

    def _write(config_dict: dict) -> Path:
        path = mdlinks_home / "config.json"
        path.write_text(json.dumps(config_dict), encoding="utf-8")
        return path

    return _write


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    return _run_cmd
