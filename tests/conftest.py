"""Pytest configuration and shared fixtures for the notion2md test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path

import pytest
from utils import PAGE_ID, single_page_source

from notion2md.constants import CONFIG_PATH_ENV_VAR, NOTION_TOKEN_ENV_VAR


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep tests away from the real token and config file.

    Returns
    -------
    Path
        Config file location used for the test (not created)

    """
    config_path = tmp_path / "config" / "notion2md.yaml"
    monkeypatch.delenv(NOTION_TOKEN_ENV_VAR, raising=False)
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(config_path))
    return config_path


@pytest.fixture
def config_path(isolated_environment: Path) -> Path:
    """Location of the per-test config file."""
    return isolated_environment


@pytest.fixture
def page_id() -> str:
    return PAGE_ID


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Directory for downloaded images; not created up front."""
    return tmp_path / "images"


@pytest.fixture
def empty_page_source():
    """A content source holding a single page without blocks."""
    return single_page_source([])


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by CLI runs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
