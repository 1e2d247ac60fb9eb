"""Unit tests for logging configuration."""

import logging

import pytest

from notion2md.logging_utils import configure_logging


@pytest.fixture
def restore_root_logger():
    levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield logging.getLogger()
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.mark.unit
class TestConfigureLogging:
    def test_level_from_name(self, restore_root_logger):
        root = configure_logging("info")
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_httpx_quiet_by_default(self, restore_root_logger):
        configure_logging(logging.DEBUG)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_trace_keeps_httpx_and_timestamps(self, restore_root_logger):
        logging.getLogger("httpx").setLevel(logging.NOTSET)
        root = configure_logging(logging.DEBUG, trace_mode=True)
        assert logging.getLogger("httpx").level == logging.NOTSET
        assert "%(asctime)s" in root.handlers[0].formatter._fmt

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "export.log"
        root = configure_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("notion2md.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
