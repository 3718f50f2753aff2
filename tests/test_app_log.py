"""
Unit tests for app_log.py.

The root logger and sys.excepthook are restored after each test.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from app_log import LOG_BACKUPS, LOG_MAX_BYTES, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level, hook = root.handlers[:], root.level, sys.excepthook
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    sys.excepthook = hook


class TestSetupLogging:

    def test_log_file_is_size_capped(self, tmp_path):
        log_file = tmp_path / "state" / "volnote.log"
        setup_logging(log_file=log_file)

        files = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
        assert len(files) == 1
        assert files[0].maxBytes == LOG_MAX_BYTES
        assert files[0].backupCount == LOG_BACKUPS
        assert log_file.parent.is_dir()

    def test_verbose_adds_stderr_at_debug(self, tmp_path):
        setup_logging(verbose=True, log_file=tmp_path / "volnote.log")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(type(h) is logging.StreamHandler for h in root.handlers)
