# app_log.py
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from store_config import user_state_dir


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_MAX_BYTES = 1 * 1024 * 1024
LOG_BACKUPS = 3


def log_file_path() -> Path:
    return user_state_dir() / "volnote.log"


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Log to a file (hotkey-launched processes have no terminal); with
    `verbose`, also to stderr at DEBUG level.
    """
    path = log_file or log_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    handlers: List[logging.Handler] = [
        RotatingFileHandler(path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"),
    ]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    def _log_uncaught(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return
        logging.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))

    sys.excepthook = _log_uncaught
