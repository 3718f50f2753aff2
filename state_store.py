# state_store.py
from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from store_config import APP_NAME, user_runtime_dir


log = logging.getLogger(__name__)

NotificationIds = Tuple[Optional[int], Optional[int]]


def _parse_id(raw: str) -> Optional[int]:
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        v = int(raw)
    except ValueError:
        return None
    return v if v > 0 else None


@dataclass(frozen=True)
class NotificationIdStore:
    """Notification ids of the previous CLI run, so bubbles get replaced, not stacked."""

    app_name: str = APP_NAME
    filename: str = "ids.cfg"

    @property
    def file_path(self) -> Path:
        return user_runtime_dir(self.app_name) / self.filename

    def load(self) -> NotificationIds:
        p = self.file_path
        if not p.exists():
            return None, None
        cfg = configparser.ConfigParser()
        try:
            cfg.read(p, encoding="utf-8")
        except configparser.Error:
            log.warning("Ignoring unreadable notification id file %s.", p, exc_info=True)
            return None, None
        return (
            _parse_id(cfg.get("Notifications", "volume", fallback="")),
            _parse_id(cfg.get("Notifications", "sink", fallback="")),
        )

    def save(self, ids: NotificationIds) -> None:
        volume_id, sink_id = ids
        cfg = configparser.ConfigParser()
        cfg.add_section("Notifications")
        cfg.set("Notifications", "volume", "" if volume_id is None else str(volume_id))
        cfg.set("Notifications", "sink", "" if sink_id is None else str(sink_id))

        p = self.file_path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(".cfg.tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                cfg.write(f)
            tmp.replace(p)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
