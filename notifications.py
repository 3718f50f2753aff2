# notifications.py
from __future__ import annotations

import html
import logging
from typing import Any, Callable, Optional, Sequence, Tuple

from pa_types import Device, VolumeState


log = logging.getLogger(__name__)

APP_NAME = "volnote"
NUM_BLOCKS = 20


def build_volume_text(info: VolumeState) -> Tuple[str, str]:
    full = info.percent * NUM_BLOCKS // 100
    empty = NUM_BLOCKS - full

    title = f"Volume ({info.percent}%{', muted' if info.muted else ''})"
    ch = "░" if info.muted else "█"
    body = f"{ch * full}<span color=\"grey\">{ch * empty}</span>"
    return title, body


def build_sink_text(devices: Sequence[Device]) -> str:
    lines = []
    for d in devices:
        if d.active:
            lines.append(f"→ {html.escape(d.name)}")
        else:
            lines.append(f"<span color=\"grey\">{html.escape(d.name)}</span>")
    return "\n".join(lines)


def _session_notifications() -> Any:
    from pydbus import SessionBus

    return SessionBus().get(".Notifications")


class Notifier:
    """
    One notification bubble that is replaced in place on every update.

    The server-assigned id is kept in `id` so a later process can keep
    updating the same bubble.
    """

    def __init__(
        self,
        default_summary: str,
        notification_id: Optional[int] = None,
        icon: str = "audio-headphones",
        timeout_ms: int = 2000,
        connect: Callable[[], Any] = _session_notifications,
    ) -> None:
        self.default_summary = default_summary
        self.id = notification_id
        self.icon = icon
        self.timeout_ms = timeout_ms
        self._connect = connect
        self._proxy: Any = None

    def _server(self) -> Any:
        if self._proxy is None:
            self._proxy = self._connect()
        return self._proxy

    def notify(self, summary: Optional[str], body: str) -> int:
        nid = self._server().Notify(
            APP_NAME,
            self.id or 0,
            self.icon,
            summary or self.default_summary,
            body,
            [],
            {},
            self.timeout_ms,
        )
        self.id = int(nid)
        return self.id


class VolumeNotification:
    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier

    @classmethod
    def create(cls, notification_id: Optional[int] = None, **kw: Any) -> "VolumeNotification":
        return cls(Notifier("Volume", notification_id, **kw))

    def notify(self, info: VolumeState) -> None:
        title, body = build_volume_text(info)
        self.notifier.notify(title, body)


class SinkNotification:
    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier

    @classmethod
    def create(cls, notification_id: Optional[int] = None, **kw: Any) -> "SinkNotification":
        return cls(Notifier("Audio Output", notification_id, **kw))

    def notify_start(self) -> None:
        self.notifier.notify(None, "Changing output...")

    def notify(self, devices: Sequence[Device]) -> None:
        self.notifier.notify(None, build_sink_text(devices))
