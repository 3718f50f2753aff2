# sink_directory.py
from __future__ import annotations

from typing import List, Optional, Tuple

from pa_cli import PulseCli
from pa_sinks import parse_sinks
from pa_types import Device


def find_active(devices: List[Device]) -> Optional[Device]:
    return next((d for d in devices if d.active), None)


class SinkDirectory:
    """
    Last fetched sink list. refresh() replaces it wholesale; readers that need
    fresh data must refresh first.
    """

    def __init__(self, cli: PulseCli) -> None:
        self._cli = cli
        self._devices: List[Device] = []
        self._active: Optional[Device] = None

    def refresh(self) -> Tuple[Device, ...]:
        devices = parse_sinks(self._cli.list_sinks())
        self._devices = devices
        self._active = find_active(devices)
        return tuple(devices)

    def active(self) -> Optional[Device]:
        return self._active

    def interfaces(self) -> Tuple[Device, ...]:
        return tuple(self._devices)
