# mixer.py
from __future__ import annotations

import logging
from typing import Optional

from pa_cli import PulseCli
from pa_types import Device, VolumeState
from pa_volume import parse_volume, volume_step_token
from sink_directory import SinkDirectory


log = logging.getLogger(__name__)


class Mixer:
    def __init__(self, cli: PulseCli, directory: SinkDirectory) -> None:
        self._cli = cli
        self._directory = directory

    def get_volume(self) -> VolumeState:
        return parse_volume(self._cli.query_volume())

    def change_volume(self, amount: int) -> None:
        token = volume_step_token(amount)
        self._cli.set_volume(token)
        log.debug("Volume changed by %s", token)

    def toggle_mute(self) -> Optional[Device]:
        self._directory.refresh()
        active = self._directory.active()
        if active is None:
            log.info("No active sink, mute toggle skipped.")
            return None
        self._cli.toggle_sink_mute(active.index)
        return active
