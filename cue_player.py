# cue_player.py
"""
Notification cue playback with a single outstanding player process.

The cue is fire-and-forget: play() never waits for the player. Whether the
previous player has finished is only checked (with a non-blocking poll) the
next time a cue is requested. While it is still running the new cue is
dropped, so cues never overlap.
"""
from __future__ import annotations

import logging
import subprocess
import threading
from typing import Callable, Optional

from pa_errors import SpawnError
from pa_types import Device


log = logging.getLogger(__name__)

DEFAULT_CUE_SOUND = "/usr/share/sounds/freedesktop/stereo/message.oga"

Spawner = Callable[[int, str], subprocess.Popen]


class CueSlot:
    """Idle, or Outstanding(handle). Callers must hold `lock`."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self._handle: Optional[subprocess.Popen] = None

    @property
    def outstanding(self) -> bool:
        return self._handle is not None

    def observe_complete(self) -> bool:
        """Clear the slot if its process has exited. True when the slot is idle."""
        if self._handle is None:
            return True
        rc = self._handle.poll()
        if rc is None:
            return False
        log.debug("Cue process %s exited with %s.", self._handle.pid, rc)
        self._handle = None
        return True

    def reserve(self, handle: subprocess.Popen) -> None:
        if self._handle is not None:
            raise RuntimeError("Cue slot is already reserved.")
        self._handle = handle


class CuePlayer:
    def __init__(
        self,
        spawner: Spawner,
        slot: Optional[CueSlot] = None,
        sound_file: str = DEFAULT_CUE_SOUND,
        enabled: bool = True,
    ) -> None:
        self._spawn = spawner
        self.slot = slot if slot is not None else CueSlot()
        self.sound_file = sound_file
        self.enabled = enabled

    @staticmethod
    def wanted(device: Device, force: bool) -> bool:
        # A running sink would mask (or garble) the cue.
        return force or not device.streaming

    def play(self, device: Device, force: bool = False) -> bool:
        """Start a cue on `device` if warranted and no cue is playing. Never raises."""
        if not self.enabled or not self.wanted(device, force):
            return False

        with self.slot.lock:
            if not self.slot.observe_complete():
                log.debug("Cue still playing, skipping.")
                return False
            try:
                handle = self._start(device)
            except SpawnError as e:
                log.error("%s", e)
                return False
            self.slot.reserve(handle)

        log.debug("Cue started on sink %d (pid %s).", device.index, handle.pid)
        return True

    def _start(self, device: Device) -> subprocess.Popen:
        try:
            return self._spawn(device.index, self.sound_file)
        except (OSError, ValueError) as e:
            raise SpawnError(f"Failed to start cue player for sink {device.index}: {e}") from e
