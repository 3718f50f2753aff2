# actions.py
"""
User-level actions: run one core operation, then show the result.

Every action ends the same way: notify, refresh, and offer a cue on the
active sink. A failing mutation is logged and the status is shown anyway, so
the user always sees the state the system actually ended up in.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from audio_core import AudioCore
from notifications import SinkNotification, VolumeNotification
from pa_errors import CoreError


log = logging.getLogger(__name__)


class VolumeActions:
    def __init__(
        self,
        core: AudioCore,
        volume_notification: VolumeNotification,
        sink_notification: SinkNotification,
        step: int = 5,
    ) -> None:
        self.core = core
        self.volume_notification = volume_notification
        self.sink_notification = sink_notification
        self.step = step

    def notification_ids(self) -> Tuple[Optional[int], Optional[int]]:
        return self.volume_notification.notifier.id, self.sink_notification.notifier.id

    def raise_volume(self, force_sound: bool = False) -> None:
        self.change_volume(self.step, force_sound)

    def lower_volume(self, force_sound: bool = False) -> None:
        self.change_volume(-self.step, force_sound)

    def change_volume(self, amount: int, force_sound: bool = False) -> None:
        try:
            self.core.change_volume(amount)
        except CoreError as e:
            log.warning("Failed to change volume: %s", e)
        self.show_status(force_sound)

    def toggle_mute(self, force_sound: bool = False) -> None:
        try:
            self.core.toggle_mute()
        except CoreError as e:
            log.warning("Failed to toggle mute: %s", e)
        self.show_status(force_sound)

    def cycle_devices(self, force_sound: bool = False) -> None:
        try:
            self.sink_notification.notify_start()
        except Exception:
            log.warning("Failed to send the notification.", exc_info=True)

        try:
            target = self.core.cycle_devices()
        except CoreError as e:
            log.error("Failed to change output: %s", e)
        else:
            log.info("Switched output to %s.", target.name or target.index)
            try:
                devices, _ = self.core.refresh_devices()
                self.sink_notification.notify(devices)
            except CoreError as e:
                log.error("Failed to list available outputs: %s", e)
            except Exception:
                log.warning("Failed to notify.", exc_info=True)

        self.play_cue(force_sound)

    def show_status(self, force_sound: bool = False) -> None:
        try:
            info = self.core.get_volume()
        except CoreError as e:
            log.error("Failed to get volume status: %s", e)
        else:
            try:
                self.volume_notification.notify(info)
            except Exception:
                log.warning("Failed to notify.", exc_info=True)

        self.play_cue(force_sound)

    def play_cue(self, force: bool) -> None:
        try:
            _, active = self.core.refresh_devices()
        except CoreError as e:
            log.error("Failed to get output devices: %s", e)
            return
        if active is not None:
            self.core.maybe_play_cue(active, force)
