# audio_core.py
from __future__ import annotations

import logging
from typing import Optional, Tuple

from cue_player import CuePlayer
from mixer import Mixer
from pa_cli import PulseCli
from pa_types import Device, VolumeState
from sink_cycle import SinkCycler
from sink_directory import SinkDirectory
from store_config import Settings


log = logging.getLogger(__name__)


class AudioCore:
    """
    The operations front doors call. Not safe for concurrent callers: each
    action assumes nothing else touches the sink list between its refresh and
    its commands, so callers must be serialized upstream.
    """

    def __init__(self, cli: PulseCli, cue_player: Optional[CuePlayer] = None) -> None:
        self.cli = cli
        self.directory = SinkDirectory(cli)
        self.cycler = SinkCycler(cli, self.directory)
        self.mixer = Mixer(cli, self.directory)
        self.cue_player = cue_player if cue_player is not None else CuePlayer(cli.spawn_cue)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AudioCore":
        cli = PulseCli(
            pacmd=settings.pacmd,
            pactl=settings.pactl,
            amixer=settings.amixer,
            paplay=settings.paplay,
            mixer_device=settings.mixer_device,
            mixer_control=settings.mixer_control,
        )
        cue = CuePlayer(cli.spawn_cue, sound_file=settings.cue_sound, enabled=settings.cue_enabled)
        return cls(cli, cue_player=cue)

    def refresh_devices(self) -> Tuple[Tuple[Device, ...], Optional[Device]]:
        devices = self.directory.refresh()
        return devices, self.directory.active()

    def cycle_devices(self) -> Device:
        return self.cycler.cycle()

    def change_volume(self, amount: int) -> None:
        self.mixer.change_volume(amount)

    def toggle_mute(self) -> None:
        self.mixer.toggle_mute()

    def get_volume(self) -> VolumeState:
        return self.mixer.get_volume()

    def maybe_play_cue(self, device: Device, force: bool = False) -> bool:
        try:
            return self.cue_player.play(device, force)
        except Exception:
            log.exception("Cue playback failed.")
            return False
