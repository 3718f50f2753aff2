# pa_cli.py
from __future__ import annotations

import logging
import subprocess
from typing import List, Sequence

from pa_errors import ExternalCommandError


log = logging.getLogger(__name__)


def _run(cmd: Sequence[str]) -> subprocess.CompletedProcess[str]:
    return subprocess.run(list(cmd), capture_output=True, text=True)


class PulseCli:
    """
    Text-only access to the PulseAudio command line tools.

    Every method runs exactly one command. Read commands return stdout,
    write commands return nothing; a non-zero exit status (or a missing
    binary) raises ExternalCommandError carrying the tool's own message.
    """

    def __init__(
        self,
        pacmd: str = "pacmd",
        pactl: str = "pactl",
        amixer: str = "amixer",
        paplay: str = "paplay",
        mixer_device: str = "pulse",
        mixer_control: str = "Master",
    ) -> None:
        self.pacmd = pacmd
        self.pactl = pactl
        self.amixer = amixer
        self.paplay = paplay
        self.mixer_device = mixer_device
        self.mixer_control = mixer_control

    def run(self, cmd: Sequence[str]) -> str:
        log.debug("Running %s", " ".join(cmd))
        try:
            p = _run(cmd)
        except OSError as e:
            raise ExternalCommandError(cmd, -1, str(e)) from e

        if p.returncode != 0:
            msg = (p.stderr or p.stdout or "").strip()
            raise ExternalCommandError(cmd, p.returncode, msg)
        return p.stdout or ""

    def list_sinks(self) -> str:
        return self.run([self.pacmd, "list-sinks"])

    def list_sink_inputs(self) -> str:
        return self.run([self.pacmd, "list-sink-inputs"])

    def set_default_sink(self, sink_index: int) -> None:
        self.run([self.pactl, "set-default-sink", str(sink_index)])

    def move_sink_input(self, stream_id: int, sink_index: int) -> None:
        self.run([self.pactl, "move-sink-input", str(stream_id), str(sink_index)])

    def toggle_sink_mute(self, sink_index: int) -> None:
        self.run([self.pactl, "set-sink-mute", str(sink_index), "toggle"])

    def query_volume(self) -> str:
        return self.run([self.amixer, "-D", self.mixer_device, "sget", self.mixer_control])

    def set_volume(self, value: str) -> None:
        self.run([self.amixer, "-D", self.mixer_device, "sset", self.mixer_control, value])

    def cue_command(self, sink_index: int, sound_file: str) -> List[str]:
        return [self.paplay, "-d", str(sink_index), sound_file]

    def spawn_cue(self, sink_index: int, sound_file: str) -> subprocess.Popen:
        # Not waited for; the caller polls the handle.
        return subprocess.Popen(
            self.cue_command(sink_index, sound_file),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
