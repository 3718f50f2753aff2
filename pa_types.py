# pa_types.py
from __future__ import annotations

from dataclasses import dataclass


# Playback state reported for a sink that is actively streaming audio.
STREAMING_STATE = "RUNNING"


@dataclass(frozen=True)
class Device:
    index: int      # server-assigned sink index
    name: str       # device.description or ""
    active: bool    # default sink
    state: str      # "RUNNING" | "IDLE" | "SUSPENDED" | ... or ""

    @property
    def streaming(self) -> bool:
        return self.state == STREAMING_STATE


@dataclass(frozen=True)
class VolumeState:
    percent: int    # 0..100
    muted: bool
