# pa_volume.py
from __future__ import annotations

import re

from pa_errors import ParseError
from pa_types import VolumeState


_VOLUME_RE = re.compile(r"\[(?P<pct>[0-9]+)%\] \[(?P<sw>[A-Za-z]+)\]")


def parse_volume(text: str) -> VolumeState:
    """Read the first `[N%] [on|off]` pair of an `amixer sget` report."""
    m = _VOLUME_RE.search(text or "")
    if m is None:
        raise ParseError("Could not parse volume.")

    percent = int(m.group("pct"))
    if not 0 <= percent <= 100:
        raise ParseError(f"Volume out of range: {percent}%")

    sw = m.group("sw")
    if sw == "on":
        muted = False
    elif sw == "off":
        muted = True
    else:
        raise ParseError(f"Unknown mute switch state: {sw!r}")

    return VolumeState(percent=percent, muted=muted)


def volume_step_token(amount: int) -> str:
    sign = "+" if amount >= 0 else "-"
    return f"{abs(amount)}%{sign}"
