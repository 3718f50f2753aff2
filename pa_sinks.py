# pa_sinks.py
"""
Parsers for the `pacmd list-sinks` / `pacmd list-sink-inputs` dumps.

The dumps are not a stable format, so parsing is lenient: a record only
needs its `index:` line. A missing `state:` or `device.description` line
leaves that field empty instead of failing. The index itself is mandatory,
since rotation and every later command are keyed on it.

Stream ids are different: a stream that cannot be identified is skipped,
so the remaining streams can still be moved.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from pa_errors import ParseError
from pa_types import Device


log = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"^\s*(?P<star>\*)?\s*index:\s*(?P<i>\S*)")
_STATE_RE = re.compile(r"^\s*state:\s*(?P<s>\S+)")
_DESC_RE = re.compile(r'device\.description\s*=\s*"(?P<n>[^"]*)"')


@dataclass
class _PendingDevice:
    index: int
    active: bool
    name: str = ""
    state: str = ""

    def freeze(self) -> Device:
        return Device(index=self.index, name=self.name, active=self.active, state=self.state)


def _parse_index(raw: str, line: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ParseError(f"Malformed index line: {line.strip()!r}") from None


def parse_sinks(text: str) -> List[Device]:
    out: List[Device] = []
    pending: Optional[_PendingDevice] = None

    for line in (text or "").splitlines():
        m = _INDEX_RE.match(line)
        if m:
            if pending is not None:
                out.append(pending.freeze())
            pending = _PendingDevice(
                index=_parse_index(m.group("i"), line),
                active=m.group("star") is not None,
            )
            continue

        if pending is None:
            continue

        s = _STATE_RE.match(line)
        if s:
            pending.state = s.group("s")
        elif "device.description" in line:
            d = _DESC_RE.search(line)
            if d:
                pending.name = d.group("n")

    if pending is not None:
        out.append(pending.freeze())

    return out


def parse_stream_ids(text: str) -> List[int]:
    ids: List[int] = []
    for line in (text or "").splitlines():
        m = _INDEX_RE.match(line)
        if not m:
            continue
        try:
            ids.append(_parse_index(m.group("i"), line))
        except ParseError as e:
            log.warning("Skipping stream: %s", e)
    return ids
