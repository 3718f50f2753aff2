# sink_cycle.py
from __future__ import annotations

import logging
from typing import Sequence

from pa_cli import PulseCli
from pa_errors import CoreError, InsufficientDevices
from pa_sinks import parse_stream_ids
from pa_types import Device
from sink_directory import SinkDirectory


log = logging.getLogger(__name__)


def next_position(devices: Sequence[Device]) -> int:
    """
    List position of the sink that follows the active one.

    Positions are list positions, not server indexes. With no sink marked
    active the rotation starts from position 0.
    """
    if len(devices) < 2:
        raise InsufficientDevices(f"Need at least 2 output devices to cycle, found {len(devices)}.")

    current = next((i for i, d in enumerate(devices) if d.active), None)
    if current is None:
        log.info("No sink marked active, cycling from position 0.")
        current = 0

    return (current + 1) % len(devices)


class SinkCycler:
    def __init__(self, cli: PulseCli, directory: SinkDirectory) -> None:
        self._cli = cli
        self._directory = directory

    def cycle(self) -> Device:
        devices = self._directory.refresh()
        target = devices[next_position(devices)]

        # The default sink must exist before streams are pointed at it.
        self._cli.set_default_sink(target.index)
        log.info("Default sink set to %d (%s).", target.index, target.name)

        stream_ids = parse_stream_ids(self._cli.list_sink_inputs())
        moved = 0
        for sid in stream_ids:
            try:
                self._cli.move_sink_input(sid, target.index)
                moved += 1
            except CoreError as e:
                log.warning("Failed to move stream %d to sink %d: %s", sid, target.index, e)

        log.info("Moved %d/%d streams to sink %d.", moved, len(stream_ids), target.index)
        return target
