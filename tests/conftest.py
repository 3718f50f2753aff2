"""
Shared fixtures: canned `pacmd` / `amixer` output and a fake PulseCli that
records every command instead of running it.
"""
from typing import Dict, List, Optional, Tuple

import pytest

from pa_errors import ExternalCommandError


SINKS_3_SECOND_ACTIVE = """\
3 sink(s) available.
    index: 0
\tname: <alsa_output.pci-0000_00_1f.3.analog-stereo>
\tdriver: <module-alsa-card.c>
\tstate: SUSPENDED
\tproperties:
\t\tdevice.description = "Built-in Audio Analog Stereo"
  * index: 4
\tname: <bluez_sink.00_1B_66_AA_BB_CC.a2dp_sink>
\tstate: RUNNING
\tproperties:
\t\tdevice.description = "Headphones"
    index: 7
\tname: <alsa_output.usb-DAC.analog-stereo>
\tstate: IDLE
\tproperties:
\t\tdevice.description = "USB DAC"
"""

SINK_INPUTS = """\
2 sink input(s) available.
    index: 12
\tdriver: <protocol-native.c>
\tsink: 4 <bluez_sink.00_1B_66_AA_BB_CC.a2dp_sink>
    index: 15
\tdriver: <protocol-native.c>
\tsink: 4 <bluez_sink.00_1B_66_AA_BB_CC.a2dp_sink>
"""

AMIXER_OUTPUT = """\
Simple mixer control 'Master',0
  Capabilities: pvolume pswitch pswitch-joined
  Playback channels: Front Left - Front Right
  Limits: Playback 0 - 65536
  Mono:
  Front Left: Playback 24248 [37%] [off]
  Front Right: Playback 24248 [37%] [off]
"""


class FakeCli:
    """Stands in for PulseCli; `fail` maps a method name to an exception to raise."""

    def __init__(self, sinks: str = SINKS_3_SECOND_ACTIVE, sink_inputs: str = SINK_INPUTS, volume: str = AMIXER_OUTPUT) -> None:
        self.sinks = sinks
        self.sink_inputs = sink_inputs
        self.volume = volume
        self.calls: List[Tuple] = []
        self.fail: Dict[str, Exception] = {}
        self.fail_moves: Dict[int, Exception] = {}

    def _record(self, *call) -> None:
        self.calls.append(call)
        exc = self.fail.get(call[0])
        if exc is not None:
            raise exc

    def list_sinks(self) -> str:
        self._record("list_sinks")
        return self.sinks

    def list_sink_inputs(self) -> str:
        self._record("list_sink_inputs")
        return self.sink_inputs

    def set_default_sink(self, sink_index: int) -> None:
        self._record("set_default_sink", sink_index)

    def move_sink_input(self, stream_id: int, sink_index: int) -> None:
        self._record("move_sink_input", stream_id, sink_index)
        exc = self.fail_moves.get(stream_id)
        if exc is not None:
            raise exc

    def toggle_sink_mute(self, sink_index: int) -> None:
        self._record("toggle_sink_mute", sink_index)

    def query_volume(self) -> str:
        self._record("query_volume")
        return self.volume

    def set_volume(self, value: str) -> None:
        self._record("set_volume", value)

    def names(self) -> List[str]:
        return [c[0] for c in self.calls]

    def mutating_calls(self) -> List[Tuple]:
        reads = {"list_sinks", "list_sink_inputs", "query_volume"}
        return [c for c in self.calls if c[0] not in reads]


def command_error(name: str = "pactl", msg: str = "Failure: No such entity") -> ExternalCommandError:
    return ExternalCommandError([name], 1, msg)


def sink_dump(*records: Tuple[int, bool, Optional[str], Optional[str]]) -> str:
    """Build a list-sinks dump from (index, active, state, description) tuples."""
    lines = [f"{len(records)} sink(s) available."]
    for index, active, state, desc in records:
        lines.append(f"  * index: {index}" if active else f"    index: {index}")
        lines.append(f"\tname: <sink{index}>")
        if state is not None:
            lines.append(f"\tstate: {state}")
        if desc is not None:
            lines.append("\tproperties:")
            lines.append(f'\t\tdevice.description = "{desc}"')
    return "\n".join(lines) + "\n"


@pytest.fixture
def fake_cli() -> FakeCli:
    return FakeCli()
