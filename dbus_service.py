# dbus_service.py
"""
Session bus front door.

All methods run on the single GLib main loop, so actions are serialized:
one action's refresh-then-command sequence is never interleaved with
another's.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from actions import VolumeActions


log = logging.getLogger(__name__)

BUS_NAME = "org.volnote.VolumeNotification"
OBJECT_PATH = "/volume_control"


class VolumeControlService:
    dbus = f"""
    <node>
      <interface name="{BUS_NAME}">
        <method name="VolumeRaise"/>
        <method name="VolumeLower"/>
        <method name="VolumeToggleMute"/>
        <method name="CycleInputs"/>
        <method name="ShowStatus"/>
      </interface>
    </node>
    """

    def __init__(self, actions: VolumeActions) -> None:
        self._actions = actions

    def _dispatch(self, label: str, fn: Callable[[], Any]) -> None:
        log.debug("D-Bus call: %s", label)
        try:
            fn()
        except Exception:
            log.exception("%s failed.", label)

    def VolumeRaise(self) -> None:
        self._dispatch("VolumeRaise", self._actions.raise_volume)

    def VolumeLower(self) -> None:
        self._dispatch("VolumeLower", self._actions.lower_volume)

    def VolumeToggleMute(self) -> None:
        self._dispatch("VolumeToggleMute", self._actions.toggle_mute)

    def CycleInputs(self) -> None:
        self._dispatch("CycleInputs", self._actions.cycle_devices)

    def ShowStatus(self) -> None:
        self._dispatch("ShowStatus", self._actions.show_status)


def run(actions: VolumeActions) -> None:
    from gi.repository import GLib
    from pydbus import SessionBus

    bus = SessionBus()
    service = VolumeControlService(actions)
    publication = bus.publish(BUS_NAME, (OBJECT_PATH, service))
    log.info("Published %s at %s.", BUS_NAME, OBJECT_PATH)

    loop = GLib.MainLoop()
    try:
        loop.run()
    except KeyboardInterrupt:
        loop.quit()
    finally:
        publication.unpublish()
        log.info("D-Bus service stopped.")
