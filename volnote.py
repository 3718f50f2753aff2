# volnote.py
"""
volnote command line entry point.

Registered as a console script in pyproject.toml:
    volnote = "volnote:main"

Subcommands:
    volnote raise | lower   change the volume by one step and show it
    volnote mute            toggle mute on the default sink
    volnote cycle           make the next sink the default and move streams to it
    volnote status          show the current volume
    volnote daemon          serve the same actions over the session bus
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from actions import VolumeActions
from app_log import setup_logging
from audio_core import AudioCore
from notifications import SinkNotification, VolumeNotification
from state_store import NotificationIdStore, NotificationIds
from store_config import Settings, load_settings


log = logging.getLogger(__name__)

ACTIONS: Dict[str, Callable[[VolumeActions, bool], None]] = {
    "raise": lambda a, force: a.raise_volume(force),
    "lower": lambda a, force: a.lower_volume(force),
    "mute": lambda a, force: a.toggle_mute(force),
    "cycle": lambda a, force: a.cycle_devices(force),
    "status": lambda a, force: a.show_status(force),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="volnote",
        description="Change volume or output device and show a desktop notification",
    )
    parser.add_argument(
        "--sound",
        action="store_true",
        help="Always play the notification cue, even if the output is busy",
    )
    parser.add_argument(
        "--step",
        type=int,
        default=None,
        help="Volume step in percent (default: from config, 5)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Also log to stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("raise", help="Raise the volume by one step")
    sub.add_parser("lower", help="Lower the volume by one step")
    sub.add_parser("mute", help="Toggle mute on the default output")
    sub.add_parser("cycle", help="Switch to the next output device")
    sub.add_parser("status", help="Show the current volume")
    sub.add_parser("daemon", help="Serve the actions on the session D-Bus")
    return parser


def build_actions(settings: Settings, ids: NotificationIds = (None, None), step: Optional[int] = None) -> VolumeActions:
    kw = {"icon": settings.icon, "timeout_ms": settings.timeout_ms}
    volume_id, sink_id = ids
    return VolumeActions(
        AudioCore.from_settings(settings),
        VolumeNotification.create(volume_id, **kw),
        SinkNotification.create(sink_id, **kw),
        step=settings.step if step is None else step,
    )


def _run_once(command: str, args: argparse.Namespace, settings: Settings) -> None:
    store = NotificationIdStore()
    actions = build_actions(settings, store.load(), args.step)

    ACTIONS[command](actions, args.sound)

    try:
        store.save(actions.notification_ids())
    except OSError:
        log.warning("Could not persist notification ids.", exc_info=True)


def _run_daemon(args: argparse.Namespace, settings: Settings) -> None:
    from dbus_service import run

    run(build_actions(settings, step=args.step))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        settings = load_settings()
    except Exception:
        log.exception("Failed to load configuration.")
        return 1

    if args.command == "daemon":
        try:
            _run_daemon(args, settings)
        except Exception:
            log.exception("D-Bus service failed.")
            return 1
        return 0

    _run_once(args.command, args, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
