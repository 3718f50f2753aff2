# pa_errors.py
from __future__ import annotations

from typing import Sequence


class CoreError(RuntimeError):
    pass


class ParseError(CoreError):
    """Text from an audio tool did not have the expected shape."""


class ExternalCommandError(CoreError):
    def __init__(self, cmd: Sequence[str], returncode: int, diagnostic: str) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.diagnostic = diagnostic
        super().__init__(f"{' '.join(self.cmd)} failed ({returncode}): {diagnostic}")


class InsufficientDevices(CoreError):
    pass


class SpawnError(CoreError):
    pass
