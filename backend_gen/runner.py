"""
runner.py

Responsibility: Run external package manager commands.

The scaffolder only sees the `CommandRunner` protocol, so tests can swap in a
stub that returns canned outcomes instead of spawning `npm`.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutcome:
    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    def run(self, command: list[str], label: str) -> CommandOutcome: ...


class SubprocessRunner:
    """
    Run commands in `cwd`, blocking until they exit.

    stdout and stderr are captured together. No timeout is applied.
    """

    def __init__(self, cwd: Path) -> None:
        self._cwd = Path(cwd)

    def run(self, command: list[str], label: str) -> CommandOutcome:
        # npm is a .cmd shim on Windows; resolve it so no shell is needed.
        argv = [shutil.which(command[0]) or command[0], *command[1:]]
        logger.debug("%s: running %s in %s", label, " ".join(command), self._cwd)
        try:
            proc = subprocess.run(
                argv,
                cwd=str(self._cwd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except FileNotFoundError as e:
            missing = e.filename or command[0]
            return CommandOutcome(returncode=127, output=f"{missing}: no such file or directory ({e})")
        logger.debug("%s: exit status %d", label, proc.returncode)
        return CommandOutcome(returncode=proc.returncode, output=proc.stdout or "")
