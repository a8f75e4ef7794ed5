"""External process plumbing shared by the discovery and signing stages."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import PurePath
from typing import Protocol

LOGGER = logging.getLogger(__name__)

REDACTED = "***"


@dataclass(frozen=True, slots=True)
class CommandInvocation:
    """An executable plus the ordered arguments passed to it."""

    executable: PurePath
    args: tuple[str, ...]
    secrets: tuple[str, ...] = ()

    def command_line(self) -> str:
        """Render the command line with a quoted executable and arguments as given."""

        return " ".join([f'"{self.executable}"', *self.args])

    def display(self) -> str:
        """Render the command line with secret arguments replaced."""

        shown = [REDACTED if arg in self.secrets else arg for arg in self.args]
        return " ".join([f'"{self.executable}"', *shown])

    def __repr__(self) -> str:
        return f"CommandInvocation({self.display()!r})"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Exit status and buffered standard output of a finished child process."""

    returncode: int
    stdout: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def lines(self) -> list[str]:
        return self.stdout.splitlines()


class CommandRunner(Protocol):
    """Blocking process-execution primitive."""

    def run(self, invocation: CommandInvocation, *, capture_output: bool = False) -> CommandResult:
        ...


class SubprocessCommandRunner:
    """Run invocations with :mod:`subprocess`, blocking until the child exits."""

    def __init__(self, logger: logging.Logger | None = None, *, windows: bool | None = None) -> None:
        self._logger = logger or LOGGER
        self._windows = os.name == "nt" if windows is None else windows

    def run(self, invocation: CommandInvocation, *, capture_output: bool = False) -> CommandResult:
        command_line = invocation.command_line()
        # Arguments arrive pre-quoted; Windows gets the rendered line verbatim.
        command: str | list[str] = command_line if self._windows else shlex.split(command_line)
        self._logger.debug("process.start command=%s", invocation.display())
        completed = subprocess.run(
            command,
            stdout=subprocess.PIPE if capture_output else None,
            text=True,
            check=False,
        )
        stdout = completed.stdout or ""
        self._logger.debug("process.exit returncode=%s captured_lines=%s", completed.returncode, len(stdout.splitlines()))
        return CommandResult(returncode=completed.returncode, stdout=stdout)
