"""GitHub Actions workflow commands written to standard output."""

from __future__ import annotations

import os
import sys
from typing import Mapping, TextIO


def running_in_github_actions(environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get("GITHUB_ACTIONS", "").lower() == "true"


def escape_command_data(value: str) -> str:
    """Escape a message for use as workflow command data."""

    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, message: str, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    out.write(f"::{command}::{escape_command_data(message)}\n")
    out.flush()


def add_mask(secret: str, stream: TextIO | None = None) -> None:
    """Ask the runner to mask a secret in all later log output."""

    if secret.strip():
        issue_command("add-mask", secret, stream)


def report_error(message: str, stream: TextIO | None = None) -> None:
    issue_command("error", message, stream)
