"""Shared utility helpers."""

from vsix_signer.utils.paths import PathExists, join_under, path_exists
from vsix_signer.utils.process import (
    CommandInvocation,
    CommandResult,
    CommandRunner,
    SubprocessCommandRunner,
)

__all__ = [
    "CommandInvocation",
    "CommandResult",
    "CommandRunner",
    "PathExists",
    "SubprocessCommandRunner",
    "join_under",
    "path_exists",
]
