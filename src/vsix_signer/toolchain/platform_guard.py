"""Reject hosts the signing tool cannot run on."""

from __future__ import annotations

import sys

from vsix_signer.errors import PlatformMismatch

SUPPORTED_PLATFORM = "win32"


def check_platform(current_platform: str | None = None) -> None:
    """Raise :class:`PlatformMismatch` unless running on Windows."""

    platform = sys.platform if current_platform is None else current_platform
    if platform != SUPPORTED_PLATFORM:
        raise PlatformMismatch(platform, SUPPORTED_PLATFORM)
