"""Locate the vswhere discovery helper."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import PureWindowsPath
from typing import Callable, Literal, Optional

from vsix_signer.config import ToolchainConfig
from vsix_signer.errors import ToolNotFound
from vsix_signer.utils.paths import PathExists, join_under, path_exists

LOGGER = logging.getLogger(__name__)

Which = Callable[[str], Optional[str]]
LocationSource = Literal["search_path", "fallback"]


@dataclass(frozen=True, slots=True)
class DiscoveryToolLocation:
    """Existence-checked path to the discovery helper and how it was found."""

    path: PureWindowsPath
    source: LocationSource


def search_path_lookup(tool_name: str, which: Which = shutil.which) -> PureWindowsPath | None:
    """Look the tool up on PATH, returning ``None`` when it is not there."""

    found = which(tool_name)
    if not found:
        return None
    return PureWindowsPath(found)


def fallback_location(program_files_x86: PureWindowsPath, toolchain: ToolchainConfig) -> PureWindowsPath:
    """Return the fixed default install location of the discovery helper."""

    return PureWindowsPath(join_under(program_files_x86, toolchain.discovery_fallback_relpath))


def locate_discovery_tool(
    toolchain: ToolchainConfig,
    program_files_x86: PureWindowsPath,
    *,
    which: Which = shutil.which,
    exists: PathExists = path_exists,
    logger: logging.Logger | None = None,
) -> DiscoveryToolLocation:
    """Find the discovery helper on PATH or at its default location and verify it exists."""

    effective_logger = logger or LOGGER
    source: LocationSource = "search_path"
    candidate = search_path_lookup(toolchain.discovery_tool_name, which=which)
    if candidate is None:
        source = "fallback"
        candidate = fallback_location(program_files_x86, toolchain)
        effective_logger.info("locate.fallback tool=%s path=%s", toolchain.discovery_tool_name, candidate)

    if not exists(candidate):
        raise ToolNotFound(toolchain.discovery_tool_filename, candidate)

    effective_logger.info("locate.found source=%s path=%s", source, candidate)
    return DiscoveryToolLocation(path=candidate, source=source)
