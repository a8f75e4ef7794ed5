"""Ask vswhere for the latest matching Visual Studio and derive the VsixSignTool path."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PureWindowsPath

from vsix_signer.config import ToolchainConfig
from vsix_signer.errors import DiscoveryFailure, ToolPathUnresolved
from vsix_signer.inputs.request import SigningRequest
from vsix_signer.toolchain.locate import DiscoveryToolLocation
from vsix_signer.utils.paths import PathExists, join_under, path_exists
from vsix_signer.utils.process import CommandInvocation, CommandRunner

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InstallationRecord:
    """Installation root reported by the discovery helper."""

    installation_path: PureWindowsPath


@dataclass(frozen=True, slots=True)
class SigningToolLocation:
    """Existence-checked signing tool path and the installation it came from."""

    path: PureWindowsPath
    installation: InstallationRecord


def build_discovery_args(request: SigningRequest, toolchain: ToolchainConfig) -> tuple[str, ...]:
    """Build vswhere arguments for the most recent installation matching the request."""

    args = [
        "-products",
        "*",
        "-requires",
        toolchain.required_component,
        "-property",
        toolchain.installation_property,
        "-latest",
    ]
    if request.allow_prerelease:
        args.append("-prerelease")
    if request.pins_version:
        args.extend(["-version", f'"{request.version_constraint}"'])
    return tuple(args)


def build_discovery_invocation(
    location: DiscoveryToolLocation,
    request: SigningRequest,
    toolchain: ToolchainConfig,
) -> CommandInvocation:
    return CommandInvocation(executable=location.path, args=build_discovery_args(request, toolchain))


def signing_tool_path(installation: InstallationRecord, toolchain: ToolchainConfig) -> PureWindowsPath:
    """Append the fixed VSSDK relative path to an installation root."""

    return PureWindowsPath(join_under(installation.installation_path, toolchain.signing_tool_relpath))


def resolve_output_lines(
    lines: list[str],
    toolchain: ToolchainConfig,
    *,
    exists: PathExists = path_exists,
    logger: logging.Logger | None = None,
) -> SigningToolLocation | None:
    """Map each output line to a signing tool path; the last resolved line wins.

    Blank lines are skipped. A non-blank line whose derived tool path does not
    exist raises :class:`ToolPathUnresolved`.
    """

    effective_logger = logger or LOGGER
    resolved: SigningToolLocation | None = None
    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue
        installation = InstallationRecord(installation_path=PureWindowsPath(line))
        tool_path = signing_tool_path(installation, toolchain)
        if not exists(tool_path):
            raise ToolPathUnresolved(tool_path)
        if resolved is not None:
            effective_logger.warning(
                "discover.multiple_installations previous=%s current=%s",
                resolved.installation.installation_path,
                installation.installation_path,
            )
        resolved = SigningToolLocation(path=tool_path, installation=installation)
    return resolved


def discover_signing_tool(
    location: DiscoveryToolLocation,
    request: SigningRequest,
    toolchain: ToolchainConfig,
    *,
    runner: CommandRunner,
    exists: PathExists = path_exists,
    logger: logging.Logger | None = None,
) -> SigningToolLocation:
    """Run the discovery helper to completion and resolve the signing tool from its output."""

    effective_logger = logger or LOGGER
    invocation = build_discovery_invocation(location, request, toolchain)
    effective_logger.info("discover.start command=%s", invocation.display())
    result = runner.run(invocation, capture_output=True)
    if not result.succeeded:
        raise DiscoveryFailure(f"vswhere exited with code {result.returncode}", returncode=result.returncode)

    resolved = resolve_output_lines(result.lines(), toolchain, exists=exists, logger=effective_logger)
    if resolved is None:
        raise DiscoveryFailure("no Visual Studio installation matched the requested version", returncode=0)

    effective_logger.info(
        "discover.resolved installation=%s tool=%s",
        resolved.installation.installation_path,
        resolved.path,
    )
    return resolved
