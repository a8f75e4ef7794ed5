"""Visual Studio toolchain discovery."""

from vsix_signer.toolchain.discover import (
    InstallationRecord,
    SigningToolLocation,
    build_discovery_args,
    build_discovery_invocation,
    discover_signing_tool,
    resolve_output_lines,
    signing_tool_path,
)
from vsix_signer.toolchain.locate import (
    DiscoveryToolLocation,
    fallback_location,
    locate_discovery_tool,
    search_path_lookup,
)
from vsix_signer.toolchain.platform_guard import SUPPORTED_PLATFORM, check_platform

__all__ = [
    "DiscoveryToolLocation",
    "InstallationRecord",
    "SUPPORTED_PLATFORM",
    "SigningToolLocation",
    "build_discovery_args",
    "build_discovery_invocation",
    "check_platform",
    "discover_signing_tool",
    "fallback_location",
    "locate_discovery_tool",
    "resolve_output_lines",
    "search_path_lookup",
    "signing_tool_path",
]
