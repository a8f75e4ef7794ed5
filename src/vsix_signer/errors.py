"""Failure taxonomy for the signing pipeline."""

from __future__ import annotations

from pathlib import PurePath


class SignerError(RuntimeError):
    """Base class for terminal pipeline failures."""

    stage: str = "pipeline"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PlatformMismatch(SignerError):
    """Raised when the host platform is not supported."""

    stage = "platform"

    def __init__(self, current_platform: str, supported_platform: str) -> None:
        super().__init__("vsix-signer can only be run on Windows-based runners")
        self.current_platform = current_platform
        self.supported_platform = supported_platform


class MissingInput(SignerError):
    """Raised when a required input was not supplied."""

    stage = "inputs"

    def __init__(self, input_name: str) -> None:
        super().__init__(f"Input required and not supplied: {input_name}")
        self.input_name = input_name


class MissingInputFile(SignerError):
    """Raised when a file input exists neither as given nor under the workspace root."""

    stage = "inputs"

    def __init__(self, label: str, raw_value: str, checked_path: PurePath) -> None:
        super().__init__(f"No {label} file located at: '{checked_path}' (input: '{raw_value}')")
        self.label = label
        self.raw_value = raw_value
        self.checked_path = checked_path


class ToolNotFound(SignerError):
    """Raised when the discovery helper cannot be found on disk."""

    stage = "locate"

    def __init__(self, tool_name: str, candidate: PurePath | None) -> None:
        super().__init__(f"This action requires the path to '{tool_name}' exists")
        self.tool_name = tool_name
        self.candidate = candidate


class ToolPathUnresolved(SignerError):
    """Raised when an installation root does not contain the signing tool."""

    stage = "discover"

    def __init__(self, attempted_path: PurePath) -> None:
        super().__init__(
            "Unable to locate the Visual Studio installation directory / location of "
            f"VsixSignTool.exe: '{attempted_path}' does not exist"
        )
        self.attempted_path = attempted_path


class DiscoveryFailure(SignerError):
    """Raised when the discovery helper fails or reports no usable installation."""

    stage = "discover"

    def __init__(self, reason: str, returncode: int | None = None) -> None:
        super().__init__(f"Visual Studio discovery failed: {reason}")
        self.reason = reason
        self.returncode = returncode


class SigningProcessFailure(SignerError):
    """Raised when the signing tool exits with a nonzero status."""

    stage = "sign"

    def __init__(self, returncode: int) -> None:
        super().__init__(f"VsixSignTool.exe exited with code {returncode}")
        self.returncode = returncode
