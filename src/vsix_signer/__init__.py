"""Locate VsixSignTool.exe through vswhere and sign VSIX packages."""

from vsix_signer.errors import (
    DiscoveryFailure,
    MissingInput,
    MissingInputFile,
    PlatformMismatch,
    SignerError,
    SigningProcessFailure,
    ToolNotFound,
    ToolPathUnresolved,
)
from vsix_signer.inputs import ResolvedPaths, SigningRequest
from vsix_signer.pipeline import PipelineCollaborators, SigningRunResult, run_signing_pipeline

__version__ = "0.1.0"

__all__ = [
    "DiscoveryFailure",
    "MissingInput",
    "MissingInputFile",
    "PipelineCollaborators",
    "PlatformMismatch",
    "ResolvedPaths",
    "SignerError",
    "SigningProcessFailure",
    "SigningRequest",
    "SigningRunResult",
    "ToolNotFound",
    "ToolPathUnresolved",
    "run_signing_pipeline",
]
