"""Resolve and existence-check the file inputs of a signing request."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from vsix_signer.errors import MissingInput, MissingInputFile
from vsix_signer.inputs.request import (
    INPUT_SIGN_CERTIFICATE_PATH,
    INPUT_SIGN_PASSWORD,
    INPUT_VSIX_PATH,
    SigningRequest,
)
from vsix_signer.utils.paths import PathExists, path_exists

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedPaths:
    """Absolute artifact and certificate paths that existed when resolved."""

    artifact_path: Path
    certificate_path: Path


def require_inputs(request: SigningRequest) -> None:
    """Reject a request whose required inputs are blank, in input declaration order.

    A whitespace-only password counts as not supplied, though a supplied
    password is passed on untrimmed.
    """

    required = (
        (INPUT_SIGN_PASSWORD, request.password),
        (INPUT_VSIX_PATH, request.artifact_path),
        (INPUT_SIGN_CERTIFICATE_PATH, request.certificate_path),
    )
    for input_name, value in required:
        if not value.strip():
            raise MissingInput(input_name)


def resolve_input_file(
    raw_value: str,
    workspace_root: Path,
    *,
    label: str,
    exists: PathExists = path_exists,
    logger: logging.Logger | None = None,
) -> Path:
    """Return the input path as given when it exists, else relative to the workspace root."""

    effective_logger = logger or LOGGER
    as_given = Path(raw_value)
    if exists(as_given):
        return as_given.absolute()

    candidate = workspace_root / raw_value
    effective_logger.info("inputs.workspace_fallback label=%s raw=%s candidate=%s", label, raw_value, candidate)
    if not exists(candidate):
        raise MissingInputFile(label, raw_value, candidate)
    return candidate.absolute()


def resolve_inputs(
    request: SigningRequest,
    workspace_root: Path,
    *,
    exists: PathExists = path_exists,
    logger: logging.Logger | None = None,
) -> ResolvedPaths:
    """Validate required inputs and resolve the artifact and certificate paths."""

    require_inputs(request)
    artifact = resolve_input_file(
        request.artifact_path,
        workspace_root,
        label="VSIX",
        exists=exists,
        logger=logger,
    )
    certificate = resolve_input_file(
        request.certificate_path,
        workspace_root,
        label="signing certificate",
        exists=exists,
        logger=logger,
    )
    return ResolvedPaths(artifact_path=artifact, certificate_path=certificate)
