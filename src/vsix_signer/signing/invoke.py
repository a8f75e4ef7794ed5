"""Invoke VsixSignTool.exe against the resolved artifact."""

from __future__ import annotations

import logging

from vsix_signer.errors import SigningProcessFailure
from vsix_signer.inputs.request import SigningRequest
from vsix_signer.inputs.resolve import ResolvedPaths
from vsix_signer.toolchain.discover import SigningToolLocation
from vsix_signer.utils.process import CommandInvocation, CommandRunner

LOGGER = logging.getLogger(__name__)

SIGN_SUBCOMMAND = "sign"
CERTIFICATE_FLAG = "/f"
PASSWORD_FLAG = "/p"


def build_signing_invocation(
    location: SigningToolLocation,
    request: SigningRequest,
    paths: ResolvedPaths,
) -> CommandInvocation:
    """Build ``sign /f "<cert>" /p <password> "<artifact>"`` with the password marked secret."""

    args = (
        SIGN_SUBCOMMAND,
        CERTIFICATE_FLAG,
        f'"{paths.certificate_path}"',
        PASSWORD_FLAG,
        request.password,
        f'"{paths.artifact_path}"',
    )
    return CommandInvocation(executable=location.path, args=args, secrets=(request.password,))


def sign_artifact(
    location: SigningToolLocation,
    request: SigningRequest,
    paths: ResolvedPaths,
    *,
    runner: CommandRunner,
    logger: logging.Logger | None = None,
) -> None:
    """Run the signing tool and raise :class:`SigningProcessFailure` on a nonzero exit."""

    effective_logger = logger or LOGGER
    invocation = build_signing_invocation(location, request, paths)
    effective_logger.info("sign.start command=%s", invocation.display())
    result = runner.run(invocation)
    if not result.succeeded:
        raise SigningProcessFailure(result.returncode)
    effective_logger.info("sign.done artifact=%s", paths.artifact_path)
