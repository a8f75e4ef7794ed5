"""Discovery-then-invoke pipeline orchestration."""

from __future__ import annotations

import logging
import shutil
import time
from dataclasses import dataclass, field

from vsix_signer.config import SignerSettings
from vsix_signer.errors import SignerError
from vsix_signer.inputs.request import SigningRequest
from vsix_signer.inputs.resolve import ResolvedPaths, resolve_inputs
from vsix_signer.signing.invoke import sign_artifact
from vsix_signer.toolchain.discover import SigningToolLocation, discover_signing_tool
from vsix_signer.toolchain.locate import DiscoveryToolLocation, Which, locate_discovery_tool
from vsix_signer.toolchain.platform_guard import check_platform
from vsix_signer.utils.paths import PathExists, path_exists
from vsix_signer.utils.process import CommandRunner, SubprocessCommandRunner

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PipelineCollaborators:
    """Host primitives the pipeline talks to; replaced with fakes in tests."""

    platform: str | None = None
    runner: CommandRunner = field(default_factory=SubprocessCommandRunner)
    which: Which = shutil.which
    exists: PathExists = path_exists


@dataclass(frozen=True, slots=True)
class SigningRunResult:
    """Outcome of one pipeline run."""

    succeeded: bool
    failed_stage: str | None = None
    error: SignerError | None = None
    resolved_paths: ResolvedPaths | None = None
    discovery_tool: DiscoveryToolLocation | None = None
    signing_tool: SigningToolLocation | None = None
    duration_sec: float = 0.0

    @property
    def message(self) -> str | None:
        return None if self.error is None else self.error.message


def run_signing_pipeline(
    settings: SignerSettings,
    request: SigningRequest,
    *,
    collaborators: PipelineCollaborators | None = None,
    logger: logging.Logger | None = None,
) -> SigningRunResult:
    """Run platform check, input resolution, discovery and signing, stopping at the first failure."""

    effective_logger = logger or LOGGER
    hosts = collaborators or PipelineCollaborators()
    started_mono = time.monotonic()

    paths: ResolvedPaths | None = None
    discovery_tool: DiscoveryToolLocation | None = None
    signing_tool: SigningToolLocation | None = None
    try:
        check_platform(hosts.platform)
        paths = resolve_inputs(
            request,
            settings.workspace_root,
            exists=hosts.exists,
            logger=effective_logger,
        )
        discovery_tool = locate_discovery_tool(
            settings.toolchain,
            settings.program_files_x86_root,
            which=hosts.which,
            exists=hosts.exists,
            logger=effective_logger,
        )
        signing_tool = discover_signing_tool(
            discovery_tool,
            request,
            settings.toolchain,
            runner=hosts.runner,
            exists=hosts.exists,
            logger=effective_logger,
        )
        sign_artifact(signing_tool, request, paths, runner=hosts.runner, logger=effective_logger)
    except SignerError as exc:
        effective_logger.info("pipeline.failed stage=%s error=%s", exc.stage, exc.message)
        return SigningRunResult(
            succeeded=False,
            failed_stage=exc.stage,
            error=exc,
            resolved_paths=paths,
            discovery_tool=discovery_tool,
            signing_tool=signing_tool,
            duration_sec=round(time.monotonic() - started_mono, 3),
        )

    duration_sec = round(time.monotonic() - started_mono, 3)
    effective_logger.info("pipeline.done artifact=%s duration_sec=%s", paths.artifact_path, duration_sec)
    return SigningRunResult(
        succeeded=True,
        resolved_paths=paths,
        discovery_tool=discovery_tool,
        signing_tool=signing_tool,
        duration_sec=duration_sec,
    )
