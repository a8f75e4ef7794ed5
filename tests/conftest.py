"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePath, PureWindowsPath

import pytest

from vsix_signer.config import EnvironmentConfig, SignerSettings
from vsix_signer.inputs.request import SigningRequest
from vsix_signer.pipeline import PipelineCollaborators
from vsix_signer.utils.process import CommandInvocation, CommandResult

VS_ROOT = PureWindowsPath("C:\\VS\\2022")
SIGNTOOL = PureWindowsPath("C:\\VS\\2022\\vssdk\\VisualStudioIntegration\\tools\\bin\\vsixsigntool.exe")
VSWHERE_ON_PATH = "C:\\tools\\vswhere.exe"
VSWHERE_FALLBACK = PureWindowsPath("C:\\Program Files (x86)\\Microsoft Visual Studio\\Installer\\vswhere.exe")


@dataclass
class FakeFilesystem:
    """Existence check backed by a set of path strings."""

    paths: set[str] = field(default_factory=set)
    checked: list[str] = field(default_factory=list)

    def add(self, *paths: PurePath | str) -> "FakeFilesystem":
        self.paths.update(str(path) for path in paths)
        return self

    def exists(self, path: PurePath) -> bool:
        self.checked.append(str(path))
        return str(path) in self.paths


@dataclass
class FakeRunner:
    """Command runner that records invocations and replays canned results in order."""

    results: list[CommandResult] = field(default_factory=list)
    calls: list[tuple[CommandInvocation, bool]] = field(default_factory=list)

    def queue(self, returncode: int = 0, stdout: str = "") -> "FakeRunner":
        self.results.append(CommandResult(returncode=returncode, stdout=stdout))
        return self

    def run(self, invocation: CommandInvocation, *, capture_output: bool = False) -> CommandResult:
        self.calls.append((invocation, capture_output))
        if not self.results:
            raise AssertionError(f"unexpected invocation: {invocation.display()}")
        return self.results.pop(0)

    @property
    def invocations(self) -> list[CommandInvocation]:
        return [invocation for invocation, _ in self.calls]


@dataclass
class FakeWhich:
    """Stand-in for shutil.which returning a fixed answer."""

    answer: str | None = None
    queried: list[str] = field(default_factory=list)

    def __call__(self, name: str) -> str | None:
        self.queried.append(name)
        return self.answer


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep CI variables of the machine running the tests out of each test."""

    for name in (
        "GITHUB_ACTIONS",
        "GITHUB_WORKSPACE",
        "INPUT_VSIX-PATH",
        "INPUT_SIGN-CERTIFICATE-PATH",
        "INPUT_SIGN-PASSWORD",
        "INPUT_VS-VERSION",
        "INPUT_VS-PRERELEASE",
        "VSIX_SIGNER_SETTINGS_FILE",
        "VSIX_SIGNER_ENVIRONMENT__WORKSPACE_ROOT",
        "VSIX_SIGNER_ENVIRONMENT__PROGRAM_FILES_X86",
        "VSIX_SIGNER_LOGGING__LEVEL",
        "VSIX_SIGNER_LOGGING__LOG_FILE",
        "ProgramFiles(x86)",
    ):
        monkeypatch.delenv(name, raising=False)

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    logging.getLogger("vsix_signer").setLevel(logging.NOTSET)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    (root / "out").mkdir(parents=True)
    (root / "certs").mkdir()
    (root / "out" / "extension.vsix").write_bytes(b"PK\x03\x04")
    (root / "certs" / "signing.pfx").write_bytes(b"\x30\x82")
    return root


@pytest.fixture
def settings(workspace: Path) -> SignerSettings:
    return SignerSettings(
        environment=EnvironmentConfig(workspace_root=workspace, program_files_x86="C:\\Program Files (x86)"),
    )


@pytest.fixture
def request_defaults() -> SigningRequest:
    return SigningRequest(
        artifact_path="out/extension.vsix",
        certificate_path="certs/signing.pfx",
        password="s3cret-pw",
    )


@pytest.fixture
def filesystem(workspace: Path) -> FakeFilesystem:
    return FakeFilesystem().add(
        workspace / "out" / "extension.vsix",
        workspace / "certs" / "signing.pfx",
        VSWHERE_ON_PATH,
        SIGNTOOL,
    )


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def collaborators(filesystem: FakeFilesystem, runner: FakeRunner) -> PipelineCollaborators:
    return PipelineCollaborators(
        platform="win32",
        runner=runner,
        which=FakeWhich(VSWHERE_ON_PATH),
        exists=filesystem.exists,
    )
