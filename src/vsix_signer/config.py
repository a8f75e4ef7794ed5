"""Configuration models and loading logic."""

from __future__ import annotations

import os
from pathlib import Path, PureWindowsPath
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, Field
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_SETTINGS_FILE = Path("configs/settings.yaml")
SETTINGS_FILE_ENV = "VSIX_SIGNER_SETTINGS_FILE"
DEFAULT_PROGRAM_FILES_X86 = "C:\\Program Files (x86)"

# Host variables mapped onto the `environment` section.
CI_ENVIRONMENT_VARIABLES = {
    "workspace_root": "GITHUB_WORKSPACE",
    "program_files_x86": "ProgramFiles(x86)",
}


class EnvironmentConfig(BaseModel):
    """Host directories the signer resolves paths against."""

    workspace_root: Path = Field(default_factory=Path.cwd)
    program_files_x86: str = DEFAULT_PROGRAM_FILES_X86


class ToolchainConfig(BaseModel):
    """Names and layout of the Visual Studio tools the signer depends on."""

    discovery_tool_name: str = "vswhere"
    discovery_fallback_relpath: str = "Microsoft Visual Studio\\Installer\\vswhere.exe"
    required_component: str = "Microsoft.Component.MSBuild"
    installation_property: str = "installationPath"
    signing_tool_relpath: str = "vssdk\\VisualStudioIntegration\\tools\\bin\\vsixsigntool.exe"

    @property
    def discovery_tool_filename(self) -> str:
        return PureWindowsPath(self.discovery_fallback_relpath).name


class LoggingConfig(BaseModel):
    """Log level and optional log file."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_file: Path | None = None


class CiEnvironmentSettingsSource(PydanticBaseSettingsSource):
    """Read the workspace and Program Files roots from the exact variables a runner sets."""

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        values = {
            key: os.environ[variable]
            for key, variable in CI_ENVIRONMENT_VARIABLES.items()
            if os.environ.get(variable)
        }
        return {"environment": values} if values else {}


class SignerSettings(BaseSettings):
    """Top-level application settings."""

    _yaml_file_override: ClassVar[Path | None] = None

    environment: EnvironmentConfig = Field(default_factory=EnvironmentConfig)
    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="VSIX_SIGNER_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Prefixed env vars beat the runner's own variables, which beat the YAML defaults."""

        yaml_file = resolve_settings_file(cls._yaml_file_override)
        yaml_settings = YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            CiEnvironmentSettingsSource(settings_cls),
            yaml_settings,
            file_secret_settings,
        )

    @property
    def workspace_root(self) -> Path:
        return self.environment.workspace_root

    @property
    def program_files_x86_root(self) -> PureWindowsPath:
        return PureWindowsPath(self.environment.program_files_x86)

    def as_dict(self) -> dict[str, object]:
        """Return settings as a standard nested dictionary."""

        return self.model_dump(mode="json")


def find_project_root(start: Path | None = None) -> Path:
    """Locate the nearest directory holding ``configs/settings.yaml``, else the start directory."""

    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / DEFAULT_SETTINGS_FILE).exists():
            return candidate
    return current


def resolve_settings_file(override: Path | None = None) -> Path:
    """Resolve settings file from explicit override, env var, or default."""

    chosen = override
    if chosen is None:
        env_value = os.getenv(SETTINGS_FILE_ENV)
        if env_value:
            chosen = Path(env_value)
    if chosen is None:
        chosen = DEFAULT_SETTINGS_FILE

    if not chosen.is_absolute():
        chosen = (find_project_root() / chosen).resolve()
    return chosen


def settings_base_dir(settings_file: Path) -> Path:
    """Directory that relative paths inside a settings file are resolved against.

    A file in a ``configs/`` directory belongs to the project above it; any
    other file resolves relative paths next to itself.
    """

    parent = settings_file.parent.resolve()
    if parent.name == DEFAULT_SETTINGS_FILE.parent.name:
        return parent.parent
    return parent


def load_settings(config_file: Path | None = None) -> SignerSettings:
    """Load settings with YAML defaults, runner variables and prefixed env overrides."""

    settings_file = resolve_settings_file(config_file)
    SignerSettings._yaml_file_override = settings_file
    try:
        settings = SignerSettings()
    finally:
        SignerSettings._yaml_file_override = None

    environment = settings.environment.model_copy(
        update={"workspace_root": settings.environment.workspace_root.absolute()}
    )
    updates: dict[str, object] = {"environment": environment}
    log_file = settings.logging.log_file
    if log_file is not None and not log_file.is_absolute():
        resolved_log_file = (settings_base_dir(settings_file) / log_file).resolve()
        updates["logging"] = settings.logging.model_copy(update={"log_file": resolved_log_file})
    return settings.model_copy(update=updates)
