"""Unit tests for configuration loading."""

from pathlib import Path, PureWindowsPath

import pytest

from vsix_signer.config import (
    EnvironmentConfig,
    SignerSettings,
    ToolchainConfig,
    load_settings,
    resolve_settings_file,
    settings_base_dir,
)


class TestToolchainConfig:
    """Test suite for toolchain defaults."""

    def test_defaults(self) -> None:
        toolchain = ToolchainConfig()
        assert toolchain.discovery_tool_name == "vswhere"
        assert toolchain.discovery_tool_filename == "vswhere.exe"
        assert toolchain.required_component == "Microsoft.Component.MSBuild"
        assert toolchain.signing_tool_relpath.endswith("vsixsigntool.exe")


class TestLoadSettings:
    """Test suite for load_settings."""

    def test_yaml_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "configs" / "settings.yaml"
        config_file.parent.mkdir()
        config_file.write_text(
            "toolchain:\n  required_component: Microsoft.VisualStudio.Component.VSSDK\nlogging:\n  level: INFO\n",
            encoding="utf-8",
        )

        settings = load_settings(config_file=config_file)

        assert settings.toolchain.required_component == "Microsoft.VisualStudio.Component.VSSDK"
        assert settings.logging.level == "INFO"

    def test_yaml_environment_section(self, tmp_path: Path) -> None:
        workspace = tmp_path / "custom-ws"
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(
            f"environment:\n  workspace_root: {workspace}\n  program_files_x86: E:\\PF86\n",
            encoding="utf-8",
        )

        settings = load_settings(config_file=config_file)

        assert settings.workspace_root == workspace
        assert settings.program_files_x86_root == PureWindowsPath("E:\\PF86")

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("logging:\n  level: INFO\n", encoding="utf-8")
        monkeypatch.setenv("VSIX_SIGNER_LOGGING__LEVEL", "DEBUG")

        settings = load_settings(config_file=config_file)

        assert settings.logging.level == "DEBUG"

    def test_github_workspace_beats_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(f"environment:\n  workspace_root: {tmp_path / 'yaml'}\n", encoding="utf-8")
        monkeypatch.setenv("GITHUB_WORKSPACE", str(tmp_path / "gh"))

        settings = load_settings(config_file=config_file)

        assert settings.workspace_root == tmp_path / "gh"

    def test_prefixed_workspace_root_beats_github_workspace(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GITHUB_WORKSPACE", str(tmp_path / "gh"))
        monkeypatch.setenv("VSIX_SIGNER_ENVIRONMENT__WORKSPACE_ROOT", str(tmp_path / "own"))

        settings = load_settings(config_file=tmp_path / "missing.yaml")

        assert settings.workspace_root == tmp_path / "own"

    def test_unprefixed_variables_are_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("WORKSPACE_ROOT", str(tmp_path / "stray"))
        monkeypatch.setenv("PROGRAM_FILES_X86", "Z:\\stray")

        settings = load_settings(config_file=tmp_path / "missing.yaml")

        assert settings.workspace_root == tmp_path
        assert settings.program_files_x86_root == PureWindowsPath("C:\\Program Files (x86)")

    def test_workspace_root_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        settings = load_settings(config_file=tmp_path / "missing.yaml")

        assert settings.workspace_root == tmp_path

    def test_program_files_from_windows_variable(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ProgramFiles(x86)", "D:\\PF86")

        settings = load_settings(config_file=tmp_path / "missing.yaml")

        assert settings.program_files_x86_root == PureWindowsPath("D:\\PF86")

    def test_relative_log_file_under_project_of_configs_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / "configs" / "settings.yaml"
        config_file.parent.mkdir()
        config_file.write_text("logging:\n  log_file: logs/signer.log\n", encoding="utf-8")

        settings = load_settings(config_file=config_file)

        assert settings.logging.log_file == (tmp_path / "logs" / "signer.log").resolve()

    def test_relative_log_file_next_to_standalone_settings(self, tmp_path: Path) -> None:
        config_file = tmp_path / "ci" / "signer.yaml"
        config_file.parent.mkdir()
        config_file.write_text("logging:\n  log_file: signer.log\n", encoding="utf-8")

        settings = load_settings(config_file=config_file)

        assert settings.logging.log_file == (tmp_path / "ci" / "signer.log").resolve()

    def test_as_dict_is_plain(self, tmp_path: Path) -> None:
        settings = SignerSettings(environment=EnvironmentConfig(workspace_root=tmp_path))

        payload = settings.as_dict()

        assert payload["environment"]["workspace_root"] == str(tmp_path)
        assert payload["toolchain"]["discovery_tool_name"] == "vswhere"


class TestSettingsBaseDir:
    """Test suite for settings_base_dir."""

    def test_configs_directory_maps_to_project(self, tmp_path: Path) -> None:
        assert settings_base_dir(tmp_path / "configs" / "settings.yaml") == tmp_path.resolve()

    def test_other_directory_maps_to_itself(self, tmp_path: Path) -> None:
        assert settings_base_dir(tmp_path / "ci" / "signer.yaml") == (tmp_path / "ci").resolve()


class TestResolveSettingsFile:
    """Test suite for resolve_settings_file."""

    def test_env_variable_selects_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        chosen = tmp_path / "custom.yaml"
        monkeypatch.setenv("VSIX_SIGNER_SETTINGS_FILE", str(chosen))

        assert resolve_settings_file() == chosen

    def test_override_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VSIX_SIGNER_SETTINGS_FILE", str(tmp_path / "env.yaml"))

        assert resolve_settings_file(tmp_path / "explicit.yaml") == tmp_path / "explicit.yaml"
