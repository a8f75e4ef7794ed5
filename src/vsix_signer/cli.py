"""Typer CLI entrypoint for vsix_signer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer
import yaml

from vsix_signer.actions import add_mask, report_error, running_in_github_actions
from vsix_signer.config import SignerSettings, load_settings
from vsix_signer.errors import PlatformMismatch
from vsix_signer.inputs.request import (
    INPUT_SIGN_CERTIFICATE_PATH,
    INPUT_SIGN_PASSWORD,
    INPUT_VS_PRERELEASE,
    INPUT_VS_VERSION,
    INPUT_VSIX_PATH,
    SigningRequest,
)
from vsix_signer.logging_utils import configure_logging, redact_secrets
from vsix_signer.pipeline import PipelineCollaborators, run_signing_pipeline
from vsix_signer.toolchain.platform_guard import check_platform

app = typer.Typer(
    add_completion=False,
    help="Sign a VSIX package with the VsixSignTool.exe of the installed Visual Studio.",
    no_args_is_help=True,
)

# Collaborators used by `sign`; tests swap in fakes.
pipeline_collaborators: PipelineCollaborators | None = None


def _action_input_envvar(input_name: str) -> str:
    """Environment variable an Actions runner uses to deliver a `with:` input."""

    return f"INPUT_{input_name.replace(' ', '_').upper()}"


def _load_settings(config_file: Path | None) -> SignerSettings:
    try:
        return load_settings(config_file=config_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config-file") from exc


def _fail(message: str, secrets: tuple[str, ...] = ()) -> NoReturn:
    message = redact_secrets(message, secrets)
    typer.echo(message, err=True)
    if running_in_github_actions():
        report_error(message)
    raise typer.Exit(code=1)


@app.command("show-config")
def show_config(
    config_file: Path | None = typer.Option(
        None,
        "--config-file",
        help="Optional settings YAML path.",
        exists=False,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Print the effective configuration after env overrides."""

    settings = _load_settings(config_file)
    rendered = yaml.safe_dump(settings.as_dict(), sort_keys=False)
    typer.echo(rendered)


@app.command("sign")
def sign(
    vsix_path: str | None = typer.Option(
        None,
        "--vsix-path",
        envvar=_action_input_envvar(INPUT_VSIX_PATH),
        help="VSIX package to sign; absolute or relative to the workspace root.",
    ),
    sign_certificate_path: str | None = typer.Option(
        None,
        "--sign-certificate-path",
        envvar=_action_input_envvar(INPUT_SIGN_CERTIFICATE_PATH),
        help="Signing certificate (.pfx); absolute or relative to the workspace root.",
    ),
    sign_password: str | None = typer.Option(
        None,
        "--sign-password",
        envvar=_action_input_envvar(INPUT_SIGN_PASSWORD),
        show_envvar=False,
        help="Certificate password, passed verbatim to the signing tool.",
    ),
    vs_version: str | None = typer.Option(
        None,
        "--vs-version",
        envvar=_action_input_envvar(INPUT_VS_VERSION),
        help="Visual Studio version range for vswhere, or 'latest'.",
    ),
    vs_prerelease: str | None = typer.Option(
        None,
        "--vs-prerelease",
        envvar=_action_input_envvar(INPUT_VS_PRERELEASE),
        help="Include prerelease Visual Studio installations (true/false).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log each pipeline step at INFO level.",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config-file",
        help="Optional settings YAML path.",
        exists=False,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Locate VsixSignTool.exe through vswhere and sign the package."""

    hosts = pipeline_collaborators or PipelineCollaborators()
    # Runs before settings, inputs or logging are touched.
    try:
        check_platform(hosts.platform)
    except PlatformMismatch as exc:
        _fail(exc.message)

    settings = _load_settings(config_file)
    try:
        request = SigningRequest.from_raw_inputs(
            artifact_path=vsix_path,
            certificate_path=sign_certificate_path,
            password=sign_password,
            version_constraint=vs_version,
            allow_prerelease=vs_prerelease,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--vs-prerelease") from exc

    if request.password.strip() and running_in_github_actions():
        add_mask(request.password)

    level = logging.INFO if verbose else settings.logging.level
    logger = configure_logging(level, settings.logging.log_file, secrets=[request.password])

    try:
        result = run_signing_pipeline(
            settings,
            request,
            collaborators=hosts,
            logger=logger,
        )
    except Exception as exc:  # outside the taxonomy; reported generically
        logger.debug("pipeline.unexpected_error", exc_info=True)
        _fail(str(exc) or type(exc).__name__, secrets=(request.password,))

    if not result.succeeded:
        _fail(result.message or "signing failed", secrets=(request.password,))


def main() -> None:
    """CLI script entrypoint."""

    app()


if __name__ == "__main__":
    main()
