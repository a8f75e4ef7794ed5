"""Signing request built once from the raw inputs."""

from __future__ import annotations

from dataclasses import dataclass, field

LATEST_VERSION = "latest"

INPUT_VS_VERSION = "vs-version"
INPUT_VS_PRERELEASE = "vs-prerelease"
INPUT_SIGN_PASSWORD = "sign-password"
INPUT_VSIX_PATH = "vsix-path"
INPUT_SIGN_CERTIFICATE_PATH = "sign-certificate-path"

_TRUE_VALUES = frozenset({"true", "True", "TRUE"})
_FALSE_VALUES = frozenset({"false", "False", "FALSE"})


def parse_boolean_input(value: str, input_name: str) -> bool:
    """Parse a CI-style boolean input, rejecting anything but true/false spellings."""

    candidate = value.strip()
    if candidate in _TRUE_VALUES:
        return True
    if candidate in _FALSE_VALUES:
        return False
    raise ValueError(f"Input '{input_name}' must be one of: true, True, TRUE, false, False, FALSE")


@dataclass(frozen=True, slots=True)
class SigningRequest:
    """Immutable inputs threaded through every pipeline stage.

    Required inputs that were not supplied are held as empty strings; the
    input resolver rejects them after the platform check has run.
    """

    artifact_path: str
    certificate_path: str
    password: str = field(repr=False)
    version_constraint: str = LATEST_VERSION
    allow_prerelease: bool = False

    @classmethod
    def from_raw_inputs(
        cls,
        *,
        artifact_path: str | None,
        certificate_path: str | None,
        password: str | None,
        version_constraint: str | None = None,
        allow_prerelease: str | None = None,
    ) -> "SigningRequest":
        """Build a request from optional string inputs, applying the input defaults."""

        version = (version_constraint or "").strip() or LATEST_VERSION
        prerelease = (allow_prerelease or "").strip() or "false"
        return cls(
            artifact_path=(artifact_path or "").strip(),
            certificate_path=(certificate_path or "").strip(),
            password=password or "",
            version_constraint=version,
            allow_prerelease=parse_boolean_input(prerelease, INPUT_VS_PRERELEASE),
        )

    @property
    def pins_version(self) -> bool:
        return self.version_constraint != LATEST_VERSION
