"""Input parsing and resolution."""

from vsix_signer.inputs.request import (
    INPUT_SIGN_CERTIFICATE_PATH,
    INPUT_SIGN_PASSWORD,
    INPUT_VS_PRERELEASE,
    INPUT_VS_VERSION,
    INPUT_VSIX_PATH,
    LATEST_VERSION,
    SigningRequest,
    parse_boolean_input,
)
from vsix_signer.inputs.resolve import ResolvedPaths, require_inputs, resolve_input_file, resolve_inputs

__all__ = [
    "INPUT_SIGN_CERTIFICATE_PATH",
    "INPUT_SIGN_PASSWORD",
    "INPUT_VS_PRERELEASE",
    "INPUT_VS_VERSION",
    "INPUT_VSIX_PATH",
    "LATEST_VERSION",
    "ResolvedPaths",
    "SigningRequest",
    "parse_boolean_input",
    "require_inputs",
    "resolve_input_file",
    "resolve_inputs",
]
