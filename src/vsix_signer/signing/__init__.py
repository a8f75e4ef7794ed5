"""Signing tool invocation."""

from vsix_signer.signing.invoke import build_signing_invocation, sign_artifact

__all__ = [
    "build_signing_invocation",
    "sign_artifact",
]
