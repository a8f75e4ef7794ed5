"""Logging utilities for the CLI and pipeline modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from vsix_signer.utils.process import REDACTED

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def redact_secrets(text: str, secrets: Iterable[str]) -> str:
    """Replace every non-blank secret in ``text``."""

    for secret in secrets:
        if secret.strip():
            text = text.replace(secret, REDACTED)
    return text


class SecretRedactingFormatter(logging.Formatter):
    """Formatter that scrubs registered secrets from the fully rendered record.

    Redaction runs after formatting so exception tracebacks and stack info are
    covered as well as the message.
    """

    def __init__(self, fmt: str | None = None, datefmt: str | None = None, secrets: Iterable[str] = ()) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets: set[str] = set()
        for secret in secrets:
            self.add_secret(secret)

    def add_secret(self, secret: str) -> None:
        if secret.strip():
            self._secrets.add(secret)

    def format(self, record: logging.LogRecord) -> str:
        return redact_secrets(super().format(record), self._secrets)


def configure_logging(
    level: int | str = logging.WARNING,
    log_file: Path | None = None,
    secrets: Iterable[str] = (),
) -> logging.Logger:
    """Configure process-wide stderr (and optional file) logging with secret redaction."""

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = SecretRedactingFormatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT, secrets=secrets)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(level)
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    logger = logging.getLogger("vsix_signer")
    logger.setLevel(level)
    return logger
