"""Path and filesystem helper functions."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Callable

PathExists = Callable[[PurePath], bool]


def path_exists(path: PurePath) -> bool:
    """Return whether a file or directory exists at the given path."""

    return os.path.exists(path)


def join_under(root: PurePath, relative: str) -> PurePath:
    """Join a backslash or slash separated relative path onto a root of the same flavour."""

    parts = [part for part in relative.replace("\\", "/").split("/") if part]
    return root.joinpath(*parts)
