"""
Lexical cleaning and traversal checks for the log directory and filename.

Nothing here touches the filesystem.
"""
from __future__ import annotations

import os
import re

from logkit.core.exceptions import UnsafePathError

_SEPARATORS = re.compile(r"[/\\]")


def _has_parent_segment(path: str) -> bool:
    return ".." in _SEPARATORS.split(path)


def clean_log_dir(log_dir: str) -> str:
    """
    Collapse redundant separators and "." segments in log_dir.

    Raises UnsafePathError if a ".." segment survives cleaning, i.e. the
    directory climbs above its starting point.
    """
    cleaned = os.path.normpath(log_dir)
    if _has_parent_segment(cleaned):
        raise UnsafePathError(
            f"path traversal detected in log_dir: {cleaned}",
            details={"log_dir": log_dir},
        )
    return cleaned


def clean_filename(filename: str) -> str:
    """
    Validate that filename is a plain file name.

    Raises UnsafePathError if it contains "/" or "\\" or is "." / "..".
    """
    cleaned = os.path.normpath(filename)
    if _SEPARATORS.search(filename) or cleaned in (".", ".."):
        raise UnsafePathError(
            "invalid filename (contains path separators or traversal): " + filename,
            details={"filename": filename},
        )
    return cleaned
