"""
logkit exception system.

Usage:
    from logkit.core.exceptions import LogkitError, LogReleaseError

    try:
        logger.close()
    except LogReleaseError as exc:
        print(exc.to_dict())

Construction-time errors (UnsafePathError, LogDirectoryError) are raised and
absorbed inside the logger factory; only ConfigurationError (from_env) and
LogReleaseError (close) reach callers.
"""
from logkit.core.exceptions.base import LogkitError
from logkit.core.exceptions.errors import (
    ConfigurationError,
    LogDirectoryError,
    LogReleaseError,
    UnsafePathError,
)

__all__ = [
    "LogkitError",
    "ConfigurationError",
    "UnsafePathError",
    "LogDirectoryError",
    "LogReleaseError",
]
