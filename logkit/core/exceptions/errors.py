"""
Concrete logkit exception types.
"""
from __future__ import annotations

from logkit.core.exceptions.base import LogkitError


class ConfigurationError(LogkitError):
    """Configuration value could not be parsed (e.g. from environment)."""

    default_code = "CONFIGURATION_ERROR"


class UnsafePathError(LogkitError):
    """Log directory or filename would escape its intended location."""

    default_code = "UNSAFE_PATH"


class LogDirectoryError(LogkitError):
    """Log directory could not be created."""

    default_code = "LOG_DIRECTORY_ERROR"


class LogReleaseError(LogkitError):
    """Flushing or closing the log file failed; records may be lost."""

    default_code = "LOG_RELEASE_ERROR"
