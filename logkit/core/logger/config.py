"""
Logger configuration. Build it in code, or from env with LoggerConfig.from_env().

Zero or empty values mean "use the default"; with_defaults() resolves them.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from logkit.core.exceptions import ConfigurationError

DEFAULT_LEVEL = "info"
DEFAULT_LOG_DIR = "./logs"
DEFAULT_FILENAME = "go.log"
DEFAULT_MAX_SIZE_MB = 10
DEFAULT_MAX_BACKUPS = 5
DEFAULT_DIR_MODE = 0o750  # rwxr-x---
MAX_AGE_DAYS = 30

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class LoggerConfig:
    """
    Configuration for a logkit logger.

    Passing a config to new_logger() never mutates it; defaults are applied
    on a copy.
    """

    # debug, info, warn/warning, error (case-insensitive; unknown -> info)
    level: str = DEFAULT_LEVEL
    # Directory for the rotating log file
    log_dir: str = DEFAULT_LOG_DIR
    # Log file name, no path separators allowed
    filename: str = DEFAULT_FILENAME
    # Rotate once the file exceeds this many megabytes
    max_size_mb: int = DEFAULT_MAX_SIZE_MB
    # Rotated files to keep
    max_backups: int = DEFAULT_MAX_BACKUPS
    # Also write human-readable records to stdout
    console: bool = False
    # Permission bits for a newly created log directory
    dir_mode: int = DEFAULT_DIR_MODE
    # Omit call-site filename/lineno from records
    disable_caller: bool = False

    def with_defaults(self) -> "LoggerConfig":
        """Return a copy with every zero/empty field replaced by its default."""
        return LoggerConfig(
            level=(self.level or DEFAULT_LEVEL).strip() or DEFAULT_LEVEL,
            log_dir=self.log_dir or DEFAULT_LOG_DIR,
            filename=self.filename or DEFAULT_FILENAME,
            max_size_mb=self.max_size_mb if self.max_size_mb and self.max_size_mb > 0 else DEFAULT_MAX_SIZE_MB,
            max_backups=self.max_backups if self.max_backups and self.max_backups > 0 else DEFAULT_MAX_BACKUPS,
            console=bool(self.console),
            dir_mode=self.dir_mode or DEFAULT_DIR_MODE,
            disable_caller=bool(self.disable_caller),
        )

    @property
    def max_bytes(self) -> int:
        return self.max_size_mb * 1024 * 1024

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> "LoggerConfig":
        """
        Build config from environment variables.

        Env:
            LOG_LEVEL           - default info
            LOG_DIR             - default ./logs
            LOG_FILENAME        - default go.log
            LOG_MAX_SIZE_MB     - default 10
            LOG_MAX_BACKUPS     - default 5
            LOG_CONSOLE         - "1" / "true" / "yes" / "on" -> True
            LOG_DIR_MODE        - octal, e.g. 750
            LOG_DISABLE_CALLER  - "1" / "true" / "yes" / "on" -> True

        Overrides (keyword args) take precedence over env. Raises
        ConfigurationError when a numeric value cannot be parsed.
        """
        env = os.environ if environ is None else environ

        def _str(attr: str, var: str, default: str) -> str:
            v = overrides.get(attr)
            if v is not None:
                return str(v)
            return env.get(var, default)

        def _int(attr: str, var: str, default: int, base: int = 10) -> int:
            v = overrides.get(attr)
            if v is not None:
                return int(v)
            raw = env.get(var, "").strip()
            if not raw:
                return default
            try:
                return int(raw, base)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{var} must be an integer, got {raw!r}",
                    details={"variable": var, "value": raw},
                    cause=exc,
                ) from exc

        def _bool(attr: str, var: str) -> bool:
            v = overrides.get(attr)
            if v is not None:
                return bool(v) if not isinstance(v, str) else v.strip().lower() in _TRUE_VALUES
            return env.get(var, "").strip().lower() in _TRUE_VALUES

        return cls(
            level=_str("level", "LOG_LEVEL", DEFAULT_LEVEL),
            log_dir=_str("log_dir", "LOG_DIR", DEFAULT_LOG_DIR),
            filename=_str("filename", "LOG_FILENAME", DEFAULT_FILENAME),
            max_size_mb=_int("max_size_mb", "LOG_MAX_SIZE_MB", DEFAULT_MAX_SIZE_MB),
            max_backups=_int("max_backups", "LOG_MAX_BACKUPS", DEFAULT_MAX_BACKUPS),
            console=_bool("console", "LOG_CONSOLE"),
            dir_mode=_int("dir_mode", "LOG_DIR_MODE", DEFAULT_DIR_MODE, base=8),
            disable_caller=_bool("disable_caller", "LOG_DISABLE_CALLER"),
        )

    def with_overrides(self, **overrides: Any) -> "LoggerConfig":
        """Return a new config with the given overrides (None values are ignored)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
