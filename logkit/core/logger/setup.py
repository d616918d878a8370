"""
Logger factory: validate a LoggerConfig, wire rotating file (JSON) and
optional console sinks, and return an immutable Logger handle.

new_logger() never raises. Unsafe paths and directory-creation failures are
reported on stderr and produce a stderr-only handle instead.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

import structlog

from logkit.core.exceptions import LogDirectoryError, LogkitError
from logkit.core.logger.config import MAX_AGE_DAYS, LoggerConfig
from logkit.core.logger.formatters import build_processors
from logkit.core.logger.handle import FileRelease, Logger
from logkit.core.logger.handlers import (
    LoguruFileHandler,
    build_console_handler,
    build_rotating_file_handler,
    build_stderr_handler,
)
from logkit.core.logger.levels import parse_level
from logkit.core.logger.paths import clean_filename, clean_log_dir

LOGGER_NAME = "logkit"


def _private_logger(level: int, handlers: list[logging.Handler]) -> logging.Logger:
    # Constructed directly so it stays out of logging's global registry and
    # never inherits root handlers or levels.
    stdlib_logger = logging.Logger(LOGGER_NAME, level)
    stdlib_logger.propagate = False
    for handler in handlers:
        stdlib_logger.addHandler(handler)
    return stdlib_logger


def _wrap(stdlib_logger: logging.Logger, level: int, *, caller: bool):
    return structlog.wrap_logger(
        stdlib_logger,
        processors=build_processors(caller=caller),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        cache_logger_on_first_use=False,
    ).bind()


def stderr_logger(level: int = logging.INFO, *, caller: bool = True) -> Logger:
    """Logger writing JSON lines to stderr; owns no file, close() is a no-op."""
    stdlib_logger = _private_logger(level, [build_stderr_handler()])
    return Logger(_wrap(stdlib_logger, level, caller=caller), level)


def _provision_directory(log_dir: str, mode: int) -> None:
    missing = []
    path = os.path.abspath(log_dir)
    while not os.path.isdir(path):
        missing.append(path)
        parent = os.path.dirname(path)
        if parent == path:
            break
        path = parent
    try:
        created = []
        for path in reversed(missing):
            try:
                os.mkdir(path, 0o700)
            except FileExistsError:
                if not os.path.isdir(path):
                    raise
                continue
            created.append(path)
        # Owner-only until every level exists, then exactly mode, deepest first.
        for path in reversed(created):
            os.chmod(path, mode)
    except OSError as exc:
        raise LogDirectoryError(
            f"failed to create log directory {log_dir}: {exc}",
            details={"log_dir": log_dir},
            cause=exc,
        ) from exc


def _open_file_sink(log_dir: str, filename: str, cfg: LoggerConfig) -> LoguruFileHandler:
    try:
        return build_rotating_file_handler(
            log_dir,
            filename,
            max_bytes=cfg.max_bytes,
            backup_count=cfg.max_backups,
            max_age_days=MAX_AGE_DAYS,
        )
    except OSError as exc:
        raise LogDirectoryError(
            f"log directory {log_dir} is not usable: {exc}",
            details={"log_dir": log_dir},
            cause=exc,
        ) from exc


def _fallback(err: LogkitError, level: int, *, caller: bool) -> Logger:
    reporter = stderr_logger(logging.DEBUG, caller=caller)
    if isinstance(err, LogDirectoryError):
        reporter.error(
            "Failed to create log directory, falling back to stderr",
            error=str(err.cause or err),
            log_dir=err.details.get("log_dir"),
        )
    else:
        reporter.error(
            "SECURITY: Invalid logger configuration, falling back to stderr",
            security_warning=err.message,
        )
    return stderr_logger(level, caller=caller)


def new_logger(config: Optional[LoggerConfig] = None) -> Logger:
    """
    Build a Logger from config (LoggerConfig() when None).

    The level is bound to the returned handle only; no process-wide logging
    or structlog state is changed.
    """
    cfg = (config or LoggerConfig()).with_defaults()
    level = parse_level(cfg.level)
    caller = not cfg.disable_caller

    try:
        log_dir = clean_log_dir(cfg.log_dir)
        filename = clean_filename(cfg.filename)
        _provision_directory(log_dir, cfg.dir_mode)
        file_handler = _open_file_sink(log_dir, filename, cfg)
    except LogkitError as err:
        return _fallback(err, level, caller=caller)

    handlers: list[logging.Handler] = [file_handler]
    if cfg.console:
        handlers.append(build_console_handler())

    stdlib_logger = _private_logger(level, handlers)
    return Logger(
        _wrap(stdlib_logger, level, caller=caller),
        level,
        release=FileRelease(file_handler),
    )
