"""
Sinks: a size-rotating, age- and count-retained log file backed by a loguru
file sink, plus console and stderr handlers. All are stdlib handlers fed by
structlog.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import timedelta
from typing import IO, Optional

from loguru._file_sink import Retention
from loguru._logger import Core as _LoguruCore
from loguru._logger import Logger as _LoguruLogger

from logkit.core.logger.config import (
    DEFAULT_MAX_BACKUPS,
    DEFAULT_MAX_SIZE_MB,
    MAX_AGE_DAYS,
)
from logkit.core.logger.formatters import ConsoleFormatter, JsonFormatter


def _private_loguru() -> _LoguruLogger:
    # Built like loguru's module-level logger, but on its own core: sinks added
    # here never receive records from, or send records to, ``loguru.logger``.
    return _LoguruLogger(
        core=_LoguruCore(),
        exception=None,
        depth=0,
        record=False,
        lazy=False,
        colors=False,
        raw=False,
        capture=True,
        patchers=[],
        extra={},
    )


class LoguruFileHandler(logging.Handler):
    """
    Stdlib handler writing formatted records to a loguru file sink.

    Loguru rotates the file once it would exceed max_bytes (rotated files are
    renamed "<name>.<timestamp><ext>"). On every rotation it deletes rotated
    files older than max_age_days (when positive), then all but the
    backup_count newest. The file is created on first write.
    """

    def __init__(
        self,
        path: str,
        *,
        max_bytes: int = DEFAULT_MAX_SIZE_MB * 1024 * 1024,
        backup_count: int = DEFAULT_MAX_BACKUPS,
        max_age_days: int = MAX_AGE_DAYS,
        encoding: str = "utf-8",
    ) -> None:
        super().__init__()
        self.path = os.path.abspath(path)
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.max_age_days = max_age_days
        self._sink = _private_loguru()
        # Braces in the path are literal, not loguru time placeholders.
        literal = self.path.replace("{", "{{").replace("}", "}}")
        self._sink_id: Optional[int] = self._sink.add(
            literal,
            level=0,
            format="{message}",
            colorize=False,
            rotation=max_bytes,
            retention=self._retain,
            compression=None,
            delay=True,
            encoding=encoding,
        )

    def _retain(self, logs: list[str]) -> None:
        if self.max_age_days > 0:
            Retention.retention_age(logs, timedelta(days=self.max_age_days).total_seconds())
        Retention.retention_count([log for log in logs if os.path.exists(log)], self.backup_count)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._sink.log(record.levelno, self.format(record))
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """Flush and close the file. Errors from the flush propagate."""
        self.acquire()
        try:
            sink_id, self._sink_id = self._sink_id, None
            if sink_id is not None:
                self._sink.remove(sink_id)
        finally:
            self.release()
            super().close()


def build_rotating_file_handler(
    log_dir: str,
    filename: str,
    *,
    max_bytes: int = DEFAULT_MAX_SIZE_MB * 1024 * 1024,
    backup_count: int = DEFAULT_MAX_BACKUPS,
    max_age_days: int = MAX_AGE_DAYS,
) -> LoguruFileHandler:
    """Rotating JSON-lines file handler for log_dir/filename (directory must exist)."""
    handler = LoguruFileHandler(
        os.path.join(log_dir, filename),
        max_bytes=max_bytes,
        backup_count=backup_count,
        max_age_days=max_age_days,
    )
    handler.setFormatter(JsonFormatter())
    return handler


def build_console_handler(stream: Optional[IO[str]] = None) -> logging.StreamHandler:
    """Human-readable handler on stdout; colors only when the stream is a tty."""
    stream = stream if stream is not None else sys.stdout
    handler = logging.StreamHandler(stream)
    isatty = getattr(stream, "isatty", None)
    handler.setFormatter(ConsoleFormatter(colors=bool(isatty and isatty())))
    return handler


def build_stderr_handler() -> logging.StreamHandler:
    """JSON-lines handler on stderr, used by fallback loggers."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    return handler
