"""
Logger handle: an immutable wrapper around a structlog bound logger.

Handles derived with with_field()/with_fields()/with_error() share the file
release hook of the handle they came from and nothing else.
"""
from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Mapping, Optional

import structlog

from logkit.core.exceptions import LogReleaseError
from logkit.core.logger.handlers import LoguruFileHandler
from logkit.core.logger.levels import level_name


def _bind(emitter: Any, fields: Mapping[str, Any]) -> Any:
    # Same result as emitter.bind(**fields), but keys never become keyword
    # arguments, so a name like "self" is a plain field.
    context = dict(structlog.get_context(emitter))
    context.update(fields)
    return type(emitter)(emitter._logger, emitter._processors, context)


class FileRelease:
    """
    Idempotent close hook for one file handler.

    Shared by every handle in a family; the first close() flushes and closes
    the file, later calls return immediately.
    """

    def __init__(self, handler: LoguruFileHandler) -> None:
        self._handler = handler
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def path(self) -> str:
        return self._handler.path

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            try:
                self._handler.close()
            except (OSError, ValueError) as exc:
                raise LogReleaseError(
                    f"failed to close log file {self.path}: {exc}",
                    details={"path": self.path},
                    cause=exc,
                ) from exc


class Logger:
    """
    Leveled, structured logger handle.

    The minimum level is fixed when the handle is built; bound fields are
    attached to every record emitted through it.
    """

    __slots__ = ("_emitter", "_level", "_release")

    def __init__(
        self,
        emitter: Any,
        level: int,
        release: Optional[FileRelease] = None,
    ) -> None:
        self._emitter = emitter
        self._level = level
        self._release = release

    def __repr__(self) -> str:
        return (
            f"Logger(level={self.level_name!r}, fields={dict(self.fields)!r}, "
            f"owns_file={self.owns_file})"
        )

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def level(self) -> int:
        return self._level

    @property
    def level_name(self) -> str:
        return level_name(self._level)

    @property
    def fields(self) -> Mapping[str, Any]:
        """Read-only view of the context bound to this handle."""
        return MappingProxyType(dict(structlog.get_context(self._emitter)))

    @property
    def owns_file(self) -> bool:
        return self._release is not None

    @property
    def closed(self) -> bool:
        return self._release is not None and self._release.closed

    def is_enabled_for(self, level: int) -> bool:
        return level >= self._level

    def _derive(self, emitter: Any) -> "Logger":
        return Logger(emitter, self._level, self._release)

    def with_field(self, key: str, value: Any) -> "Logger":
        """Return a new handle that adds key=value to every record."""
        return self._derive(_bind(self._emitter, {key: value}))

    def with_fields(self, fields: Mapping[str, Any]) -> "Logger":
        """Return a new handle that adds all of fields to every record."""
        return self._derive(_bind(self._emitter, fields))

    def with_error(self, err: Optional[BaseException]) -> "Logger":
        """
        Return a new handle carrying err as "error" (message) and "error_type".

        None attaches nothing; the result is still a new handle.
        """
        if err is None:
            return self._derive(self._emitter)
        return self._derive(
            _bind(self._emitter, {"error": str(err), "error_type": type(err).__name__})
        )

    def _call(self, fields: Mapping[str, Any]) -> Any:
        return _bind(self._emitter, fields) if fields else self._emitter

    def debug(self, message: str, /, *args: Any, **fields: Any) -> None:
        self._call(fields).debug(message, *args)

    def info(self, message: str, /, *args: Any, **fields: Any) -> None:
        self._call(fields).info(message, *args)

    def warn(self, message: str, /, *args: Any, **fields: Any) -> None:
        self._call(fields).warning(message, *args)

    warning = warn

    def error(self, message: str, /, *args: Any, **fields: Any) -> None:
        self._call(fields).error(message, *args)

    def exception(self, message: str, /, *args: Any, **fields: Any) -> None:
        """Log at error level with the active exception's traceback."""
        self._call(fields).exception(message, *args)

    def close(self) -> None:
        """
        Flush and close the log file shared by this handle's family.

        Safe to call repeatedly and on handles that own no file. Raises
        LogReleaseError if the file cannot be flushed or closed.
        """
        if self._release is not None:
            self._release.close()
