"""
logkit logger: rotating file (JSON lines) + optional console, per-handle levels.

Usage:
    from logkit.core.logger import LoggerConfig, new_logger

    with new_logger(LoggerConfig(level="debug", log_dir="/var/log/myapp", filename="myapp.log")) as logger:
        request_log = logger.with_fields({"request_id": "abc-123", "user": "42"})
        request_log.info("Request handled", status=200)

        try:
            do_work()
        except ValueError as exc:
            request_log.with_error(exc).error("Work failed")

    # Or from env: LOG_LEVEL, LOG_DIR, LOG_FILENAME, LOG_MAX_SIZE_MB, LOG_MAX_BACKUPS,
    # LOG_CONSOLE, LOG_DIR_MODE, LOG_DISABLE_CALLER
    logger = new_logger(LoggerConfig.from_env())
    ...
    logger.close()

new_logger() never raises: unsafe paths or an unusable directory produce a
stderr-only logger and a structured warning on stderr.
"""
from logkit.core.logger.config import LoggerConfig
from logkit.core.logger.formatters import ConsoleFormatter, JsonFormatter
from logkit.core.logger.handle import Logger
from logkit.core.logger.handlers import (
    LoguruFileHandler,
    build_console_handler,
    build_rotating_file_handler,
)
from logkit.core.logger.levels import parse_level
from logkit.core.logger.setup import new_logger, stderr_logger

__all__ = [
    "LoggerConfig",
    "Logger",
    "JsonFormatter",
    "ConsoleFormatter",
    "LoguruFileHandler",
    "new_logger",
    "stderr_logger",
    "parse_level",
    "build_rotating_file_handler",
    "build_console_handler",
]
