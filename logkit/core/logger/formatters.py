"""
Formatters: JSON lines for the file and stderr, human-readable for the console.

Both are structlog ProcessorFormatters, so stdlib handlers render the event
dicts produced by a handle's processor chain.
"""
from __future__ import annotations

from typing import Any, Optional

import structlog
from structlog.processors import CallsiteParameter

CONSOLE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Frames from these modules are never reported as the call site.
_INTERNAL_MODULES = ["logkit.core.logger"]


def build_processors(*, caller: bool = True) -> list[Any]:
    """
    Processor chain bound into every handle.

    The last processor hands the event dict over to the stdlib logger, where
    each handler's formatter renders it.
    """
    processors: list[Any] = [structlog.processors.add_log_level]
    if caller:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters={CallsiteParameter.FILENAME, CallsiteParameter.LINENO},
                additional_ignores=_INTERNAL_MODULES,
            )
        )
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]
    return processors


class JsonFormatter(structlog.stdlib.ProcessorFormatter):
    """
    One JSON object per line (JSON Lines), with the event under "message"
    and an ISO-8601 UTC timestamp.
    """

    def __init__(self, *, message_key: str = "message") -> None:
        super().__init__(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.processors.format_exc_info,
                structlog.processors.EventRenamer(message_key),
                structlog.processors.JSONRenderer(),
            ],
        )


class ConsoleFormatter(structlog.stdlib.ProcessorFormatter):
    """Human-readable format for console, with a fixed local timestamp."""

    def __init__(
        self,
        *,
        colors: bool = True,
        time_format: Optional[str] = None,
    ) -> None:
        super().__init__(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.TimeStamper(
                    fmt=time_format or CONSOLE_TIME_FORMAT, utc=False
                ),
                structlog.dev.ConsoleRenderer(colors=colors),
            ],
        )
