"""
Log record formatters

``console`` writes one line per record with the keyword context appended
as ``key=value`` pairs. ``json`` writes one object per line with the
context kept as a nested ``context`` object, for log shippers and the
rotating log files.
"""

import json
import logging
from datetime import datetime, timezone

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
RESET = "\033[0m"

FORMAT_CONSOLE = "console"
FORMAT_JSON = "json"
LOG_FORMATS = (FORMAT_CONSOLE, FORMAT_JSON)


def utc_timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
        timespec="milliseconds"
    )


class JSONFormatter(logging.Formatter):
    """
    One JSON document per record.

    Records emitted through ``StructuredLogger`` carry their bare message in
    ``plain_message`` and their keyword arguments in ``context``; records
    from third-party loggers fall back to ``getMessage()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        document = {
            "timestamp": utc_timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": getattr(record, "plain_message", None) or record.getMessage(),
            "source": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        context = getattr(record, "context", None)
        if context:
            document["context"] = context

        if record.exc_info:
            document["exception"] = self.formatException(record.exc_info)

        return json.dumps(document, default=str)


class ConsoleFormatter(logging.Formatter):
    """Single-line, optionally colored output for terminals and plain files"""

    def __init__(self, use_colors: bool = True):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        line = (
            f"[{self.formatTime(record, self.datefmt)}] {record.levelname:<8} "
            f"{record.name}: {record.getMessage()}"
        )
        if self.use_colors and record.levelname in LEVEL_COLORS:
            line = f"{LEVEL_COLORS[record.levelname]}{line}{RESET}"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)

        return line


def build_formatter(formatter_type: str, use_colors: bool = False) -> logging.Formatter:
    if formatter_type == FORMAT_JSON:
        return JSONFormatter()
    return ConsoleFormatter(use_colors=use_colors)
