"""
Structured logging for the service.

Every record is emitted as one JSON object per line with an ISO-8601
UTC ``timestamp``, the ``level``, the ``logger`` name and the
``message`` (plus ``exception`` when a traceback is attached).  Records
go to the console and, unless disabled, to ``company-api.log``.
Setting ``LOG_FORMAT=text`` switches both handlers to a plain
human-readable line.

The store and the company service never configure logging themselves;
they are handed a ``logging.Logger`` by ``create_app``.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        moment = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_data = {
            "timestamp": moment.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def build_formatter(fmt: str = "json") -> logging.Formatter:
    """Return the formatter for ``fmt`` (``"json"`` or ``"text"``)."""
    if fmt.lower() == "text":
        return logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    return JSONFormatter()


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = "company-api.log",
    fmt: str = "json",
) -> None:
    """Configure the root logger once.

    Does nothing when the root logger already has handlers (a test
    runner or an earlier ``create_app`` call configured it).  Otherwise
    attaches a console handler and, when ``logfile`` is set, a UTF-8
    file handler, both using the formatter selected by ``fmt``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = build_formatter(fmt)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
