"""
Logging configuration — central setup for the CLI.

Called once at startup by main.py.  Every module that does
``logger = logging.getLogger(__name__)`` inherits this config.

The requested level applies to the ``meshcheck`` logger tree only;
the root logger stays at WARNING (or lower when a file wants more),
so library chatter never reaches the console.

Records logged while an analyzer runs carry an ``analyzer`` attribute
(``extra={"analyzer": name}``); the verbose and detailed formats show it.

Levels are resolved in precedence order:
    CLI flag  >  MESHCHECK_LOG_LEVEL env var  >  WARNING (default)

Optional file output via MESHCHECK_LOG_FILE / MESHCHECK_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "meshcheck"

# Shown when a record was not logged on behalf of an analyzer
_NO_ANALYZER = "-"

_FMT_MINIMAL = "%(message)s"
_FMT_VERBOSE = "%(asctime)s [%(analyzer)s] %(message)s"
_FMT_DETAILED = "%(asctime)s %(levelname)-5s [%(analyzer)s] %(name)s:%(lineno)d: %(message)s"
_DATEFMT_CONSOLE = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


class AnalyzerField(logging.Filter):
    """Give every record an ``analyzer`` attribute for the formatters."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "analyzer", None):
            record.analyzer = _NO_ANALYZER
        return True


def _handler(handler: logging.Handler, level: int, fmt: str, datefmt: str | None) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    handler.addFilter(AnalyzerField())
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure logging for meshcheck.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Optional separate level for the log file.
            Defaults to the same as ``level``.
    """
    numeric_level = parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DETAILED, _DATEFMT_CONSOLE
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_CONSOLE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_handler(logging.StreamHandler(sys.stderr), numeric_level, fmt, datefmt))

    effective_level = numeric_level
    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)
        root.addHandler(_handler(
            logging.FileHandler(log_file, encoding="utf-8"),
            file_level, _FMT_DETAILED, _DATEFMT_FILE,
        ))

    logging.getLogger(PACKAGE_LOGGER).setLevel(effective_level)
    root.setLevel(max(effective_level, logging.WARNING))

    logging.raiseExceptions = False


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant (WARNING if unknown)."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
