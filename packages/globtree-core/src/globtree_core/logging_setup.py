"""Root logger configuration driven by ``log_level`` / ``log_format``.

Library modules log through plain ``logging.getLogger(__name__)``. For the
``json`` format those records are rendered by structlog's
:class:`~structlog.stdlib.ProcessorFormatter`, one JSON object per line.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Applied to stdlib records before rendering
_PRE_CHAIN = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.format_exc_info,
]


def json_formatter() -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_PRE_CHAIN,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )


def setup_logging(level: str = "info", fmt: str = "text", stream: TextIO | None = None) -> None:
    """Install a single stream handler on the root logger.

    Safe to call more than once: existing root handlers are removed first.
    Writes to stderr unless *stream* is given, so command output on stdout
    stays clean.
    """
    numeric_level = _LEVELS.get(level.lower(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(json_formatter() if fmt == "json" else logging.Formatter(DEFAULT_LOG_FORMAT))
    root_logger.addHandler(handler)
