from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass

from .errors import ConfigError

_LINE_TERMINATORS = {
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
    "os": os.linesep,
}


@dataclass(frozen=True)
class WriterSettings:
    """Output settings shared by every write call.

    The delimiter and quote character are fixed; only the text encoding and
    the line terminator can be changed.
    """

    encoding: str = "utf-8"
    line_terminator: str = os.linesep


def parse_line_terminator(value: str | None) -> str:
    """Map a terminator keyword (lf, crlf, cr, os) to its characters.

    Unknown or empty values fall back to the platform separator.
    """
    key = (value or "").strip().lower()
    return _LINE_TERMINATORS.get(key, os.linesep)


def load_from_env() -> WriterSettings:
    """Build settings from CSV_WRITER_ENCODING and CSV_WRITER_LINE_TERMINATOR.

    Raises ConfigError when the encoding is not a known codec.
    """
    encoding = (os.environ.get("CSV_WRITER_ENCODING") or "").strip() or "utf-8"
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown CSV_WRITER_ENCODING: {encoding!r}") from exc
    terminator = parse_line_terminator(os.environ.get("CSV_WRITER_LINE_TERMINATOR"))
    return WriterSettings(encoding=encoding, line_terminator=terminator)


def get_log_level() -> str:
    """Return the configured log level name (default INFO).

    Unknown level names fall back to INFO.
    """
    level = (os.environ.get("CSV_WRITER_LOG_LEVEL") or "").strip().upper()
    if not level or not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def get_output_dir(default: str | None = None) -> str:
    """Return the demo output directory from CSV_WRITER_OUTPUT_DIR or a default."""
    return os.environ.get("CSV_WRITER_OUTPUT_DIR") or default or os.getcwd()
