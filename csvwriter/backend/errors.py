"""Error types raised by the CSV writer.

Every failure is raised to the caller; nothing here is retried.
"""

from __future__ import annotations

import os


class CsvWriterError(Exception):
    """Base class for all writer failures."""


class InvalidInputError(CsvWriterError, ValueError):
    """The record collection is missing, empty, or mixes record types."""


class SchemaError(CsvWriterError, ValueError):
    """The record type declares no exportable columns."""


class ExtractionError(CsvWriterError):
    """A column value could not be read from a record."""

    def __init__(self, attr: str, record_type: type, reason: str = "") -> None:
        self.attr = attr
        self.record_type = record_type
        msg = f"Error accessing field {attr!r} on {record_type.__qualname__}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class DestinationError(CsvWriterError):
    """The destination could not be opened, written or closed."""

    def __init__(self, destination: str | os.PathLike[str], reason: str = "") -> None:
        self.destination = destination
        msg = f"Error writing to file: {os.fspath(destination)}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class ConfigError(CsvWriterError, ValueError):
    """An environment setting holds an unusable value."""
