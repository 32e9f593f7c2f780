"""CSV export for lists of registered records."""

from __future__ import annotations

import codecs
import io
import logging
import os
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TextIO

from ..cells import escape, render_cell
from ..columns import FieldDescriptor, header_row, resolve_columns
from ..config import WriterSettings, load_from_env
from ..errors import DestinationError, ExtractionError, InvalidInputError

logger = logging.getLogger(__name__)

DELIMITER = ","


def _check_records(records: Iterable[Any] | None) -> tuple[list[Any], type]:
    if records is None:
        raise InvalidInputError("Data list cannot be None or empty")
    items = list(records)
    if not items:
        raise InvalidInputError("Data list cannot be None or empty")
    record_type = type(items[0])
    for index, record in enumerate(items):
        if type(record) is not record_type:
            raise InvalidInputError(
                f"Record {index} is a {type(record).__qualname__}, "
                f"expected {record_type.__qualname__} like the first record"
            )
    return items, record_type


def _render(descriptor: FieldDescriptor, record: Any) -> str:
    raw = descriptor.extract(record)
    try:
        return render_cell(raw)
    except Exception as exc:
        raise ExtractionError(descriptor.attr, type(record), str(exc)) from exc


def _iter_rows(items: list[Any], descriptors: Sequence[FieldDescriptor]) -> Iterator[list[str]]:
    yield [escape(name) for name in header_row(descriptors)]
    for record in items:
        yield [_render(d, record) for d in descriptors]


class CsvWriter:
    """Writes homogeneous records to CSV using their registered columns.

    Input is validated and columns are resolved before any output is
    produced, so invalid input or a type without columns never touches the
    destination.
    """

    def __init__(self, settings: WriterSettings | None = None) -> None:
        self.settings = settings or WriterSettings()

    def rows(self, records: Iterable[Any] | None) -> Iterator[list[str]]:
        """Return the header followed by one rendered row per record."""
        items, record_type = _check_records(records)
        descriptors = resolve_columns(record_type)
        return _iter_rows(items, descriptors)

    def write(self, records: Iterable[Any] | None, stream: TextIO) -> int:
        """Write all rows to ``stream``; returns the number of data rows."""
        return self._write_rows(self.rows(records), stream)

    def render(self, records: Iterable[Any] | None) -> str:
        """Render all rows to a string."""
        buf = io.StringIO()
        self.write(records, buf)
        return buf.getvalue()

    def write_to_file(
        self, records: Iterable[Any] | None, destination: str | os.PathLike[str]
    ) -> None:
        """Create or overwrite ``destination`` with the CSV rendering of ``records``.

        Raises:
            InvalidInputError: records is None, empty, or mixes types.
            SchemaError: the record type exports no columns.
            ExtractionError: a column could not be read from a record.
            DestinationError: the file could not be opened, written or closed.
        """
        rows = self.rows(records)
        path = os.fspath(destination)
        try:
            # Unknown encodings must fail before open() truncates the file.
            codecs.lookup(self.settings.encoding)
            with open(path, "w", encoding=self.settings.encoding, newline="") as f:
                count = self._write_rows(rows, f)
        except (OSError, UnicodeEncodeError, LookupError) as exc:
            logger.debug("Failed to write CSV output to %s: %s", path, exc)
            raise DestinationError(destination, str(exc)) from exc
        logger.info("CSV output written to %s (%d records)", path, count)

    def _write_rows(self, rows: Iterator[list[str]], stream: TextIO) -> int:
        terminator = self.settings.line_terminator
        count = -1  # header is not a record
        for row in rows:
            stream.write(DELIMITER.join(row))
            stream.write(terminator)
            count += 1
        return count


def render_csv(records: Iterable[Any] | None) -> str:
    """Render records to a CSV string using settings from the environment."""
    return CsvWriter(load_from_env()).render(records)


def write_to_file(records: Iterable[Any] | None, destination: str | os.PathLike[str]) -> None:
    """Write records to ``destination`` using settings from the environment."""
    CsvWriter(load_from_env()).write_to_file(records, destination)
