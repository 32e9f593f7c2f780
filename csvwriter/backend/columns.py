"""Column registration and resolution for exportable record types.

A record type opts fields into CSV output in one of two ways:

- dataclass fields declared with ``csv_column(...)``, or
- a ``__csv_columns__`` classmethod returning ``ColumnSpec`` entries.

Fields without either marker are never written. Resolution turns the
declared columns into an ordered tuple of ``FieldDescriptor`` objects, once
per record type.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import logging
import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .errors import ExtractionError, SchemaError

logger = logging.getLogger(__name__)

# Key under which csv_column() stores its CsvColumn in dataclass field metadata.
METADATA_KEY = "csv"

Accessor = Callable[[Any], Any]


@dataclass(frozen=True)
class CsvColumn:
    """Export marker attached to a dataclass field.

    ``None`` means "not specified"; defaults are applied during resolution.
    """

    name: str | None = None
    order: int | None = None


@dataclass(frozen=True)
class ColumnSpec:
    """One explicitly registered column, as returned by ``__csv_columns__``."""

    attr: str
    name: str | None = None
    order: int | None = None
    accessor: Accessor | None = None


@dataclass(frozen=True)
class FieldDescriptor:
    """Resolved column: where to read the value and what to call it."""

    attr: str
    output_name: str
    order: int
    accessor: Accessor

    def extract(self, record: Any) -> Any:
        """Read this column's raw value from ``record``.

        Any failure is fatal for the write and surfaces as ExtractionError.
        """
        try:
            return self.accessor(record)
        except Exception as exc:
            raise ExtractionError(self.attr, type(record), str(exc)) from exc


def csv_column(name: str | None = None, order: int | None = None, **kwargs: Any) -> Any:
    """Declare a dataclass field as an exported CSV column.

    Extra keyword arguments (``default``, ``default_factory``, ``repr``...)
    are passed through to ``dataclasses.field``.

        @dataclass
        class Person:
            first_name: str = csv_column(name="First Name", order=1)
            nickname: str = ""  # not exported
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[METADATA_KEY] = CsvColumn(name=name, order=order)
    return dataclasses.field(metadata=metadata, **kwargs)


def _declared_columns(record_type: type) -> list[ColumnSpec]:
    register = getattr(record_type, "__csv_columns__", None)
    if register is not None:
        return list(register())
    if not dataclasses.is_dataclass(record_type):
        return []
    # Only fields declared on the type itself; inherited ones are not collected.
    own = inspect.get_annotations(record_type)
    specs: list[ColumnSpec] = []
    for f in dataclasses.fields(record_type):
        column = f.metadata.get(METADATA_KEY)
        if column is None or f.name not in own:
            continue
        specs.append(ColumnSpec(attr=f.name, name=column.name, order=column.order))
    return specs


def _to_descriptor(spec: ColumnSpec) -> FieldDescriptor:
    return FieldDescriptor(
        attr=spec.attr,
        output_name=spec.name if spec.name else spec.attr,
        order=spec.order if spec.order is not None else 0,
        accessor=spec.accessor or operator.attrgetter(spec.attr),
    )


@functools.lru_cache(maxsize=None)
def resolve_columns(record_type: type) -> tuple[FieldDescriptor, ...]:
    """Return the exported columns of ``record_type`` in output order.

    Columns are sorted ascending by ``order``; ties keep declaration order.
    Raises SchemaError when the type exports nothing.
    """
    descriptors = [_to_descriptor(spec) for spec in _declared_columns(record_type)]
    if not descriptors:
        raise SchemaError(f"No exportable columns found in class {record_type.__qualname__}")
    descriptors.sort(key=operator.attrgetter("order"))
    logger.debug(
        "Resolved %d columns for %s: %s",
        len(descriptors),
        record_type.__qualname__,
        [d.output_name for d in descriptors],
    )
    return tuple(descriptors)


def header_row(descriptors: Iterable[FieldDescriptor]) -> list[str]:
    """Return the header cells for a resolved column set."""
    return [d.output_name for d in descriptors]
