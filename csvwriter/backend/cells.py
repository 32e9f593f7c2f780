"""Value classification and CSV cell rendering.

Raw field values are first classified into a closed set of cell kinds, then
turned into text, then escaped:

    render_cell(raw) == escape(text_of(classify(raw)))
"""

from __future__ import annotations

import enum
import numbers
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from typing import Any, Union

from typing_extensions import assert_never

SEQUENCE_SEPARATOR = ";"

_SPECIAL_CHARS = (",", '"', "\r", "\n")


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Number:
    value: numbers.Number


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class EnumConstant:
    member: enum.Enum


@dataclass(frozen=True)
class TextSequence:
    items: tuple[str, ...]


CellValue = Union[Absent, Text, Number, Boolean, EnumConstant, TextSequence]

ABSENT = Absent()


def _is_collection(raw: Any) -> bool:
    # str and bytes are collections too, but render as scalars.
    return isinstance(raw, Collection) and not isinstance(raw, (str, bytes, bytearray, Mapping))


def classify(raw: Any) -> CellValue:
    """Classify a raw field value.

    Enum members are checked before str/int so StrEnum and IntEnum members
    render by name, and bool before Number since bool is an int.
    """
    if raw is None:
        return ABSENT
    if isinstance(raw, enum.Enum):
        return EnumConstant(raw)
    if isinstance(raw, bool):
        return Boolean(raw)
    if isinstance(raw, numbers.Number):
        return Number(raw)
    if isinstance(raw, str):
        return Text(raw)
    if _is_collection(raw):
        return TextSequence(tuple(text_of(classify(item)) for item in raw))
    return Text(str(raw))


def text_of(cell: CellValue) -> str:
    """Return the unescaped text of a classified value."""
    if isinstance(cell, Absent):
        return ""
    if isinstance(cell, Text):
        return cell.value
    if isinstance(cell, Number):
        return str(cell.value)
    if isinstance(cell, Boolean):
        return "true" if cell.value else "false"
    if isinstance(cell, EnumConstant):
        return cell.member.name
    if isinstance(cell, TextSequence):
        return SEQUENCE_SEPARATOR.join(cell.items)
    assert_never(cell)


def needs_quoting(text: str) -> bool:
    return any(ch in text for ch in _SPECIAL_CHARS)


def escape(text: str) -> str:
    """Quote ``text`` only when it contains a comma, quote or line break.

    Embedded double quotes are doubled.
    """
    if needs_quoting(text):
        return '"' + text.replace('"', '""') + '"'
    return text


def unescape(cell: str) -> str:
    """Recover the original text from a single escaped cell."""
    if len(cell) >= 2 and cell.startswith('"') and cell.endswith('"'):
        return cell[1:-1].replace('""', '"')
    return cell


def render_cell(raw: Any) -> str:
    """Render a raw field value as one CSV cell."""
    return escape(text_of(classify(raw)))
