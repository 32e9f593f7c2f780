from dataclasses import dataclass, field

import pytest

from csvwriter.backend.columns import ColumnSpec, csv_column, header_row, resolve_columns
from csvwriter.backend.errors import ExtractionError, SchemaError
from csvwriter.backend.models import Person, Student


def test_person_columns_sorted_by_order():
    assert header_row(resolve_columns(Person)) == ["First Name", "Last Name", "Day", "Month", "Year"]


def test_order_wins_over_declaration_order():
    @dataclass
    class Name:
        last: str = csv_column(name="Last Name", order=2, default="")
        first: str = csv_column(name="First Name", order=1, default="")

    assert header_row(resolve_columns(Name)) == ["First Name", "Last Name"]


def test_defaults_for_name_and_order():
    @dataclass
    class Row:
        b: int = csv_column(default=0)
        a: int = csv_column(name="", default=0)
        c: int = csv_column(order=-1, default=0)

    descriptors = resolve_columns(Row)
    assert header_row(descriptors) == ["c", "b", "a"]
    assert [d.order for d in descriptors] == [-1, 0, 0]


def test_unmarked_fields_are_excluded():
    @dataclass
    class Row:
        shown: str = csv_column(default="")
        hidden: str = ""
        also_hidden: list[str] = field(default_factory=list)

    assert header_row(resolve_columns(Row)) == ["shown"]


def test_inherited_fields_not_collected():
    @dataclass
    class Base:
        inherited: int = csv_column(order=1, default=0)

    @dataclass
    class Child(Base):
        own: int = csv_column(order=2, default=0)

    assert header_row(resolve_columns(Child)) == ["own"]


def test_no_exportable_fields_raises_schema_error():
    @dataclass
    class Plain:
        value: int = 0

    with pytest.raises(SchemaError, match="Plain"):
        resolve_columns(Plain)

    class NotADataclass:
        pass

    with pytest.raises(SchemaError):
        resolve_columns(NotADataclass)


def test_explicit_registration_takes_precedence():
    class Point:
        def __init__(self, x, y):
            self.x = x
            self.y = y

        @classmethod
        def __csv_columns__(cls):
            return [
                ColumnSpec("y", name="Y", order=2),
                ColumnSpec("x", order=1),
                ColumnSpec("sum", name="Sum", order=3, accessor=lambda p: p.x + p.y),
            ]

    descriptors = resolve_columns(Point)
    assert header_row(descriptors) == ["x", "Y", "Sum"]
    assert [d.extract(Point(1, 2)) for d in descriptors] == [1, 2, 3]


def test_resolution_is_cached_per_type():
    assert resolve_columns(Student) is resolve_columns(Student)


def test_extract_failure_raises_extraction_error():
    student = Student("Alice", ["95"])
    del student.score
    scores = resolve_columns(Student)[1]
    with pytest.raises(ExtractionError) as info:
        scores.extract(student)
    assert info.value.attr == "score"
    assert info.value.record_type is Student
    assert isinstance(info.value.__cause__, AttributeError)
