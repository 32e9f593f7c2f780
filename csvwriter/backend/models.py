"""Sample record types used by the demo CLI and tests."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .columns import csv_column


class Months(enum.Enum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


@dataclass
class Person:
    """A person with a date of birth split into day, month and year."""

    first_name: str | None = csv_column(name="First Name", order=1, default=None)
    last_name: str | None = csv_column(name="Last Name", order=2, default=None)
    day_of_birth: int | None = csv_column(name="Day", order=3, default=None)
    month_of_birth: Months | None = csv_column(name="Month", order=4, default=None)
    year_of_birth: int | None = csv_column(name="Year", order=5, default=None)


@dataclass
class Student:
    """A student and their scores; scores are written as one ``;``-joined cell."""

    name: str | None = csv_column(name="Student Name", order=1, default=None)
    score: list[str] = csv_column(name="Scores", order=2, default_factory=list)
