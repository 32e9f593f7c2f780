from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from .backend.config import get_log_level, get_output_dir, load_from_env
from .backend.errors import CsvWriterError
from .backend.exporters.csv import CsvWriter
from .backend.models import Months, Person, Student
from .backend.utils import delete_file_if_exists, ensure_parent_dir

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

logger = logging.getLogger("csvwriter")

DEMO_FILES = ("people.csv", "students.csv", "special_cases.csv")


def sample_people() -> list[Person]:
    return [
        Person("Ivan", "Ivanov", 15, Months.MARCH, 1990),
        Person("Maria", "Smirnova", 23, Months.JULY, 1985),
        Person("Petr", "Petrov", 8, Months.DECEMBER, 1992),
    ]


def sample_students() -> list[Student]:
    return [
        Student("Alice Ivanova", ["95", "88", "92", "90"]),
        Student("Boris Sidorov", ["78", "85", "80", "82"]),
        Student("Vera Kuznetsova", ["92", "94", "89", "96"]),
    ]


def sample_special_cases() -> list[Person]:
    """People whose names need quoting or carry punctuation."""
    return [
        Person("David", "O'Leary", 2, Months.MAY, 1958),
        Person("Gabriel", "Garcia-Marquez", 6, Months.MARCH, 1927),
        Person("John", "Smith, Jr.", 4, Months.JULY, 1970),
        Person('John "Johnny"', "Doe", 1, Months.JANUARY, None),
    ]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Write the sample people and student records to CSV files."
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Directory for the demo files (default: CSV_WRITER_OUTPUT_DIR or the current directory)",
    )
    return parser.parse_args(argv)


def run_demo(output_dir: str, writer: CsvWriter) -> list[str]:
    """Write the three demo files into ``output_dir`` and return their paths."""
    paths = [os.path.join(output_dir, name) for name in DEMO_FILES]
    for path in paths:
        delete_file_if_exists(path)
    ensure_parent_dir(paths[0])

    people_path, students_path, special_path = paths
    writer.write_to_file(sample_people(), people_path)
    writer.write_to_file(sample_students(), students_path)
    writer.write_to_file(sample_special_cases(), special_path)
    return paths


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
    args = parse_args(argv)
    output_dir = args.output_dir or get_output_dir()

    try:
        writer = CsvWriter(load_from_env())
        paths = run_demo(output_dir, writer)
    except CsvWriterError as exc:
        logger.error("Demo export failed: %s", exc)
        return 1
    logger.info("All examples written: %s", ", ".join(paths))
    return 0


if __name__ == "__main__":
    sys.exit(main())
