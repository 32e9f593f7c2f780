"""Writer interface shared by file exporters."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Writable(Protocol):
    """Something that writes a list of records to a file."""

    def write_to_file(self, records: Sequence[Any], destination: str | os.PathLike[str]) -> None:
        """Write ``records`` to ``destination``, creating or overwriting it."""
        ...
