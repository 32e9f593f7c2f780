from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def delete_file_if_exists(path: str | os.PathLike[str]) -> bool:
    """Delete ``path`` if it exists. Returns True when a file was removed."""
    if not os.path.isfile(path):
        return False
    os.remove(path)
    logger.info("Removed existing file: %s", os.fspath(path))
    return True


def ensure_parent_dir(path: str | os.PathLike[str]) -> None:
    """Create the directory that will hold ``path`` if it is missing."""
    folder = os.path.dirname(os.fspath(path))
    if folder:
        os.makedirs(folder, exist_ok=True)
