"""Whole-file reads and writes for timelog CSVs."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def read_text(path: str) -> str | None:
    """Return the file contents, or None when the file does not exist."""
    if not os.path.isfile(path):
        logger.warning("Cannot find file %s, starting an empty timelog.", path)
        return None
    with open(path, encoding="utf-8") as f:
        return f.read()


def write_text(path: str, text: str) -> None:
    """Write `text` to `path`, creating parent folders as needed."""
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    logger.info("Wrote %s", path)
