"""CSV rendering and row reading for timelog files.

Timelog values never contain commas or quotes, so rows are read with a plain
comma split rather than the csv module's quoting rules.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Iterator, Sequence


def render_csv(rows: Iterable[dict[str, object]], fieldnames: Sequence[str]) -> str:
    """Render an iterable of dict rows to a CSV string with given headers.

    - Unknown keys are ignored to keep output stable.
    - Lines end with a bare newline so files diff cleanly.
    """
    buf = io.StringIO()
    writer = csv.DictWriter(
        buf, fieldnames=list(fieldnames), extrasaction="ignore", lineterminator="\n"
    )
    writer.writeheader()
    for row in rows:
        writer.writerow(row or {})
    return buf.getvalue()


def iter_rows(text: str) -> Iterator[tuple[int, list[str]]]:
    """Yield (line_number, fields) for each non-blank line of `text`.

    Each physical line is split on every comma; quotes have no special
    meaning, so a quoted or multi-line field shows up as a bad field count
    or a bad value on the line where it starts. Line numbers are 1-based and
    count the header line.
    """
    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        yield line_number, line.split(",")
