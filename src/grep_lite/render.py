from __future__ import annotations

from typing import IO, Iterable

from .emitter import Record, Separator

SEPARATOR_TEXT = "---"


def render_record(record: Record, line_numbers: bool = False) -> str:
    if isinstance(record, Separator):
        return SEPARATOR_TEXT
    if line_numbers:
        return f"{record.index + 1}:{record.text}"
    return record.text


def write_records(records: Iterable[Record], stream: IO[str], line_numbers: bool = False) -> int:
    """Write one record per line and return how many were written.

    The stream is flushed once on the way out, including when reading the
    records raises, so output produced before an input error is kept.
    """
    written = 0
    try:
        for record in records:
            stream.write(render_record(record, line_numbers) + "\n")
            written += 1
    finally:
        stream.flush()
    return written
