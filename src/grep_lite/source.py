from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from .config import STDIN_PATH
from .errors import InputError
from .window import Line

STDIN_NAME = "(standard input)"


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def _iter_lines(stream: BinaryIO, name: str, encoding: str) -> Iterator[Line]:
    index = 0
    while True:
        try:
            raw = stream.readline()
        except OSError as exc:
            raise InputError(name, exc.strerror or str(exc), line_number=index + 1) from exc
        if not raw:
            return
        try:
            text = _strip_terminator(raw).decode(encoding)
        except UnicodeDecodeError as exc:
            raise InputError(name, f"invalid {encoding}: {exc.reason}", line_number=index + 1) from exc
        yield Line(index, text)
        index += 1


@contextmanager
def open_lines(path: str = STDIN_PATH, *, encoding: str = "utf-8") -> Iterator[Iterator[Line]]:
    """Yield the lines of ``path``, or of standard input when ``path`` is ``-``.

    Lines are decoded one at a time, so a decode error names the line it
    happened on. Files are closed on exit, including when the caller stops
    early or an error propagates. Standard input is left open.
    """
    if path == STDIN_PATH:
        yield _iter_lines(sys.stdin.buffer, STDIN_NAME, encoding)
        return
    try:
        stream = open(path, "rb")
    except OSError as exc:
        raise InputError(path, exc.strerror or str(exc)) from exc
    try:
        yield _iter_lines(stream, path, encoding)
    finally:
        stream.close()
