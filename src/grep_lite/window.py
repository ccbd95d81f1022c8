from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List


@dataclass(frozen=True)
class Line:
    """One input line. ``index`` is 0-based; ``text`` has no terminator."""

    index: int
    text: str


class ContextWindow:
    """Bounded FIFO of lines that are waiting to be classified as context.

    Pushing into a full window evicts the oldest line and hands it back to the
    caller, which treats it as a gap in the output.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = capacity
        self._lines: Deque[Line] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._lines)

    def is_full(self) -> bool:
        return len(self._lines) == self._capacity

    def push(self, line: Line) -> Line | None:
        if self._capacity == 0:
            return line
        evicted = None
        if len(self._lines) == self._capacity:
            evicted = self._lines.popleft()
        self._lines.append(line)
        return evicted

    def drain_all(self) -> List[Line]:
        drained = list(self._lines)
        self._lines.clear()
        return drained
