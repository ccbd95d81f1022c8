from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List

from .emitter import GroupEmitter, Record
from .matcher import Matcher
from .window import ContextWindow, Line

logger = logging.getLogger(__name__)


class EngineState(str, Enum):
    IDLE = "idle"
    TRAILING = "trailing"


@dataclass(frozen=True)
class EngineStats:
    lines_read: int = 0
    lines_emitted: int = 0
    matches: int = 0
    groups: int = 0
    separators: int = 0
    evicted: int = 0


class ContextEngine:
    """Single forward pass that prints matches with up to ``context_size``
    lines of context on each side.

    At most ``context_size`` lines are buffered at any time. Before a match
    the window holds leading-context candidates; right after a match it holds
    trailing context, which is flushed once it is full so that the next line
    can start the following group's leading context.
    """

    def __init__(self, matcher: Matcher, context_size: int = 0) -> None:
        if isinstance(context_size, bool) or not isinstance(context_size, int):
            raise ValueError("context_size must be an int")
        if context_size < 0:
            raise ValueError("context_size must be >= 0")
        self.matcher = matcher
        self.context_size = context_size
        self.state = EngineState.IDLE
        self._window = ContextWindow(context_size)
        self._emitter = GroupEmitter(separators=context_size > 0)
        self._finished = False
        self._lines_read = 0
        self._lines_emitted = 0
        self._matches = 0
        self._evicted = 0

    @property
    def buffered(self) -> int:
        """Number of lines currently held back as context candidates."""
        return len(self._window)

    @property
    def stats(self) -> EngineStats:
        return EngineStats(
            lines_read=self._lines_read,
            lines_emitted=self._lines_emitted,
            matches=self._matches,
            groups=self._emitter.groups,
            separators=self._emitter.separators_emitted,
            evicted=self._evicted,
        )

    def feed(self, line: Line) -> List[Record]:
        if self._finished:
            raise RuntimeError("engine already finished")
        self._lines_read += 1

        if self.matcher.test(line.text):
            self._matches += 1
            records = self._emitter.open_group(self._window.drain_all(), line)
            self.state = EngineState.TRAILING
            return self._count(records)

        records: List[Record] = []
        if self.state is EngineState.TRAILING and self._window.is_full():
            records.extend(self._window.drain_all())
            self.state = EngineState.IDLE
        self._push(line)
        return self._count(records)

    def finish(self) -> List[Record]:
        if self._finished:
            return []
        self._finished = True
        records: List[Record] = []
        if self.state is EngineState.TRAILING:
            records.extend(self._window.drain_all())
            self.state = EngineState.IDLE
        records = self._count(records)
        logger.debug("search finished: %s", self.stats)
        return records

    def run(self, lines: Iterable[Line]) -> Iterator[Record]:
        for line in lines:
            yield from self.feed(line)
        yield from self.finish()

    def _push(self, line: Line) -> None:
        if self._window.push(line) is not None:
            self._evicted += 1
            self._emitter.mark_gap()

    def _count(self, records: List[Record]) -> List[Record]:
        self._lines_emitted += sum(1 for record in records if isinstance(record, Line))
        return records


def search(texts: Iterable[str], matcher: Matcher, context_size: int = 0) -> Iterator[Record]:
    """Run a fresh engine over plain strings numbered from 0."""
    engine = ContextEngine(matcher, context_size)
    lines = (Line(index, text) for index, text in enumerate(texts))
    return engine.run(lines)
