from __future__ import annotations

import re
from typing import Protocol

from .errors import PatternError


class Matcher(Protocol):
    pattern: str

    def test(self, line: str) -> bool: ...


class LiteralMatcher:
    """Case-sensitive substring test. The empty pattern matches every line."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern

    def test(self, line: str) -> bool:
        return self.pattern in line

    def __repr__(self) -> str:
        return f"LiteralMatcher({self.pattern!r})"


class RegexMatcher:
    """Unanchored regular expression search over a single line."""

    def __init__(self, pattern: str) -> None:
        try:
            self._compiled = re.compile(pattern)
        except re.error as exc:
            raise PatternError(pattern, str(exc)) from exc
        self.pattern = pattern

    def test(self, line: str) -> bool:
        return self._compiled.search(line) is not None

    def __repr__(self) -> str:
        return f"RegexMatcher({self.pattern!r})"


def build_matcher(pattern: str, *, regex: bool = False) -> Matcher:
    if regex:
        return RegexMatcher(pattern)
    return LiteralMatcher(pattern)
