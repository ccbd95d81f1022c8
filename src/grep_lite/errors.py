from __future__ import annotations


class GrepLiteError(ValueError):
    """Base class for errors raised while setting up or running a search."""


class PatternError(GrepLiteError):
    """Raised when a regular expression pattern does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid regex {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class InputError(GrepLiteError):
    """Raised when the input cannot be opened, read or decoded."""

    def __init__(self, path: str, reason: str, *, line_number: int | None = None) -> None:
        location = path if line_number is None else f"{path}:{line_number}"
        super().__init__(f"{location}: {reason}")
        self.path = path
        self.reason = reason
        self.line_number = line_number
