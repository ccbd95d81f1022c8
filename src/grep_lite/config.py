from __future__ import annotations

from dataclasses import dataclass

from .matcher import Matcher, build_matcher

MAX_CONTEXT = 255
STDIN_PATH = "-"


@dataclass(frozen=True)
class SearchConfig:
    """Options for a single search run."""

    pattern: str
    path: str = STDIN_PATH
    regex: bool = False
    context: int | None = None
    line_numbers: bool = False

    def __post_init__(self) -> None:
        if self.context is not None and not 0 <= self.context <= MAX_CONTEXT:
            raise ValueError(f"context must be between 0 and {MAX_CONTEXT}")

    @property
    def context_size(self) -> int:
        return self.context or 0

    def build_matcher(self) -> Matcher:
        return build_matcher(self.pattern, regex=self.regex)
