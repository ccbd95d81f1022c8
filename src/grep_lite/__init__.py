"""Streaming line search with merged context windows."""

__version__ = "0.1.0"

from .config import MAX_CONTEXT, SearchConfig
from .emitter import SEPARATOR, GroupEmitter, Record, Separator
from .engine import ContextEngine, EngineState, EngineStats, search
from .errors import GrepLiteError, InputError, PatternError
from .matcher import LiteralMatcher, Matcher, RegexMatcher, build_matcher
from .render import render_record, write_records
from .source import open_lines
from .window import ContextWindow, Line

__all__ = [
    "MAX_CONTEXT",
    "SEPARATOR",
    "ContextEngine",
    "ContextWindow",
    "EngineState",
    "EngineStats",
    "GrepLiteError",
    "GroupEmitter",
    "InputError",
    "Line",
    "LiteralMatcher",
    "Matcher",
    "PatternError",
    "Record",
    "RegexMatcher",
    "SearchConfig",
    "Separator",
    "build_matcher",
    "open_lines",
    "render_record",
    "search",
    "write_records",
]
