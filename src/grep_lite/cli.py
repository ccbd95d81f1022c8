from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import IO, List, Optional

from . import __version__
from .config import MAX_CONTEXT, SearchConfig
from .engine import ContextEngine
from .errors import GrepLiteError
from .render import write_records
from .source import open_lines

logger = logging.getLogger(__name__)

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def _context_value(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid NUM: {value!r}") from None
    if not 0 <= number <= MAX_CONTEXT:
        raise argparse.ArgumentTypeError(f"NUM must be between 0 and {MAX_CONTEXT}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grep-lite",
        description="Print lines matching a pattern, with optional context.",
    )
    parser.add_argument("pattern", help="PATTERN to search for")
    parser.add_argument("file_path", help="Path to the input file (use '-' for stdin)")
    parser.add_argument(
        "-c",
        "--context",
        type=_context_value,
        default=None,
        metavar="NUM",
        help="Print NUM lines of output context",
    )
    parser.add_argument(
        "-l",
        "--line-number",
        action="store_true",
        help="Print line number with output lines",
    )
    parser.add_argument(
        "-r",
        "--regex",
        action="store_true",
        help="PATTERN is a regular expression",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging() -> None:
    level = os.getenv("GREP_LITE_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def run(config: SearchConfig, stdout: IO[str]) -> int:
    """Search with ``config`` and write the results to ``stdout``.

    Returns the process exit code. Errors propagate to the caller.
    """
    matcher = config.build_matcher()
    engine = ContextEngine(matcher, config.context_size)
    with open_lines(config.path) as lines:
        written = write_records(engine.run(lines), stdout, config.line_numbers)
    logger.debug("wrote %d records", written)
    return EXIT_MATCH if engine.stats.matches else EXIT_NO_MATCH


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging()
    config = SearchConfig(
        pattern=args.pattern,
        path=args.file_path,
        regex=args.regex,
        context=args.context,
        line_numbers=args.line_number,
    )
    logger.debug("running with %s", config)
    try:
        return run(config, sys.stdout)
    except GrepLiteError as exc:
        logger.debug("search aborted", exc_info=True)
        print(f"grep-lite: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except BrokenPipeError:
        # Keep the interpreter from complaining when it flushes stdout at exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
        return EXIT_MATCH


if __name__ == "__main__":
    sys.exit(main())
