"""Search settings and the command-line parser that produces them."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

_VERSION = "0.1.0"


@dataclass(frozen=True)
class SearchConfig:
    """What to search, where, and how."""

    path: str
    pattern: str
    search_content: bool = False
    use_regex: bool = False
    max_threads: int = 4
    benchmark: bool = False


def _thread_count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid thread count: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError("thread count must be at least 1")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="filehunt",
        description="Search a directory tree by file name or file content.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("path", help="directory to search")
    parser.add_argument("pattern", help="pattern to look for (name or content)")
    parser.add_argument("-c", "--content", action="store_true", help="search inside file contents")
    parser.add_argument("-r", "--regex", action="store_true", help="treat the pattern as a regular expression")
    parser.add_argument("-t", "--threads", type=_thread_count, default=4, help="number of threads to use")
    parser.add_argument("-b", "--benchmark", action="store_true", help="show performance details")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> SearchConfig:
    """Parse command-line arguments into a :class:`SearchConfig`."""
    args = build_parser().parse_args(argv)
    return SearchConfig(
        path=args.path,
        pattern=args.pattern,
        search_content=args.content,
        use_regex=args.regex,
        max_threads=args.threads,
        benchmark=args.benchmark,
    )