"""Pattern matchers used to test file names and scan file contents."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

LineMatch = tuple[int, str, tuple[int, int]]


def _lines(text: str) -> list[str]:
    """Split text into lines on ``\\n``, dropping one trailing ``\\r`` per line.

    A final newline does not produce an extra empty line.
    """
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class Matcher(ABC):
    """Something that can test text against a pattern."""

    @abstractmethod
    def matches(self, content: str) -> bool:
        """Return True if the pattern occurs anywhere in ``content``."""

    @abstractmethod
    def find_matches(self, content: str) -> list[LineMatch]:
        """Return ``(line_number, line, (start, end))`` for every hit, lines numbered from 1."""


class SimpleMatcher(Matcher):
    """Case-insensitive substring matcher; reports the first hit on each line."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern.lower()

    def matches(self, content: str) -> bool:
        return self.pattern in content.lower()

    def find_matches(self, content: str) -> list[LineMatch]:
        found: list[LineMatch] = []
        for number, line in enumerate(_lines(content), start=1):
            pos = line.lower().find(self.pattern)
            if pos >= 0:
                found.append((number, line, (pos, pos + len(self.pattern))))
        return found

    def __repr__(self) -> str:
        return f"SimpleMatcher({self.pattern!r})"


class RegexMatcher(Matcher):
    """Regular-expression matcher; reports every non-overlapping hit on each line."""

    def __init__(self, pattern: str) -> None:
        try:
            self.regex = re.compile(pattern)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {pattern!r}: {exc}") from exc

    def matches(self, content: str) -> bool:
        return self.regex.search(content) is not None

    def find_matches(self, content: str) -> list[LineMatch]:
        return [
            (number, line, hit.span())
            for number, line in enumerate(_lines(content), start=1)
            for hit in self.regex.finditer(line)
        ]

    def __repr__(self) -> str:
        return f"RegexMatcher({self.regex.pattern!r})"


def create_matcher(pattern: str, use_regex: bool) -> Matcher:
    """Build a regex matcher or a plain substring matcher for ``pattern``."""
    return RegexMatcher(pattern) if use_regex else SimpleMatcher(pattern)