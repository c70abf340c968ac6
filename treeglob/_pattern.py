"""Pattern compiler.

Grammar, per ``/``-delimited segment:

``?``
    one code point other than the separator
``*``
    zero or more code points other than the separator
``**``
    only as a whole segment: zero or more complete path segments
``[abc]``, ``[a-z]``, ``[^...]``
    character class; members are code points (optionally escaped) and
    ``low-high`` ranges.  A literal ``-`` must be escaped.
``\\c``
    the code point ``c`` taken literally
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._exceptions import PatternSyntaxError, SyntaxRule
from ._match import (
    match_prefix_segments,
    match_segments,
    split_path,
    split_prefix,
)
from ._tokens import (
    RECURSIVE_ANY,
    SEPARATOR,
    AnyRun,
    AnySingle,
    CharClass,
    ClassRange,
    Literal,
    Segment,
    Token,
)

if TYPE_CHECKING:
    from ._store import Store

_RECURSIVE = "**"


@dataclass(frozen=True)
class Pattern:
    """A compiled glob pattern.  Immutable; safe to share between threads."""

    source: str
    segments: tuple[Segment, ...] = field(repr=False)

    def match(self, path: str) -> bool:
        """Return True if *path* as a whole matches the pattern."""
        return match_segments(self.segments, split_path(path))

    def match_prefix(self, path: str) -> bool:
        """Return True if some path below (or equal to) *path* could match.

        A single trailing separator on *path* is ignored and ``""`` denotes
        the root, for which the answer is always True.  A False result means
        the subtree rooted at *path* can be skipped entirely.
        """
        return match_prefix_segments(self.segments, split_prefix(path))

    def glob(self, store: Store, root: str = "") -> list[str]:
        from ._walk import glob_fs

        return glob_fs(self, store, root)

    def __str__(self) -> str:
        return self.source


def compile(pattern: str) -> Pattern:
    """Compile *pattern*, raising :class:`PatternSyntaxError` if it is malformed."""
    segments: list[Segment] = []
    offset = 0
    for raw in pattern.split(SEPARATOR):
        segments.append(_compile_segment(pattern, raw, offset))
        offset += len(raw) + 1
    return Pattern(pattern, tuple(segments))


def match(pattern: Pattern | str, path: str) -> bool:
    if isinstance(pattern, str):
        pattern = compile(pattern)
    return pattern.match(path)


def match_prefix(pattern: Pattern | str, path: str) -> bool:
    if isinstance(pattern, str):
        pattern = compile(pattern)
    return pattern.match_prefix(path)


# ---------------------------------------------------------------------------
#  Segment parsing
# ---------------------------------------------------------------------------


def _compile_segment(pattern: str, raw: str, offset: int) -> Segment:
    if not raw:
        raise PatternSyntaxError(SyntaxRule.EMPTY_SEGMENT, pattern, offset)
    if raw == _RECURSIVE:
        return RECURSIVE_ANY

    tokens: list[Token] = []
    i = 0
    n = len(raw)
    while i < n:
        ch = raw[i]
        if ch == "\\":
            if i + 1 >= n:
                raise PatternSyntaxError(SyntaxRule.DANGLING_ESCAPE, pattern, offset + i)
            tokens.append(Literal(raw[i + 1]))
            i += 2
        elif ch == "*":
            if raw.startswith(_RECURSIVE, i):
                raise PatternSyntaxError(SyntaxRule.RECURSIVE_MIXED, pattern, offset + i)
            if tokens and isinstance(tokens[-1], AnySingle):
                raise PatternSyntaxError(SyntaxRule.ADJACENT_WILDCARDS, pattern, offset + i)
            tokens.append(AnyRun())
            i += 1
        elif ch == "?":
            if tokens and isinstance(tokens[-1], AnyRun):
                raise PatternSyntaxError(SyntaxRule.ADJACENT_WILDCARDS, pattern, offset + i)
            tokens.append(AnySingle())
            i += 1
        elif ch == "[":
            cls, i = _parse_class(pattern, raw, i, offset)
            tokens.append(cls)
        else:
            tokens.append(Literal(ch))
            i += 1
    return tuple(tokens)


def _parse_class(pattern: str, raw: str, start: int, offset: int) -> tuple[CharClass, int]:
    """Parse the class opening at ``raw[start]``; return it and the index after ``]``."""
    n = len(raw)
    i = start + 1
    negate = False
    if i < n and raw[i] == "^":
        negate = True
        i += 1

    members: list[ClassRange] = []
    while True:
        if i >= n:
            raise PatternSyntaxError(SyntaxRule.UNTERMINATED_CLASS, pattern, offset + start)
        ch = raw[i]
        if ch == "]":
            if not members:
                raise PatternSyntaxError(SyntaxRule.EMPTY_CLASS, pattern, offset + i)
            return CharClass(negate, tuple(members)), i + 1
        if ch == "-":
            raise PatternSyntaxError(SyntaxRule.MISPLACED_DASH, pattern, offset + i)
        low, i = _class_char(pattern, raw, i, offset)
        high = low
        if i < n and raw[i] == "-":
            i += 1
            if i >= n:
                raise PatternSyntaxError(SyntaxRule.UNTERMINATED_CLASS, pattern, offset + start)
            if raw[i] in "]-":
                raise PatternSyntaxError(SyntaxRule.MISPLACED_DASH, pattern, offset + i - 1)
            high_pos = i
            high, i = _class_char(pattern, raw, i, offset)
            if low > high:
                raise PatternSyntaxError(SyntaxRule.BAD_RANGE, pattern, offset + high_pos)
        members.append(ClassRange(low, high))


def _class_char(pattern: str, raw: str, i: int, offset: int) -> tuple[str, int]:
    if raw[i] == "\\":
        if i + 1 >= len(raw):
            raise PatternSyntaxError(SyntaxRule.DANGLING_ESCAPE, pattern, offset + i)
        return raw[i + 1], i + 2
    return raw[i], i + 1
