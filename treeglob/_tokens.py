"""Compiled representation of a glob pattern.

A pattern compiles to a tuple of segments, one per ``/``-delimited piece of
the source string.  A segment is either :data:`RECURSIVE_ANY` (the source
segment was exactly ``**``) or a tuple of tokens matched against a single
path segment.
"""
from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "/"


@dataclass(frozen=True, slots=True)
class Literal:
    char: str


@dataclass(frozen=True, slots=True)
class AnySingle:
    pass


@dataclass(frozen=True, slots=True)
class AnyRun:
    pass


@dataclass(frozen=True, slots=True)
class ClassRange:
    """Inclusive code point range; a single member has ``low == high``."""

    low: str
    high: str

    def __contains__(self, char: str) -> bool:
        return self.low <= char <= self.high


@dataclass(frozen=True, slots=True)
class CharClass:
    negate: bool
    members: tuple[ClassRange, ...]

    def matches(self, char: str) -> bool:
        if char == SEPARATOR:
            return False
        found = any(char in member for member in self.members)
        return found != self.negate


class _RecursiveAny:
    __slots__ = ()

    def __repr__(self) -> str:
        return "RECURSIVE_ANY"

    def __reduce__(self) -> str:
        return "RECURSIVE_ANY"


RECURSIVE_ANY = _RecursiveAny()

Token = Literal | AnySingle | AnyRun | CharClass
Segment = tuple[Token, ...] | _RecursiveAny
