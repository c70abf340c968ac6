"""Segment-wise matching of compiled patterns against paths.

Both levels use the same bounded backtracking: a wildcard (``AnyRun`` inside
a segment, ``RECURSIVE_ANY`` across segments) records a restart point, and on
a mismatch the wildcard absorbs one more element and matching resumes after
it.  Only the most recent wildcard needs to be remembered, so the search is
iterative and never exponential.
"""
from __future__ import annotations

from collections.abc import Sequence

from ._tokens import (
    RECURSIVE_ANY,
    SEPARATOR,
    AnyRun,
    AnySingle,
    CharClass,
    Literal,
    Segment,
    Token,
)


def split_path(path: str) -> list[str]:
    return path.split(SEPARATOR)


def split_prefix(path: str) -> list[str]:
    """Split a partial path; one trailing separator is ignored, ``""`` is the root."""
    if path.endswith(SEPARATOR):
        path = path[:-1]
    if not path:
        return []
    return path.split(SEPARATOR)


def _match_char(token: Token, char: str) -> bool:
    if isinstance(token, Literal):
        return token.char == char
    if isinstance(token, AnySingle):
        return char != SEPARATOR
    if isinstance(token, CharClass):
        return token.matches(char)
    return False


def match_segment(tokens: Sequence[Token], name: str) -> bool:
    """Match one path segment against the tokens of one pattern segment."""
    ti = ni = 0
    star_ti = -1
    star_ni = 0
    while ni < len(name):
        if ti < len(tokens):
            token = tokens[ti]
            if isinstance(token, AnyRun):
                star_ti, star_ni = ti, ni
                ti += 1
                continue
            if _match_char(token, name[ni]):
                ti += 1
                ni += 1
                continue
        if star_ti < 0 or name[star_ni] == SEPARATOR:
            return False
        # let the last AnyRun swallow one more code point
        star_ni += 1
        ni = star_ni
        ti = star_ti + 1
    while ti < len(tokens) and isinstance(tokens[ti], AnyRun):
        ti += 1
    return ti == len(tokens)


def match_segments(segments: Sequence[Segment], parts: Sequence[str]) -> bool:
    """Full match of pattern segments against path segments."""
    si = pi = 0
    star_si = -1
    star_pi = 0
    while pi < len(parts):
        if si < len(segments):
            segment = segments[si]
            if segment is RECURSIVE_ANY:
                star_si, star_pi = si, pi
                si += 1
                continue
            if match_segment(segment, parts[pi]):  # type: ignore[arg-type]
                si += 1
                pi += 1
                continue
        if star_si < 0:
            return False
        star_pi += 1
        pi = star_pi
        si = star_si + 1
    while si < len(segments) and segments[si] is RECURSIVE_ANY:
        si += 1
    return si == len(segments)


def match_prefix_segments(segments: Sequence[Segment], parts: Sequence[str]) -> bool:
    """Whether some path starting with *parts* could fully match *segments*."""
    for si, part in enumerate(parts):
        if si >= len(segments):
            return False
        segment = segments[si]
        if segment is RECURSIVE_ANY:
            # ** absorbs the rest of the prefix and leaves the tail open
            return True
        if not match_segment(segment, part):  # type: ignore[arg-type]
            return False
    return True
