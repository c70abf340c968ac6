from __future__ import annotations

import os
from collections.abc import Iterable
from typing import NamedTuple, Protocol

from ._path import normalize_path


class DirEntry(NamedTuple):
    name: str
    is_dir: bool


class Store(Protocol):
    """Hierarchical store the walker reads from.

    Paths are ``/``-separated and relative to the store root, which is ``""``.
    Errors raised by ``scandir`` are propagated to the caller unchanged.
    """

    def scandir(self, path: str) -> Iterable[DirEntry]: ...


class OSStore:
    """A :class:`Store` backed by a directory on the local filesystem.

    Symbolic links are reported as non-directories and never descended into.
    """

    def __init__(self, base: str | os.PathLike[str]) -> None:
        self._base = os.fspath(base)

    @property
    def base(self) -> str:
        return self._base

    def _os_path(self, path: str) -> str:
        npath = normalize_path(path)
        if not npath:
            return self._base
        return os.path.join(self._base, *npath.split("/"))

    def scandir(self, path: str = "") -> list[DirEntry]:
        with os.scandir(self._os_path(path)) as it:
            entries = [DirEntry(e.name, e.is_dir(follow_symlinks=False)) for e in it]
        entries.sort()
        return entries
