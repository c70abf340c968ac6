from __future__ import annotations

import logging

from ._path import join_path
from ._pattern import Pattern, compile
from ._store import Store

logger = logging.getLogger(__name__)


def glob_fs(pattern: Pattern | str, store: Store, root: str = "") -> list[str]:
    """Return the paths of all non-directory entries below *root* matching *pattern*.

    Entries are visited depth-first, in ascending name order at every level,
    so the result needs no further sorting.  Paths are reported (and matched)
    as ``root/.../name``; with the default empty root they are relative to
    the store root.  Subtrees for which :meth:`Pattern.match_prefix` is False
    are never listed.

    The first error raised by the store propagates unchanged and no partial
    result is returned.
    """
    if isinstance(pattern, str):
        pattern = compile(pattern)
    root = root.rstrip("/")
    logger.debug("glob %r from root %r", pattern.source, root)
    results: list[str] = []
    if root and not pattern.match_prefix(root):
        logger.debug("pruned %r", root)
        return results

    # pending entries, next one to visit on top
    stack = _children(store, root)
    while stack:
        path, is_dir = stack.pop()
        if is_dir:
            if not pattern.match_prefix(path):
                logger.debug("pruned %r", path)
                continue
            stack.extend(_children(store, path))
        elif pattern.match(path):
            results.append(path)
    return results


def _children(store: Store, dir_path: str) -> list[tuple[str, bool]]:
    """List *dir_path* as ``(path, is_dir)`` pairs in descending name order."""
    entries = sorted(store.scandir(dir_path), key=lambda e: e.name, reverse=True)
    return [(join_path(dir_path, e.name), e.is_dir) for e in entries]
