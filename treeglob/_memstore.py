from __future__ import annotations

import threading

from ._path import normalize_path
from ._store import DirEntry

# ---------------------------------------------------------------------------
#  Directory Index Layer
# ---------------------------------------------------------------------------


class DirNode:
    __slots__ = ("children",)

    def __init__(self) -> None:
        self.children: dict[str, Node] = {}


class FileNode:
    __slots__ = ("data",)

    def __init__(self, data: bytes = b"") -> None:
        self.data: bytes = data


Node = DirNode | FileNode


# ---------------------------------------------------------------------------
#  MemoryStore
# ---------------------------------------------------------------------------


class MemoryStore:
    """In-memory hierarchical store implementing the walker's ``Store`` protocol.

    Paths are relative, ``/``-separated and normalized with
    :func:`normalize_path`; ``""`` (or ``"/"``) is the root directory.
    """

    def __init__(self) -> None:
        self._global_lock = threading.RLock()
        self._root = DirNode()

    # -- path helpers --

    def _resolve_path(self, npath: str) -> Node | None:
        current: Node = self._root
        for part in filter(None, npath.split("/")):
            if not isinstance(current, DirNode):
                return None
            child = current.children.get(part)
            if child is None:
                return None
            current = child
        return current

    def _makedirs(self, npath: str) -> DirNode:
        current = self._root
        for part in filter(None, npath.split("/")):
            child = current.children.get(part)
            if child is None:
                child = current.children[part] = DirNode()
            elif not isinstance(child, DirNode):
                raise FileExistsError(f"A file exists at path component: '{part}'")
            current = child
        return current

    def _parent_dir(self, npath: str, parents: bool) -> tuple[DirNode, str]:
        parent_path, _, name = npath.rpartition("/")
        if parents:
            return self._makedirs(parent_path), name
        parent = self._resolve_path(parent_path)
        if not isinstance(parent, DirNode):
            raise FileNotFoundError(f"Parent directory does not exist: '{parent_path}'")
        return parent, name

    # -- public API --

    def mkdir(self, path: str, exist_ok: bool = False, parents: bool = False) -> None:
        npath = normalize_path(path)
        with self._global_lock:
            node = self._resolve_path(npath)
            if node is not None:
                if isinstance(node, DirNode):
                    if not exist_ok:
                        raise FileExistsError(f"Directory exists: '{path}'")
                    return
                raise FileExistsError(f"File exists at path: '{path}'")
            parent, name = self._parent_dir(npath, parents)
            parent.children[name] = DirNode()

    def write_file(self, path: str, data: bytes = b"", parents: bool = False) -> None:
        """Create or overwrite the file at *path* with *data*."""
        npath = normalize_path(path)
        if not npath:
            raise IsADirectoryError(f"Is a directory: '{path}'")
        with self._global_lock:
            node = self._resolve_path(npath)
            if isinstance(node, DirNode):
                raise IsADirectoryError(f"Is a directory: '{path}'")
            if isinstance(node, FileNode):
                node.data = bytes(data)
                return
            parent, name = self._parent_dir(npath, parents)
            parent.children[name] = FileNode(bytes(data))

    def scandir(self, path: str = "") -> list[DirEntry]:
        with self._global_lock:
            node = self._resolve_path(normalize_path(path))
            if node is None:
                raise FileNotFoundError(f"No such directory: '{path}'")
            if not isinstance(node, DirNode):
                raise NotADirectoryError(f"Not a directory: '{path}'")
            return [
                DirEntry(name, isinstance(child, DirNode))
                for name, child in sorted(node.children.items())
            ]

    def is_dir(self, path: str) -> bool:
        try:
            npath = normalize_path(path)
        except ValueError:
            return False
        with self._global_lock:
            return isinstance(self._resolve_path(npath), DirNode)

    def is_file(self, path: str) -> bool:
        try:
            npath = normalize_path(path)
        except ValueError:
            return False
        with self._global_lock:
            return isinstance(self._resolve_path(npath), FileNode)
