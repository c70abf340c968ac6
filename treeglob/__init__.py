from ._exceptions import PatternSyntaxError, SyntaxRule
from ._memstore import MemoryStore
from ._path import normalize_path
from ._pattern import Pattern, compile, match, match_prefix
from ._store import DirEntry, OSStore, Store
from ._tokens import (
    RECURSIVE_ANY,
    AnyRun,
    AnySingle,
    CharClass,
    ClassRange,
    Literal,
)
from ._walk import glob_fs

__all__ = [
    "compile",
    "match",
    "match_prefix",
    "glob_fs",
    "Pattern",
    "PatternSyntaxError",
    "SyntaxRule",
    "Store",
    "DirEntry",
    "OSStore",
    "MemoryStore",
    "normalize_path",
    "RECURSIVE_ANY",
    "Literal",
    "AnySingle",
    "AnyRun",
    "CharClass",
    "ClassRange",
]
__version__ = "0.1.0"
