"""Parametric benchmark sweep: adversarial wildcard counts and tree sizes."""
from __future__ import annotations

import fnmatch
import gc
import time
from typing import Callable

from treeglob import MemoryStore, compile, glob_fs


def _measure(fn: Callable[[], None], repeat: int = 5) -> float:
    """Run fn *repeat* times, return the best elapsed time in ms."""
    best = float("inf")
    for _ in range(repeat):
        gc.collect()
        t0 = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - t0)
    return best * 1000


def _fmt(v: float) -> str:
    return f"{v:.2f}"


# ---------------------------------------------------------------------------
#  Backtracking (vary wildcard count)
# ---------------------------------------------------------------------------

def _segment_treeglob(stars: int, length: int) -> None:
    pat = compile("a*" * stars + "b")
    assert not pat.match("a" * length)


def _segment_fnmatch(stars: int, length: int) -> None:
    assert not fnmatch.fnmatchcase("a" * length, "a*" * stars + "b")


def _recursive_treeglob(stars: int, depth: int) -> None:
    pat = compile("**/a/" * stars + "b")
    assert not pat.match("/".join(["a"] * depth))


# ---------------------------------------------------------------------------
#  Walk (vary tree size)
# ---------------------------------------------------------------------------

def _build_tree(dirs: int, files: int) -> MemoryStore:
    store = MemoryStore()
    for d in range(dirs):
        for f in range(files):
            store.write_file(f"pkg{d:03d}/sub/mod{f:03d}.py", parents=True)
        store.write_file(f"pkg{d:03d}/sub/mod_test.py")
    return store


def run_sweep() -> str:
    lines: list[str] = []

    lines.append("## 1. Single-segment backtracking")
    lines.append("")
    lines.append("| Stars | treeglob ms | fnmatch ms |")
    lines.append("|---:|---:|---:|")
    for stars in (2, 4, 8, 12):
        print(f"  segment {stars} ...", end=" ", flush=True)
        t1 = _measure(lambda: _segment_treeglob(stars, 100))
        t2 = _measure(lambda: _segment_fnmatch(stars, 100))
        lines.append(f"| {stars} | {_fmt(t1)} | {_fmt(t2)} |")
        print(f"done ({t1:.0f}ms)")
    lines.append("")

    lines.append("## 2. Recursive segment backtracking")
    lines.append("")
    lines.append("| Recursive segments | Depth 50 ms |")
    lines.append("|---:|---:|")
    for stars in (2, 8, 32):
        t1 = _measure(lambda: _recursive_treeglob(stars, 50))
        lines.append(f"| {stars} | {_fmt(t1)} |")
    lines.append("")

    lines.append("## 3. Walk with and without pruning")
    lines.append("")
    lines.append("| Dirs | `**/*_test.py` ms | `pkg000/**` ms |")
    lines.append("|---:|---:|---:|")
    for dirs in (10, 100, 300):
        store = _build_tree(dirs, 20)
        t1 = _measure(lambda: glob_fs("**/*_test.py", store))
        t2 = _measure(lambda: glob_fs("pkg000/**", store))
        lines.append(f"| {dirs} | {_fmt(t1)} | {_fmt(t2)} |")
    lines.append("")
    return "\n".join(lines)


if __name__ == "__main__":
    print("=== Parametric Benchmark Sweep ===\n")
    result = run_sweep()
    print("\n" + result)
