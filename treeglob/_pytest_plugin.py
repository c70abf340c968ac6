"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["treeglob._pytest_plugin"]

This makes the ``memory_store`` fixture automatically available::

    def test_something(memory_store):
        memory_store.write_file("src/a.py", parents=True)
        assert treeglob.glob_fs("**/*.py", memory_store) == ["src/a.py"]
"""

import pytest

from ._memstore import MemoryStore


@pytest.fixture
def memory_store() -> MemoryStore:
    """An empty :class:`MemoryStore` fixture.

    Provides an independent instance per test (function scope).
    """
    return MemoryStore()
