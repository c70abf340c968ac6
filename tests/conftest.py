import pytest
from treeglob import MemoryStore
from tests.helpers.stores import GO_MODULE_FILES

pytest_plugins = ["treeglob._pytest_plugin"]


@pytest.fixture
def go_store() -> MemoryStore:
    """A small Go module layout (files written in non-sorted order)."""
    store = MemoryStore()
    for path in GO_MODULE_FILES:
        store.write_file(path, b"", parents=True)
    return store
