import posixpath


def normalize_path(path: str) -> str:
    """Normalize a store path to its relative form; the root is ``""``."""
    converted = path.replace("\\", "/")

    # Traversal check: simulate path resolution from root (depth 0)
    parts = converted.split("/")
    depth = 0
    for part in parts:
        if part == "..":
            depth -= 1
            if depth < 0:
                raise ValueError(f"Path traversal attempt detected: '{path}'")
        elif part and part != ".":
            depth += 1

    normalized = posixpath.normpath("/" + converted)
    return normalized.lstrip("/")


def join_path(parent: str, name: str) -> str:
    if not parent:
        return name
    return parent.rstrip("/") + "/" + name
