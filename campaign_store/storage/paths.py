"""Dotted-path addressing into nested documents.

resolve_path() returns the container holding the last segment plus the key
inside it, not the value, so callers can read, delete, or filter in place.

    parent, key = resolve_path(sheet, "misc.wealth.gold")
    # parent is sheet["misc"]["wealth"], key == "gold"

List containers are addressed by integer segments ("equipment.0").
"""

from typing import Any

from campaign_store.errors import InvalidPath


def _step(container: Any, segment: str) -> tuple[bool, Any]:
    """Descend one level. Returns (found, child)."""
    if isinstance(container, dict):
        if segment in container:
            return True, container[segment]
        return False, None
    if isinstance(container, list) and segment.isdigit():
        index = int(segment)
        if index < len(container):
            return True, container[index]
    return False, None


def resolve_path(root: Any, dotted: str) -> tuple[dict | list, str | int]:
    """Resolve `dotted` against `root` into a (parent, key) handle.

    Raises InvalidPath if an intermediate segment is missing or None, or if
    the final parent cannot hold keys. Intermediate mappings are never created.
    """
    if not isinstance(dotted, str) or not dotted:
        raise InvalidPath("Path must be a non-empty string")
    segments = dotted.split(".")
    if any(not s for s in segments):
        raise InvalidPath(f"Path '{dotted}' has an empty segment")

    current = root
    for depth, segment in enumerate(segments[:-1]):
        found, current = _step(current, segment)
        if not found or current is None:
            walked = ".".join(segments[: depth + 1])
            raise InvalidPath(f"Path '{dotted}' not found at '{walked}'")

    last = segments[-1]
    if isinstance(current, dict):
        return current, last
    if isinstance(current, list):
        if not last.isdigit():
            raise InvalidPath(f"Path '{dotted}' indexes a list with '{last}'")
        return current, int(last)
    raise InvalidPath(f"Path '{dotted}' does not point into an object or list")


def has_key(parent: dict | list, key: str | int) -> bool:
    """True if `key` is present on a handle returned by resolve_path()."""
    if isinstance(parent, list):
        return isinstance(key, int) and 0 <= key < len(parent)
    return key in parent
