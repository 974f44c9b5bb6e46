"""A trie keyed by dotted paths."""

from __future__ import annotations

from typing import Any, Callable, Iterator

Segmenter = Callable[[str, int], "tuple[str, int]"]


def default_segmenter(path: str, start: int) -> tuple[str, int]:
    """Split off the segment of path beginning at start.

    Segments after the first keep their leading dot. Returns the segment
    and the index of the next one, or -1 when there is none.
    """
    if not path or start < 0 or start > len(path) - 1:
        return "", -1
    end = path.find(".", start + 1)
    if end == -1:
        return path[start:], -1
    return path[start:end], end


class Trie:
    """A node of a trie whose keys are split by a segmenter."""

    def __init__(self, segmenter: Segmenter = default_segmenter) -> None:
        self.segmenter = segmenter
        self.value: Any = None
        self.children: dict[str, Trie] = {}

    def _segments(self, key: str) -> Iterator[str]:
        part, i = self.segmenter(key, 0)
        while part != "":
            yield part
            part, i = self.segmenter(key, i)

    def get(self, key: str) -> Any:
        """Return the value stored under key, or None."""
        node = self
        for part in self._segments(key):
            node = node.children.get(part)
            if node is None:
                return None
        return node.value

    def put(self, key: str, value: Any) -> bool:
        """Store value under key; return True if the key had no value before."""
        node = self
        for part in self._segments(key):
            child = node.children.get(part)
            if child is None:
                child = Trie(self.segmenter)
                node.children[part] = child
            node = child
        is_new = node.value is None
        node.value = value
        return is_new

    def _walk(self, key: str) -> Iterator[tuple[str, Any]]:
        if self.value is not None:
            yield key, self.value
        for part, child in self.children.items():
            yield from child._walk(key + part)

    def iter(self, it: Callable[[str, Any], None]) -> None:
        """Call it(key, value) for every stored value; an exception stops the walk."""
        for key, value in self._walk(""):
            it(key, value)

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return not self.children