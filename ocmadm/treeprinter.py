"""Render dotted key/value fields as a text tree."""

from __future__ import annotations

from typing import Any, Mapping, TextIO

from ocmadm.trie import Trie, default_segmenter

_NEW_LINE = "\n"
_EMPTY_SPACE = "    "
_MIDDLE_ITEM = "├── "
_CONTINUE_ITEM = "│   "
_LAST_ITEM = "└── "

_Node = tuple[str, list]


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _build(part: str, node: Trie) -> _Node:
    if node.value is None:
        node.value = ""
    text = f"<{part}> {_format_value(node.value)}"
    children = [
        _build(key.removeprefix("."), child) for key, child in node.children.items()
    ]
    return text, children


def _render_text(text: str, spaces: list[bool], last: bool) -> str:
    prefix = "".join(_EMPTY_SPACE if space else _CONTINUE_ITEM for space in spaces)
    first, *rest = text.split("\n")
    out = prefix + (_LAST_ITEM if last else _MIDDLE_ITEM) + first + _NEW_LINE
    indicator = _EMPTY_SPACE if last else _CONTINUE_ITEM
    return out + "".join(prefix + indicator + line + _NEW_LINE for line in rest)


def _render_items(items: list[_Node], spaces: list[bool]) -> str:
    out = []
    for position, (text, children) in enumerate(items):
        last = position == len(items) - 1
        out.append(_render_text(text, spaces, last))
        if children:
            out.append(_render_items(children, [*spaces, last]))
    return "".join(out)


class TreePrinter:
    """Collects fields of named objects and prints them as a tree."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.tree = Trie(default_segmenter)

    def add_fields(self, name: str, fields: Mapping[str, Any] | None) -> None:
        """Add the fields of one object; keys are dotted paths like ".a.b"."""
        if fields is None:
            return
        self.tree.put(name, "")
        for key, value in fields.items():
            self.tree.put(name + key, value)

    def render(self) -> str:
        """Return the tree as text."""
        text, children = _build(self.name, self.tree)
        return text + _NEW_LINE + _render_items(children, [])

    def print(self, out: TextIO) -> None:
        """Write the tree to out."""
        out.write(self.render())