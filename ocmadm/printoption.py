"""Output options for listing objects as a tree, a table or YAML."""

from __future__ import annotations

from typing import Any, Callable, Sequence, TextIO

import yaml

from ocmadm.treeprinter import TreePrinter

TreeConverter = Callable[[Any, TreePrinter], TreePrinter]
Table = tuple[Sequence[str], Sequence[Sequence[Any]]]
TableConverter = Callable[[Any], Table]

_FORMATS = ("tree", "table", "yaml")
_COLUMN_GAP = "   "


def _extract_list(obj: Any) -> list:
    if isinstance(obj, dict) and isinstance(obj.get("items"), list):
        return list(obj["items"])
    if isinstance(obj, (list, tuple)):
        return list(obj)
    raise TypeError(f"{type(obj).__name__} is not a list of objects")


def _render_table(table: Table) -> str:
    columns, rows = table
    header = [str(column).upper() for column in columns]
    cells = [header, *([str(cell) for cell in row] for row in rows)]
    widths = [max(len(line[i]) for line in cells if i < len(line)) for i in range(len(header))]
    lines = []
    for line in cells:
        padded = [cell.ljust(width) for cell, width in zip(line, widths)]
        lines.append(_COLUMN_GAP.join(padded).rstrip() + "\n")
    return "".join(lines)


class PrinterOption:
    """Holds the chosen output format and the converters that feed it."""

    def __init__(self, kind: str, format: str = "tree") -> None:
        self.kind = kind
        self.format = format
        self._tree: TreePrinter | None = None
        self._yaml_count = 0
        self._tree_converter: TreeConverter | None = None
        self._table_converter: TableConverter | None = None

    def complete(self) -> None:
        """Prepare the printers for the configured kind."""
        self._tree = TreePrinter(self.kind)
        self._yaml_count = 0

    def validate(self) -> None:
        """Raise ValueError if the format is not tree, table or yaml."""
        if self.format not in _FORMATS:
            raise ValueError("invalid output format")

    def with_tree_converter(self, f: TreeConverter) -> PrinterOption:
        """Set the function that fills the tree from an object."""
        self._tree_converter = f
        return self

    def with_table_converter(self, f: TableConverter) -> PrinterOption:
        """Set the function that turns an object into (columns, rows)."""
        self._table_converter = f
        return self

    def print(self, out: TextIO, obj: Any) -> None:
        """Write obj to out in the configured format."""
        if self._tree is None:
            self.complete()
        if self.format == "tree":
            if self._tree_converter is None:
                raise RuntimeError("no tree converter set")
            self._tree = self._tree_converter(obj, self._tree)
            self._tree.print(out)
        elif self.format == "table":
            if self._table_converter is None:
                raise RuntimeError("no table converter set")
            out.write(_render_table(self._table_converter(obj)))
        elif self.format == "yaml":
            for item in _extract_list(obj):
                self._yaml_count += 1
                if self._yaml_count > 1:
                    out.write("---\n")
                out.write(yaml.safe_dump(item, default_flow_style=False, sort_keys=True))
        else:
            raise ValueError("invalid output format")