"""Indented JSON output."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from typing import Any, TextIO

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class HubInfo:
    """Token and API server address used to join a hub."""

    hub_token: str = field(default="", metadata={"json": "hub-token"})
    hub_apiserver: str = field(default="", metadata={"json": "hub-apiserver"})


def _prepare(val: Any) -> Any:
    if dataclasses.is_dataclass(val) and not isinstance(val, type):
        return {
            f.metadata.get("json", f.name): _prepare(getattr(val, f.name))
            for f in dataclasses.fields(val)
        }
    if isinstance(val, dict):
        return {
            str(key): _prepare(val[key]) for key in sorted(val, key=str)
        }
    if isinstance(val, (list, tuple)):
        return [_prepare(item) for item in val]
    return val


def write_json_output(out: TextIO, val: Any) -> None:
    """Write val to out as JSON indented by two spaces, followed by a newline."""
    text = json.dumps(_prepare(val), indent=2, ensure_ascii=False)
    for char, escaped in _ESCAPES.items():
        text = text.replace(char, escaped)
    out.write(text)
    out.write("\n")