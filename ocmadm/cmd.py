"""Helpers for command headers and dry-run notices."""

from __future__ import annotations

import sys

_HEADERS = {
    "oc": "oc cm",
    "kubectl": "kubectl cm",
}


def get_example_header() -> str:
    """Return the command name to show in usage examples."""
    arg0 = sys.argv[0] if sys.argv else ""
    return _HEADERS.get(arg0, arg0)


def dry_run_message(dry_run: bool) -> None:
    """Print a notice when running in dry-run mode."""
    if dry_run:
        print(f"{get_example_header()} is running in dry-run mode")