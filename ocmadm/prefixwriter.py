"""Indented writing, terminal spinners and status summaries for spinners."""

from __future__ import annotations

import itertools
import os
import sys
import threading
from typing import Any, Callable, Mapping, Sequence, TextIO

LEVEL_0 = 0
LEVEL_1 = 1
LEVEL_2 = 2
LEVEL_3 = 3
LEVEL_4 = 4

_LEVEL_SPACE = "  "

_GREEN = "\x1b[32m"
_BOLD_GREEN = "\x1b[1;32m"
_RESET = "\x1b[0m"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_ERASE_LINE = "\r\x1b[K"

CHARSET_14 = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")


def _color_enabled() -> bool:
    if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _suffix_color(text: str) -> str:
    return f"{_BOLD_GREEN}{text}{_RESET}" if _color_enabled() else text


class PrefixWriter:
    """Writes text at indentation levels of two spaces each."""

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def write(self, level: int, fmt: str, *args: Any) -> None:
        """Write fmt % args indented by level."""
        text = fmt % args if args else fmt
        self.out.write(_LEVEL_SPACE * level + text)

    def write_line(self, *args: Any) -> None:
        """Write args separated by spaces, with no indentation, and a newline."""
        print(*args, file=self.out)

    def flush(self) -> None:
        """Flush the underlying stream if it can be flushed."""
        flush = getattr(self.out, "flush", None)
        if callable(flush):
            flush()


class Spinner:
    """An animated progress indicator drawn on a terminal line."""

    def __init__(
        self,
        chars: Sequence[str] = CHARSET_14,
        interval: float = 0.1,
        suffix: str = "",
        final_msg: str = "",
        pre_update: Callable[[Spinner], None] | None = None,
        writer: TextIO | None = None,
        hide_cursor: bool = True,
        terminal: bool | None = None,
    ) -> None:
        self.chars = tuple(chars)
        self.interval = interval
        self.suffix = suffix
        self.final_msg = final_msg
        self.pre_update = pre_update
        self.writer = writer
        self.hide_cursor = hide_cursor
        self.terminal = terminal
        self.active = False
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def _out(self) -> TextIO:
        return self.writer if self.writer is not None else sys.stdout

    def _in_terminal(self) -> bool:
        if self.terminal is not None:
            return self.terminal
        isatty = getattr(self._out, "isatty", None)
        return bool(isatty and isatty())

    def _run(self) -> None:
        for char in itertools.cycle(self.chars):
            with self._lock:
                if self.pre_update is not None:
                    self.pre_update(self)
                self._out.write(f"{_ERASE_LINE}{_GREEN}{char}{_RESET}{self.suffix}")
                self._out.flush()
            if self._stop_event.wait(self.interval):
                return

    def start(self) -> None:
        """Begin drawing; does nothing when already running or not on a terminal."""
        if self.active or not self._in_terminal():
            return
        self.active = True
        self._stop_event = threading.Event()
        if self.hide_cursor:
            self._out.write(_HIDE_CURSOR)
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop drawing, clear the line and write the final message."""
        if not self.active:
            return
        self.active = False
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        with self._lock:
            if self.hide_cursor:
                self._out.write(_SHOW_CURSOR)
            self._out.write(_ERASE_LINE)
            if self.final_msg:
                self._out.write(self.final_msg)
            self._out.flush()

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()


def new_spinner(suffix: str, interval: float) -> Spinner:
    """Return a green spinner showing suffix, ticking every interval seconds."""
    return Spinner(CHARSET_14, interval, suffix=_suffix_color(f" {suffix}"))


def new_spinner_with_status(
    suffix: str, interval: float, final: str, status_func: Callable[[], str]
) -> Spinner:
    """Return a spinner whose text carries the status reported by status_func."""
    spinner = new_spinner(suffix, interval)
    spinner.final_msg = final

    def pre_update(s: Spinner) -> None:
        status = status_func()
        if status:
            s.suffix = _suffix_color(f" {suffix} ({status})")
        else:
            s.suffix = _suffix_color(f" {suffix}")

    spinner.pre_update = pre_update
    return spinner


def get_spinner_pod_status(pod: Mapping[str, Any]) -> str:
    """Return the pod phase, or the reason a container is waiting."""
    status = pod.get("status") or {}
    reason = status.get("phase", "")
    for container in status.get("containerStatuses") or []:
        waiting = (container.get("state") or {}).get("waiting")
        if waiting is not None:
            reason = waiting.get("reason", "")
    return reason


def _find_condition(conditions: Sequence[Mapping[str, Any]], cond_type: str):
    return next((c for c in conditions if c.get("type") == cond_type), None)


def get_spinner_klusterlet_status(klusterlet: Mapping[str, Any]) -> str:
    """Return the reason of the most telling condition of a klusterlet."""
    conditions = (klusterlet.get("status") or {}).get("conditions") or []
    for cond_type in (
        "RegistrationDesiredDegraded",
        "WorkDesiredDegraded",
        "Available",
        "Applied",
    ):
        cond = _find_condition(conditions, cond_type)
        if cond is not None:
            return cond.get("reason", "")
    return ""