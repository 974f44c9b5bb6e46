"""Preflight checks run before changing a cluster."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, TextIO


class Checker(ABC):
    """Validates that the cluster is in a state the command can work with."""

    @abstractmethod
    def check(self) -> tuple[list[str], list[Exception]]:
        """Return the warnings and the errors found."""

    @abstractmethod
    def name(self) -> str:
        """Return the name shown in reports."""


class PreflightError(Exception):
    """Raised when one or more preflight checks report errors."""

    preflight = True

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return f"[preflight] Some fatal errors occurred:\n{self.msg}"


def _check_result(name: str, warnings: list, errors: list) -> str:
    flag = "Failed" if errors else "Passed"
    return (
        f"Preflight check: {name} {flag} with {len(warnings)} warnings "
        f"and {len(errors)} errors\n"
    )


def run_checks(checks: Iterable[Checker], out: TextIO) -> None:
    """Run every check, report to out, and raise PreflightError on any error."""
    error_lines: list[str] = []
    for check in checks:
        name = check.name()
        warnings, errors = check.check()
        warnings = list(warnings or [])
        errors = list(errors or [])
        for warning in warnings:
            out.write(f"\t[WARNING {name}]: {warning}\n")
        error_lines.extend(f"\t[ERROR {name}]: {error}\n" for error in errors)
        out.write(_check_result(name, warnings, errors))
    if error_lines:
        raise PreflightError("".join(error_lines))