"""
Diagnostic channel for processing rounds.

Notes and errors are recorded for the caller and mirrored to the
``builder_gen`` logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger("builder_gen")


class DiagnosticKind(str, Enum):
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"


_LOG_LEVELS = {
    DiagnosticKind.NOTE: logging.INFO,
    DiagnosticKind.WARNING: logging.WARNING,
    DiagnosticKind.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    element: str | None = None

    def __str__(self) -> str:
        if self.element:
            return f"{self.kind.value}: {self.element}: {self.message}"
        return f"{self.kind.value}: {self.message}"


class Diagnostics:
    """Collects diagnostics reported during a round."""

    def __init__(self, log: logging.Logger | None = None):
        self.messages: list[Diagnostic] = []
        self._log = log or logger

    def report(self, kind: DiagnosticKind, message: str, element: str | None = None) -> Diagnostic:
        diagnostic = Diagnostic(kind, message, element)
        self.messages.append(diagnostic)
        self._log.log(_LOG_LEVELS[kind], "%s", diagnostic)
        return diagnostic

    def note(self, message: str, element: str | None = None) -> Diagnostic:
        return self.report(DiagnosticKind.NOTE, message, element)

    def warning(self, message: str, element: str | None = None) -> Diagnostic:
        return self.report(DiagnosticKind.WARNING, message, element)

    def error(self, message: str, element: str | None = None) -> Diagnostic:
        return self.report(DiagnosticKind.ERROR, message, element)

    @property
    def notes(self) -> list[Diagnostic]:
        return [d for d in self.messages if d.kind is DiagnosticKind.NOTE]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.messages if d.kind is DiagnosticKind.ERROR]

    @property
    def has_errors(self) -> bool:
        return any(d.kind is DiagnosticKind.ERROR for d in self.messages)

    def clear(self) -> None:
        self.messages.clear()
