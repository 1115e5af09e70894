"""Diagnostic model: structured messages for recoverable conversion problems."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


_LOG_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
}


@dataclass(frozen=True)
class Diagnostic:
    """A single finding recorded while compiling or mapping a document.

    Attributes:
        rule: Identifier of the condition, e.g. ``unsupported_color``.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        location: Selector or element the finding refers to, if any.
    """

    rule: str
    severity: Severity
    message: str
    location: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def to_dict(self) -> dict[str, str | None]:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
            "location": self.location,
        }

    def __str__(self) -> str:
        location = f" [{self.location}]" if self.location else ""
        return f"{self.severity.value}{location}: {self.message}"


class DiagnosticLog:
    """Ordered collector of diagnostics for one conversion.

    Every recorded diagnostic is also written to the module logger at the
    level matching its severity.
    """

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def report(
        self,
        rule: str,
        severity: Severity,
        message: str,
        location: str | None = None,
    ) -> Diagnostic:
        diagnostic = Diagnostic(rule=rule, severity=severity, message=message, location=location)
        self._items.append(diagnostic)
        logger.log(_LOG_LEVELS[severity], "%s", diagnostic)
        return diagnostic

    def warning(self, rule: str, message: str, location: str | None = None) -> Diagnostic:
        return self.report(rule, Severity.WARNING, message, location)

    def info(self, rule: str, message: str, location: str | None = None) -> Diagnostic:
        return self.report(rule, Severity.INFO, message, location)

    def by_rule(self, rule: str) -> list[Diagnostic]:
        return [d for d in self._items if d.rule == rule]

    @property
    def items(self) -> list[Diagnostic]:
        return list(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
