"""Diagnostic event reporting for ADT processing.

Every warning or informational condition raised while handling a message is
recorded as a ``Diagnostic`` and written to the log, so callers (and tests)
can inspect what happened without capturing log output.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import StrEnum

logger = logging.getLogger(__name__)


class DiagnosticKind(StrEnum):
    """Conditions reported during ADT processing."""

    IGNORED = "ignored"
    MISSING_COMPONENT = "missing_component"
    OUT_OF_SCOPE = "out_of_scope"
    MISSING_LOCATION = "missing_location"
    LOCATION_NOT_FOUND = "location_not_found"
    STORE_ERROR = "store_error"
    STATUS_UPDATED = "status_updated"


_WARNING_KINDS: frozenset[DiagnosticKind] = frozenset(
    {
        DiagnosticKind.MISSING_COMPONENT,
        DiagnosticKind.MISSING_LOCATION,
        DiagnosticKind.LOCATION_NOT_FOUND,
        DiagnosticKind.STORE_ERROR,
    }
)


@dataclass(frozen=True)
class Diagnostic:
    """A single reported condition."""

    kind: DiagnosticKind
    message: str
    location_name: str | None = None
    timestamp: float = field(default_factory=time.time)

    @property
    def is_warning(self) -> bool:
        return self.kind in _WARNING_KINDS


class EventReporter:
    """Collects diagnostics and logs each one at a level matching its kind."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self._diagnostics if d.is_warning]

    def report(
        self,
        kind: DiagnosticKind,
        message: str,
        location_name: str | None = None,
    ) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, message=message, location_name=location_name)
        self._diagnostics.append(diagnostic)
        level = logging.WARNING if diagnostic.is_warning else logging.INFO
        logger.log(level, "[%s] %s", kind.value, message)
        return diagnostic

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self._diagnostics if d.kind == kind]

    def clear(self) -> None:
        self._diagnostics.clear()


__all__ = ["DiagnosticKind", "Diagnostic", "EventReporter"]
