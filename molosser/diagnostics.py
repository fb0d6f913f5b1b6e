"""Compilation diagnostics and the sink that accumulates them."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel

from .template import NO_SOURCE_POSITION, SourcePosition

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    UnsupportedSyntaxError = "UnsupportedSyntaxError"
    ScriptSyntaxError = "ScriptSyntaxError"


class Diagnostic(BaseModel):
    """One problem found while lowering.

    ``is_fatal`` withholds the output of the node the diagnostic is attached
    to; ``maybe_bug`` marks a probable gap in this compiler rather than a
    known, intentional limitation.
    """

    code: ErrorCode
    reasons: list[str] = []
    maybe_bug: bool = False
    is_fatal: bool = False
    position: SourcePosition = NO_SOURCE_POSITION

    def __str__(self) -> str:
        severity = "error" if self.is_fatal else "warning"
        suffix = " (possible compiler bug)" if self.maybe_bug else ""
        return f"{self.position}: {severity}: {self.code.value}: {'; '.join(self.reasons)}{suffix}"


class DiagnosticSink:
    """Append-only, order-preserving collection of diagnostics."""

    def __init__(self):
        self._diagnostics: list[Diagnostic] = []

    def push(self, diagnostic: Diagnostic) -> None:
        if diagnostic.is_fatal:
            logger.warning("Fatal diagnostic: %s", diagnostic)
        else:
            logger.debug("Diagnostic: %s", diagnostic)
        self._diagnostics.append(diagnostic)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self._diagnostics if d.is_fatal]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self._diagnostics if not d.is_fatal]

    def has_fatal(self) -> bool:
        return any(d.is_fatal for d in self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)
