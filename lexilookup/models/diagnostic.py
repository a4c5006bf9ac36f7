"""Data models for external checker diagnostics."""

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    """Category token emitted by the checker, mapped to a severity."""

    GRAMMAR = "grammaire"
    SPELLING = "orthographe"

    @property
    def severity(self) -> str:
        return "warning" if self is DiagnosticKind.GRAMMAR else "info"


@dataclass(frozen=True)
class Diagnostic:
    """A single checker finding."""

    kind: DiagnosticKind
    line: int  # 1-based
    column: int  # 1-based
    message: str

    @property
    def severity(self) -> str:
        return self.kind.severity

    def as_tuple(self) -> tuple[str, int, int, str]:
        """Return the (severity, line, column, message) tuple."""
        return (self.severity, self.line, self.column, self.message)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: [{self.severity}] {self.message}"
