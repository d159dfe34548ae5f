from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import SourceRange


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    range: SourceRange
    severity: Severity
    message: str

    def format(self) -> str:
        return f"{self.range.format()}: {self.severity.value}: {self.message}"
