from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class OutputFileError(Exception):
    path: str
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.path}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base
