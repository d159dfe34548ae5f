from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """A zero-based line/column position.

    ghcid reports one-based coordinates; they are converted once, when a
    header is parsed.
    """

    line: int
    column: int

    @classmethod
    def from_one_based(cls, line: int, column: int) -> "SourcePosition":
        return cls(line=max(line - 1, 0), column=max(column - 1, 0))


@dataclass(frozen=True, slots=True)
class FileLocation:
    """Absolute path of the file a diagnostic points at."""

    path: str

    @classmethod
    def resolve(cls, base_dir: str | os.PathLike[str], raw: str) -> "FileLocation":
        if os.path.isabs(raw):
            return cls(path=raw)
        return cls(path=os.path.normpath(os.path.join(os.fspath(base_dir), raw)))

    @property
    def key(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class SourceRange:
    """Range inside a single file.

    `end` may equal or even precede `start`; the end column keeps the raw
    one-based value so that it points just past the reported character.
    """

    file: FileLocation
    start: SourcePosition
    end: SourcePosition

    def format(self) -> str:
        return f"{self.file.path}:{self.start.line + 1}:{self.start.column + 1}"
