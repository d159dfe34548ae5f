from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

from .diagnostic import Diagnostic
from .parser import parse
from .spans import FileLocation

Group = tuple[FileLocation, list[Diagnostic]]


def aggregate(entries: Iterable[tuple[FileLocation, Sequence[Diagnostic]]]) -> list[Group]:
    """Group diagnostics by file, keeping the order files were first seen.

    Later entries for an already seen file are appended to its group; the
    group keeps the position of its first occurrence.
    """
    index: dict[str, int] = {}
    groups: list[Group] = []
    for location, diagnostics in entries:
        i = index.get(location.key)
        if i is None:
            index[location.key] = len(groups)
            groups.append((location, list(diagnostics)))
        else:
            groups[i][1].extend(diagnostics)
    return groups


def parse_grouped(base_dir: str | os.PathLike[str], text: str) -> list[Group]:
    return aggregate((location, [diag]) for location, diag in parse(base_dir, text))
