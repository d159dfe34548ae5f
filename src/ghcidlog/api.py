from __future__ import annotations

import os
from pathlib import Path

from .aggregate import Group, aggregate, parse_grouped
from .outputfile import read_output
from .parser import Entry, parse

__all__ = ["Entry", "Group", "aggregate", "parse", "parse_file", "parse_grouped"]


def parse_file(
    path: str | os.PathLike[str],
    *,
    base_dir: str | os.PathLike[str] | None = None,
) -> list[Group]:
    """Read a ghcid output file and group its diagnostics by source file.

    Relative paths in the output resolve against `base_dir`, which defaults
    to the directory holding the output file.
    """
    p = Path(path).expanduser().resolve()
    text = read_output(p)
    return parse_grouped(base_dir if base_dir is not None else p.parent, text)
