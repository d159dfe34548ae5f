from __future__ import annotations

import os
import re
from collections.abc import Sequence

from .blocks import clean_block, dedent, split_blocks, split_lines
from .diagnostic import Diagnostic, Severity
from .logging import get_logger
from .spans import FileLocation, SourcePosition, SourceRange

logger = get_logger(__name__)

Entry = tuple[FileLocation, Diagnostic]

SUCCESS_MARKER = "All good"

# One or two arbitrary characters admit drive letters (`C:`) and similar
# prefixes; the rest of the path stops at the first colon.
_PATH = r"(?P<path>.{1,2}?[^:]*)"

# Tried in order, first match wins: `10:5-9` must not be read as `10:5`.
_HEADER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(_PATH + r":(?P<line>[0-9]+):(?P<col>[0-9]+):"),
    re.compile(_PATH + r":(?P<line>[0-9]+):(?P<col>[0-9]+)-(?P<end_col>[0-9]+):"),
    re.compile(
        _PATH
        + r":\((?P<line>[0-9]+),(?P<col>[0-9]+)\)-\((?P<end_line>[0-9]+),(?P<end_col>[0-9]+)\):"
    ),
)


def match_header(line: str) -> re.Match[str] | None:
    for pattern in _HEADER_PATTERNS:
        m = pattern.match(line)
        if m is not None:
            return m
    return None


_MAX_COORD_DIGITS = 18


def _coord(digits: str) -> int:
    # int() rejects very long digit strings; saturate instead.
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_COORD_DIGITS:
        return 10**_MAX_COORD_DIGITS - 1
    return int(digits)


def _range_of(m: re.Match[str], file: FileLocation) -> SourceRange:
    g = m.groupdict()
    line, col = _coord(g["line"]), _coord(g["col"])
    end_line = _coord(g["end_line"]) if g.get("end_line") else line
    end_col = _coord(g["end_col"]) if g.get("end_col") else col
    return SourceRange(
        file=file,
        start=SourcePosition.from_one_based(line, col),
        # End column stays one-based: the range ends after that character.
        end=SourcePosition(line=max(end_line - 1, 0), column=end_col),
    )


def _split_severity(remainder: str) -> tuple[Severity, str]:
    head, sep, tail = remainder.partition(":")
    if sep and head.lower() == "warning":
        return Severity.WARNING, tail.strip()
    return Severity.ERROR, remainder


def parse_block(base_dir: str | os.PathLike[str], block: Sequence[str]) -> list[Entry]:
    """Turn one cleaned block into zero or one located diagnostics."""
    lines = dedent(block)
    if not lines or lines[0].startswith(SUCCESS_MARKER):
        return []

    header = lines[0]
    m = match_header(header)
    if m is None:
        logger.debug("unlocated block starting with %r", header)
        base = FileLocation(path=os.fspath(base_dir))
        origin = SourcePosition(line=0, column=0)
        diag = Diagnostic(
            range=SourceRange(file=base, start=origin, end=origin),
            severity=Severity.ERROR,
            message="\n".join(lines),
        )
        return [(base, diag)]

    file = FileLocation.resolve(base_dir, m["path"])
    severity, first = _split_severity(header[m.end() :].strip())
    body = ([first] if first else []) + lines[1:]
    diag = Diagnostic(
        range=_range_of(m, file),
        severity=severity,
        message="\n".join(dedent(body)),
    )
    return [(file, diag)]


def parse(base_dir: str | os.PathLike[str], text: str) -> list[Entry]:
    """Parse ghcid output into `(file, diagnostic)` pairs in output order.

    Total over any input string: text that carries no recognisable location
    becomes a diagnostic anchored at `base_dir`.
    """
    blocks = split_blocks(split_lines(text))
    out: list[Entry] = []
    for block in blocks:
        out.extend(parse_block(base_dir, clean_block(block)))
    logger.debug("parsed %d blocks into %d diagnostics", len(blocks), len(out))
    return out
