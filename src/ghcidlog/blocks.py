"""Splitting raw ghcid output into per-message blocks."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

Block = list[str]

# Text before the first `|` of a citation line such as ` 12 | foo bar`.
_NUMBER_RE = re.compile(r"\s*(?:[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)?\s*")

_CONTEXT_MARKER = "In the"
_CITATION_RE = re.compile(r"\s*[0-9]+\s*\|")
_DIVIDER_RE = re.compile(r"\s*\|\s*")

_INDENT_RE = re.compile(r"\s*")


def split_lines(text: str) -> list[str]:
    # Drop \r first so CRLF output leaves no stray characters behind.
    return [line for line in text.replace("\r", "").split("\n") if line != ""]


def is_continuation(line: str) -> bool:
    """Message bodies are indented, or framed as `<n> | <source>`."""
    if line[:1].isspace():
        return True
    sep = line.find("|")
    if sep == -1:
        return False
    return _NUMBER_RE.fullmatch(line[:sep]) is not None


def split_blocks(lines: Iterable[str]) -> list[Block]:
    blocks: list[Block] = []
    current: Block = []
    for line in lines:
        if is_continuation(line):
            current.append(line)
            continue
        if current:
            blocks.append(current)
        current = [line]
    if current:
        blocks.append(current)
    return blocks


def _is_noise(line: str) -> bool:
    return (
        _CONTEXT_MARKER in line
        or _CITATION_RE.match(line) is not None
        or _DIVIDER_RE.fullmatch(line) is not None
    )


def clean_block(block: Sequence[str]) -> Block:
    """Cut the block at the first source citation or context line.

    The first line is never cut, so a header mentioning "In the" still
    produces a diagnostic.
    """
    out: Block = list(block[:1])
    for line in block[1:]:
        if _is_noise(line):
            break
        out.append(line)
    return out


def dedent(lines: Sequence[str]) -> Block:
    indents = [_INDENT_RE.match(line).end() for line in lines if line != ""]
    indentation = min(indents, default=0)
    return [line[indentation:] for line in lines]
