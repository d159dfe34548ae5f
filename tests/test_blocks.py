from __future__ import annotations

import pytest

from ghcidlog.blocks import clean_block, dedent, is_continuation, split_blocks, split_lines


def test_split_lines_strips_carriage_returns_and_empty_lines() -> None:
    assert split_lines("a\r\n\r\nb\rc\n\n") == ["a", "bc"]


@pytest.mark.parametrize(
    "line",
    [
        "    at call site",
        "\tindented with a tab",
        "12 | foo bar",
        "  | ^^^",
        "|",
        "3|x",
    ],
)
def test_continuation_lines(line: str) -> None:
    assert is_continuation(line)


@pytest.mark.parametrize(
    "line",
    [
        "src/Foo.hs:10:5: error:",
        "All good (1 module)",
        "a | b",
        "x12 | y",
        "٣ | x",
        "Loading",
    ],
)
def test_header_lines(line: str) -> None:
    assert not is_continuation(line)


def test_split_blocks_groups_continuations_with_header() -> None:
    lines = ["h1", "    body", "12 | code", "h2", "h3", "  tail"]
    assert split_blocks(lines) == [["h1", "    body", "12 | code"], ["h2"], ["h3", "  tail"]]


def test_split_blocks_keeps_leading_continuations() -> None:
    assert split_blocks(["  stray", "h1"]) == [["  stray"], ["h1"]]


def test_split_blocks_empty() -> None:
    assert split_blocks([]) == []


def test_clean_block_truncates_at_divider() -> None:
    block = ["a/B.hs:1:1: error", "  |", "  | actual code", "In the expression:"]
    assert clean_block(block) == ["a/B.hs:1:1: error"]


@pytest.mark.parametrize(
    "noise",
    [
        "    • In the expression: foo",
        "  12 | foo bar",
        "3 | x",
        "   |",
    ],
)
def test_clean_block_stops_at_noise(noise: str) -> None:
    block = ["h", "    kept", noise, "    dropped"]
    assert clean_block(block) == ["h", "    kept"]


def test_clean_block_ignores_non_ascii_digit_citation() -> None:
    block = ["h", "  ٣ | x", "    kept"]
    assert clean_block(block) == block


def test_clean_block_keeps_header() -> None:
    assert clean_block(["In the beginning", "  body"]) == ["In the beginning", "  body"]


def test_dedent_uses_minimum_indent_of_non_empty_lines() -> None:
    assert dedent(["    a", "", "      b"]) == ["a", "", "  b"]


def test_dedent_edge_cases() -> None:
    assert dedent([]) == []
    assert dedent(["", ""]) == ["", ""]
    assert dedent(["  only"]) == ["only"]
