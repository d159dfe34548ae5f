from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from ghcidlog import Severity, parse, parse_grouped


_FRAGMENTS = [
    "src/Foo.hs:10:5: error:",
    "src/Foo.hs:1:2-3: warning: [-Wunused-matches]",
    "/abs/Bar.hs:(3,1)-(5,9):",
    "C:\\x\\A.hs:0:0: Warning:",
    "All good (3 modules, at 10:00:00)",
    "    • Variable not in scope: x",
    "    • In the expression: y",
    "  |",
    "12 | foo bar",
    "  | ^^^",
    "|",
    ":",
    "::::",
    "a:(1,2)-(3,",
    "\t",
    "",
    "\r",
]


def _non_empty_lines(text: str) -> int:
    return sum(1 for line in text.replace("\r", "").split("\n") if line != "")


ghcid_like = st.lists(
    st.one_of(st.sampled_from(_FRAGMENTS), st.text(max_size=30)),
    max_size=25,
).map("\n".join)


@given(st.one_of(st.text(), ghcid_like))
@settings(max_examples=400, suppress_health_check=[HealthCheck.too_slow])
def test_parse_is_total_and_bounded(text: str) -> None:
    out = parse("/base", text)
    assert len(out) <= _non_empty_lines(text)
    for location, diag in out:
        assert location == diag.range.file
        assert diag.severity in (Severity.ERROR, Severity.WARNING)
        assert diag.range.start.line >= 0 and diag.range.start.column >= 0
        assert diag.range.end.line >= 0 and diag.range.end.column >= 0
        assert "\r" not in diag.message


@given(ghcid_like)
@settings(max_examples=200)
def test_parse_is_deterministic(text: str) -> None:
    assert parse("/base", text) == parse("/base", text)


@given(ghcid_like)
@settings(max_examples=200)
def test_grouping_preserves_every_diagnostic(text: str) -> None:
    flat = parse("/base", text)
    groups = parse_grouped("/base", text)
    assert sum(len(diags) for _, diags in groups) == len(flat)
    assert len({location.key for location, _ in groups}) == len(groups)
    # Flattening groups restores the original order within each file.
    for location, diags in groups:
        assert diags == [d for f, d in flat if f.key == location.key]
