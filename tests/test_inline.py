import pytest

from mdscan.inline import find_code_spans, is_escaped, overlaps_span


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("use `x = 1` here", [(4, 11)]),
        ("``a ` b`` c", [(0, 9)]),
        ("`one` and `two`", [(0, 5), (10, 15)]),
        ("no spans", []),
        ("lone ` tick", []),
        ("a ` b ` c `", [(2, 7)]),
        ("escaped \\`not code` tail", []),
    ],
)
def test_find_code_spans(text: str, expected: list[tuple[int, int]]):
    assert find_code_spans(text) == expected


def test_is_escaped_counts_backslashes():
    assert is_escaped("\\`", 1) is True
    assert is_escaped("\\\\`", 2) is False
    assert is_escaped("`", 0) is False


def test_overlaps_span():
    spans = [(4, 10)]

    assert overlaps_span(spans, 0, 5) is True
    assert overlaps_span(spans, 9, 12) is True
    assert overlaps_span(spans, 10, 12) is False
    assert overlaps_span(spans, 0, 4) is False
    assert overlaps_span([], 0, 4) is False
