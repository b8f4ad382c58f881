from __future__ import annotations

import logging

import pytest

from mdscan.outline import extract_headings
from mdscan.scrollspy import find_active_heading

HEADINGS = extract_headings("# Intro\n## Usage\n## Reference\n").headings
POSITIONS = [0, 200, 500]


@pytest.mark.parametrize(
    ("scroll_offset", "expected"),
    [
        (0, "intro"),
        (99, "intro"),
        (100, "usage"),
        (250, "usage"),
        (400, "reference"),
        (10_000, "reference"),
    ],
)
def test_selects_last_heading_above_threshold(scroll_offset: float, expected: str):
    assert find_active_heading(HEADINGS, POSITIONS, scroll_offset, lookahead=100) == expected


def test_returns_none_when_view_is_above_every_heading():
    assert find_active_heading(HEADINGS, [300, 600, 900], 0, lookahead=100) is None
    assert find_active_heading((), [], 500) is None


def test_default_lookahead_comes_from_config():
    assert find_active_heading(HEADINGS, POSITIONS, 100) == "usage"
    assert find_active_heading(HEADINGS, POSITIONS, 100, lookahead=0) == "intro"


def test_unrendered_headings_are_skipped():
    assert find_active_heading(HEADINGS, [0, 200, None], 1_000, lookahead=0) == "usage"


def test_repeated_offsets_yield_same_pointer():
    results = {find_active_heading(HEADINGS, POSITIONS, 250, lookahead=100) for _ in range(5)}

    assert results == {"usage"}


def test_misaligned_positions_yield_no_active_heading(caplog):
    with caplog.at_level(logging.DEBUG, logger="mdscan.scrollspy"):
        assert find_active_heading(HEADINGS, [0, 200], 1_000) is None

    assert "Expected 3 heading positions, got 2" in caplog.text
    assert find_active_heading(HEADINGS, [0, 200, 500, 800], 1_000) is None
