from __future__ import annotations

import pytest

from mdscan.detector import locate_code_matches
from mdscan.exceptions import MeasurementError
from mdscan.geometry import (
    average_width_measurer,
    compute_highlight,
    compute_highlights,
    line_start_offset,
    scroll_highlights,
)
from mdscan.models import CodeWarning, HighlightRectangle, SurfaceMetrics


def _metrics(client_width: float = 400, measure=None) -> SurfaceMetrics:
    return SurfaceMetrics(
        font_size=10,
        line_height=20,
        padding_left=8,
        padding_top=4,
        client_width=client_width,
        measure_text=measure or average_width_measurer(10, 0.6),
    )


def test_rectangle_from_located_warning():
    content = "Intro\n  import os\n"
    warning = locate_code_matches(content)[0]

    rectangle = compute_highlights(content, [warning], _metrics())[0]

    assert rectangle == HighlightRectangle(
        top=24,
        left=20,
        width=54,
        height=20,
        start_offset=8,
        end_offset=17,
        text="import os",
    )


def test_width_is_clipped_to_content_box():
    content = "Intro\n  import os\n"
    metrics = _metrics(client_width=60)

    rectangle = compute_highlights(content, locate_code_matches(content), metrics)[0]

    assert rectangle.width == pytest.approx(32)
    assert rectangle.left + rectangle.width <= metrics.available_width


def test_prefix_is_measured_with_surface_measurer():
    def measure(text: str) -> float:
        return sum(12 if char == "W" else 5 for char in text)

    content = "WW import os"
    rectangle = compute_highlights(content, locate_code_matches(content), _metrics(measure=measure))[0]

    assert rectangle.left == 8 + 12 + 12 + 5


def test_recorded_offset_preferred_over_first_occurrence():
    content = "`import os` then import os"
    warning = locate_code_matches(content)[0]

    rectangle = compute_highlights(content, [warning], _metrics())[0]

    assert rectangle.start_offset == warning.start_offset == 17
    assert rectangle.left == pytest.approx(8 + 17 * 6)


def test_stale_warning_is_located_by_search():
    lines = ["  text import os"]
    warning = CodeWarning(line_number=1, snippet="import os", start_offset=0, end_offset=9)

    rectangle = compute_highlight(lines, warning, _metrics())

    assert rectangle.start_offset == 7


def test_unplaceable_warnings_are_skipped():
    content = "import os\nplain\n"
    warnings = [
        CodeWarning(line_number=1, snippet="import os", start_offset=0, end_offset=9),
        CodeWarning(line_number=2, snippet="print(", start_offset=10, end_offset=16),
        CodeWarning(line_number=9, snippet="def f(", start_offset=40, end_offset=46),
    ]

    rectangles = compute_highlights(content, warnings, _metrics())

    assert [rectangle.text for rectangle in rectangles] == ["import os"]


@pytest.mark.parametrize(
    ("lines", "warning"),
    [
        (["a"], CodeWarning(line_number=0, snippet="a", start_offset=0, end_offset=1)),
        (["a"], CodeWarning(line_number=2, snippet="a", start_offset=0, end_offset=1)),
        (["abc"], CodeWarning(line_number=1, snippet="", start_offset=0, end_offset=0)),
        (["abc"], CodeWarning(line_number=1, snippet="xyz", start_offset=0, end_offset=3)),
    ],
)
def test_compute_highlight_raises_measurement_error(lines, warning):
    with pytest.raises(MeasurementError):
        compute_highlight(lines, warning, _metrics())


def test_failing_measurer_skips_only_that_warning():
    def measure(text: str) -> float:
        if text.startswith("see"):
            raise ValueError("cannot measure")
        return len(text) * 6.0

    content = "import os\nsee import sys\n"
    warnings = locate_code_matches(content)

    rectangles = compute_highlights(content, warnings, _metrics(measure=measure))

    assert [rectangle.text for rectangle in rectangles] == ["import os"]


def test_failing_measurer_raises_measurement_error():
    def measure(text: str) -> float:
        raise RuntimeError("font not loaded")

    warning = CodeWarning(line_number=1, snippet="import os", start_offset=0, end_offset=9)

    with pytest.raises(MeasurementError, match="text measurement failed: font not loaded"):
        compute_highlight(["import os"], warning, _metrics(measure=measure))


def test_match_beyond_content_box_is_rejected():
    content = " " * 80 + "import os"
    warning = locate_code_matches(content)[0]

    with pytest.raises(MeasurementError, match="outside the content box"):
        compute_highlight([content], warning, _metrics(client_width=200))
    assert compute_highlights(content, [warning], _metrics(client_width=200)) == []


def test_explicit_right_padding():
    metrics = SurfaceMetrics(14, 20, 8, 4, 300, len, padding_right=0)

    assert metrics.available_width == 300
    assert _metrics(client_width=300).available_width == 292


def test_line_start_offset():
    lines = ["ab", "", "cde"]

    assert line_start_offset(lines, 1) == 0
    assert line_start_offset(lines, 2) == 3
    assert line_start_offset(lines, 3) == 4


def test_scroll_highlights_shifts_and_filters():
    rectangles = [
        HighlightRectangle(top=10, left=20, width=30, height=20, start_offset=0, end_offset=3, text="abc"),
        HighlightRectangle(top=210, left=20, width=30, height=20, start_offset=9, end_offset=12, text="def"),
        HighlightRectangle(top=510, left=20, width=30, height=20, start_offset=20, end_offset=23, text="ghi"),
    ]

    shifted = scroll_highlights(rectangles, scroll_top=200, scroll_left=5)
    assert [(r.top, r.left) for r in shifted] == [(-190, 15), (10, 15), (310, 15)]

    visible = scroll_highlights(rectangles, scroll_top=200, viewport_height=300)
    assert [r.text for r in visible] == ["def"]


def test_average_width_measurer():
    measure = average_width_measurer(16, 0.5)

    assert measure("") == 0
    assert measure("abcd") == 32
