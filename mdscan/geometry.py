"""Projection of located code warnings onto an editing surface."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace

from .config import ScanConfig
from .exceptions import MeasurementError
from .models import CodeWarning, HighlightRectangle, SurfaceMetrics
from .outline import split_lines

logger = logging.getLogger(__name__)


def average_width_measurer(font_size: float, ratio: float = 0.6) -> Callable[[str], float]:
    """Build a text measurer that assumes every glyph has the average width.

    Suitable when the host cannot measure rendered text; wide scripts such as
    CJK come out narrower than they render.
    """

    def measure(text: str) -> float:
        return len(text) * font_size * ratio

    return measure


def line_start_offset(lines: Sequence[str], line_number: int) -> int:
    """Absolute offset of the first character of a one-based line."""
    return sum(len(line) + 1 for line in lines[: line_number - 1])


def _locate_in_line(line: str, warning: CodeWarning, line_start: int) -> int:
    expected = warning.start_offset - line_start
    if 0 <= expected and line[expected : expected + len(warning.snippet)] == warning.snippet:
        return expected
    return line.find(warning.snippet)


def compute_highlight(
    lines: Sequence[str],
    warning: CodeWarning,
    metrics: SurfaceMetrics,
    config: ScanConfig | None = None,
) -> HighlightRectangle:
    """Compute the rectangle drawn beneath one located warning.

    The left edge comes from measuring the text before the match with the
    surface's own measurer, so proportional fonts are placed correctly. The
    width is an estimate from the average glyph width, clipped to the content
    box.

    Args:
        lines: Document lines as currently shown on the surface.
        warning: Located warning to place.
        metrics: Font and padding metrics of the surface.
        config: Supplies the average glyph width ratio. Defaults to a new
            `ScanConfig` when omitted.

    Returns:
        HighlightRectangle: Rectangle in surface coordinates.

    Raises:
        MeasurementError: If the line no longer exists, the snippet is not on
            it, the surface measurer fails, or the match starts outside the
            content box.
    """
    config = config or ScanConfig()
    line_number = warning.line_number

    if not 1 <= line_number <= len(lines):
        raise MeasurementError(line_number, "line is out of range")
    if not warning.snippet:
        raise MeasurementError(line_number, "warning has no text")

    line = lines[line_number - 1]
    line_start = line_start_offset(lines, line_number)
    match_index = _locate_in_line(line, warning, line_start)
    if match_index == -1:
        raise MeasurementError(line_number, f"{warning.snippet!r} not found on line")

    try:
        prefix_width = metrics.measure_text(line[:match_index])
    except Exception as error:
        raise MeasurementError(line_number, f"text measurement failed: {error}") from error

    top = metrics.padding_top + (line_number - 1) * metrics.line_height
    left = metrics.padding_left + prefix_width

    room = metrics.available_width - left
    if room <= 0:
        raise MeasurementError(line_number, "match starts outside the content box")

    estimated_width = len(warning.snippet) * metrics.font_size * config.average_char_width_ratio
    start_offset = line_start + match_index

    return HighlightRectangle(
        top=top,
        left=left,
        width=min(estimated_width, room),
        height=metrics.line_height,
        start_offset=start_offset,
        end_offset=start_offset + len(warning.snippet),
        text=warning.snippet,
    )


def compute_highlights(
    content: str,
    warnings: Iterable[CodeWarning],
    metrics: SurfaceMetrics,
    config: ScanConfig | None = None,
) -> list[HighlightRectangle]:
    """Compute highlight rectangles for every warning that can be placed.

    Warnings that cannot be placed are skipped so one stale or clipped
    warning never hides the others.

    Examples:
        metrics = SurfaceMetrics(14, 20, 16, 16, 600, average_width_measurer(14))
        compute_highlights(text, locate_code_matches(text), metrics)
    """
    config = config or ScanConfig()
    lines = split_lines(content)
    rectangles: list[HighlightRectangle] = []

    for warning in warnings:
        try:
            rectangles.append(compute_highlight(lines, warning, metrics, config))
        except MeasurementError as error:
            logger.debug("Skipping highlight: %s", error)

    return rectangles


def scroll_highlights(
    rectangles: Iterable[HighlightRectangle],
    scroll_top: float,
    scroll_left: float = 0.0,
    viewport_height: float | None = None,
) -> list[HighlightRectangle]:
    """Shift rectangles by the surface's scroll position.

    The overlay does not scroll with the text, so rectangles are moved by the
    same amount the text moved. With `viewport_height`, rectangles entirely
    above or below the visible area are dropped.
    """
    shifted = [
        replace(rectangle, top=rectangle.top - scroll_top, left=rectangle.left - scroll_left)
        for rectangle in rectangles
    ]
    if viewport_height is None:
        return shifted
    return [
        rectangle
        for rectangle in shifted
        if rectangle.top + rectangle.height > 0 and rectangle.top < viewport_height
    ]
