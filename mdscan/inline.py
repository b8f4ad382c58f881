"""Inline markup scanning helpers."""

from __future__ import annotations


def is_escaped(text: str, pos: int) -> bool:
    """Determine whether the character at `pos` is escaped by backslashes.

    An odd number of consecutive backslashes immediately before `pos` escapes
    the character.

    Examples:
        is_escaped("\\\\`", 2)  # False, two backslashes
        is_escaped("\\`", 1)  # True, one backslash
    """
    backslash_count = 0
    i = pos - 1
    while i >= 0 and text[i] == "\\":
        backslash_count += 1
        i -= 1
    return backslash_count % 2 == 1


def _backtick_run(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end] == "`":
        end += 1
    return end - start


def find_code_spans(text: str) -> list[tuple[int, int]]:
    """Locate inline code spans delimited by equal-length backtick runs.

    An opening run without a matching closing run is treated as literal text
    and scanning resumes right after it.

    Args:
        text: A single line of markdown.

    Returns:
        list[tuple[int, int]]: Start (inclusive) and end (exclusive) offsets of
            each span, delimiters included.

    Examples:
        find_code_spans("use `x = 1` here")  # [(4, 11)]
        find_code_spans("``a ` b`` c")  # [(0, 9)]
    """
    spans: list[tuple[int, int]] = []
    i = 0

    while i < len(text):
        if text[i] != "`" or is_escaped(text, i):
            i += 1
            continue

        opening = _backtick_run(text, i)
        j = i + opening
        closed_at = None
        while j < len(text):
            if text[j] != "`":
                j += 1
                continue
            run = _backtick_run(text, j)
            if run == opening:
                closed_at = j + run
                break
            j += run

        if closed_at is None:
            i += opening
            continue

        spans.append((i, closed_at))
        i = closed_at

    return spans


def overlaps_span(spans: list[tuple[int, int]], start: int, end: int) -> bool:
    """Return True when the range ``[start, end)`` intersects any span."""
    return any(start < span_end and span_start < end for span_start, span_end in spans)
