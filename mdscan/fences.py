"""Fenced code block tracking."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import FENCE_MARKER
from .models import FenceContext


def is_fence_marker(line: str) -> bool:
    """Return True when `line` opens or closes a fenced code block.

    Examples:
        is_fence_marker("  ```python")  # True
        is_fence_marker("text ```")  # False
    """
    return line.strip().startswith(FENCE_MARKER)


def _try_toggle_fence(ctx: FenceContext, line: str) -> bool:
    """Flip the fence state when `line` is a fence marker.

    Args:
        ctx: Fence context to update.
        line: Current line being scanned.

    Returns:
        bool: True when the line was a marker and the context changed.
    """
    if not is_fence_marker(line):
        return False

    ctx.inside = not ctx.inside
    ctx.markers_seen += 1
    return True


def track_fences(lines: Sequence[str]) -> list[bool]:
    """Flag the lines that must be excluded from heading and code analysis.

    Marker lines are always flagged, as is every line between an opening and a
    closing marker. An unterminated fence flags everything after it.

    Args:
        lines: Document lines without line terminators.

    Returns:
        list[bool]: One flag per line; True means "inside a fence".

    Examples:
        track_fences(["text", "```", "code", "```", "more"])
        # [False, True, True, True, False]
    """
    ctx = FenceContext()
    flags: list[bool] = []

    for line in lines:
        if _try_toggle_fence(ctx, line):
            flags.append(True)
            continue
        flags.append(ctx.inside)

    return flags


def count_fence_markers(lines: Sequence[str]) -> int:
    """Count the fence marker lines in `lines`, opening and closing alike."""
    return sum(1 for line in lines if is_fence_marker(line))


def has_unclosed_fence(lines: Sequence[str]) -> bool:
    """Return True when the document ends inside a fenced block."""
    return count_fence_markers(lines) % 2 == 1
