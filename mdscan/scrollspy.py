"""Active heading tracking for a scrolling document view."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .constants import DEFAULT_CONFIG
from .models import HeadingEntry

logger = logging.getLogger(__name__)


def find_active_heading(
    headings: Sequence[HeadingEntry],
    positions: Sequence[float | None],
    scroll_offset: float,
    lookahead: float | None = None,
) -> str | None:
    """Return the identifier of the heading the reader is currently in.

    Walks the headings from last to first and picks the first one whose top
    edge is at or above ``scroll_offset + lookahead``. Headings whose position
    is None (not rendered) are skipped.

    Args:
        headings: Outline entries in document order.
        positions: Vertical position of each heading element, aligned with
            `headings`.
        scroll_offset: Current vertical scroll offset of the view.
        lookahead: Pixels below the offset that already count as read.
            Defaults to `ScanConfig.scroll_lookahead`.

    Returns:
        str | None: Identifier of the active heading, or None when the view is
            above every heading or when `positions` and `headings` differ in
            length.

    Examples:
        find_active_heading(outline.headings, [0, 200, 500], 250, 100)
        # identifier of the second heading
    """
    if len(positions) != len(headings):
        logger.debug(
            "Expected %d heading positions, got %d", len(headings), len(positions)
        )
        return None
    if lookahead is None:
        lookahead = DEFAULT_CONFIG.scroll_lookahead

    threshold = scroll_offset + lookahead
    for heading, position in zip(reversed(headings), reversed(positions)):
        if position is not None and position <= threshold:
            return heading.identifier
    return None
