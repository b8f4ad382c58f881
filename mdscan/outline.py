"""Heading outline extraction."""

from __future__ import annotations

import logging

from .anchors import IdentifierAllocator, generate_base_identifier, normalize_heading_text
from .config import ScanConfig
from .constants import HEADING_PATTERN
from .fences import track_fences
from .models import HeadingEntry, Outline

logger = logging.getLogger(__name__)


def split_lines(content: str) -> list[str]:
    """Split document text into lines, keeping offsets of ``"\\n"`` separators exact."""
    return content.split("\n")


def extract_headings(content: str, config: ScanConfig | None = None) -> Outline:
    """Build the level 1-3 outline of a markdown document.

    Headings inside fenced code blocks are ignored. Each heading gets an
    identifier derived from its normalized text; duplicates are numbered in
    document order, so the first ``## Setup`` keeps ``setup`` and the second
    becomes ``setup-1``. The allocator lives only for this call, which keeps
    repeated extraction of the same text identical.

    Args:
        content: The markdown text.
        config: Controls Unicode handling in identifiers. Defaults to a new
            `ScanConfig` when omitted.

    Returns:
        Outline: Heading entries in document order and the text-to-identifier
            anchor map. When headings repeat, the map keeps the identifier of
            the last one.

    Examples:
        outline = extract_headings("# Title\\n## Setup\\n## Setup\\n")
        outline.identifiers  # ["title", "setup", "setup-1"]
    """
    config = config or ScanConfig()
    lines = split_lines(content)
    fenced = track_fences(lines)

    allocator = IdentifierAllocator()
    headings: list[HeadingEntry] = []
    anchor_map: dict[str, str] = {}

    for line_number, (line, in_fence) in enumerate(zip(lines, fenced), start=1):
        if in_fence:
            continue

        heading_match = HEADING_PATTERN.match(line)
        if not heading_match:
            continue

        text = normalize_heading_text(heading_match.group(2))
        base = generate_base_identifier(text, preserve_unicode=config.preserve_unicode)
        identifier = allocator.allocate(base)

        headings.append(
            HeadingEntry(
                identifier=identifier,
                display_text=text,
                level=len(heading_match.group(1)),
                original_text=text,
                index=len(headings),
                line_number=line_number,
            )
        )
        anchor_map[text] = identifier

    logger.debug("Extracted %d headings from %d lines", len(headings), len(lines))
    return Outline(headings=tuple(headings), anchor_map=anchor_map)
