"""Heading text normalization and anchor identifier resolution."""

from __future__ import annotations

import re

from .constants import CJK_RANGE, FALLBACK_IDENTIFIER_PREFIX
from .models import Outline

_LEADING_MARKERS = re.compile(r"^#+\s*")
_LINK_OR_IMAGE = re.compile(r"!?\[([^\]]*)\]\([^)]*\)")
# Paired wrappers, unwrapped in this order.
_INLINE_WRAPPERS = (
    re.compile(r"\*\*(.+?)\*\*"),
    re.compile(r"(?<!\w)__(.+?)__(?!\w)"),
    re.compile(r"\*(.+?)\*"),
    re.compile(r"(?<!\w)_(.+?)_(?!\w)"),
    re.compile(r"`(.+?)`"),
)

_ASCII_DISALLOWED = re.compile(rf"[^A-Za-z0-9_\s{CJK_RANGE}-]")
_UNICODE_DISALLOWED = re.compile(r"[^\w\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_heading_text(text: str) -> str:
    """Strip inline markup from heading text, keeping what a reader sees.

    Args:
        text: Heading text after the leading markers.

    Returns:
        str: The unwrapped text, trimmed.

    Examples:
        normalize_heading_text("**Bold** and `code`")  # "Bold and code"
        normalize_heading_text("See [the docs](https://x.dev)")  # "See the docs"
    """
    text = _LEADING_MARKERS.sub("", text.strip())
    text = _LINK_OR_IMAGE.sub(r"\1", text)
    for wrapper in _INLINE_WRAPPERS:
        text = wrapper.sub(r"\1", text)
    return text.strip()


def generate_base_identifier(text: str, preserve_unicode: bool = False) -> str:
    """Derive the base anchor identifier for normalized heading text.

    Lower-cases the text, drops everything except word characters, whitespace,
    hyphens and CJK ideographs, then turns each whitespace run into a single
    hyphen. The result may be empty or consist only of hyphens; callers decide
    on a fallback.

    Args:
        text: Normalized heading text.
        preserve_unicode: Keep every Unicode word character instead of only
            ASCII word characters and CJK ideographs.

    Examples:
        generate_base_identifier("Getting Started")  # "getting-started"
        generate_base_identifier("安装 指南")  # "安装-指南"
        generate_base_identifier("---")  # "---"
    """
    disallowed = _UNICODE_DISALLOWED if preserve_unicode else _ASCII_DISALLOWED
    identifier = disallowed.sub("", text.lower())
    return _WHITESPACE_RUN.sub("-", identifier)


def is_blank_identifier(identifier: str) -> bool:
    """Return True when `identifier` holds nothing but hyphens."""
    return not identifier.strip("-")


class IdentifierAllocator:
    """Hands out unique identifiers in document order for one extraction pass.

    The first heading with a given base keeps it; later ones receive ``-1``,
    ``-2``, and so on, skipping any suffixed form already taken by another
    heading. Blank bases fall back to ``heading-<n>``, where ``n`` counts only
    the headings that needed the fallback.

    Examples:
        allocator = IdentifierAllocator()
        allocator.allocate("setup")  # "setup"
        allocator.allocate("setup")  # "setup-1"
        allocator.allocate("---")  # "heading-1"
    """

    def __init__(self) -> None:
        self._used: set[str] = set()
        # Next suffix to try per base; avoids re-probing taken suffixes.
        self._next_suffix: dict[str, int] = {}
        self._fallback_count = 0

    def allocate(self, base: str) -> str:
        if is_blank_identifier(base):
            self._fallback_count += 1
            base = f"{FALLBACK_IDENTIFIER_PREFIX}-{self._fallback_count}"

        count = self._next_suffix.get(base, 0)
        identifier = base if count == 0 else f"{base}-{count}"
        while identifier in self._used:
            count += 1
            identifier = f"{base}-{count}"

        self._next_suffix[base] = count + 1
        self._used.add(identifier)
        return identifier


class AnchorResolver:
    """Renderer-side lookup of the identifiers computed for an outline.

    Headings that share the same normalized text are handed out in document
    order, one per `resolve` call, so a renderer walking its heading elements
    top to bottom assigns each the identifier the outline computed for it.
    Once every duplicate is consumed, the last identifier is repeated.

    Examples:
        resolver = AnchorResolver(extract_headings("## Setup\\n## Setup"))
        resolver.resolve("Setup")  # "setup"
        resolver.resolve("Setup")  # "setup-1"
    """

    def __init__(self, outline: Outline):
        self._outline = outline
        self._by_text: dict[str, list[str]] = {}
        for heading in outline.headings:
            self._by_text.setdefault(heading.original_text, []).append(heading.identifier)
        self._claimed: dict[str, int] = {}

    def resolve(self, text: str) -> str | None:
        """Return the next identifier for rendered heading `text`, or None if unknown."""
        # Exact text first: normalization is not idempotent.
        key = text if text in self._by_text else normalize_heading_text(text)
        identifiers = self._by_text.get(key)
        if not identifiers:
            return None

        position = self._claimed.get(key, 0)
        self._claimed[key] = position + 1
        return identifiers[min(position, len(identifiers) - 1)]

    def resolve_index(self, index: int) -> str | None:
        """Return the identifier of the `index`-th heading in document order."""
        return self._outline.identifier_at(index)

    def reset(self) -> None:
        """Forget claimed identifiers so the next render starts from the top."""
        self._claimed.clear()
