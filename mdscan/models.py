"""Data models for mdscan."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class FenceContext:
    """Fence state carried through a single scan of a document.

    Attributes:
        inside: True while the scan is between an opening and closing fence.
        markers_seen: Number of fence marker lines encountered so far.
    """

    inside: bool = False
    markers_seen: int = 0


@dataclass(frozen=True)
class HeadingEntry:
    """A heading surfaced in the outline.

    Attributes:
        identifier: Anchor identifier, unique within one extraction pass.
        display_text: Heading text with inline markup removed.
        level: Number of leading ``#`` markers (1 to 3).
        original_text: Join key shared with renderers; the normalized text.
        index: Zero-based position of the entry in the outline.
        line_number: One-based line the heading was found on.
    """

    identifier: str
    display_text: str
    level: int
    original_text: str
    index: int
    line_number: int


@dataclass(frozen=True)
class Outline:
    """Ordered headings of a document together with their anchor map.

    Attributes:
        headings: Entries in document order.
        anchor_map: Maps each heading's `original_text` to the identifier of
            its last occurrence.
    """

    headings: tuple[HeadingEntry, ...] = ()
    anchor_map: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.headings)

    def __iter__(self):
        return iter(self.headings)

    @property
    def identifiers(self) -> list[str]:
        return [heading.identifier for heading in self.headings]

    def identifier_at(self, index: int) -> str | None:
        """Return the identifier of the heading at `index`, or None when out of range."""
        if 0 <= index < len(self.headings):
            return self.headings[index].identifier
        return None


@dataclass(frozen=True)
class CodeHint:
    """Advisory warning for a line that looks like unfenced code.

    Attributes:
        line_number: One-based line number.
        snippet: Preview of the stripped line, possibly truncated.
    """

    line_number: int
    snippet: str

    @property
    def message(self) -> str:
        return (
            f"Line {self.line_number} may contain code, wrap it in a code block: "
            f"```{self.snippet}```"
        )


@dataclass(frozen=True)
class CodeWarning:
    """Located occurrence of a well-known code form outside fenced blocks.

    Attributes:
        line_number: One-based line number.
        snippet: Matched text, bounded to the configured preview length.
        start_offset: Absolute offset of the snippet in the document.
        end_offset: Absolute offset just past the snippet.
        language: Language family of the pattern that matched.
    """

    line_number: int
    snippet: str
    start_offset: int
    end_offset: int
    language: str = ""


@dataclass(frozen=True)
class SurfaceMetrics:
    """Text layout parameters of the editing surface.

    Attributes:
        font_size: Font size in pixels.
        line_height: Line height in pixels.
        padding_left: Left content padding in pixels.
        padding_top: Top content padding in pixels.
        client_width: Inner width of the surface, padding included.
        measure_text: Returns the rendered pixel width of a string in the
            surface's font.
        padding_right: Right content padding; defaults to `padding_left`.
    """

    font_size: float
    line_height: float
    padding_left: float
    padding_top: float
    client_width: float
    measure_text: Callable[[str], float]
    padding_right: float | None = None

    @property
    def available_width(self) -> float:
        """Right edge of the content box, measured from the surface's left edge."""
        padding_right = self.padding_left if self.padding_right is None else self.padding_right
        return self.client_width - padding_right


@dataclass(frozen=True)
class HighlightRectangle:
    """Pixel rectangle drawn under a located warning.

    Attributes:
        top: Distance from the surface's top edge.
        left: Distance from the surface's left edge.
        width: Rectangle width.
        height: Rectangle height.
        start_offset: Absolute offset of the highlighted text.
        end_offset: Absolute offset just past the highlighted text.
        text: The highlighted text.
    """

    top: float
    left: float
    width: float
    height: float
    start_offset: int
    end_offset: int
    text: str


@dataclass
class ValidationResult:
    """Outcome of the save-time content validation."""

    valid: bool
    errors: list[str]


@dataclass
class CheckResult:
    """Outcome of the scored code check."""

    ok: bool
    warnings: list[str]
