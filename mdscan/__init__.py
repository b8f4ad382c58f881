"""
mdscan: structural and heuristic analysis of markdown documents.

Builds a heading outline with unique anchor identifiers, flags code pasted
outside fenced blocks, and maps located warnings to pixel rectangles on an
editing surface.

CLI Usage:
    mdscan README.md --locate

Library Usage:
    from mdscan import extract_headings, locate_code_matches, compute_highlights

    outline = extract_headings(content)
    warnings = locate_code_matches(content)
    rectangles = compute_highlights(content, warnings, metrics)
"""

from .anchors import AnchorResolver, generate_base_identifier, normalize_heading_text
from .config import ConfigError, ScanConfig
from .detector import (
    check_content,
    detect_code_hints,
    locate_code_matches,
    score_line,
    validate_content,
)
from .exceptions import MeasurementError, ScanError
from .fences import has_unclosed_fence, track_fences
from .geometry import (
    average_width_measurer,
    compute_highlight,
    compute_highlights,
    scroll_highlights,
)
from .models import (
    CheckResult,
    CodeHint,
    CodeWarning,
    HeadingEntry,
    HighlightRectangle,
    Outline,
    SurfaceMetrics,
    ValidationResult,
)
from .outline import extract_headings
from .scrollspy import find_active_heading
from .stats import count_words

__version__ = "0.1.0"

__all__ = [
    # Outline
    "extract_headings",
    "normalize_heading_text",
    "generate_base_identifier",
    "AnchorResolver",
    "find_active_heading",
    # Detection
    "track_fences",
    "has_unclosed_fence",
    "detect_code_hints",
    "locate_code_matches",
    "score_line",
    "check_content",
    "validate_content",
    # Geometry
    "compute_highlight",
    "compute_highlights",
    "scroll_highlights",
    "average_width_measurer",
    # Utilities
    "count_words",
    # Data models
    "HeadingEntry",
    "Outline",
    "CodeHint",
    "CodeWarning",
    "SurfaceMetrics",
    "HighlightRectangle",
    "ValidationResult",
    "CheckResult",
    "ScanConfig",
    # Exceptions
    "ConfigError",
    "MeasurementError",
    "ScanError",
    # Version
    "__version__",
]
