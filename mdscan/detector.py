"""Heuristic detection of code pasted outside fenced blocks.

Two independent modes share the fence tracking substrate:

* `detect_code_hints` favors recall. Any code-shaped line produces a textual
  hint for the advisory panel.
* `locate_code_matches` favors precision. Only well-known statement forms are
  reported, each with the exact offsets needed to draw a highlight.

`check_content` and `validate_content` build the pre-save summaries on top of
the same line scan.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .config import ScanConfig
from .constants import (
    CODE_HINT_PATTERNS,
    CODE_MATCH_PATTERNS,
    CODE_SCORE_PATTERNS,
    HEADING_MARKER,
    TRUNCATION_SUFFIX,
    UNCLOSED_FENCE_MESSAGE,
)
from .fences import has_unclosed_fence, track_fences
from .inline import find_code_spans, overlaps_span
from .models import CheckResult, CodeHint, CodeWarning, ValidationResult
from .outline import split_lines

logger = logging.getLogger(__name__)


def truncate(text: str, limit: int) -> str:
    """Cut `text` to `limit` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}{TRUNCATION_SUFFIX}"


def _iter_candidate_lines(lines: list[str]) -> Iterator[tuple[int, int, str]]:
    """Yield ``(line_number, line_start, line)`` for lines open to analysis.

    Skips lines inside fences, fence markers, blank lines, and headings.
    """
    fenced = track_fences(lines)
    line_start = 0

    for line_number, (line, in_fence) in enumerate(zip(lines, fenced), start=1):
        start = line_start
        line_start += len(line) + 1

        if in_fence:
            continue

        trimmed = line.strip()
        if not trimmed or trimmed.startswith(HEADING_MARKER):
            continue

        yield line_number, start, line


def is_likely_code(line: str) -> bool:
    """Return True when any permissive code pattern matches the stripped line.

    Examples:
        is_likely_code("result = calc(x, y);")  # True
        is_likely_code("Plain prose sentence")  # False
    """
    trimmed = line.strip()
    return any(pattern.search(trimmed) for pattern in CODE_HINT_PATTERNS)


def detect_code_hints(content: str, config: ScanConfig | None = None) -> list[CodeHint]:
    """Flag every line that looks like code (high recall).

    Args:
        content: The markdown text.
        config: Controls the snippet preview length. Defaults to a new
            `ScanConfig` when omitted.

    Returns:
        list[CodeHint]: At most one hint per line, in document order.

    Examples:
        detect_code_hints("Intro\\nconst x = 1\\n")[0].line_number  # 2
    """
    config = config or ScanConfig()
    hints = [
        CodeHint(
            line_number=line_number,
            snippet=truncate(line.strip(), config.hint_preview_length),
        )
        for line_number, _, line in _iter_candidate_lines(split_lines(content))
        if is_likely_code(line)
    ]
    logger.debug("Code hints: %d", len(hints))
    return hints


def find_code_match(line: str) -> tuple[int, int, str] | None:
    """Find the leftmost well-known code form in a single line.

    Matches inside inline code spans are ignored, since the author already
    marked them as code. When two patterns start at the same column, the one
    listed first wins.

    Returns:
        tuple[int, int, str] | None: Start, end and language of the match, or
            None when the line holds no recognised form.

    Examples:
        find_code_match("then def main(): runs")  # (5, 14, "Python")
        find_code_match("use `import os` first")  # None
    """
    spans = find_code_spans(line)
    best: tuple[int, int, str] | None = None

    for language, pattern in CODE_MATCH_PATTERNS:
        for match in pattern.finditer(line):
            if overlaps_span(spans, match.start(), match.end()):
                continue
            if best is None or match.start() < best[0]:
                best = (match.start(), match.end(), language)
            break

    return best


def locate_code_matches(content: str, config: ScanConfig | None = None) -> list[CodeWarning]:
    """Locate well-known code forms with absolute offsets (high precision).

    Args:
        content: The markdown text.
        config: Controls how much of a match is kept. Defaults to a new
            `ScanConfig` when omitted.

    Returns:
        list[CodeWarning]: At most one warning per line, in document order.
            `end_offset - start_offset` equals the snippet length.

    Examples:
        warning = locate_code_matches("text\\nimport os\\n")[0]
        (warning.snippet, warning.start_offset, warning.end_offset)  # ("import os", 5, 14)
    """
    config = config or ScanConfig()
    warnings: list[CodeWarning] = []

    for line_number, line_start, line in _iter_candidate_lines(split_lines(content)):
        found = find_code_match(line)
        if found is None:
            continue

        start, end, language = found
        snippet = line[start:end][: config.match_preview_length]
        warnings.append(
            CodeWarning(
                line_number=line_number,
                snippet=snippet,
                start_offset=line_start + start,
                end_offset=line_start + start + len(snippet),
                language=language,
            )
        )

    logger.debug("Located code matches: %d", len(warnings))
    return warnings


def score_line(line: str) -> int:
    """Count the code features present in a stripped line.

    Examples:
        score_line("client.connect(host);")  # 3
    """
    trimmed = line.strip()
    return sum(1 for pattern in CODE_SCORE_PATTERNS if pattern.search(trimmed))


def check_content(content: str, config: ScanConfig | None = None) -> CheckResult:
    """Run the scored syntax check used before previewing a document.

    Reports an unclosed fence and every line whose feature score reaches
    `min_code_score`.

    Examples:
        check_content("```\\nopen fence").ok  # False
    """
    config = config or ScanConfig()
    lines = split_lines(content)
    warnings: list[str] = []

    if has_unclosed_fence(lines):
        warnings.append(UNCLOSED_FENCE_MESSAGE)

    for line_number, _, line in _iter_candidate_lines(lines):
        if score_line(line) >= config.min_code_score:
            warnings.append(f"Line {line_number} may contain code outside a code block")

    return CheckResult(ok=not warnings, warnings=warnings)


def validate_content(content: str, config: ScanConfig | None = None) -> ValidationResult:
    """Validate a document before it is saved.

    Every located code form becomes an error quoting the offending line, and
    an unclosed fence is reported once.

    Args:
        content: The markdown text.
        config: Controls how much of each line is quoted. Defaults to a new
            `ScanConfig` when omitted.

    Returns:
        ValidationResult: `valid` is True only when no error was found.
    """
    config = config or ScanConfig()
    lines = split_lines(content)
    errors: list[str] = []

    if has_unclosed_fence(lines):
        errors.append(UNCLOSED_FENCE_MESSAGE)

    for warning in locate_code_matches(content, config):
        quoted = truncate(lines[warning.line_number - 1].strip(), config.check_preview_length)
        errors.append(
            f"Line {warning.line_number}: unfenced {warning.language} code "
            f'"{warning.snippet}" in "{quoted}"'
        )

    return ValidationResult(valid=not errors, errors=errors)
