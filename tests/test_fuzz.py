from __future__ import annotations

import os

import pytest

from mdscan.detector import detect_code_hints, locate_code_matches
from mdscan.outline import extract_headings

atheris = pytest.importorskip("atheris")


def test_extract_headings_with_fuzzed_lines():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    lines: list[str] = []

    while provider.remaining_bytes() > 0 and len(lines) < 64:
        level = provider.ConsumeIntInRange(1, 4)
        title = provider.ConsumeUnicodeNoSurrogates(32) or "Section"
        lines.append(f"{'#' * level} {title}")

    identifiers = extract_headings("\n".join(lines)).identifiers
    assert len(identifiers) == len(set(identifiers))


def test_detectors_with_fuzzed_document():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    content = provider.ConsumeUnicodeNoSurrogates(2048)

    for warning in locate_code_matches(content):
        assert content[warning.start_offset : warning.end_offset] == warning.snippet
    for hint in detect_code_hints(content):
        assert 1 <= hint.line_number <= content.count("\n") + 1
