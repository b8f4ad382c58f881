"""Constants used across the mdscan package."""

from __future__ import annotations

import re

from .config import ScanConfig

DEFAULT_CONFIG = ScanConfig()

# Markdown patterns
FENCE_MARKER = "```"
HEADING_MARKER = "#"
HEADING_PATTERN = re.compile(r"^(#{1,3})\s+(\S.*)$")

# CJK Unified Ideographs kept in identifiers and counted as words
CJK_RANGE = "一-龥"
CJK_PATTERN = re.compile(f"[{CJK_RANGE}]")

FALLBACK_IDENTIFIER_PREFIX = "heading"
TRUNCATION_SUFFIX = "..."

# Permissive battery: any match flags the line.
CODE_HINT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(import|from|def|class|const|let|var|function|return|if|for|while)\b"),
    re.compile(r"\w+\s*\([^)]*\)\s*(?::)?[{=>]"),
    re.compile(r"\w+\.\w+(\.\w+)?"),
    re.compile(r"[\[\]]"),
    re.compile(r";$"),
    re.compile(r"="),
    re.compile(r"=>"),
    re.compile(r"^\$"),
    re.compile(r"\([^)]*\([^)]*\)"),
)

# Conservative battery of well-known statement forms, tagged by language.
CODE_MATCH_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Python", re.compile(r"\bfrom\s+[\w.]+\s+import\b")),
    ("Python", re.compile(r"\bimport\s+[\w.]+")),
    ("Python", re.compile(r"\bdef\s+\w+\s*\(")),
    ("Python", re.compile(r"\bclass\s+\w+\s*[:(]")),
    ("Python", re.compile(r"\bprint\s*\(")),
    ("JavaScript", re.compile(r"\b(?:const|let|var)\s+\w+\s*=")),
    ("JavaScript", re.compile(r"\bfunction\s+\w+\s*\(")),
    ("JavaScript", re.compile(r"\bconsole\.log\(")),
    ("JavaScript", re.compile(r"=>\s*\{")),
)

# Features counted by the scored check.
CODE_SCORE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r";"),
    re.compile(r"\(\)"),
    re.compile(r"^\w+\.\w+"),
    re.compile(r"\w+\(\w"),
)

UNCLOSED_FENCE_MESSAGE = "Odd number of ``` fence markers; a code block is not closed"
