"""Document statistics."""

from __future__ import annotations

import re

from .constants import CJK_PATTERN

_WHITESPACE_RUN = re.compile(r"\s+")


def count_words(text: str) -> int:
    """Count words the way a mixed Chinese/English reader would.

    Every CJK ideograph counts as one word; the remaining text is split on
    whitespace and each token counts as one word.

    Examples:
        count_words("Hello world")  # 2
        count_words("你好 world")  # 3
    """
    clean = _WHITESPACE_RUN.sub(" ", text).strip()
    if not clean:
        return 0

    ideographs = len(CJK_PATTERN.findall(clean))
    words = CJK_PATTERN.sub("", clean).split()
    return ideographs + len(words)
