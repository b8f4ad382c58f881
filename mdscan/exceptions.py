"""Package-specific exception types."""

from __future__ import annotations


class ScanError(ValueError):
    """Base class for analysis-related errors.

    Analysis passes never raise these to their callers; they mark a single
    item that could not be computed so the pass can skip it.
    """


class MeasurementError(ScanError):
    """Raised when a warning cannot be projected onto the editing surface.

    Args:
        line_number: One-based line the warning refers to.
        reason: Short description of what failed.
    """

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"Cannot place highlight on line {self.line_number}: {self.reason}"
