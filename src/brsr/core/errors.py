"""
Errors raised by the scoring configuration layer.

Input records never raise: missing or malformed disclosure data is absorbed
as zero points, "N/A" metrics or fallback document nodes. Only a broken
packaged rubric is an error.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class RubricError(ValueError):
    """The scoring rubric or topic table is inconsistent."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
        return f"{self.message} ({extra})"
