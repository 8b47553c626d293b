"""Exception types raised while registering or rendering splices."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .core.ranges import TextRange


class SpliceError(RuntimeError):
    """Base class for offset bookkeeping mistakes made by the caller."""

    reason: str = "splice_error"

    def __init__(
        self,
        message: str,
        *,
        reason: str | None = None,
        start: int | None = None,
        end: int | None = None,
        limit: int | None = None,
    ) -> None:
        super().__init__(message)
        if reason is not None:
            self.reason = reason
        self.start = start
        self.end = end
        self.limit = limit

    def details(self) -> dict[str, Any]:
        return {
            "reason": self.reason,
            "start": self.start,
            "end": self.end,
            "limit": self.limit,
        }


class OverlapError(SpliceError):
    """Raised when a splice would start inside an already spliced range."""

    reason = "splice_overlap"

    def __init__(
        self,
        message: str,
        *,
        existing: "TextRange",
        start: int | None = None,
        end: int | None = None,
    ) -> None:
        super().__init__(message, start=start, end=end)
        self.existing = existing

    def details(self) -> dict[str, Any]:
        payload = super().details()
        payload["existing"] = self.existing.to_tuple()
        return payload


class BoundsError(SpliceError):
    """Raised when offsets fall outside the original source."""

    reason = "out_of_bounds"


__all__ = ["SpliceError", "OverlapError", "BoundsError"]
