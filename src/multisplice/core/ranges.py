"""Structured helpers for representing and resolving source spans."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Final, Iterator, Literal

from ..errors import BoundsError

BoundKind = Literal["included", "excluded", "unbounded"]


@dataclass(slots=True, frozen=True)
class TextRange(Sequence[int]):
    """Half-open ``[start, end)`` span using offsets into the original source."""

    start: int
    end: int

    def __post_init__(self) -> None:
        start = _coerce_offset(self.start, "start")
        end = _coerce_offset(self.end, "end")
        if start < 0 or end < 0:
            raise BoundsError(
                f"TextRange offsets cannot be negative: {start}..{end}",
                reason="negative_offset",
                start=start,
                end=end,
            )
        if end < start:
            raise BoundsError(
                f"TextRange end {end} precedes start {start}",
                reason="inverted_range",
                start=start,
                end=end,
            )
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> int | tuple[int, ...]:
        if isinstance(index, slice):
            return self.to_tuple()[index]
        if index in (0, -2):
            return self.start
        if index in (1, -1):
            return self.end
        raise IndexError("TextRange index out of range")

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    @property
    def length(self) -> int:
        """Return the width of the range."""

        return self.end - self.start

    @property
    def is_caret(self) -> bool:
        """Return ``True`` when the range is empty (a pure insertion point)."""

        return self.start == self.end

    def contains(self, offset: int) -> bool:
        """Return ``True`` when ``start <= offset < end``."""

        return self.start <= offset < self.end

    def overlaps(self, other: TextRange) -> bool:
        """Return ``True`` when the two spans share at least one offset."""

        return self.start < other.end and other.start < self.end

    def to_tuple(self) -> tuple[int, int]:
        """Return the range as a ``(start, end)`` tuple."""

        return (self.start, self.end)

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


@dataclass(slots=True, frozen=True)
class Bound:
    """One side of a range specification."""

    kind: BoundKind
    value: int | None = None

    def __post_init__(self) -> None:
        if self.kind == "unbounded":
            if self.value is not None:
                raise ValueError("Unbounded bounds do not carry a value")
            return
        if self.kind not in ("included", "excluded"):
            raise ValueError(f"Unknown bound kind: {self.kind!r}")
        if self.value is None:
            raise ValueError(f"{self.kind.capitalize()} bounds require a value")
        object.__setattr__(self, "value", _coerce_offset(self.value, "bound"))

    @classmethod
    def included(cls, value: int) -> Bound:
        return cls("included", value)

    @classmethod
    def excluded(cls, value: int) -> Bound:
        return cls("excluded", value)


UNBOUNDED: Final[Bound] = Bound("unbounded")


@dataclass(slots=True, frozen=True)
class RangeSpec:
    """Range specification with optional and inclusive/exclusive bounds.

    The named constructors mirror the common range shapes::

        RangeSpec.half_open(2, 5)        # 2..5
        RangeSpec.closed(2, 4)           # 2..=4
        RangeSpec.starting_at(2)         # 2..
        RangeSpec.ending_at(5)           # ..5
        RangeSpec.ending_at_inclusive(4) # ..=4
        RangeSpec.full()                 # ..
    """

    start: Bound = UNBOUNDED
    end: Bound = UNBOUNDED

    @classmethod
    def half_open(cls, start: int, end: int) -> RangeSpec:
        return cls(Bound.included(start), Bound.excluded(end))

    @classmethod
    def closed(cls, start: int, end: int) -> RangeSpec:
        return cls(Bound.included(start), Bound.included(end))

    @classmethod
    def starting_at(cls, start: int) -> RangeSpec:
        return cls(Bound.included(start), UNBOUNDED)

    @classmethod
    def ending_at(cls, end: int) -> RangeSpec:
        return cls(UNBOUNDED, Bound.excluded(end))

    @classmethod
    def ending_at_inclusive(cls, end: int) -> RangeSpec:
        return cls(UNBOUNDED, Bound.included(end))

    @classmethod
    def full(cls) -> RangeSpec:
        return cls(UNBOUNDED, UNBOUNDED)


def resolve_range(spec: Any, length: int) -> TextRange:
    """Resolve ``spec`` to concrete offsets for a source of ``length`` units.

    Accepts a :class:`RangeSpec`, a :class:`TextRange`, a ``slice`` or ``range``
    with a step of 1 or a ``(start, end)`` pair. Resolution does not compare
    the result against ``length``; callers bounds-check the returned range.
    """

    if isinstance(spec, RangeSpec):
        return TextRange(_resolve_start(spec.start), _resolve_end(spec.end, length))
    if isinstance(spec, TextRange):
        return spec
    if isinstance(spec, slice):
        if spec.step not in (None, 1):
            raise TypeError("Range slices must use a step of 1")
        start = 0 if spec.start is None else _coerce_offset(spec.start, "start")
        end = length if spec.stop is None else _coerce_offset(spec.stop, "end")
        return TextRange(start, end)
    if isinstance(spec, range):
        if spec.step != 1:
            raise TypeError("Ranges must use a step of 1")
        return TextRange(spec.start, spec.stop)
    if isinstance(spec, Sequence) and not isinstance(spec, (str, bytes)):
        items = list(spec)
        if len(items) != 2:
            raise TypeError("Range sequences must have exactly two entries")
        return TextRange(items[0], items[1])
    raise TypeError(f"Unsupported range specification: {spec!r}")


def _resolve_start(bound: Bound) -> int:
    # only unbounded bounds carry no value
    value = bound.value
    if value is None:
        return 0
    if bound.kind == "excluded":
        return value + 1
    return value


def _resolve_end(bound: Bound, length: int) -> int:
    value = bound.value
    if value is None:
        return length
    if bound.kind == "included":
        return value + 1
    return value


def _coerce_offset(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{label} offset must be an integer, not bool")
    try:
        return operator.index(value)
    except TypeError as exc:
        raise TypeError(f"{label} offset must be an integer") from exc


__all__ = ["Bound", "RangeSpec", "TextRange", "UNBOUNDED", "resolve_range"]
