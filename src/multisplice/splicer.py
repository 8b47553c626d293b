"""Repeated, non-destructive splicing addressed by original-string offsets.

Every offset handed to :class:`Multisplice` refers to the untouched source, so
callers can register any number of replacements without recomputing offsets
after each one::

    splicer = Multisplice("a b c d e")
    splicer.splice(2, 3, "beep")
    splicer.splice(6, 7, "boop")
    splicer.to_string()        # "a beep c boop e"
    splicer.slice(3, 7)        # " c boop"
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass
from typing import Any, AnyStr, Generic, Iterator

from .config import SpliceOptions, load_options
from .core.ranges import TextRange, resolve_range
from .errors import BoundsError, OverlapError

__all__ = ["Splice", "Multisplice"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Splice:
    """A registered replacement of ``range`` in the source by ``value``."""

    range: TextRange
    value: str | bytes

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end


class Multisplice(Generic[AnyStr]):
    """Registry of splices over an immutable source plus on-demand rendering.

    Splices are kept sorted by start offset. They are never removed or
    modified once registered, so rendering is a pure query that can be
    repeated in any order.
    """

    def __init__(self, source: AnyStr, *, options: SpliceOptions | None = None) -> None:
        if not isinstance(source, (str, bytes)):
            raise TypeError(f"Multisplice source must be str or bytes, not {type(source).__name__}")
        self._source: AnyStr = source
        self._empty: AnyStr = source[:0]
        self._splices: list[Splice] = []
        self._starts: list[int] = []
        self._options = options if options is not None else load_options()

    @property
    def source(self) -> AnyStr:
        """The original, unmodified source."""

        return self._source

    @property
    def options(self) -> SpliceOptions:
        return self._options

    @property
    def splices(self) -> tuple[Splice, ...]:
        """Registered splices in ascending start order."""

        return tuple(self._splices)

    def __len__(self) -> int:
        return len(self._splices)

    def __iter__(self) -> Iterator[Splice]:
        return iter(tuple(self._splices))

    def __repr__(self) -> str:
        return f"<Multisplice source_len={len(self._source)} splices={len(self._splices)}>"

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #
    def splice(self, start: int, end: int, value: AnyStr) -> None:
        """Replace ``source[start:end]`` by ``value`` in rendered output.

        ``value`` may be empty (a deletion) and may be longer or shorter than
        the replaced span. ``start == end`` registers a pure insertion.

        Raises:
            BoundsError: when ``0 <= start <= end <= len(source)`` does not hold.
            OverlapError: when ``start`` falls inside an already spliced range,
                or, with ``overlap_check="strict"``, when the ranges intersect.
        """

        self._check_value(value)
        target = self._checked_range(start, end)
        index = bisect_right(self._starts, target.start)
        self._check_overlap(target, index)
        self._splices.insert(index, Splice(range=target, value=value))
        self._starts.insert(index, target.start)
        LOGGER.debug(
            "Registered splice %s..%s (%d -> %d units) at position %d",
            target.start,
            target.end,
            target.length,
            len(value),
            index,
        )

    def splice_range(self, spec: Any, value: AnyStr) -> None:
        """Replace the span described by ``spec`` by ``value``.

        ``spec`` is anything :func:`~multisplice.core.ranges.resolve_range`
        accepts, e.g. ``RangeSpec.closed(2, 4)`` or ``slice(6, None)``.
        """

        target = resolve_range(spec, len(self._source))
        self.splice(target.start, target.end, value)

    def _check_value(self, value: Any) -> None:
        if not isinstance(value, type(self._empty)):
            raise TypeError(
                f"Splice value must be {type(self._empty).__name__}, not {type(value).__name__}"
            )

    def _checked_range(self, start: int, end: int) -> TextRange:
        target = TextRange(start, end)
        limit = len(self._source)
        if target.end > limit:
            raise BoundsError(
                f"Range {target.start}..{target.end} exceeds source length {limit}",
                start=target.start,
                end=target.end,
                limit=limit,
            )
        return target

    def _check_overlap(self, target: TextRange, index: int) -> None:
        strict = self._options.overlap_check == "strict"
        candidates = self._splices if strict else self._splices[:index]
        for existing in candidates:
            conflict = existing.range.contains(target.start)
            if strict and not conflict:
                conflict = existing.range.overlaps(target)
            if conflict:
                LOGGER.debug(
                    "Rejected splice %s..%s overlapping %s..%s",
                    target.start,
                    target.end,
                    existing.start,
                    existing.end,
                )
                raise OverlapError(
                    "Trying to splice an already spliced range: "
                    f"{target.start}..{target.end} overlaps {existing.start}..{existing.end}",
                    existing=existing.range,
                    start=target.start,
                    end=target.end,
                )

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #
    def slice(self, start: int, end: int) -> AnyStr:
        """Render the spliced text for ``source[start:end]`` coordinates.

        Replacement values are atomic: when ``start`` or ``end`` lands inside a
        spliced range the whole replacement is included. With ``1..10``
        replaced by ``"Hello World"``, ``slice(7, 20)`` returns
        ``"Hello World"`` followed by the source from offset 10 to 20.

        When no splice touches the window the source slice is returned as is.

        Raises:
            BoundsError: when ``0 <= start <= end <= len(source)`` does not hold.
                A window with ``start > end`` is rejected even when both ends
                fall inside the same splice.
        """

        window = self._checked_range(start, end)
        source = self._source
        pieces: list[AnyStr] = []
        last = window.start
        for splice in self._splices:
            # consumed by an earlier splice or before the window
            if splice.end <= last:
                continue
            if splice.start >= window.end:
                break
            if splice.start >= last:
                pieces.append(source[last : splice.start])
            pieces.append(splice.value)  # type: ignore[arg-type]
            last = splice.end

        # a window ending inside a splice has nothing left to copy
        if window.end >= last:
            if not pieces:
                return source[last : window.end]
            pieces.append(source[last : window.end])
        return self._empty.join(pieces)

    def slice_range(self, spec: Any) -> AnyStr:
        """Render the span described by ``spec``; see :meth:`slice`."""

        window = resolve_range(spec, len(self._source))
        return self.slice(window.start, window.end)

    def to_string(self) -> AnyStr:
        """Render the whole source with every splice applied."""

        return self.slice(0, len(self._source))

    def __str__(self) -> str:
        if isinstance(self._source, bytes):
            raise TypeError("Multisplice over bytes renders with bytes(), not str()")
        return self.to_string()  # type: ignore[return-value]

    def __bytes__(self) -> bytes:
        if isinstance(self._source, str):
            raise TypeError("Multisplice over str renders with str(), not bytes()")
        return self.to_string()  # type: ignore[return-value]
