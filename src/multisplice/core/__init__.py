"""Core span types shared by the splicer."""

from .ranges import UNBOUNDED, Bound, RangeSpec, TextRange, resolve_range

__all__ = ["Bound", "RangeSpec", "TextRange", "UNBOUNDED", "resolve_range"]
