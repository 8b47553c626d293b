"""Splice a string many times using offsets into the original string."""

from .config import SpliceOptions, load_options
from .core.ranges import UNBOUNDED, Bound, RangeSpec, TextRange, resolve_range
from .errors import BoundsError, OverlapError, SpliceError
from .splicer import Multisplice, Splice

__version__ = "0.1.0"

__all__ = [
    "Bound",
    "BoundsError",
    "Multisplice",
    "OverlapError",
    "RangeSpec",
    "Splice",
    "SpliceError",
    "SpliceOptions",
    "TextRange",
    "UNBOUNDED",
    "load_options",
    "resolve_range",
]
