"""Splicer options and environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Literal, Mapping

__all__ = ["SpliceOptions", "OVERLAP_CHECK_CHOICES", "load_options"]

LOGGER = logging.getLogger(__name__)

OverlapCheck = Literal["start", "strict"]
OVERLAP_CHECK_CHOICES: tuple[str, ...] = ("start", "strict")
_ENV_OVERRIDES: Mapping[str, str] = {
    "MULTISPLICE_OVERLAP_CHECK": "overlap_check",
}


@dataclass(slots=True, frozen=True)
class SpliceOptions:
    """Behavioural toggles for :class:`~multisplice.splicer.Multisplice`.

    ``overlap_check`` selects how registrations are validated:

    * ``"start"`` rejects a splice whose start offset falls inside an existing
      splice. Ranges that begin before an existing splice and run into it are
      accepted.
    * ``"strict"`` additionally rejects any splice whose range intersects or
      swallows an existing splice.
    """

    overlap_check: OverlapCheck = "start"

    def __post_init__(self) -> None:
        if self.overlap_check not in OVERLAP_CHECK_CHOICES:
            raise ValueError(
                f"overlap_check must be one of {OVERLAP_CHECK_CHOICES}, got {self.overlap_check!r}"
            )


def load_options(
    *,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> SpliceOptions:
    """Build options from defaults, then environment, then explicit overrides."""

    known = {item.name for item in fields(SpliceOptions)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise TypeError(f"Unknown splice option(s): {', '.join(unknown)}")

    env = os.environ if environ is None else environ
    options = SpliceOptions()
    env_values: dict[str, Any] = {}
    for env_name, field_name in _ENV_OVERRIDES.items():
        raw = env.get(env_name)
        if raw is None or not raw.strip():
            continue
        env_values[field_name] = raw.strip().lower()
        LOGGER.debug("Applying %s=%s from environment", env_name, env_values[field_name])
    if env_values:
        options = replace(options, **env_values)
    if overrides:
        options = replace(options, **overrides)
    return options
