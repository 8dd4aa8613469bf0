"""Checker options passed explicitly by callers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckerConfig:
    """Options that change how the checker treats the data it walks."""

    # An omitted optional field is type-checked as "undefined" unless this is set.
    skip_absent_optional: bool = False


DEFAULT_CONFIG = CheckerConfig()
