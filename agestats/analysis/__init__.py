"""Age statistics computations."""

from __future__ import annotations

__all__ = [
    "AgeBracket",
    "AgeStatistics",
    "FIELD_COUNT",
    "compute_statistics",
]

from .statistics import FIELD_COUNT, AgeBracket, AgeStatistics, compute_statistics
