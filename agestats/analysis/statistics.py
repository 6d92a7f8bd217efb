"""Descriptive statistics over the ten validated ages."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Sequence

from ..utils.logging import get_logger
from ..utils.validators import MAX_AGE, MIN_AGE

_LOGGER = get_logger(__name__)

FIELD_COUNT = 10
ADULT_FROM = 18
SENIOR_FROM = 60

_TWO_PLACES = Decimal("0.01")


class AgeBracket(str, Enum):
    MINOR = "minor"
    ADULT = "adult"
    SENIOR = "senior"

    @classmethod
    def classify(cls, age: int) -> "AgeBracket":
        """Minors are under 18, adults 18 to 59, seniors 60 and over."""

        if age < ADULT_FROM:
            return cls.MINOR
        if age < SENIOR_FROM:
            return cls.ADULT
        return cls.SENIOR


@dataclass(frozen=True)
class AgeStatistics:
    """Immutable snapshot computed from one successful submit."""

    ages: tuple[int, ...]
    minors: int
    adults: int
    seniors: int
    minimum: int
    maximum: int
    mean: float

    def counts_by_bracket(self) -> dict[AgeBracket, int]:
        return {
            AgeBracket.MINOR: self.minors,
            AgeBracket.ADULT: self.adults,
            AgeBracket.SENIOR: self.seniors,
        }

    def to_dict(self) -> dict[str, object]:
        return {
            "ages": list(self.ages),
            "minors": self.minors,
            "adults": self.adults,
            "seniors": self.seniors,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "mean": self.mean,
        }


def round_half_up(value: Decimal) -> float:
    """Round to two decimals, ties away from zero (30.005 -> 30.01)."""

    return float(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def compute_statistics(ages: Sequence[int]) -> AgeStatistics:
    """Compute bracket counts, min, max and mean for validated ages.

    ``ages`` must hold exactly ``FIELD_COUNT`` integers within the accepted
    age range; anything else is a caller bug and raises ``ValueError``.
    """

    values = tuple(int(age) for age in ages)
    if len(values) != FIELD_COUNT:
        raise ValueError(f"Expected {FIELD_COUNT} ages, got {len(values)}")
    out_of_range = [age for age in values if not MIN_AGE <= age <= MAX_AGE]
    if out_of_range:
        raise ValueError(f"Ages outside {MIN_AGE}-{MAX_AGE}: {out_of_range}")

    counts = {bracket: 0 for bracket in AgeBracket}
    for age in values:
        counts[AgeBracket.classify(age)] += 1

    # Exact decimal division so the rounding rule is applied to the true mean.
    mean = round_half_up(Decimal(sum(values)) / Decimal(len(values)))

    stats = AgeStatistics(
        ages=values,
        minors=counts[AgeBracket.MINOR],
        adults=counts[AgeBracket.ADULT],
        seniors=counts[AgeBracket.SENIOR],
        minimum=min(values),
        maximum=max(values),
        mean=mean,
    )
    _LOGGER.debug("Computed statistics %s", stats.to_dict())
    return stats
