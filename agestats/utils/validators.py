"""Input validation helpers for the age fields of the Streamlit form."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..i18n import ENGLISH, AgeError, Messages, error_message
from .logging import get_logger

_LOGGER = get_logger(__name__)

MIN_AGE = 1
MAX_AGE = 120

_INTEGER_REGEX = re.compile(r"(?P<sign>[+-]?)(?P<digits>[0-9]+)")
# No age in range has more significant digits than MAX_AGE.
_MAX_DIGITS = len(str(MAX_AGE))


@dataclass(frozen=True)
class ValidationResult:
    """Represents validation outcome."""

    valid: bool
    error: AgeError | None = None
    value: int | None = None
    message: str = ""


def _classify(raw: str) -> tuple[AgeError | None, int | None]:
    text = (raw or "").strip()
    if not text:
        return AgeError.MISSING_VALUE, None
    match = _INTEGER_REGEX.fullmatch(text)
    if match is None:
        return AgeError.NOT_A_NUMBER, None
    significant = match.group("digits").lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS:
        return AgeError.OUT_OF_RANGE, None
    age = int(match.group("sign") + significant)
    if age < MIN_AGE or age > MAX_AGE:
        return AgeError.OUT_OF_RANGE, age
    return None, age


def validate_age(raw: str, messages: Messages = ENGLISH) -> ValidationResult:
    """Validate the raw text of one age field.

    Checks run in order and the first failure wins: empty, not an integer,
    outside ``[MIN_AGE, MAX_AGE]``. Only plain base-10 integers with an
    optional sign are accepted, so ``"12.5"`` and ``"12abc"`` are not numbers.
    """

    error, age = _classify(raw)
    if error is not None:
        _LOGGER.debug("Rejected age %r: %s", raw, error.value)
        return ValidationResult(False, error=error, message=error_message(error, messages))
    return ValidationResult(True, value=age)


def parse_age(raw: str) -> int:
    """Return the age encoded in ``raw`` or raise ``ValueError``."""

    error, age = _classify(raw)
    if error is not None:
        raise ValueError(f"Invalid age {raw!r}: {error.value}")
    if age is None:
        raise ValueError(f"Invalid age {raw!r}")
    return age


def require_complete(raw_values: list[str]) -> bool:
    """Return True when every field is filled in and passes validation."""

    return all(validate_age(value).valid for value in raw_values)
