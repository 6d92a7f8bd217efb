"""Form state for the ten age fields.

The state lives in a mutable mapping so the same code drives Streamlit's
``st.session_state`` at runtime and a plain ``dict`` in tests. Raw values
are stored under the widget keys (``age_0`` .. ``age_9``) so the text
inputs and the form always agree.
"""

from __future__ import annotations

from enum import Enum
from typing import MutableMapping, Optional

from .analysis import FIELD_COUNT, AgeStatistics, compute_statistics
from .i18n import ENGLISH, Messages
from .utils.logging import get_logger
from .utils.validators import require_complete, validate_age

_LOGGER = get_logger(__name__)

ERRORS_KEY = "age_errors"
RESULT_KEY = "age_result"


class FormPhase(str, Enum):
    EDITING = "editing"
    RESULT = "result"


def field_key(index: int) -> str:
    return f"age_{index}"


class AgeForm:
    """Editing/Result state machine over the ten age entries."""

    def __init__(self, state: MutableMapping, messages: Messages = ENGLISH) -> None:
        self._state = state
        self._messages = messages
        self.ensure_defaults()

    def ensure_defaults(self) -> None:
        for index in range(FIELD_COUNT):
            self._state.setdefault(field_key(index), "")
        self._state.setdefault(ERRORS_KEY, [""] * FIELD_COUNT)
        self._state.setdefault(RESULT_KEY, None)

    @property
    def values(self) -> list[str]:
        return [self._state[field_key(index)] or "" for index in range(FIELD_COUNT)]

    @property
    def errors(self) -> list[str]:
        return list(self._state[ERRORS_KEY])

    @property
    def result(self) -> Optional[AgeStatistics]:
        return self._state[RESULT_KEY]

    @property
    def phase(self) -> FormPhase:
        return FormPhase.RESULT if self.result is not None else FormPhase.EDITING

    def _check_index(self, index: int) -> None:
        if not 0 <= index < FIELD_COUNT:
            raise IndexError(f"Age field index {index} outside 0-{FIELD_COUNT - 1}")

    def _set_error(self, index: int, message: str) -> None:
        errors = list(self._state[ERRORS_KEY])
        errors[index] = message
        self._state[ERRORS_KEY] = errors

    def revalidate(self, index: int) -> str:
        """Validate the stored value of one field and record its error.

        Any displayed result is discarded since the inputs changed.
        """

        self._check_index(index)
        raw = self._state[field_key(index)] or ""
        message = validate_age(raw, self._messages).message
        self._set_error(index, message)
        self._state[RESULT_KEY] = None
        return message

    def update_entry(self, index: int, raw: str) -> str:
        """Store ``raw`` for field ``index`` and validate that field only."""

        self._check_index(index)
        self._state[field_key(index)] = raw
        return self.revalidate(index)

    def can_submit(self) -> bool:
        """True when all fields are filled and none carries an error."""

        return not any(self.errors) and require_complete(self.values)

    def submit(self) -> Optional[AgeStatistics]:
        """Re-validate every field and compute statistics when all pass."""

        results = [validate_age(raw, self._messages) for raw in self.values]
        self._state[ERRORS_KEY] = [result.message for result in results]

        failed = [index for index, result in enumerate(results) if not result.valid]
        if failed:
            _LOGGER.info("Submit blocked, %d invalid field(s): %s", len(failed), failed)
            self._state[RESULT_KEY] = None
            return None

        stats = compute_statistics([result.value for result in results])
        self._state[RESULT_KEY] = stats
        _LOGGER.info(
            "Computed statistics: minors=%d adults=%d seniors=%d mean=%.2f",
            stats.minors,
            stats.adults,
            stats.seniors,
            stats.mean,
        )
        return stats

    def reset(self) -> None:
        """Clear every field, error and result."""

        for index in range(FIELD_COUNT):
            self._state[field_key(index)] = ""
        self._state[ERRORS_KEY] = [""] * FIELD_COUNT
        self._state[RESULT_KEY] = None
        _LOGGER.info("Form reset")
