from __future__ import annotations

import pytest

from agestats.analysis import AgeStatistics
from agestats.form import ERRORS_KEY, RESULT_KEY, AgeForm, FormPhase, field_key
from agestats.i18n import SPANISH

VALID_AGES = ["5", "17", "18", "25", "59", "60", "75", "1", "120", "40"]


def _filled_form(values=VALID_AGES):
    form = AgeForm({})
    for index, raw in enumerate(values):
        form.update_entry(index, raw)
    return form


def test_defaults_are_seeded():
    state: dict = {}
    form = AgeForm(state)

    assert form.values == [""] * 10
    assert form.errors == [""] * 10
    assert form.result is None
    assert form.phase is FormPhase.EDITING
    assert state[field_key(9)] == ""
    assert not form.can_submit()


def test_existing_state_is_kept():
    state = {field_key(0): "33"}
    form = AgeForm(state)

    assert form.values[0] == "33"


def test_update_entry_validates_only_that_field():
    form = AgeForm({})

    message = form.update_entry(2, "abc")

    assert message == "Please enter a valid number"
    assert form.errors[2] == message
    assert form.errors[:2] == ["", ""]
    assert form.errors[3:] == [""] * 7


def test_update_entry_rejects_bad_index():
    form = AgeForm({})

    with pytest.raises(IndexError):
        form.update_entry(10, "5")
    with pytest.raises(IndexError):
        form.revalidate(-1)


def test_submit_with_all_valid_enters_result_phase():
    form = _filled_form()

    assert form.can_submit()
    stats = form.submit()

    assert isinstance(stats, AgeStatistics)
    assert form.result is stats
    assert form.phase is FormPhase.RESULT
    assert (stats.minors, stats.adults, stats.seniors) == (3, 4, 3)
    assert stats.mean == 42.0


def test_out_of_range_field_blocks_submit():
    form = _filled_form(["30"] * 9 + ["150"])

    assert form.errors[9] == "Age must be between 1 and 120 years"
    assert not form.can_submit()
    assert form.submit() is None
    assert form.result is None
    assert form.phase is FormPhase.EDITING


def test_submit_revalidates_every_field():
    state: dict = {}
    form = AgeForm(state)
    # Values written behind the form's back have no recorded error yet.
    for index in range(10):
        state[field_key(index)] = "30"
    state[field_key(4)] = ""

    assert form.submit() is None
    assert state[ERRORS_KEY][4] == "Please enter an age"
    assert state[RESULT_KEY] is None


def test_failed_submit_discards_previous_result():
    state: dict = {}
    form = AgeForm(state)
    for index in range(10):
        form.update_entry(index, "30")
    assert form.submit() is not None

    state[field_key(0)] = "0"
    assert form.submit() is None
    assert form.result is None


def test_editing_after_result_returns_to_editing():
    form = _filled_form()
    form.submit()

    form.update_entry(0, "6")

    assert form.result is None
    assert form.phase is FormPhase.EDITING
    assert form.can_submit()


def test_reset_restores_initial_state():
    form = _filled_form()
    form.update_entry(3, "oops")
    form.update_entry(3, "25")
    form.submit()

    form.reset()

    assert form.values == [""] * 10
    assert form.errors == [""] * 10
    assert form.result is None
    assert form.phase is FormPhase.EDITING


def test_reset_clears_errors_without_result():
    form = AgeForm({})
    form.update_entry(0, "999")

    form.reset()

    assert form.errors == [""] * 10


def test_messages_follow_catalogue():
    form = AgeForm({}, SPANISH)

    assert form.update_entry(0, "") == "Por favor ingrese una edad"
