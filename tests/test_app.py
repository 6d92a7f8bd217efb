from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[1] / "agestats" / "main.py"

SCENARIO_AGES = [5, 17, 18, 25, 59, 60, 75, 1, 120, 40]


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("AGESTATS_LANGUAGE", "en")
    monkeypatch.delenv("AGESTATS_PAGE_TITLE", raising=False)
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    return at


def _fill(at, ages):
    for index, age in enumerate(ages):
        at.text_input(key=f"age_{index}").input(str(age))
    at.run()


def test_initial_state(app):
    assert not app.exception
    assert len(app.text_input) == 10
    assert app.button(key="calculate").disabled is True
    assert len(app.metric) == 0
    assert len(app.error) == 0


def test_calculate_shows_statistics(app):
    _fill(app, SCENARIO_AGES)
    assert app.button(key="calculate").disabled is False

    app.button(key="calculate").click().run()

    values = {metric.label: metric.value for metric in app.metric}
    assert values["Minors"] == "3"
    assert values["Adults"] == "4"
    assert values["Seniors"] == "3"
    assert values["Minimum age"] == "1 years"
    assert values["Maximum age"] == "120 years"
    assert values["Mean age"] == "42 years"
    assert app.session_state["age_result"].mean == 42.0


def test_out_of_range_field_blocks_calculation(app):
    _fill(app, [30] * 9 + [150])

    assert [error.value for error in app.error] == ["Age must be between 1 and 120 years"]
    assert app.button(key="calculate").disabled is True
    assert len(app.metric) == 0
    assert app.session_state["age_result"] is None


def test_reset_after_calculation(app):
    _fill(app, SCENARIO_AGES)
    app.button(key="calculate").click().run()
    assert len(app.metric) == 6

    app.button(key="reset").click().run()

    assert [field.value for field in app.text_input] == [""] * 10
    assert len(app.error) == 0
    assert len(app.metric) == 0
    assert app.session_state["age_result"] is None
    assert app.button(key="calculate").disabled is True


def test_spanish_labels(monkeypatch):
    monkeypatch.setenv("AGESTATS_LANGUAGE", "es")
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()

    assert at.title[0].value == "Programa de Análisis de Edades"
    assert at.text_input(key="age_0").label == "Persona 1"
