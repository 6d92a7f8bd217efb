"""Streamlit front-end for the ten-person age statistics form."""

from __future__ import annotations

import sys
from pathlib import Path

if __package__ in (None, ""):
    # Allow running ``streamlit run agestats/main.py`` without installing the package.
    sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import streamlit as st

from agestats.analysis import FIELD_COUNT, AgeStatistics
from agestats.config import load_settings
from agestats.form import AgeForm, field_key
from agestats.i18n import Messages, get_messages
from agestats.rendering import (
    TAG_STYLE,
    bracket_caption,
    bracket_label,
    build_age_table,
    format_years,
    render_age_tags,
)
from agestats.utils.logging import configure_logging, get_logger

_SETTINGS = load_settings()

configure_logging(_SETTINGS.log_level)
_LOGGER = get_logger(__name__)

_MESSAGES = get_messages(_SETTINGS.language)
_FIELDS_PER_ROW = 5

st.set_page_config(page_title=_SETTINGS.page_title, layout="wide")
st.title(_MESSAGES.app_title)
st.markdown(_MESSAGES.app_intro)
st.markdown(TAG_STYLE, unsafe_allow_html=True)

form = AgeForm(st.session_state, _MESSAGES)


def _on_age_change(index: int) -> None:
    form.revalidate(index)


def _on_calculate() -> None:
    form.submit()


def _on_reset() -> None:
    form.reset()


def _render_inputs(messages: Messages) -> None:
    st.subheader(messages.input_header)
    errors = form.errors
    for row_start in range(0, FIELD_COUNT, _FIELDS_PER_ROW):
        columns = st.columns(_FIELDS_PER_ROW)
        for offset, column in enumerate(columns):
            index = row_start + offset
            with column:
                st.text_input(
                    messages.person_label.format(number=index + 1),
                    key=field_key(index),
                    placeholder=messages.age_placeholder,
                    on_change=_on_age_change,
                    args=(index,),
                )
                if errors[index]:
                    st.error(errors[index])


def _render_results(stats: AgeStatistics, messages: Messages) -> None:
    st.subheader(messages.results_header)

    for column, (bracket, count) in zip(st.columns(3), stats.counts_by_bracket().items()):
        with column:
            st.metric(bracket_label(bracket, messages), count)
            st.caption(bracket_caption(bracket, messages))

    min_col, max_col, mean_col = st.columns(3)
    min_col.metric(messages.minimum, format_years(stats.minimum, messages))
    max_col.metric(messages.maximum, format_years(stats.maximum, messages))
    mean_col.metric(messages.mean, format_years(stats.mean, messages))

    st.markdown(f"#### {messages.entered_ages}")
    st.markdown(render_age_tags(stats.ages, messages), unsafe_allow_html=True)

    with st.expander(messages.table_expander):
        st.dataframe(build_age_table(stats, messages), hide_index=True)


_render_inputs(_MESSAGES)

calculate_col, reset_col = st.columns(2)
with calculate_col:
    st.button(
        _MESSAGES.calculate,
        key="calculate",
        type="primary",
        disabled=not form.can_submit(),
        on_click=_on_calculate,
    )
with reset_col:
    st.button(_MESSAGES.reset, key="reset", on_click=_on_reset)

if any(form.errors):
    st.warning(_MESSAGES.submit_blocked)

if form.result is not None:
    _render_results(form.result, _MESSAGES)
    _LOGGER.debug("Rendered results for %d ages", len(form.result.ages))
