"""Presentation helpers for the results panel."""

from __future__ import annotations

from html import escape

import pandas as pd

from .analysis import AgeBracket, AgeStatistics
from .i18n import ENGLISH, Messages

TAG_STYLE = """
<style>
.age-tags {display: flex; flex-wrap: wrap; gap: 0.5rem; margin-top: 0.5rem;}
.age-tag {padding: 0.25rem 0.75rem; border-radius: 9999px; font-size: 0.875rem; font-weight: 500;}
.age-tag.minor {background: #dbeafe; color: #1e40af;}
.age-tag.adult {background: #dcfce7; color: #166534;}
.age-tag.senior {background: #ffedd5; color: #9a3412;}
</style>
"""


def bracket_label(bracket: AgeBracket, messages: Messages = ENGLISH) -> str:
    return {
        AgeBracket.MINOR: messages.minors,
        AgeBracket.ADULT: messages.adults,
        AgeBracket.SENIOR: messages.seniors,
    }[bracket]


def bracket_caption(bracket: AgeBracket, messages: Messages = ENGLISH) -> str:
    return {
        AgeBracket.MINOR: messages.minors_caption,
        AgeBracket.ADULT: messages.adults_caption,
        AgeBracket.SENIOR: messages.seniors_caption,
    }[bracket]


def format_years(value: float, messages: Messages = ENGLISH) -> str:
    """Format an age or mean with its unit, e.g. ``42 years`` or ``42.5 years``."""

    return f"{value:g} {messages.years}"


def render_age_tags(ages: tuple[int, ...] | list[int], messages: Messages = ENGLISH) -> str:
    """Return HTML for the colour-coded list of entered ages."""

    segments: list[str] = []
    for age in ages:
        bracket = AgeBracket.classify(age)
        segments.append(
            "<span class='age-tag {cls}'>{text}</span>".format(
                cls=bracket.value,
                text=escape(format_years(age, messages)),
            )
        )
    return f"<div class='age-tags'>{''.join(segments)}</div>"


def build_age_table(stats: AgeStatistics, messages: Messages = ENGLISH) -> pd.DataFrame:
    """One row per person with the entered age and its bracket."""

    rows = [
        {
            messages.table_person: messages.person_label.format(number=index + 1),
            messages.table_age: age,
            messages.table_bracket: bracket_label(AgeBracket.classify(age), messages),
        }
        for index, age in enumerate(stats.ages)
    ]
    return pd.DataFrame(rows, columns=[messages.table_person, messages.table_age, messages.table_bracket])
