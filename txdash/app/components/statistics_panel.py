import streamlit as st

from typing import Any
from txdash.app.naming_conventions import StatisticsFields, DisplayFields

statistics_lines = [
    (StatisticsFields.TOTAL_SALES.value, DisplayFields.TOTAL_SALES.value),
    (StatisticsFields.TOTAL_SOLD.value, DisplayFields.TOTAL_SOLD.value),
    (StatisticsFields.TOTAL_NOT_SOLD.value, DisplayFields.TOTAL_NOT_SOLD.value),
]


def statistics_to_lines(statistics: Any) -> list[str]:
    """
    Get the label/value lines of the statistics snapshot. A missing value is displayed as blank.
    """
    if not isinstance(statistics, dict):
        statistics = {}
    lines = []
    for field, label in statistics_lines:
        value = statistics.get(field)
        lines.append(f'{label}: {"" if value is None else value}')
    return lines


def render_statistics(statistics: Any) -> None:
    for line in statistics_to_lines(statistics):
        st.write(line)
