import streamlit as st

from txdash.app.naming_conventions import MONTHS, SEARCH_PLACEHOLDER
from txdash.app.utils.state import DashboardState


def select_month(state: DashboardState) -> str:
    """
    This function creates a UI for selecting the month to view its statistics and charts. The selected month is
    returned, the state is only updated once the month is synced.
    """
    index = MONTHS.index(state.month) if state.month in MONTHS else 0
    return st.selectbox('Month', MONTHS, index=index, key='dashboard_month_selection', label_visibility='collapsed')


def search_box(state: DashboardState) -> bool:
    """
    This function creates a UI for typing a search text and requesting the transactions again. The search text is
    stored in the state.

    Returns
    -------
    bool
        True if the search button was clicked in this run
    """
    text_col, button_col = st.columns([5, 1])
    search = text_col.text_input(
        'Search',
        value=state.search,
        placeholder=SEARCH_PLACEHOLDER,
        key='dashboard_search_text',
        label_visibility='collapsed'
    )
    state.set_search(search)
    return button_col.button('Search', key='dashboard_search_button', width='stretch')
