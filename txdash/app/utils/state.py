import streamlit as st

from typing import Any
from txdash.app.naming_conventions import DEFAULT_MONTH, StateSlices

STATE_KEY = 'dashboard_state'


class DashboardState:
    """
    The view state of the dashboard page: the filter selections, the last successfully fetched data and the loading
    flag. Every setter replaces its field as a whole, fields are never merged.

    Each data slice also keeps the epoch of its latest request, so a response that arrives after a newer request of
    the same slice was issued can be recognized and dropped.
    """
    def __init__(self, month: str = DEFAULT_MONTH):
        self.transactions: Any = []
        self.month: str = month
        self.search: str = ''
        self.statistics: Any = {}
        self.bar_chart_data: Any = {}
        self.pie_chart_data: Any = {}
        self.loading: bool = False
        self.synced_month: str | None = None
        self._epochs: dict[str, int] = {slice_.value: 0 for slice_ in StateSlices}

    def set_transactions(self, transactions: Any) -> None:
        self.transactions = transactions

    def set_month(self, month: str) -> None:
        self.month = month

    def set_search(self, search: str) -> None:
        self.search = search

    def set_statistics(self, statistics: Any) -> None:
        self.statistics = statistics

    def set_bar_chart_data(self, data: Any) -> None:
        self.bar_chart_data = data

    def set_pie_chart_data(self, data: Any) -> None:
        self.pie_chart_data = data

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    def begin_request(self, slice_: StateSlices) -> int:
        """
        Issue a new request epoch for the slice, superseding every request of the slice still in flight.

        Parameters
        ----------
        slice_ : StateSlices
            The data slice the request will update

        Returns
        -------
        int
            The epoch of the new request
        """
        self._epochs[slice_.value] += 1
        return self._epochs[slice_.value]

    def is_current(self, slice_: StateSlices, epoch: int) -> bool:
        """check whether the epoch belongs to the latest request of the slice"""
        return self._epochs[slice_.value] == epoch


def get_dashboard_state(default_month: str = DEFAULT_MONTH) -> DashboardState:
    """
    Get the dashboard state of the current session, creating it on the first run of the page.

    Parameters
    ----------
    default_month : str
        The month to select when the state is created

    Returns
    -------
    DashboardState
        The view state owned by the current session
    """
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DashboardState(default_month)
    return st.session_state[STATE_KEY]
