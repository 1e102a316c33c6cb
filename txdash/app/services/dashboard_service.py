import asyncio
import logging

from dataclasses import dataclass
from typing import Any, Callable
from txdash.app.exceptions import FetchError
from txdash.app.data_access.dashboard_repository import DashboardRepository
from txdash.app.naming_conventions import StateSlices, TRANSACTIONS_PAGE, TRANSACTIONS_PER_PAGE
from txdash.app.utils.state import DashboardState

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """The outcome of a single fetch, returned to the caller instead of raised"""
    slice: str
    ok: bool
    stale: bool = False
    error: FetchError | None = None


class DashboardService:
    def __init__(self, repository: DashboardRepository, state: DashboardState):
        """
        Initializes the DashboardService, which fetches the dashboard data from the backend into the view state.

        Parameters
        ----------
        repository : DashboardRepository
            The repository used to send the requests to the backend
        state : DashboardState
            The view state to populate with the fetched data
        """
        self.repository = repository
        self.state = state

    async def sync_month(self, month: str) -> list[FetchResult]:
        """
        Select the month and fetch all the dashboard data for it. The four fetches are issued concurrently and each
        one updates its own slice of the state on success. A month that is already synced is not fetched again.

        Parameters
        ----------
        month : str
            The month to select

        Returns
        -------
        list[FetchResult]
            The results of the transactions, statistics, bar chart and pie chart fetches, empty if nothing was fetched
        """
        if month == self.state.synced_month:
            return []

        self.state.set_month(month)
        self.state.synced_month = month
        logger.info('Fetching dashboard data for %s', month)
        results = await asyncio.gather(
            self.fetch_transactions(),
            self.fetch_statistics(),
            self.fetch_bar_chart_data(),
            self.fetch_pie_chart_data(),
        )
        return list(results)

    async def search(self) -> FetchResult:
        """
        Fetch the transactions list again. The current search text is not part of the request.

        Returns
        -------
        FetchResult
            The result of the transactions fetch
        """
        return await self.fetch_transactions()

    async def fetch_transactions(self) -> FetchResult:
        slice_ = StateSlices.TRANSACTIONS
        epoch = self.state.begin_request(slice_)
        self.state.set_loading(True)
        try:
            # the backend always receives an empty search, whatever is typed in the search box
            data = await asyncio.to_thread(
                self.repository.get_transactions, '', TRANSACTIONS_PAGE, TRANSACTIONS_PER_PAGE
            )
        except FetchError as e:
            logger.error('Error fetching transactions: %s', e)
            return FetchResult(slice_.value, ok=False, error=e)
        finally:
            # a newer transactions request owns the loading flag
            if self.state.is_current(slice_, epoch):
                self.state.set_loading(False)
        return self._apply(slice_, epoch, data, self.state.set_transactions)

    async def fetch_statistics(self) -> FetchResult:
        return await self._fetch_month_slice(
            StateSlices.STATISTICS, self.repository.get_statistics, self.state.set_statistics, 'statistics'
        )

    async def fetch_bar_chart_data(self) -> FetchResult:
        return await self._fetch_month_slice(
            StateSlices.BAR_CHART, self.repository.get_bar_chart, self.state.set_bar_chart_data, 'bar chart data'
        )

    async def fetch_pie_chart_data(self) -> FetchResult:
        return await self._fetch_month_slice(
            StateSlices.PIE_CHART, self.repository.get_pie_chart, self.state.set_pie_chart_data, 'pie chart data'
        )

    async def _fetch_month_slice(self, slice_: StateSlices, request: Callable[[str], Any],
                                 setter: Callable[[Any], None], name: str) -> FetchResult:
        epoch = self.state.begin_request(slice_)
        month = self.state.month
        try:
            data = await asyncio.to_thread(request, month)
        except FetchError as e:
            logger.error('Error fetching %s: %s', name, e)
            return FetchResult(slice_.value, ok=False, error=e)
        return self._apply(slice_, epoch, data, setter)

    def _apply(self, slice_: StateSlices, epoch: int, data: Any, setter: Callable[[Any], None]) -> FetchResult:
        if not self.state.is_current(slice_, epoch):
            logger.debug('Dropping a stale %s response (epoch %d)', slice_.value, epoch)
            return FetchResult(slice_.value, ok=True, stale=True)
        setter(data)
        return FetchResult(slice_.value, ok=True)
