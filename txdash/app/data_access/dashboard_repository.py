import logging
import requests

from typing import Any
from txdash.app.exceptions import FetchError
from txdash.app.naming_conventions import Endpoints, QueryParams

logger = logging.getLogger(__name__)


class DashboardRepository:
    transactions_endpoint = Endpoints.TRANSACTIONS.value
    statistics_endpoint = Endpoints.STATISTICS.value
    bar_chart_endpoint = Endpoints.BAR_CHART.value
    pie_chart_endpoint = Endpoints.PIE_CHART.value

    def __init__(self, base_url: str, timeout: float | None = None):
        """
        Initializes the DashboardRepository with the address of the dashboard backend.

        Parameters
        ----------
        base_url : str
            The base address of the backend, e.g. http://localhost:5001
        timeout : float | None
            The timeout in seconds of every request. None waits forever.
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def get_transactions(self, search: str, page: int, per_page: int) -> Any:
        """
        Get a page of the transactions list.

        Parameters
        ----------
        search : str
            The search text to filter the transactions by
        page : int
            The page number to fetch
        per_page : int
            The number of transactions per page

        Returns
        -------
        Any
            The decoded response body, a list of transaction records
        """
        params = {
            QueryParams.SEARCH.value: search,
            QueryParams.PAGE.value: page,
            QueryParams.PER_PAGE.value: per_page,
        }
        return self._get(self.transactions_endpoint, params)

    def get_statistics(self, month: str) -> Any:
        """Get the total sales, sold and not sold items of the month"""
        return self._get(self.statistics_endpoint, {QueryParams.MONTH.value: month})

    def get_bar_chart(self, month: str) -> Any:
        """Get the price range distribution dataset of the month"""
        return self._get(self.bar_chart_endpoint, {QueryParams.MONTH.value: month})

    def get_pie_chart(self, month: str) -> Any:
        """Get the category distribution dataset of the month"""
        return self._get(self.pie_chart_endpoint, {QueryParams.MONTH.value: month})

    def _get(self, endpoint: str, params: dict) -> Any:
        url = f'{self.base_url}{endpoint}'
        logger.debug('GET %s %s', url, params)
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise FetchError(str(e), endpoint) from e
        except ValueError as e:
            raise FetchError(f'Invalid JSON response: {e}', endpoint) from e
