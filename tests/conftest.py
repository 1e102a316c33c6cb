import threading
import pytest

from typing import Callable
from txdash.app.exceptions import FetchError
from txdash.app.naming_conventions import Endpoints, QueryParams
from txdash.app.utils.state import DashboardState


class FakeDashboardRepository:
    """
    A stand-in for the DashboardRepository which records every request and answers from in-memory payloads.
    Setting a payload to a FetchError instance makes the matching request fail with it.
    """
    def __init__(self, payloads: dict, state: DashboardState | None = None):
        self.payloads = payloads
        self.state = state
        self.calls = []
        self.loading_during_transactions = []
        self.hooks = {}
        self._lock = threading.Lock()

    def get_transactions(self, search: str, page: int, per_page: int):
        if self.state is not None:
            self.loading_during_transactions.append(self.state.loading)
        return self._answer(Endpoints.TRANSACTIONS.value, {QueryParams.SEARCH.value: search,
                                                           QueryParams.PAGE.value: page,
                                                           QueryParams.PER_PAGE.value: per_page})

    def get_statistics(self, month: str):
        return self._answer(Endpoints.STATISTICS.value, {QueryParams.MONTH.value: month})

    def get_bar_chart(self, month: str):
        return self._answer(Endpoints.BAR_CHART.value, {QueryParams.MONTH.value: month})

    def get_pie_chart(self, month: str):
        return self._answer(Endpoints.PIE_CHART.value, {QueryParams.MONTH.value: month})

    def _answer(self, endpoint: str, params: dict):
        with self._lock:
            self.calls.append((endpoint, params))
        if endpoint in self.hooks:
            self.hooks[endpoint]()
        payload = self.payloads[endpoint]
        if isinstance(payload, FetchError):
            raise payload
        return payload


class StateFixtures:
    @pytest.fixture(scope='function')
    def state(self) -> DashboardState:
        """return a fresh view state, as created on the first run of the page"""
        return DashboardState()


class DataFixtures:
    @pytest.fixture(scope='function')
    def fake_transactions_maker(self, faker) -> Callable:
        """
        return a function that creates fake transaction records in the shape the backend sends them
        """
        def example_data(length: int = 10) -> list[dict]:
            return [
                {
                    '_id': faker.uuid4(),
                    'title': faker.word(),
                    'description': faker.sentence(),
                    'price': float(faker.pydecimal(left_digits=3, right_digits=2, positive=True)),
                    'category': faker.random_element(["men's clothing", 'jewelery', 'electronics']),
                    'dateOfSale': faker.date_time_this_year().isoformat() + 'Z',
                    'sold': faker.pybool(),
                }
                for _ in range(length)
            ]
        return example_data

    @pytest.fixture(scope='function')
    def statistics(self) -> dict:
        return {'totalSales': 5230.5, 'totalSold': 12, 'totalNotSold': 3}

    @pytest.fixture(scope='function')
    def bar_chart_data(self) -> dict:
        return {'labels': ['0-100', '101-200', '201-300'],
                'datasets': [{'label': 'Number of Items', 'data': [4, 7, 1]}]}

    @pytest.fixture(scope='function')
    def pie_chart_data(self) -> dict:
        return {'labels': ['electronics', 'jewelery'],
                'datasets': [{'label': 'Items per Category', 'data': [8, 2]}]}

    @pytest.fixture(scope='function')
    def payloads(self, fake_transactions_maker, statistics, bar_chart_data, pie_chart_data) -> dict:
        """return a payload for every endpoint of the backend"""
        return {
            Endpoints.TRANSACTIONS.value: fake_transactions_maker(10),
            Endpoints.STATISTICS.value: statistics,
            Endpoints.BAR_CHART.value: bar_chart_data,
            Endpoints.PIE_CHART.value: pie_chart_data,
        }


class RepositoryFixtures(StateFixtures, DataFixtures):
    @pytest.fixture(scope='function')
    def fake_repository(self, payloads, state) -> FakeDashboardRepository:
        return FakeDashboardRepository(payloads, state)

