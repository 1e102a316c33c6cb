import pytest

from streamlit.testing.v1 import AppTest

from tests.conftest import DataFixtures
from txdash.app.components.transactions_table import format_sale_date, format_sold, transactions_to_frame
from txdash.app.components.statistics_panel import statistics_to_lines


class TestTransactionsTable(DataFixtures):
    def test_sold_flag_renders_yes_or_no(self):
        assert format_sold(True) == 'Yes'
        assert format_sold(False) == 'No'

    @pytest.mark.parametrize('value, expected', [
        ('2021-11-27T20:29:54+05:30', '11/27/2021'),
        ('2022-03-05T00:00:00.000Z', '3/5/2022'),
        ('2022-07-15', '7/15/2022'),
        ('not a date', 'Invalid Date'),
        (None, 'Invalid Date'),
    ])
    def test_sale_date_format(self, value, expected):
        assert format_sale_date(value) == expected

    def test_frame_has_a_row_per_record(self, fake_transactions_maker):
        transactions = fake_transactions_maker(7)
        df = transactions_to_frame(transactions)

        assert list(df.columns) == ['Title', 'Description', 'Price', 'Category', 'Date of Sale', 'Sold']
        assert df.shape == (7, 6)
        assert list(df.index) == [t['_id'] for t in transactions]
        assert df['Title'].to_list() == [t['title'] for t in transactions]
        assert df['Sold'].to_list() == ['Yes' if t['sold'] else 'No' for t in transactions]

    def test_frame_of_a_single_record(self):
        df = transactions_to_frame([{'_id': '1', 'title': 'Backpack', 'description': 'Fits 15 inch laptops',
                                     'price': 109.95, 'category': "men's clothing",
                                     'dateOfSale': '2021-10-27T20:29:54+05:30', 'sold': False}])

        row = df.iloc[0]
        assert row['Title'] == 'Backpack'
        assert row['Price'] == 109.95
        assert row['Date of Sale'] == '10/27/2021'
        assert row['Sold'] == 'No'

    @pytest.mark.parametrize('transactions', [[], {}, None, {'transactions': []}])
    def test_frame_of_no_records_is_empty(self, transactions):
        df = transactions_to_frame(transactions)

        assert df.empty
        assert 'Sold' in df.columns


class TestStatisticsPanel(DataFixtures):
    def test_statistics_lines(self, statistics):
        assert statistics_to_lines(statistics) == ['Total Sales: 5230.5', 'Total Sold: 12', 'Total Not Sold: 3']

    def test_missing_statistics_are_blank(self):
        assert statistics_to_lines({}) == ['Total Sales: ', 'Total Sold: ', 'Total Not Sold: ']
        assert statistics_to_lines({'totalSold': 0}) == ['Total Sales: ', 'Total Sold: 0', 'Total Not Sold: ']


def _transactions_table(loading: bool):
    from txdash.app.components.transactions_table import render_transactions_table
    from txdash.app.utils.state import DashboardState

    state = DashboardState()
    state.set_transactions([{'_id': '1', 'title': 'Backpack', 'description': 'Fits 15 inch laptops', 'price': 109.95,
                             'category': "men's clothing", 'dateOfSale': '2021-10-27', 'sold': True}])
    state.set_loading(loading)
    render_transactions_table(state)


class TestRenderTransactionsTable:
    def test_loading_replaces_the_table(self):
        at = AppTest.from_function(_transactions_table, args=(True,))
        at.run()

        assert not at.exception
        assert [m.value for m in at.markdown] == ['Loading...']
        assert len(at.dataframe) == 0

    def test_table_is_shown_once_loaded(self):
        at = AppTest.from_function(_transactions_table, args=(False,))
        at.run()

        assert not at.exception
        assert len(at.markdown) == 0
        assert at.dataframe[0].value['Sold'].to_list() == ['Yes']
