from enum import Enum

MONTHS = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]
DEFAULT_MONTH = 'March'

# the transactions list is always requested as the first page of 10 records
TRANSACTIONS_PAGE = 1
TRANSACTIONS_PER_PAGE = 10

LOADING_TEXT = 'Loading...'
SEARCH_PLACEHOLDER = 'Search by title, description, or price'


class Endpoints(Enum):
    TRANSACTIONS = '/api/transactions'
    STATISTICS = '/api/statistics'
    BAR_CHART = '/api/bar-chart'
    PIE_CHART = '/api/pie-chart'


class StateSlices(Enum):
    TRANSACTIONS = 'transactions'
    STATISTICS = 'statistics'
    BAR_CHART = 'bar_chart'
    PIE_CHART = 'pie_chart'


class QueryParams(Enum):
    SEARCH = 'search'
    PAGE = 'page'
    PER_PAGE = 'perPage'
    MONTH = 'month'


class TransactionFields(Enum):
    ID = '_id'
    TITLE = 'title'
    DESCRIPTION = 'description'
    PRICE = 'price'
    CATEGORY = 'category'
    DATE_OF_SALE = 'dateOfSale'
    SOLD = 'sold'


class StatisticsFields(Enum):
    TOTAL_SALES = 'totalSales'
    TOTAL_SOLD = 'totalSold'
    TOTAL_NOT_SOLD = 'totalNotSold'


class ChartFields(Enum):
    LABELS = 'labels'
    DATASETS = 'datasets'
    LABEL = 'label'
    DATA = 'data'


class DisplayFields(Enum):
    TITLE = 'Title'
    DESCRIPTION = 'Description'
    PRICE = 'Price'
    CATEGORY = 'Category'
    DATE_OF_SALE = 'Date of Sale'
    SOLD = 'Sold'
    TOTAL_SALES = 'Total Sales'
    TOTAL_SOLD = 'Total Sold'
    TOTAL_NOT_SOLD = 'Total Not Sold'
