import pandas as pd
import streamlit as st

from typing import Any
from txdash.app.naming_conventions import TransactionFields, DisplayFields, LOADING_TEXT
from txdash.app.utils.state import DashboardState

columns_order = [
    (TransactionFields.TITLE.value, DisplayFields.TITLE.value),
    (TransactionFields.DESCRIPTION.value, DisplayFields.DESCRIPTION.value),
    (TransactionFields.PRICE.value, DisplayFields.PRICE.value),
    (TransactionFields.CATEGORY.value, DisplayFields.CATEGORY.value),
    (TransactionFields.DATE_OF_SALE.value, DisplayFields.DATE_OF_SALE.value),
    (TransactionFields.SOLD.value, DisplayFields.SOLD.value),
]


def format_sale_date(value: Any) -> str:
    """format a date of sale as a short M/D/YYYY date, "Invalid Date" if it can't be parsed"""
    date = pd.to_datetime(value, errors='coerce', utc=True)
    if pd.isna(date):
        return 'Invalid Date'
    return f'{date.month}/{date.day}/{date.year}'


def format_sold(value: Any) -> str:
    return 'Yes' if value else 'No'


def transactions_to_frame(transactions: Any) -> pd.DataFrame:
    """
    Project the transactions list into the table displayed on the dashboard.

    Parameters
    ----------
    transactions : Any
        The transactions list as received from the backend, a list of transaction records

    Returns
    -------
    pd.DataFrame
        A DataFrame with the display columns, indexed by the transaction id. Empty if the transactions are not a list
    """
    display_columns = [display for _, display in columns_order]
    if not isinstance(transactions, list):
        return pd.DataFrame(columns=display_columns)

    rows = []
    ids = []
    for record in transactions:
        if not isinstance(record, dict):
            continue
        ids.append(record.get(TransactionFields.ID.value))
        rows.append({
            DisplayFields.TITLE.value: record.get(TransactionFields.TITLE.value),
            DisplayFields.DESCRIPTION.value: record.get(TransactionFields.DESCRIPTION.value),
            DisplayFields.PRICE.value: record.get(TransactionFields.PRICE.value),
            DisplayFields.CATEGORY.value: record.get(TransactionFields.CATEGORY.value),
            DisplayFields.DATE_OF_SALE.value: format_sale_date(record.get(TransactionFields.DATE_OF_SALE.value)),
            DisplayFields.SOLD.value: format_sold(record.get(TransactionFields.SOLD.value)),
        })
    return pd.DataFrame(rows, columns=display_columns, index=pd.Index(ids, name=TransactionFields.ID.value))


def render_transactions_table(state: DashboardState) -> None:
    """Display the transactions table, or a loading text while the transactions are being fetched"""
    if state.loading:
        st.write(LOADING_TEXT)
        return
    st.dataframe(transactions_to_frame(state.transactions), hide_index=True, width='stretch')
