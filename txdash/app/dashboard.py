import asyncio
import streamlit as st

from txdash.app.components.month_selector import select_month, search_box
from txdash.app.components.statistics_panel import render_statistics
from txdash.app.components.transactions_table import render_transactions_table
from txdash.app.data_access.dashboard_repository import DashboardRepository
from txdash.app.naming_conventions import LOADING_TEXT
from txdash.app.services.dashboard_service import DashboardService
from txdash.app.utils.config import load_settings
from txdash.app.utils.logs import configure_logging
from txdash.app.utils.plotting import bar_plot_from_dataset, pie_plot_from_dataset
from txdash.app.utils.state import get_dashboard_state

settings = load_settings()
configure_logging(settings)
state = get_dashboard_state(settings.default_month)
service = DashboardService(DashboardRepository(settings.backend_url, settings.request_timeout), state)

st.title('Transaction Dashboard')

month = select_month(state)
search_clicked = search_box(state)

st.header('Transactions')
table = st.empty()
if month != state.synced_month:
    table.write(LOADING_TEXT)
    asyncio.run(service.sync_month(month))
elif search_clicked:
    table.write(LOADING_TEXT)
    asyncio.run(service.search())
with table.container():
    render_transactions_table(state)

st.header('Statistics')
render_statistics(state.statistics)

st.header('Price Range Distribution')
st.plotly_chart(bar_plot_from_dataset(state.bar_chart_data, 'Price Range Distribution'), width='stretch',
                key='bar_chart')

st.header('Category Distribution')
st.plotly_chart(pie_plot_from_dataset(state.pie_chart_data, 'Category Distribution'), width='stretch',
                key='pie_chart')
