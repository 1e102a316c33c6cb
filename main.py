import streamlit as st

st.set_page_config(page_title='Transaction Dashboard', layout='wide')

pg = st.navigation(
    [
        st.Page("txdash/app/dashboard.py", title="Transaction Dashboard"),
    ]
)
pg.run()
