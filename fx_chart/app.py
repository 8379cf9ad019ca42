# app.py: exchange-rate history screen (run with: streamlit run fx_chart/app.py)
import asyncio

import streamlit as st

from fx_chart import FxChart, ScreenSession, build_figure


@st.cache_resource(show_spinner=False)
def get_fx_chart() -> FxChart:
    # One provider connection per server process; sessions are per browser tab.
    return FxChart()


def get_session() -> ScreenSession:
    if "fx_session" not in st.session_state:
        session = get_fx_chart().session()
        asyncio.run(session.refresh_currencies())
        st.session_state.fx_session = session
    return st.session_state.fx_session


st.set_page_config(page_title="Exchange rate history", layout="centered")
st.title("💱 Exchange rate history")

session = get_session()

currency = st.selectbox(
    "Select a currency",
    options=session.currencies,
    index=None,
    placeholder="Select currency",
)
session.select_currency(currency)

c_start, c_end = st.columns(2)
with c_start:
    session.set_start_date(st.date_input("Start", value=None))
with c_end:
    session.set_end_date(st.date_input("End", value=None))

if not session.currencies:
    st.info("No currencies available from the provider.")

if st.button("Load results", type="primary", use_container_width=True):
    with st.spinner("Loading exchange rates…"):
        asyncio.run(session.load())

st.plotly_chart(build_figure(session.chart), use_container_width=True)
