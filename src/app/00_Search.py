"""Bus Lookup - Search Page (entry point).

Loads the student spreadsheet once per session, then looks up the
identifier typed by the user and hands the outcome to the result page.

Run with: streamlit run src/app/00_Search.py
"""

import streamlit as st
from loguru import logger

from src.app.logic.data_loader import GlobalDataLoader
from src.app.logic.search import search
from src.app.views.common import apply_theme, render_app_bar
from src.app.views.constants import LOOKUP_OUTCOME_KEY, RESULT_PAGE, SEARCH_STATE_KEY
from src.app.views.search import render_logo, render_search_form, render_status
from src.core.domain_models import SearchState, StillLoading

st.set_page_config(
    page_title="Search",
    page_icon="🚌",
    layout="centered",
)
apply_theme()
render_app_bar("Search")

try:
    loader = GlobalDataLoader()
except Exception as e:
    st.error(f"Failed to load configuration: {e}")
    logger.exception(f"Configuration error: {e}")
    raise e

if SEARCH_STATE_KEY not in st.session_state:
    st.session_state[SEARCH_STATE_KEY] = SearchState()

state: SearchState = st.session_state[SEARCH_STATE_KEY]

# One-shot load, settled before the form is shown
if state.is_loading:
    with st.spinner("Loading student data..."):
        state = loader.load_state()
    st.session_state[SEARCH_STATE_KEY] = state

render_logo()
query, submitted = render_search_form()

if submitted:
    outcome = search(state, query, loader.config.display.not_found_message)
    if isinstance(outcome, StillLoading):
        render_status(outcome.message)
    else:
        st.session_state[LOOKUP_OUTCOME_KEY] = outcome
        st.switch_page(RESULT_PAGE)
