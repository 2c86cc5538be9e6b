"""Result Page.

Wiring layer that shows the outcome of the last lookup: the student's
bus allocation, or the "not available" message.
"""

import streamlit as st
from loguru import logger

from src.app.logic.result import build_result_card
from src.app.views.common import apply_theme, render_app_bar, render_empty_state
from src.app.views.constants import LOOKUP_OUTCOME_KEY, SEARCH_PAGE
from src.app.views.result import render_result_card
from src.config.settings import load_config
from src.core.config import settings

st.set_page_config(
    page_title="Result",
    page_icon="🚌",
    layout="centered",
)
apply_theme()
render_app_bar("Result")

outcome = st.session_state.get(LOOKUP_OUTCOME_KEY)
if outcome is None:
    render_empty_state("No search yet. Enter a USN No. on the search page.")
    st.page_link(SEARCH_PAGE, label="Back to search", icon="🔍")
    st.stop()

try:
    config = load_config(settings.config_path)
    card = build_result_card(outcome, config.display)
    render_result_card(card)
except Exception as e:
    st.exception(e)
    logger.exception(f"Result page error: {e}")

if st.button("Search again"):
    st.switch_page(SEARCH_PAGE)
