"""Search page widgets."""

import streamlit as st

from src.app.views.common import render_image
from src.app.views.constants import (
    LOGO_ASSET,
    LOGO_WIDTH,
    SEARCH_BUTTON_LABEL,
    SEARCH_PLACEHOLDER,
)


def render_logo() -> None:
    _, col, _ = st.columns([1, 4, 1])
    with col:
        render_image(LOGO_ASSET, width=LOGO_WIDTH)


def render_search_form() -> tuple[str, bool]:
    """Render the identifier input with its submit button.

    The input is cleared after every submission.

    Returns:
        Tuple of (typed identifier, whether the form was submitted)
    """
    with st.form("search_form", clear_on_submit=True):
        query = st.text_input(
            "USN No.",
            placeholder=SEARCH_PLACEHOLDER,
            label_visibility="collapsed",
        )
        submitted = st.form_submit_button(SEARCH_BUTTON_LABEL)
    return query, submitted


def render_status(message: str) -> None:
    st.info(message)
