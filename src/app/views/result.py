"""Result page widgets."""

import html

import streamlit as st

from src.app.logic.result import Illustration, ResultCard
from src.app.views.common import render_image
from src.app.views.constants import PHOTO_WIDTH


def _image_source(image: Illustration | str) -> str:
    if isinstance(image, Illustration):
        return image.value
    return image


def render_result_card(card: ResultCard) -> None:
    """Render the illustration followed by the message or the labeled fields.

    Args:
        card: Prepared result card
    """
    _, col, _ = st.columns([1, 2, 1])
    with col:
        render_image(_image_source(card.image), width=PHOTO_WIDTH)

    if not card.is_found:
        st.markdown(
            f'<p class="result-text">{html.escape(card.message or "")}</p>',
            unsafe_allow_html=True,
        )
        return

    lines = "".join(
        f'<p class="result-text"><b>{html.escape(label)}: </b>{html.escape(value)}</p>'
        for label, value in card.fields
    )
    st.markdown(f'<div class="result-card">{lines}</div>', unsafe_allow_html=True)
