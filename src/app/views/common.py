"""Common UI components shared across pages.

Pure rendering functions for reusable Streamlit widgets.
"""

from pathlib import Path

import streamlit as st

from src.app.views.colors import APP_CSS
from src.core.config import settings


def apply_theme() -> None:
    """Inject the app palette. Call once per page, right after set_page_config."""
    st.markdown(APP_CSS, unsafe_allow_html=True)


def render_app_bar(title: str) -> None:
    """Render the colored title bar shown at the top of every page.

    Args:
        title: Page title
    """
    st.markdown(f'<div class="app-bar">{title}</div>', unsafe_allow_html=True)


def load_svg(name: str, assets_dir: Path | None = None) -> str:
    """Read a bundled SVG illustration as markup.

    Args:
        name: Asset file name without extension
        assets_dir: Override for the assets directory (defaults to settings.assets_dir)
    """
    path = (assets_dir or settings.assets_dir) / f"{name}.svg"
    return path.read_text(encoding="utf-8")


def render_image(source: str, width: int) -> None:
    """Render a bundled asset by name or a remote image by URL."""
    if source.startswith("http"):
        st.image(source, width=width)
    else:
        st.image(load_svg(source), width=width)


def render_empty_state(message: str, icon: str = "🚌") -> None:
    """Render empty state placeholder when there is nothing to show.

    Args:
        message: Message to display
        icon: Emoji icon to show
    """
    st.info(f"{icon} {message}")
