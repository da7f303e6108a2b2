import html
import logging
import re

import streamlit as st

from domain.constants import ERROR_COLOR, SUCCESS_COLOR

logger = logging.getLogger(__name__)

PRIMARY_ACCENT = "#2563EB"  # blue-600
GRAY_BORDER = "#1f2937"

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!:~|<>$])")


def inject_base_css():
    """Base styles; re-emitted on every run since a rerun clears the page.

    The `.step` and `.hidden` rules carry view state (active recovery step,
    closed modal), not just looks.
    """
    st.markdown(
        f"""
        <style>
        .view-error {{font-weight:600;}}
        .lumo-root {{border-bottom:1px solid {GRAY_BORDER}; margin-bottom:0.8rem;}}
        .lumo-root a {{color:{PRIMARY_ACCENT};}}
        .step {{display:none;}}
        .step.active {{display:block;}}
        .hidden {{display:none;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


@st.cache_data(show_spinner=False)
def load_stylesheet(href: str, _assets) -> str:
    response = _assets.fetch(href)
    if not response.ok:
        logger.warning(f"Stylesheet {href} unavailable ({response.status})")
        return ""
    return response.text


def inject_view_css(href: str, assets):
    """Render the managed view stylesheet; Streamlit cannot load <link> tags, so inline it."""
    css = load_stylesheet(href, assets)
    if css:
        st.markdown(f"<style id='view-css'>{css}</style>", unsafe_allow_html=True)


def render_markup(markup: str):
    st.markdown(f"<div class='lumo-root'>{markup}</div>", unsafe_allow_html=True)


def render_feedback(feedback):
    if feedback.spinner_visible:
        st.caption("⏳ Working...")
    if feedback.hidden or not feedback.message:
        return
    if feedback.color == SUCCESS_COLOR:
        st.success(feedback.message)
    elif feedback.color == ERROR_COLOR:
        st.error(feedback.message)
    else:
        st.markdown(f"<p id='message'>{html.escape(feedback.message)}</p>", unsafe_allow_html=True)


def escape_markdown(text: str) -> str:
    """Backslash-escape markdown so user text in widget labels shows literally."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text or "")


def render_view_links(links, key_prefix: str):
    """In-app links of the current view as buttons; returns the clicked hash, if any.

    Plain anchors would open a new browser session, losing the token and history.
    """
    if not links:
        return None
    cols = st.columns(len(links))
    for i, ((label, target), col) in enumerate(zip(links, cols)):
        with col:
            if st.button(label or target, key=f"{key_prefix}_link_{i}"):
                return target
    return None
