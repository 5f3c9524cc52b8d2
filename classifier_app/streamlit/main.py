"""
Main entry point for the Image Classifier Streamlit app.

This is a pure frontend that communicates with the backend via HTTP.
Run with: streamlit run classifier_app/streamlit/main.py
"""

import logging
from pathlib import Path
import sys

project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import streamlit as st

from classifier_app.config import get_config
from classifier_app.logging_config import configure_logging
from classifier_app.streamlit.session import get_session, set_current_page
from classifier_app.streamlit.views.account import render_account_page
from classifier_app.streamlit.views.predict import render_predict_page

logger = logging.getLogger(__name__)

PAGES = {
    "predict": ("Predict", render_predict_page),
    "account": ("Account", render_account_page),
}


def render_sidebar() -> str:
    """Render navigation and login status; returns the selected page id."""
    state = get_session()

    with st.sidebar:
        st.title(get_config().page_title)

        session = state.auth.session
        if session.is_authenticated:
            st.success(f"Logged in as {session.display_name or 'user'}")
        else:
            st.warning("Not logged in")
        st.divider()

        for page_id, (label, _) in PAGES.items():
            button_type = "primary" if state.current_page == page_id else "secondary"
            if st.button(label, key=f"nav_{page_id}", type=button_type, use_container_width=True):
                set_current_page(page_id)
                st.rerun()

        st.divider()
        st.caption(f"Backend: {state.client.base_url}")

    return state.current_page


def main() -> None:
    config = get_config()
    configure_logging(config)

    st.set_page_config(
        page_title=config.page_title,
        page_icon=config.page_icon,
        layout=config.layout,
    )

    page_id = render_sidebar()
    _, render_page = PAGES.get(page_id, PAGES["predict"])
    render_page()


if __name__ == "__main__":
    main()
