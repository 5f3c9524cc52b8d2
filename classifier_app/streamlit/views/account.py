"""Account page - login, registration and current identity."""

import streamlit as st

from classifier_app.streamlit.components.auth_form import render_auth_form
from classifier_app.streamlit.session import get_auth, get_session, reset_session


def render_account_page() -> None:
    """Render the account page."""
    state = get_session()
    auth = get_auth()

    st.header("Account")

    if auth.state.is_authenticated:
        name = auth.state.session.display_name
        st.success(f"Logged in as {name}" if name else "Logged in")
        if auth.state.error:
            st.warning(auth.state.error)
        st.info("Your predictions are saved to your account.")
        if st.button("Log out"):
            reset_session()
            st.rerun()
        return

    st.caption("Log in to save your predictions. Predictions work without an account.")
    render_auth_form(auth, state.keyboard)
