"""Login/register form."""

import streamlit as st

from classifier_app.constants import SUBMIT_KEY
from classifier_app.core.auth import AuthSession
from classifier_app.core.keyboard import KeyboardListener
from classifier_app.core.models import AuthMode

MODE_KEY = "auth_mode"
FIELD_KEYS = {
    "identifier": "auth_identifier",
    "secret": "auth_secret",
    "confirm_secret": "auth_confirm",
}


def render_auth_form(auth: AuthSession, keyboard: KeyboardListener) -> None:
    """
    Render the mode toggle and the credential form.

    Enter inside a Streamlit form submits it; the submission is dispatched as
    an Enter key event to whatever handler the form has bound.
    """
    state = auth.state

    st.radio(
        "Mode",
        options=[AuthMode.LOGIN.value, AuthMode.REGISTER.value],
        format_func=str.title,
        index=0 if state.mode == AuthMode.LOGIN else 1,
        key=MODE_KEY,
        horizontal=True,
        label_visibility="collapsed",
        on_change=_on_mode_change,
        args=(auth,),
    )

    with auth.bind_enter(keyboard):
        with st.form("auth_form"):
            st.text_input("Username", key=FIELD_KEYS["identifier"])
            st.text_input("Password", type="password", key=FIELD_KEYS["secret"])
            if state.mode == AuthMode.REGISTER:
                st.text_input("Confirm password", type="password", key=FIELD_KEYS["confirm_secret"])

            submitted = st.form_submit_button("Submit", type="primary", use_container_width=True)

        if submitted:
            _sync_fields(auth)
            with st.spinner("Signing in..."):
                keyboard.dispatch(SUBMIT_KEY)

    if state.error:
        st.error(state.error)
    elif state.is_authenticated:
        st.rerun()


def _on_mode_change(auth: AuthSession) -> None:
    auth.set_mode(st.session_state[MODE_KEY])
    if auth.state.mode == AuthMode.LOGIN:
        st.session_state[FIELD_KEYS["confirm_secret"]] = ""


def _sync_fields(auth: AuthSession) -> None:
    """Copy widget values into the auth state before submitting."""
    for name, key in FIELD_KEYS.items():
        if name == "confirm_secret" and auth.state.mode != AuthMode.REGISTER:
            continue
        auth.update_field(name, st.session_state.get(key, ""))
