"""Session state management for the Streamlit app."""

from dataclasses import dataclass, field
from typing import Set

import streamlit as st

from classifier_app.api_client import ApiClient
from classifier_app.core.auth import AuthSession
from classifier_app.core.keyboard import KeyboardListener
from classifier_app.core.models import AuthState, PredictionState
from classifier_app.core.uploader import PredictionUploader


@dataclass
class SessionState:
    """Centralized per-browser-session state container."""

    # One client per browser session; the auth cookie lives on it
    client: ApiClient = field(default_factory=ApiClient)

    auth: AuthState = field(default_factory=AuthState)
    predictions: PredictionState = field(default_factory=PredictionState)
    keyboard: KeyboardListener = field(default_factory=KeyboardListener)

    # Uploads already sent to the predictor (Streamlit reruns keep the file)
    processed_uploads: Set[str] = field(default_factory=set)

    current_page: str = "predict"


def get_session() -> SessionState:
    """Get or create session state."""
    if "app_state" not in st.session_state:
        st.session_state.app_state = SessionState()
    return st.session_state.app_state


def reset_session() -> None:
    """Reset session state to defaults."""
    st.session_state.app_state = SessionState()


def get_auth() -> AuthSession:
    """AuthSession bound to this session's client and auth state."""
    state = get_session()
    return AuthSession(state.client, state.auth)


def get_uploader() -> PredictionUploader:
    """PredictionUploader bound to this session's client and prediction state."""
    state = get_session()
    return PredictionUploader(state.client, state.predictions)


def set_current_page(page: str) -> None:
    get_session().current_page = page
