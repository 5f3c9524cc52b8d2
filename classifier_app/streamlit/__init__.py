"""Streamlit front end package.

The app talks to the backend exclusively over HTTP through ApiClient.
"""

from .session import get_session, get_auth, get_uploader, SessionState

__all__ = [
    "get_session",
    "get_auth",
    "get_uploader",
    "SessionState",
]
