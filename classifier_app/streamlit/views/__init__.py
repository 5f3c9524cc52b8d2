"""Streamlit page views."""

from .account import render_account_page
from .predict import render_predict_page

__all__ = [
    "render_account_page",
    "render_predict_page",
]
