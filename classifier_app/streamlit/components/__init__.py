"""Reusable Streamlit UI components."""

from .auth_form import render_auth_form
from .gallery import render_results_gallery, render_result_card
from .zoom_modal import render_zoom_modal

__all__ = [
    "render_auth_form",
    "render_results_gallery",
    "render_result_card",
    "render_zoom_modal",
]
