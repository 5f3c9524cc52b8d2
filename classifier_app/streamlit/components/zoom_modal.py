"""Zoomed view of a single result."""

import streamlit as st

from classifier_app.api_client import ApiClient
from classifier_app.constants import Messages
from classifier_app.core.models import PredictionResult


@st.dialog("Result", width="large")
def render_zoom_modal(result: PredictionResult, client: ApiClient) -> None:
    """Show a result enlarged."""
    if result.is_displayable:
        st.image(client.image_url(result.src), use_container_width=True)
    else:
        st.error(Messages.IMAGE_NOT_FOUND)

    st.markdown(f"### {result.title}")
    st.caption(f"Confidence: {result.confidence}")

    if st.button("Close", use_container_width=True):
        st.rerun()
