"""Predict page - upload an image, show the label, browse recent results."""

import streamlit as st

from classifier_app.config import get_config
from classifier_app.constants import ALLOWED_IMAGE_TYPES, Messages
from classifier_app.core.exceptions import ValidationError
from classifier_app.core.images import load_uploaded_image, preview_image
from classifier_app.core.uploader import PredictionUploader
from classifier_app.streamlit.components.gallery import render_results_gallery
from classifier_app.streamlit.components.zoom_modal import render_zoom_modal
from classifier_app.streamlit.session import get_session, get_uploader

UPLOAD_EXTENSIONS = ["jpg", "jpeg", "png", "webp", "gif", "bmp"]


def render_predict_page() -> None:
    """Render the predict page."""
    state = get_session()
    uploader = get_uploader()
    predictions = uploader.state

    st.header("Classify an image")

    uploaded = st.file_uploader(
        "Upload Next Image",
        type=UPLOAD_EXTENSIONS,
        accept_multiple_files=False,
        key="image_upload",
    )
    if uploaded is not None:
        _handle_upload(uploaded, uploader, state.processed_uploads)

    _render_current_image(uploader)

    if predictions.message:
        st.error(predictions.message)

    if predictions.history:
        st.divider()
        render_results_gallery(predictions.history.items, state.client, on_select=uploader.select)

    if predictions.selected is not None:
        selected = predictions.selected
        # Open once; the dialog persists until dismissed
        uploader.close_zoom()
        render_zoom_modal(selected, state.client)


def _upload_key(uploaded) -> str:
    file_id = getattr(uploaded, "file_id", None)
    return file_id or f"{uploaded.name}:{uploaded.size}"


def _handle_upload(uploaded, uploader: PredictionUploader, processed: set) -> None:
    """Send a newly chosen file to the predictor once."""
    key = _upload_key(uploaded)
    if key in processed:
        return
    processed.add(key)

    config = get_config()
    try:
        image = load_uploaded_image(
            uploaded.name,
            uploaded.getvalue(),
            declared_type=uploaded.type,
            max_bytes=config.max_upload_mb * 1024 * 1024,
        )
    except ValidationError as e:
        uploader.state.set_message(str(e))
        return

    # Preview only while the request is in flight; the result card replaces it
    placeholder = st.empty()
    with placeholder.container():
        col1, col2 = st.columns([1, 2])
        with col1:
            st.image(preview_image(image), use_container_width=True)
        with col2:
            with st.spinner("Predicting..."):
                uploader.upload_and_predict(image)
    placeholder.empty()


def _render_current_image(uploader: PredictionUploader) -> None:
    current = uploader.state.current_image
    if current is None:
        st.info(f"Supported formats: {', '.join(t.split('/')[1].upper() for t in ALLOWED_IMAGE_TYPES)}")
        return

    with st.container(border=True):
        if current.is_displayable:
            st.image(uploader.client.image_url(current.src), use_container_width=True)
        else:
            st.error(Messages.IMAGE_NOT_FOUND)
        st.markdown(f"### {current.title}")
        st.caption(f"Confidence: {current.confidence}")
        if st.button("Zoom", key="zoom_current"):
            uploader.select(current)
            st.rerun()
