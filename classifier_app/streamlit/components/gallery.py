"""Gallery of recent prediction results."""

from typing import Callable, Optional, Sequence

import streamlit as st

from classifier_app.api_client import ApiClient
from classifier_app.config import get_config
from classifier_app.core.models import PredictionResult


def render_results_gallery(
    results: Sequence[PredictionResult],
    client: ApiClient,
    on_select: Optional[Callable[[PredictionResult], None]] = None,
    columns: Optional[int] = None,
) -> None:
    """Render a grid of results in arrival order."""
    if not results:
        return

    num_cols = columns or get_config().images_per_row

    st.subheader("Recent results:")
    cols = st.columns(num_cols)
    for i, result in enumerate(results):
        with cols[i % num_cols]:
            render_result_card(result, client, on_select=on_select, index=i)


def render_result_card(
    result: PredictionResult,
    client: ApiClient,
    on_select: Optional[Callable[[PredictionResult], None]] = None,
    index: int = 0,
) -> None:
    """Render a single result card."""
    with st.container(border=True):
        if result.is_displayable:
            st.image(client.image_url(result.src), use_container_width=True)
        else:
            st.warning("Image not found")

        st.markdown(f"**{result.title}**")
        st.caption(f"Confidence: {result.confidence}")

        if on_select:
            st.button(
                "View",
                key=f"view_{result.id}_{index}",
                use_container_width=True,
                on_click=on_select,
                args=(result,),
            )
