import re
from datetime import date
from html import escape
from typing import Callable, Optional

import streamlit as st
import streamlit.components.v1 as components

from services.apod import APOD_EARLIEST, parse_apod_date
from services.viewer import ApodViewer, MediaKind, MediaPane, utc_today

VIDEO_WIDTH, VIDEO_HEIGHT = 800, 450
DATE_KEY = "apod_date"
# Markdown and LaTeX triggers that must show up literally in APOD text
_MD_SPECIALS = re.compile(r"([\\`*_\[\]#|<>~$])")


def plain_markdown(text: str) -> str:
    return _MD_SPECIALS.sub(r"\\\1", text)


def video_embed_html(url: str) -> str:
    return (
        f'<iframe width="{VIDEO_WIDTH}" height="{VIDEO_HEIGHT}" src="{escape(url, quote=True)}" '
        'title="NASA Video of the Day" frameborder="0" allowfullscreen></iframe>'
    )


def _as_date(s: str) -> Optional[date]:
    return parse_apod_date(s) if s else None


def render_date_input(viewer: ApodViewer, on_change: Callable[[], None]) -> None:
    """Date picker bounded by the latest published day."""
    max_value = _as_date(viewer.max_date or "") or utc_today()
    value = _as_date(viewer.selection.input_value) or max_value
    st.date_input(
        "Choose a date",
        value=value,
        min_value=APOD_EARLIEST,
        max_value=max_value,
        format="YYYY-MM-DD",
        key=DATE_KEY,
        on_change=on_change,
    )


def render_media_pane(pane: MediaPane) -> None:
    if pane.kind is MediaKind.IMAGE:
        st.image(pane.url, width="stretch")
    elif pane.kind is MediaKind.VIDEO:
        components.html(video_embed_html(pane.url), height=VIDEO_HEIGHT + 10)
    else:
        # loading, error and unsupported-type states are plain text
        st.write(pane.text)


def render_ready(viewer: ApodViewer, on_change: Callable[[], None]) -> None:
    left, right = st.columns([2, 3], gap="large")
    day = viewer.view.chosen_day
    with left:
        render_date_input(viewer, on_change)
        if day.title:
            st.subheader(plain_markdown(day.title))
        if day.explanation:
            st.markdown(plain_markdown(day.explanation))
    with right:
        render_media_pane(viewer.media_pane())
