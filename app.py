import logging

import streamlit as st

from components.loader import show_loader
from components.media import DATE_KEY, render_ready
from services.config import load_settings
from services.viewer import ApodViewer

settings = load_settings()

# ---------------------------
# Logging
# ---------------------------
logging.basicConfig(
    level=logging.getLevelName(settings.log_level),
    format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
)
logger = logging.getLogger("apod_app")

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="Astronomy Picture of the Day",
    page_icon="🔭",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ---------------------------
# Session bootstrap
# ---------------------------
if "viewer" not in st.session_state:
    logger.info("New session, creating viewer")
    st.session_state.viewer = ApodViewer(settings=settings)

viewer: ApodViewer = st.session_state.viewer


def on_date_change():
    picked = st.session_state.get(DATE_KEY)
    if picked is None:
        return
    viewer.change_date(picked)


# ---------------------------
# Booting: loader only, until the request resolves
# ---------------------------
if not viewer.initialized or viewer.pending:
    placeholder = st.empty()
    show_loader(placeholder)
    if not viewer.initialized:
        viewer.initialize()
    else:
        viewer.finish_fetch()
    placeholder.empty()

# ---------------------------
# Ready
# ---------------------------
if viewer.loaded:
    render_ready(viewer, on_date_change)
