import os
import logging
from dataclasses import dataclass
from typing import Optional

import streamlit as st

APOD_BASE = "https://api.nasa.gov/planetary/apod"
DEFAULT_TIMEOUT = 20.0

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    api_key: str
    api_base: str = APOD_BASE
    timeout: Optional[float] = DEFAULT_TIMEOUT
    log_level: str = "INFO"


def _api_key() -> str:
    # Fallback to DEMO_KEY if not set (very rate-limited)
    try:
        return st.secrets["api"]["nasa_apod_key"]
    except Exception:
        logger.debug("No NASA key in secrets, trying environment")
        return os.environ.get("NASA_APOD_KEY", "DEMO_KEY")


def _timeout() -> Optional[float]:
    raw = os.environ.get("APOD_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    if raw.lower() == "none":
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid APOD_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT


def _log_level() -> str:
    name = os.environ.get("APOD_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        logger.warning("Ignoring invalid APOD_LOG_LEVEL=%r", name)
        return "INFO"
    return name


def load_settings() -> Settings:
    """Read settings from Streamlit secrets and the environment."""
    return Settings(
        api_key=_api_key(),
        api_base=os.environ.get("APOD_API_BASE", APOD_BASE),
        timeout=_timeout(),
        log_level=_log_level(),
    )
