import logging
from datetime import date
from typing import Any, Dict, Optional, Tuple, Union

import requests
from dateutil.parser import isoparse

from services.config import Settings, load_settings

# Earliest APOD date is 1995-06-16
APOD_EARLIEST = date(1995, 6, 16)
# Body code the API sends when no entry exists for the date yet
NOT_FOUND_CODE = 400

logger = logging.getLogger(__name__)

DateLike = Union[date, str]


def parse_apod_date(s: str) -> date:
    return isoparse(s).date()


def format_apod_date(d: DateLike) -> str:
    """Normalize a date or ISO string to YYYY-MM-DD."""
    if isinstance(d, str):
        d = parse_apod_date(d)
    return d.isoformat()


def _params(target_date: DateLike, settings: Settings) -> Dict[str, str]:
    return {
        "date": format_apod_date(target_date),
        "api_key": settings.api_key,
    }


def get_apod_single(target_date: DateLike, settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Fetch single APOD by date; returns JSON. Raises on non-OK responses."""
    settings = settings or load_settings()
    params = _params(target_date, settings)
    logger.info("Fetching APOD for %s", params["date"])
    r = requests.get(settings.api_base, params=params, timeout=settings.timeout)
    r.raise_for_status()
    return r.json()


def probe_apod(target_date: DateLike, settings: Optional[Settings] = None) -> Tuple[int, Dict[str, Any]]:
    """Fetch APOD without checking the status; returns (status, JSON body).

    Used on first load, where a 400 body means the entry is not published yet.
    """
    settings = settings or load_settings()
    params = _params(target_date, settings)
    logger.info("Probing APOD for %s", params["date"])
    r = requests.get(settings.api_base, params=params, timeout=settings.timeout)
    body = r.json()
    if not isinstance(body, dict):
        raise ValueError(f"Unexpected APOD payload: {type(body).__name__}")
    return r.status_code, body


def is_missing_entry(body: Dict[str, Any]) -> bool:
    return body.get("code") == NOT_FOUND_CODE
