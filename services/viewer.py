"""State and control flow for the APOD viewer page.

The viewer is independent of Streamlit: ``app.py`` keeps one instance per
session in ``st.session_state`` and renders from its fields.
"""
import enum
import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta, timezone
from functools import partial
from typing import Any, Callable, Dict, Optional, Tuple, Union

import requests

from services.apod import (
    format_apod_date, get_apod_single, is_missing_entry, parse_apod_date, probe_apod
)
from services.config import Settings

INIT_ERROR = "Failed to fetch initial data"
FETCH_ERROR = "Failed to fetch data"
LOADING_TEXT = "Loading..."
UNSUPPORTED_TEXT = "Media type not supported"

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], Dict[str, Any]]
ProbeFn = Callable[[str], Tuple[int, Dict[str, Any]]]


class MediaKind(enum.Enum):
    IMAGE = "image"
    VIDEO = "video"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_media_type(cls, media_type: Optional[str]) -> "MediaKind":
        if media_type == "image":
            return cls.IMAGE
        if media_type == "video":
            return cls.VIDEO
        return cls.UNSUPPORTED


@dataclass(frozen=True)
class DisplayDay:
    date: str = ""
    media_type: str = ""
    url: str = ""
    title: str = ""
    explanation: str = ""

    @property
    def kind(self) -> MediaKind:
        return MediaKind.from_media_type(self.media_type)

    @classmethod
    def from_api(cls, requested: str, body: Dict[str, Any]) -> "DisplayDay":
        if not isinstance(body, dict):
            raise ValueError(f"Unexpected APOD payload: {type(body).__name__}")
        return cls(
            date=format_apod_date(requested),
            media_type=body.get("media_type") or "",
            url=body.get("url") or "",
            title=body.get("title") or "",
            explanation=body.get("explanation") or "",
        )


@dataclass(frozen=True)
class ViewState:
    chosen_day: DisplayDay = field(default_factory=DisplayDay)
    is_loading: bool = True
    error: Optional[str] = None


@dataclass
class SelectionState:
    current_date: str = ""
    chosen_date: str = ""

    @property
    def input_value(self) -> str:
        return self.chosen_date or self.current_date


@dataclass(frozen=True)
class FetchSuccess:
    day: DisplayDay


@dataclass(frozen=True)
class FetchFailure:
    message: str
    reason: str = ""


FetchResult = Union[FetchSuccess, FetchFailure]


@dataclass(frozen=True)
class MediaPane:
    """What the media pane shows: text for the non-media states, else a URL."""

    kind: Optional[MediaKind] = None
    url: str = ""
    text: str = ""


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class ApodViewer:
    """Owns the view, selection and loaded state for one page session."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetch: Optional[FetchFn] = None,
        probe: Optional[ProbeFn] = None,
    ):
        self._fetch = fetch or partial(get_apod_single, settings=settings)
        self._probe = probe or partial(probe_apod, settings=settings)
        self.view = ViewState()
        self.selection = SelectionState()
        self.loaded = False
        self.initialized = False
        self._pending: Optional[str] = None

    # -- Initializer -----------------------------------------------------

    def initialize(self, today: Optional[date] = None) -> None:
        """Resolve the latest published day and load it. Runs once."""
        if self.initialized:
            return
        self.initialized = True
        today_iso = format_apod_date(today or utc_today())
        try:
            status, body = self._probe(today_iso)
        except (requests.RequestException, ValueError):
            logger.exception("Error fetching initial data for %s", today_iso)
            self.view = replace(self.view, error=INIT_ERROR, is_loading=False)
            self.loaded = True
            return

        if is_missing_entry(body):
            yesterday = format_apod_date(parse_apod_date(today_iso) - timedelta(days=1))
            logger.info("No APOD for %s yet, falling back to %s", today_iso, yesterday)
            self.selection.current_date = yesterday
            self.fetch_data(yesterday)
            return

        self.selection.current_date = today_iso
        self.begin_fetch(today_iso)
        if 200 <= status < 300:
            result = self._to_result(today_iso, body)
        else:
            logger.warning("APOD returned HTTP %s for %s", status, today_iso)
            result = FetchFailure(FETCH_ERROR, f"HTTP {status}")
        self.apply(result)

    # -- Fetcher ---------------------------------------------------------

    def fetch_data(self, date_str: str) -> None:
        self.begin_fetch(date_str)
        self.finish_fetch()

    def begin_fetch(self, date_str: str) -> None:
        self.loaded = False
        self._pending = date_str

    def finish_fetch(self) -> None:
        if self._pending is None:
            return
        date_str, self._pending = self._pending, None
        try:
            body = self._fetch(date_str)
        except (requests.RequestException, ValueError) as e:
            logger.warning("Failed to fetch APOD for %s: %s", date_str, e)
            self.apply(FetchFailure(FETCH_ERROR, str(e)))
            return
        self.apply(self._to_result(date_str, body))

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def _to_result(self, date_str: str, body: Dict[str, Any]) -> FetchResult:
        try:
            return FetchSuccess(DisplayDay.from_api(date_str, body))
        except ValueError as e:
            logger.warning("Bad APOD payload for %s: %s", date_str, e)
            return FetchFailure(FETCH_ERROR, str(e))

    def apply(self, result: FetchResult) -> None:
        if isinstance(result, FetchSuccess):
            self.view = ViewState(chosen_day=result.day, is_loading=False, error=None)
        else:
            # previous day stays on screen behind the error
            self.view = replace(self.view, error=result.message, is_loading=False)
        self._pending = None
        self.loaded = True

    # -- Selection -------------------------------------------------------

    def change_date(self, value: Union[date, str]) -> None:
        """Record the picked date and start fetching it."""
        chosen = format_apod_date(value)
        self.selection.chosen_date = chosen
        self.begin_fetch(chosen)

    @property
    def max_date(self) -> Optional[str]:
        return self.selection.current_date or None

    # -- Renderer decisions ----------------------------------------------

    def media_pane(self) -> MediaPane:
        view = self.view
        if view.is_loading:
            return MediaPane(text=LOADING_TEXT)
        if view.error:
            return MediaPane(text=view.error)
        kind = view.chosen_day.kind
        if kind is MediaKind.UNSUPPORTED:
            return MediaPane(kind=kind, text=UNSUPPORTED_TEXT)
        return MediaPane(kind=kind, url=view.chosen_day.url)
