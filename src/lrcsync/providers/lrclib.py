"""Provider for the LRCLIB lyrics database (https://lrclib.net).

Endpoint: ``GET {base_url}/get?track_name=<title>&artist_name=<artist>``

Response (JSON object, only the keys used here)::

    {
        "syncedLyrics": "[00:17.12]I feel your breath upon my neck\\n...",
        "plainLyrics":  "I feel your breath upon my neck\\n...",
        "instrumental": false,
        "duration":     233.0
    }

``syncedLyrics`` and ``plainLyrics`` may be ``null``.  A track that LRCLIB
does not know returns HTTP 404.
"""

import json
import logging

import httpx

from ..exceptions import FetchError, InvalidFieldError, ParseError
from ..models import LyricsSource
from .base import LyricsProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://lrclib.net/api"
DEFAULT_TIMEOUT = 15

_FETCH_HEADERS = {
    "User-Agent": "lrcsync (https://pypi.org/project/lrcsync/)",
    "Accept": "application/json",
}


class LrclibProvider(LyricsProvider):
    """Looks up lyrics by track title and artist name on LRCLIB."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch(self, title: str, artist: str) -> tuple[str, str]:
        url = str(httpx.URL(f"{self.base_url}/get", params={"track_name": title, "artist_name": artist}))
        logger.info("Fetching %s", url)
        try:
            resp = httpx.get(url, headers=_FETCH_HEADERS, follow_redirects=True, timeout=self.timeout)
        except httpx.RequestError as exc:
            raise FetchError(url, 0) from exc
        logger.debug("LRCLIB answered HTTP %d", resp.status_code)
        if resp.status_code != 200:
            raise FetchError(url, resp.status_code)
        return resp.text, url

    def extract(self, payload: str, url: str) -> LyricsSource:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ParseError(url, f"Response is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ParseError(url, "Expected a JSON object")

        try:
            return LyricsSource.from_payload(data)
        except InvalidFieldError as exc:
            raise ParseError(url, str(exc), field=exc.field) from exc
