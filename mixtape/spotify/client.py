import logging
import time

import requests

from mixtape.config import (
    EMBED_REQUEST_TIMEOUT,
    EMBED_USER_AGENT,
    IMPORT_TRANSIENT_RETRIES,
    SPOTIFY_EMBED_BASE,
)
from mixtape.core import PlaylistNotFound

logger = logging.getLogger(__name__)

# Only connection-level failures are worth a second try; HTTP statuses are final.
TRANSIENT_ERRORS = (requests.ConnectionError, requests.Timeout)


class EmbedPageFetcher:
    """
    Fetch a playlist's public embed page.

    Short notes:
    - No authentication needed
    - Browser-like headers (requests without them get rejected)
    - Non-2xx status -> PlaylistNotFound, never retried
    - Transient network errors retried at most `transient_retries` times
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        base_url: str = SPOTIFY_EMBED_BASE,
        timeout: float = EMBED_REQUEST_TIMEOUT,
        transient_retries: int = IMPORT_TRANSIENT_RETRIES,
        backoff_seconds: float = 0.5,
    ) -> None:
        self._session = session or requests.Session()
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transient_retries = max(0, transient_retries)
        self._backoff_seconds = backoff_seconds

    def _headers(self) -> dict[str, str]:
        return {
            "accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "accept-language": "en-US,en;q=0.9",
            "user-agent": EMBED_USER_AGENT,
        }

    def playlist_url(self, playlist_id: str) -> str:
        return f"{self._base_url}/playlist/{playlist_id}"

    def fetch_playlist_html(self, playlist_id: str) -> str:
        url = self.playlist_url(playlist_id)
        attempts = 1 + self._transient_retries

        for attempt in range(1, attempts + 1):
            try:
                response = self._session.get(
                    url, headers=self._headers(), timeout=self._timeout
                )
            except TRANSIENT_ERRORS as exc:
                if attempt < attempts:
                    logger.warning(
                        "Embed page fetch failed (%s), retrying (%d/%d)",
                        type(exc).__name__,
                        attempt,
                        attempts,
                    )
                    time.sleep(self._backoff_seconds)
                    continue
                logger.warning("Embed page unreachable for playlist %s: %s", playlist_id, exc)
                raise PlaylistNotFound() from exc
            except requests.RequestException as exc:
                logger.warning("Embed page request failed for playlist %s: %s", playlist_id, exc)
                raise PlaylistNotFound() from exc

            if not 200 <= response.status_code < 300:
                logger.info(
                    "Embed page for playlist %s returned HTTP %d",
                    playlist_id,
                    response.status_code,
                )
                raise PlaylistNotFound()
            return response.text

        # attempts is always >= 1, the loop returns or raises
        raise PlaylistNotFound()
