from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import requests

from .errors import (
    AuthTokenError,
    BatchSubmissionError,
    ScrobblezError,
    ServiceError,
    SessionError,
    TransportError,
    ValidationError,
)
from .responses import parse_response, parse_scrobble_counts, unwrap
from .scrobble import (
    DEFAULT_SPACING_SECONDS,
    MAX_BATCH_SIZE,
    SubmissionReport,
    batch_count,
    batch_params,
    plan_batches,
)
from .signing import signed

if TYPE_CHECKING:
    from ..config import Settings

log = logging.getLogger(__name__)

LASTFM_API_URL = "https://ws.audioscrobbler.com/2.0/"
LASTFM_AUTH_URL = "https://www.last.fm/api/auth/"

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}

ProgressCallback = Callable[[int, int], None]


class LastFmClient:
    """Signed calls against the Last.fm web service.

    One instance wraps one ``requests.Session``; every call is sequential and
    carries a finite timeout. Nothing is retried.
    """

    def __init__(
        self,
        api_key: str,
        shared_secret: str,
        api_url: str = LASTFM_API_URL,
        timeout: float = 30.0,
        user_agent: str | None = None,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self._secret = shared_secret
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers.update({"User-Agent": user_agent})

    @classmethod
    def from_settings(cls, settings: Settings) -> LastFmClient:
        return cls(
            settings.lastfm_api_key,
            settings.lastfm_shared_secret,
            api_url=settings.api_url,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
        )

    def _get(self, params: dict[str, str]) -> dict[str, Any]:
        log.debug("GET %s", params.get("method"))
        try:
            resp = self.session.get(self.api_url, params=signed(params, self._secret), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e
        return unwrap(parse_response(resp))

    def _post(self, params: dict[str, str]) -> dict[str, Any]:
        log.debug("POST %s", params.get("method"))
        try:
            resp = self.session.post(
                self.api_url,
                data=signed(params, self._secret),
                headers=FORM_HEADERS,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e
        return unwrap(parse_response(resp))

    def request_token(self) -> str:
        """Fetch an unauthorized request token (auth.getToken)."""
        params = {
            "method": "auth.getToken",
            "api_key": self.api_key,
            "format": "json",
        }
        try:
            data = self._get(params)
        except ServiceError as e:
            raise AuthTokenError(f"Failed to obtain authentication token: {e}", code=e.code) from e
        except ScrobblezError as e:
            raise AuthTokenError(f"Failed to obtain authentication token: {e}") from e

        token = data.get("token")
        if not isinstance(token, str) or not token:
            cause = ValidationError("Token not found in API response")
            raise AuthTokenError(f"Failed to obtain authentication token: {cause}") from cause
        return token

    def auth_url(self, token: str, base: str = LASTFM_AUTH_URL) -> str:
        """URL the user opens to grant this app access to their account."""
        return f"{base}?{urlencode({'api_key': self.api_key, 'token': token})}"

    def exchange_session(self, token: str) -> str:
        """Exchange an authorized token for a session key (auth.getSession)."""
        params = {
            "method": "auth.getSession",
            "api_key": self.api_key,
            "token": token,
            "format": "json",
        }
        try:
            data = self._get(params)
        except ServiceError as e:
            raise SessionError(f"Failed to obtain session: {e}", code=e.code) from e
        except ScrobblezError as e:
            raise SessionError(f"Failed to obtain session: {e}") from e

        session = data.get("session")
        key = session.get("key") if isinstance(session, dict) else None
        if not isinstance(key, str) or not key:
            cause = ValidationError("Session key not found in API response")
            raise SessionError(f"Failed to obtain session: {cause}") from cause

        name = session.get("name")
        if name:
            log.info("Authenticated as %s", name)
        return key

    def submit_scrobbles(
        self,
        session_key: str,
        artist: str,
        track: str,
        total_count: int,
        *,
        batch_size: int = MAX_BATCH_SIZE,
        spacing: int = DEFAULT_SPACING_SECONDS,
        now: float | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> SubmissionReport:
        """Scrobble one track ``total_count`` times, batch by batch.

        A failed batch is logged and recorded in the report; the remaining
        batches are still attempted.
        """
        if now is None:
            now = time.time()
        batches = plan_batches(artist, track, total_count, now, batch_size=batch_size, spacing=spacing)
        report = SubmissionReport(total=total_count)

        log.info('Starting scrobble of "%s" by "%s"', track, artist)
        log.info("Total scrobbles to perform: %d in %d batch(es)", total_count, batch_count(total_count, batch_size))

        for index, batch in enumerate(batches):
            params = {
                "method": "track.scrobble",
                "api_key": self.api_key,
                "sk": session_key,
                "format": "json",
            }
            params.update(batch_params(batch))

            try:
                data = self._post(params)
            except ScrobblezError as e:
                failure = BatchSubmissionError(index, len(batch), e)
                log.error("An error occurred while scrobbling: %s", failure)
                report.failures.append(failure)
                continue

            accepted, ignored = parse_scrobble_counts(data)
            report.completed += len(batch)
            report.accepted += accepted
            report.ignored += ignored
            if ignored:
                log.warning("Batch %d: %d scrobble(s) ignored by Last.fm", index + 1, ignored)

            log.info("Progress: %d/%d scrobbles (%d%%)", report.completed, total_count, report.percent)
            if on_progress:
                on_progress(report.completed, total_count)

        return report
