"""wordnik_api.transport

Builds request URLs for the Wordnik REST API and performs the HTTP GET.
Every failure is raised as a :class:`~wordnik_api.exceptions.RequestError`;
deciding what to do with it is left to the caller.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, urlencode

import requests

from .config import GETTING_STARTED_URL, WORD_URL, ClientSettings
from .exceptions import (
    ConfigurationError,
    InvalidAPIKeyError,
    RequestError,
    ResponseFormatError,
)
from .utils import encode_params

__all__ = ["Transport"]

logger = logging.getLogger(__name__)


class Transport:
    """Owns the API key and the HTTP session used for every call."""

    def __init__(self, settings: ClientSettings, session: Optional[requests.Session] = None) -> None:
        if not settings.api_key:
            raise ConfigurationError(
                f"API key must be defined.  See {GETTING_STARTED_URL} to obtain one."
            )
        self.settings = settings
        self.session = session or requests.Session()
        self.headers: Dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": settings.user_agent,
        }

    @property
    def api_key(self) -> str:
        return self.settings.api_key  # type: ignore[return-value]

    def build_url(self, endpoint: str, params: Mapping[str, Any], base_url: str = WORD_URL) -> str:
        """Return the full request URL.

        ``api_key`` always comes first; the remaining parameters follow in
        mapping order and ``None`` values are left out.
        """
        query = [("api_key", self.api_key)] + encode_params(params)
        return f"{base_url}{quote(endpoint, safe='/')}?{urlencode(query, safe=',')}"

    def request(self, endpoint: str, params: Mapping[str, Any], base_url: str = WORD_URL) -> Any:
        """GET *endpoint* and return the decoded JSON body."""
        try:
            url = self.build_url(endpoint, params, base_url)
        except ValueError as e:
            raise RequestError(f"Cannot build a request URL for {endpoint!r}: {e}") from e
        logger.debug("GET %s%s %s", base_url, endpoint, encode_params(params))

        try:
            r = self.session.get(
                url,
                headers=self.headers,
                allow_redirects=False,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            # the exception text carries the full URL, api_key included
            raise RequestError(f"Request to {endpoint} failed: {type(e).__name__}") from e

        if r.status_code == 401:
            logger.error(
                "Invalid API key.  If you do not have an API key, go to %s to get one.",
                GETTING_STARTED_URL,
            )
            raise InvalidAPIKeyError()
        if r.is_redirect or 300 <= r.status_code < 400:
            raise RequestError(
                f"Request to {endpoint} was redirected to {r.headers.get('Location', '?')}",
                status_code=r.status_code,
            )
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            raise RequestError(
                f"Request to {endpoint} failed with HTTP {r.status_code}", status_code=r.status_code
            ) from e

        try:
            return r.json()
        except ValueError as e:
            raise ResponseFormatError(
                f"Response from {endpoint} is not valid JSON", status_code=r.status_code
            ) from e

    def close(self) -> None:
        self.session.close()
