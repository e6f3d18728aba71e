"""Upstream relay: forwards search and document requests to the judicial site.

Search parameters are passed through verbatim; responses are handed back raw.
Nothing here interprets markup or PDF bytes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests  # type: ignore[import-untyped]

from judgment_search.api import config
from judgment_search.errors import NetworkError

logger = logging.getLogger(__name__)


@dataclass
class RelayResponse:
    status_code: int
    content: bytes
    content_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class UpstreamRelay:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        search_url: str = config.SEARCH_URL,
        user_agent: str = config.USER_AGENT,
        timeout: float = config.UPSTREAM_TIMEOUT,
        document_timeout: float = config.DOCUMENT_TIMEOUT,
    ) -> None:
        self.session = session or requests.Session()
        self.search_url = search_url
        self.timeout = timeout
        self.document_timeout = document_timeout
        self.headers = {'User-Agent': user_agent}

    def search(self, params: Mapping[str, Any]) -> str:
        """Run a search upstream and return the raw markup."""
        logger.info(f"[relay] search {self.search_url} params={dict(params)}")
        try:
            response = self.session.get(self.search_url, params=params, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"[relay] search failed: {e}")
            raise NetworkError(str(e), url=self.search_url) from e
        if not 200 <= response.status_code < 300:
            logger.error(f"[relay] search HTTP {response.status_code}")
            raise NetworkError(f"HTTP error: {response.status_code}", status_code=response.status_code, url=self.search_url)
        logger.info(f"[relay] got search page (length: {len(response.text)})")
        return response.text

    def fetch_document(self, url: str) -> RelayResponse:
        """Download raw document bytes. Status is reported, not raised."""
        logger.info(f"[relay] fetch {url}")
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.document_timeout)
        except requests.RequestException as e:
            logger.error(f"[relay] fetch failed: {e}")
            raise NetworkError(str(e), url=url) from e
        return RelayResponse(
            status_code=response.status_code,
            content=response.content,
            content_type=response.headers.get('Content-Type'),
        )


__all__ = ['RelayResponse', 'UpstreamRelay']
