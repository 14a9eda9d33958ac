"""Postings from a REST job-list endpoint (``GET <url>`` → ``{"jobs": [...]}``)."""
from __future__ import annotations

import requests

from carematch.log import get_logger
from carematch.models import JobPosting
from carematch.retry import retry, should_retry_http_status
from carematch.sources.base import PostingSource, parse_postings

log = get_logger(__name__)


def _is_client_error(exc: BaseException) -> bool:
    response = getattr(exc, "response", None)
    if not isinstance(exc, requests.HTTPError) or response is None:
        return False
    return not should_retry_http_status(response.status_code)


class HttpPostingSource(PostingSource):
    def __init__(self, url: str, timeout: float = 15.0) -> None:
        self.url = url
        self.timeout = timeout

    @retry(
        max_attempts=3,
        base_delay=1.5,
        retryable=(requests.RequestException,),
        giveup=_is_client_error,
    )
    def _get(self, limit: int) -> object:
        r = requests.get(self.url, params={"limit": limit}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def fetch(self, limit: int = 50) -> list[JobPosting]:
        postings = parse_postings(self._get(limit), "http")
        log.info("[http] %s returned %d postings", self.url, len(postings))
        return postings[:limit]
