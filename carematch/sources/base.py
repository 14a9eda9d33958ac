from abc import ABC, abstractmethod
from typing import Any

from carematch.log import get_logger
from carematch.models import JobPosting

log = get_logger(__name__)


def parse_postings(payload: Any, origin: str) -> list[JobPosting]:
    """Accept ``{"jobs": [...]}`` or a bare list; skip records that are not mappings."""
    if isinstance(payload, dict):
        payload = payload.get("jobs", [])
    if not isinstance(payload, list):
        log.warning("[%s] expected a list of postings, got %s", origin, type(payload).__name__)
        return []

    postings: list[JobPosting] = []
    for i, rec in enumerate(payload):
        if not isinstance(rec, dict):
            log.warning("[%s] skipping record %d: not a mapping", origin, i)
            continue
        postings.append(JobPosting.from_dict(rec))
    return postings


class PostingSource(ABC):
    @abstractmethod
    def fetch(self, limit: int = 50) -> list[JobPosting]:
        pass
