from .base import PostingSource, parse_postings
from .file import FilePostingSource
from .feed import HttpPostingSource
from .mock import MockPostingSource

from carematch.log import get_logger

log = get_logger(__name__)

__all__ = [
    "PostingSource", "FilePostingSource", "HttpPostingSource", "MockPostingSource",
    "parse_postings", "get_source",
]


def get_source(env_getter) -> PostingSource:
    url = env_getter("JOBS_API_URL")
    if url:
        log.info("Using source: HTTP job feed (%s)", url)
        return HttpPostingSource(url)

    path = env_getter("JOBS_FILE")
    if path:
        log.info("Using source: postings file (%s)", path)
        return FilePostingSource(path)

    log.info("No JOBS_API_URL or JOBS_FILE set — using MockPostingSource")
    return MockPostingSource()
