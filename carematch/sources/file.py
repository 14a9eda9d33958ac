"""Postings from a local JSON or YAML export."""
from __future__ import annotations

import json
from pathlib import Path

import yaml

from carematch.log import get_logger
from carematch.models import JobPosting
from carematch.sources.base import PostingSource, parse_postings

log = get_logger(__name__)


class FilePostingSource(PostingSource):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def fetch(self, limit: int = 50) -> list[JobPosting]:
        if not self.path.exists():
            raise FileNotFoundError(f"Postings file not found: {self.path}")
        text = self.path.read_text(encoding="utf-8")
        if self.path.suffix.lower() == ".json":
            payload = json.loads(text) if text.strip() else []
        else:
            payload = yaml.safe_load(text) or []
        postings = parse_postings(payload, self.path.name)
        log.info("[file] loaded %d postings from %s", len(postings), self.path.name)
        return postings[:limit]
