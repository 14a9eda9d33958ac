"""Data models for applicants, job postings and match results."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from carematch.log import get_logger

log = get_logger(__name__)

_FRACTION = re.compile(r"\.(\d+)")


def _pick(data: dict, *keys: str) -> Any:
    """First non-None value among *keys* (camelCase and snake_case spellings)."""
    for k in keys:
        v = data.get(k)
        if v is not None:
            return v
    return None


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a datetime or ISO-8601 string; naive values are taken as UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        raw = str(value).strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        # fromisoformat on 3.10 only takes 3 or 6 fractional digits
        raw = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], raw, count=1)
        try:
            dt = datetime.fromisoformat(raw)
        except ValueError:
            log.debug("Unparseable posted date %r", value)
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _count(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        log.debug("Non-numeric applications count %r", value)
        return None


@dataclass
class ApplicantProfile:
    profession: str | None = None
    city: str | None = None
    state: str | None = None
    experience_level: str | None = None
    education_level: str | None = None
    certifications: str | None = None
    id: str | None = None
    name: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> ApplicantProfile:
        certs = _pick(data, "certifications")
        if isinstance(certs, (list, tuple)):
            certs = ", ".join(str(c) for c in certs)
        return cls(
            profession=_text(_pick(data, "profession")),
            city=_text(_pick(data, "city")),
            state=_text(_pick(data, "state")),
            experience_level=_text(
                _pick(data, "experience_level", "experienceLevel", "experience")
            ),
            education_level=_text(
                _pick(data, "education_level", "educationLevel", "education")
            ),
            certifications=_text(certs),
            id=_text(_pick(data, "id")),
            name=_text(_pick(data, "name", "full_name")),
        )


@dataclass
class JobPosting:
    id: str | None = None
    title: str | None = None
    description: str | None = None
    department: str | None = None
    requirements: str | None = None
    city: str | None = None
    state: str | None = None
    posted_date: datetime | None = None
    applications_count: int | None = None
    company: str | None = None
    url: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> JobPosting:
        return cls(
            id=_text(_pick(data, "id")),
            title=_text(_pick(data, "title")),
            description=_text(_pick(data, "description")),
            department=_text(_pick(data, "department")),
            requirements=_text(_pick(data, "requirements")),
            city=_text(_pick(data, "city")),
            state=_text(_pick(data, "state")),
            posted_date=parse_timestamp(_pick(data, "posted_date", "postedDate")),
            applications_count=_count(
                _pick(data, "applications_count", "applicationsCount")
            ),
            company=_text(_pick(data, "company", "company_name")),
            url=_text(_pick(data, "url")),
        )

    @property
    def location(self) -> str:
        return ", ".join(p for p in (self.city, self.state) if p)


@dataclass
class MatchResult:
    match_score: int = 0
    match_reasons: list[str] = field(default_factory=list)


@dataclass
class ScoredJob:
    job: JobPosting
    result: MatchResult

    @property
    def match_score(self) -> int:
        return self.result.match_score

    @property
    def match_reasons(self) -> list[str]:
        return self.result.match_reasons
