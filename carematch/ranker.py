"""Rank postings for an applicant and keep the recommended list in sync."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from carematch.log import get_logger
from carematch.models import ApplicantProfile, JobPosting, ScoredJob
from carematch.scorer import normalize, score_job

log = get_logger(__name__)

DEFAULT_MIN_SCORE = 10
DEFAULT_LIMIT = 6


def annotate(
    applicant: ApplicantProfile,
    postings: Iterable[JobPosting],
    *,
    now: datetime | None = None,
) -> list[ScoredJob]:
    """Score every posting, keeping input order (used for list badges)."""
    now = now or datetime.now(timezone.utc)
    return [ScoredJob(job=j, result=score_job(applicant, j, now=now)) for j in postings]


def _select(scored: list[ScoredJob], min_score: int, limit: int) -> list[ScoredJob]:
    # sorted() is stable, so equal scores keep their input order.
    kept = sorted(
        (s for s in scored if s.match_score > min_score),
        key=lambda s: -s.match_score,
    )
    result = kept[:limit]
    log.info(
        "Ranked %d postings → %d above %d, returning top %d",
        len(scored), len(kept), min_score, len(result),
    )
    return result


def rank(
    applicant: ApplicantProfile,
    postings: Iterable[JobPosting],
    *,
    min_score: int = DEFAULT_MIN_SCORE,
    limit: int = DEFAULT_LIMIT,
    now: datetime | None = None,
) -> list[ScoredJob]:
    return _select(annotate(applicant, postings, now=now), min_score, limit)


def ranking_key(applicant: ApplicantProfile) -> tuple[str, ...]:
    """Applicant fields whose change invalidates a ranking."""
    return (
        normalize(applicant.profession),
        normalize(applicant.experience_level),
        normalize(applicant.city),
        normalize(applicant.state),
        normalize(applicant.certifications),
        normalize(applicant.education_level),
    )


class Recommendations:
    """Recommended and annotated postings for one applicant.

    Recomputed when a ranking field of the applicant changes or the
    postings are replaced; other profile edits leave the lists alone.
    """

    def __init__(
        self,
        applicant: ApplicantProfile,
        postings: Iterable[JobPosting] = (),
        *,
        min_score: int = DEFAULT_MIN_SCORE,
        limit: int = DEFAULT_LIMIT,
        now: datetime | None = None,
    ) -> None:
        self.applicant = applicant
        self.postings: list[JobPosting] = list(postings)
        self.min_score = min_score
        self.limit = limit
        self.recommended: list[ScoredJob] = []
        self.annotated: list[ScoredJob] = []
        self._key = ranking_key(applicant)
        self.recompute(now)

    def recompute(self, now: datetime | None = None) -> None:
        now = now or datetime.now(timezone.utc)
        self.annotated = annotate(self.applicant, self.postings, now=now)
        self.recommended = _select(self.annotated, self.min_score, self.limit)

    def update_applicant(self, applicant: ApplicantProfile, now: datetime | None = None) -> bool:
        key = ranking_key(applicant)
        self.applicant = applicant
        if key == self._key:
            return False
        self._key = key
        self.recompute(now)
        return True

    def replace_postings(self, postings: Iterable[JobPosting], now: datetime | None = None) -> bool:
        self.postings = list(postings)
        self.recompute(now)
        return True
