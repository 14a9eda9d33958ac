"""Score a job posting against an applicant profile with healthcare-aware rules."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone

from carematch.log import get_logger
from carematch.models import ApplicantProfile, JobPosting, MatchResult

log = get_logger(__name__)

MAX_SCORE = 100
MAX_REASONS = 5

_SECONDS_PER_DAY = 86400


def normalize(s: str | None) -> str:
    return (s or "").lower().strip()


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    return any(n in text for n in needles)


@dataclass(frozen=True)
class RoleVariants:
    key: str
    variants: tuple[str, ...]


@dataclass(frozen=True)
class CertificationRule:
    token: str
    keywords: tuple[str, ...]
    points: int
    label: str


@dataclass(frozen=True)
class SpecialtyRule:
    name: str
    keywords: tuple[str, ...]
    label: str


# Coarse profession keyword -> title variants that count as the same role.
ROLE_VARIANTS: tuple[RoleVariants, ...] = (
    RoleVariants("nurse", ("rn", "lpn", "nursing", "registered nurse")),
    RoleVariants("doctor", ("physician", "md", "medical doctor")),
    RoleVariants("therapist", ("therapy", "pt", "ot", "speech")),
    RoleVariants("aide", ("cna", "assistant", "caregiver")),
    RoleVariants("technician", ("tech", "technologist", "lab")),
)

CERTIFICATIONS: tuple[CertificationRule, ...] = (
    CertificationRule("rn", ("rn", "registered nurse"), 8, "RN license match"),
    CertificationRule("lpn", ("lpn", "licensed practical nurse"), 8, "LPN license match"),
    CertificationRule("cna", ("cna", "certified nursing assistant"), 8, "CNA certification match"),
    CertificationRule("bls", ("bls", "basic life support"), 6, "BLS certified"),
    CertificationRule("cpr", ("cpr", "cardiopulmonary"), 6, "CPR certified"),
    CertificationRule("acls", ("acls", "advanced cardiac life support"), 8, "ACLS certified"),
    CertificationRule("pals", ("pals", "pediatric advanced life support"), 8, "PALS certified"),
)

SPECIALTIES: tuple[SpecialtyRule, ...] = (
    SpecialtyRule("icu", ("icu", "intensive care", "critical care"), "ICU specialty match"),
    SpecialtyRule("er", ("emergency", "trauma", "urgent care"), "Emergency specialty match"),
    SpecialtyRule("pediatric", ("pediatric", "picu", "nicu", "children"), "Pediatric specialty match"),
    SpecialtyRule("surgical", ("surgical", "surgery", "operating room", "perioperative"), "Surgical specialty match"),
    SpecialtyRule("oncology", ("oncology", "cancer", "chemotherapy"), "Oncology specialty match"),
    SpecialtyRule("cardiology", ("cardiology", "cardiac", "heart", "telemetry"), "Cardiology specialty match"),
    SpecialtyRule("home health", ("home health", "home care", "in-home", "visiting"), "Home health specialty match"),
)

SENIOR_TITLE_TERMS = ("senior", "lead", "manager")
SENIOR_REQUIREMENT_TERMS = ("5+ years", "experienced")
ENTRY_TITLE_TERMS = ("entry", "new grad")


def _extract_years(experience: str) -> int:
    m = re.search(r"\d+", experience)
    return int(m.group()) if m else 0


def _days_since(posted: datetime, now: datetime) -> int:
    if posted.tzinfo is None:
        posted = posted.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return int((now - posted).total_seconds() // _SECONDS_PER_DAY)


class _Tally:
    """Running score plus reasons in the order rules fired."""

    def __init__(self) -> None:
        self.score = 0
        self.reasons: list[str] = []

    def add(self, points: int, reason: str) -> None:
        self.score += points
        self.reasons.append(reason)


def _profession(t: _Tally, profession: str, title: str, desc: str) -> None:
    if not profession:
        return
    if profession in title:
        t.add(35, "Matches your profession")
    elif profession in desc:
        t.add(20, "Related to your profession")

    # Stacks on a description match; only a full title match blocks it.
    for group in ROLE_VARIANTS:
        if group.key not in profession or t.score >= 35:
            continue
        for variant in group.variants:
            if variant in title:
                t.add(30, "Matches your healthcare role")
                break


def _location(t: _Tally, applicant: ApplicantProfile, job: JobPosting) -> None:
    city, state = normalize(applicant.city), normalize(applicant.state)
    if not city or not state:
        return
    job_city, job_state = normalize(job.city), normalize(job.state)
    if city == job_city and state == job_state:
        t.add(25, "Same city as you")
    elif state == job_state:
        t.add(15, "Same state")
    elif job_city and (job_city in city or city in job_city):
        t.add(10, "Nearby location")


def _experience(t: _Tally, experience: str, title: str, reqs: str) -> None:
    if not experience:
        return
    years = _extract_years(experience)
    if "senior" in experience or years >= 5:
        if _contains_any(title, SENIOR_TITLE_TERMS):
            t.add(20, "Senior level position")
        elif _contains_any(reqs, SENIOR_REQUIREMENT_TERMS):
            t.add(15, "Matches experience level")
    elif "junior" in experience or years >= 1:
        if "junior" in title or "1-3 years" in reqs:
            t.add(20, "Junior level position")
    elif "entry" in experience or years == 0:
        if _contains_any(title, ENTRY_TITLE_TERMS) or "no experience" in reqs:
            t.add(20, "Entry level position")


def _education(t: _Tally, education: str, reqs: str) -> None:
    if not education:
        return
    if "bachelor" in education and "bsn" in reqs:
        t.add(15, "Education requirement met")
    elif "master" in education and ("msn" in reqs or "master" in reqs):
        t.add(15, "Advanced degree match")
    elif "associate" in education and "associate" in reqs:
        t.add(15, "Education requirement met")


def _certifications(t: _Tally, certs: str, title: str, reqs: str) -> None:
    if not certs:
        return
    for rule in CERTIFICATIONS:
        if rule.token not in certs:
            continue
        for kw in rule.keywords:
            if kw in reqs or kw in title:
                t.add(rule.points, rule.label)
                break


def _specialties(t: _Tally, profession: str, title: str, dept: str, desc: str) -> None:
    if not profession:
        return
    for rule in SPECIALTIES:
        if rule.name not in profession:
            continue
        for kw in rule.keywords:
            if kw in title or kw in dept or kw in desc:
                t.add(15, rule.label)
                break


def _recency(t: _Tally, posted: datetime | None, now: datetime) -> None:
    if posted is None:
        return
    days = _days_since(posted, now)
    if days <= 7:
        t.add(5, "Recently posted")
    elif days <= 14:
        t.add(3, "Posted recently")


def _competition(t: _Tally, count: int | None) -> None:
    count = count or 0
    if count <= 0:
        return
    if count < 5:
        t.add(5, "Low competition")
    elif count > 20:
        t.add(3, "Popular position")


def score_job(
    applicant: ApplicantProfile,
    job: JobPosting,
    now: datetime | None = None,
) -> MatchResult:
    """Score *job* for *applicant*; never raises on missing fields.

    Rules run in a fixed order and simply add up. Only the final score is
    clamped to 0-100, so individual categories can exceed their nominal
    weight. Reasons keep rule order and are cut to the first five.
    """
    now = now or datetime.now(timezone.utc)
    profession = normalize(applicant.profession)
    title = normalize(job.title)
    desc = normalize(job.description)
    dept = normalize(job.department)
    reqs = normalize(job.requirements)

    t = _Tally()
    _profession(t, profession, title, desc)
    _location(t, applicant, job)
    _experience(t, normalize(applicant.experience_level), title, reqs)
    _education(t, normalize(applicant.education_level), reqs)
    _certifications(t, normalize(applicant.certifications), title, reqs)
    _specialties(t, profession, title, dept, desc)
    _recency(t, job.posted_date, now)
    _competition(t, job.applications_count)

    score = max(0, min(t.score, MAX_SCORE))
    log.debug("Scored %r: raw=%d final=%d reasons=%s", job.title, t.score, score, t.reasons)
    return MatchResult(match_score=score, match_reasons=t.reasons[:MAX_REASONS])
