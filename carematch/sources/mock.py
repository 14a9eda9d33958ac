"""Sample postings for demos and fallback when no feed is configured."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from carematch.log import get_logger
from carematch.models import JobPosting
from carematch.sources.base import PostingSource

log = get_logger(__name__)


class MockPostingSource(PostingSource):
    def __init__(self, now: datetime | None = None) -> None:
        self.now = now

    def fetch(self, limit: int = 50) -> list[JobPosting]:
        now = self.now or datetime.now(timezone.utc)
        log.info("MockPostingSource generating sample postings")
        postings = [
            JobPosting(
                id="mock-1",
                title="Senior Registered Nurse - ICU",
                company="Mercy General",
                department="Intensive Care Unit",
                description="Critical care nursing for adult ICU patients.",
                requirements="Active RN license, BLS and ACLS required. BSN preferred. 5+ years acute care.",
                city="Boston",
                state="MA",
                posted_date=now - timedelta(days=2),
                applications_count=3,
            ),
            JobPosting(
                id="mock-2",
                title="Home Health LPN",
                company="CareFirst Home Services",
                department="Home Health",
                description="Visiting patients for in-home care and medication management.",
                requirements="LPN license, CPR certified, reliable transportation.",
                city="Cambridge",
                state="MA",
                posted_date=now - timedelta(days=10),
                applications_count=8,
            ),
            JobPosting(
                id="mock-3",
                title="Certified Nursing Assistant (CNA) - Entry Level",
                company="Sunrise Senior Living",
                department="Long Term Care",
                description="Assist residents with daily living. New grads welcome.",
                requirements="CNA certification, no experience required.",
                city="Worcester",
                state="MA",
                posted_date=now - timedelta(days=1),
                applications_count=25,
            ),
            JobPosting(
                id="mock-4",
                title="Physical Therapist",
                company="Harbor Rehab",
                department="Outpatient Therapy",
                description="Outpatient orthopedic PT clinic.",
                requirements="DPT, state license, 1-3 years experience.",
                city="Providence",
                state="RI",
                posted_date=now - timedelta(days=20),
                applications_count=12,
            ),
            JobPosting(
                id="mock-5",
                title="Pediatric Nurse",
                company="Children's Hospital",
                department="Pediatrics",
                description="Inpatient pediatric unit serving children of all ages.",
                requirements="RN license, PALS required, BSN.",
                city="Boston",
                state="MA",
                posted_date=now - timedelta(days=5),
                applications_count=0,
            ),
        ]
        return postings[:limit]
