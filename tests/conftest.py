"""
Pytest configuration and shared fixtures.
"""

import os

os.environ.setdefault("CAREMATCH_LOG_FILE", "0")

from datetime import datetime, timedelta, timezone

import pytest

from carematch.models import ApplicantProfile, JobPosting

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation time so recency rules are deterministic."""
    return NOW


@pytest.fixture
def senior_nurse() -> ApplicantProfile:
    """Senior RN in Boston with RN and BLS."""
    return ApplicantProfile(
        profession="Registered Nurse",
        city="Boston",
        state="MA",
        experience_level="5 years senior",
        certifications="RN, BLS",
    )


@pytest.fixture
def senior_nurse_job() -> JobPosting:
    """Posting that matches the senior nurse on nearly every rule."""
    return JobPosting(
        id="job-1",
        title="Senior Registered Nurse",
        city="Boston",
        state="MA",
        requirements="RN required, BLS certified",
        posted_date=NOW - timedelta(days=3),
        applications_count=2,
    )


@pytest.fixture
def make_job():
    """Factory for postings with only the given fields set."""
    def _make(**kwargs) -> JobPosting:
        return JobPosting(**kwargs)
    return _make


@pytest.fixture
def profile_file(tmp_path):
    """Applicant profile YAML nested under ``applicant:``."""
    path = tmp_path / "profile.yaml"
    path.write_text(
        "applicant:\n"
        "  name: Jane Doe\n"
        "  profession: Registered Nurse\n"
        "  city: Boston\n"
        "  state: MA\n"
        "  experience_level: 5+ years senior\n"
        "  education_level: Bachelor's\n"
        "  certifications: RN, BLS\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def postings_file(tmp_path):
    """JSON export in the job-list endpoint shape."""
    path = tmp_path / "jobs.json"
    path.write_text(
        """{
  "jobs": [
    {"id": "a", "title": "Senior Registered Nurse", "city": "Boston", "state": "MA",
     "requirements": "RN license, BSN", "postedDate": "2024-06-14T08:00:00Z", "applicationsCount": 1},
    {"id": "b", "title": "Medical Receptionist", "city": "Denver", "state": "CO"},
    {"id": "c", "title": "Staff Nurse", "city": "Springfield", "state": "MA",
     "requirements": "Experienced nurse, BLS"}
  ]
}""",
        encoding="utf-8",
    )
    return path
