"""
Recommended-jobs pipeline.

Runs: load applicant → fetch postings → score/rank → markdown report.
"""
from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import requests
import yaml

from carematch.config import ensure_dirs, get_env, get_int_env, load_applicant
from carematch.log import get_logger
from carematch.models import JobPosting
from carematch.ranker import DEFAULT_LIMIT, DEFAULT_MIN_SCORE, Recommendations
from carematch.report import build_report, write_report
from carematch.sources import FilePostingSource, MockPostingSource, PostingSource, get_source

log = get_logger(__name__)

_SOURCE_ERRORS = (requests.RequestException, OSError, ValueError, yaml.YAMLError)


def _fetch(source: PostingSource, limit: int, *, now: datetime, fallback: bool) -> list[JobPosting]:
    name = source.__class__.__name__
    try:
        return source.fetch(limit=limit)
    except _SOURCE_ERRORS as exc:
        log.error("[%s] FAILED: %s", name, exc)
        if not fallback:
            raise
        log.warning("Falling back to MockPostingSource")
        return MockPostingSource(now=now).fetch(limit=limit)


def run(
    *,
    profile_path: Path | None = None,
    source: PostingSource | None = None,
    max_jobs: int = 100,
    write: bool = True,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Load the applicant, fetch and rank postings, and build the report.

    Only a source picked from the environment falls back to sample
    postings on failure; a source passed in by the caller re-raises.
    """
    now = now or datetime.now(timezone.utc)
    applicant = load_applicant(profile_path)
    configured = source is None
    source = source or get_source(get_env)
    postings = _fetch(source, max_jobs, now=now, fallback=configured)

    recs = Recommendations(
        applicant,
        postings,
        min_score=get_int_env("MATCH_MIN_SCORE", DEFAULT_MIN_SCORE),
        limit=get_int_env("MATCH_TOP_N", DEFAULT_LIMIT),
        now=now,
    )

    content = build_report(applicant, recs.recommended, recs.annotated)
    report_path = None
    if write:
        ensure_dirs()
        report_path = write_report(content)

    log.info(
        "Run complete — postings=%d, recommended=%d",
        len(postings), len(recs.recommended),
    )
    return {
        "postings_found": len(postings),
        "recommended_count": len(recs.recommended),
        "recommended": recs.recommended,
        "annotated": recs.annotated,
        "report_path": str(report_path) if report_path else None,
        "report_preview": content[:2000] + "..." if len(content) > 2000 else content,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rank healthcare job postings for an applicant.")
    parser.add_argument("--profile", type=Path, default=None, help="Applicant profile YAML (default: config/profile.yaml)")
    parser.add_argument("--jobs-file", type=Path, default=None, help="JSON/YAML file of postings")
    parser.add_argument("--no-write", action="store_true", help="Print the report instead of writing it")
    args = parser.parse_args(argv)

    source = FilePostingSource(args.jobs_file) if args.jobs_file else None
    try:
        result = run(profile_path=args.profile, source=source, write=not args.no_write)
    except _SOURCE_ERRORS as exc:
        log.error("%s", exc)
        return 1

    for i, s in enumerate(result["recommended"], 1):
        log.info("  %d. %s — %d%% (%s)", i, s.job.title, s.match_score, ", ".join(s.match_reasons))
    if result["report_path"]:
        log.info("Report: %s", result["report_path"])
    else:
        print(result["report_preview"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
