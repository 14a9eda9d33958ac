"""Markdown report of recommended postings for an applicant."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from carematch.config import REPORTS_DIR
from carematch.log import get_logger
from carematch.models import ApplicantProfile, ScoredJob

log = get_logger(__name__)


def _clip(text: str | None, width: int) -> str:
    text = text or ""
    return text[:width] + ("…" if len(text) > width else "")


def _badge(score: int) -> str:
    if score >= 70:
        return "\U0001f7e2"
    if score >= 40:
        return "\U0001f7e1"
    return "⚪"


def build_report(
    applicant: ApplicantProfile,
    recommended: list[ScoredJob],
    annotated: list[ScoredJob],
) -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    who = applicant.name or applicant.profession or "Applicant"
    lines: list[str] = [f"# Recommended Jobs for {who} — {date}", ""]

    lines.append(f"**{len(annotated)}** postings scored | **{len(recommended)}** recommended")
    lines.append("")

    if recommended:
        lines.append("## Recommended Jobs")
        lines.append("")
        for s in recommended:
            company = f" @ {s.job.company}" if s.job.company else ""
            lines.append(f"### {_badge(s.match_score)} {s.job.title or 'Untitled'}{company}")
            lines.append(f"- **Match:** {s.match_score}%")
            lines.append(f"- **Location:** {s.job.location or '—'}")
            if s.match_reasons:
                lines.append(f"- **Why:** {', '.join(s.match_reasons)}")
            if s.job.url:
                lines.append(f"- **Apply:** [Link]({s.job.url})")
            lines.append("")
    else:
        lines.append("_No postings scored above the recommendation threshold._")
        lines.append("")

    if annotated:
        lines.append("---")
        lines.append("")
        lines.append("## All Postings")
        lines.append("")
        lines.append("| # | Role | Department | Location | Match |")
        lines.append("|--:|------|------------|----------|------:|")
        for i, s in enumerate(annotated, 1):
            lines.append(
                f"| {i} | {_clip(s.job.title, 40)} | {_clip(s.job.department, 22)} "
                f"| {_clip(s.job.location, 22)} | {s.match_score}% |"
            )
        lines.append("")

    log.info("Built report: %d scored, %d recommended", len(annotated), len(recommended))
    return "\n".join(lines)


def write_report(content: str, reports_dir: Path | None = None) -> Path:
    reports_dir = reports_dir or REPORTS_DIR
    reports_dir.mkdir(parents=True, exist_ok=True)
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = reports_dir / f"recommended_{date}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
