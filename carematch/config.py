"""Load applicant profile and env configuration."""
from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from carematch.log import get_logger
from carematch.models import ApplicantProfile

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
PROFILE_PATH: Path = CONFIG_DIR / "profile.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"
DATA_DIR: Path = ROOT_DIR / "data"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def get_int_env(key: str, default: int) -> int:
    raw = get_env(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning("Ignoring non-integer %s=%r, using %d", key, raw, default)
        return default


def load_applicant(path: Path | None = None) -> ApplicantProfile:
    """Read the applicant from YAML, top-level or nested under ``applicant:``."""
    path = Path(path) if path else PROFILE_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: profile must be a mapping")
    if isinstance(data.get("applicant"), dict):
        data = data["applicant"]

    applicant = ApplicantProfile.from_dict(data)
    log.info("Loaded applicant profile from %s (%s)", path.name, applicant.profession or "no profession")
    return applicant


def ensure_dirs() -> None:
    for d in (REPORTS_DIR, DATA_DIR):
        d.mkdir(parents=True, exist_ok=True)
