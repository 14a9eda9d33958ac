#!/usr/bin/env python3
"""Entry point to build the recommended-jobs report."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from carematch.log import get_logger
from carematch.config import PROFILE_PATH

log = get_logger(__name__)


def _check_setup(argv: list[str]) -> bool:
    """Return True if no profile is available."""
    if "--profile" not in argv and not PROFILE_PATH.exists():
        print()
        print("  No profile found. Copy the example and fill it in:")
        print("    cp config/profile.example.yaml config/profile.yaml")
        print()
        return True
    return False


if __name__ == "__main__":
    if _check_setup(sys.argv[1:]):
        sys.exit(1)

    from carematch.recommend import main

    sys.exit(main())
