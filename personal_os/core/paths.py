#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the Markdown files behind Personal OS records.

The Markdown root is the directory holding the user's files:
    ROOT/
    ├── reviews/
    │   ├── daily/       # YYYY-MM-DD.md, one per day
    │   └── weekly/      # YYYY-MM-DD.md, one per week start
    ├── frameworks/
    │   └── life_map.md
    ├── goals/           # 1_year.md, 3_year.md, 10_year.md
    │   └── .drafts/
    └── logs/

ROOT comes from the PERSONAL_OS_ROOT environment variable and defaults to
the current working directory. Stores take explicit directories;
``layout_for()`` gives every location under ROOT or any other root.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path
from typing import NamedTuple

ROOT_ENV_VAR = "PERSONAL_OS_ROOT"


def get_markdown_root() -> Path:
    """
    Determine the Markdown root directory.

    Returns:
        Resolved path from PERSONAL_OS_ROOT, or the current directory
    """
    configured = os.environ.get(ROOT_ENV_VAR)
    if configured:
        return Path(configured).expanduser().resolve()
    return Path.cwd().resolve()


class MarkdownLayout(NamedTuple):
    """Locations of every record file under one Markdown root."""

    root: Path
    reviews_daily_dir: Path
    reviews_weekly_dir: Path
    life_map_path: Path
    goals_dir: Path
    goals_drafts_dir: Path
    log_dir: Path


def layout_for(root: Path) -> MarkdownLayout:
    """
    Build the record layout under a Markdown root.

    Examples:
        >>> layout_for(Path("/notes")).life_map_path
        PosixPath('/notes/frameworks/life_map.md')
    """
    root = Path(root)
    return MarkdownLayout(
        root=root,
        reviews_daily_dir=root / "reviews" / "daily",
        reviews_weekly_dir=root / "reviews" / "weekly",
        life_map_path=root / "frameworks" / "life_map.md",
        goals_dir=root / "goals",
        goals_drafts_dir=root / "goals" / ".drafts",
        log_dir=root / "logs",
    )


# ----- Markdown root -----
ROOT: Path = get_markdown_root()
