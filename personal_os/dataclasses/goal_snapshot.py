#!/usr/bin/env python3
"""
goal_snapshot.py
-------------------
Goal snapshot extraction from goal documents.

Goal files (``goals/1_year.md`` and friends) are free-form Markdown with an
optional YAML frontmatter block. The dashboard shows a snapshot of the
first few goals: a title taken from the ``**Goal N:**`` marker, a short
description from the ``*What:*`` field, and a status.

Frontmatter status is document-wide. Every goal in a document gets the
same normalized status.

Usage:
    result = parse_frontmatter(content)
    status = normalize_status(result.status)
    goals = parse_goals(result.body, status)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import datetime
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from personal_os.core.exceptions import ValidationError
from personal_os.dataclasses.enums import GoalStatus, Timeframe
from personal_os.utils.md import match_frontmatter

logger = logging.getLogger(__name__)

MAX_GOALS = 5
MAX_DESCRIPTION_LENGTH = 100

GOAL_MARKER_PATTERN = re.compile(r"\*\*Goal\s+(\d+):\*\*")
DESCRIPTION_PATTERN = re.compile(r"\*What:\*\s*\n([\s\S]+?)(?:\n\n|\n\*|\Z)")
STATUS_LINE_PATTERN = re.compile(r"^status:\s*(.+)$", re.MULTILINE)


@dataclass
class FrontmatterResult:
    """
    Split of a goal document.

    Attributes:
        status: Raw ``status`` value from the frontmatter, or None
        body: Document text after the frontmatter (whole text if none)
        metadata: All frontmatter keys that parsed as a YAML mapping
    """

    status: Optional[str]
    body: str
    metadata: Optional[Dict[str, Any]] = None


@dataclass
class GoalSnapshot:
    """One goal as shown on the dashboard."""

    title: str
    description: str
    status: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status,
        }


def parse_frontmatter(content: str) -> FrontmatterResult:
    """
    Separate the frontmatter block from the body and read its status.

    The block is parsed with YAML. When it is not valid YAML the
    ``status:`` line is read directly, so a stray colon elsewhere in the
    block does not hide the status. Never raises.

    Args:
        content: Full goal document

    Returns:
        FrontmatterResult; status is None without frontmatter or status key

    Examples:
        >>> parse_frontmatter("---\\nstatus: behind\\n---\\nBody").status
        'behind'
        >>> parse_frontmatter("Body only").body
        'Body only'
    """
    split = match_frontmatter(content)
    if split is None:
        return FrontmatterResult(status=None, body=content)

    frontmatter_text, body = split
    metadata = _load_metadata(frontmatter_text)

    if metadata is not None:
        raw = metadata.get("status")
        status = str(raw).strip() if raw is not None else None
    else:
        match = STATUS_LINE_PATTERN.search(frontmatter_text)
        status = match.group(1).strip() if match else None

    return FrontmatterResult(status=status or None, body=body, metadata=metadata)


def _load_metadata(frontmatter_text: str) -> Optional[Dict[str, Any]]:
    """Load frontmatter as a mapping with dates as ISO strings, or None."""
    try:
        data = yaml.safe_load(frontmatter_text)
    except yaml.YAMLError as e:
        logger.debug(f"Frontmatter is not valid YAML: {e}")
        return None

    if data is None:
        return {}
    if not isinstance(data, dict):
        return None

    return {
        str(key): (
            value.isoformat()
            if isinstance(value, (datetime.date, datetime.datetime))
            else value
        )
        for key, value in data.items()
    }


def normalize_status(raw: Optional[str]) -> str:
    """
    Map a raw status onto one of the three dashboard statuses.

    Lowercases and turns hyphens into spaces before matching. Anything
    unrecognized, and a missing status, is "On Track".

    Examples:
        >>> normalize_status("needs-attention")
        'Needs Attention'
        >>> normalize_status("BEHIND")
        'Behind'
        >>> normalize_status("paused")
        'On Track'
    """
    if not raw:
        return GoalStatus.ON_TRACK.value

    normalized = raw.lower().replace("-", " ")
    for status in GoalStatus:
        if normalized == status.value.lower():
            return status.value
    return GoalStatus.ON_TRACK.value


def truncate_description(description: str) -> str:
    if len(description) <= MAX_DESCRIPTION_LENGTH:
        return description
    return description[:MAX_DESCRIPTION_LENGTH] + "..."


def parse_goals(
    body: str, default_status: str, limit: int = MAX_GOALS
) -> List[GoalSnapshot]:
    """
    Extract the first goals of a document body.

    A goal starts at a ``**Goal N:**`` marker and runs to the next marker.
    Its description is the text after a ``*What:*`` line, up to a blank
    line, a line starting with ``*``, or the end of the goal.

    Args:
        body: Document body (frontmatter already removed)
        default_status: Status assigned to every goal
        limit: Maximum number of goals returned

    Returns:
        GoalSnapshot list in document order
    """
    markers = list(GOAL_MARKER_PATTERN.finditer(body))
    goals: List[GoalSnapshot] = []

    for i, marker in enumerate(markers[:limit]):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(body)
        goal_text = body[marker.start() : end]

        match = DESCRIPTION_PATTERN.search(goal_text)
        description = match.group(1).strip() if match else ""

        goals.append(
            GoalSnapshot(
                title=f"Goal {marker.group(1)}",
                description=truncate_description(description),
                status=default_status,
            )
        )

    return goals


def goals_snapshot(content: str, limit: int = MAX_GOALS) -> List[GoalSnapshot]:
    """
    Snapshot of a whole goal document.

    Empty or whitespace-only documents have no goals.
    """
    if not content.strip():
        return []

    frontmatter = parse_frontmatter(content)
    status = normalize_status(frontmatter.status)
    return parse_goals(frontmatter.body, status, limit=limit)


def timeframe_to_filename(timeframe: str) -> str:
    """
    Goal file name for a timeframe token.

    Raises:
        ValidationError: If the token is not a known timeframe

    Examples:
        >>> timeframe_to_filename("1-year")
        '1_year.md'
    """
    try:
        return Timeframe(timeframe).filename
    except ValueError:
        raise ValidationError(
            f"Invalid timeframe. Must be one of: {', '.join(Timeframe.choices())}"
        )
