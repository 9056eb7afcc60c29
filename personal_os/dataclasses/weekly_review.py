#!/usr/bin/env python3
"""
weekly_review.py
-------------------
Dataclasses and codec for weekly review documents.

A weekly review lives in ``reviews/weekly/YYYY-MM-DD.md``, keyed by the
date the week starts. The template has five narrative sections, each
answered in a blockquote, an optional notes section and a completion-time
footer with the review's time target.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import re
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Tuple

# --- Local imports ---
from personal_os.dataclasses.daily_review import (
    COMPLETION_LABEL,
    format_completion_time,
    parse_completion_minutes,
)
from personal_os.utils import md
from personal_os.utils.fs import is_iso_date

logger = logging.getLogger(__name__)

DOCUMENT_TITLE = "# Weekly Review"
DATE_LABEL = "Week Starting"
WEEK_NUMBER_LABEL = "Week Number"
WEEK_NUMBER_PATTERN = re.compile(r"\*\*Week Number:\*\*\s*(\d+)")

MIN_WEEK = 1
MAX_WEEK = 53

# (field name, section heading, caption) in document order
NARRATIVE_SECTIONS: Tuple[Tuple[str, str, str], ...] = (
    (
        "moved_needle",
        "What Actually Moved the Needle This Week",
        "*Not tasks completed. The outcomes that truly mattered.*",
    ),
    (
        "noise_disguised_as_work",
        "What Was Noise Disguised as Work",
        "*Busy work that felt productive but didn't advance key goals.*",
    ),
    (
        "time_leaks",
        "Where Your Time Leaked",
        "*Where did hours disappear without meaningful output?*",
    ),
    (
        "strategic_insight",
        "One Strategic Insight",
        "*What did this week teach you about your work, priorities, or approach?*",
    ),
    (
        "adjustment_for_next_week",
        "One Adjustment for Next Week",
        "*What one change will you make based on this week's learning?*",
    ),
)

NOTES_SECTION = "Optional: Notes"
NOTES_CAPTION = "*Anything else worth capturing?*"
TARGET_CAPTION = "*Target: under 20 minutes*"

FIELD_KEYS = {
    "date": "date",
    "week_number": "weekNumber",
    "moved_needle": "movedNeedle",
    "noise_disguised_as_work": "noiseDisguisedAsWork",
    "time_leaks": "timeLeaks",
    "strategic_insight": "strategicInsight",
    "adjustment_for_next_week": "adjustmentForNextWeek",
    "notes": "notes",
    "duration": "duration",
    "file_path": "filePath",
}


def _record_to_dict(record: Any) -> Dict[str, Any]:
    return {
        FIELD_KEYS[f.name]: getattr(record, f.name)
        for f in fields(record)
        if getattr(record, f.name) is not None
    }


@dataclass
class WeeklyReviewListItem:
    """Lightweight projection of a weekly review for list views."""

    date: str
    week_number: int
    moved_needle: str
    file_path: str
    type: str = "weekly"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "type": self.type,
            "weekNumber": self.week_number,
            "movedNeedle": self.moved_needle,
            "filePath": self.file_path,
        }


@dataclass
class WeeklyReview:
    """
    Weekly review as recovered from a Markdown file.

    Attributes:
        file_path: Source file
        date: Week start date (YYYY-MM-DD)
        week_number: 1-53
        moved_needle: Outcomes that mattered
        noise_disguised_as_work: Busy work that did not advance goals
        time_leaks: Where hours disappeared
        strategic_insight: What the week taught
        adjustment_for_next_week: One change for next week
        notes: Short free-text notes
        duration: Minutes taken to complete the review
    """

    file_path: str = ""
    date: Optional[str] = None
    week_number: Optional[int] = None
    moved_needle: Optional[str] = None
    noise_disguised_as_work: Optional[str] = None
    time_leaks: Optional[str] = None
    strategic_insight: Optional[str] = None
    adjustment_for_next_week: Optional[str] = None
    notes: Optional[str] = None
    duration: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)

    def to_list_item(self, fallback_date: str = "") -> WeeklyReviewListItem:
        return WeeklyReviewListItem(
            date=self.date or fallback_date,
            week_number=self.week_number or 0,
            moved_needle=self.moved_needle or "",
            file_path=self.file_path,
        )


@dataclass
class WeeklyReviewFormData:
    """A complete weekly review, validated and ready to serialize."""

    date: str
    week_number: int
    moved_needle: str
    noise_disguised_as_work: str
    time_leaks: str
    strategic_insight: str
    adjustment_for_next_week: str
    notes: Optional[str] = None
    duration: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)


def parse_weekly_review(content: str, file_path: str = "") -> WeeklyReview:
    """
    Parse a weekly review document.

    Fields are extracted independently; missing or placeholder values stay
    None. Never raises.

    Args:
        content: Full markdown document
        file_path: Source path recorded on the result

    Returns:
        WeeklyReview with whatever fields could be recovered
    """
    review = WeeklyReview(file_path=file_path)

    date_value = md.extract_labeled_field(content, DATE_LABEL)
    if date_value and is_iso_date(date_value):
        review.date = date_value

    week = WEEK_NUMBER_PATTERN.search(content)
    if week:
        week_number = int(week.group(1))
        if MIN_WEEK <= week_number <= MAX_WEEK:
            review.week_number = week_number

    for name, heading, _caption in NARRATIVE_SECTIONS:
        section = md.extract_section(content, heading)
        if section is not None:
            setattr(review, name, md.extract_blockquote(section))

    notes_section = md.extract_section(content, NOTES_SECTION)
    if notes_section is not None:
        if NOTES_CAPTION.lower() in notes_section.lower():
            review.notes = md.extract_text_after(notes_section, NOTES_CAPTION)
        else:
            review.notes = md.first_content_line(notes_section)

    review.duration = parse_completion_minutes(content)

    logger.debug(f"Parsed weekly review {review.date or file_path}")
    return review


def serialize_weekly_review(data: WeeklyReviewFormData) -> str:
    """
    Render a weekly review with the fixed template.

    Args:
        data: Validated form data

    Returns:
        Markdown document text ending with the time target caption
    """
    lines: List[str] = [
        DOCUMENT_TITLE,
        "",
        f"**{DATE_LABEL}:** {data.date}",
        f"**{WEEK_NUMBER_LABEL}:** {data.week_number}",
        "",
        "---",
        "",
    ]

    for name, heading, caption in NARRATIVE_SECTIONS:
        lines += [
            f"## {heading}",
            "",
            caption,
            "",
            f"> {getattr(data, name)}",
            "",
            "---",
            "",
        ]

    lines += [
        f"## {NOTES_SECTION}",
        "",
        NOTES_CAPTION,
        "",
        data.notes or "",
        "",
        "---",
        "",
        f"**{COMPLETION_LABEL}:** {format_completion_time(data.duration)}",
        "",
        TARGET_CAPTION,
    ]
    return "\n".join(lines)
