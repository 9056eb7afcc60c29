#!/usr/bin/env python3
"""
daily_review.py
-------------------
Dataclasses and codec for daily check-in documents.

A daily review is a Markdown file ``reviews/daily/YYYY-MM-DD.md`` built
from a fixed template: labeled fields (``**Date:**``, ``**Energy level
(1-10):**``), narrative sections answered in blockquotes, a friction
checkbox pair, an optional notes line, optional Life Map ratings and a
completion-time footer.

Two record shapes:
- DailyReview: what parsing recovered from a file. Every field may be
  missing; one unreadable field never blocks the others.
- DailyReviewFormData: a complete, validated record ready to be written.

Round trip: ``parse_daily_review(serialize_daily_review(form))`` recovers
every populated field of ``form``. The reverse is not lossless: parsing a
hand-edited file keeps only the recognized fields.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import re
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

# --- Local imports ---
from personal_os.dataclasses.enums import Domain, FrictionAction
from personal_os.utils import md
from personal_os.utils.fs import is_iso_date

logger = logging.getLogger(__name__)

# ----- Template text -----
DOCUMENT_TITLE = "# Daily Check-In"
DATE_LABEL = "Date"
ENERGY_LABEL = "Energy level (1-10)"

ENERGY_SECTION = "Energy Check"
ENERGY_SCALE_CAPTION = "*1 = depleted, 5 = functional, 10 = fully charged*"
ENERGY_PROMPT = "What's affecting your energy today?"

WIN_SECTION = "One Meaningful Win"
WIN_CAPTION = "*Not the biggest task completed. The thing that actually mattered.*"

FRICTION_SECTION = "One Friction Point"
FRICTION_CAPTION = "*What's creating resistance? Where are you stuck?*"
NEEDS_ACTION_LABEL = "Needs action"
ACKNOWLEDGE_LABEL = "Just needs acknowledgment"

LET_GO_SECTION = "One Thing to Let Go"
LET_GO_CAPTION = "*What expectation, worry, or 'should' can you release?*"

PRIORITY_SECTION = "One Priority for Tomorrow"
PRIORITY_CAPTION = (
    "*If you only accomplish one thing, what would make tomorrow a success?*"
)

NOTES_SECTION = "Optional: Brief Notes"
NOTES_CAPTION = "*Anything else worth capturing? Keep it short.*"

RATINGS_SECTION = "Life Map Ratings"
RATINGS_CAPTION = "*Rate your satisfaction today (0 = not rated, 1-10)*"

COMPLETION_LABEL = "Time to complete"
COMPLETION_PLACEHOLDER = "___ minutes"

COMPLETION_LABEL_PATTERN = re.compile(r"\*\*Time to complete:\*\*", re.IGNORECASE)
COMPLETION_PATTERN = re.compile(
    r"\*\*Time to complete:\*\*\s*(\d+)\s*minutes", re.IGNORECASE
)
NEEDS_ACTION_PATTERN = re.compile(r"\[x\]\s*Needs action", re.IGNORECASE)
ACKNOWLEDGE_PATTERN = re.compile(r"\[x\]\s*Just needs acknowledgment", re.IGNORECASE)

MIN_ENERGY = 1
MAX_ENERGY = 10


# ----- Domain ratings -----
@dataclass
class DomainRatings:
    """
    Optional per-domain satisfaction ratings recorded with a daily review.

    ``None`` means "not rated". A rating of 0 is the template's way of
    writing "not rated" and is stored as None.
    """

    career: Optional[int] = None
    relationships: Optional[int] = None
    health: Optional[int] = None
    meaning: Optional[int] = None
    finances: Optional[int] = None
    fun: Optional[int] = None

    def __post_init__(self) -> None:
        for domain in Domain:
            if getattr(self, domain.value) == 0:
                setattr(self, domain.value, None)

    def get(self, domain: Domain) -> Optional[int]:
        return getattr(self, domain.value)

    @property
    def has_any_rating(self) -> bool:
        return any(self.get(domain) for domain in Domain)

    def to_dict(self) -> Dict[str, int]:
        """Rated domains only."""
        return {
            domain.value: self.get(domain)
            for domain in Domain
            if self.get(domain) is not None
        }


# ----- Records -----
FIELD_KEYS = {
    "date": "date",
    "energy_level": "energyLevel",
    "energy_factors": "energyFactors",
    "meaningful_win": "meaningfulWin",
    "friction_point": "frictionPoint",
    "friction_action": "frictionAction",
    "thing_to_let_go": "thingToLetGo",
    "tomorrow_priority": "tomorrowPriority",
    "notes": "notes",
    "completion_time_minutes": "completionTimeMinutes",
    "domain_ratings": "domainRatings",
    "file_path": "filePath",
}


def _record_to_dict(record: Any) -> Dict[str, Any]:
    """camelCase JSON mapping of a review record, omitting missing fields."""
    out: Dict[str, Any] = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if value is None:
            continue
        if isinstance(value, DomainRatings):
            value = value.to_dict()
        elif isinstance(value, FrictionAction):
            value = value.value
        out[FIELD_KEYS[f.name]] = value
    return out


@dataclass
class ReviewListItem:
    """Lightweight projection of a daily review for list views."""

    date: str
    energy_level: int
    tomorrow_priority: str
    file_path: str
    type: str = "daily"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "type": self.type,
            "energyLevel": self.energy_level,
            "tomorrowPriority": self.tomorrow_priority,
            "filePath": self.file_path,
        }


@dataclass
class DailyReview:
    """
    Daily review as recovered from a Markdown file.

    Every field is optional: parsing is fail-soft per field.

    Attributes:
        file_path: Source file the review was parsed from
        date: Review date (YYYY-MM-DD)
        energy_level: 1-10
        energy_factors: What affected energy today
        meaningful_win: The win that mattered
        friction_point: What created resistance
        friction_action: Whether the friction needs action
        thing_to_let_go: What to release
        tomorrow_priority: The one priority for tomorrow
        notes: Short free-text notes
        completion_time_minutes: Time taken to fill the review
        domain_ratings: Optional Life Map ratings
    """

    file_path: str = ""
    date: Optional[str] = None
    energy_level: Optional[int] = None
    energy_factors: Optional[str] = None
    meaningful_win: Optional[str] = None
    friction_point: Optional[str] = None
    friction_action: Optional[FrictionAction] = None
    thing_to_let_go: Optional[str] = None
    tomorrow_priority: Optional[str] = None
    notes: Optional[str] = None
    completion_time_minutes: Optional[int] = None
    domain_ratings: Optional[DomainRatings] = None

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)

    def to_list_item(self, fallback_date: str = "") -> ReviewListItem:
        """
        Project onto a list item.

        Missing values fall back to the filename date, 0 and "".
        """
        return ReviewListItem(
            date=self.date or fallback_date,
            energy_level=self.energy_level or 0,
            tomorrow_priority=self.tomorrow_priority or "",
            file_path=self.file_path,
        )


@dataclass
class DailyReviewFormData:
    """
    A complete daily review, validated and ready to serialize.

    Built by ReviewValidator.validate_daily() from caller input.
    """

    date: str
    energy_level: int
    meaningful_win: str
    tomorrow_priority: str
    energy_factors: Optional[str] = None
    friction_point: Optional[str] = None
    friction_action: Optional[FrictionAction] = None
    thing_to_let_go: Optional[str] = None
    notes: Optional[str] = None
    completion_time_minutes: Optional[int] = None
    domain_ratings: Optional[DomainRatings] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)


# ----- Parsing -----
def parse_daily_review(content: str, file_path: str = "") -> DailyReview:
    """
    Parse a daily review document.

    Each field is extracted independently; anything missing, malformed or
    left as a template placeholder stays None. Never raises.

    Args:
        content: Full markdown document
        file_path: Source path recorded on the result

    Returns:
        DailyReview with whatever fields could be recovered

    Examples:
        >>> review = parse_daily_review(path.read_text(), str(path))
        >>> review.energy_level
        7
    """
    review = DailyReview(file_path=file_path)

    date_value = md.extract_labeled_field(content, DATE_LABEL)
    if date_value and is_iso_date(date_value):
        review.date = date_value

    energy = md.parse_leading_int(md.extract_labeled_field(content, ENERGY_LABEL))
    if energy is not None and MIN_ENERGY <= energy <= MAX_ENERGY:
        review.energy_level = energy

    energy_section = md.extract_section(content, ENERGY_SECTION)
    if energy_section is not None:
        review.energy_factors = md.extract_text_after(energy_section, ENERGY_PROMPT)

    win_section = md.extract_section(content, WIN_SECTION)
    if win_section is not None:
        review.meaningful_win = md.extract_blockquote(win_section)

    friction_section = md.extract_section(content, FRICTION_SECTION)
    if friction_section is not None:
        review.friction_point = md.extract_blockquote(friction_section)
        review.friction_action = _parse_friction_action(friction_section)

    let_go_section = md.extract_section(content, LET_GO_SECTION)
    if let_go_section is not None:
        review.thing_to_let_go = md.extract_blockquote(let_go_section)

    priority_section = md.extract_section(content, PRIORITY_SECTION)
    if priority_section is not None:
        review.tomorrow_priority = md.extract_blockquote(priority_section)

    notes_section = md.extract_section(content, NOTES_SECTION)
    if notes_section is not None:
        review.notes = md.extract_text_after(notes_section, NOTES_CAPTION)

    review.completion_time_minutes = parse_completion_minutes(content)

    ratings_section = md.extract_section(content, RATINGS_SECTION)
    if ratings_section is not None:
        review.domain_ratings = _parse_domain_ratings(ratings_section)

    logger.debug(f"Parsed daily review {review.date or file_path}")
    return review


def _parse_friction_action(section: str) -> Optional[FrictionAction]:
    # Checkboxes quoted inside the answer are not choices
    choices = "\n".join(
        line for line in section.split("\n") if not line.startswith(">")
    )
    if NEEDS_ACTION_PATTERN.search(choices):
        return FrictionAction.ADDRESS
    if ACKNOWLEDGE_PATTERN.search(choices):
        return FrictionAction.LETTING_GO
    return None


def _parse_domain_ratings(section: str) -> Optional[DomainRatings]:
    """Read ``Career: N`` style lines; keep the result only if any rating is set."""
    values: Dict[str, int] = {}
    for domain in Domain:
        match = re.search(
            rf"{domain.display_name}:\s*(\d+)", section, re.IGNORECASE
        )
        if match:
            value = int(match.group(1))
            if 0 <= value <= 10:
                values[domain.value] = value

    ratings = DomainRatings(**values)
    return ratings if ratings.has_any_rating else None


# ----- Serialization -----
def serialize_daily_review(data: DailyReviewFormData) -> str:
    """
    Render a daily review with the fixed template.

    Section order, captions and separators are always the same. Optional
    answers are written as empty lines or empty blockquotes so the file
    stays a fillable template. The Life Map Ratings section is written
    only when at least one domain is rated.

    Args:
        data: Validated form data

    Returns:
        Markdown document text
    """
    lines: List[str] = [
        DOCUMENT_TITLE,
        "",
        f"**{DATE_LABEL}:** {data.date}",
        "",
        "---",
        "",
    ]

    lines += _section(
        ENERGY_SECTION,
        [
            f"**{ENERGY_LABEL}:** {data.energy_level}",
            "",
            ENERGY_SCALE_CAPTION,
            "",
            ENERGY_PROMPT,
            "",
            data.energy_factors or "",
        ],
    )
    lines += _section(WIN_SECTION, [WIN_CAPTION, "", f"> {data.meaningful_win}"])

    needs_action = "[x]" if data.friction_action == FrictionAction.ADDRESS else "[ ]"
    acknowledge = "[x]" if data.friction_action == FrictionAction.LETTING_GO else "[ ]"
    lines += _section(
        FRICTION_SECTION,
        [
            FRICTION_CAPTION,
            "",
            f"> {data.friction_point or ''}",
            "",
            f"- {needs_action} {NEEDS_ACTION_LABEL}",
            f"- {acknowledge} {ACKNOWLEDGE_LABEL}",
        ],
    )
    lines += _section(
        LET_GO_SECTION, [LET_GO_CAPTION, "", f"> {data.thing_to_let_go or ''}"]
    )
    lines += _section(
        PRIORITY_SECTION, [PRIORITY_CAPTION, "", f"> {data.tomorrow_priority}"]
    )
    lines += _section(NOTES_SECTION, [NOTES_CAPTION, "", data.notes or ""])

    if data.domain_ratings is not None and data.domain_ratings.has_any_rating:
        ratings = [
            f"- {domain.display_name}: {data.domain_ratings.get(domain) or 0}"
            for domain in Domain
        ]
        lines += _section(RATINGS_SECTION, [RATINGS_CAPTION, ""] + ratings)

    lines.append(
        f"**{COMPLETION_LABEL}:** {format_completion_time(data.completion_time_minutes)}"
    )
    return "\n".join(lines)


def _section(title: str, body: List[str]) -> List[str]:
    return [f"## {title}", ""] + body + ["", "---", ""]


def format_completion_time(minutes: Optional[int]) -> str:
    """
    Footer value for the completion time.

    Examples:
        >>> format_completion_time(4)
        '4 minutes'
        >>> format_completion_time(None)
        '___ minutes'
    """
    return f"{minutes} minutes" if minutes is not None else COMPLETION_PLACEHOLDER


def parse_completion_minutes(content: str) -> Optional[int]:
    """
    Read the completion-time footer.

    The footer is the last ``**Time to complete:**`` field in the document,
    so a label quoted in an earlier answer is not taken for it.

    Examples:
        >>> parse_completion_minutes("**Time to complete:** 4 minutes")
        4
        >>> parse_completion_minutes("**Time to complete:** ___ minutes") is None
        True
    """
    starts = [match.start() for match in COMPLETION_LABEL_PATTERN.finditer(content)]
    if not starts:
        return None
    footer = COMPLETION_PATTERN.match(content, starts[-1])
    return int(footer.group(1)) if footer else None
