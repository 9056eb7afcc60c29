#!/usr/bin/env python3
"""
life_map.py
-------------------
Dataclass and codec for the Life Map scores table.

The Life Map lives in ``frameworks/life_map.md`` as a Markdown table
embedded in hand-written prose:

    | Domain | Score (1-10) | Brief Assessment |
    |--------|--------------|------------------|
    | Career | 8 | Strong momentum, good team |
    ...

Parsing reads only the table rows and ignores everything else. Writing
replaces only the table block and keeps the surrounding prose verbatim,
so the file stays editable by hand.

Key Design:
- Fixed identity: exactly six domains, never added or removed
- Score 0 means "not set"; valid user ratings are 1-10
- Permissive parse: unknown rows, bad scores and missing tables degrade
  to defaults instead of raising
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, TypedDict

# --- Local imports ---
from personal_os.dataclasses.enums import Domain
from personal_os.utils.md import parse_score

logger = logging.getLogger(__name__)

TABLE_HEADER = "| Domain | Score (1-10) | Brief Assessment |"
TABLE_SEPARATOR = "|--------|--------------|------------------|"
SEPARATOR_ROW_PATTERN = re.compile(r"^\|[-|]+\|$")

MIN_USER_SCORE = 1
MAX_USER_SCORE = 10

# Rows containing these words are read as header rows and skipped
HEADER_WORDS = ("Domain", "Score")


# ----- Type Definitions -----
class ChartDataItem(TypedDict):
    """One radar-chart point: capitalized domain label and its score."""

    domain: str
    score: Optional[int]


@dataclass
class DomainScore:
    """
    Score and short assessment for one domain.

    Attributes:
        score: 1-10 user rating, or 0 when not set
        assessment: Free-text assessment (empty when not set)
    """

    score: int = 0
    assessment: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "assessment": self.assessment}


def _default_domains() -> Dict[Domain, DomainScore]:
    return {domain: DomainScore() for domain in Domain}


@dataclass
class LifeMap:
    """
    The six Life Map domains with their scores.

    Attributes:
        domains: One DomainScore per Domain, always all six

    Examples:
        >>> life_map = LifeMap.from_markdown_text(path.read_text())
        >>> life_map.domains[Domain.CAREER].score
        8
        >>> path.write_text(life_map.update_file_text(path.read_text()))
    """

    domains: Dict[Domain, DomainScore] = field(default_factory=_default_domains)

    def __post_init__(self) -> None:
        """Fill in missing domains and reject unknown ones."""
        normalized = _default_domains()
        for key, value in self.domains.items():
            domain = key if isinstance(key, Domain) else Domain.from_label(str(key))
            if domain is None:
                raise ValueError(f"Unknown life map domain: {key!r}")
            normalized[domain] = value
        self.domains = normalized

    # ---- Construction ----
    @classmethod
    def from_markdown_text(cls, content: str) -> LifeMap:
        """Parse the scores table out of a life map document."""
        return parse_life_map(content)

    # ---- Serialization ----
    def to_markdown(self) -> str:
        """Render the canonical scores table."""
        return serialize_life_map(self)

    def update_file_text(self, content: str) -> str:
        """Replace the scores table inside a full document."""
        return update_life_map_file(content, self)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping keyed by domain key."""
        return {
            "domains": {
                domain.value: self.domains[domain].to_dict() for domain in Domain
            }
        }

    # ---- Derived data ----
    def chart_data(self) -> List[ChartDataItem]:
        return get_life_map_chart_data(self)

    @property
    def is_empty(self) -> bool:
        """True when no domain has a score."""
        return all(self.domains[domain].score == 0 for domain in Domain)

    # ---- Mutation ----
    def merge_update(self, updates: Mapping[str, Mapping[str, Any]]) -> None:
        """
        Apply a partial update of scores and assessments.

        Only domains present in ``updates`` change. A provided score is
        clamped to 1-10; an absent score or assessment keeps the current
        value. Unknown domain keys are ignored. Assessments are trimmed.

        Args:
            updates: ``{domain_key: {"score"?: number, "assessment"?: str}}``

        Raises:
            ValueError: If an assessment cannot be stored in a table cell
        """
        for domain in Domain:
            update = updates.get(domain.value)
            if not update:
                continue

            current = self.domains[domain]
            score = update.get("score")
            assessment = update.get("assessment")
            if assessment is not None:
                assessment = assessment.strip()
                problem = assessment_error(assessment)
                if problem:
                    raise ValueError(f"Invalid assessment for {domain.value}: {problem}")

            self.domains[domain] = DomainScore(
                score=(
                    clamp_score(score)
                    if isinstance(score, (int, float)) and not isinstance(score, bool)
                    else current.score
                ),
                assessment=assessment if assessment is not None else current.assessment,
            )
            logger.debug(f"Updated {domain.value}: {self.domains[domain]}")


# ----- Codec functions -----
def parse_life_map(content: str) -> LifeMap:
    """
    Parse the Life Map scores table from a Markdown document.

    Only lines starting with ``|`` are considered. Header and separator
    rows are skipped. A row is used when its first cell names one of the
    six domains (case-insensitive); the second cell is the score and the
    third the assessment. Later rows for the same domain overwrite earlier
    ones. Domains without a row keep score 0 and an empty assessment.

    Args:
        content: Full life map document (any surrounding prose is ignored)

    Returns:
        LifeMap with all six domains

    Examples:
        >>> lm = parse_life_map("| Career | 8 | Strong momentum |")
        >>> lm.domains[Domain.CAREER]
        DomainScore(score=8, assessment='Strong momentum')
        >>> parse_life_map("no table").is_empty
        True
    """
    life_map = LifeMap()

    for line in content.split("\n"):
        if not line.startswith("|"):
            continue

        if (
            any(word in line for word in HEADER_WORDS)
            or SEPARATOR_ROW_PATTERN.match(line.strip())
        ):
            continue

        cells = [cell.strip() for cell in line.split("|")]
        # cells[0] is the empty string before the leading pipe
        if len(cells) < 2 or not cells[1]:
            continue

        domain = Domain.from_label(cells[1])
        if domain is None:
            continue

        score = parse_score(cells[2]) if len(cells) > 2 else 0
        assessment = cells[3] if len(cells) > 3 else ""

        life_map.domains[domain] = DomainScore(score=score, assessment=assessment)

    return life_map


def get_life_map_chart_data(life_map: LifeMap) -> List[ChartDataItem]:
    """
    Convert a LifeMap into chart points in fixed domain order.

    Examples:
        >>> get_life_map_chart_data(LifeMap())[0]
        {'domain': 'Career', 'score': 0}
    """
    return [
        {"domain": domain.display_name, "score": life_map.domains[domain].score}
        for domain in Domain
    ]


def serialize_life_map(life_map: LifeMap) -> str:
    """
    Render the canonical scores table.

    Always the header, the separator and six rows in fixed domain order.

    Examples:
        >>> serialize_life_map(LifeMap()).split("\\n")[2]
        '| Career | 0 |  |'
    """
    lines = [TABLE_HEADER, TABLE_SEPARATOR]
    for domain in Domain:
        entry = life_map.domains[domain]
        lines.append(
            f"| {domain.display_name} | {entry.score} | {entry.assessment or ''} |"
        )
    return "\n".join(lines)


def update_life_map_file(content: str, life_map: LifeMap) -> str:
    """
    Replace the scores table inside a full life map document.

    The table starts at the canonical header line (exact text) and runs
    through the following lines that start with ``|``. Everything else in
    the document is kept verbatim. When the header is missing the table is
    appended after a line break.

    Args:
        content: Current file content
        life_map: Scores to write

    Returns:
        Updated file content
    """
    table = serialize_life_map(life_map)
    lines = content.split("\n")

    header_index = next(
        (i for i, line in enumerate(lines) if line.rstrip() == TABLE_HEADER),
        None,
    )

    if header_index is None:
        logger.debug("Life map table header not found, appending table")
        return f"{content}\n{table}"

    end = header_index + 1
    while end < len(lines) and lines[end].startswith("|"):
        end += 1

    return "\n".join(lines[:header_index] + table.split("\n") + lines[end:])


def assessment_error(text: str) -> Optional[str]:
    """
    Say why an assessment would not read back from the table, if it wouldn't.

    A pipe splits the cell, a line break splits the row, and the words
    ``Domain`` or ``Score`` make the row look like the header.

    Examples:
        >>> assessment_error("Stable, 50% saved")
        >>> assessment_error("Good | busy")
        "must not contain '|'"
    """
    if "|" in text:
        return "must not contain '|'"
    if "\n" in text or "\r" in text:
        return "must be a single line"
    for word in HEADER_WORDS:
        if word in text:
            return f"must not contain the word '{word}'"
    return None


def clamp_score(value: float) -> int:
    """
    Truncate a user-supplied score and clamp it to 1-10.

    Examples:
        >>> clamp_score(7.8)
        7
        >>> clamp_score(0)
        1
        >>> clamp_score(42)
        10
    """
    truncated = math.trunc(value)
    return max(MIN_USER_SCORE, min(MAX_USER_SCORE, truncated))
