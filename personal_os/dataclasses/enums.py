"""
Enumeration Types
------------------

Enum classes for Personal OS records.

Enums:
    - Domain: The six fixed Life Map domains, in display order
    - FrictionAction: What a daily friction point needs
    - GoalStatus: Canonical goal status labels
    - Timeframe: Goal horizons and their file names

These enums fix the closed vocabularies of the Markdown formats so that
codecs can iterate them exhaustively.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import List


class Domain(str, Enum):
    """
    Enumeration of Life Map domains.

    Declaration order is the fixed table and chart order:
    - CAREER: Work, business, professional growth
    - RELATIONSHIPS: Partner, family, friendships, community
    - HEALTH: Physical, mental, energy, longevity
    - MEANING: Purpose, spirituality, contribution, legacy
    - FINANCES: Money, security, freedom, wealth
    - FUN: Play, hobbies, adventure, enjoyment
    """

    CAREER = "career"
    RELATIONSHIPS = "relationships"
    HEALTH = "health"
    MEANING = "meaning"
    FINANCES = "finances"
    FUN = "fun"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all domain keys in fixed order."""
        return [domain.value for domain in cls]

    @classmethod
    def from_label(cls, label: str) -> "Domain | None":
        """Look up a domain by key or display label, case-insensitively."""
        try:
            return cls(label.strip().lower())
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        """Capitalized label used in tables and charts."""
        return self.value[:1].upper() + self.value[1:]


class FrictionAction(str, Enum):
    """
    Enumeration of friction point outcomes.
    - ADDRESS: The friction needs action
    - LETTING_GO: The friction just needs acknowledgment
    """

    ADDRESS = "address"
    LETTING_GO = "letting_go"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all friction action choices."""
        return [action.value for action in cls]


class GoalStatus(str, Enum):
    """
    Enumeration of goal statuses as shown on the dashboard.
    """

    ON_TRACK = "On Track"
    NEEDS_ATTENTION = "Needs Attention"
    BEHIND = "Behind"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all status labels."""
        return [status.value for status in cls]


class Timeframe(str, Enum):
    """
    Enumeration of goal horizons.

    The token is used in commands and URLs; each maps to a file in the
    goals directory (``1-year`` -> ``1_year.md``).
    """

    ONE_YEAR = "1-year"
    THREE_YEAR = "3-year"
    TEN_YEAR = "10-year"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all timeframe tokens."""
        return [timeframe.value for timeframe in cls]

    @property
    def filename(self) -> str:
        """Goal file name for this timeframe."""
        return f"{self.value.replace('-', '_')}.md"
