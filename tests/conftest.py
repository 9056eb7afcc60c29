"""
conftest.py
-----------
Shared pytest fixtures for Personal OS tests.

Provides fixtures for:
- Temporary directories and a populated Markdown root
- Sample life map, review and goal documents
- Valid review payloads
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from personal_os.core.paths import layout_for


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def markdown_root(tmp_dir, life_map_content, complete_daily_content, weekly_review_content, goals_content):
    """A Markdown root with one file of every kind."""
    layout = layout_for(tmp_dir)

    layout.reviews_daily_dir.mkdir(parents=True)
    (layout.reviews_daily_dir / "2024-12-31.md").write_text(complete_daily_content)
    (layout.reviews_daily_dir / "TEMPLATE.md").write_text("# Daily Check-In\n")

    layout.reviews_weekly_dir.mkdir(parents=True)
    (layout.reviews_weekly_dir / "2024-12-30.md").write_text(weekly_review_content)

    layout.life_map_path.parent.mkdir(parents=True)
    layout.life_map_path.write_text(life_map_content)

    layout.goals_dir.mkdir(parents=True)
    (layout.goals_dir / "1_year.md").write_text(goals_content)

    return tmp_dir


# ----- Life Map Fixtures -----

@pytest.fixture
def life_map_content():
    """Life map document with a filled scores table inside prose."""
    return """# Life Map

*Rate each domain honestly. 1 = crisis, 5 = acceptable, 10 = thriving*

## Current State Assessment

| Domain | Score (1-10) | Brief Assessment |
|--------|--------------|------------------|
| Career | 8 | Strong momentum, good team |
| Relationships | 6 | Needs more quality time |
| Health | 5 | Acceptable but neglected |
| Meaning | 7 | Growing sense of purpose |
| Finances | 8 | Stable and secure |
| Fun | 4 | Neglected, needs attention |

**Total Score:** ___ / 60

---

## Domain Deep Dives

More content here...
"""


@pytest.fixture
def empty_life_map_content():
    """Life map with the table present but every score blank."""
    return """# Life Map

| Domain | Score (1-10) | Brief Assessment |
|--------|--------------|------------------|
| Career | | |
| Relationships | | |
| Health | | |
| Meaning | | |
| Finances | | |
| Fun | | |
"""


# ----- Daily Review Fixtures -----

@pytest.fixture
def complete_daily_content():
    """Hand-written daily review with every field filled."""
    return """# Daily Check-In

**Date:** 2024-12-31

---

## Energy Check

**Energy level (1-10):** 7

*1 = depleted, 5 = functional, 10 = fully charged*

What's affecting your energy today?

Good sleep, but heavy meeting load

---

## One Meaningful Win

*Not the biggest task completed. The thing that actually mattered.*

> Closed the partnership deal we've been working on for 3 months.

---

## One Friction Point

*What's creating resistance? Where are you stuck?*

> Back-to-back meetings left no time for deep work

Does this need action or just acknowledgment?

[ ] Needs action — I will:
[x] Just needs acknowledgment — moving on

---

## One Thing to Let Go

*What thought, worry, task, or emotion can you release?*

> The guilt about not responding to all Slack messages immediately.

It's done. Let it go.

---

## One Priority for Tomorrow

*If tomorrow only allowed one meaningful thing, what would it be?*

> Finish the Q1 planning document.

---

## Optional: Brief Notes

*Anything else worth capturing? Keep it short.*

Remember to block calendar for focus time next week.

---

**Time to complete:** 4 minutes

*Target: under 5 minutes*
"""


@pytest.fixture
def empty_daily_template():
    """The unfilled daily template with bracket placeholders."""
    return """# Daily Check-In

**Date:** [YYYY-MM-DD]

---

## Energy Check

**Energy level (1-10):** [ ]

*1 = depleted, 5 = functional, 10 = fully charged*

What's affecting your energy today?

[One sentence]

---

## One Meaningful Win

*Not the biggest task completed. The thing that actually mattered.*

> [Your win]

---

## One Friction Point

*What's creating resistance? Where are you stuck?*

> [Your friction]

Does this need action or just acknowledgment?

[ ] Needs action — I will:
[ ] Just needs acknowledgment — moving on

---

## One Thing to Let Go

*What thought, worry, task, or emotion can you release?*

> [What to release]

---

## One Priority for Tomorrow

*If tomorrow only allowed one meaningful thing, what would it be?*

> [Tomorrow's priority]

---

## Optional: Brief Notes

*Anything else worth capturing? Keep it short.*

[Notes]

---

**Time to complete:** ___ minutes
"""


@pytest.fixture
def daily_payload():
    """Valid daily review payload with optional fields."""
    return {
        "date": "2025-01-15",
        "energyLevel": 7,
        "energyFactors": "Slept well",
        "meaningfulWin": "Shipped the release",
        "frictionPoint": "Too many meetings",
        "frictionAction": "address",
        "thingToLetGo": "Inbox zero",
        "tomorrowPriority": "Write the roadmap",
        "notes": "Short day",
        "completionTimeMinutes": 4,
    }


# ----- Weekly Review Fixtures -----

@pytest.fixture
def weekly_review_content():
    """Hand-written weekly review with every field filled."""
    return """# Weekly Review

**Week Starting:** 2024-12-30
**Week Number:** 1

---

## What Actually Moved the Needle This Week

*Not tasks completed. The outcomes that truly mattered.*

> Closed the Series A round.

---

## What Was Noise Disguised as Work

*Busy work that felt productive but didn't advance key goals.*

> Reorganizing the wiki.

---

## Where Your Time Leaked

*Where did hours disappear without meaningful output?*

> Status meetings.

---

## One Strategic Insight

*What did this week teach you about your work, priorities, or approach?*

> Fewer, deeper projects win.

---

## One Adjustment for Next Week

*What one change will you make based on this week's learning?*

> Block mornings for deep work.

---

## Optional: Notes

*Anything else worth capturing?*

Holiday week, lighter load.

---

**Time to complete:** 18 minutes

*Target: under 20 minutes*
"""


@pytest.fixture
def weekly_payload():
    """Valid weekly review payload."""
    return {
        "date": "2025-01-06",
        "weekNumber": 2,
        "movedNeedle": "Hired the first engineer",
        "noiseDisguisedAsWork": "Tweaking slide decks",
        "timeLeaks": "Slack",
        "strategicInsight": "Hiring is the bottleneck",
        "adjustmentForNextWeek": "Two interviews per day",
        "notes": "Good week",
        "duration": 15,
    }


# ----- Goal Fixtures -----

@pytest.fixture
def goals_content():
    """One-year goals document with frontmatter and three goals."""
    return """---
status: needs-attention
last_updated: 2026-01-02
---

# One-Year Goals

## This Year's Goals

**Goal 1:**

*What:*
Launch the new product successfully to market

*Why this matters:*
Core business growth

**Goal 2:**

*What:*
Run a marathon
in under four hours

**Goal 3:**

*Why this matters:*
No description for this one
"""
