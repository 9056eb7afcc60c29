"""
dataclasses package
-------------------
Dataclass definitions and Markdown codecs for Personal OS records.

This package provides dataclasses for the documents of a Personal OS
workspace:
- LifeMap: The six-domain scores table in frameworks/life_map.md
- DailyReview: Daily check-ins in reviews/daily/
- WeeklyReview: Weekly reviews in reviews/weekly/
- GoalSnapshot: Dashboard view of the goals in goals/1_year.md
"""
from personal_os.dataclasses.daily_review import (
    DailyReview,
    DailyReviewFormData,
    DomainRatings,
    ReviewListItem,
)
from personal_os.dataclasses.enums import Domain, FrictionAction, GoalStatus, Timeframe
from personal_os.dataclasses.goal_snapshot import FrontmatterResult, GoalSnapshot
from personal_os.dataclasses.life_map import DomainScore, LifeMap
from personal_os.dataclasses.weekly_review import (
    WeeklyReview,
    WeeklyReviewFormData,
    WeeklyReviewListItem,
)

__all__ = [
    "DailyReview",
    "DailyReviewFormData",
    "Domain",
    "DomainRatings",
    "DomainScore",
    "FrictionAction",
    "FrontmatterResult",
    "GoalSnapshot",
    "GoalStatus",
    "LifeMap",
    "ReviewListItem",
    "Timeframe",
    "WeeklyReview",
    "WeeklyReviewFormData",
    "WeeklyReviewListItem",
]
