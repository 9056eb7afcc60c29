"""
storage package
---------------
File-backed stores for Personal OS records.

Each store owns one location under the Markdown root and pairs the
record codecs with validation, error translation and operation logging:
- DailyReviewStore / WeeklyReviewStore: reviews/daily, reviews/weekly
- LifeMapStore: frameworks/life_map.md
- GoalsStore: goals/<timeframe>.md
"""
from personal_os.storage.goals_store import GoalsStore
from personal_os.storage.life_map_store import LifeMapStore
from personal_os.storage.reviews import (
    DailyReviewStore,
    ReviewStore,
    WeeklyReviewStore,
    list_all_reviews,
)

__all__ = [
    "DailyReviewStore",
    "GoalsStore",
    "LifeMapStore",
    "ReviewStore",
    "WeeklyReviewStore",
    "list_all_reviews",
]
