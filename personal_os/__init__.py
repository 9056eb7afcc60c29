"""
Personal OS Package
===================

Markdown-backed personal productivity records: daily and weekly reviews,
life-map scores and goal snapshots.

Every record lives in a human-edited Markdown file. This package converts
those files into typed records and back, and derives chart data for the
dashboard from them.

Main Components:
    - core: Logging, validation, paths, exceptions
    - utils: Markdown field extraction and filesystem helpers
    - dataclasses: Record codecs (life map, daily/weekly review, goals)
    - pipeline: Aggregation of review history into chart data
    - validators: Payload validation for review and life map writes
    - storage: File-backed stores for each record type
    - cli: `pos` command-line interface

Primary Interfaces:
    - personal_os.dataclasses.life_map.LifeMap
    - personal_os.dataclasses.daily_review.parse_daily_review
    - personal_os.dataclasses.weekly_review.parse_weekly_review
    - personal_os.storage.DailyReviewStore

Example Usage:
    >>> from personal_os.dataclasses.life_map import parse_life_map
    >>> life_map = parse_life_map(text)
    >>> life_map.chart_data()

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Personal OS Project"
