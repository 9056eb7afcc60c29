#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem and date utilities for dated record files.

Daily and weekly reviews are stored one file per date, named
``YYYY-MM-DD.md``. The filename is the record's identity.

Functions:
    find_markdown_files: Discover markdown files by glob pattern
    is_dated_review_file: Check the YYYY-MM-DD.md filename convention
    is_iso_date: Check the YYYY-MM-DD string format
    parse_iso_date: Parse YYYY-MM-DD with calendar validation
    date_to_filename: Build the record filename for a date
    date_from_filename: Recover the date string from a record filename

Usage:
    from personal_os.utils.fs import is_dated_review_file, date_to_filename

    names = [p.name for p in directory.iterdir() if is_dated_review_file(p.name)]
    path = directory / date_to_filename("2024-12-31")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import calendar
import re
from datetime import date
from pathlib import Path
from typing import List, Union

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
DATED_FILE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}\.md", re.ASCII)


def find_markdown_files(directory: Path, pattern: str = "*.md") -> List[Path]:
    """Find all markdown files matching pattern, sorted by name."""
    if not directory.exists():
        return []
    return sorted(directory.glob(pattern))


def is_dated_review_file(filename: str) -> bool:
    """
    Check whether a filename follows the YYYY-MM-DD.md convention.

    Examples:
        >>> is_dated_review_file("2024-12-31.md")
        True
        >>> is_dated_review_file("TEMPLATE.md")
        False
    """
    return bool(DATED_FILE_PATTERN.fullmatch(filename))


def is_iso_date(value: str) -> bool:
    """Check the YYYY-MM-DD format only (no calendar check)."""
    return bool(ISO_DATE_PATTERN.fullmatch(value))


def parse_iso_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD string into a date.

    Args:
        value: Date string

    Returns:
        datetime.date object

    Raises:
        ValueError: If the format is wrong, or the month or day is out of
            range for the calendar

    Examples:
        >>> parse_iso_date("2024-02-29")
        datetime.date(2024, 2, 29)
    """
    if not is_iso_date(value):
        raise ValueError(f'Invalid date format: "{value}". Expected YYYY-MM-DD.')

    year, month, day = (int(part) for part in value.split("-"))

    if month < 1 or month > 12:
        raise ValueError(f"Invalid month: {month}. Must be between 1 and 12.")

    days_in_month = calendar.monthrange(year, month)[1]
    if day < 1 or day > days_in_month:
        raise ValueError(
            f"Invalid day: {day}. Must be between 1 and {days_in_month} "
            f"for {year:04d}-{month:02d}."
        )

    return date(year, month, day)


def date_to_filename(value: Union[str, date]) -> str:
    """
    Build the record filename for a date.

    Examples:
        >>> date_to_filename("2024-12-31")
        '2024-12-31.md'
        >>> date_to_filename(date(2025, 1, 6))
        '2025-01-06.md'
    """
    if isinstance(value, date):
        value = value.isoformat()
    return f"{value}.md"


def date_from_filename(filename: str) -> str:
    """Strip the .md extension from a dated record filename."""
    return filename[:-3] if filename.endswith(".md") else filename
