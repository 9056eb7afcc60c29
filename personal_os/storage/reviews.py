#!/usr/bin/env python3
"""
reviews.py
--------------------
File stores for daily and weekly reviews.

Each review is one Markdown file named after its date inside the store's
directory. The file is the only copy of the record: reads parse it,
writes serialize a validated payload over it.

Key Features:
    - get(): parse one review by date
    - list(): list items for every dated file, newest first
    - create(): validate and write a new review; fails if the date exists
    - update(): validate and overwrite an existing review
    - list_all_reviews(): daily and weekly items merged for one timeline

There is no locking. Two writers to the same date race and the last write
wins.

Example:
    store = DailyReviewStore(layout_for(ROOT).reviews_daily_dir, logger=logger)
    store.create({"date": "2024-12-31", "energyLevel": 7, ...})
    for item in store.list():
        print(item.date, item.energy_level)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar

# --- Local imports ---
from personal_os.core.exceptions import (
    ConflictError,
    RecordNotFoundError,
    ValidationError,
)
from personal_os.core.logging_manager import PersonalOSLogger, safe_logger
from personal_os.dataclasses.daily_review import (
    DailyReview,
    DailyReviewFormData,
    ReviewListItem,
    parse_daily_review,
    serialize_daily_review,
)
from personal_os.dataclasses.weekly_review import (
    WeeklyReview,
    WeeklyReviewFormData,
    WeeklyReviewListItem,
    parse_weekly_review,
    serialize_weekly_review,
)
from personal_os.storage.decorators import handle_storage_errors, log_store_operation
from personal_os.utils.fs import (
    date_from_filename,
    date_to_filename,
    find_markdown_files,
    is_dated_review_file,
    is_iso_date,
)
from personal_os.validators.review import ReviewValidator

R = TypeVar("R")  # parsed record
F = TypeVar("F")  # form data
L = TypeVar("L")  # list item

REVIEW_TYPES = ["all", "daily", "weekly"]
SORT_ORDERS = ["desc", "asc"]


class ReviewStore(ABC, Generic[R, F, L]):
    """
    Base store for dated review files.

    Subclasses bind the codec and validator for one review kind.

    Attributes:
        directory: Directory holding ``YYYY-MM-DD.md`` files
        logger: Optional logger for operation tracking
    """

    kind: str = "review"

    def __init__(self, directory: Path, logger: Optional[PersonalOSLogger] = None):
        """
        Initialize the store.

        Args:
            directory: Review directory (created on first write)
            logger: Optional logger for operation tracking
        """
        self.directory = Path(directory)
        self.logger = logger

    # ---- Codec hooks ----
    @abstractmethod
    def parse(self, content: str, file_path: str) -> R: ...

    @abstractmethod
    def serialize(self, form: F) -> str: ...

    @abstractmethod
    def validate(self, data: Any) -> F: ...

    @abstractmethod
    def to_list_item(self, record: R, fallback_date: str) -> L: ...

    # ---- Paths ----
    def path_for(self, date: str) -> Path:
        """
        File path for a review date.

        Raises:
            ValidationError: If date is not YYYY-MM-DD
        """
        if not isinstance(date, str) or not is_iso_date(date):
            raise ValidationError("Invalid date format. Expected YYYY-MM-DD")
        return self.directory / date_to_filename(date)

    def exists(self, date: str) -> bool:
        return self.path_for(date).exists()

    # ---- Reads ----
    @handle_storage_errors("Failed to read review")
    def get(self, date: str) -> R:
        """
        Parse the review for a date.

        Raises:
            ValidationError: If date is malformed
            RecordNotFoundError: If there is no review for the date
            StorageError: If the file cannot be read
        """
        path = self.path_for(date)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise RecordNotFoundError(f"Review for {date} not found")

        return self.parse(content, str(path))

    def load_all(self) -> List[R]:
        """
        Parse every dated review in the directory, oldest first.

        Files that cannot be read are skipped with a warning.
        """
        records: List[R] = []
        for path in find_markdown_files(self.directory):
            if not is_dated_review_file(path.name):
                continue
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                safe_logger(self.logger).log_warning(
                    f"Skipping unreadable {self.kind} review",
                    {"file": str(path), "error": str(e)},
                )
                continue
            records.append(self.parse(content, str(path)))
        return records

    def list(self) -> List[L]:
        """List items for all reviews, newest date first."""
        items = [
            self.to_list_item(
                record, date_from_filename(Path(record.file_path).name)
            )
            for record in self.load_all()
        ]
        items.sort(key=lambda item: item.date, reverse=True)
        return items

    # ---- Writes ----
    @log_store_operation("create_review")
    @handle_storage_errors("Failed to create review")
    def create(self, data: Any) -> F:
        """
        Validate and write a new review.

        Args:
            data: Payload mapping with camelCase keys

        Returns:
            The validated form data that was written

        Raises:
            ValidationError: If the payload is invalid
            ConflictError: If a review already exists for the date
            StorageError: If the file cannot be written
        """
        form = self.validate(data)
        date = getattr(form, "date")
        path = self.path_for(date)

        if path.exists():
            raise ConflictError(f"Review for {date} already exists")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.serialize(form), encoding="utf-8")

        safe_logger(self.logger).log_info(
            f"Created {self.kind} review", {"date": date, "file": str(path)}
        )
        return form

    @log_store_operation("update_review")
    @handle_storage_errors("Failed to update review")
    def update(self, date: str, data: Any) -> F:
        """
        Validate and overwrite an existing review.

        The payload's date defaults to ``date`` and must match it when given.

        Raises:
            ValidationError: If the date or payload is invalid
            RecordNotFoundError: If there is no review for the date
            StorageError: If the file cannot be written
        """
        path = self.path_for(date)
        if not path.exists():
            raise RecordNotFoundError(f"Review for {date} not found")

        if isinstance(data, Mapping) and "date" not in data:
            data = {**data, "date": date}

        form = self.validate(data)
        if getattr(form, "date") != date:
            raise ValidationError(
                f"Payload date {getattr(form, 'date')} does not match review date {date}"
            )

        path.write_text(self.serialize(form), encoding="utf-8")

        safe_logger(self.logger).log_info(
            f"Updated {self.kind} review", {"date": date, "file": str(path)}
        )
        return form


class DailyReviewStore(ReviewStore[DailyReview, DailyReviewFormData, ReviewListItem]):
    """Store for ``reviews/daily``."""

    kind = "daily"

    def parse(self, content: str, file_path: str) -> DailyReview:
        return parse_daily_review(content, file_path)

    def serialize(self, form: DailyReviewFormData) -> str:
        return serialize_daily_review(form)

    def validate(self, data: Any) -> DailyReviewFormData:
        return ReviewValidator.validate_daily(data)

    def to_list_item(self, record: DailyReview, fallback_date: str) -> ReviewListItem:
        return record.to_list_item(fallback_date)


class WeeklyReviewStore(
    ReviewStore[WeeklyReview, WeeklyReviewFormData, WeeklyReviewListItem]
):
    """Store for ``reviews/weekly``."""

    kind = "weekly"

    def parse(self, content: str, file_path: str) -> WeeklyReview:
        return parse_weekly_review(content, file_path)

    def serialize(self, form: WeeklyReviewFormData) -> str:
        return serialize_weekly_review(form)

    def validate(self, data: Any) -> WeeklyReviewFormData:
        return ReviewValidator.validate_weekly(data)

    def to_list_item(
        self, record: WeeklyReview, fallback_date: str
    ) -> WeeklyReviewListItem:
        return record.to_list_item(fallback_date)


def list_all_reviews(
    daily_store: DailyReviewStore,
    weekly_store: WeeklyReviewStore,
    review_type: str = "all",
    sort: str = "desc",
) -> List[Dict[str, Any]]:
    """
    Merge daily and weekly list items into one timeline.

    Args:
        daily_store: Daily review store
        weekly_store: Weekly review store
        review_type: "all", "daily" or "weekly"
        sort: "desc" (newest first) or "asc"

    Returns:
        List of item dicts, each with a ``type`` key

    Raises:
        ValidationError: If review_type or sort is not recognized
    """
    if review_type not in REVIEW_TYPES:
        raise ValidationError(
            f"Invalid type parameter. Must be one of: {', '.join(REVIEW_TYPES)}"
        )
    if sort not in SORT_ORDERS:
        raise ValidationError(
            f"Invalid sort parameter. Must be one of: {', '.join(SORT_ORDERS)}"
        )

    items: List[Dict[str, Any]] = []
    if review_type in ("all", "daily"):
        items.extend(item.to_dict() for item in daily_store.list())
    if review_type in ("all", "weekly"):
        items.extend(item.to_dict() for item in weekly_store.list())

    items.sort(key=lambda item: item["date"], reverse=(sort == "desc"))
    return items


__all__ = [
    "DailyReviewStore",
    "ReviewStore",
    "WeeklyReviewStore",
    "list_all_reviews",
]
