#!/usr/bin/env python3
"""
review.py
--------------
Write-path validation for review and Life Map payloads.

Payloads arrive as JSON-style mappings with camelCase keys (the shape a
form or a ``--file`` argument provides). Validation turns them into the
typed form-data records the serializers accept, or raises
ValidationError naming the first offending field.

Checks:
- Daily review: date, energyLevel 1-10, meaningfulWin, tomorrowPriority;
  optional strings, frictionAction choice, completion minutes, domain
  ratings 0-10
- Weekly review: date, weekNumber 1-53, the five narrative answers;
  optional notes and duration
- Life Map update: a ``domains`` mapping whose scores, when given, are
  numbers and whose assessments fit in one table cell

Free-text answers are trimmed and line breaks are folded into single
spaces, so what is saved is exactly what parsing reads back.

Usage:
    form = ReviewValidator.validate_daily(json.loads(payload))
    path.write_text(serialize_daily_review(form))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import math
from typing import Any, Dict, Mapping, Optional

# --- Local imports ---
from personal_os.core.exceptions import ValidationError
from personal_os.core.validators import DataValidator
from personal_os.dataclasses.daily_review import (
    DailyReviewFormData,
    DomainRatings,
    MAX_ENERGY,
    MIN_ENERGY,
)
from personal_os.dataclasses.enums import Domain, FrictionAction
from personal_os.dataclasses.life_map import assessment_error
from personal_os.dataclasses.weekly_review import (
    MAX_WEEK,
    MIN_WEEK,
    WeeklyReviewFormData,
)
from personal_os.utils.md import HORIZONTAL_RULE, SECTION_PREFIX, is_placeholder

MAX_RATING = 10

WEEKLY_NARRATIVE_FIELDS = (
    ("movedNeedle", "moved_needle"),
    ("noiseDisguisedAsWork", "noise_disguised_as_work"),
    ("timeLeaks", "time_leaks"),
    ("strategicInsight", "strategic_insight"),
    ("adjustmentForNextWeek", "adjustment_for_next_week"),
)


class ReviewValidator:
    """Validation of review and Life Map payloads into typed records."""

    @staticmethod
    def validate_daily(data: Any) -> DailyReviewFormData:
        """
        Validate a daily review payload.

        Args:
            data: Mapping with camelCase keys

        Returns:
            DailyReviewFormData ready for serialization

        Raises:
            ValidationError: On the first invalid field
        """
        payload = DataValidator.validate_payload(data)

        date = DataValidator.validate_date(payload)
        energy_level = DataValidator.validate_int_range(
            payload, "energyLevel", MIN_ENERGY, MAX_ENERGY
        )
        meaningful_win = ReviewValidator.answer_text(payload, "meaningfulWin")
        tomorrow_priority = ReviewValidator.answer_text(payload, "tomorrowPriority")

        friction_action = DataValidator.optional_choice(
            payload, "frictionAction", FrictionAction.choices()
        )

        return DailyReviewFormData(
            date=date,
            energy_level=energy_level,
            meaningful_win=meaningful_win,
            tomorrow_priority=tomorrow_priority,
            energy_factors=ReviewValidator.answer_text(
                payload, "energyFactors", required=False, quoted=False
            ),
            friction_point=ReviewValidator.answer_text(
                payload, "frictionPoint", required=False
            ),
            friction_action=FrictionAction(friction_action) if friction_action else None,
            thing_to_let_go=ReviewValidator.answer_text(
                payload, "thingToLetGo", required=False
            ),
            notes=ReviewValidator.answer_text(
                payload, "notes", required=False, quoted=False
            ),
            completion_time_minutes=DataValidator.optional_int(
                payload, "completionTimeMinutes"
            ),
            domain_ratings=ReviewValidator.validate_domain_ratings(
                payload.get("domainRatings")
            ),
        )

    @staticmethod
    def answer_text(
        data: Mapping[str, Any],
        name: str,
        required: bool = True,
        quoted: bool = True,
    ) -> Optional[str]:
        """
        Validate a free-text answer and return it in its stored form.

        Each line is trimmed, blank lines are dropped and the rest are
        joined with single spaces. A value wrapped in brackets would read
        back as an unfilled placeholder, so it is rejected. Answers written
        as a plain line (``quoted=False``) also cannot be a ``---`` rule
        or a ``## `` heading, since either would end their section.

        Args:
            data: Payload mapping
            name: camelCase field name, used in error messages
            required: Whether a missing or blank value is an error
            quoted: Whether the answer is written inside a blockquote

        Returns:
            The single-line answer, or None for a blank optional answer

        Raises:
            ValidationError: If missing when required, not a string, or not storable

        Examples:
            >>> ReviewValidator.answer_text({"notes": "  one\\n\\n two "}, "notes")
            'one two'
        """
        if required:
            value = DataValidator.validate_string(data, name)
        else:
            value = DataValidator.optional_string(data, name)
            if value is None:
                return None

        text = " ".join(line.strip() for line in value.splitlines() if line.strip())
        if is_placeholder(text):
            raise ValidationError(f"{name} must not be a bracketed placeholder")
        if not quoted and (text == HORIZONTAL_RULE or text.startswith(SECTION_PREFIX)):
            raise ValidationError(f"{name} must not be a Markdown rule or heading")
        return text

    @staticmethod
    def validate_domain_ratings(value: Any) -> Optional[DomainRatings]:
        """
        Validate optional per-domain ratings.

        Each rating is a whole number from 0 to 10, or missing. Unknown
        keys are rejected. Returns None when nothing is rated.

        Raises:
            ValidationError: If the ratings are not a mapping or a rating is invalid
        """
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise ValidationError("Invalid domainRatings field")

        unknown = set(value) - set(Domain.choices())
        if unknown:
            raise ValidationError(
                f"Unknown domain in domainRatings: {', '.join(sorted(unknown))}"
            )

        ratings: Dict[str, int] = {}
        for key, rating in value.items():
            if rating is None:
                continue
            name = f"domainRatings.{key}"
            if (
                isinstance(rating, bool)
                or not isinstance(rating, (int, float))
                or not math.isfinite(rating)
            ):
                raise ValidationError(f"Invalid {name} field")
            if rating < 0 or rating > MAX_RATING:
                raise ValidationError(f"{name} must be between 0 and {MAX_RATING}")
            if isinstance(rating, float) and not rating.is_integer():
                raise ValidationError(f"{name} must be a whole number")
            ratings[key] = int(rating)

        result = DomainRatings(**ratings)
        return result if result.has_any_rating else None

    @staticmethod
    def validate_weekly(data: Any) -> WeeklyReviewFormData:
        """
        Validate a weekly review payload.

        Raises:
            ValidationError: On the first invalid field
        """
        payload = DataValidator.validate_payload(data)

        date = DataValidator.validate_date(payload)
        week_number = DataValidator.validate_int_range(
            payload, "weekNumber", MIN_WEEK, MAX_WEEK
        )
        narrative = {
            attr: ReviewValidator.answer_text(payload, key)
            for key, attr in WEEKLY_NARRATIVE_FIELDS
        }

        return WeeklyReviewFormData(
            date=date,
            week_number=week_number,
            notes=ReviewValidator.answer_text(
                payload, "notes", required=False, quoted=False
            ),
            duration=DataValidator.optional_int(payload, "duration"),
            **narrative,
        )

    @staticmethod
    def validate_life_map_update(data: Any) -> Dict[str, Dict[str, Any]]:
        """
        Validate a partial Life Map update.

        Expected shape: ``{"domains": {"career": {"score": 8,
        "assessment": "..."}}}``. Scores may be omitted; when present they
        must be numbers (clamping happens on merge). Assessments, when
        present, must be strings that fit in one table cell; they are
        returned trimmed.

        Returns:
            The ``domains`` mapping

        Raises:
            ValidationError: If the structure or a value type is invalid
        """
        payload = DataValidator.validate_payload(data)

        domains = payload.get("domains")
        if not domains or not isinstance(domains, Mapping):
            raise ValidationError("Missing domains object")

        updates: Dict[str, Dict[str, Any]] = {}
        for key, update in domains.items():
            if not update:
                continue
            if not isinstance(update, Mapping):
                raise ValidationError(f"Invalid update for domain {key}")

            score = update.get("score")
            if score is not None and (
                isinstance(score, bool)
                or not isinstance(score, (int, float))
                or not math.isfinite(score)
            ):
                raise ValidationError(f"Invalid score type for domain {key}")

            cleaned = dict(update)
            assessment = update.get("assessment")
            if assessment is not None:
                if not isinstance(assessment, str):
                    raise ValidationError(f"Invalid assessment type for domain {key}")
                cleaned["assessment"] = assessment.strip()
                problem = assessment_error(cleaned["assessment"])
                if problem:
                    raise ValidationError(
                        f"Invalid assessment for domain {key}: {problem}"
                    )

            updates[key] = cleaned

        return updates
