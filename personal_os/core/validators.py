#!/usr/bin/env python3
"""
validators.py
--------------------
Field-level validation for the write path.

Parsing is lenient; saving is strict. Before a record is serialized,
every field submitted by a caller is checked here for presence, type and
range. Each failure raises ValidationError with a message that names the
offending field, so the message can be shown to the user unchanged.
"""
from __future__ import annotations

import math
from typing import Any, List, Mapping, Optional

from .exceptions import ValidationError
from personal_os.utils.fs import is_iso_date, parse_iso_date


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class DataValidator:
    """Centralized field validation for record payloads."""

    @staticmethod
    def validate_payload(data: Any) -> Mapping[str, Any]:
        """
        Check that a payload is a mapping.

        Raises:
            ValidationError: If data is not a dict-like object
        """
        if not isinstance(data, Mapping):
            raise ValidationError("Invalid request body")
        return data

    @staticmethod
    def validate_date(data: Mapping[str, Any], name: str = "date") -> str:
        """
        Validate a required YYYY-MM-DD date field.

        The date must also exist on the calendar (no 2025-02-30).

        Returns:
            The date string

        Raises:
            ValidationError: If missing, not a string, malformed or not a real date
        """
        value = data.get(name)
        if not value or not isinstance(value, str):
            raise ValidationError(f"Missing or invalid {name} field")
        if not is_iso_date(value):
            raise ValidationError("Invalid date format. Expected YYYY-MM-DD")
        try:
            parse_iso_date(value)
        except ValueError as e:
            raise ValidationError(str(e))
        return value

    @staticmethod
    def validate_int_range(
        data: Mapping[str, Any], name: str, minimum: int, maximum: int
    ) -> int:
        """
        Validate a required whole number within [minimum, maximum].

        Floats with an integral value (``7.0``) are accepted as integers.

        Raises:
            ValidationError: If missing, not a number, fractional or out of range
        """
        value = data.get(name)
        if value is None or not _is_number(value) or not math.isfinite(value):
            raise ValidationError(f"Missing or invalid {name} field")
        if value < minimum or value > maximum:
            raise ValidationError(f"{name} must be between {minimum} and {maximum}")
        if isinstance(value, float) and not value.is_integer():
            raise ValidationError(f"{name} must be a whole number")
        return int(value)

    @staticmethod
    def validate_string(data: Mapping[str, Any], name: str) -> str:
        """
        Validate a required non-empty string.

        Raises:
            ValidationError: If missing, empty or not a string
        """
        value = data.get(name)
        if not value or not isinstance(value, str) or not value.strip():
            raise ValidationError(f"Missing or invalid {name} field")
        return value

    @staticmethod
    def optional_string(data: Mapping[str, Any], name: str) -> Optional[str]:
        """
        Validate an optional string; empty strings become None.

        Raises:
            ValidationError: If present but not a string
        """
        value = data.get(name)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValidationError(f"Invalid {name} field")
        return value if value.strip() else None

    @staticmethod
    def optional_int(
        data: Mapping[str, Any],
        name: str,
        minimum: int = 0,
        maximum: Optional[int] = None,
    ) -> Optional[int]:
        """
        Validate an optional whole number.

        Raises:
            ValidationError: If present but not a whole number in range
        """
        if data.get(name) is None:
            return None
        upper = maximum if maximum is not None else math.inf
        value = data[name]
        if not _is_number(value) or not math.isfinite(value):
            raise ValidationError(f"Invalid {name} field")
        if value < minimum or value > upper:
            if maximum is None:
                raise ValidationError(f"{name} must be at least {minimum}")
            raise ValidationError(f"{name} must be between {minimum} and {maximum}")
        if isinstance(value, float) and not value.is_integer():
            raise ValidationError(f"{name} must be a whole number")
        return int(value)

    @staticmethod
    def optional_choice(
        data: Mapping[str, Any], name: str, choices: List[str]
    ) -> Optional[str]:
        """
        Validate an optional value restricted to a fixed vocabulary.

        Raises:
            ValidationError: If present and not one of choices
        """
        value = data.get(name)
        if value is None or value == "":
            return None
        if value not in choices:
            raise ValidationError(
                f"{name} must be one of: {', '.join(choices)}"
            )
        return value
