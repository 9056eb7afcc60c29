#!/usr/bin/env python3
"""
validators
----------
Validation of caller-supplied payloads before records are written.

Generic field checks live in ``personal_os.core.validators.DataValidator``;
this package composes them into record-level validators.

Usage:
    from personal_os.validators import ReviewValidator

    form = ReviewValidator.validate_daily(payload)
"""
from personal_os.validators.review import ReviewValidator

__all__ = ["ReviewValidator"]
