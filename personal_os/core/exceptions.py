#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Personal OS project.

Parsing never raises: malformed or half-filled Markdown degrades to empty
values. The exceptions below belong to the write path and to the file
store around the codecs.

Exception Hierarchy:
    Exception (built-in)
    └── PersonalOSError - Base for all project errors
        ├── ValidationError - Write-path validation failures
        ├── StorageError - File read/write failures
        │   └── RecordNotFoundError - Requested record file is missing
        └── ConflictError - Record identity already exists

Usage:
    from personal_os.core.exceptions import ValidationError, ConflictError

    try:
        store.create(payload)
    except ValidationError as e:
        click.echo(f"Invalid review: {e}")
    except ConflictError:
        click.echo("Review already exists")
"""


class PersonalOSError(Exception):
    """
    Base exception for all Personal OS errors.

    Catch this to handle any error raised by the project, or catch the
    specific subclasses for more granular handling.
    """

    pass


class ValidationError(PersonalOSError):
    """
    Exception for write-path validation failures.

    Raised before serialization when a record submitted for saving is
    not acceptable:
    - Missing required fields
    - Wrong field types
    - Values out of range (energyLevel, weekNumber)
    - Malformed dates

    The message names the offending field so that callers can show it
    to the user as-is.

    Examples:
        >>> raise ValidationError("energyLevel must be between 1 and 10")
        >>> raise ValidationError("Invalid date format. Expected YYYY-MM-DD")
    """

    pass


class StorageError(PersonalOSError):
    """
    Exception for file storage failures.

    Raised when the Markdown file behind a record cannot be read or
    written:
    - Permission denied
    - Directory cannot be created
    - Disk errors

    Messages are kept generic ("Failed to save review") so they can be
    shown without leaking filesystem details. The original OSError is
    chained as ``__cause__``.

    Examples:
        >>> raise StorageError("Failed to write life map file")
    """

    pass


class RecordNotFoundError(StorageError):
    """
    Exception for a record whose file does not exist.

    Examples:
        >>> raise RecordNotFoundError("Review for 2024-12-31 not found")
    """

    pass


class ConflictError(PersonalOSError):
    """
    Exception for creating a record whose identity already exists.

    Daily and weekly reviews are keyed by date; creating a second review
    for the same date is a conflict, not an overwrite.

    Examples:
        >>> raise ConflictError("Review for 2024-12-31 already exists")
    """

    pass
