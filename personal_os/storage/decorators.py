#!/usr/bin/env python3
"""
decorators.py
--------------------
Shared decorators for store operations.
"""
from datetime import datetime
from functools import wraps
from typing import Callable

from personal_os.core.exceptions import StorageError


def log_store_operation(operation_name: str):
    """
    Decorator to log store operations with timing and context.

    Expects the decorated method's instance to carry a ``logger``
    attribute (a PersonalOSLogger or None).

    Args:
        operation_name: Name of the operation being logged

    Returns:
        Decorator function
    """

    def decorator(function: Callable) -> Callable:
        @wraps(function)
        def wrapper(self, *args, **kwargs):
            start_time = datetime.now()
            logger = getattr(self, "logger", None)

            if logger:
                logger.log_debug(
                    f"Starting {operation_name}",
                    {"args": [str(arg) for arg in args if isinstance(arg, str)]},
                )

            try:
                result = function(self, *args, **kwargs)
            except Exception as e:
                if logger:
                    logger.log_error(
                        e,
                        {
                            "operation": operation_name,
                            "duration_seconds": (datetime.now() - start_time).total_seconds(),
                        },
                    )
                raise

            if logger:
                logger.log_operation(
                    f"{operation_name}_completed",
                    {
                        "duration_seconds": (datetime.now() - start_time).total_seconds(),
                        "success": True,
                    },
                )
            return result

        return wrapper

    return decorator


def handle_storage_errors(message: str):
    """
    Decorator to turn filesystem errors into StorageError.

    Project exceptions pass through unchanged. An OSError, or a
    UnicodeDecodeError from a file that is not UTF-8, becomes a
    StorageError carrying ``message`` and chained to the original.

    Args:
        message: Message for the StorageError (e.g. "Failed to save review")
    """

    def decorator(function: Callable) -> Callable:
        @wraps(function)
        def wrapper(*args, **kwargs):
            try:
                return function(*args, **kwargs)
            except (OSError, UnicodeDecodeError) as e:
                raise StorageError(message) from e

        return wrapper

    return decorator
