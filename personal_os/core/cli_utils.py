#!/usr/bin/env python3
"""
cli_utils.py
-------------------
Shared CLI utilities for Personal OS commands.

Functions:
    setup_logger: Initialize PersonalOSLogger for CLI operations
    echo_json: Print a JSON document to stdout
    load_json_payload: Read a JSON payload from a file or stdin

Usage:
    from personal_os.core.cli_utils import setup_logger

    logger = setup_logger(log_dir, "pos")
"""
import json
from pathlib import Path
from typing import IO, Any, Optional

import click

from personal_os.core.exceptions import ValidationError
from personal_os.core.logging_manager import PersonalOSLogger


def setup_logger(log_dir: Path, component_name: str) -> Optional[PersonalOSLogger]:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a PersonalOSLogger instance for the specified component. When the log
    directory cannot be created or written (a read-only notes root), a
    warning goes to stderr and commands run without file logging.

    Args:
        log_dir: Base log directory (typically ROOT/logs)
        component_name: Component identifier for logging (e.g., 'pos')

    Returns:
        Configured PersonalOSLogger instance, or None if logging is unavailable
    """
    operations_log_dir = log_dir / "operations"
    try:
        operations_log_dir.mkdir(parents=True, exist_ok=True)
        return PersonalOSLogger(operations_log_dir, component_name=component_name)
    except OSError as e:
        click.echo(f"⚠️  File logging disabled: {e}", err=True)
        return None


def echo_json(data: Any) -> None:
    """Print data as indented JSON."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def load_json_payload(stream: IO[str]) -> Any:
    """
    Parse a JSON payload.

    Raises:
        ValidationError: If the stream is not valid JSON
    """
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON body: {e.msg}")
