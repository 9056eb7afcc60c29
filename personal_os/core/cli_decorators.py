#!/usr/bin/env python3
"""
cli_decorators.py
-------------------
Custom Click decorators for Personal OS CLIs.

Provides a decorator factory that sets up a consistent CLI group with
logging, the Markdown root, and context management.

Usage:
    from personal_os.core.cli_decorators import personal_os_cli_group

    @personal_os_cli_group("pos")
    def cli(ctx):
        '''pos - Personal OS records'''
        pass  # Setup handled automatically
"""
from functools import wraps
from pathlib import Path
from typing import Callable, Optional

import click

from personal_os.core.cli_utils import setup_logger
from personal_os.core.paths import ROOT


def personal_os_cli_group(component_name: str) -> Callable:
    """
    Decorator factory for creating consistent CLI groups.

    Automatically adds:
    - Click group() decorator
    - --root option (Markdown root, default from PERSONAL_OS_ROOT)
    - --log-dir option (default: ROOT/logs)
    - --verbose option
    - Context object setup with logger

    Args:
        component_name: Component identifier for logging (e.g., "pos")

    Returns:
        Decorator function

    Provides context with:
        ctx.obj["root"]: Path - Markdown root
        ctx.obj["log_dir"]: Path - Log directory
        ctx.obj["verbose"]: bool - Verbose flag
        ctx.obj["logger"]: PersonalOSLogger or None - Logger, None when logs cannot be written
    """
    def decorator(f: Callable) -> Callable:
        @click.group()
        @click.option(
            "--root",
            type=click.Path(file_okay=False),
            default=str(ROOT),
            help="Markdown root directory",
        )
        @click.option(
            "--log-dir",
            type=click.Path(),
            default=None,
            help="Directory for log files (default: ROOT/logs)",
        )
        @click.option(
            "-v", "--verbose",
            is_flag=True,
            help="Enable verbose logging"
        )
        @click.pass_context
        @wraps(f)
        def wrapper(
            ctx: click.Context, root: str, log_dir: Optional[str], verbose: bool
        ):
            root_path = Path(root)
            log_path = Path(log_dir) if log_dir else root_path / "logs"

            ctx.ensure_object(dict)
            ctx.obj["root"] = root_path
            ctx.obj["log_dir"] = log_path
            ctx.obj["verbose"] = verbose
            ctx.obj["logger"] = setup_logger(log_path, component_name)

            return f(ctx)

        return wrapper
    return decorator
