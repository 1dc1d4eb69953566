"""Error reporting for CLI commands."""

import logging
import sys
from functools import wraps
from typing import Callable

import click

from padsmith.exceptions import PadsmithError, format_error_for_display

logger = logging.getLogger(__name__)


def report_errors(operation_name: str) -> Callable:
    """
    Turn padsmith and I/O errors into a short message and exit code 1.

    Unexpected exceptions are logged with their traceback before exiting.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (click.ClickException, click.Abort):
                raise
            except (PadsmithError, OSError) as e:
                technical = e.technical_message if isinstance(e, PadsmithError) else str(e)
                logger.error(f"Failed to {operation_name}: {technical}")
                message, hint = format_error_for_display(e)
                click.echo(f"ERROR: {message}", err=True)
                if hint:
                    click.echo(f"\n{hint}", err=True)
                sys.exit(1)
            except Exception as e:
                logger.exception(f"Unexpected error during {operation_name}")
                click.echo(f"ERROR: {type(e).__name__}: {e}", err=True)
                sys.exit(1)
        return wrapper
    return decorator
