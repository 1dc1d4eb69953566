"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from padsmith import __version__

from .commands import families, init, keys, layout, set_key, show, validate

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the command line.

    Args:
        verbose: Verbosity count (1 = INFO on stderr, 2+ = DEBUG on stderr)
        debug: If True, log DEBUG to stderr and to ./padsmith-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level for the log file (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        console_level = logging.DEBUG
    elif verbose == 1:
        console_level = logging.INFO
    else:
        console_level = None

    if debug and not log_file:
        log_path = Path.cwd() / "padsmith-debug.log"
        file_level = logging.DEBUG
    elif log_file:
        log_path = log_file
        file_level = getattr(logging, log_level.upper())
    else:
        log_path = None
        file_level = None

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # Reconfigure from scratch so repeated invocations don't stack handlers
    package_logger = logging.getLogger("padsmith")
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()

    levels = []
    if console_level is not None:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)
        levels.append(console_level)

    if log_path is not None:
        # Rotating file handler (keeps last 5 files, max 10MB each)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)
        levels.append(file_level)

    package_logger.setLevel(min(levels) if levels else logging.WARNING)
    logger.info(f"Logging configured: console={console_level}, file={log_path}")


@click.group()
@click.version_option(version=__version__, prog_name="padsmith")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v: INFO, -vv: DEBUG)")
@click.option("--debug", is_flag=True, help="Enable debug mode (DEBUG level, logs to ./padsmith-debug.log)")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Custom log file path")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Log level for file logging (default: INFO)",
)
def cli(verbose: int, debug: bool, log_file: Optional[Path], log_level: str):
    """
    padsmith - mapping editor and validator for USB macropads.

    A mapping file describes the pad geometry and, for each layer, what every
    button and knob sends. Validate it before programming so mistakes are
    caught here instead of on the device.

    \b
    Examples:
      # Create a 3x4 mapping with 2 knobs
      padsmith init --rows 3 --cols 4 --knobs 2

      # Bind copy/paste to the first key
      padsmith set --row 1 --col 1 "ctrl-c,ctrl-v"

      # Check it against a single-layer pad
      padsmith validate --product-id 0x8890

      # List valid key names
      padsmith keys
    """
    setup_logging(verbose, debug, log_file, log_level)


cli.add_command(validate)
cli.add_command(show)
cli.add_command(init)
cli.add_command(layout)
cli.add_command(set_key)
cli.add_command(keys)
cli.add_command(families)

if __name__ == "__main__":
    cli()
