"""Main entry point for ``python -m padsmith``."""

from padsmith.cli import cli

if __name__ == "__main__":
    cli()
