"""Command-line interface for padsmith."""

from .main import cli

__all__ = ["cli"]
