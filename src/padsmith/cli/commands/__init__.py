"""CLI commands for padsmith."""

from .edit import init, layout, set_key
from .reference import families, keys
from .show import show
from .validate import validate

__all__ = ["families", "init", "keys", "layout", "set_key", "show", "validate"]
