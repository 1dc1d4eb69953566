"""Utility modules for padsmith."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
