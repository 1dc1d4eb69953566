"""Mapping validation against device-family limits."""

from .validator import MappingValidator, ValidationReport, located, validate_macropad

__all__ = ["MappingValidator", "ValidationReport", "located", "validate_macropad"]
