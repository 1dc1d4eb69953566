"""padsmith: mapping model, storage and validation for USB macropads."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .models import Button, Device, Knob, Layer, LedSettings, Macropad  # noqa: E402
from .services import MappingStore  # noqa: E402
from .validation import MappingValidator, ValidationReport, validate_macropad  # noqa: E402

__all__ = [
    "Button",
    "Device",
    "Knob",
    "Layer",
    "LedSettings",
    "Macropad",
    "MappingStore",
    "MappingValidator",
    "ValidationReport",
    "validate_macropad",
]
