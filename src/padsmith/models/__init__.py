"""Data models for macropad mappings."""

from .button import Button, Knob
from .enums import KnobPart, LedColor, Orientation
from .layer import Layer
from .macropad import DEFAULT_LAYER_COUNT, MAX_LAYERS, Device, LedSettings, Macropad

__all__ = [
    "DEFAULT_LAYER_COUNT",
    "MAX_LAYERS",
    # Models
    "Button",
    "Device",
    "Knob",
    "Layer",
    "LedSettings",
    "Macropad",
    # Enums
    "KnobPart",
    "LedColor",
    "Orientation",
]
