"""Enumerations for the macropad data model."""

from enum import Enum


class Orientation(str, Enum):
    """Physical rotation of the pad relative to its default position."""

    NORMAL = "normal"
    CLOCKWISE = "clockwise"  # USB port on the left
    COUNTER_CLOCKWISE = "counter_clockwise"  # USB port on the right
    UPSIDE_DOWN = "upside_down"


class LedColor(str, Enum):
    """LED palette supported by the pad firmware."""

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    PURPLE = "purple"

    @property
    def index(self) -> int:
        """Palette index sent to the device (1-7)."""
        return list(LedColor).index(self) + 1


class KnobPart(str, Enum):
    """The three actions of a rotary encoder."""

    CCW = "ccw"
    PRESS = "press"
    CW = "cw"
