"""Device families and the transport protocol."""

from .families import (
    FAMILIES,
    MAX_DELAY,
    MULTI_LAYER,
    SINGLE_LAYER,
    UNCONSTRAINED,
    VENDOR_ID,
    DelayPolicy,
    DeviceFamily,
    LedMode,
    get_family,
)
from .protocols import MacropadTransport

__all__ = [
    "FAMILIES",
    "MAX_DELAY",
    "MULTI_LAYER",
    "SINGLE_LAYER",
    "UNCONSTRAINED",
    "VENDOR_ID",
    "DelayPolicy",
    "DeviceFamily",
    "LedMode",
    "MacropadTransport",
    "get_family",
]
