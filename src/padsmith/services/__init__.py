"""Services layer for padsmith."""

from .mapping_store import DEFAULT_MAPPING_FILE, MappingStore
from .programming import apply_led_settings, program_device

__all__ = ["DEFAULT_MAPPING_FILE", "MappingStore", "apply_led_settings", "program_device"]
