"""Configuration-related exceptions.

- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Mapping file has invalid syntax or is empty
- ConfigValidationError: Mapping file does not match the expected shape
- UnknownDeviceFamilyError: Product id is not a known device family
"""

from typing import Any, Optional

from .base import PadsmithError


class ConfigurationError(PadsmithError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Mapping file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Path to the invalid mapping file
            parse_error: The parsing error message
        """
        user_msg = "Mapping file has invalid syntax"
        recovery = (
            "Check for common JSON errors:\n"
            "  - Trailing commas (remove commas after last item)\n"
            "  - Missing quotes around strings\n"
            "  - Unclosed braces or brackets\n"
            f"  - Edit: {file_path}"
        )

        if "utf-8" in parse_error.lower():
            user_msg = "Mapping file is not UTF-8 text"
            recovery = f"Re-save {file_path} with UTF-8 encoding"
        elif "empty" in parse_error.lower():
            user_msg = "Mapping file is empty"
            recovery = f"Delete {file_path} to regenerate a default mapping"
        elif "trailing comma" in parse_error.lower():
            user_msg = "Mapping file has a trailing comma"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Mapping file content does not match the Macropad structure."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Args:
            field: Dotted path of the field that failed (e.g. "layers.0.knobs.1.cw.delay")
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the mapping file (optional)
        """
        user_msg = f"Invalid mapping value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your mapping"
        if file_path:
            recovery += f"\nMapping file: {file_path}"
        if field.endswith("delay"):
            recovery += "\nDelays are whole milliseconds between 0 and 65535"
        elif field.endswith("color"):
            recovery += "\nRun 'padsmith families' to see the LED palette"
        elif field.endswith("orientation"):
            recovery += "\nValid orientations: normal, clockwise, counter_clockwise, upside_down"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Mapping validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.file_path = file_path


class UnknownDeviceFamilyError(ConfigurationError):
    """Product id does not belong to any supported device family."""

    def __init__(self, product_id: int):
        super().__init__(
            user_message=f"Unknown product id 0x{product_id:04x}",
            technical_message=f"No device family registered for product id {product_id:#06x}",
            recoverable=True,
            recovery_hint="Run 'padsmith families' to list supported product ids",
        )
        self.product_id = product_id
