"""Hand validated mappings to a device transport."""

import logging

from padsmith.exceptions import PadsmithError, TransportError
from padsmith.devices import MacropadTransport
from padsmith.models import LedSettings, Macropad
from padsmith.validation import ValidationReport, validate_macropad

logger = logging.getLogger(__name__)


def program_device(transport: MacropadTransport, macropad: Macropad) -> ValidationReport:
    """
    Validate ``macropad`` for the connected pad, then program it.

    Nothing is written to the device unless validation passes.

    Raises:
        UnknownDeviceFamilyError: If the connected pad's product id is unknown
        MappingError: If the mapping cannot be programmed onto this pad
        TransportError: If the transfer fails
    """
    report = validate_macropad(macropad, transport.product_id)

    logger.info(f"Programming {len(macropad.layers)} layers onto {report.family.label}")
    try:
        transport.program(macropad)
    except PadsmithError:
        raise
    except Exception as e:
        logger.error(f"Programming failed: {e}", exc_info=True)
        raise TransportError("programming", str(e)) from e

    return report


def apply_led_settings(transport: MacropadTransport, led: LedSettings) -> None:
    """
    Send LED settings to the connected pad.

    Raises:
        TransportError: If the device rejects the command
    """
    logger.info(f"Setting LED mode {led.mode} on layer {led.layer} ({led.color.value})")
    try:
        transport.set_led(led.mode, led.layer, led.color)
    except PadsmithError:
        raise
    except Exception as e:
        logger.error(f"Setting LEDs failed: {e}", exc_info=True)
        raise TransportError("LED update", str(e)) from e
