"""Transport protocol for talking to a physical pad.

The USB/HID layer lives outside this package. Anything that implements
MacropadTransport (a pyusb-backed driver, a test double, the editor's
worker thread) can be handed a validated Macropad.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from padsmith.models import LedColor, Macropad


class MacropadTransport(Protocol):
    """Protocol for programming a pad over USB."""

    @property
    def product_id(self) -> int:
        """USB product id of the connected pad."""
        ...

    def program(self, macropad: Macropad) -> None:
        """
        Write every layer of a validated mapping to the device.

        Raises:
            TransportError: If the device rejects or drops the transfer
        """
        ...

    def set_led(self, mode: int, layer: int, color: LedColor) -> None:
        """
        Set the LED mode for one layer.

        Args:
            mode: Family-specific LED mode id
            layer: Layer number (1-based)
            color: LED color

        Raises:
            TransportError: If the device rejects the command
        """
        ...
