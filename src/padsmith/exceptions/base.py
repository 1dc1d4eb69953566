"""Root of the padsmith exception tree.

Every error carries two texts: a short ``user_message`` that the CLI prints
after ``ERROR:``, and a ``technical_message`` that goes to the log. Errors
the user can fix by editing the mapping or replugging the pad set
``recoverable`` and usually a ``recovery_hint``.
"""

from typing import Optional


class PadsmithError(Exception):
    """Base class; ``str(error)`` is the user message."""

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message


class TransportError(PadsmithError):
    """The device transport failed to program the pad or set its LEDs."""

    def __init__(self, operation: str, original_error: Optional[str] = None):
        user_msg = f"Device {operation} failed"
        if original_error:
            user_msg += f": {original_error}"
        super().__init__(
            user_message=user_msg,
            technical_message=f"Transport error during {operation}: {original_error}",
            recoverable=True,
            recovery_hint="Check that the macropad is plugged in and not claimed by another program",
        )
        self.operation = operation
        self.original_error = original_error
