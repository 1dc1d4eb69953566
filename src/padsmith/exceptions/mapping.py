"""Exceptions raised while validating a macropad mapping.

MappingError keeps a list of locations (outermost first). The validator adds
one location per traversal level as the error unwinds, so the final message
reads like ``layer 1 row 2 btn 3: unknown key - foobar``.
"""

from typing import Optional

from .base import PadsmithError


class MappingError(PadsmithError):
    """A mapping cannot be programmed onto the target device."""

    def __init__(
        self,
        reason: str,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(
            user_message=reason,
            recoverable=True,
            recovery_hint=recovery_hint,
        )
        self.reason = reason
        self.context: list[str] = []

    def add_context(self, location: str) -> "MappingError":
        """Prepend an enclosing location and refresh the messages."""
        self.context.insert(0, location)
        self.user_message = self.located_message
        self.technical_message = self.located_message
        self.args = (self.user_message,)
        return self

    @property
    def located_message(self) -> str:
        if not self.context:
            return self.reason
        return f"{' '.join(self.context)}: {self.reason}"


class LayerCountError(MappingError):
    """Macropad has no layers or more than the device can store."""

    def __init__(self, count: int, maximum: int):
        super().__init__(
            f"number of layers must be > 0 and < {maximum + 1} (got {count})",
            recovery_hint="Run 'padsmith layout --layers N' to regenerate the layers",
        )
        self.count = count


class StructureMismatchError(MappingError):
    """Layer, row, column or knob count disagrees with the device geometry."""

    def __init__(self, what: str, expected: int, actual: int):
        super().__init__(
            f"{what} mismatch (expected {expected}, got {actual})",
            recovery_hint="Run 'padsmith layout' to regenerate layers for the device geometry",
        )
        self.what = what
        self.expected = expected
        self.actual = actual


class CapacityExceededError(MappingError):
    """More chained keys in one action than the device family allows."""

    def __init__(self, count: int, maximum: int):
        super().__init__(f"Too many keys ({count} > {maximum})")
        self.count = count
        self.maximum = maximum


class DelayTooLongError(MappingError):
    """Button delay is above what the device family accepts."""

    def __init__(self, delay: int, maximum: int):
        super().__init__(f"delay too high ({delay} ms > {maximum} ms)")
        self.delay = delay
        self.maximum = maximum


class UnsupportedFeatureError(MappingError):
    """The mapping uses something the device family cannot do."""
    pass


class KeyGrammarError(MappingError):
    """A mapping string does not follow the chord grammar."""
    pass


class UnknownKeyError(KeyGrammarError):
    """Token is not a modifier, media key, regular key or mouse action."""

    def __init__(self, token: str):
        super().__init__(
            f"unknown key - {token}",
            recovery_hint="Run 'padsmith keys' to list valid key names",
        )
        self.token = token


class InvalidChordError(KeyGrammarError):
    """A non-modifier token appears before the last token of a chord."""

    def __init__(self, chord: str, token: str):
        super().__init__(
            f"'{token}' in '{chord}' is not a modifier; only the last key of a combo may be a regular key"
        )
        self.chord = chord
        self.token = token
