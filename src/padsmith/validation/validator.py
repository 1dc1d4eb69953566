"""Check that a Macropad can be programmed onto a device family.

Validation is a read-only walk over the mapping: layer count, per-layer
geometry, then every grid button and knob motion. It stops at the first
problem and raises a MappingError whose context lists where it happened,
outermost first::

    layer 2 row 1 btn 3: unknown key - foobar
    layer 1 knob 1 cw: unsupported media key for 0x8890 - brightnessup

Non-fatal findings are logged and returned in ValidationReport.warnings:
a delay on a family that ignores delays, and LED settings the family does
not offer.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from padsmith.devices import UNCONSTRAINED, DelayPolicy, DeviceFamily, get_family
from padsmith.exceptions import (
    CapacityExceededError,
    DelayTooLongError,
    LayerCountError,
    MappingError,
    StructureMismatchError,
    UnsupportedFeatureError,
)
from padsmith.keys import parse_chord, split_chord, split_mapping
from padsmith.models import MAX_LAYERS, Button, Device, Layer, LedSettings, Macropad

logger = logging.getLogger(__name__)


@contextmanager
def located(location: str) -> Iterator[None]:
    """Prefix any MappingError raised inside the block with ``location``."""
    try:
        yield
    except MappingError as e:
        e.add_context(location)
        raise


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of a successful validation."""

    macropad: Macropad
    family: DeviceFamily
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Always True: validation raises instead of returning a failed report."""
        return True

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


class MappingValidator:
    """
    Validates mappings against one device family.

    The validator holds no state besides the family, so one instance can be
    shared between threads and reused for any number of mappings.

    Example:
        ```python
        validator = MappingValidator(get_family(0x8890))
        report = validator.validate(macropad)
        for warning in report.warnings:
            print(warning)
        ```
    """

    def __init__(self, family: DeviceFamily = UNCONSTRAINED):
        self.family = family

    def validate(self, macropad: Macropad) -> ValidationReport:
        """
        Validate a whole mapping.

        Returns:
            ValidationReport holding the (unchanged) macropad and any warnings

        Raises:
            MappingError: First structural or semantic problem found
        """
        warnings: list[str] = []

        self._check_layer_count(macropad)
        for number, layer in enumerate(macropad.layers, start=1):
            with located(f"layer {number}"):
                self._check_layer(layer, macropad.device, f"layer {number}", warnings)

        if macropad.led_settings is not None:
            self._check_led_settings(macropad.led_settings, warnings)

        logger.debug(
            f"Mapping valid for {self.family.family} ({len(warnings)} warnings)"
        )
        return ValidationReport(macropad=macropad, family=self.family, warnings=warnings)

    def _check_layer_count(self, macropad: Macropad) -> None:
        count = len(macropad.layers)
        if count == 0 or count > MAX_LAYERS:
            raise LayerCountError(count, MAX_LAYERS)
        if count != macropad.device.layers:
            raise StructureMismatchError("layers", macropad.device.layers, count)

    def _check_layer(self, layer: Layer, device: Device, where: str, warnings: list[str]) -> None:
        if len(layer.buttons) != device.rows:
            raise StructureMismatchError("rows", device.rows, len(layer.buttons))

        for row, cells in enumerate(layer.buttons, start=1):
            with located(f"row {row}"):
                if len(cells) != device.cols:
                    raise StructureMismatchError("cols", device.cols, len(cells))
                for col, button in enumerate(cells, start=1):
                    with located(f"btn {col}"):
                        self.check_button(button, f"{where} row {row} btn {col}", warnings)

        if len(layer.knobs) != device.knobs:
            raise StructureMismatchError("knobs", device.knobs, len(layer.knobs))

        for number, knob in enumerate(layer.knobs, start=1):
            for part, button in knob.parts():
                with located(f"knob {number} {part.value}"):
                    self.check_button(button, f"{where} knob {number} {part.value}", warnings)

    def check_button(self, button: Button, where: str = "", warnings: list[str] | None = None) -> None:
        """
        Validate one button against the family limits.

        Args:
            button: Button to check
            where: Location used in warning messages
            warnings: List that delay warnings are appended to

        Raises:
            MappingError: If the button cannot be programmed
        """
        family = self.family
        chords = split_mapping(button.mapping)
        if len(chords) > family.max_key_presses:
            raise CapacityExceededError(len(chords), family.max_key_presses)

        self._check_delay(button, where, warnings)

        if button.is_empty:
            return

        for index, chord in enumerate(chords):
            if family.modifiers_on_first_key_only and index > 0 and len(split_chord(chord)) > 1:
                raise UnsupportedFeatureError(f"{family.label} only supports mods on first key")

            action = parse_chord(chord).action
            media = action.media
            if media is not None and not family.supports_media(media):
                raise UnsupportedFeatureError(
                    f"unsupported media key for {family.label} - {action.token}"
                )

    def _check_delay(self, button: Button, where: str, warnings: list[str] | None) -> None:
        family = self.family
        if family.delay_policy is DelayPolicy.IGNORED:
            if button.delay > 0:
                message = f"{family.label} doesn't support delay ({button.delay} ms ignored)"
                if where:
                    message = f"{where}: {message}"
                logger.warning(message)
                if warnings is not None:
                    warnings.append(message)
        elif button.delay > family.max_delay:
            raise DelayTooLongError(button.delay, family.max_delay)

    def _check_led_settings(self, led: LedSettings, warnings: list[str]) -> None:
        problems = []
        if not 1 <= led.layer <= MAX_LAYERS:
            problems.append(f"LED layer must be between 1 and {MAX_LAYERS} (got {led.layer})")
        if self.family.led_modes and self.family.get_led_mode(led.mode) is None:
            known = ", ".join(f"{mode.id} ({mode.name})" for mode in self.family.led_modes)
            problems.append(f"LED mode {led.mode} not supported by {self.family.label}; known modes: {known}")

        for problem in problems:
            message = f"led settings: {problem}"
            logger.warning(message)
            warnings.append(message)


def validate_macropad(macropad: Macropad, product_id: int | None = None) -> ValidationReport:
    """
    Validate a mapping for the family that owns ``product_id``.

    Raises:
        UnknownDeviceFamilyError: If product_id is not a known family
        MappingError: If the mapping cannot be programmed
    """
    return MappingValidator(get_family(product_id)).validate(macropad)
