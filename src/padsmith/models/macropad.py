"""Macropad model: device geometry, layers and LED settings."""

import logging

from pydantic import BaseModel, Field

from .button import Button, Knob
from .enums import LedColor, Orientation
from .layer import Layer

logger = logging.getLogger(__name__)

# Layers stored by every supported pad
DEFAULT_LAYER_COUNT = 3
MAX_LAYERS = 3


class Device(BaseModel):
    """Fixed physical geometry of the pad."""

    orientation: Orientation = Field(description="Rotation of the pad")
    rows: int = Field(ge=0, le=0xFF, description="Number of button rows")
    cols: int = Field(ge=0, le=0xFF, description="Number of button columns")
    knobs: int = Field(ge=0, le=0xFF, description="Number of rotary encoders")
    layers: int = Field(
        default=DEFAULT_LAYER_COUNT,
        ge=0,
        le=0xFF,
        description="Number of layers (defaults to 3 for older mapping files)",
    )


class LedSettings(BaseModel):
    """LED mode, the layer it applies to, and its color."""

    mode: int = Field(ge=0, le=0xFF, description="LED mode id (device-family specific)")
    layer: int = Field(ge=0, le=0xFF, description="Layer number the mode applies to (1-based)")
    color: LedColor = Field(description="LED color")


class Macropad(BaseModel):
    """Complete mapping for a macropad.

    The model does not check that the layers match the device geometry;
    that is the validator's job, so a broken file can still be loaded,
    inspected and repaired.
    """

    device: Device = Field(description="Device geometry")
    layers: list[Layer] = Field(description="Keymap per layer")
    led_settings: LedSettings | None = Field(default=None, description="Optional LED settings")

    def get_button(self, layer: int, row: int, col: int) -> Button:
        """Get a grid button by zero-based layer, row and column."""
        try:
            return self.layers[layer].buttons[row][col]
        except IndexError:
            raise IndexError(f"No button at layer {layer}, row {row}, col {col}") from None

    def get_knob(self, layer: int, knob: int) -> Knob:
        """Get a knob by zero-based layer and knob index."""
        try:
            return self.layers[layer].knobs[knob]
        except IndexError:
            raise IndexError(f"No knob {knob} on layer {layer}") from None

    def apply_layout(
        self,
        rows: int,
        cols: int,
        knobs: int,
        layers: int | None = None,
        orientation: Orientation | None = None,
    ) -> None:
        """
        Change the device geometry and regenerate every layer.

        Cells and knobs that exist in both the old and the new geometry keep
        their mapping; everything else starts out unbound.

        Args:
            rows: New number of button rows
            cols: New number of button columns
            knobs: New number of knobs
            layers: New layer count (unchanged if None)
            orientation: New orientation (unchanged if None)
        """
        layer_count = self.device.layers if layers is None else layers
        old_layers = self.layers

        new_layers = []
        for index in range(layer_count):
            layer = Layer.create_empty(rows, cols, knobs)
            if index < len(old_layers):
                layer.copy_overlap(old_layers[index])
            new_layers.append(layer)

        self.device.rows = rows
        self.device.cols = cols
        self.device.knobs = knobs
        self.device.layers = layer_count
        if orientation is not None:
            self.device.orientation = orientation
        self.layers = new_layers

        logger.info(f"Applied layout: {layer_count} layers, {rows}x{cols} grid, {knobs} knobs")

    @classmethod
    def create_default(cls, rows: int, cols: int, knobs: int) -> "Macropad":
        """Factory default: unbound keys, 3 layers, cyan LEDs in mode 1 on layer 1."""
        return cls(
            device=Device(
                orientation=Orientation.NORMAL,
                rows=rows,
                cols=cols,
                knobs=knobs,
                layers=DEFAULT_LAYER_COUNT,
            ),
            layers=[Layer.create_empty(rows, cols, knobs) for _ in range(DEFAULT_LAYER_COUNT)],
            led_settings=LedSettings(mode=1, layer=1, color=LedColor.CYAN),
        )
