"""Layer model: one complete, independently switchable keymap."""

from pydantic import BaseModel, Field

from .button import Button, Knob


class Layer(BaseModel):
    """Button grid (rows x cols) and knobs for one layer."""

    buttons: list[list[Button]] = Field(description="Button grid, row-major")
    knobs: list[Knob] = Field(description="Knob actions, one entry per knob")

    def iter_buttons(self):
        """Yield (row, col, button) for every grid cell, zero-based."""
        for row, cells in enumerate(self.buttons):
            for col, button in enumerate(cells):
                yield row, col, button

    def copy_overlap(self, other: "Layer") -> None:
        """Copy the cells and knobs of ``other`` that fit into this layer's geometry."""
        for row, cells in enumerate(self.buttons):
            if row >= len(other.buttons):
                break
            for col in range(len(cells)):
                if col < len(other.buttons[row]):
                    cells[col] = other.buttons[row][col].model_copy(deep=True)
        for index in range(min(len(self.knobs), len(other.knobs))):
            self.knobs[index] = other.knobs[index].model_copy(deep=True)

    @classmethod
    def create_empty(cls, rows: int, cols: int, knobs: int) -> "Layer":
        """Create a layer of unbound buttons and knobs."""
        return cls(
            buttons=[[Button.empty() for _ in range(cols)] for _ in range(rows)],
            knobs=[Knob.empty() for _ in range(knobs)],
        )
