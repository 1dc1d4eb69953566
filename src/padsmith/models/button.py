"""Button and knob models."""

from pydantic import BaseModel, Field

from .enums import KnobPart


class Button(BaseModel):
    """A single key action: a mapping string plus an inter-key delay.

    The mapping is a comma-separated list of chords (``ctrl-c,ctrl-v``);
    an empty mapping leaves the key unbound.
    """

    delay: int = Field(ge=0, le=0xFFFF, description="Delay between chained keys (ms)")
    mapping: str = Field(description="Comma-separated chords, e.g. 'ctrl-c,ctrl-v'")

    @property
    def is_empty(self) -> bool:
        """Check if nothing is bound to this button."""
        return self.mapping == ""

    def clear(self) -> None:
        """Unbind the button."""
        self.delay = 0
        self.mapping = ""

    @classmethod
    def empty(cls) -> "Button":
        """Create an unbound button."""
        return cls(delay=0, mapping="")


class Knob(BaseModel):
    """Rotary encoder: counter-clockwise turn, press, clockwise turn."""

    ccw: Button = Field(description="Counter-clockwise rotation")
    press: Button = Field(description="Knob press")
    cw: Button = Field(description="Clockwise rotation")

    def part(self, part: KnobPart) -> Button:
        """Get the button bound to one knob motion."""
        return getattr(self, part.value)

    def parts(self) -> list[tuple[KnobPart, Button]]:
        """All three motions in device order (ccw, press, cw)."""
        return [(part, self.part(part)) for part in KnobPart]

    @classmethod
    def empty(cls) -> "Knob":
        """Create a knob with all three motions unbound."""
        return cls(ccw=Button.empty(), press=Button.empty(), cw=Button.empty())
