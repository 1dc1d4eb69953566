"""Device families and their capability limits.

Family rules are data: validation looks a family up by product id and reads
its limits, so supporting a new pad means adding one entry to FAMILIES.

::

    product id 0x8890  -> single_layer  (5 keys, no delay, mods on first key only)
    product id 0x8840  -> multi_layer   (18 keys, delay <= 6000 ms)
    no product id      -> unconstrained (255 keys, delay <= 6000 ms)
"""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from padsmith.exceptions import UnknownDeviceFamilyError
from padsmith.keys import MediaCode

logger = logging.getLogger(__name__)

VENDOR_ID = 0x1189

MAX_KEY_PRESSES_884X = 18
MAX_KEY_PRESSES_8890 = 5
MAX_KEY_PRESSES_UNKNOWN = 0xFF
MAX_DELAY = 6000


class DelayPolicy(str, Enum):
    """How a family treats Button.delay."""

    ENFORCED = "enforced"  # delay above max_delay is rejected
    IGNORED = "ignored"  # device has no delay support, non-zero delay is a warning


class LedMode(BaseModel):
    """One LED mode offered by a family."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0, le=0xFF, description="Mode id sent to the device")
    name: str = Field(min_length=1, description="Display name")


class DeviceFamily(BaseModel):
    """Capability limits shared by every pad with one of the listed product ids."""

    model_config = ConfigDict(frozen=True)

    family: str = Field(min_length=1, description="Family identifier (e.g. 'single_layer')")
    product_ids: tuple[int, ...] = Field(default=(), description="USB product ids in this family")
    max_key_presses: int = Field(ge=1, description="Max chained keys per button")
    delay_policy: DelayPolicy = Field(default=DelayPolicy.ENFORCED)
    max_delay: int = Field(default=MAX_DELAY, ge=0, le=0xFFFF, description="Max delay (ms)")
    modifiers_on_first_key_only: bool = Field(
        default=False, description="Only the first chord of a mapping may use modifiers"
    )
    allowed_media: frozenset[MediaCode] | None = Field(
        default=None, description="Media keys the firmware accepts (None = all)"
    )
    led_modes: tuple[LedMode, ...] = Field(default=(), description="Supported LED modes")

    @property
    def label(self) -> str:
        """Short name for messages, e.g. '0x8890'."""
        if not self.product_ids:
            return self.family
        return "/".join(f"0x{pid:04x}" for pid in self.product_ids)

    def supports_media(self, code: MediaCode) -> bool:
        return self.allowed_media is None or code in self.allowed_media

    def get_led_mode(self, mode_id: int) -> LedMode | None:
        for mode in self.led_modes:
            if mode.id == mode_id:
                return mode
        return None


MULTI_LAYER = DeviceFamily(
    family="multi_layer",
    product_ids=(0x8840, 0x8842),
    max_key_presses=MAX_KEY_PRESSES_884X,
    led_modes=(
        LedMode(id=0, name="Off"),
        LedMode(id=1, name="Always On (Color)"),
        LedMode(id=2, name="Shock (Color)"),
        LedMode(id=3, name="Shock2 (Color)"),
        LedMode(id=4, name="Light Key (Color)"),
        LedMode(id=5, name="White Always On"),
    ),
)

SINGLE_LAYER = DeviceFamily(
    family="single_layer",
    product_ids=(0x8890,),
    max_key_presses=MAX_KEY_PRESSES_8890,
    delay_policy=DelayPolicy.IGNORED,
    modifiers_on_first_key_only=True,
    allowed_media=frozenset({
        MediaCode.PLAY,
        MediaCode.PREVIOUS,
        MediaCode.NEXT,
        MediaCode.MUTE,
        MediaCode.VOLUME_UP,
        MediaCode.VOLUME_DOWN,
    }),
    led_modes=(
        LedMode(id=0, name="Off"),
        LedMode(id=1, name="Last Pushed"),
        LedMode(id=2, name="Cycle Colors"),
    ),
)

# Used when the target device is not known: structure is still checked but
# key count is effectively unbounded.
UNCONSTRAINED = DeviceFamily(
    family="unconstrained",
    max_key_presses=MAX_KEY_PRESSES_UNKNOWN,
)

FAMILIES: tuple[DeviceFamily, ...] = (MULTI_LAYER, SINGLE_LAYER)


def get_family(product_id: int | None) -> DeviceFamily:
    """
    Look up the family for a USB product id.

    Args:
        product_id: Product id of the target pad, or None if unknown

    Returns:
        The matching family, or UNCONSTRAINED when product_id is None

    Raises:
        UnknownDeviceFamilyError: If product_id is not in any family
    """
    if product_id is None:
        return UNCONSTRAINED
    for family in FAMILIES:
        if product_id in family.product_ids:
            logger.debug(f"Product id 0x{product_id:04x} -> {family.family}")
            return family
    raise UnknownDeviceFamilyError(product_id)
