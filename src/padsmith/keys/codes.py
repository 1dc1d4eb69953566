"""Key code tables understood by the pad firmware.

Values are the codes the device expects: HID modifier bits, HID consumer
page usages for media keys, HID keyboard page usages for regular keys.
Each table also has a name index keyed by canonical spelling (see
``canonicalize``).
"""

from enum import Enum, IntEnum


class KeyKind(str, Enum):
    """Category a token resolves to."""

    MODIFIER = "modifier"
    MEDIA = "media"
    KEY = "key"
    MOUSE = "mouse"


class Modifier(IntEnum):
    """HID modifier bits."""

    CTRL = 0x01
    SHIFT = 0x02
    ALT = 0x04
    WIN = 0x08
    RCTRL = 0x10
    RSHIFT = 0x20
    RALT = 0x40
    RWIN = 0x80


class MediaCode(IntEnum):
    """HID consumer page codes."""

    BRIGHTNESS_UP = 0x6F
    BRIGHTNESS_DOWN = 0x70
    NEXT = 0xB5
    PREVIOUS = 0xB6
    STOP = 0xB7
    PLAY = 0xCD
    MUTE = 0xE2
    VOLUME_UP = 0xE9
    VOLUME_DOWN = 0xEA
    FAVORITES = 0x182
    CALCULATOR = 0x192
    SCREEN_LOCK = 0x19E


class MouseAction(IntEnum):
    """Mouse actions; values are the button mask or wheel direction."""

    CLICK = 0x01
    RCLICK = 0x02
    MCLICK = 0x04
    WHEELUP = 0x10
    WHEELDOWN = 0x20


def _well_known_codes() -> dict[str, int]:
    codes = {chr(ord("A") + i): 0x04 + i for i in range(26)}
    codes.update({str(digit): 0x1E + (digit - 1) % 10 for digit in range(10)})
    codes.update({f"F{n}": 0x3A + n - 1 for n in range(1, 13)})
    codes.update({f"F{n}": 0x68 + n - 13 for n in range(13, 25)})
    codes.update({
        "Enter": 0x28,
        "Esc": 0x29,
        "Backspace": 0x2A,
        "Tab": 0x2B,
        "Space": 0x2C,
        "Minus": 0x2D,
        "Equal": 0x2E,
        "Lbracket": 0x2F,
        "Rbracket": 0x30,
        "Backslash": 0x31,
        "Semicolon": 0x33,
        "Quote": 0x34,
        "Grave": 0x35,
        "Comma": 0x36,
        "Dot": 0x37,
        "Slash": 0x38,
        "Capslock": 0x39,
        "Printscreen": 0x46,
        "Scrolllock": 0x47,
        "Pause": 0x48,
        "Insert": 0x49,
        "Home": 0x4A,
        "Pageup": 0x4B,
        "Delete": 0x4C,
        "End": 0x4D,
        "Pagedown": 0x4E,
        "Right": 0x4F,
        "Left": 0x50,
        "Down": 0x51,
        "Up": 0x52,
        "Numlock": 0x53,
        "Application": 0x65,
    })
    return codes


# Canonical spelling -> code
MODIFIER_NAMES: dict[str, Modifier] = {
    "Ctrl": Modifier.CTRL,
    "Shift": Modifier.SHIFT,
    "Alt": Modifier.ALT,
    "Win": Modifier.WIN,
    "Rctrl": Modifier.RCTRL,
    "Rshift": Modifier.RSHIFT,
    "Ralt": Modifier.RALT,
    "Rwin": Modifier.RWIN,
}

MEDIA_NAMES: dict[str, MediaCode] = {
    "Play": MediaCode.PLAY,
    "Stop": MediaCode.STOP,
    "Next": MediaCode.NEXT,
    "Previous": MediaCode.PREVIOUS,
    "Prev": MediaCode.PREVIOUS,
    "Mute": MediaCode.MUTE,
    "Volumeup": MediaCode.VOLUME_UP,
    "Volup": MediaCode.VOLUME_UP,
    "Volumedown": MediaCode.VOLUME_DOWN,
    "Voldown": MediaCode.VOLUME_DOWN,
    "Brightnessup": MediaCode.BRIGHTNESS_UP,
    "Brightnessdown": MediaCode.BRIGHTNESS_DOWN,
    "Favorites": MediaCode.FAVORITES,
    "Calculator": MediaCode.CALCULATOR,
    "Screenlock": MediaCode.SCREEN_LOCK,
}

WELL_KNOWN_NAMES: dict[str, int] = _well_known_codes()

# Alternate spellings accepted for regular keys
WELL_KNOWN_ALIASES: dict[str, str] = {
    "Escape": "Esc",
    "Return": "Enter",
    "Period": "Dot",
    "Del": "Delete",
}

# Mouse names are matched case-insensitively
MOUSE_NAMES: dict[str, MouseAction] = {action.name.lower(): action for action in MouseAction}
