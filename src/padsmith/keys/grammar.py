"""Action grammar: turn a mapping string into typed chords.

A mapping string is a comma-separated sequence of chords, sent to the
device one after another. A chord is a dash-separated sequence of tokens;
every token but the last must be a modifier, and the last one is the
action (regular key, media key, mouse action, or a lone modifier)::

    "ctrl-c,ctrl-v"   -> [Chord(ctrl + c), Chord(ctrl + v)]
    "shift-alt-f4"    -> [Chord(shift, alt + f4)]
    "volup"           -> [Chord(volup)]
"""

from dataclasses import dataclass

from padsmith.exceptions import InvalidChordError, UnknownKeyError

from .codes import (
    MEDIA_NAMES,
    MODIFIER_NAMES,
    MOUSE_NAMES,
    WELL_KNOWN_ALIASES,
    WELL_KNOWN_NAMES,
    KeyKind,
    MediaCode,
)

CHORD_SEPARATOR = ","
TOKEN_SEPARATOR = "-"


@dataclass(frozen=True)
class KeyAction:
    """A classified token."""

    token: str
    kind: KeyKind
    code: int

    @property
    def is_modifier(self) -> bool:
        return self.kind is KeyKind.MODIFIER

    @property
    def media(self) -> MediaCode | None:
        """The media code, or None when this is not a media key."""
        return MediaCode(self.code) if self.kind is KeyKind.MEDIA else None


@dataclass(frozen=True)
class Chord:
    """Modifiers held while one action is sent."""

    modifiers: tuple[KeyAction, ...]
    action: KeyAction

    @property
    def has_modifiers(self) -> bool:
        return bool(self.modifiers)

    @property
    def modifier_mask(self) -> int:
        """OR of the modifier bits held for this chord."""
        mask = 0
        for modifier in self.modifiers:
            mask |= modifier.code
        return mask

    @property
    def tokens(self) -> tuple[KeyAction, ...]:
        return (*self.modifiers, self.action)


def canonicalize(token: str) -> str:
    """Upper-case the first character, leave the rest untouched."""
    return token[:1].upper() + token[1:]


def classify_token(token: str) -> KeyAction:
    """
    Resolve one token to a modifier, media key, regular key or mouse action.

    Categories are tried in that order and the first match wins.

    Raises:
        UnknownKeyError: If the token matches none of the categories
    """
    name = canonicalize(token)

    if name in MODIFIER_NAMES:
        return KeyAction(token, KeyKind.MODIFIER, int(MODIFIER_NAMES[name]))
    if name in MEDIA_NAMES:
        return KeyAction(token, KeyKind.MEDIA, int(MEDIA_NAMES[name]))

    name = WELL_KNOWN_ALIASES.get(name, name)
    if name in WELL_KNOWN_NAMES:
        return KeyAction(token, KeyKind.KEY, WELL_KNOWN_NAMES[name])
    if token.lower() in MOUSE_NAMES:
        return KeyAction(token, KeyKind.MOUSE, int(MOUSE_NAMES[token.lower()]))

    raise UnknownKeyError(token)


def split_chord(text: str) -> list[str]:
    """Split a chord into its raw tokens."""
    return text.split(TOKEN_SEPARATOR)


def split_mapping(mapping: str) -> list[str]:
    """Split a mapping into its raw chords.

    An empty mapping still yields one (empty) chord, which is what counts
    against the device's chained-key budget.
    """
    return mapping.split(CHORD_SEPARATOR)


def parse_chord(text: str) -> Chord:
    """
    Parse a dash-separated chord such as ``ctrl-shift-t``.

    Raises:
        UnknownKeyError: If a token is not a known key
        InvalidChordError: If a token before the last one is not a modifier
    """
    actions = [classify_token(token) for token in split_chord(text)]
    *modifiers, action = actions
    for modifier in modifiers:
        if not modifier.is_modifier:
            raise InvalidChordError(text, modifier.token)
    return Chord(modifiers=tuple(modifiers), action=action)


def parse_mapping(mapping: str) -> list[Chord]:
    """Parse a full mapping string into chords; an empty mapping has none."""
    if not mapping:
        return []
    return [parse_chord(chord) for chord in split_mapping(mapping)]


def modifier_names() -> list[str]:
    return [name.lower() for name in MODIFIER_NAMES]


def media_names() -> list[str]:
    return [name.lower() for name in MEDIA_NAMES]


def mouse_names() -> list[str]:
    return list(MOUSE_NAMES)


def key_names() -> list[str]:
    return [name.lower() for name in WELL_KNOWN_NAMES]


