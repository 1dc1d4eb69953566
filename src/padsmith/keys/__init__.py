"""Key tables and the mapping-string grammar."""

from .codes import KeyKind, MediaCode, Modifier, MouseAction
from .grammar import (
    Chord,
    KeyAction,
    canonicalize,
    classify_token,
    key_names,
    media_names,
    modifier_names,
    mouse_names,
    parse_chord,
    parse_mapping,
    split_chord,
    split_mapping,
)

__all__ = [
    "Chord",
    "KeyAction",
    "KeyKind",
    "MediaCode",
    "Modifier",
    "MouseAction",
    "canonicalize",
    "classify_token",
    "key_names",
    "media_names",
    "modifier_names",
    "mouse_names",
    "parse_chord",
    "parse_mapping",
    "split_chord",
    "split_mapping",
]
