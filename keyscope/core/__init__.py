"""Core types and constants for keyscope."""

from .note import (
    Note,
    NO_NOTE,
    note,
    tokenize_note,
    note_from_pitch,
    to_m21_pitch,
    acc_to_alt,
    alt_to_acc,
)
from .interval import Interval, NO_INTERVAL, interval, tokenize_interval
from .transpose import transpose, transpose_fifths
from .constants import (
    LETTERS,
    CHROMATIC_INTERVALS,
)

__all__ = [
    # Notes
    "Note",
    "NO_NOTE",
    "note",
    "tokenize_note",
    "note_from_pitch",
    "to_m21_pitch",
    "acc_to_alt",
    "alt_to_acc",
    # Intervals
    "Interval",
    "NO_INTERVAL",
    "interval",
    "tokenize_interval",
    # Transposition
    "transpose",
    "transpose_fifths",
    # Constants
    "LETTERS",
    "CHROMATIC_INTERVALS",
]
