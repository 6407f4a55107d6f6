"""Pitch class sets - Chroma strings and the intervals they contain.

A chroma is a 12-character binary string with one character per semitone
above C. The major scale is "101011010101"; its set number is the same
string read as a binary integer (2773).
"""

import re
from typing import Iterable, List, Sequence, Tuple

import numpy as np
from music21 import exceptions21
from music21 import interval as m21interval

from ..core import CHROMATIC_INTERVALS, alt_to_acc, interval, note, to_m21_pitch
from ..core.constants import LETTERS, STEP_SEMITONES

CHROMA_REGEX = re.compile(r"[01]{12}")
EMPTY_CHROMA = "0" * 12
ROOT = to_m21_pitch("C", 4)


def is_chroma(value) -> bool:
    """Check whether a value is a 12-character binary chroma string."""
    return isinstance(value, str) and CHROMA_REGEX.fullmatch(value) is not None


def chroma_to_array(chroma: str) -> np.ndarray:
    """
    Convert a chroma string to a 12-element 0/1 array.

    Raises:
        ValueError: If the string is not a chroma
    """
    if not is_chroma(chroma):
        raise ValueError(f"Invalid chroma: {chroma!r}")
    return np.array([int(c) for c in chroma], dtype=int)


def array_to_chroma(values: Sequence) -> str:
    """Convert a 12-element array (any truthy marks a member) to a chroma string."""
    arr = np.asarray(values)
    if arr.shape != (12,):
        raise ValueError(f"Expected 12 pitch classes, got shape {arr.shape}")
    return "".join("1" if v else "0" for v in arr)


def set_num(chroma: str) -> int:
    """Set number of a chroma (the chroma read as binary)."""
    if not is_chroma(chroma):
        raise ValueError(f"Invalid chroma: {chroma!r}")
    return int(chroma, 2)


def chroma_from_set_num(num: int) -> str:
    """Chroma string of a set number (0-4095)."""
    if num < 0 or num > 4095:
        raise ValueError(f"Set number out of range: {num}")
    return format(num, "012b")


def chroma(notes: Iterable[str]) -> str:
    """
    Build the chroma of a collection of notes.

    Invalid note names are ignored; octaves are discarded.

    Example:
        chroma(["C", "E", "G"]) -> "100010010000"
    """
    pitch_classes = np.zeros(12, dtype=int)
    for name in notes:
        n = note(name)
        if n.valid:
            pitch_classes[n.chroma] = 1
    return array_to_chroma(pitch_classes)


def rotate(chroma: str, semitones: int) -> str:
    """Re-read a chroma from the pitch class `semitones` above C."""
    return array_to_chroma(np.roll(chroma_to_array(chroma), -semitones))


def modes(chroma: str) -> List[str]:
    """All rotations of a chroma that start on one of its members."""
    members = np.flatnonzero(chroma_to_array(chroma))
    return [rotate(chroma, int(shift)) for shift in members]


def _degree_interval(step: int, semitones: int) -> str:
    alter = semitones - STEP_SEMITONES[step]
    degree = to_m21_pitch(LETTERS[step] + alt_to_acc(alter), 4)
    return interval(m21interval.Interval(ROOT, degree).name).name


def intervals(chroma: str) -> Tuple[str, ...]:
    """
    Interval names of the members of a pitch class set, from C upwards.

    Seven-note sets containing the root are spelled with one interval per
    scale degree, measured by music21 from C to the degree's letter, so
    every letter appears once in a scale built on them. This is where
    lydian differs from a purely chromatic lookup: its raised fourth is
    "4A" (F lydian is F G A B C D E), not "5d" (F G A Cb C D E). Other
    sets, and degrees music21 cannot spell, use CHROMATIC_INTERVALS.

    Returns:
        Tuple of interval names, empty for an invalid chroma
    """
    if not is_chroma(chroma):
        return ()
    members = [int(i) for i in np.flatnonzero(chroma_to_array(chroma))]
    if len(members) == 7 and members[0] == 0:
        try:
            return tuple(_degree_interval(step, semis) for step, semis in enumerate(members))
        except exceptions21.Music21Exception:
            pass
    return tuple(CHROMATIC_INTERVALS[i] for i in members)
