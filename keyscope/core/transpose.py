"""Transposition - Move notes by intervals or by steps on the circle of fifths."""

from typing import Union

from music21 import exceptions21
from music21 import interval as m21interval

from .interval import Interval, interval
from .note import Note, note, note_from_pitch

PERFECT_FIFTH = m21interval.Interval("P5")
PERFECT_FIFTH_DOWN = m21interval.Interval("-P5")


def transpose(note_name: Union[str, Note], interval_name: Union[str, Interval]) -> str:
    """
    Transpose a note by an interval.

    Pitch classes stay pitch classes; notes with an octave keep one.

    Args:
        note_name: Note or pitch class (e.g., "Eb", "C4")
        interval_name: Interval (e.g., "3M", "-2m")

    Returns:
        Transposed note name, or "" if either argument is invalid

    Example:
        transpose("Eb", "5P") -> "Bb"
    """
    n = note(note_name)
    i = interval(interval_name)
    if not n.valid or not i.valid:
        return ""
    try:
        p = m21interval.Interval(i.m21_name).transposePitch(n.pitch)
    except exceptions21.Music21Exception:
        return ""
    return note_from_pitch(p, keep_octave=n.octave is not None).name


def transpose_fifths(note_name: Union[str, Note], fifths: int) -> str:
    """
    Move a note a number of perfect fifths around the circle.

    Negative values walk down in fifths. Notes with an octave move by
    real fifths, so "C4" one fifth up is "G4" and two fifths up is "D5".

    Example:
        transpose_fifths("B", 1) -> "F#"
        transpose_fifths("F", -1) -> "Bb"
    """
    n = note(note_name)
    if not n.valid:
        return ""
    step = PERFECT_FIFTH if fifths > 0 else PERFECT_FIFTH_DOWN
    p = n.pitch
    try:
        for _ in range(abs(fifths)):
            p = step.transposePitch(p)
    except exceptions21.Music21Exception:
        return ""
    return note_from_pitch(p, keep_octave=n.octave is not None).name
