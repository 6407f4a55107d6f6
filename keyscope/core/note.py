"""Note names - the spelled pitches keys and scales are built from.

A note name is a letter, an optional run of accidentals and an optional
octave: "C", "Eb", "F##4", "Bbb-1". An "x" is read as a double sharp.
Names are parsed here and handed to music21 as pitches; music21 writes
flats as "-", so spellings are converted on the way in and out.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from music21 import exceptions21
from music21 import pitch as m21pitch

from .constants import FIFTHS, LETTERS

NOTE_REGEX = re.compile(r"([a-gA-G]?)(#+|b+|x+|)(-?\d+|)\s*(.*)")


@dataclass(frozen=True)
class Note:
    """Represents a spelled note or pitch class."""

    name: str = ""  # Normalized name (e.g., "Eb", "C#4")
    letter: str = ""  # Upper-case letter
    acc: str = ""  # Accidentals ("#", "bb", ...)
    octave: Optional[int] = None  # None for pitch classes
    step: int = 0  # Letter index (C=0 ... B=6)
    alt: int = 0  # Sharps positive, flats negative
    fifths: int = 0  # Position on the circle of fifths (C=0, G=1, F=-1)
    valid: bool = False

    @property
    def pc(self) -> str:
        """Pitch class name (e.g., 'Eb' for 'Eb4')."""
        return self.letter + self.acc

    @property
    def pitch(self) -> Optional[m21pitch.Pitch]:
        """A new music21 Pitch for this note, or None if the note is invalid."""
        if not self.valid:
            return None
        return to_m21_pitch(self.pc, self.octave)

    @property
    def chroma(self) -> Optional[int]:
        """Get pitch class (0-11, where 0=C)."""
        if not self.valid:
            return None
        return self.pitch.pitchClass


NO_NOTE = Note()


def tokenize_note(name: str) -> Tuple[str, str, str, str]:
    """
    Split a string into note-name tokens.

    Args:
        name: Any string, e.g. "eb4", "c# minor"

    Returns:
        Tuple of (letter, accidentals, octave, rest). The letter is
        upper-cased and "x" is expanded to "##". Every token is an
        empty string when absent.

    Example:
        tokenize_note("c#4 maj7") -> ("C", "#", "4", "maj7")
    """
    if not isinstance(name, str):
        raise TypeError(f"Note name must be a string, got {type(name).__name__}")
    match = NOTE_REGEX.fullmatch(name)
    if match is None:
        return "", "", "", ""
    letter, acc, octave, rest = match.groups()
    return letter.upper(), acc.replace("x", "##"), octave, rest


def acc_to_alt(acc: str) -> int:
    """Convert an accidental string to a signed alteration ('bb' -> -2)."""
    acc = acc.replace("x", "##")
    return -len(acc) if acc.startswith("b") else len(acc)


def alt_to_acc(alt: int) -> str:
    """Convert a signed alteration to an accidental string (-2 -> 'bb')."""
    return "b" * -alt if alt < 0 else "#" * alt


def to_m21_pitch(pc: str, octave: Optional[int] = None) -> m21pitch.Pitch:
    """
    Build a music21 Pitch from a pitch class name like "Eb" or "F##".

    The octave is set separately since music21 would read "C-1" as C flat
    in octave 1.

    Raises:
        music21.exceptions21.Music21Exception: If music21 cannot spell the
            accidental (more than four sharps or flats)
    """
    p = m21pitch.Pitch(pc[:1] + pc[1:].replace("b", "-"))
    if octave is not None:
        p.octave = octave
    return p


def note_from_pitch(p: m21pitch.Pitch, keep_octave: bool = True) -> Note:
    """
    Spell a music21 Pitch as a Note.

    Args:
        p: music21 Pitch
        keep_octave: Drop the octave when False (pitch class only)
    """
    step = LETTERS.index(p.step)
    alt = int(p.alter)
    acc = alt_to_acc(alt)
    octave = p.octave if keep_octave else None
    suffix = "" if octave is None else str(octave)

    return Note(
        name=p.step + acc + suffix,
        letter=p.step,
        acc=acc,
        octave=octave,
        step=step,
        alt=alt,
        fifths=FIFTHS[step] + 7 * alt,
        valid=True,
    )


def note(name: Union[str, Note]) -> Note:
    """
    Parse a note name.

    Returns:
        A valid Note, or NO_NOTE when the name has no letter, carries
        anything after the octave, or has more accidentals than music21
        can spell.
    """
    if isinstance(name, Note):
        return name
    letter, acc, octave_str, rest = tokenize_note(name)
    if letter == "" or rest != "":
        return NO_NOTE

    octave = int(octave_str) if octave_str else None
    try:
        p = to_m21_pitch(letter + acc, octave)
    except exceptions21.Music21Exception:
        return NO_NOTE
    return note_from_pitch(p, keep_octave=octave is not None)
