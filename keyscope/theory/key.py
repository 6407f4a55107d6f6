"""Keys - Describe a key (tonic + mode) from its name.

Builds the structure of a key from names like "Eb major" or "f# dorian":
- Tokenizing free-form key names into tonic and mode
- Key signature (accidental count and symbols)
- Altered notes in key-signature order
- Scale and tonic triad/seventh chords
- Relative and parallel keys
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple, Union

from music21 import key as m21key

from ..core import (
    alt_to_acc,
    note,
    note_from_pitch,
    tokenize_note,
    transpose,
    transpose_fifths,
)
from . import pcset
from .mode import mode as get_mode


@dataclass(frozen=True)
class Key:
    """A key built from a tonic and a mode."""

    name: str  # "<tonic> <mode type>" (e.g., "Eb major")
    tonic: str  # Pitch class (e.g., "Eb")
    mode_name: str  # Canonical mode name ("ionian" for "major")
    mode_num: int  # Rotation of the major scale
    chroma: str  # Pitch class set of the mode
    alt: int  # Key signature: sharps positive, flats negative
    acc: str  # Key signature as symbols (e.g., "bbb")
    altered_notes: Tuple[str, ...]  # Sharped/flatted notes in signature order
    intervals: Tuple[str, ...]  # Scale formula (e.g., "1P", "2M", ...)
    scale: Tuple[str, ...]
    triad: str  # Tonic triad symbol (e.g., "Ebm")
    seventh: str  # Tonic seventh chord symbol (e.g., "EbMaj7")
    aliases: Tuple[str, ...] = ()
    valid: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        data = asdict(self)
        for field_name in ("altered_notes", "intervals", "scale", "aliases"):
            data[field_name] = list(data[field_name])
        return data


def tokenize(key_name: str) -> Tuple[str, str]:
    """
    Split a key name into its tonic and mode.

    Either part may be empty: mode-only names ("dorian") have no tonic,
    bare notes ("Bb") have no mode, and names that cannot be read come
    back unchanged as the mode so the mode lookup rejects them.

    Args:
        key_name: Free-form key name (any case)

    Returns:
        Tuple of (tonic, mode type)

    Example:
        tokenize("C major") -> ("C", "major")
    """
    if not isinstance(key_name, str):
        raise TypeError(f"Key name must be a string, got {type(key_name).__name__}")
    lowered = key_name.lower()
    letter, acc, _, mode_type = tokenize_note(lowered)
    if get_mode(mode_type).valid:
        return letter + acc, mode_type
    if get_mode(lowered).valid:
        return "", lowered
    if letter and not mode_type:
        return letter + acc, ""
    return "", key_name


def altered_notes(alt: int) -> Tuple[str, ...]:
    """
    Notes carrying an accidental in a key signature.

    Read from music21's KeySignature: sharps are added a fifth at a time
    above B (F#, C#, G#, ...), flats a fifth at a time below F (Bb, Eb,
    Ab, ...). Past seven they continue with double accidentals (F##, Bbb).

    Args:
        alt: Key signature (sharps positive, flats negative)

    Returns:
        Tuple of abs(alt) note names in key-signature order
    """
    if alt == 0:
        return ()
    pitches = m21key.KeySignature(alt).alteredPitches
    return tuple(note_from_pitch(p, keep_octave=False).name for p in pitches)


def key(key_name: str) -> Optional[Key]:
    """
    Build a key from its name.

    Args:
        key_name: Key name such as "C major", "eb aeolian", "F# Dorian"

    Returns:
        Key, or None when the tonic or the mode cannot be resolved
    """
    tonic, mode_type = tokenize(key_name)
    m = get_mode(mode_type)
    t = note(tonic)
    if not m.valid or not t.valid:
        return None

    alt = t.fifths - m.alt
    intervals = pcset.intervals(m.chroma)

    return Key(
        name=f"{tonic} {mode_type}",
        tonic=tonic,
        mode_name=m.name,
        mode_num=m.mode_num,
        chroma=m.chroma,
        alt=alt,
        acc=alt_to_acc(alt),
        altered_notes=altered_notes(alt),
        intervals=intervals,
        scale=tuple(transpose(tonic, i) for i in intervals),
        triad=tonic + m.triad,
        seventh=tonic + m.seventh,
        aliases=m.aliases,
    )


def _resolve(source: Union[str, Key]) -> Optional[Key]:
    return source if isinstance(source, Key) else key(source)


def relative_key(source: Union[str, Key], mode_name: str = "major") -> Optional[Key]:
    """
    Get the key in another mode that shares the same key signature.

    A minor -> C major, D dorian -> C major, C major -> A minor (with
    mode_name="minor").
    """
    k = _resolve(source)
    target = get_mode(mode_name)
    if k is None or not target.valid:
        return None
    tonic = transpose_fifths("C", k.alt + target.alt)
    return key(f"{tonic} {mode_name}")


def parallel_key(source: Union[str, Key], mode_name: str = "major") -> Optional[Key]:
    """
    Get the key on the same tonic in another mode (C minor -> C major).
    """
    k = _resolve(source)
    if k is None or not get_mode(mode_name).valid:
        return None
    return key(f"{k.tonic} {mode_name}")
