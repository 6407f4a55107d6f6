"""Modes - The seven rotations of the major scale.

Each mode carries the chord qualities built on its tonic and its reference
alteration: the circle-of-fifths position of the tonic when the mode is
played on the white keys (D dorian = 2, F lydian = -1, B locrian = 5),
read from music21's key-signature table. Subtracting it from a tonic's
fifths position gives the key signature.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from music21 import key as m21key

from ..core.constants import LETTERS, STEP_SEMITONES
from . import pcset

IONIAN_CHROMA = "101011010101"

# (name, triad suffix, seventh suffix, aliases), by mode number
MODE_DATA = [
    ("ionian", "", "Maj7", ("major",)),
    ("dorian", "m", "m7", ()),
    ("phrygian", "m", "m7", ()),
    ("lydian", "", "Maj7", ()),
    ("mixolydian", "", "7", ()),
    ("aeolian", "m", "m7", ("minor",)),
    ("locrian", "dim", "m7b5", ()),
]


@dataclass(frozen=True)
class Mode:
    """A mode of the major scale."""

    name: str = ""
    mode_num: int = -1  # Rotation of the major scale (ionian=0)
    chroma: str = pcset.EMPTY_CHROMA
    alt: int = 0  # Reference alteration
    triad: str = ""  # Chord symbol suffix (e.g., "m", "dim")
    seventh: str = ""  # Chord symbol suffix (e.g., "m7b5")
    aliases: Tuple[str, ...] = ()
    valid: bool = False

    @property
    def set_num(self) -> int:
        """Set number of the mode's chroma (ionian = 2773)."""
        return pcset.set_num(self.chroma)

    @property
    def intervals(self) -> Tuple[str, ...]:
        """Scale formula from the tonic (e.g., '1P', '2M', '3m', ...)."""
        return pcset.intervals(self.chroma)


NO_MODE = Mode()


def _build_modes() -> Tuple[Mode, ...]:
    return tuple(
        Mode(
            name=name,
            mode_num=num,
            chroma=pcset.rotate(IONIAN_CHROMA, STEP_SEMITONES[num]),
            alt=m21key.pitchToSharps(LETTERS[num]),
            triad=triad,
            seventh=seventh,
            aliases=aliases,
            valid=True,
        )
        for num, (name, triad, seventh, aliases) in enumerate(MODE_DATA)
    )

MODES = _build_modes()

_INDEX: Dict[str, Mode] = {m.name: m for m in MODES}
_INDEX.update({alias: m for m in MODES for alias in m.aliases})


def mode(name: Union[str, Mode]) -> Mode:
    """
    Look up a mode by name or alias (case-insensitive).

    Returns:
        The Mode, or NO_MODE if the name is unknown
    """
    if isinstance(name, Mode):
        return name
    if not isinstance(name, str):
        raise TypeError(f"Mode name must be a string, got {type(name).__name__}")
    return _INDEX.get(name.lower(), NO_MODE)


def names() -> List[str]:
    """Canonical mode names in mode-number order."""
    return [m.name for m in MODES]


def all_modes() -> List[Mode]:
    """All modes in mode-number order."""
    return list(MODES)
