"""Theory layer - Pitch class sets, modes and keys.

Builds musical structure on top of the core note and interval types:
- Pitch class sets (chroma strings, rotations, interval spelling)
- The mode table (seven modes of the major scale)
- Keys: tokenizing key names and deriving signature, scale and chords

Pipeline: key name → (tonic, mode) → Key
"""

from .pcset import chroma, intervals, is_chroma, modes, rotate, set_num
from .mode import Mode, NO_MODE, mode, names, all_modes
from .key import (
    Key,
    key,
    tokenize,
    altered_notes,
    relative_key,
    parallel_key,
)

__all__ = [
    # Pitch class sets
    "chroma",
    "intervals",
    "is_chroma",
    "modes",
    "rotate",
    "set_num",
    # Modes
    "Mode",
    "NO_MODE",
    "mode",
    "names",
    "all_modes",
    # Keys
    "Key",
    "key",
    "tokenize",
    "altered_notes",
    "relative_key",
    "parallel_key",
]
