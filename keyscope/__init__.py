"""keyscope - Musical key descriptions from key names.

Architecture Layers:
    1. core/   - Note and interval names, transposition (music21)
    2. theory/ - Pitch class sets, modes, keys
    3. cli     - Command-line interface
"""

__version__ = "0.1.0"

# Core layer
from .core import Note, Interval, note, interval, transpose, transpose_fifths

# Theory layer
from .theory import (
    Key,
    Mode,
    key,
    tokenize,
    altered_notes,
    relative_key,
    parallel_key,
    mode,
)

__all__ = [
    # Core
    "Note",
    "Interval",
    "note",
    "interval",
    "transpose",
    "transpose_fifths",
    # Theory
    "Key",
    "Mode",
    "key",
    "tokenize",
    "altered_notes",
    "relative_key",
    "parallel_key",
    "mode",
]
