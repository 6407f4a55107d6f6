"""Global constants for keyscope."""

# Note letters in step order (C=0 ... B=6)
LETTERS = "CDEFGAB"

# Semitones above C for each natural step
STEP_SEMITONES = (0, 2, 4, 5, 7, 9, 11)

# Position of each natural step on the circle of fifths (C=0, G=1, F=-1)
FIFTHS = (0, 2, 4, -1, 1, 3, 5)

# Interval spelling of each chromatic pitch class above the root
CHROMATIC_INTERVALS = (
    "1P", "2m", "2M", "3m", "3M", "4P", "5d", "5P", "6m", "6M", "7m", "7M"
)

# Interval number type per step: P = perfectable (1, 4, 5), M = majorable
INTERVAL_TYPES = "PMMPPMM"
