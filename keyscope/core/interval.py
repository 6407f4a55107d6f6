"""Interval names - the distances scales are spelled with.

Intervals are written number-first ("3M", "5P", "-2m") or quality-first
("M3", "P5"). Qualities: P (perfect), M (major), m (minor), A... (augmented),
d... (diminished). music21 names intervals quality-first with the sign in
front ("-m2"); `Interval.m21_name` gives that form.
"""

import re
from dataclasses import dataclass
from typing import Tuple, Union

from music21 import exceptions21
from music21 import interval as m21interval

from .constants import INTERVAL_TYPES, STEP_SEMITONES

NUMBER_FIRST_REGEX = re.compile(r"([-+]?\d+)(d{1,4}|m|M|P|A{1,4})")
QUALITY_FIRST_REGEX = re.compile(r"(d{1,4}|m|M|P|A{1,4})([-+]?\d+)")


@dataclass(frozen=True)
class Interval:
    """Represents a spelled interval."""

    name: str = ""  # Number-first name (e.g., "3M", "-5P")
    num: int = 0  # Signed interval number
    quality: str = ""
    step: int = 0  # Generic step (unison=0 ... seventh=6)
    alt: int = 0  # Offset from the perfect/major size
    octave: int = 0  # Whole octaves spanned
    direction: int = 1  # 1 ascending, -1 descending
    type: str = ""  # "perfectable" or "majorable"
    semitones: int = 0  # Signed size
    valid: bool = False

    @property
    def simple(self) -> int:
        """Interval number reduced to one octave (octaves stay 8)."""
        if abs(self.num) == 8:
            return self.num
        return self.direction * (self.step + 1)

    @property
    def m21_name(self) -> str:
        """Name in music21 form (e.g., 'M3', '-m2')."""
        sign = "-" if self.direction < 0 else ""
        return f"{sign}{self.quality}{abs(self.num)}"


NO_INTERVAL = Interval()


def tokenize_interval(name: str) -> Tuple[str, str]:
    """
    Split an interval name into (number, quality).

    Returns:
        ("", "") when the name is not an interval
    """
    if not isinstance(name, str):
        raise TypeError(f"Interval name must be a string, got {type(name).__name__}")
    match = NUMBER_FIRST_REGEX.fullmatch(name)
    if match:
        return match.group(1), match.group(2)
    match = QUALITY_FIRST_REGEX.fullmatch(name)
    if match:
        return match.group(2), match.group(1)
    return "", ""


def interval(name: Union[str, Interval]) -> Interval:
    """
    Parse an interval name.

    The size is measured by music21 once the name is known to be
    well-formed.

    Returns:
        A valid Interval, or NO_INTERVAL for unparseable names and
        number/quality mismatches such as "3P" or "5M".
    """
    if isinstance(name, Interval):
        return name
    num_str, quality = tokenize_interval(name)
    if num_str == "" or int(num_str) == 0:
        return NO_INTERVAL

    num = int(num_str)
    step = (abs(num) - 1) % 7
    if INTERVAL_TYPES[step] == "M":
        if quality == "P":
            return NO_INTERVAL
        interval_type = "majorable"
    else:
        if quality in ("M", "m"):
            return NO_INTERVAL
        interval_type = "perfectable"

    octave = (abs(num) - 1) // 7
    direction = -1 if num < 0 else 1
    sign = "-" if direction < 0 else ""
    try:
        semitones = int(m21interval.Interval(f"{sign}{quality}{abs(num)}").semitones)
    except exceptions21.Music21Exception:
        return NO_INTERVAL

    return Interval(
        name=f"{num}{quality}",
        num=num,
        quality=quality,
        step=step,
        alt=direction * semitones - 12 * octave - STEP_SEMITONES[step],
        octave=octave,
        direction=direction,
        type=interval_type,
        semitones=semitones,
        valid=True,
    )
