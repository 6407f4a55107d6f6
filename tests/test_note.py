"""Tests for note names and their music21 pitches."""

import pytest
from music21 import pitch as m21pitch

from keyscope.core import (
    NO_NOTE,
    Note,
    acc_to_alt,
    alt_to_acc,
    note,
    note_from_pitch,
    to_m21_pitch,
    tokenize_note,
)


class TestTokenizeNote:
    """Tests for splitting strings into note tokens."""

    def test_note_with_suffix(self):
        assert tokenize_note("c#4 maj7") == ("C", "#", "4", "maj7")

    def test_key_name(self):
        """The space between tonic and mode is dropped."""
        assert tokenize_note("eb major") == ("E", "b", "", "major")

    def test_double_sharp_expanded(self):
        assert tokenize_note("fx") == ("F", "##", "", "")

    def test_flat_letter_b(self):
        assert tokenize_note("bb") == ("B", "b", "", "")
        assert tokenize_note("b major") == ("B", "", "", "major")

    def test_no_letter(self):
        assert tokenize_note("major") == ("", "", "", "major")

    def test_empty(self):
        assert tokenize_note("") == ("", "", "", "")

    def test_newline_does_not_match(self):
        assert tokenize_note("c\nmajor") == ("", "", "", "")

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            tokenize_note(60)


class TestAccidentals:
    """Tests for accidental conversions."""

    def test_acc_to_alt(self):
        assert acc_to_alt("") == 0
        assert acc_to_alt("#") == 1
        assert acc_to_alt("bb") == -2
        assert acc_to_alt("x") == 2

    def test_alt_to_acc(self):
        assert alt_to_acc(0) == ""
        assert alt_to_acc(3) == "###"
        assert alt_to_acc(-2) == "bb"


class TestNote:
    """Tests for the Note dataclass and parser."""

    def test_pitch_class(self):
        n = note("Eb")
        assert n.valid
        assert n.name == "Eb"
        assert n.letter == "E"
        assert n.acc == "b"
        assert n.octave is None
        assert n.fifths == -3

    def test_note_with_octave(self):
        n = note("Eb4")
        assert n.octave == 4
        assert n.pc == "Eb"
        assert n.fifths == -3

    def test_lowercase_and_double_sharp(self):
        assert note("cx").name == "C##"
        assert note("f#").name == "F#"

    def test_fifths_positions(self):
        assert note("C").fifths == 0
        assert note("G").fifths == 1
        assert note("F").fifths == -1
        assert note("F#").fifths == 6
        assert note("Bb").fifths == -2
        assert note("Fbb").fifths == -15

    def test_chroma(self):
        assert note("C").chroma == 0
        assert note("B#").chroma == 0
        assert note("Cb").chroma == 11
        assert note("Eb").chroma == 3
        assert NO_NOTE.chroma is None

    def test_invalid_names(self):
        assert note("H") is NO_NOTE
        assert note("") is NO_NOTE
        assert note("C major") is NO_NOTE
        assert note("c-") is NO_NOTE
        assert not NO_NOTE.valid

    def test_too_many_accidentals(self):
        """music21 spells up to four sharps or flats."""
        assert note("C####").name == "C####"
        assert note("C#####") is NO_NOTE
        assert note("Dbbbbb") is NO_NOTE

    def test_note_passthrough(self):
        n = note("D")
        assert note(n) is n

    def test_no_audio_helpers(self):
        """Notes are spellings only; there is no MIDI or frequency API."""
        assert not hasattr(Note, "freq_to_midi")
        assert not hasattr(Note, "midi_to_freq")
        assert not hasattr(note("A4"), "midi")
        assert not hasattr(note("A4"), "freq")


class TestMusic21Pitches:
    """Tests for the conversion to and from music21 pitches."""

    def test_flats_become_dashes(self):
        assert note("Eb").pitch.name == "E-"
        assert note("Bbb").pitch.name == "B--"
        assert note("F##").pitch.name == "F##"

    def test_pitch_class_has_no_octave(self):
        assert note("Eb").pitch.octave is None
        assert note("Eb4").pitch.nameWithOctave == "E-4"

    def test_negative_octave(self):
        """'C-1' is C in octave -1, not C flat in octave 1."""
        p = note("C-1").pitch
        assert p.step == "C"
        assert p.alter == 0
        assert p.octave == -1
        assert to_m21_pitch("Cb", 1).nameWithOctave == "C-1"

    def test_invalid_note_has_no_pitch(self):
        assert NO_NOTE.pitch is None

    def test_note_from_pitch(self):
        n = note_from_pitch(m21pitch.Pitch("E-4"))
        assert n.name == "Eb4"
        assert n.fifths == -3
        assert note_from_pitch(m21pitch.Pitch("E-4"), keep_octave=False).name == "Eb"
        assert note_from_pitch(m21pitch.Pitch("F##")).name == "F##"
