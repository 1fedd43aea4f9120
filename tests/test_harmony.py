"""
Tests for scale harmony.

Tests cover:
- Stacked-third chords on each scale degree
- Roman numeral and pitch-class names
- Sub-chords hidden in a scale
"""

from chuk_mcp_harmony.constants import ChordStyling, IonianMode
from chuk_mcp_harmony.core import (
    Chord,
    RootedChord,
    Scale,
    Steps,
    mode_of_scale,
    rooted_scale_chords,
    scale_chords,
    scale_subseq_chords,
    steps_subseq_chords,
    strs_scale_chords,
    strs_scale_chords_roman,
)


class TestScaleChords:
    """Stacked thirds on every degree."""

    def test_ionian_triads(self, ionian: Steps) -> None:
        """The diatonic triads of the major scale."""
        chords = scale_chords(ionian, 3)
        assert len(chords) == 7
        assert chords[0] == Chord((4, 7))
        assert chords[1] == Chord((3, 7))
        assert chords[6] == Chord((3, 6))

    def test_rooted(self, ionian: Steps) -> None:
        """Rooted chords sit on the scale notes from the tonic."""
        chords = rooted_scale_chords(ionian, 2, 3)
        assert chords[0] == RootedChord(2, Chord((4, 7)))
        assert chords[1] == RootedChord(4, Chord((3, 7)))
        assert [c.root for c in chords] == [2, 4, 6, 7, 9, 11, 13]

    def test_sizes(self, ionian: Steps) -> None:
        """chord_size counts notes including the root."""
        for size in (1, 2, 3, 4, 5, 7):
            assert all(len(c) == size - 1 for c in scale_chords(ionian, size))


class TestRomanNames:
    """Degree names on Roman numerals."""

    def test_ionian_triads(self, ionian: Steps) -> None:
        """I ii iii IV V vi vii°."""
        assert strs_scale_chords_roman(ionian, 3) == [
            "I",
            "ii",
            "iii",
            "IV",
            "V",
            "vi",
            "vii°",
        ]

    def test_ionian_sevenths(self, ionian: Steps) -> None:
        """Diatonic seventh chords."""
        assert strs_scale_chords_roman(ionian, 4) == [
            "I∆",
            "ii-",
            "iii-",
            "IV∆",
            "V⁷",
            "vi-",
            "viiø",
        ]

    def test_ionian_ninths(self, ionian: Steps) -> None:
        """Ninth chords name the ninth as an extension."""
        names = strs_scale_chords_roman(ionian, 5)
        assert names[0] == "I∆(♮9)"
        assert names[1] == "ii-(♮9)"
        assert names[4] == "V⁷(♮9)"

    def test_dorian_triads(self, ionian: Steps) -> None:
        """Dorian is the major scale started from its second degree."""
        dorian = mode_of_scale(ionian, IonianMode.DORIAN)
        assert strs_scale_chords_roman(dorian, 3) == [
            "i",
            "ii",
            "III",
            "IV",
            "v",
            "vi°",
            "VII",
        ]

    def test_harmonic_minor_triads(self, harmonic_minor: Steps) -> None:
        """The augmented mediant of harmonic minor."""
        assert strs_scale_chords_roman(harmonic_minor, 3) == [
            "i",
            "ii°",
            "III+",
            "iv",
            "V",
            "VI",
            "vii°",
        ]

    def test_spelled_out(self, ionian: Steps) -> None:
        """Styling flows through to every degree."""
        names = strs_scale_chords_roman(ionian, 3, ChordStyling.SPELLED_OUT)
        assert names[0] == "I[♮3♮5]"
        assert names[6] == "VII[♭3♭5]"


class TestPitchClassNames:
    """Degree names on pitch classes."""

    def test_c_major(self, ionian: Steps) -> None:
        """C d e F G a b°."""
        assert strs_scale_chords(ionian, 0, 3) == ["C", "d", "e", "F", "G", "a", "b°"]

    def test_octave_independent(self, ionian: Steps) -> None:
        """Any octave of the tonic gives the same names."""
        assert strs_scale_chords(ionian, -12, 3) == strs_scale_chords(ionian, 24, 3)

    def test_a_harmonic_minor_sevenths(self, harmonic_minor: Steps) -> None:
        """Harmonic minor sevenths from A."""
        names = strs_scale_chords(harmonic_minor, 9, 4)
        assert names[0] == "A-∆"
        assert names[1] == "bø"
        assert names[4] == "E⁷"
        assert names[6] == "g#°⁷"


class TestScaleSubseqChords:
    """Every chord hidden in a scale."""

    def test_triad_rotations(self) -> None:
        """A triad read as a scale yields its inversions."""
        found = scale_subseq_chords(Scale((0, 4, 7)))
        assert RootedChord(0, Chord((4, 7))) in found
        assert RootedChord(4, Chord((3, 8))) in found
        assert RootedChord(7, Chord((5, 9))) in found

    def test_roots_fold_to_pitch_classes(self, ionian: Steps) -> None:
        """Results are normalized and unique."""
        found = scale_subseq_chords(ionian.into_scale(0))
        assert len(found) == len(set(found))
        for chord in found:
            assert 0 <= chord.root < 12
            assert chord == chord.normalized()

    def test_sorted(self) -> None:
        """Sorted by size, then root, then intervals."""
        found = scale_subseq_chords(Scale((0, 2, 4, 7, 9)))
        keys = [(len(c.chord), c.root, c.chord.intervals) for c in found]
        assert keys == sorted(keys)

    def test_small_scales(self) -> None:
        """Fewer than three notes give nothing."""
        assert scale_subseq_chords(Scale((0, 7))) == []
        assert scale_subseq_chords(Scale(())) == []


class TestStepsSubseqChords:
    """Hidden chords grouped by degree."""

    def test_ionian_cells(self, ionian: Steps) -> None:
        """One non-empty cell per degree."""
        cells = steps_subseq_chords(ionian)
        assert len(cells) == 7
        assert all(cells)

    def test_ionian_degree_chords(self, ionian: Steps) -> None:
        """The diatonic chords show up on their own degrees."""
        cells = steps_subseq_chords(ionian)
        assert Chord((4, 7)) in cells[0]
        assert Chord((4, 7, 11)) in cells[0]
        assert Chord((3, 7, 10)) in cells[1]
        assert Chord((4, 7, 10)) in cells[4]
        assert Chord((3, 6, 10)) in cells[6]

    def test_small_pattern(self) -> None:
        """Too few notes leaves every cell empty."""
        assert steps_subseq_chords(Steps((5, 7))) == [[], []]
