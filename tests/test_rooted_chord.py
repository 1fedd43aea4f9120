"""
Tests for rooted and relative chords.
"""

import pytest

from chuk_mcp_harmony.constants import ChordStyling
from chuk_mcp_harmony.core import STD_CHORD_BOOK, Chord, RelativeChord, RootedChord, Scale


class TestRootedChordConstruction:
    """Building rooted chords."""

    def test_default_is_empty(self) -> None:
        """The default rooted chord is the empty chord on 0."""
        assert RootedChord() == RootedChord(0, Chord(()))

    def test_constructors_agree(self) -> None:
        """All constructors produce the same value."""
        expected = RootedChord(2, Chord((3, 7)))
        assert RootedChord.from_chord(2, Chord((3, 7))) == expected
        assert RootedChord.from_intervals(2, [3, 7]) == expected
        assert RootedChord.from_scale(Scale((2, 5, 9))) == expected

    def test_from_degenerate_scales(self) -> None:
        """Empty and single-note scales."""
        assert RootedChord.from_scale(Scale(())) == RootedChord()
        assert RootedChord.from_scale(Scale((5,))) == RootedChord(5, Chord(()))

    def test_to_scale(self) -> None:
        """Notes from the chord's own root or another one."""
        chord = RootedChord(0, Chord((4, 7)))
        assert chord.to_scale() == Scale((0, 4, 7))
        assert chord.to_scale(3) == Scale((3, 7, 10))

    def test_scale_round_trip(self) -> None:
        """from_scale(to_scale()) is the identity."""
        for root in (-7, 0, 5):
            for entry in STD_CHORD_BOOK:
                chord = RootedChord(root, Chord(entry.pattern))
                assert RootedChord.from_scale(chord.to_scale()) == chord

    def test_normalized(self) -> None:
        """Root folds to a pitch class, chord to two octaves."""
        assert RootedChord(14, Chord((4, 7, 12))).normalized() == RootedChord(2, Chord((4, 7)))
        assert RootedChord(-3, Chord((3, 19))).normalized() == RootedChord(9, Chord((3, 7)))


class TestRootedChordNames:
    """Naming on pitch classes."""

    @pytest.mark.parametrize(
        ("root", "intervals", "expected"),
        [
            (0, (4, 7, 11), "C∆"),
            (9, (3, 7, 10), "a-"),
            (-3, (3, 7), "a"),
            (6, (2, 7), "F#sus2"),
            (11, (3, 6), "b°"),
            (14, (4, 7, 10, 13), "D⁷(♭9)"),
        ],
    )
    def test_as_string(self, root: int, intervals: tuple[int, ...], expected: str) -> None:
        """Roots spell as pitch classes in any octave."""
        assert RootedChord(root, Chord(intervals)).as_string() == expected

    def test_m_suffix(self) -> None:
        """lower=False appends 'm' to minor chords."""
        assert RootedChord(2, Chord((3, 7))).as_string(lower=False) == "Dm"

    def test_styling(self) -> None:
        """Styling flows through to the chord."""
        chord = RootedChord(0, Chord((4, 6)))
        assert chord.as_string(styling=ChordStyling.STD) == "C[♮3♭5]"
        assert chord.as_string(styling=ChordStyling.EXTENDED) == "C°"
        assert str(RootedChord(7, Chord((4, 7, 10)))) == "G⁷"


class TestRootedSubseqChords:
    """Sub-chords keep their own roots."""

    def test_triad(self) -> None:
        """A C major triad holds C-E, C-G, E-G and itself."""
        assert RootedChord(0, Chord((4, 7))).to_subseq_chords() == [
            RootedChord(0, Chord((4,))),
            RootedChord(0, Chord((7,))),
            RootedChord(4, Chord((3,))),
            RootedChord(0, Chord((4, 7))),
        ]

    def test_roots_come_from_chord(self) -> None:
        """Every sub-chord root is a chord note."""
        chord = RootedChord(2, Chord((3, 7, 10)))
        notes = set(chord.to_scale().notes)
        for sub in chord.to_subseq_chords():
            assert sub.root in notes
            assert set(sub.to_scale().notes) <= notes


class TestWholetoneScale:
    """Chord tones interleaved with passing tones."""

    def test_seventh_chord(self) -> None:
        """Four-note chords get a whole step after each tone."""
        chord = RootedChord(0, Chord((4, 7, 11)))
        assert chord.to_chordtone_wholetone_scale() == Scale((0, 2, 4, 6, 7, 9, 11, 13))

    def test_upper_tones_fill_in(self) -> None:
        """Tones above the fourth drop an octave into the gaps."""
        chord = RootedChord(0, Chord((4, 7, 11, 13)))
        assert chord.to_chordtone_wholetone_scale() == Scale((0, 1, 4, 6, 7, 9, 11, 13))

    def test_triad_is_empty(self) -> None:
        """Fewer than four notes give nothing."""
        assert RootedChord(0, Chord((4, 7))).to_chordtone_wholetone_scale() == Scale(())


class TestInversions:
    """Tests for chord inversions."""

    def test_triad_inversions(self) -> None:
        """First and second inversion, then root position an octave up."""
        assert RootedChord(0, Chord((4, 7))).all_inversions() == [
            RootedChord(4, Chord((3, 8))),
            RootedChord(7, Chord((5, 9))),
            RootedChord(12, Chord((4, 7))),
        ]

    def test_seventh_inversions(self) -> None:
        """Dominant seventh through all four voicings."""
        assert RootedChord(0, Chord((4, 7, 10))).all_inversions() == [
            RootedChord(4, Chord((3, 6, 8))),
            RootedChord(7, Chord((3, 5, 9))),
            RootedChord(10, Chord((2, 6, 9))),
            RootedChord(12, Chord((4, 7, 10))),
        ]

    def test_single_note(self) -> None:
        """A lone note inverts to itself."""
        assert RootedChord(5).to_inversion() == RootedChord(5, Chord(()))
        assert RootedChord(5).all_inversions() == [RootedChord(5, Chord(()))]

    def test_wide_voicing(self) -> None:
        """The bottom note climbs as many octaves as needed."""
        assert RootedChord(0, Chord((16, 31))).to_inversion() == RootedChord(
            16, Chord((15, 20))
        )

    def test_full_cycle(self) -> None:
        """Cycling every book chord returns the same chord, whole octaves up."""
        for entry in STD_CHORD_BOOK:
            chord = RootedChord(3, Chord(entry.pattern))
            last = chord.all_inversions()[-1]
            assert last.chord == chord.chord
            assert (last.root - chord.root) % 12 == 0
            assert last.root > chord.root


class TestRelativeChord:
    """Chords on a degree offset from a tonic."""

    def test_degree_names(self) -> None:
        """Chromatic degrees render with flats."""
        assert RelativeChord(10, Chord((4, 7, 10))).as_string() == "bVII⁷"
        assert RelativeChord(2, Chord((3, 7))).as_string() == "ii"
        assert RelativeChord(5, Chord((4, 7, 11))).as_string() == "IV∆"
        assert RelativeChord(2, Chord((3, 7))).as_string(lower=False) == "IIm"

    def test_out_of_range(self) -> None:
        """Offsets outside the octave get a sentinel degree."""
        assert RelativeChord(12, Chord((4, 7))).as_string() == "[outofrange]"
        assert RelativeChord(-1, Chord((4, 7))).as_string() == "[outofrange]"

    def test_str(self) -> None:
        """str() shows the signed offset with extended styling."""
        assert str(RelativeChord(3, Chord((4, 7)))) == "<X+3>"
        assert str(RelativeChord(-2, Chord((3, 7)))) == "<x-2>"
        assert str(RelativeChord(0, Chord((4, 6)))) == "<X+0>°"

    def test_constructors_and_resolution(self) -> None:
        """Templates resolve against a tonic."""
        relative = RelativeChord.from_template(7, [4, 7, 10])
        assert relative == RelativeChord.from_intervals(7, (4, 7, 10))
        assert relative == RelativeChord.from_chord(7, Chord((4, 7, 10)))
        assert relative.to_rooted(2) == RootedChord(9, Chord((4, 7, 10)))
        assert relative.to_rooted(2).as_string() == "A⁷"
