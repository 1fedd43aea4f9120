"""
Rooted and relative chords.

A RootedChord pins a Chord to an absolute root note - it is something
that can actually sound. A RelativeChord pins it to an offset from a
tonic instead, for degree-style names (bVII⁷, IV∆).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from chuk_mcp_harmony.constants import ChordStyling

from .chord import Chord
from .interval import Interval, to_degree
from .note import Note, PitchClass, pitch_class
from .scale import Scale


def _rooted_order(chord: RootedChord) -> tuple[int, Note, tuple[Note, ...]]:
    return (len(chord.chord), chord.root, chord.chord.intervals)


@dataclass(frozen=True)
class RootedChord:
    """
    A chord on an absolute root.

    to_scale() is always root followed by root + each interval.
    Immutable and hashable.
    """

    root: Note = 0
    chord: Chord = field(default_factory=lambda: Chord(()))

    @classmethod
    def from_chord(cls, root: Note, chord: Chord) -> RootedChord:
        return cls(root, chord)

    @classmethod
    def from_intervals(cls, root: Note, intervals: Iterable[Note]) -> RootedChord:
        return cls(root, Chord(tuple(intervals)))

    @classmethod
    def from_scale(cls, scale: Scale) -> RootedChord:
        """
        Read a scale as a chord on its first note.

        An empty scale gives the empty chord on 0, a single note gives
        an interval-less chord on that note.
        """
        if not scale.notes:
            return cls()
        return cls(scale.notes[0], scale.to_chord())

    def to_scale(self, root: Note | None = None) -> Scale:
        """The chord's notes, on its own root unless another one is given."""
        return self.chord.to_scale(self.root if root is None else root)

    def normalized(self) -> RootedChord:
        """Root reduced to its pitch class, chord folded into two octaves."""
        return RootedChord(pitch_class(self.root), self.chord.normalized())

    def to_subseq_chords(self) -> list[RootedChord]:
        """
        Every rooted chord made of two or more of this chord's notes.

        Each subset keeps its own lowest note as root. Sorted by size,
        then root, then intervals.
        """
        notes = self.to_scale().notes
        found: dict[RootedChord, None] = {}
        for mask in range(1 << len(notes)):
            subset = tuple(note for j, note in enumerate(notes) if mask >> j & 1)
            if len(subset) < 2:
                continue
            found[RootedChord.from_scale(Scale(subset))] = None
        return sorted(found, key=_rooted_order)

    def to_chordtone_wholetone_scale(self) -> Scale:
        """
        Interleave the first four chord tones with passing tones.

        Each of the four tones is followed by the chord tone four places
        above it dropped an octave, or by a whole step when the chord
        has no such tone. Chords under four notes give an empty scale.
        """
        notes = self.to_scale().notes
        if len(notes) < 4:
            return Scale(())
        result: list[Note] = []
        for i, note in enumerate(notes[:4]):
            result.append(note)
            if len(notes) > i + 4:
                result.append(notes[i + 4] - Interval.OCTAVE)
            else:
                result.append(note + Interval.MAJOR_SECOND)
        return Scale(tuple(result))

    def to_inversion(self) -> RootedChord:
        """
        The next inversion.

        The lowest note is raised by octaves until it reaches the top
        note, then moves from the bottom of the chord to the top.
        """
        notes = list(self.to_scale().notes)
        if len(notes) == 1:
            return RootedChord(notes[0], Chord(()))
        bottom = notes[0]
        top = notes[-1]
        while bottom < top:
            bottom += Interval.OCTAVE
        return RootedChord.from_scale(Scale((*notes[1:], bottom)))

    def all_inversions(self) -> list[RootedChord]:
        """
        Apply to_inversion once per chord note.

        The last entry is the original voicing moved up by whole octaves.
        """
        inversions: list[RootedChord] = []
        current = self
        for _ in range(len(self.chord) + 1):
            current = current.to_inversion()
            inversions.append(current)
        return inversions

    def as_string(self, lower: bool = True, styling: ChordStyling = ChordStyling.STD) -> str:
        """Name the chord on its root's pitch class: 'C∆', 'a-', 'F#sus2'."""
        return self.chord.quality(PitchClass.from_note(self.root).spell(), lower, styling)

    def __str__(self) -> str:
        return self.as_string()


@dataclass(frozen=True)
class RelativeChord:
    """
    A chord on a signed semitone offset from a tonic.

    The root may be negative. Immutable and hashable.
    """

    root: Note
    chord: Chord

    @classmethod
    def from_chord(cls, root: Note, chord: Chord) -> RelativeChord:
        return cls(root, chord)

    @classmethod
    def from_intervals(cls, root: Note, intervals: Iterable[Note]) -> RelativeChord:
        return cls(root, Chord(tuple(intervals)))

    @classmethod
    def from_template(cls, semis: Note, intervals: Iterable[Note]) -> RelativeChord:
        return cls(semis, Chord(tuple(intervals)))

    def to_rooted(self, tonic: Note) -> RootedChord:
        """Resolve against a tonic."""
        return RootedChord(tonic + self.root, self.chord)

    def as_string(self, lower: bool = True, styling: ChordStyling = ChordStyling.STD) -> str:
        """Name the chord on its scale degree: 'bVII⁷', 'ii-'."""
        return self.chord.quality(to_degree(self.root), lower, styling)

    def __str__(self) -> str:
        sign = "+" if self.root >= 0 else ""
        return self.chord.quality(f"<X{sign}{self.root}>", True, ChordStyling.EXTENDED)
