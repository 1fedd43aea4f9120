"""
Chord primitives - the chord book and the naming engine.

A Chord is an ascending stack of intervals above an implicit root
(a major triad is (4, 7)). Names are derived from the chord book, an
ordered table of known interval patterns, in tiers:

1. exact match against a book entry
2. longest book entry that is a prefix of the chord, the rest of the
   intervals appended as extensions: X∆(♯11)
3. fuzzy suspension match, where the chord has a 2nd or 4th in place of
   the entry's third: X-sus4(♯9)
4. spelled out intervals: X[♮3♭5]

Every interval set gets a deterministic name, there is no "unknown".
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from chuk_mcp_harmony.constants import ChordStyling

from .interval import Interval, interval_chord_extension
from .note import Note
from .scale import Scale

# Chord-quality interval patterns (root implicit)
MAJOR = (Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH)
MINOR = (Interval.MINOR_THIRD, Interval.PERFECT_FIFTH)
MINOR_AUGMENTED = (Interval.MINOR_THIRD, Interval.AUGMENTED_FIFTH)
MAJOR_AUGMENTED = (Interval.MAJOR_THIRD, Interval.AUGMENTED_FIFTH)
MINOR_DIMINISHED = (Interval.MINOR_THIRD, Interval.DIMINISHED_FIFTH)
MAJOR_DIMINISHED = (Interval.MAJOR_THIRD, Interval.DIMINISHED_FIFTH)
SUS2 = (Interval.MAJOR_SECOND, Interval.PERFECT_FIFTH)
SUS4 = (Interval.PERFECT_FOURTH, Interval.PERFECT_FIFTH)
SUPER_SUS = (Interval.MAJOR_SECOND, Interval.PERFECT_FOURTH)
PHRYGIAN = (Interval.MINOR_SECOND, Interval.PERFECT_FIFTH)
LYDIAN = (Interval.AUGMENTED_FOURTH, Interval.PERFECT_FIFTH)
LOCRIAN2 = (Interval.MINOR_SECOND, Interval.DIMINISHED_FIFTH)
LOCRIAN4 = (Interval.PERFECT_FOURTH, Interval.DIMINISHED_FIFTH)
SUPER_LOCRIAN = (Interval.MINOR_SECOND, Interval.PERFECT_FOURTH, Interval.DIMINISHED_FIFTH)
MAJOR_SIXTH_CHORD = (Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH, Interval.MAJOR_SIXTH)
MINOR_SIXTH_CHORD = (Interval.MINOR_THIRD, Interval.PERFECT_FIFTH, Interval.MAJOR_SIXTH)
MAJOR_SEVENTH_CHORD = (Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH, Interval.MAJOR_SEVENTH)
MINOR_SEVENTH_CHORD = (Interval.MINOR_THIRD, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH)
DOMINANT_SEVENTH = (Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH)
MINOR_MAJOR_SEVENTH = (Interval.MINOR_THIRD, Interval.PERFECT_FIFTH, Interval.MAJOR_SEVENTH)
HALF_DIMINISHED_SEVENTH = (
    Interval.MINOR_THIRD,
    Interval.DIMINISHED_FIFTH,
    Interval.MINOR_SEVENTH,
)
DIMINISHED_SEVENTH_CHORD = (
    Interval.MINOR_THIRD,
    Interval.DIMINISHED_FIFTH,
    Interval.DIMINISHED_SEVENTH,
)
AUGMENTED_SEVENTH_CHORD = (
    Interval.MAJOR_THIRD,
    Interval.AUGMENTED_FIFTH,
    Interval.MINOR_SEVENTH,
)
MU_CHORD = (Interval.MAJOR_SECOND, Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH)
SIX_NINE_CHORD = (
    Interval.MAJOR_THIRD,
    Interval.PERFECT_FIFTH,
    Interval.MAJOR_SIXTH,
    Interval.NINTH,
)


class ChordBookEntry(NamedTuple):
    """One row of the chord book."""

    pattern: tuple[Note, ...]
    suffix: str
    major_base: bool  # upper-case root even for a minor third
    extended: bool  # hidden under ChordStyling.STD


# Order matters: first exact match wins, ties on prefix length go to the earlier row
STD_CHORD_BOOK: tuple[ChordBookEntry, ...] = (
    ChordBookEntry(MAJOR, "", True, False),
    ChordBookEntry(MINOR, "", False, False),
    ChordBookEntry(MINOR_AUGMENTED, "+", False, True),
    ChordBookEntry(MAJOR_AUGMENTED, "+", True, False),
    ChordBookEntry(MINOR_DIMINISHED, "°", False, False),
    ChordBookEntry(MAJOR_DIMINISHED, "°", True, True),
    ChordBookEntry(SUPER_SUS, "ssus", True, True),
    ChordBookEntry(PHRYGIAN, "phry", True, False),
    ChordBookEntry(LYDIAN, "lyd", True, False),
    ChordBookEntry(LOCRIAN2, "loc2", True, False),
    ChordBookEntry(LOCRIAN4, "loc4", True, False),
    ChordBookEntry(SUPER_LOCRIAN, "o", True, True),
    ChordBookEntry(MAJOR_SIXTH_CHORD, "⁶", True, False),
    ChordBookEntry(MINOR_SIXTH_CHORD, "⁶", False, False),
    ChordBookEntry(MAJOR_SEVENTH_CHORD, "∆", True, False),
    ChordBookEntry(MINOR_SEVENTH_CHORD, "-", False, False),
    ChordBookEntry(DOMINANT_SEVENTH, "⁷", True, False),
    ChordBookEntry(MINOR_MAJOR_SEVENTH, "-∆", True, False),
    ChordBookEntry(HALF_DIMINISHED_SEVENTH, "ø", False, False),
    ChordBookEntry(DIMINISHED_SEVENTH_CHORD, "°⁷", False, False),
    ChordBookEntry(AUGMENTED_SEVENTH_CHORD, "+⁷", True, False),
    ChordBookEntry(MU_CHORD, "μ", True, True),
    ChordBookEntry(SIX_NINE_CHORD, "6/9", True, False),
)

_THIRDS = (Interval.MINOR_THIRD, Interval.MAJOR_THIRD)
_EXACT = 10


def _suspension_score(pattern: Sequence[Note], base: Sequence[Note]) -> int:
    """
    Compare a book pattern with the start of a chord, position by position.

    10 for an equal interval, 2 where the chord has a major second in
    place of the pattern's third, 4 for a perfect fourth in place of the
    third, 0 otherwise. The result is the lowest score.
    """
    score = _EXACT
    for expected, actual in zip(pattern, base):
        if actual == expected:
            position = _EXACT
        elif actual == Interval.MAJOR_SECOND and expected in _THIRDS:
            position = 2
        elif actual == Interval.PERFECT_FOURTH and expected in _THIRDS:
            position = 4
        else:
            return 0
        score = min(score, position)
    return score


@dataclass(frozen=True, order=True)
class Chord:
    """
    A chord as intervals above an implicit root.

    Equality and ordering compare the interval sequences.
    Immutable and hashable.
    """

    intervals: tuple[Note, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(int(i) for i in self.intervals))

    @classmethod
    def new(cls, intervals: Iterable[Note]) -> Chord:
        """Build a chord from any iterable of intervals."""
        return cls(tuple(intervals))

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.intervals)

    def same_intervals(self, blueprint: Sequence[Note]) -> bool:
        """True if the chord is exactly this interval pattern."""
        return self.intervals == tuple(blueprint)

    def has_intervals(self, blueprint: Iterable[Note]) -> bool:
        """True if every interval of the pattern is in the chord."""
        return all(interval in self.intervals for interval in blueprint)

    def normalized(self) -> Chord:
        """
        Fold the chord into two octaves.

        A bare twelfth implies the fifth. Intervals are reduced modulo two
        octaves, and octave, twelfth and unison markers are dropped, so
        the result lies in [1, 24).
        """
        intervals = list(self.intervals)
        if Interval.TWELFTH in intervals and Interval.PERFECT_FIFTH not in intervals:
            intervals.append(Interval.PERFECT_FIFTH)
        folded = (i % (2 * Interval.OCTAVE) for i in intervals)
        dropped = (Interval.UNISON, Interval.OCTAVE, Interval.TWELFTH)
        return Chord(tuple(sorted(i for i in folded if i not in dropped)))

    def to_scale(self, root: Note) -> Scale:
        """The chord's notes from a root: root, root + each interval."""
        return Scale((root, *(root + interval for interval in self.intervals)))

    def to_subseq_chords(self) -> list[Chord]:
        """
        Every chord made of two or more of this chord's notes.

        Subsets are enumerated by bitmask over the notes (root included),
        deduplicated, and sorted by size then intervals.
        """
        notes = self.to_scale(0).notes
        found: set[Chord] = set()
        for mask in range(1 << len(notes)):
            subset = tuple(note for j, note in enumerate(notes) if mask >> j & 1)
            if len(subset) < 2:
                continue
            found.add(Scale(subset).to_chord())
        return sorted(found, key=lambda chord: (len(chord), chord.intervals))

    def _spelled_out(self, base: str) -> str:
        return f"{base}[{''.join(interval_chord_extension(i) for i in self.intervals)}]"

    def _with_extensions(self, name: str, base_len: int) -> str:
        """Append the intervals past a matched prefix as (ext...), omitted when empty."""
        extensions = "".join(interval_chord_extension(i) for i in self.intervals[base_len:])
        return f"{name}({extensions})" if extensions else name

    def quality(
        self,
        base: str,
        lower: bool = True,
        styling: ChordStyling = ChordStyling.STD,
    ) -> str:
        """
        Name this chord on a base (a root name, a Roman numeral, ...).

        Args:
            base: Text standing for the root, e.g. 'C', 'IV', 'X'
            lower: Lower-case the base for minor chords instead of appending 'm'
            styling: Which book entries may be used, or SPELLED_OUT

        Returns:
            The chord name, never empty
        """
        if styling == ChordStyling.SPELLED_OUT:
            return self._spelled_out(base)

        minor_base = base.lower() if lower else f"{base}m"
        hide_extended = styling == ChordStyling.STD

        def cased(major_base: bool) -> str:
            return base if major_base else minor_base

        # Exact matches
        for entry in STD_CHORD_BOOK:
            if entry.pattern != self.intervals:
                continue
            if entry.extended and hide_extended:
                continue
            return cased(entry.major_base) + entry.suffix

        # Longest book entry that starts the chord
        name = ""
        base_len = 0
        for entry in STD_CHORD_BOOK:
            if entry.extended and hide_extended:
                continue
            size = len(entry.pattern)
            if len(self.intervals) <= size or base_len >= size:
                continue
            if self.intervals[:size] != entry.pattern:
                continue
            base_len = size
            name = cased(entry.major_base) + entry.suffix
        if base_len:
            return self._with_extensions(name, base_len)

        # Suspended variants of a book entry
        for entry in STD_CHORD_BOOK:
            if entry.extended and hide_extended:
                continue
            size = len(entry.pattern)
            if len(self.intervals) < size or base_len >= size:
                continue
            score = _suspension_score(entry.pattern, self.intervals[:size])
            if score in (0, _EXACT):
                continue
            base_len = size
            name = f"{base}{entry.suffix}sus{score}"
        if base_len:
            return self._with_extensions(name, base_len)

        return self._spelled_out(base)

    def as_string(self, styling: ChordStyling = ChordStyling.STD) -> str:
        """Name on the placeholder root 'X' (minor chords as 'x')."""
        return self.quality("X", True, styling)

    def __str__(self) -> str:
        return self.as_string()


def format_chords(
    chords: Iterable[Chord],
    sep: str = ", ",
    styling: ChordStyling = ChordStyling.STD,
) -> str:
    """Join the names of several chords."""
    return sep.join(chord.as_string(styling) for chord in chords)
