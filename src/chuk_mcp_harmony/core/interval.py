"""
Interval primitives.

An interval is a note used as a relative distance, in semitones. The
named catalog covers the simple intervals, the compound extensions used
in chord symbols (9ths, 11ths, 13ths) and the enharmonic aliases
(a diminished fifth and an augmented fourth are both 6).
"""

from __future__ import annotations

from enum import IntEnum

from .note import Note

SEMI: Note = 1
WHOLE: Note = 2


class Interval(IntEnum):
    """
    Named intervals in semitones.

    Members are ints, so they mix freely with plain notes:
    Interval.MAJOR_THIRD + Interval.MINOR_THIRD == Interval.PERFECT_FIFTH.
    """

    UNISON = 0
    MINOR_SECOND = 1
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    TRITONE = 6
    PERFECT_FIFTH = 7
    MINOR_SIXTH = 8
    MAJOR_SIXTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11
    OCTAVE = 12

    # Compound intervals (chord extensions)
    FLAT_NINTH = 13
    NINTH = 14
    SHARP_NINTH = 15
    FLAT_ELEVENTH = 16
    ELEVENTH = 17
    SHARP_ELEVENTH = 18
    TWELFTH = 19
    FLAT_THIRTEENTH = 20
    THIRTEENTH = 21
    SHARP_THIRTEENTH = 22

    # Enharmonic aliases
    DIMINISHED_SECOND = 0
    AUGMENTED_UNISON = 1
    DIMINISHED_THIRD = 2
    AUGMENTED_SECOND = 3
    DIMINISHED_FOURTH = 4
    AUGMENTED_THIRD = 5
    DIMINISHED_FIFTH = 6
    AUGMENTED_FOURTH = 6
    DIMINISHED_SIXTH = 7
    AUGMENTED_FIFTH = 8
    DIMINISHED_SEVENTH = 9
    AUGMENTED_SIXTH = 10
    DIMINISHED_OCTAVE = 11
    AUGMENTED_SEVENTH = 12


_EXTENSIONS: dict[int, str] = {
    0: "R",
    1: "♭2",
    2: "♮2",
    3: "♭3",
    4: "♮3",
    5: "♮4",
    6: "♭5",
    7: "♮5",
    8: "♭6",
    9: "♮6",
    10: "♭7",
    11: "♮7",
    12: "",
    13: "♭9",
    14: "♮9",
    15: "♯9",
    16: "♭11",
    17: "♮11",
    18: "♯11",
    19: "",
    20: "♭13",
    21: "♮13",
    22: "♯13",
}

_DEGREES: list[str] = [
    "I",
    "bII",
    "II",
    "bIII",
    "III",
    "IV",
    "bV",
    "V",
    "bVI",
    "VI",
    "bVII",
    "VII",
]

OUT_OF_RANGE = "[outofrange]"


def interval_chord_extension(interval: Note) -> str:
    """
    Degree symbol of an interval inside a chord name.

    4 -> '♮3', 13 -> '♭9'. Octaves, twelfths and anything outside the
    table render as the empty string.
    """
    return _EXTENSIONS.get(interval, "")


def to_relative_interval_non_nat(interval: Note) -> str:
    """Render an alteration as accidentals: -2 -> '♭♭', 1 -> '♯', 0 -> '♮'."""
    if interval < 0:
        return "♭" * -interval
    if interval > 0:
        return "♯" * interval
    return "♮"


def to_degree(interval: Note) -> str:
    """Roman scale degree of an interval in [0, 12); anything else is OUT_OF_RANGE."""
    if 0 <= interval < len(_DEGREES):
        return _DEGREES[interval]
    return OUT_OF_RANGE
