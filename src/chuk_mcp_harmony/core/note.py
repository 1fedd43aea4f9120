"""
Note primitives - Note, PitchClass and named-note conversion.

A Note is a plain signed integer: semitones above middle C (C4 = 0).
Arithmetic on notes is ordinary integer arithmetic. PitchClass is the
octave-independent view of a note (0-11).
"""

from __future__ import annotations

import re
from enum import IntEnum

from chuk_mcp_harmony.constants import MIDI_MIDDLE_C, REFERENCE_NOTE, REFERENCE_PITCH_HZ

Note = int

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

_NATURALS: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_ACCIDENTALS: dict[str, int] = {"#": 1, "♯": 1, "b": -1, "♭": -1}
_NOTE_RE = re.compile(r"^([A-Ga-g])([#b♯♭]*)(-?\d+)?$")


def pitch_class(note: Note) -> int:
    """Reduce a note to its pitch class in [0, 12)."""
    return note % 12


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def to_note(self, octave: int = 4) -> Note:
        """Place this pitch class in an octave. C4 = 0."""
        return self.value + (octave - 4) * 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_note(cls, note: Note) -> PitchClass:
        """Extract the pitch class of a note."""
        return cls(pitch_class(note))

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


def parse_note(name: str) -> Note:
    """
    Parse a named note like 'C4', 'F#3', 'Bb' or 'E♭-1'.

    The octave defaults to 4. Any number of accidentals is accepted,
    so 'B#4' is C5 and 'Cbb4' is Bb3.

    Raises:
        ValueError: If the name is not a letter, accidentals and octave
    """
    match = _NOTE_RE.match(name.strip())
    if match is None:
        raise ValueError(f"Unknown note: {name}")
    letter, accidentals, octave = match.groups()
    semitones = _NATURALS[letter.upper()] + sum(_ACCIDENTALS[a] for a in accidentals)
    return semitones + (int(octave) - 4 if octave else 0) * 12


def note_name(note: Note, prefer_flats: bool = False) -> str:
    """Render a note as letter, accidental and octave (0 -> 'C4')."""
    octave = 4 + (note - pitch_class(note)) // 12
    return f"{PitchClass.from_note(note).spell(prefer_flats)}{octave}"


def to_pitch(note: Note) -> float:
    """Equal-tempered frequency of a note in Hz (A4 = 440)."""
    return REFERENCE_PITCH_HZ * 2 ** ((note - REFERENCE_NOTE) / 12)


def to_midi(note: Note) -> int:
    """Convert to MIDI note number. C4 = 60."""
    return note + MIDI_MIDDLE_C


def from_midi(midi_note: int) -> Note:
    """Convert a MIDI note number to a note."""
    return midi_note - MIDI_MIDDLE_C
