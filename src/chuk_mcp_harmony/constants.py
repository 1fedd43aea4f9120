"""
Constants and enums for the harmony system.

No magic strings - use enums for constrained values.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class ChordStyling(str, Enum):
    """
    How a chord name is rendered.

    STD only uses the common chord-book entries, EXTENDED also uses the
    exotic ones (mu chord, super-sus, ...), SPELLED_OUT always lists the
    raw extensions (X[♮3♭5]).
    """

    STD = "std"
    EXTENDED = "extended"
    SPELLED_OUT = "spelled_out"

    @classmethod
    def parse(cls, name: str) -> ChordStyling:
        """Parse a styling from a string like 'std', 'Extended', 'spelled-out'."""
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(ErrorMessages.INVALID_STYLING.format(styling=name))


class IonianMode(IntEnum):
    """Mode indices of the Ionian family (rotation of the major step pattern)."""

    IONIAN = 0
    DORIAN = 1
    PHRYGIAN = 2
    LYDIAN = 3
    MIXOLYDIAN = 4
    AEOLIAN = 5
    LOCRIAN = 6


# Note 0 is middle C; A4 sits 9 semitones above it
REFERENCE_PITCH_HZ = 440.0
REFERENCE_NOTE = 9
MIDI_MIDDLE_C = 60

# Overrides the project scale directory (default: ./scales under the working directory)
SCALES_DIR_ENV = "CHUK_HARMONY_SCALES_DIR"

# Sub-chord enumeration visits every subset of the notes, so it is capped
MAX_SUBCHORD_NOTES = 16


class ErrorMessages:
    """Standardized error messages."""

    SCALE_NOT_FOUND = "Scale '{name}' not found."
    INVALID_NOTE = "Invalid note: '{note}'. Expected format like 'C4', 'F#3' or 'Bb'."
    INVALID_STYLING = "Invalid styling: '{styling}'. Expected 'std', 'extended' or 'spelled_out'."
    INVALID_CHORD_SIZE = "Invalid chord size: {size}. Must be at least 1."
    EMPTY_STEPS = "Step pattern must not be empty."
    TOO_MANY_NOTES = "Too many notes: {count}. Sub-chords are listed for at most {limit} notes."


class SuccessMessages:
    """Standardized success messages."""

    CHORD_NAMED = "Named chord '{name}'."
    SCALE_CHORDS = "Built {count} chords on '{name}'."
