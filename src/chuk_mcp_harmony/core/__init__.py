"""
Core harmony primitives - the algebra everything else composes on.

- Note: signed semitones from middle C, PitchClass its octave-free view
- Interval: named semitone distances, chord-extension and degree labels
- Steps / Scale: step patterns and absolute note runs, mode rotation
- Chord: intervals over an implicit root, the chord book and naming engine
- RootedChord / RelativeChord: chords on an absolute root or a degree
- Scale harmony: stacked-third chords and sub-chord tables of a scale
"""

from chuk_mcp_harmony.core.chord import STD_CHORD_BOOK, Chord, ChordBookEntry, format_chords
from chuk_mcp_harmony.core.harmony import (
    rooted_scale_chords,
    scale_chords,
    scale_subseq_chords,
    steps_subseq_chords,
    strs_scale_chords,
    strs_scale_chords_roman,
)
from chuk_mcp_harmony.core.interval import (
    SEMI,
    WHOLE,
    Interval,
    interval_chord_extension,
    to_degree,
    to_relative_interval_non_nat,
)
from chuk_mcp_harmony.core.note import (
    Note,
    PitchClass,
    from_midi,
    note_name,
    parse_note,
    pitch_class,
    to_midi,
    to_pitch,
)
from chuk_mcp_harmony.core.roman import to_roman_num
from chuk_mcp_harmony.core.rooted import RelativeChord, RootedChord
from chuk_mcp_harmony.core.scale import (
    Scale,
    Steps,
    ToScale,
    mode_of_scale,
    note_iter,
    notes_of_mode,
)

__all__ = [
    # Note
    "Note",
    "PitchClass",
    "pitch_class",
    "parse_note",
    "note_name",
    "to_pitch",
    "to_midi",
    "from_midi",
    # Interval
    "Interval",
    "SEMI",
    "WHOLE",
    "interval_chord_extension",
    "to_degree",
    "to_relative_interval_non_nat",
    "to_roman_num",
    # Scale
    "Steps",
    "Scale",
    "ToScale",
    "note_iter",
    "mode_of_scale",
    "notes_of_mode",
    # Chord
    "Chord",
    "ChordBookEntry",
    "STD_CHORD_BOOK",
    "format_chords",
    "RootedChord",
    "RelativeChord",
    # Scale harmony
    "scale_chords",
    "rooted_scale_chords",
    "strs_scale_chords",
    "strs_scale_chords_roman",
    "scale_subseq_chords",
    "steps_subseq_chords",
]
