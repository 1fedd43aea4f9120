"""
Scale harmony - the chords that live inside a scale.

Stacking every other scale note from each degree gives the diatonic
triads, sevenths and extended chords of a scale. Enumerating every
subset of every rotation gives all the smaller chords a scale implies.
"""

from __future__ import annotations

from itertools import islice

from chuk_mcp_harmony.constants import ChordStyling

from .chord import Chord
from .note import Note, pitch_class
from .roman import to_roman_num
from .rooted import RootedChord
from .scale import Scale, Steps, note_iter


def _stacked_thirds(root: Note, steps: Steps, degree: int, size: int) -> Scale:
    """Take `size` notes from `degree` upward, skipping every other scale note."""
    notes = islice(note_iter(root, steps.steps), degree, degree + 2 * size, 2)
    return Scale(tuple(notes))


def scale_chords(steps: Steps, chord_size: int) -> list[Chord]:
    """
    The stacked-third chord on every degree of a step pattern.

    chord_size 3 gives triads, 4 sevenths, 5 ninths and so on.
    """
    return [
        _stacked_thirds(0, steps, degree, chord_size).to_chord()
        for degree in range(len(steps))
    ]


def rooted_scale_chords(steps: Steps, tonic: Note, chord_size: int) -> list[RootedChord]:
    """Like scale_chords, with every chord on its absolute root."""
    return [
        RootedChord.from_scale(_stacked_thirds(tonic, steps, degree, chord_size))
        for degree in range(len(steps))
    ]


def strs_scale_chords_roman(
    steps: Steps,
    size: int,
    styling: ChordStyling = ChordStyling.STD,
) -> list[str]:
    """Names of the scale chords on Roman numeral degrees: I, ii, iii, IV, ..."""
    return [
        chord.quality(to_roman_num(degree + 1), True, styling)
        for degree, chord in enumerate(scale_chords(steps, size))
    ]


def strs_scale_chords(
    steps: Steps,
    tonic: Note,
    size: int,
    styling: ChordStyling = ChordStyling.STD,
) -> list[str]:
    """Names of the scale chords on their pitch classes: C, d, e, F, ..."""
    return [chord.as_string(True, styling) for chord in rooted_scale_chords(steps, tonic, size)]


def scale_subseq_chords(scale: Scale) -> list[RootedChord]:
    """
    Every chord hidden in a scale.

    Each rotation of the scale (same length, walking the scale's own
    steps) contributes all its sub-chords, folded to pitch-class roots.
    Scales of fewer than three notes give nothing.
    """
    if len(scale) < 3:
        return []
    steps = scale.to_steps()
    root = scale.notes[0]
    size = len(scale)
    found: set[RootedChord] = set()
    for degree in range(size):
        rotation = Scale(tuple(islice(note_iter(root, steps.steps), degree, degree + size)))
        subchords = RootedChord.from_scale(rotation).to_subseq_chords()
        found.update(sub.normalized() for sub in subchords)
    return sorted(found, key=lambda c: (len(c.chord), c.root, c.chord.intervals))


def steps_subseq_chords(steps: Steps) -> list[list[Chord]]:
    """
    The chords hidden in a scale, grouped by the degree they are built on.

    Entry i lists every sub-chord rooted on degree i of the scale built
    from the steps on 0.
    """
    notes = steps.into_scale(0).notes[:-1]
    degree_of = {pitch_class(note): degree for degree, note in enumerate(notes)}
    cells: list[list[Chord]] = [[] for _ in notes]
    for sub in scale_subseq_chords(Scale(notes)):
        cells[degree_of.get(pitch_class(sub.root), 0)].append(sub.chord)
    return cells
