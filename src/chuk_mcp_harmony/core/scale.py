"""
Scale primitives - Steps, Scale and mode rotation.

A Scale is an ascending run of absolute notes, the first one being the
tonic. Steps is the same thing seen as gaps: each entry is the distance
to the next note. The two convert into each other, and rotating the
steps gives the modes of a scale family (Dorian is Ionian rotated by 1).
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import accumulate, chain, cycle
from typing import TYPE_CHECKING, Protocol

from .interval import Interval
from .note import Note

if TYPE_CHECKING:
    from .chord import Chord


class ToScale(Protocol):
    """Anything that can be laid out as a scale from a root note."""

    def to_scale(self, root: Note) -> Scale: ...


@dataclass(frozen=True)
class Steps:
    """
    A step pattern: the interval from each scale note to the next.

    The major scale is (2, 2, 1, 2, 2, 2, 1). Immutable and hashable.
    """

    steps: tuple[Note, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(int(s) for s in self.steps))

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> Note:
        return self.steps[index]

    def into_scale(self, root: Note) -> Scale:
        """
        Accumulate the steps from a root.

        Produces one more note than there are steps, closing the octave
        for patterns that sum to 12.
        """
        return Scale(tuple(accumulate(self.steps, initial=root)))

    def to_scale(self, root: Note) -> Scale:
        return self.into_scale(root)

    def mode(self, mode: int) -> Steps:
        """Rotate left by `mode` steps."""
        return mode_of_scale(self, mode)

    def __str__(self) -> str:
        return " ".join(str(s) for s in self.steps)


@dataclass(frozen=True)
class Scale:
    """
    An ascending sequence of absolute notes, tonic first.

    Immutable and hashable. Not validated: degenerate scales (empty,
    single note) convert to degenerate chords and steps.
    """

    notes: tuple[Note, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "notes", tuple(int(n) for n in self.notes))

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]

    @property
    def tonic(self) -> Note | None:
        """The first note, or None for an empty scale."""
        return self.notes[0] if self.notes else None

    def to_steps(self) -> Steps:
        """
        Successive differences between the notes.

        When the scale stops short of the octave above the tonic, a last
        step wraps around to it, so an open scale yields its full cyclic
        pattern and a closed one (as built by Steps.into_scale) does not
        grow an extra zero step.
        """
        if not self.notes:
            return Steps(())
        steps = [b - a for a, b in zip(self.notes, self.notes[1:])]
        wrap = self.notes[0] + Interval.OCTAVE - self.notes[-1]
        if wrap > 0:
            steps.append(wrap)
        return Steps(tuple(steps))

    def to_chord(self) -> Chord:
        """Intervals of every note above the first one (the implicit root)."""
        from .chord import Chord

        if not self.notes:
            return Chord(())
        root = self.notes[0]
        return Chord(tuple(note - root for note in self.notes[1:]))

    def transposed(self, semitones: int) -> Scale:
        """Shift every note by the same amount."""
        return Scale(tuple(note + semitones for note in self.notes))

    def __str__(self) -> str:
        return ", ".join(str(n) for n in self.notes)


def note_iter(root: Note, steps: Sequence[Note]) -> Iterator[Note]:
    """
    Walk a step pattern forever, starting at root.

    note_iter(0, (2, 2, 1, ...)) yields 0, 2, 4, 5, ... and keeps going
    into the next octaves. An empty pattern yields only the root.
    """
    return accumulate(chain((root,), cycle(steps)))


def mode_of_scale(steps: Steps | Sequence[Note], mode: int) -> Steps:
    """
    Rotate a step pattern left by `mode` positions (modulo its length).

    mode_of_scale(ionian, 1) is Dorian. Mode 0 is the identity.
    """
    pattern = tuple(steps)
    if not pattern:
        return Steps(())
    shift = mode % len(pattern)
    return Steps(pattern[shift:] + pattern[:shift])


def notes_of_mode(root: Note, steps: Steps | Sequence[Note], mode: int) -> Scale:
    """The notes of a mode of a scale family, from root up to the octave."""
    return mode_of_scale(steps, mode).into_scale(root)
