"""
Chord tools - MCP tools for naming and taking chords apart.

Tools for naming an interval set, normalizing it, walking its
inversions and listing the smaller chords inside it.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.constants import (
    MAX_SUBCHORD_NOTES,
    ChordStyling,
    ErrorMessages,
    SuccessMessages,
)
from chuk_mcp_harmony.core import Chord, RootedChord, note_name, parse_note

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _parse_root(root: str) -> int:
    try:
        return parse_note(root)
    except ValueError:
        raise ValueError(ErrorMessages.INVALID_NOTE.format(note=root)) from None


def _rooted_dict(chord: RootedChord, lower: bool, styling: ChordStyling) -> dict[str, Any]:
    return {
        "root": note_name(chord.root),
        "intervals": list(chord.chord.intervals),
        "notes": [note_name(n) for n in chord.to_scale()],
        "name": chord.as_string(lower, styling),
    }


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_name_chord(
        intervals: list[int],
        root: str | None = None,
        styling: str = "std",
        lower: bool = True,
    ) -> str:
        """
        Name a chord from its intervals above the root.

        Without a root the chord is named on the placeholder 'X'.

        Args:
            intervals: Semitones above the root, ascending (e.g., [4, 7, 11])
            root: Optional root note (e.g., 'C4', 'F#', 'Bb3')
            styling: 'std', 'extended' or 'spelled_out'
            lower: Lower-case minor chords instead of appending 'm'

        Returns:
            JSON string with the chord name

        Example:
            music_name_chord(intervals=[3, 7, 10], root="D4")
        """
        try:
            style = ChordStyling.parse(styling)
            chord = Chord.new(intervals)
            if root is None:
                name = chord.quality("X", lower, style)
                notes = list(chord.to_scale(0))
            else:
                rooted = RootedChord(_parse_root(root), chord)
                name = rooted.as_string(lower, style)
                notes = [note_name(n) for n in rooted.to_scale()]

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.CHORD_NAMED.format(name=name),
                    "name": name,
                    "intervals": list(chord.intervals),
                    "notes": notes,
                },
                ensure_ascii=False,
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to name chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_name_chord"] = music_name_chord

    @mcp.tool  # type: ignore[arg-type]
    async def music_normalize_chord(intervals: list[int], styling: str = "std") -> str:
        """
        Fold a chord voicing into two octaves.

        Octave doublings and twelfths are dropped (a bare twelfth becomes
        the fifth), wider intervals come down.

        Args:
            intervals: Semitones above the root
            styling: 'std', 'extended' or 'spelled_out'

        Returns:
            JSON string with the normalized intervals and name

        Example:
            music_normalize_chord(intervals=[4, 12, 19, 26])
        """
        try:
            style = ChordStyling.parse(styling)
            normalized = Chord.new(intervals).normalized()

            return json.dumps(
                {
                    "status": "success",
                    "intervals": list(normalized.intervals),
                    "name": normalized.as_string(style),
                },
                ensure_ascii=False,
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to normalize chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_normalize_chord"] = music_normalize_chord

    @mcp.tool  # type: ignore[arg-type]
    async def music_chord_inversions(
        intervals: list[int],
        root: str = "C4",
        styling: str = "std",
    ) -> str:
        """
        List the inversions of a chord.

        The last inversion is the original voicing an octave (or more) up.

        Args:
            intervals: Semitones above the root
            root: Root note (default 'C4')
            styling: 'std', 'extended' or 'spelled_out'

        Returns:
            JSON string with one entry per inversion

        Example:
            music_chord_inversions(intervals=[4, 7], root="C4")
        """
        try:
            style = ChordStyling.parse(styling)
            chord = RootedChord(_parse_root(root), Chord.new(intervals))
            inversions = chord.all_inversions()

            return json.dumps(
                {
                    "status": "success",
                    "chord": _rooted_dict(chord, True, style),
                    "inversions": [_rooted_dict(inv, True, style) for inv in inversions],
                },
                ensure_ascii=False,
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to invert chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_chord_inversions"] = music_chord_inversions

    @mcp.tool  # type: ignore[arg-type]
    async def music_subchords(
        intervals: list[int],
        root: str | None = None,
        styling: str = "std",
    ) -> str:
        """
        List every chord formed by two or more notes of a chord.

        Without a root, sub-chords are reported as interval patterns
        (duplicates merged); with a root, each keeps its own lowest note.

        Args:
            intervals: Semitones above the root
            root: Optional root note
            styling: 'std', 'extended' or 'spelled_out'

        Returns:
            JSON string with the sub-chords, smallest first

        Example:
            music_subchords(intervals=[4, 7, 11])
        """
        try:
            note_count = len(intervals) + 1
            if note_count > MAX_SUBCHORD_NOTES:
                message = ErrorMessages.TOO_MANY_NOTES.format(
                    count=note_count, limit=MAX_SUBCHORD_NOTES
                )
                return json.dumps({"status": "error", "message": message})
            style = ChordStyling.parse(styling)
            chord = Chord.new(intervals)
            if root is None:
                subchords = [
                    {"intervals": list(sub.intervals), "name": sub.as_string(style)}
                    for sub in chord.to_subseq_chords()
                ]
            else:
                rooted = RootedChord(_parse_root(root), chord)
                subchords = [
                    _rooted_dict(sub, True, style) for sub in rooted.to_subseq_chords()
                ]

            return json.dumps(
                {
                    "status": "success",
                    "subchords": subchords,
                    "count": len(subchords),
                },
                ensure_ascii=False,
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to list sub-chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_subchords"] = music_subchords

    return tools
