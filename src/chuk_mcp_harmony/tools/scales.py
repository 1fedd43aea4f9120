"""
Scale tools - MCP tools for the scale catalog and scale harmony.

Tools for listing and describing scale families, identifying a step
pattern, and building the chords that live in a scale mode.
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
from chuk_mcp_harmony.core import (
    RelativeChord,
    Steps,
    note_name,
    parse_note,
    steps_subseq_chords,
    strs_scale_chords,
    strs_scale_chords_roman,
    to_degree,
)
from chuk_mcp_harmony.scales import ScaleLibrary

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(mcp: ChukMCPServer, library: ScaleLibrary) -> dict[str, Any]:
    """
    Register scale catalog and scale harmony tools with the MCP server.

    Args:
        mcp: The MCP server instance
        library: The scale library

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_scales() -> str:
        """
        List available scale families.

        Returns all families from the library and project with their
        step patterns and mode names.

        Returns:
            JSON string with list of scale families

        Example:
            music_list_scales()
        """
        try:
            families = library.list_families()

            return json.dumps(
                {
                    "status": "success",
                    "scales": [
                        {
                            "name": f.name,
                            "family": f.family,
                            "steps": list(f.steps),
                            "modes": [f.get_mode_name(i) for i in range(len(f.steps))],
                        }
                        for f in families
                    ],
                    "count": len(families),
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_scales"] = music_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_scale(name: str) -> str:
        """
        Get detailed information about a scale family.

        Args:
            name: Family name (e.g., 'ionian', 'harmonic_minor')

        Returns:
            JSON string with the family and every mode's step pattern

        Example:
            music_describe_scale(name="harmonic_minor")
        """
        try:
            family = library.get_family(name)
            if family is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCALE_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "scale": {
                        "name": family.name,
                        "family": family.family,
                        "description": family.description,
                        "steps": list(family.steps),
                        "modes": [
                            {
                                "mode": m.mode,
                                "name": m.mode_name,
                                "steps": list(m.steps),
                                "description": str(m),
                            }
                            for m in family.all_modes()
                        ],
                    },
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to describe scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_describe_scale"] = music_describe_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_identify_scale(steps: list[int]) -> str:
        """
        Find which catalog modes have a given step pattern.

        Args:
            steps: Semitone gaps between consecutive scale notes

        Returns:
            JSON string with the matching modes

        Example:
            music_identify_scale(steps=[2, 1, 2, 2, 2, 1, 2])
        """
        try:
            if not steps:
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_STEPS})
            matches = library.identify(steps)

            return json.dumps(
                {
                    "status": "success",
                    "matches": [
                        {"family": m.family, "mode": m.mode, "name": m.mode_name}
                        for m in matches
                    ],
                    "count": len(matches),
                },
                ensure_ascii=False,
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to identify scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_identify_scale"] = music_identify_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_scale_chords(
        name: str,
        mode: int = 0,
        size: int = 3,
        tonic: str | None = None,
        styling: str = "std",
    ) -> str:
        """
        Build the stacked-third chord on every degree of a scale mode.

        Without a tonic, chords are named on Roman numerals (I, ii, ...);
        with a tonic, on pitch classes (C, d, ...).

        Args:
            name: Family name
            mode: Mode index (0 = first mode of the family)
            size: Notes per chord (3 = triads, 4 = sevenths, ...)
            tonic: Optional tonic note (e.g., 'D4')
            styling: 'std', 'extended' or 'spelled_out'

        Returns:
            JSON string with one chord name per degree

        Example:
            music_scale_chords(name="ionian", mode=1, size=4)
        """
        try:
            if size < 1:
                message = ErrorMessages.INVALID_CHORD_SIZE.format(size=size)
                return json.dumps({"status": "error", "message": message})
            style = ChordStyling.parse(styling)
            mode_info = library.get_mode(name, mode)
            if mode_info is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCALE_NOT_FOUND.format(name=name)}
                )

            steps = mode_info.to_steps()
            if tonic is None:
                chords = strs_scale_chords_roman(steps, size, style)
            else:
                try:
                    root = parse_note(tonic)
                except ValueError:
                    message = ErrorMessages.INVALID_NOTE.format(note=tonic)
                    return json.dumps({"status": "error", "message": message})
                chords = strs_scale_chords(steps, root, size, style)

            logger.debug(f"Built {len(chords)} chords on {mode_info}")
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALE_CHORDS.format(
                        count=len(chords), name=str(mode_info)
                    ),
                    "mode": str(mode_info),
                    "steps": list(steps),
                    "chords": chords,
                },
                ensure_ascii=False,
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build scale chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_scale_chords"] = music_scale_chords

    @mcp.tool  # type: ignore[arg-type]
    async def music_scale_subchords(
        name: str,
        mode: int = 0,
        styling: str = "std",
    ) -> str:
        """
        List every chord implied by a scale mode, grouped by degree.

        Args:
            name: Family name
            mode: Mode index
            styling: 'std', 'extended' or 'spelled_out'

        Returns:
            JSON string with one entry per degree

        Example:
            music_scale_subchords(name="harmonic_minor")
        """
        try:
            style = ChordStyling.parse(styling)
            mode_info = library.get_mode(name, mode)
            if mode_info is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCALE_NOT_FOUND.format(name=name)}
                )

            steps = Steps(mode_info.steps)
            if len(steps) > MAX_SUBCHORD_NOTES:
                message = ErrorMessages.TOO_MANY_NOTES.format(
                    count=len(steps), limit=MAX_SUBCHORD_NOTES
                )
                return json.dumps({"status": "error", "message": message})
            offsets = steps.into_scale(0).notes
            cells = steps_subseq_chords(steps)
            degrees = [
                {
                    "degree": to_degree(offsets[i]),
                    "root": note_name(offsets[i]),
                    "chords": [
                        RelativeChord(offsets[i], chord).as_string(True, style) for chord in cell
                    ],
                }
                for i, cell in enumerate(cells)
            ]

            return json.dumps(
                {
                    "status": "success",
                    "mode": str(mode_info),
                    "degrees": degrees,
                },
                ensure_ascii=False,
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to list scale sub-chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_scale_subchords"] = music_scale_subchords

    return tools
