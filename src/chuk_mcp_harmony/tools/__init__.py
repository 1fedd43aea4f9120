"""
MCP tool implementations.

Tools are organized by domain:
- chords - Chord naming, normalization, inversions, sub-chords
- scales - Scale catalog and scale harmony
"""

from chuk_mcp_harmony.tools.chords import register_chord_tools
from chuk_mcp_harmony.tools.scales import register_scale_tools

__all__ = [
    "register_chord_tools",
    "register_scale_tools",
]
