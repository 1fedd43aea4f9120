#!/usr/bin/env python3
"""
Async Harmony MCP Server using chuk-mcp-server

This server provides MCP tools for chord and scale algebra: naming
arbitrary interval sets, walking inversions, enumerating the chords
hidden inside a chord or scale, and building diatonic chords on every
degree of a scale mode.

The server provides tools for:
- Naming chords (standard, extended and spelled-out styling)
- Normalizing voicings and listing inversions
- Listing sub-chords of a chord or a scale
- Browsing the scale-family catalog and identifying step patterns
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_harmony.constants import SCALES_DIR_ENV
from chuk_mcp_harmony.scales import ScaleLibrary
from chuk_mcp_harmony.tools import register_chord_tools, register_scale_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-harmony")

# Project scales live in ./scales unless the environment points elsewhere
SCALES_DIR = Path(os.environ.get(SCALES_DIR_ENV) or Path.cwd() / "scales")
LIBRARY_PATH = Path(__file__).parent / "scales" / "library"

# Create the catalog
scale_library = ScaleLibrary(
    library_path=LIBRARY_PATH,
    project_path=SCALES_DIR,
)

# Register all tools
chord_tools = register_chord_tools(mcp)
scale_tools = register_scale_tools(mcp, scale_library)

# Export tool functions for direct access
music_name_chord = chord_tools["music_name_chord"]
music_normalize_chord = chord_tools["music_normalize_chord"]
music_chord_inversions = chord_tools["music_chord_inversions"]
music_subchords = chord_tools["music_subchords"]

music_list_scales = scale_tools["music_list_scales"]
music_describe_scale = scale_tools["music_describe_scale"]
music_identify_scale = scale_tools["music_identify_scale"]
music_scale_chords = scale_tools["music_scale_chords"]
music_scale_subchords = scale_tools["music_scale_subchords"]

logger.info("CHUK Harmony MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Project scales dir: {SCALES_DIR}")
