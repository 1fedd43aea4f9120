"""
Pydantic models for the harmony system.

This module provides:
- ScaleFamily: A named step pattern with mode names
- ModeInfo: One rotation of a family
"""

from chuk_mcp_harmony.models.scale import UNNAMED_MODE, ModeInfo, ScaleFamily

__all__ = [
    "ModeInfo",
    "ScaleFamily",
    "UNNAMED_MODE",
]
