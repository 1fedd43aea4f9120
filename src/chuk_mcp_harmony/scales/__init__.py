"""
Scale catalog - named scale families and their modes.

Families are YAML files: a step pattern plus a display name per mode.
"""

from chuk_mcp_harmony.scales.loader import ScaleLibrary

__all__ = [
    "ScaleLibrary",
]
