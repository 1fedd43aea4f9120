"""
CHUK Harmony - chord and scale algebra with a naming engine.

Notes and intervals are signed semitone counts; scales, step patterns
and chords are immutable values built from them. See chuk_mcp_harmony.core.
"""

__version__ = "0.1.0"
