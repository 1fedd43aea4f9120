"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_harmony.core import Steps
from chuk_mcp_harmony.scales import ScaleLibrary


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in scale library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_harmony" / "scales" / "library"


@pytest.fixture
def scale_library(library_path: Path) -> ScaleLibrary:
    """Scale library over the built-in catalog only."""
    return ScaleLibrary(library_path=library_path)


@pytest.fixture
def ionian() -> Steps:
    """The major scale step pattern."""
    return Steps((2, 2, 1, 2, 2, 2, 1))


@pytest.fixture
def harmonic_minor() -> Steps:
    """The harmonic minor step pattern."""
    return Steps((2, 1, 2, 2, 1, 3, 1))
