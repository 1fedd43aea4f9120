"""
Scale library - discovers and loads scale families.

Families can come from:
1. Built-in library (shipped with package)
2. Project scales (user's project/scales directory)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_harmony.core.scale import mode_of_scale
from chuk_mcp_harmony.models.scale import ModeInfo, ScaleFamily

logger = logging.getLogger(__name__)


class ScaleLibrary:
    """
    Discovers and loads scale family definitions.

    Families are loaded from YAML files in the library and project directories.
    Project families override library families with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the scale library.

        Args:
            library_path: Path to built-in scale library
            project_path: Path to project scales directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ScaleFamily] = {}

    def list_families(self) -> list[ScaleFamily]:
        """
        List all available scale families, sorted by name.

        Returns families from both library and project, with project
        families taking precedence.
        """
        families: dict[str, ScaleFamily] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                family = self._load_family_file(path)
                if family:
                    families[family.name] = family

        return [families[name] for name in sorted(families)]

    def get_family(self, name: str) -> ScaleFamily | None:
        """
        Get a scale family by name.

        Project families take precedence over library families.

        Args:
            name: Family name (e.g., 'ionian', 'harmonic-minor')

        Returns:
            ScaleFamily if found, None otherwise
        """
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        if key in self._cache:
            return self._cache[key]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{key}.yaml"
            if not path.exists():
                continue
            family = self._load_family_file(path)
            if family:
                self._cache[key] = family
                return family

        # The file stem may differ from the name declared inside it
        for family in self.list_families():
            if family.name == key:
                self._cache[key] = family
                return family

        return None

    def get_mode(self, name: str, mode: int = 0) -> ModeInfo | None:
        """Get one mode of a family, or None if the family is unknown."""
        family = self.get_family(name)
        if family is None:
            return None
        return family.mode(mode)

    def identify(self, steps: Sequence[int]) -> list[ModeInfo]:
        """
        Find every family mode with exactly this step pattern.

        Args:
            steps: Step pattern to look up

        Returns:
            Matching modes (empty if the pattern is not in the catalog)
        """
        pattern = tuple(int(s) for s in steps)
        matches: list[ModeInfo] = []
        for family in self.list_families():
            if len(family.steps) != len(pattern):
                continue
            for mode in range(len(family.steps)):
                if mode_of_scale(family.steps, mode).steps == pattern:
                    matches.append(family.mode(mode))
        return matches

    def _load_family_file(self, path: Path) -> ScaleFamily | None:
        """Load a family from a YAML file, skipping files that don't parse."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            return self._parse_family(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning(f"Skipping scale file {path}: {e}")
            return None

    def _parse_family(self, data: dict[str, Any], default_name: str) -> ScaleFamily:
        """Parse a family from YAML data."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")
        name = data.get("name", default_name)
        return ScaleFamily(
            name=name,
            family=data.get("family", name),
            description=data.get("description", ""),
            steps=tuple(data.get("steps", [])),
            modes=tuple(str(m) if m is not None else "" for m in data.get("modes", [])),
        )

    def clear_cache(self) -> None:
        """Clear the family cache."""
        self._cache.clear()
