"""
Scale catalog models - named scale families and their modes.

A family is a step pattern plus display names for each of its
rotations. These are descriptive only: the harmony itself is computed
from the steps by the core.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.scale import Steps, mode_of_scale

UNNAMED_MODE = "unnamed"


class ModeInfo(BaseModel):
    """One mode of a scale family, e.g. Dorian of Ionian."""

    family: str = Field(..., description="Family display name")
    mode_name: str = Field(..., description="Mode display name")
    mode: int = Field(0, ge=0, description="Rotation index within the family")
    steps: tuple[int, ...] = Field(..., description="Step pattern of this mode")

    model_config = {"frozen": True}

    def to_steps(self) -> Steps:
        return Steps(self.steps)

    def __str__(self) -> str:
        return f"{self.mode_name}, mode of {self.family}"


class ScaleFamily(BaseModel):
    """
    A named step pattern and the names of its modes.

    Mode names are listed in rotation order; missing or empty names
    display as 'unnamed'.
    """

    name: str = Field(..., description="Catalog key (e.g., 'ionian', 'harmonic_minor')")
    family: str = Field(..., description="Display name (e.g., 'Harmonic Minor')")
    description: str = Field("", description="Human-readable description")
    steps: tuple[int, ...] = Field(..., description="Semitone gaps between scale notes")
    modes: tuple[str, ...] = Field(default_factory=tuple, description="Mode names by rotation")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure the catalog key is a valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid scale name: {v}")
        return v.lower().replace("-", "_")

    @field_validator("steps")
    @classmethod
    def validate_steps(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """A family needs at least one step, and every step must go up."""
        if not v:
            raise ValueError(ErrorMessages.EMPTY_STEPS)
        if any(step <= 0 for step in v):
            raise ValueError(f"Steps must be positive, got {list(v)}")
        return v

    def to_steps(self) -> Steps:
        return Steps(self.steps)

    def get_mode_name(self, mode: int) -> str:
        """Display name of a rotation (taken modulo the number of steps)."""
        index = mode % len(self.steps)
        name = self.modes[index] if index < len(self.modes) else ""
        return name or UNNAMED_MODE

    def mode(self, mode: int) -> ModeInfo:
        """Describe one rotation of this family."""
        index = mode % len(self.steps)
        return ModeInfo(
            family=self.family,
            mode_name=self.get_mode_name(index),
            mode=index,
            steps=mode_of_scale(self.steps, index).steps,
        )

    def all_modes(self) -> list[ModeInfo]:
        """Every rotation, in order."""
        return [self.mode(i) for i in range(len(self.steps))]
