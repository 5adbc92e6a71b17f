"""LOSResult - Outcome of a line of sight evaluation.

An obstruction is only reported for blocked paths: a clear result never
carries obstruction details, a blocked one always does.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ObstructionInfo:
    """The sample where terrain first rises above the line of sight.

    Attributes:
        distance_m: Distance from path start in meters
        effective_terrain_height_m: Terrain elevation plus curvature bulge
        line_of_sight_height_m: Height of the LOS ray at that distance
    """

    distance_m: float
    effective_terrain_height_m: float
    line_of_sight_height_m: float

    @property
    def depth_m(self) -> float:
        """How far terrain penetrates the LOS ray (positive)."""
        return self.effective_terrain_height_m - self.line_of_sight_height_m


@dataclass(frozen=True)
class LOSResult:
    """Line of sight verdict for one path.

    Attributes:
        is_clear: True if no interior sample rises above the LOS ray
        obstruction: First obstruction found, present only when blocked
    """

    is_clear: bool
    obstruction: Optional[ObstructionInfo] = None

    def __post_init__(self) -> None:
        if self.is_clear and self.obstruction is not None:
            raise ValueError("A clear LOSResult cannot carry an obstruction")
        if not self.is_clear and self.obstruction is None:
            raise ValueError("An obstructed LOSResult must carry an obstruction")

    @classmethod
    def clear(cls) -> "LOSResult":
        return cls(is_clear=True)

    @classmethod
    def obstructed(cls, obstruction: ObstructionInfo) -> "LOSResult":
        return cls(is_clear=False, obstruction=obstruction)

    @property
    def status_label(self) -> str:
        return "Clear" if self.is_clear else "Obstructed"
