"""Constraint - Clearance-quality points and segments along a path.

Clearance is the signed vertical gap between the line of sight and the
effective terrain. Points whose clearance falls in one of the constraint
bands are grouped into contiguous segments:
- Tight clearance (0 <= clearance < 10m)
- Obstruction (-10m <= clearance < 0)
- Severe obstruction (clearance < -10m)

Everything else is "good" path and is never emitted as a constraint.
"""

from dataclasses import dataclass
from enum import Enum

from los_analyzer.model.geo_point import GeoPoint


class ConstraintType(Enum):
    """Clearance band of a constrained sample."""

    CLEARANCE = "clearance"
    OBSTRUCTION = "obstruction"
    SEVERE_OBSTRUCTION = "severe_obstruction"

    @property
    def is_blocking(self) -> bool:
        return self is not ConstraintType.CLEARANCE


# Band name for unconstrained spans in the profile chart
GOOD_BAND = "good"


@dataclass(frozen=True)
class ConstraintPoint:
    """A sample that falls into a constraint band.

    Attributes:
        position: Interpolated map position of the sample
        distance_m: Distance from path start in meters
        constraint_type: Band this point belongs to
        clearance_m: Signed clearance (negative = terrain above LOS)
    """

    position: GeoPoint
    distance_m: float
    constraint_type: ConstraintType
    clearance_m: float


@dataclass(frozen=True)
class ConstraintSegment:
    """A contiguous run of points sharing one constraint type.

    Adjacent segments may share their transition sample: a segment entered
    from another band starts at the last sample of that band.

    Attributes:
        points: At least 2 points in increasing distance order
    """

    points: tuple[ConstraintPoint, ...]

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise ValueError(f"ConstraintSegment needs at least 2 points, got {len(self.points)}")
        types = {p.constraint_type for p in self.points}
        if len(types) != 1:
            raise ValueError(f"ConstraintSegment points must share one type, got {sorted(t.value for t in types)}")

    @property
    def constraint_type(self) -> ConstraintType:
        return self.points[0].constraint_type

    @property
    def start_distance_m(self) -> float:
        return self.points[0].distance_m

    @property
    def end_distance_m(self) -> float:
        return self.points[-1].distance_m

    @property
    def min_clearance_m(self) -> float:
        """Worst (lowest) clearance in the segment."""
        return min(p.clearance_m for p in self.points)

    @property
    def positions(self) -> list[GeoPoint]:
        return [p.position for p in self.points]

    @property
    def title(self) -> str:
        """Short headline for map popups."""
        return {
            ConstraintType.SEVERE_OBSTRUCTION: "Path Severely Obstructed",
            ConstraintType.OBSTRUCTION: "Path Obstructed",
            ConstraintType.CLEARANCE: "Tight Clearance",
        }[self.constraint_type]

    @property
    def summary(self) -> str:
        """One-line description of how bad the segment is."""
        worst = self.min_clearance_m
        if self.constraint_type.is_blocking:
            return f"The path is blocked by up to {abs(worst):.1f}m."
        return f"Minimum clearance is only {worst:.1f}m."


@dataclass(frozen=True)
class ProfileBand:
    """A colored span of the elevation profile chart.

    Attributes:
        start_m: Start distance in meters
        end_m: End distance in meters
        band: ConstraintType value or GOOD_BAND
    """

    start_m: float
    end_m: float
    band: str
