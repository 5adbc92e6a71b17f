"""PathAnalysis - Everything one analysis run produced.

Created by PathAnalyzer, consumed by the map, chart and result panels.
"""

from dataclasses import dataclass
from typing import Optional

from los_analyzer.model.constraint import ConstraintSegment
from los_analyzer.model.geo_point import GeoPoint
from los_analyzer.model.los_result import LOSResult
from los_analyzer.model.radio import RadioLinkResult
from los_analyzer.model.terrain_sample import TerrainProfile


@dataclass(frozen=True)
class PathAnalysis:
    """Result of analyzing the path between two endpoints.

    Attributes:
        start: Endpoint A
        end: Endpoint B
        height_a_m: Antenna height above ground at A
        height_b_m: Antenna height above ground at B
        use_curvature: Whether earth curvature correction was applied
        profile: Terrain profile the analysis ran on
        los_result: Line of sight verdict
        constraint_segments: Clearance bands in scan order (may be empty)
        radio_link: Link budget, None if disabled or path obstructed
    """

    start: GeoPoint
    end: GeoPoint
    height_a_m: float
    height_b_m: float
    use_curvature: bool
    profile: TerrainProfile
    los_result: LOSResult
    constraint_segments: tuple[ConstraintSegment, ...]
    radio_link: Optional[RadioLinkResult] = None

    @property
    def total_distance_m(self) -> float:
        return self.profile.total_distance_m

    @property
    def start_los_height_m(self) -> float:
        """Absolute height of antenna A (terrain + mast)."""
        return self.profile[0].elevation_m + self.height_a_m

    @property
    def end_los_height_m(self) -> float:
        """Absolute height of antenna B (terrain + mast)."""
        return self.profile[len(self.profile) - 1].elevation_m + self.height_b_m
