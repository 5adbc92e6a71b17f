"""Data model classes for line of sight analysis.

- GeoPoint: Location atom (lat, lon)
- TerrainSample / TerrainProfile: Elevation samples along a path
- LOSResult / ObstructionInfo: Line of sight verdict
- ConstraintPoint / ConstraintSegment: Clearance bands along the path
- RadioSpecs / RadioLinkResult: Link budget inputs and outputs
- PathAnalysis: Everything one analysis produced
"""

from los_analyzer.model.analysis import PathAnalysis
from los_analyzer.model.constraint import (
    GOOD_BAND,
    ConstraintPoint,
    ConstraintSegment,
    ConstraintType,
    ProfileBand,
)
from los_analyzer.model.geo_point import GeoPoint
from los_analyzer.model.los_result import LOSResult, ObstructionInfo
from los_analyzer.model.radio import AntennaType, RadioLinkResult, RadioSpecs
from los_analyzer.model.terrain_sample import TerrainProfile, TerrainSample

__all__ = [
    "GeoPoint",
    "TerrainSample",
    "TerrainProfile",
    "ObstructionInfo",
    "LOSResult",
    "ConstraintType",
    "ConstraintPoint",
    "ConstraintSegment",
    "ProfileBand",
    "GOOD_BAND",
    "AntennaType",
    "RadioSpecs",
    "RadioLinkResult",
    "PathAnalysis",
]
