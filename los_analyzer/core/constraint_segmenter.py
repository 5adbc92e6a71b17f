"""Constraint segmentation of a terrain profile.

Walks every sample (endpoints included), computes the signed clearance
between the LOS ray and the effective terrain, classifies it into a
clearance band and run-length encodes the bands into segments.

Boundary handling:
    When a classified run starts at sample i > 0, sample i-1 becomes the first
    point of the new run (relabelled with the new band, keeping its own
    clearance). Two adjacent classified runs therefore share their transition
    sample, and every run entered from another band begins at the edge.

Runs with fewer than 2 points cannot be drawn as a line and are dropped.
"""

import logging
from typing import Optional, Sequence

from los_analyzer.constants import ClearanceConfig
from los_analyzer.core.curvature import CurvatureModel
from los_analyzer.core.los_evaluator import line_of_sight_height_m, validate_antenna_heights, validate_profile
from los_analyzer.model.constraint import (
    GOOD_BAND,
    ConstraintPoint,
    ConstraintSegment,
    ConstraintType,
    ProfileBand,
)
from los_analyzer.model.geo_point import GeoPoint
from los_analyzer.model.terrain_sample import TerrainSample

logger = logging.getLogger(__name__)


def classify_clearance(clearance_m: float) -> Optional[ConstraintType]:
    """Classify a signed clearance into a constraint band.

    Thresholds are strict: exactly -10m is an obstruction, exactly 0m is
    tight clearance.

    Args:
        clearance_m: LOS height minus effective terrain height

    Returns:
        ConstraintType, or None for unconstrained ("good") clearance.
    """
    if clearance_m < ClearanceConfig.SEVERE_OBSTRUCTION_BELOW_M:
        return ConstraintType.SEVERE_OBSTRUCTION
    if clearance_m < ClearanceConfig.OBSTRUCTION_BELOW_M:
        return ConstraintType.OBSTRUCTION
    if clearance_m < ClearanceConfig.TIGHT_CLEARANCE_BELOW_M:
        return ConstraintType.CLEARANCE
    return None


class ConstraintSegmenter:
    """Partitions a path into contiguous clearance-quality segments.

    Example:
        segmenter = ConstraintSegmenter(curvature=CurvatureModel(enabled=True))
        segments = segmenter.segment(
            samples=profile,
            total_distance_m=profile.total_distance_m,
            height_a_m=10,
            height_b_m=10,
            start=GeoPoint(lat=-42.7, lon=170.9),
            end=GeoPoint(lat=-42.6, lon=171.1),
        )
    """

    def __init__(self, curvature: Optional[CurvatureModel] = None) -> None:
        self.curvature = curvature or CurvatureModel(enabled=True)

    def clearances_m(
        self,
        samples: Sequence[TerrainSample],
        total_distance_m: float,
        height_a_m: float,
        height_b_m: float,
    ) -> list[float]:
        """Signed clearance at every sample, endpoints included."""
        validate_profile(samples=samples, total_distance_m=total_distance_m)
        validate_antenna_heights(height_a_m=height_a_m, height_b_m=height_b_m)

        start_height = samples[0].elevation_m + height_a_m
        end_height = samples[-1].elevation_m + height_b_m

        clearances = []
        for sample in samples:
            los_height = line_of_sight_height_m(
                start_height_m=start_height,
                end_height_m=end_height,
                distance_m=sample.distance_m,
                total_distance_m=total_distance_m,
            )
            effective_height = sample.elevation_m + self.curvature.height_m(
                distance_from_start_m=sample.distance_m,
                total_distance_m=total_distance_m,
            )
            clearances.append(los_height - effective_height)
        return clearances

    def segment(
        self,
        samples: Sequence[TerrainSample],
        total_distance_m: float,
        height_a_m: float,
        height_b_m: float,
        start: GeoPoint,
        end: GeoPoint,
    ) -> list[ConstraintSegment]:
        """Run-length encode the clearance bands along the path.

        Args:
            samples: Terrain samples in increasing distance order
            total_distance_m: Total path length in meters
            height_a_m: Antenna height above ground at the start
            height_b_m: Antenna height above ground at the end
            start: Map position of the path start
            end: Map position of the path end

        Returns:
            Segments in scan order, each with at least 2 points.

        Raises:
            InvalidInputError: If the profile cannot be evaluated.
        """
        clearances = self.clearances_m(
            samples=samples,
            total_distance_m=total_distance_m,
            height_a_m=height_a_m,
            height_b_m=height_b_m,
        )

        def make_point(index: int, constraint_type: ConstraintType) -> ConstraintPoint:
            distance = samples[index].distance_m
            return ConstraintPoint(
                position=start.interpolate(other=end, fraction=distance / total_distance_m),
                distance_m=distance,
                constraint_type=constraint_type,
                clearance_m=clearances[index],
            )

        segments: list[ConstraintSegment] = []
        current: list[ConstraintPoint] = []
        current_type: Optional[ConstraintType] = None

        for i, clearance in enumerate(clearances):
            constraint_type = classify_clearance(clearance_m=clearance)

            if constraint_type != current_type:
                if len(current) > 1:
                    segments.append(ConstraintSegment(points=tuple(current)))
                current = []
                if constraint_type is not None and i > 0:
                    current.append(make_point(index=i - 1, constraint_type=constraint_type))
                current_type = constraint_type

            if constraint_type is not None:
                current.append(make_point(index=i, constraint_type=constraint_type))

        if len(current) > 1:
            segments.append(ConstraintSegment(points=tuple(current)))

        logger.debug(f"Segmented {len(samples)} samples into {len(segments)} constraint segments")
        return segments


def segment_constraints(
    samples: Sequence[TerrainSample],
    total_distance_m: float,
    height_a_m: float,
    height_b_m: float,
    start: GeoPoint,
    end: GeoPoint,
    curvature_enabled: bool = True,
) -> list[ConstraintSegment]:
    """Functional shortcut for ConstraintSegmenter with a fresh curvature model."""
    segmenter = ConstraintSegmenter(curvature=CurvatureModel(enabled=curvature_enabled))
    return segmenter.segment(
        samples=samples,
        total_distance_m=total_distance_m,
        height_a_m=height_a_m,
        height_b_m=height_b_m,
        start=start,
        end=end,
    )


def fill_profile_bands(
    segments: Sequence[ConstraintSegment],
    total_distance_m: float,
) -> list[ProfileBand]:
    """Cover the whole path with colored bands for the profile chart.

    Segments are sorted by start distance; gaps between them (and before the
    first / after the last) become "good" bands.

    Args:
        segments: Constraint segments in any order
        total_distance_m: Total path length in meters

    Returns:
        Bands in increasing distance order. Empty if total_distance_m <= 0.
    """
    if total_distance_m <= 0:
        return []

    bands: list[ProfileBand] = []
    last_distance = 0.0
    for seg in sorted(segments, key=lambda s: s.start_distance_m):
        if seg.start_distance_m > last_distance:
            bands.append(ProfileBand(start_m=last_distance, end_m=seg.start_distance_m, band=GOOD_BAND))
        bands.append(
            ProfileBand(
                start_m=seg.start_distance_m,
                end_m=seg.end_distance_m,
                band=seg.constraint_type.value,
            )
        )
        last_distance = seg.end_distance_m

    if last_distance < total_distance_m:
        bands.append(ProfileBand(start_m=last_distance, end_m=total_distance_m, band=GOOD_BAND))

    return bands
