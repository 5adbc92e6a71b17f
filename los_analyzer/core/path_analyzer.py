"""PathAnalyzer - Runs a complete line of sight analysis.

Pipeline:
1. Fetch terrain profile from the provider
2. Evaluate line of sight (first obstruction)
3. Segment the path into clearance bands
4. Compute the radio link budget, only if requested AND the path is clear

An analysis either fully succeeds or raises; no partial result is returned.
"""

import logging
from typing import Optional

from los_analyzer.constants import ProfileConfig
from los_analyzer.core.constraint_segmenter import ConstraintSegmenter
from los_analyzer.core.curvature import CurvatureModel
from los_analyzer.core.elevation_service import OpenElevationService, TerrainProfileProvider
from los_analyzer.core.errors import InvalidInputError
from los_analyzer.core.link_budget import compute_link_budget
from los_analyzer.core.los_evaluator import LOSEvaluator
from los_analyzer.model.analysis import PathAnalysis
from los_analyzer.model.geo_point import GeoPoint
from los_analyzer.model.radio import RadioSpecs
from los_analyzer.model.terrain_sample import TerrainProfile

logger = logging.getLogger(__name__)


class PathAnalyzer:
    """Orchestrates terrain fetch, LOS evaluation, segmentation and link budget.

    Example:
        analyzer = PathAnalyzer(provider=OpenElevationService())
        analysis = analyzer.analyze(start=a, end=b, height_a_m=10, height_b_m=10)
        print(analysis.los_result.status_label)
    """

    def __init__(self, provider: Optional[TerrainProfileProvider] = None) -> None:
        """Initialize with optional terrain provider.

        Args:
            provider: Terrain profile source (Open-Elevation API if not provided)
        """
        self._provider = provider or OpenElevationService()

    @property
    def provider(self) -> TerrainProfileProvider:
        return self._provider

    def analyze(
        self,
        start: GeoPoint,
        end: GeoPoint,
        height_a_m: float,
        height_b_m: float,
        use_curvature: bool = True,
        radio_specs: Optional[RadioSpecs] = None,
        steps: int = ProfileConfig.DEFAULT_STEPS,
    ) -> PathAnalysis:
        """Analyze the path between two endpoints.

        Args:
            start: Endpoint A
            end: Endpoint B
            height_a_m: Antenna height above ground at A
            height_b_m: Antenna height above ground at B
            use_curvature: Apply 4/3 earth curvature correction
            radio_specs: Radio equipment, None to skip the link budget
            steps: Number of profile intervals

        Returns:
            Complete PathAnalysis.

        Raises:
            InvalidInputError: Coincident endpoints or unusable profile.
            ProfileFetchError: Terrain provider failure.
        """
        if start == end:
            raise InvalidInputError("Start and end points must be different")

        logger.info(f"Analyzing path {start} -> {end} (heights {height_a_m}m/{height_b_m}m, curvature={use_curvature})")
        profile = self._provider.fetch_profile(start=start, end=end, steps=steps)
        return self.analyze_profile(
            profile=profile,
            start=start,
            end=end,
            height_a_m=height_a_m,
            height_b_m=height_b_m,
            use_curvature=use_curvature,
            radio_specs=radio_specs,
        )

    @staticmethod
    def analyze_profile(
        profile: TerrainProfile,
        start: GeoPoint,
        end: GeoPoint,
        height_a_m: float,
        height_b_m: float,
        use_curvature: bool = True,
        radio_specs: Optional[RadioSpecs] = None,
    ) -> PathAnalysis:
        """Run the engine on an already fetched profile."""
        curvature = CurvatureModel(enabled=use_curvature)
        total_distance_m = profile.total_distance_m

        los_result = LOSEvaluator(curvature=curvature).evaluate(
            samples=profile,
            total_distance_m=total_distance_m,
            height_a_m=height_a_m,
            height_b_m=height_b_m,
        )
        segments = ConstraintSegmenter(curvature=curvature).segment(
            samples=profile,
            total_distance_m=total_distance_m,
            height_a_m=height_a_m,
            height_b_m=height_b_m,
            start=start,
            end=end,
        )

        radio_link = None
        if radio_specs is not None and los_result.is_clear:
            radio_link = compute_link_budget(total_distance_m=total_distance_m, specs=radio_specs)

        logger.info(
            f"Path {los_result.status_label.lower()} over {total_distance_m:.0f}m, "
            f"{len(segments)} constraint segments, radio={'on' if radio_link else 'off'}"
        )
        return PathAnalysis(
            start=start,
            end=end,
            height_a_m=height_a_m,
            height_b_m=height_b_m,
            use_curvature=use_curvature,
            profile=profile,
            los_result=los_result,
            constraint_segments=tuple(segments),
            radio_link=radio_link,
        )
