"""Line of sight evaluation over a terrain profile.

The LOS ray runs straight from the top of antenna A to the top of antenna B.
At each interior sample its height is interpolated by fractional distance and
compared against the effective terrain (elevation + curvature bulge).

Policy: the FIRST interior sample where terrain rises above the ray is
reported, not the deepest one.
"""

import logging
from math import isfinite
from typing import Optional, Sequence

from los_analyzer.core.curvature import CurvatureModel
from los_analyzer.core.errors import InvalidInputError
from los_analyzer.model.los_result import LOSResult, ObstructionInfo
from los_analyzer.model.terrain_sample import TerrainSample

logger = logging.getLogger(__name__)


def validate_profile(samples: Sequence[TerrainSample], total_distance_m: float) -> None:
    """Reject profiles the engine cannot evaluate.

    Raises:
        InvalidInputError: Fewer than 2 samples or non-positive total distance.
    """
    if len(samples) < 2:
        raise InvalidInputError(f"Terrain profile needs at least 2 samples, got {len(samples)}")
    if not (isfinite(total_distance_m) and total_distance_m > 0):
        raise InvalidInputError(f"Total path distance must be positive and finite, got {total_distance_m}")


def validate_antenna_heights(height_a_m: float, height_b_m: float) -> None:
    """Reject antenna heights that would turn every LOS height into NaN.

    Raises:
        InvalidInputError: If either height is NaN or infinite.
    """
    for label, height in (("A", height_a_m), ("B", height_b_m)):
        if not isfinite(height):
            raise InvalidInputError(f"Antenna height at {label} must be finite, got {height}")


def line_of_sight_height_m(
    start_height_m: float,
    end_height_m: float,
    distance_m: float,
    total_distance_m: float,
) -> float:
    """Height of the straight LOS ray at a distance along the path."""
    return start_height_m + (end_height_m - start_height_m) * (distance_m / total_distance_m)


class LOSEvaluator:
    """Decides whether the LOS ray clears the effective terrain.

    Example:
        evaluator = LOSEvaluator(curvature=CurvatureModel(enabled=True))
        result = evaluator.evaluate(samples=profile, total_distance_m=12_400, height_a_m=10, height_b_m=10)
        if not result.is_clear:
            print(f"Blocked at {result.obstruction.distance_m:.0f}m")
    """

    def __init__(self, curvature: Optional[CurvatureModel] = None) -> None:
        self.curvature = curvature or CurvatureModel(enabled=True)

    def evaluate(
        self,
        samples: Sequence[TerrainSample],
        total_distance_m: float,
        height_a_m: float,
        height_b_m: float,
    ) -> LOSResult:
        """Evaluate the path and locate the first obstruction.

        Args:
            samples: Terrain samples in increasing distance order
            total_distance_m: Total path length in meters
            height_a_m: Antenna height above ground at the start
            height_b_m: Antenna height above ground at the end

        Returns:
            LOSResult, clear or carrying the first obstruction.

        Raises:
            InvalidInputError: If the profile cannot be evaluated.
        """
        validate_profile(samples=samples, total_distance_m=total_distance_m)
        validate_antenna_heights(height_a_m=height_a_m, height_b_m=height_b_m)

        start_height = samples[0].elevation_m + height_a_m
        end_height = samples[-1].elevation_m + height_b_m

        # Endpoints sit under the antennas and are never obstructions
        for sample in samples[1:-1]:
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
            if effective_height > los_height:
                logger.debug(
                    f"Obstruction at {sample.distance_m:.0f}m: terrain {effective_height:.1f}m > LOS {los_height:.1f}m"
                )
                return LOSResult.obstructed(
                    ObstructionInfo(
                        distance_m=sample.distance_m,
                        effective_terrain_height_m=effective_height,
                        line_of_sight_height_m=los_height,
                    )
                )

        return LOSResult.clear()


def evaluate_line_of_sight(
    samples: Sequence[TerrainSample],
    total_distance_m: float,
    height_a_m: float,
    height_b_m: float,
    curvature_enabled: bool = True,
) -> LOSResult:
    """Functional shortcut for LOSEvaluator with a fresh curvature model."""
    evaluator = LOSEvaluator(curvature=CurvatureModel(enabled=curvature_enabled))
    return evaluator.evaluate(
        samples=samples,
        total_distance_m=total_distance_m,
        height_a_m=height_a_m,
        height_b_m=height_b_m,
    )
