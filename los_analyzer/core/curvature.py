"""Earth curvature correction for line of sight analysis.

Over long paths the Earth bulges up between the endpoints. Standard
atmospheric refraction bends radio and light rays downward, partly
compensating; this is modelled by inflating the Earth's radius by the
k-factor (4/3 for a standard atmosphere).

Bulge height at distance d1 from start on a path of length D:
    h = d1 * (D - d1) / (2 * k * R)
"""

from los_analyzer.constants import EarthConfig


class CurvatureModel:
    """Computes the effective-earth bulge added to terrain elevations.

    One instance must be shared by every consumer of a single analysis so that
    obstruction detection and clearance classification agree.

    Example:
        curvature = CurvatureModel(enabled=True)
        bulge = curvature.height_m(distance_from_start_m=25_000, total_distance_m=50_000)  # ~36.8m
    """

    def __init__(self, enabled: bool = True, k_factor: float = EarthConfig.K_FACTOR) -> None:
        """Initialize curvature model.

        Args:
            enabled: False disables correction (height is always 0)
            k_factor: Effective earth radius multiplier
        """
        if k_factor <= 0:
            raise ValueError(f"k_factor must be positive, got {k_factor}")
        self.enabled = enabled
        self.k_factor = k_factor
        self.effective_radius_m = EarthConfig.RADIUS_M * k_factor

    def height_m(self, distance_from_start_m: float, total_distance_m: float) -> float:
        """Bulge height in meters at a point along the path.

        Args:
            distance_from_start_m: Distance of the point from the path start
            total_distance_m: Total path length

        Returns:
            Height in meters, 0 at both endpoints and when disabled.
        """
        if not self.enabled or total_distance_m == 0:
            return 0.0
        d1 = distance_from_start_m
        d2 = total_distance_m - d1
        return (d1 * d2) / (2 * self.effective_radius_m)

    def __repr__(self) -> str:
        return f"CurvatureModel(enabled={self.enabled}, k_factor={self.k_factor:.3f})"
