"""Core analysis engine for terrain line of sight and radio links.

This module provides the mathematical backbone of the analyzer:
- GeoCalculator: Geodesic calculations (distances, interpolation)
- CurvatureModel: 4/3 effective-earth curvature bulge
- LOSEvaluator: First obstruction along the line of sight
- ConstraintSegmenter: Clearance band segmentation
- compute_link_budget: Free-space link budget
- OpenElevationService / DEMProfileService: Terrain profile providers
- PathAnalyzer: Full analysis pipeline
"""

from los_analyzer.core.curvature import CurvatureModel
from los_analyzer.core.errors import InvalidInputError, ProfileFetchError
from los_analyzer.core.geo_calculator import GeoCalculator

# Modules below depend on los_analyzer.model, which imports GeoCalculator.
# Import directly: from los_analyzer.core.los_evaluator import LOSEvaluator

__all__ = [
    "GeoCalculator",
    "CurvatureModel",
    "InvalidInputError",
    "ProfileFetchError",
]
