"""Shared pytest fixtures for los_analyzer tests.

Provides MockElevationService and reusable terrain profiles for all tests.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Endpoints sit on the equator where the math is simple: moving along a
    parallel, 1 degree of longitude ≈ 111 km. Profiles used by engine tests are
    built directly from distances, so their expected values never depend on
    GeoCalculator.
"""

import pytest

from los_analyzer.core.elevation_service import TerrainProfileProvider
from los_analyzer.core.errors import ProfileFetchError
from los_analyzer.model.geo_point import GeoPoint
from los_analyzer.model.terrain_sample import TerrainProfile, TerrainSample
from los_analyzer.ui.context import AnalyzerContext

# Endpoints ~1.1 km apart along the equator
POINT_A = GeoPoint(lat=0.0, lon=0.0)
POINT_B = GeoPoint(lat=0.0, lon=0.01)


def make_profile(elevations: list[float], total_distance_m: float) -> TerrainProfile:
    """Evenly spaced profile over total_distance_m."""
    return TerrainProfile.from_elevations(elevations=elevations, total_distance_m=total_distance_m)


# =============================================================================
# MOCK ELEVATION SERVICE
# =============================================================================


class MockElevationService(TerrainProfileProvider):
    """Provider returning a fixed list of elevations.

    fetch_profile() must be called with steps = len(elevations) - 1, otherwise
    the base class reports a count mismatch (useful for error tests).

    Records every requested location list in `calls`.
    """

    def __init__(self, elevations: list[float], error: Exception | None = None) -> None:
        self.elevations = elevations
        self.error = error
        self.calls: list[list[GeoPoint]] = []

    @property
    def steps(self) -> int:
        return len(self.elevations) - 1

    def get_elevations(self, locations: list[GeoPoint]) -> list[float]:
        self.calls.append(locations)
        if self.error is not None:
            raise self.error
        return list(self.elevations)


# =============================================================================
# PROFILE FIXTURES
# =============================================================================


@pytest.fixture
def ridge_profile() -> TerrainProfile:
    """Single 100m ridge at the midpoint of a 1 km path.

    With 1m masts on 0m ground the LOS ray is at 1m everywhere,
    so the ridge at 500m blocks the path.
    """
    return TerrainProfile(
        samples=(
            TerrainSample(distance_m=0.0, elevation_m=0.0),
            TerrainSample(distance_m=500.0, elevation_m=100.0),
            TerrainSample(distance_m=1000.0, elevation_m=0.0),
        ),
        total_distance_m=1000.0,
    )


@pytest.fixture
def flat_profile() -> TerrainProfile:
    """Flat 100m plateau, 11 samples over 1 km."""
    return make_profile(elevations=[100.0] * 11, total_distance_m=1000.0)


@pytest.fixture
def hill_profile() -> TerrainProfile:
    """Rising hill under a 20m LOS ray (masts of 20m, ground 0 at both ends).

    Clearances with curvature off: [20, 5, -5, -15, 20]
    -> tight clearance, obstruction, severe obstruction in a row.
    """
    return make_profile(elevations=[0.0, 15.0, 25.0, 35.0, 0.0], total_distance_m=1000.0)


# =============================================================================
# PROVIDER / CONTEXT FIXTURES
# =============================================================================


@pytest.fixture
def flat_provider() -> MockElevationService:
    """Provider for a flat 50m plateau with 10 steps."""
    return MockElevationService(elevations=[50.0] * 11)


@pytest.fixture
def ridge_provider() -> MockElevationService:
    """Provider for a 500m ridge between sea-level endpoints (2 steps)."""
    return MockElevationService(elevations=[0.0, 500.0, 0.0])


@pytest.fixture
def failing_provider() -> MockElevationService:
    """Provider failing like an unreachable API."""
    return MockElevationService(
        elevations=[0.0, 0.0],
        error=ProfileFetchError("Failed to fetch elevation data (status: 503)"),
    )


@pytest.fixture
def ctx() -> AnalyzerContext:
    """Fresh analyzer context."""
    return AnalyzerContext()


@pytest.fixture
def ctx_with_points() -> AnalyzerContext:
    """Context with both endpoints placed."""
    context = AnalyzerContext()
    context.click_map(point=POINT_A)
    context.click_map(point=POINT_B)
    return context
