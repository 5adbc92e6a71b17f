"""Tests for LOSEvaluator - line of sight over terrain profiles.

Focus: first-violation policy, curvature influence, endpoint handling
and input validation.
"""

import pytest
from hypothesis import given, settings, strategies as st

from los_analyzer.core.curvature import CurvatureModel
from los_analyzer.core.errors import InvalidInputError
from los_analyzer.core.los_evaluator import LOSEvaluator, evaluate_line_of_sight, line_of_sight_height_m
from los_analyzer.model.terrain_sample import TerrainProfile, TerrainSample

from conftest import make_profile


class TestLineOfSightHeight:
    """Straight ray interpolation between antenna tops."""

    def test_interpolates_by_distance_fraction(self) -> None:
        assert line_of_sight_height_m(start_height_m=10, end_height_m=110, distance_m=250, total_distance_m=1000) == 35

    def test_flat_ray(self) -> None:
        assert line_of_sight_height_m(start_height_m=20, end_height_m=20, distance_m=700, total_distance_m=1000) == 20


class TestLOSEvaluator:
    """LOSEvaluator - obstruction detection."""

    def test_ridge_blocks_path(self, ridge_profile: TerrainProfile) -> None:
        """Profile [0, 100, 0] over [0, 500, 1000] with 1m masts is blocked at 500m."""
        result = evaluate_line_of_sight(
            samples=ridge_profile,
            total_distance_m=ridge_profile.total_distance_m,
            height_a_m=1,
            height_b_m=1,
            curvature_enabled=False,
        )
        assert not result.is_clear
        assert result.obstruction is not None
        assert result.obstruction.distance_m == 500
        assert result.obstruction.effective_terrain_height_m == 100
        assert result.obstruction.line_of_sight_height_m == 1
        assert result.obstruction.depth_m == 99

    def test_flat_terrain_is_clear(self, flat_profile: TerrainProfile) -> None:
        result = evaluate_line_of_sight(
            samples=flat_profile,
            total_distance_m=flat_profile.total_distance_m,
            height_a_m=10,
            height_b_m=10,
            curvature_enabled=False,
        )
        assert result.is_clear
        assert result.obstruction is None

    def test_terrain_touching_ray_is_clear(self, flat_profile: TerrainProfile) -> None:
        """Zero masts on flat ground: terrain equals the ray, which is not an obstruction."""
        result = evaluate_line_of_sight(
            samples=flat_profile,
            total_distance_m=flat_profile.total_distance_m,
            height_a_m=0,
            height_b_m=0,
            curvature_enabled=False,
        )
        assert result.is_clear

    def test_reports_first_violation_not_worst(self) -> None:
        """Small bump at 250m is reported even though the peak at 500m is higher."""
        profile = make_profile(elevations=[0.0, 20.0, 200.0, 0.0, 0.0], total_distance_m=1000.0)
        result = evaluate_line_of_sight(
            samples=profile,
            total_distance_m=1000.0,
            height_a_m=10,
            height_b_m=10,
            curvature_enabled=False,
        )
        assert result.obstruction is not None
        assert result.obstruction.distance_m == 250

    def test_endpoints_are_never_obstructions(self) -> None:
        """High endpoints with a deep valley between them are clear."""
        profile = make_profile(elevations=[500.0, 0.0, 500.0], total_distance_m=1000.0)
        result = evaluate_line_of_sight(
            samples=profile,
            total_distance_m=1000.0,
            height_a_m=1,
            height_b_m=1,
            curvature_enabled=False,
        )
        assert result.is_clear

    def test_curvature_blocks_long_flat_path(self) -> None:
        """50 km sea-level path with 10m masts: bulge at 5 km (≈13.2m) exceeds the ray."""
        profile = make_profile(elevations=[0.0] * 11, total_distance_m=50_000.0)
        flat_earth = LOSEvaluator(curvature=CurvatureModel(enabled=False)).evaluate(
            samples=profile, total_distance_m=50_000.0, height_a_m=10, height_b_m=10
        )
        curved = LOSEvaluator(curvature=CurvatureModel(enabled=True)).evaluate(
            samples=profile, total_distance_m=50_000.0, height_a_m=10, height_b_m=10
        )
        assert flat_earth.is_clear
        assert not curved.is_clear
        assert curved.obstruction is not None
        assert curved.obstruction.distance_m == 5000
        assert curved.obstruction.effective_terrain_height_m == pytest.approx(13.24, abs=0.01)

    def test_functional_shortcut_matches_class(self, ridge_profile: TerrainProfile) -> None:
        args = dict(samples=ridge_profile, total_distance_m=1000.0, height_a_m=1, height_b_m=1)
        assert evaluate_line_of_sight(**args, curvature_enabled=True) == LOSEvaluator().evaluate(**args)


class TestLOSEvaluatorValidation:
    """Invalid profiles raise InvalidInputError."""

    def test_single_sample_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="at least 2 samples"):
            LOSEvaluator().evaluate(
                samples=[TerrainSample(distance_m=0, elevation_m=0)],
                total_distance_m=1000,
                height_a_m=10,
                height_b_m=10,
            )

    @pytest.mark.parametrize("total", [0.0, -5.0])
    def test_non_positive_total_distance_raises(self, total: float) -> None:
        samples = [TerrainSample(distance_m=0, elevation_m=0), TerrainSample(distance_m=0, elevation_m=0)]
        with pytest.raises(InvalidInputError, match="positive"):
            LOSEvaluator().evaluate(samples=samples, total_distance_m=total, height_a_m=10, height_b_m=10)

    @pytest.mark.parametrize(
        "height_a,height_b",
        [
            pytest.param(float("nan"), 1.0, id="nan_a"),
            pytest.param(1.0, float("nan"), id="nan_b"),
            pytest.param(float("inf"), 1.0, id="inf_a"),
            pytest.param(1.0, float("-inf"), id="neg_inf_b"),
        ],
    )
    def test_non_finite_antenna_height_raises(
        self, ridge_profile: TerrainProfile, height_a: float, height_b: float
    ) -> None:
        """A NaN ray would compare False everywhere and report the ridge as clear."""
        with pytest.raises(InvalidInputError, match="must be finite"):
            evaluate_line_of_sight(
                samples=ridge_profile,
                total_distance_m=ridge_profile.total_distance_m,
                height_a_m=height_a,
                height_b_m=height_b,
                curvature_enabled=False,
            )

    def test_infinite_total_distance_raises(self, ridge_profile: TerrainProfile) -> None:
        with pytest.raises(InvalidInputError, match="finite"):
            LOSEvaluator().evaluate(samples=ridge_profile, total_distance_m=float("inf"), height_a_m=1, height_b_m=1)


class TestLOSHypothesis:
    """Property-based tests for LOS evaluation."""

    @given(
        elev_a=st.floats(min_value=-100.0, max_value=5000.0, allow_nan=False),
        elev_b=st.floats(min_value=-100.0, max_value=5000.0, allow_nan=False),
        height_a=st.floats(min_value=0.0, max_value=100.0, allow_nan=False),
        height_b=st.floats(min_value=0.0, max_value=100.0, allow_nan=False),
        total=st.floats(min_value=1.0, max_value=100_000.0, allow_nan=False),
        curvature=st.booleans(),
    )
    @settings(max_examples=50)
    def test_two_sample_profile_always_clear(
        self,
        elev_a: float,
        elev_b: float,
        height_a: float,
        height_b: float,
        total: float,
        curvature: bool,
    ) -> None:
        """Without interior samples there is nothing to block the ray."""
        profile = make_profile(elevations=[elev_a, elev_b], total_distance_m=total)
        result = evaluate_line_of_sight(
            samples=profile,
            total_distance_m=total,
            height_a_m=height_a,
            height_b_m=height_b,
            curvature_enabled=curvature,
        )
        assert result.is_clear

    @given(
        elevations=st.lists(st.floats(min_value=0.0, max_value=500.0, allow_nan=False), min_size=3, max_size=30),
        height=st.floats(min_value=0.0, max_value=100.0, allow_nan=False),
    )
    @settings(max_examples=50)
    def test_obstruction_is_reported_iff_terrain_pierces_ray(self, elevations: list[float], height: float) -> None:
        """Obstruction (when present) really lies above the ray, and nothing before it does."""
        total = 1000.0
        profile = make_profile(elevations=elevations, total_distance_m=total)
        result = evaluate_line_of_sight(
            samples=profile,
            total_distance_m=total,
            height_a_m=height,
            height_b_m=height,
            curvature_enabled=False,
        )
        start = elevations[0] + height
        end = elevations[-1] + height
        piercing = [
            s.distance_m
            for s in profile.samples[1:-1]
            if s.elevation_m > line_of_sight_height_m(start, end, s.distance_m, total)
        ]
        if piercing:
            assert result.obstruction is not None
            assert result.obstruction.distance_m == piercing[0]
        else:
            assert result.is_clear
