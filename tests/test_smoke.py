"""Smoke tests for module imports and configuration validation.

Quick tests that verify the system is correctly installed and configured.
"""

import importlib
from pathlib import Path

import pytest

from los_analyzer.constants import AntennaHeightConfig, ClearanceConfig, EarthConfig, RadioConfig, StyleConfig
from los_analyzer.model.constraint import ConstraintType
from los_analyzer.model.radio import AntennaType


# =============================================================================
# MODULE IMPORT TESTS
# =============================================================================


class TestModuleImports:
    """Parametrized smoke tests for module imports."""

    @pytest.mark.parametrize(
        "module_path,class_name",
        [
            # Core modules
            pytest.param("los_analyzer.core.geo_calculator", "GeoCalculator", id="core_geo"),
            pytest.param("los_analyzer.core.curvature", "CurvatureModel", id="core_curvature"),
            pytest.param("los_analyzer.core.los_evaluator", "LOSEvaluator", id="core_los"),
            pytest.param("los_analyzer.core.constraint_segmenter", "ConstraintSegmenter", id="core_segmenter"),
            pytest.param("los_analyzer.core.link_budget", "compute_link_budget", id="core_link_budget"),
            pytest.param("los_analyzer.core.elevation_service", "OpenElevationService", id="core_elevation"),
            pytest.param("los_analyzer.core.dem_service", "DEMService", id="core_dem"),
            pytest.param("los_analyzer.core.path_analyzer", "PathAnalyzer", id="core_analyzer"),
            # Model modules
            pytest.param("los_analyzer.model.geo_point", "GeoPoint", id="model_point"),
            pytest.param("los_analyzer.model.terrain_sample", "TerrainProfile", id="model_profile"),
            pytest.param("los_analyzer.model.los_result", "LOSResult", id="model_los"),
            pytest.param("los_analyzer.model.constraint", "ConstraintSegment", id="model_constraint"),
            pytest.param("los_analyzer.model.radio", "RadioSpecs", id="model_radio"),
            pytest.param("los_analyzer.model.analysis", "PathAnalysis", id="model_analysis"),
            # UI modules
            pytest.param("los_analyzer.ui.context", "AnalyzerContext", id="ui_context"),
            pytest.param("los_analyzer.ui.map_renderer", "MapRenderer", id="ui_map"),
            pytest.param("los_analyzer.ui.profile_chart", "ProfileChart", id="ui_chart"),
            pytest.param("los_analyzer.ui.control_panel", "ControlPanel", id="ui_controls"),
            pytest.param("los_analyzer.ui.result_panel", "ResultPanel", id="ui_results"),
        ],
    )
    def test_module_import(self, module_path: str, class_name: str) -> None:
        """Module can be imported without errors."""
        module = importlib.import_module(module_path)
        assert getattr(module, class_name) is not None


# =============================================================================
# CONFIGURATION VALIDATION TESTS
# =============================================================================


class TestConfigurationValidation:
    """Tests that configuration constants are valid and consistent."""

    def test_clearance_thresholds_ordered(self) -> None:
        assert (
            ClearanceConfig.SEVERE_OBSTRUCTION_BELOW_M
            < ClearanceConfig.OBSTRUCTION_BELOW_M
            < ClearanceConfig.TIGHT_CLEARANCE_BELOW_M
        )

    def test_effective_radius(self) -> None:
        assert EarthConfig.EFFECTIVE_RADIUS_M == pytest.approx(8_494_666.67, abs=0.01)

    def test_default_heights_in_range(self) -> None:
        for height in (AntennaHeightConfig.DEFAULT_A_M, AntennaHeightConfig.DEFAULT_B_M):
            assert AntennaHeightConfig.MIN_M <= height <= AntennaHeightConfig.MAX_M

    def test_radio_defaults_in_slider_ranges(self) -> None:
        checks = [
            (RadioConfig.DEFAULT_FREQUENCY_MHZ, RadioConfig.FREQUENCY_RANGE_MHZ),
            (RadioConfig.DEFAULT_TX_POWER_DBM, RadioConfig.TX_POWER_RANGE_DBM),
            (RadioConfig.DEFAULT_TX_GAIN_DBI, RadioConfig.ANTENNA_GAIN_RANGE_DBI),
            (RadioConfig.DEFAULT_RX_GAIN_DBI, RadioConfig.ANTENNA_GAIN_RANGE_DBI),
            (RadioConfig.DEFAULT_RX_SENSITIVITY_DBM, RadioConfig.RX_SENSITIVITY_RANGE_DBM),
        ]
        for value, (low, high, _step) in checks:
            assert low <= value <= high

    def test_every_antenna_type_has_preset(self) -> None:
        assert {t.value for t in AntennaType} == set(RadioConfig.ANTENNA_PRESETS)

    def test_every_constraint_type_has_color(self) -> None:
        assert {t.value for t in ConstraintType} < set(StyleConfig.BAND_COLORS)
        assert "good" in StyleConfig.BAND_COLORS


# =============================================================================
# PACKAGING TESTS
# =============================================================================


class TestPackaging:
    """Package metadata in setup.py."""

    def test_project_metadata(self) -> None:
        setup_py = (Path(__file__).parent.parent / "setup.py").read_text(encoding="utf-8")
        assert 'name="los_analyzer"' in setup_py
        assert 'author="Line of Sight Analyzer contributors"' in setup_py
        assert "author_email" not in setup_py
