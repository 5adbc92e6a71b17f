"""UI Actions - All action functions for the line of sight analyzer.

Centralizes the functions that modify UI state or run the analysis engine.

This module handles:
- Map clicks (handle_map_click)
- Running an analysis (run_analysis)
- Resetting the session (reset_analysis)

Streamlit infrastructure (rerun, map version) lives in infra.py so tests can
patch it.
"""

import logging
from typing import Literal

import streamlit as st

from los_analyzer.constants import ProfileConfig
from los_analyzer.core.errors import InvalidInputError, ProfileFetchError
from los_analyzer.core.path_analyzer import PathAnalyzer
from los_analyzer.model.geo_point import GeoPoint
from los_analyzer.model.message import ResultLockedMessage
from los_analyzer.ui.context import AnalyzerContext
from los_analyzer.ui.infra import bump_map_version
from los_analyzer.ui.validators import validate_distinct_points, validate_points_selected

logger = logging.getLogger(__name__)

# Which endpoint a map click places: cycle A -> B -> A, or always the same one
ClickTarget = Literal["auto", "A", "B"]

# Session state keys of control panel widgets (cleared on reset)
WIDGET_KEY_PREFIX = "ctl_"


# =============================================================================
# MAP CLICKS
# =============================================================================


def handle_map_click(ctx: AnalyzerContext, point: GeoPoint, target: ClickTarget = "auto") -> bool:
    """Apply a map click to the endpoint selection.

    In "auto" mode clicks follow the A -> B -> new A cycle, which is locked
    while a result is displayed. Targeting A or B explicitly moves that
    endpoint and discards the result.

    Returns:
        True if the selection changed.
    """
    if target == "auto":
        if not ctx.click_map(point=point):
            ResultLockedMessage().display()
            return False
        logger.info(f"[MAP] Click placed endpoint: A={ctx.selection.point_a}, B={ctx.selection.point_b}")
        return True

    index = {"A": 0, "B": 1}[target]
    ctx.move_endpoint(index=index, point=point)
    logger.info(f"[MAP] Moved endpoint {target} to {point}")
    return True


# =============================================================================
# ANALYSIS
# =============================================================================


def run_analysis(
    ctx: AnalyzerContext,
    analyzer: PathAnalyzer,
    steps: int = ProfileConfig.DEFAULT_STEPS,
) -> bool:
    """Validate the selection and run a full analysis.

    Validation problems are shown as toasts and leave the context untouched.
    Engine failures are logged and stored as the result error so the result
    panel can show them.

    Returns:
        True if an analysis was stored.
    """
    selection = ctx.selection
    msg = validate_points_selected(point_a=selection.point_a, point_b=selection.point_b)
    if msg is not None:
        msg.display()
        return False
    assert selection.point_a is not None and selection.point_b is not None

    msg = validate_distinct_points(point_a=selection.point_a, point_b=selection.point_b)
    if msg is not None:
        msg.display()
        return False

    settings = ctx.settings
    logger.info(f"[ANALYZE] Starting analysis {selection.point_a} -> {selection.point_b}")
    try:
        analysis = analyzer.analyze(
            start=selection.point_a,
            end=selection.point_b,
            height_a_m=settings.height_a_m,
            height_b_m=settings.height_b_m,
            use_curvature=settings.use_curvature,
            radio_specs=ctx.radio_specs_for_analysis,
            steps=steps,
        )
    except (InvalidInputError, ProfileFetchError) as e:
        logger.error(f"[ANALYZE] Analysis failed: {e}")
        ctx.result.set_error(str(e))
        return False

    ctx.result.set_analysis(analysis)
    logger.info(f"[ANALYZE] Done: {analysis.los_result.status_label}, {len(analysis.constraint_segments)} segments")
    return True


# =============================================================================
# RESET
# =============================================================================


def clear_widget_state() -> None:
    """Drop control panel widget values so they re-initialize from defaults."""
    for key in [k for k in st.session_state.keys() if str(k).startswith(WIDGET_KEY_PREFIX)]:
        del st.session_state[key]


def reset_analysis(ctx: AnalyzerContext) -> None:
    """Start over: no points, radio off, curvature on and a fresh map component."""
    ctx.reset()
    clear_widget_state()
    bump_map_version()
    logger.info("[RESET] Analyzer state reset")
