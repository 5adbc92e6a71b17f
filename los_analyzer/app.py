"""Line of Sight Analyzer - Interactive terrain visibility and radio link tool.

Pick two points on the map, set antenna heights and check whether the terrain
blocks the line of sight between them. Optionally estimates a free-space radio
link budget for clear paths.

Run: streamlit run los_analyzer/app.py
"""

import logging
import traceback

import streamlit as st

from los_analyzer.constants import AppConfig, ChartConfig, DEMConfig
from los_analyzer.core.dem_service import DEMService
from los_analyzer.core.elevation_service import DEMProfileService, OpenElevationService, TerrainProfileProvider
from los_analyzer.core.path_analyzer import PathAnalyzer
from los_analyzer.ui import (
    AnalyzerContext,
    ControlPanel,
    MapRenderer,
    ProfileChart,
    ResultPanel,
    handle_map_click,
    reset_analysis,
    run_analysis,
)
from los_analyzer.ui.infra import trigger_rerun
from los_analyzer.ui.pydeck_click_handler import render_pydeck_map

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


@st.cache_resource
def get_analyzer() -> PathAnalyzer:
    """Shared analyzer; uses the local DEM when present, else Open-Elevation."""
    provider: TerrainProfileProvider
    if DEMConfig.LOCAL_DEM_PATH.exists():
        logger.info(f"Using local DEM {DEMConfig.LOCAL_DEM_PATH}")
        provider = DEMProfileService(dem=DEMService(dem_path=DEMConfig.LOCAL_DEM_PATH))
    else:
        logger.info("Using Open-Elevation API")
        provider = OpenElevationService()
    return PathAnalyzer(provider=provider)


def init_session_state() -> None:
    """Initialize session state with the analyzer context."""
    if "context" not in st.session_state:
        st.session_state.context = AnalyzerContext()

    if "map_version" not in st.session_state:
        st.session_state.map_version = 0


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()

    st.title(f"{AppConfig.ICON} {AppConfig.TITLE}")
    st.caption(AppConfig.SUBTITLE)

    try:
        _run_app_ui()
    except Exception as e:
        # Log full traceback for debugging
        error_msg = f"{type(e).__name__}: {e}"
        full_traceback = traceback.format_exc()
        logger.error(f"[UI] UI error caught: {error_msg}\n{full_traceback}")

        st.error(f"⚠️ [UI] Something went wrong: {error_msg}")

        if st.button("🔄 Reset and Continue", type="primary"):
            reset_analysis(ctx=st.session_state.context)
            trigger_rerun()


def _run_app_ui() -> None:
    """Run the main application UI. Separated for error handling wrapper."""
    ctx: AnalyzerContext = st.session_state.context
    analyzer = get_analyzer()

    actions = ControlPanel(context=ctx).render()

    if actions["reset"]:
        reset_analysis(ctx=ctx)
        trigger_rerun()

    if actions["analyze"]:
        with st.spinner("Fetching terrain profile..."):
            run_analysis(ctx=ctx, analyzer=analyzer)

    col_map, col_result = st.columns([3, 1])

    with col_map:
        renderer = MapRenderer(basemap=actions["basemap"])
        deck = renderer.render(
            point_a=ctx.selection.point_a,
            point_b=ctx.selection.point_b,
            analysis=ctx.result.analysis,
        )
        click_result = render_pydeck_map(
            deck=deck,
            key=f"main_map_{st.session_state.map_version}",
            height=ChartConfig.MAP_HEIGHT,
        )
        point = click_result.geo_point
        if point is not None and handle_map_click(ctx=ctx, point=point, target=actions["click_target"]):
            trigger_rerun()

    with col_result:
        ResultPanel(result=ctx.result, radio_requested=ctx.settings.use_radio).render()

    # Full-width profile below the map
    if ctx.result.analysis is not None:
        chart = ProfileChart(width=ChartConfig.DEFAULT_WIDTH, height=ChartConfig.PROFILE_HEIGHT)
        fig = chart.render(analysis=ctx.result.analysis)
        st.plotly_chart(fig, width="stretch", key="path_profile")


if __name__ == "__main__":
    main()
