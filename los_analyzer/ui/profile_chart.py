"""ProfileChart - Plotly elevation profile rendering.

Renders the terrain profile of an analyzed path showing:
- Colored background bands for clearance quality (good / tight / obstructed)
- Effective terrain (elevation plus earth bulge)
- Raw terrain, only when curvature correction is applied
- Line of sight between the antennas (green clear, red blocked)
- First obstruction marker
"""

import logging

import plotly.graph_objects as go

from los_analyzer.constants import ChartConfig, StyleConfig
from los_analyzer.core.constraint_segmenter import fill_profile_bands
from los_analyzer.core.curvature import CurvatureModel
from los_analyzer.model.analysis import PathAnalysis

logger = logging.getLogger(__name__)

BAND_LABELS = {
    "good": "Good",
    "clearance": "Tight clearance",
    "obstruction": "Obstruction",
    "severe_obstruction": "Severe obstruction",
}


class ProfileChart:
    """Renders elevation profiles using Plotly.

    Example:
        chart = ProfileChart(width=800, height=320)
        fig = chart.render(analysis=analysis)
        st.plotly_chart(fig)
    """

    def __init__(
        self,
        width: int = ChartConfig.DEFAULT_WIDTH,
        height: int = ChartConfig.PROFILE_HEIGHT,
    ) -> None:
        """Initialize profile chart renderer.

        Args:
            width: Chart width in pixels
            height: Chart height in pixels
        """
        self.width = width
        self.height = height

    def render(self, analysis: PathAnalysis) -> go.Figure:
        """Render the elevation profile of an analyzed path.

        Args:
            analysis: Completed analysis to visualize

        Returns:
            Plotly Figure object.
        """
        profile = analysis.profile
        if len(profile) < 2:
            raise ValueError("Analysis profile must have at least 2 samples to render")

        total = analysis.total_distance_m
        curvature = CurvatureModel(enabled=analysis.use_curvature)
        distances = profile.distances
        raw_elevations = profile.elevations
        effective_elevations = [
            elev + curvature.height_m(distance_from_start_m=d, total_distance_m=total)
            for d, elev in zip(distances, raw_elevations)
        ]
        los_x = [0.0, total]
        los_y = [analysis.start_los_height_m, analysis.end_los_height_m]

        all_elevs = effective_elevations + raw_elevations + los_y
        min_elev = min(all_elevs) - ChartConfig.ELEVATION_PADDING_M
        max_elev = max(all_elevs) + ChartConfig.ELEVATION_PADDING_M

        fig = go.Figure()

        # 1. Clearance bands behind everything
        self._add_bands(fig=fig, analysis=analysis)

        # 2. Raw terrain (dashed) below the bulged terrain
        if analysis.use_curvature:
            fig.add_trace(
                go.Scatter(
                    x=distances,
                    y=raw_elevations,
                    mode="lines",
                    line=dict(color=StyleConfig.RAW_TERRAIN_COLOR, width=1, dash="dot"),
                    name="Terrain (raw)",
                    hovertemplate="Distance: %{x:.0f}m<br>Raw elevation: %{y:.0f}m<extra></extra>",
                )
            )

        # 3. Effective terrain
        terrain_name = "Terrain (with curvature)" if analysis.use_curvature else "Terrain"
        fig.add_trace(
            go.Scatter(
                x=distances,
                y=effective_elevations,
                mode="lines",
                fill="tozeroy",
                fillcolor="rgba(139, 90, 43, 0.4)",
                line=dict(color="rgb(101, 67, 33)", width=2),
                name=terrain_name,
                hovertemplate="Distance: %{x:.0f}m<br>Elevation: %{y:.0f}m<extra></extra>",
            )
        )

        # 4. Line of sight
        los_color = StyleConfig.LOS_CLEAR_COLOR if analysis.los_result.is_clear else StyleConfig.LOS_BLOCKED_COLOR
        fig.add_trace(
            go.Scatter(
                x=los_x,
                y=los_y,
                mode="lines+markers",
                line=dict(color=los_color, width=3),
                marker=dict(size=8, color=los_color),
                name="Line of sight",
                hovertemplate="Distance: %{x:.0f}m<br>Antenna: %{y:.0f}m<extra></extra>",
            )
        )

        # 5. First obstruction
        obstruction = analysis.los_result.obstruction
        if obstruction is not None:
            fig.add_trace(
                go.Scatter(
                    x=[obstruction.distance_m],
                    y=[obstruction.effective_terrain_height_m],
                    mode="markers",
                    marker=dict(size=12, color=StyleConfig.OBSTRUCTION_MARKER_COLOR, symbol="x"),
                    name="Obstruction",
                    hovertemplate=(
                        f"Obstruction<br>Distance: {obstruction.distance_m:.0f}m<br>"
                        f"Terrain: {obstruction.effective_terrain_height_m:.0f}m<br>"
                        f"Line of sight: {obstruction.line_of_sight_height_m:.0f}m<extra></extra>"
                    ),
                )
            )

        fig.update_layout(
            title=dict(
                text=f"📡 Path profile: {total / 1000:.2f} km | {analysis.los_result.status_label}",
                font=dict(size=12),
            ),
            xaxis=dict(
                title="Distance (m)",
                showgrid=True,
                gridcolor="rgba(200, 200, 200, 0.3)",
                range=[0, total],
            ),
            yaxis=dict(
                title="Elevation (m)",
                showgrid=True,
                gridcolor="rgba(200, 200, 200, 0.3)",
                range=[min_elev, max_elev],
            ),
            legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
            width=self.width,
            height=self.height,
            margin=dict(l=50, r=30, t=50, b=50),
            plot_bgcolor="white",
        )
        return fig

    def _add_bands(self, fig: go.Figure, analysis: PathAnalysis) -> None:
        """Shade the whole path with its clearance bands."""
        bands = fill_profile_bands(
            segments=analysis.constraint_segments,
            total_distance_m=analysis.total_distance_m,
        )
        for band in bands:
            color = StyleConfig.BAND_COLORS[band.band]
            fig.add_vrect(
                x0=band.start_m,
                x1=band.end_m,
                fillcolor=f"rgba{self._hex_to_rgba(hex_color=color, alpha=StyleConfig.BAND_FILL_ALPHA)}",
                line_width=0,
                layer="below",
                name=BAND_LABELS[band.band],
            )
        logger.debug(f"Profile chart: {len(bands)} bands over {analysis.total_distance_m:.0f}m")

    def _hex_to_rgba(self, hex_color: str, alpha: float) -> tuple:
        """Convert hex color to RGBA tuple."""
        hex_color = hex_color.lstrip("#")
        r = int(hex_color[0:2], 16)
        g = int(hex_color[2:4], 16)
        b = int(hex_color[4:6], 16)
        return (r, g, b, alpha)
