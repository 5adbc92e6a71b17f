"""MapRenderer - Pydeck map rendering for the line of sight analyzer.

Renders the analysis on an interactive map using GPU-accelerated deck.gl:
- Topographic or satellite raster basemap
- Straight path line between the endpoints (PathLayer)
- Constraint segments as thick colored polylines with tooltips (PathLayer)
- First obstruction marker (ScatterplotLayer)
- Endpoints A and B as markers (ScatterplotLayer)

Key conventions:
- Uses [lon, lat] coordinate order (GeoJSON standard)
- Colors as RGBA lists [R, G, B, A] (0-255)
- Data prepared as list[dict] for GPU streaming
- pickable=True enables tooltips and click detection
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import pydeck as pdk

from los_analyzer.constants import MapConfig, StyleConfig
from los_analyzer.model.analysis import PathAnalysis
from los_analyzer.model.geo_point import GeoPoint
from los_analyzer.ui.basemap import Basemap, get_map_style

logger = logging.getLogger(__name__)


def hex_to_rgba(hex_color: str, alpha: int = 255) -> list[int]:
    """Convert "#RRGGBB" to a pydeck [R, G, B, A] list."""
    hex_color = hex_color.lstrip("#")
    return [int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16), alpha]


@dataclass
class LayerCollection:
    """Manages Pydeck layers with correct z-ordering.

    Z-order (back to front): path → constraints → obstruction → endpoints

    Endpoints go last so they stay visible on top of the thick constraint lines.
    """

    path: list[pdk.Layer] = field(default_factory=list)
    constraints: list[pdk.Layer] = field(default_factory=list)
    obstruction: list[pdk.Layer] = field(default_factory=list)
    endpoints: list[pdk.Layer] = field(default_factory=list)

    def get_ordered_layers(self) -> list[pdk.Layer]:
        """Return all layers in correct z-order (back to front)."""
        return self.path + self.constraints + self.obstruction + self.endpoints


class MapRenderer:
    """Renders endpoints and analysis results on a Pydeck map.

    Example:
        renderer = MapRenderer(basemap="topo")
        deck = renderer.render(point_a=a, point_b=b, analysis=analysis)
    """

    def __init__(self, basemap: Basemap = "topo") -> None:
        self.basemap = basemap

    def get_view_state(
        self,
        point_a: Optional[GeoPoint],
        point_b: Optional[GeoPoint],
    ) -> pdk.ViewState:
        """View centered on the path, point A, or the default start area."""
        if point_a is not None and point_b is not None:
            center = point_a.interpolate(other=point_b, fraction=0.5)
            zoom = MapConfig.SELECTED_ZOOM
        elif point_a is not None:
            center = point_a
            zoom = MapConfig.SELECTED_ZOOM
        else:
            center = GeoPoint(lat=MapConfig.START_CENTER_LAT, lon=MapConfig.START_CENTER_LON)
            zoom = MapConfig.DEFAULT_ZOOM

        return pdk.ViewState(
            latitude=center.lat,
            longitude=center.lon,
            zoom=zoom,
            min_zoom=MapConfig.MIN_ZOOM,
            pitch=0,
            bearing=0,
        )

    def render(
        self,
        point_a: Optional[GeoPoint],
        point_b: Optional[GeoPoint],
        analysis: Optional[PathAnalysis] = None,
    ) -> pdk.Deck:
        """Render complete map with all layers.

        Args:
            point_a: Endpoint A, if placed
            point_b: Endpoint B, if placed
            analysis: Last analysis of the A-B path, if any

        Returns:
            pdk.Deck object ready for display.
        """
        layers = LayerCollection()

        if point_a is not None and point_b is not None:
            layers.path.append(self._create_path_layer(point_a=point_a, point_b=point_b))

        if analysis is not None:
            if analysis.constraint_segments:
                layers.constraints.append(self._create_constraint_layer(analysis=analysis))
            obstruction_layer = self._create_obstruction_layer(analysis=analysis)
            if obstruction_layer is not None:
                layers.obstruction.append(obstruction_layer)

        layers.endpoints.append(self._create_endpoint_layer(point_a=point_a, point_b=point_b))

        return pdk.Deck(
            map_style=get_map_style(self.basemap),
            map_provider="mapbox",  # Required when map_style is a dict
            initial_view_state=self.get_view_state(point_a=point_a, point_b=point_b),
            layers=layers.get_ordered_layers(),
            tooltip=self._create_tooltip_config(),
            parameters={"pickingRadius": MapConfig.PICKING_RADIUS_PX},
        )

    def _create_path_layer(self, point_a: GeoPoint, point_b: GeoPoint) -> pdk.Layer:
        """Straight line between the endpoints."""
        color = StyleConfig.PATH_LINE_COLOR_SATELLITE if self.basemap == "satellite" else StyleConfig.PATH_LINE_COLOR_TOPO
        data = [
            {
                "type": "path",
                "id": "path",
                "path": [list(point_a.lon_lat), list(point_b.lon_lat)],
                "color": hex_to_rgba(color),
                "name": f"Path A → B ({point_a.distance_to(point_b) / 1000:.2f} km)",
            }
        ]
        return pdk.Layer(
            "PathLayer",
            data,
            get_path="path",
            get_color="color",
            get_width=StyleConfig.PATH_LINE_WIDTH,
            width_units="pixels",
            pickable=True,
            id="path",
        )

    def _create_constraint_layer(self, analysis: PathAnalysis) -> pdk.Layer:
        """Thick polylines over constrained stretches, colored by band."""
        data = [
            {
                "type": "constraint",
                "id": f"C{index}",
                "path": [list(p.lon_lat) for p in segment.positions],
                "color": hex_to_rgba(
                    StyleConfig.BAND_COLORS[segment.constraint_type.value],
                    alpha=StyleConfig.CONSTRAINT_LINE_ALPHA,
                ),
                "name": f"{segment.title}<br/>{segment.summary}",
            }
            for index, segment in enumerate(analysis.constraint_segments)
        ]
        return pdk.Layer(
            "PathLayer",
            data,
            get_path="path",
            get_color="color",
            get_width=StyleConfig.CONSTRAINT_LINE_WIDTH,
            width_units="pixels",
            cap_rounded=True,
            pickable=True,
            auto_highlight=True,
            id="constraints",
        )

    def _create_obstruction_layer(self, analysis: PathAnalysis) -> pdk.Layer | None:
        """Marker at the first obstruction, None for clear paths."""
        obstruction = analysis.los_result.obstruction
        if obstruction is None:
            return None

        position = analysis.start.interpolate(
            other=analysis.end,
            fraction=obstruction.distance_m / analysis.total_distance_m,
        )
        data = [
            {
                "type": "obstruction",
                "id": "obstruction",
                "position": list(position.lon_lat),
                "name": (
                    f"Obstruction at {obstruction.distance_m / 1000:.2f} km<br/>"
                    f"Terrain {obstruction.depth_m:.1f}m above line of sight"
                ),
            }
        ]
        return pdk.Layer(
            "ScatterplotLayer",
            data,
            get_position="position",
            get_radius=StyleConfig.ENDPOINT_RADIUS,
            radius_units="pixels",
            get_fill_color=hex_to_rgba(StyleConfig.OBSTRUCTION_MARKER_COLOR),
            get_line_color=[254, 202, 202, 255],
            stroked=True,
            line_width_min_pixels=2,
            pickable=True,
            id="obstruction",
        )

    def _create_endpoint_layer(
        self,
        point_a: Optional[GeoPoint],
        point_b: Optional[GeoPoint],
    ) -> pdk.Layer:
        """Markers for the placed endpoints."""
        data = [
            {
                "type": "endpoint",
                "id": label,
                "position": list(point.lon_lat),
                "color": hex_to_rgba(StyleConfig.ENDPOINT_COLORS[label]),
                "name": f"Point {label} ({point.lat:.5f}, {point.lon:.5f})",
            }
            for label, point in (("A", point_a), ("B", point_b))
            if point is not None
        ]
        return pdk.Layer(
            "ScatterplotLayer",
            data,
            get_position="position",
            get_radius=StyleConfig.ENDPOINT_RADIUS,
            radius_units="pixels",
            get_fill_color="color",
            get_line_color=[255, 255, 255, 255],
            stroked=True,
            line_width_min_pixels=2,
            pickable=True,
            auto_highlight=True,
            id="endpoints",
        )

    def _create_tooltip_config(self) -> dict[str, str | dict[str, str]]:
        """Create Pydeck tooltip configuration."""
        return {
            "html": "<b>{name}</b>",
            "style": {
                "backgroundColor": "rgba(255, 255, 255, 0.95)",
                "color": "#333",
                "padding": "6px 10px",
                "borderRadius": "4px",
            },
        }
