"""Pydeck click handler using streamlit-deckgl for map click support.

Uses st_deckgl from streamlit-deckgl to capture ALL click events including
clicks on empty map space, not just object selections.

The key difference from st.pydeck_chart:
- st.pydeck_chart: Only returns object selections (pickable=True objects)
- st_deckgl: Returns full deck.gl onClick event with coordinate field for ALL clicks
"""

import logging
from dataclasses import dataclass
from typing import Any

import pydeck as pdk
import streamlit as st
from streamlit_deckgl import st_deckgl  # type: ignore[import-untyped]

from los_analyzer.constants import ChartConfig
from los_analyzer.model.geo_point import GeoPoint

logger = logging.getLogger(__name__)


@dataclass
class PydeckClickResult:
    """Result from Pydeck click detection.

    Attributes:
        clicked_object: The picked deck.gl object data (dict) or None if map click
        clicked_coordinate: [lon, lat] of click location (always available for clicks)
    """

    clicked_object: dict[str, Any] | None
    clicked_coordinate: list[float] | None

    @property
    def has_click(self) -> bool:
        return self.clicked_coordinate is not None

    @property
    def geo_point(self) -> GeoPoint | None:
        """Click location as a GeoPoint, None if no (valid) coordinate."""
        if self.clicked_coordinate is None:
            return None
        lon, lat = self.clicked_coordinate
        try:
            return GeoPoint(lat=lat, lon=lon)
        except ValueError:
            logger.warning(f"Ignoring click outside valid coordinates: {self.clicked_coordinate}")
            return None

    @staticmethod
    def empty() -> "PydeckClickResult":
        """Return empty result (no click detected)."""
        return PydeckClickResult(clicked_object=None, clicked_coordinate=None)


def parse_click_event(event: dict[str, Any] | None) -> PydeckClickResult:
    """Extract click data from a st_deckgl event.

    st_deckgl SPREADS object properties into the event dict (no "object" key):
    - Map click: {coordinate: [lon, lat], eventType: "click"}
    - Object click: {type: ..., id: ..., coordinate: [lon, lat], eventType: "click"}
    """
    if not event or not isinstance(event, dict):
        return PydeckClickResult.empty()

    clicked_coordinate: list[float] | None = None
    coord = event.get("coordinate")
    if isinstance(coord, (list, tuple)) and len(coord) >= 2:
        clicked_coordinate = [float(coord[0]), float(coord[1])]

    clicked_object: dict[str, Any] | None = None
    if event.get("type") and event["type"] != "click":
        clicked_object = {k: v for k, v in event.items() if k not in ("coordinate", "eventType")}

    if clicked_coordinate is None and clicked_object is None:
        return PydeckClickResult.empty()
    return PydeckClickResult(clicked_object=clicked_object, clicked_coordinate=clicked_coordinate)


def get_click_id(obj: dict[str, Any] | None, coord: list[float] | None) -> str:
    """Generate unique ID for click deduplication."""
    parts = []
    if obj:
        obj_type = obj.get("type", "")
        obj_id = obj.get("id", "")
        if obj_type and obj_id:
            parts.append(f"{obj_type}_{obj_id}")
    if coord:
        # Round coordinates for dedup tolerance
        parts.append(f"coord_{coord[0]:.5f}_{coord[1]:.5f}")
    return "_".join(parts)


def render_pydeck_map(
    deck: pdk.Deck,
    key: str,
    height: int = ChartConfig.MAP_HEIGHT,
) -> PydeckClickResult:
    """Render Pydeck map with full click support.

    st_deckgl keeps returning the last event on every rerun, so the previous
    click ID is remembered in session state and repeats are dropped.

    Args:
        deck: Configured pydeck.Deck object
        key: Unique key for this component instance
        height: Height in pixels

    Returns:
        PydeckClickResult with click info, empty if nothing new was clicked.
    """
    last_click_key = f"_deckgl_last_click_{key}"
    if last_click_key not in st.session_state:
        st.session_state[last_click_key] = None

    # MUST pass events=['click'] to enable click detection
    event = st_deckgl(deck, key=key, height=height, events=["click"])
    result = parse_click_event(event)
    if result.clicked_coordinate is None and result.clicked_object is None:
        return result

    click_id = get_click_id(obj=result.clicked_object, coord=result.clicked_coordinate)
    if click_id == st.session_state.get(last_click_key):
        return PydeckClickResult.empty()

    st.session_state[last_click_key] = click_id
    logger.debug(f"[MAP] Click detected: object={result.clicked_object is not None}, coord={result.clicked_coordinate}")
    return result
