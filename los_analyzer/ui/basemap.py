"""Basemaps for the analyzer map using free raster tiles.

Provides two basemap modes, both as Mapbox GL style dicts:
- Topographic: OpenTopoMap (contour lines, good for judging ridges)
- Satellite: Esri World Imagery

Why map_style dict instead of TileLayer?
pydeck's TileLayer fetches tiles but needs a JavaScript renderSubLayers
callback to draw them, which pydeck does not expose. deck.gl renders raster
sources from a style dict natively (requires map_provider="mapbox", no API key).
"""

import logging
from typing import Literal

logger = logging.getLogger(__name__)

Basemap = Literal["topo", "satellite"]

# OpenTopoMap - multiple subdomains for parallel loading
OPENTOPOMAP_TILES_ABC = [
    "https://a.tile.opentopomap.org/{z}/{x}/{y}.png",
    "https://b.tile.opentopomap.org/{z}/{x}/{y}.png",
    "https://c.tile.opentopomap.org/{z}/{x}/{y}.png",
]

ESRI_WORLD_IMAGERY_TILES = [
    "https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
]


def raster_style(source_id: str, tiles: list[str], attribution: str, maxzoom: int) -> dict[str, object]:
    """Build a Mapbox GL style dict rendering one raster tile source."""
    return {
        "version": 8,
        "sources": {
            source_id: {
                "type": "raster",
                "tiles": tiles,
                "tileSize": 256,
                "attribution": attribution,
            }
        },
        "layers": [
            {
                "id": source_id,
                "type": "raster",
                "source": source_id,
                "minzoom": 0,
                "maxzoom": maxzoom,
            }
        ],
    }


OPENTOPOMAP_STYLE = raster_style(
    source_id="opentopomap",
    tiles=OPENTOPOMAP_TILES_ABC,
    attribution=(
        '© <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors, '
        '© <a href="https://opentopomap.org">OpenTopoMap</a> '
        '(<a href="https://creativecommons.org/licenses/by-sa/3.0/">CC-BY-SA</a>)'
    ),
    maxzoom=17,
)

SATELLITE_STYLE = raster_style(
    source_id="esri_world_imagery",
    tiles=ESRI_WORLD_IMAGERY_TILES,
    attribution="© Esri, Source: Esri, i-cubed, USDA, USGS, AEX, GeoEye, Getmapping, Aerogrid, IGN, IGP, UPR-EGP",
    maxzoom=18,
)


def get_map_style(basemap: Basemap) -> dict[str, object]:
    """Style dict for the requested basemap."""
    if basemap == "satellite":
        return SATELLITE_STYLE
    return OPENTOPOMAP_STYLE
