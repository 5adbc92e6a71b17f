"""GeoPoint - A geographic coordinate on the map.

A GeoPoint is the location atom used throughout the analyzer:
- Path endpoints picked on the map
- Positions of constraint points along the path
- Sample locations sent to the elevation provider
"""

from dataclasses import dataclass
from math import isfinite

from los_analyzer.core.geo_calculator import GeoCalculator


@dataclass(frozen=True)
class GeoPoint:
    """A WGS84 coordinate in decimal degrees.

    Attributes:
        lat: Latitude in decimal degrees (-90 to 90)
        lon: Longitude in decimal degrees (-180 to 180)

    Example:
        point = GeoPoint(lat=-42.715, lon=170.965)
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if not (isfinite(self.lat) and isfinite(self.lon)):
            raise ValueError(f"GeoPoint coordinates must be finite, got ({self.lat}, {self.lon})")
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude {self.lat} outside [-90, 90]")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude {self.lon} outside [-180, 180]")

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Pydeck order."""
        return (self.lon, self.lat)

    def distance_to(self, other: "GeoPoint") -> float:
        """Calculate haversine distance to another point in meters."""
        return GeoCalculator.haversine_distance_m(
            lat1=self.lat,
            lon1=self.lon,
            lat2=other.lat,
            lon2=other.lon,
        )

    def interpolate(self, other: "GeoPoint", fraction: float) -> "GeoPoint":
        """Point at the given fraction along the straight lat/lon line to other."""
        lat, lon = GeoCalculator.interpolate_lat_lon(
            lat1=self.lat,
            lon1=self.lon,
            lat2=other.lat,
            lon2=other.lon,
            fraction=fraction,
        )
        return GeoPoint(lat=lat, lon=lon)

    def __repr__(self) -> str:
        return f"GeoPoint(lat={self.lat:.5f}, lon={self.lon:.5f})"
