"""Geodesic calculations on Earth's surface.

Provides geographic helper functions for path analysis:
- Distance calculation (Haversine formula)
- Linear coordinate interpolation between path endpoints

All calculations use WGS84 spherical Earth approximation (R = 6,371 km).
"""

from math import atan2, cos, radians, sin, sqrt

from los_analyzer.constants import EarthConfig

# Earth's radius in meters (WGS84 spherical approximation)
EARTH_RADIUS_M = EarthConfig.RADIUS_M


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    All methods use WGS84 spherical Earth model (R = 6,371 km).
    Coordinates are in decimal degrees (WGS84).
    Distances are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters.
        """
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))

    @staticmethod
    def interpolate_lat_lon(
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        fraction: float,
    ) -> tuple[float, float]:
        """Linear interpolation between two coordinates in lat/lon space.

        This is the same straight-line sampling used to request terrain
        elevations, so constraint positions land on the sampled locations.

        Args:
            lat1, lon1: Start coordinate (decimal degrees)
            lat2, lon2: End coordinate (decimal degrees)
            fraction: 0 = start, 1 = end

        Returns:
            Tuple (lat, lon) of the interpolated point.
        """
        return (
            lat1 + (lat2 - lat1) * fraction,
            lon1 + (lon2 - lon1) * fraction,
        )
