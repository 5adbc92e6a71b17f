"""Terrain profile providers.

A provider samples terrain elevations along the straight line between two
endpoints and returns a TerrainProfile:
- N + 1 samples evenly spaced by fraction along the lat/lon line
- Sample i sits at distance i / N * great-circle distance
- The last sample's distance equals the great-circle distance

Providers:
- OpenElevationService: Open-Elevation HTTP API (https://open-elevation.com)
- DEMProfileService: local GeoTIFF via DEMService

Any failure surfaces as ProfileFetchError, never as an empty/clear profile.
"""

import logging
import time
from abc import ABC, abstractmethod
from math import isfinite
from typing import Optional

import requests

from los_analyzer.constants import ProfileConfig
from los_analyzer.core.dem_service import DEMService
from los_analyzer.core.errors import InvalidInputError, ProfileFetchError
from los_analyzer.model.geo_point import GeoPoint
from los_analyzer.model.terrain_sample import TerrainProfile

logger = logging.getLogger(__name__)


def sample_locations(start: GeoPoint, end: GeoPoint, steps: int) -> list[GeoPoint]:
    """Evenly spaced locations from start to end (steps + 1 points)."""
    if steps < ProfileConfig.MIN_STEPS:
        raise InvalidInputError(f"Profile needs at least {ProfileConfig.MIN_STEPS} step, got {steps}")
    return [start.interpolate(other=end, fraction=i / steps) for i in range(steps + 1)]


class TerrainProfileProvider(ABC):
    """Base class for terrain profile sources.

    Subclasses only implement get_elevations(); profile assembly is shared.
    """

    @abstractmethod
    def get_elevations(self, locations: list[GeoPoint]) -> list[float]:
        """Elevation in meters for every location, in order.

        Raises:
            ProfileFetchError: If any elevation cannot be obtained.
        """

    def fetch_profile(
        self,
        start: GeoPoint,
        end: GeoPoint,
        steps: int = ProfileConfig.DEFAULT_STEPS,
    ) -> TerrainProfile:
        """Sample the terrain between two endpoints.

        Args:
            start: Path start
            end: Path end
            steps: Number of intervals (profile has steps + 1 samples)

        Returns:
            TerrainProfile covering the full great-circle distance.

        Raises:
            ProfileFetchError: If the elevation source fails.
        """
        locations = sample_locations(start=start, end=end, steps=steps)
        elevations = self.get_elevations(locations=locations)
        if len(elevations) != len(locations):
            raise ProfileFetchError(
                f"Expected {len(locations)} elevations, got {len(elevations)}"
            )
        total_distance_m = start.distance_to(end)
        return TerrainProfile.from_elevations(elevations=elevations, total_distance_m=total_distance_m)


class OpenElevationService(TerrainProfileProvider):
    """Elevation lookups through the Open-Elevation REST API.

    Example:
        provider = OpenElevationService()
        profile = provider.fetch_profile(start=a, end=b, steps=100)
    """

    def __init__(
        self,
        url: str = ProfileConfig.OPEN_ELEVATION_URL,
        timeout_s: float = ProfileConfig.REQUEST_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize API client.

        Args:
            url: Lookup endpoint accepting POSTed locations
            timeout_s: Request timeout in seconds
            session: Optional requests session (for connection reuse or tests)
        """
        self.url = url
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def get_elevations(self, locations: list[GeoPoint]) -> list[float]:
        payload = {"locations": [{"latitude": p.lat, "longitude": p.lon} for p in locations]}
        logger.info(f"Requesting {len(locations)} elevations from {self.url}")
        start_time = time.time()

        try:
            response = self.session.post(
                self.url,
                json=payload,
                headers={"Accept": "application/json"},
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise ProfileFetchError(f"Failed to fetch elevation data ({type(e).__name__}: {e})") from e

        if not response.ok:
            raise ProfileFetchError(f"Failed to fetch elevation data (status: {response.status_code})")

        try:
            data = response.json()
        except ValueError as e:
            raise ProfileFetchError("Invalid elevation data received from API.") from e

        results = data.get("results") if isinstance(data, dict) else None
        if not results or len(results) != len(locations):
            raise ProfileFetchError("Invalid elevation data received from API.")

        elevations = []
        for result in results:
            elevation = result.get("elevation") if isinstance(result, dict) else None
            try:
                value = float(elevation)
            except (TypeError, ValueError) as e:
                raise ProfileFetchError("Invalid elevation data received from API.") from e
            if not isfinite(value):
                raise ProfileFetchError("Invalid elevation data received from API.")
            elevations.append(value)

        elapsed = time.time() - start_time
        logger.info(f"Received {len(elevations)} elevations in {elapsed:.2f}s")
        return elevations


class DEMProfileService(TerrainProfileProvider):
    """Elevation lookups from a local GeoTIFF DEM.

    Example:
        provider = DEMProfileService(dem=DEMService(dem_path=Path("data/dem.tif")))
    """

    def __init__(self, dem: DEMService) -> None:
        self.dem = dem

    def get_elevations(self, locations: list[GeoPoint]) -> list[float]:
        try:
            elevations = self.dem.get_elevations(points=[p.lon_lat for p in locations])
        except FileNotFoundError as e:
            raise ProfileFetchError(str(e)) from e

        for location, elevation in zip(locations, elevations):
            if elevation is None:
                west, south, east, north = self.dem.bounds
                raise ProfileFetchError(
                    f"No elevation data at ({location.lat:.4f}, {location.lon:.4f}) - outside DEM coverage "
                    f"(lat {south:.3f}..{north:.3f}, lon {west:.3f}..{east:.3f})"
                )
        return elevations
