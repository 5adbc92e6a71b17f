"""Digital Elevation Model (DEM) service for local terrain elevation queries.

Provides access to a GeoTIFF elevation raster:
- Fast O(1) elevation lookup using pre-loaded NumPy array
- Automatic coordinate transformation from WGS84 to DEM's native CRS
- Thread-safe lazy loading on first query

Any single-band DEM works, e.g. SRTM or Copernicus GLO-30 tiles.
"""

import logging
import threading
import time
from pathlib import Path
from typing import Optional

import numpy as np
import rasterio
from rasterio.warp import transform

from los_analyzer.constants import DEMConfig

logger = logging.getLogger(__name__)


class DEMService:
    """Elevation sampling from a GeoTIFF DEM.

    The DEM array is loaded on first access and cached for fast subsequent queries.

    Example:
        dem = DEMService(dem_path=Path("data/dem.tif"))
        elevation = dem.get_elevation(lon=170.965, lat=-42.715)
    """

    _load_lock = threading.Lock()

    def __init__(self, dem_path: Optional[Path] = None) -> None:
        """Initialize DEM service.

        Args:
            dem_path: Path to DEM file (uses LOCAL_DEM_PATH by default)
        """
        self._dem_path = Path(dem_path) if dem_path is not None else DEMConfig.LOCAL_DEM_PATH
        self._dem = None
        self._dem_crs: Optional[str] = None
        self._dem_array: Optional[np.ndarray] = None
        self._dem_transform = None
        self._dem_nodata = None

    @property
    def dem_path(self) -> Path:
        return self._dem_path

    @property
    def is_loaded(self) -> bool:
        """Check if DEM data has been fully loaded into memory."""
        return self._dem_transform is not None

    def _ensure_loaded(self) -> None:
        """Load DEM into memory on first access (thread-safe)."""
        # Fast path: already loaded
        if self.is_loaded:
            return

        with self._load_lock:
            # Double-check after acquiring lock
            if self.is_loaded:
                return

            dem_path = self._dem_path
            if not dem_path.exists():
                raise FileNotFoundError(f"DEM file not found at {dem_path}")

            logger.info(f"Loading DEM from {dem_path}...")
            start_time = time.time()

            self._dem = rasterio.open(dem_path)
            self._dem_crs = self._dem.crs.to_string() if self._dem.crs else DEMConfig.WGS84_CRS
            self._dem_array = self._dem.read(1)
            self._dem_nodata = self._dem.nodata
            # Set _dem_transform LAST - this is what is_loaded checks
            self._dem_transform = self._dem.transform

            elapsed = time.time() - start_time
            logger.info(f"DEM loaded in {elapsed:.2f}s (shape: {self._dem_array.shape}, CRS: {self._dem_crs})")

    def get_elevation(self, lon: float, lat: float) -> float | None:
        """Get elevation at a single point.

        Args:
            lon: Longitude in decimal degrees (WGS84)
            lat: Latitude in decimal degrees (WGS84)

        Returns:
            Elevation in meters, or None if outside coverage or invalid.
        """
        return self.get_elevations(points=[(lon, lat)])[0]

    def get_elevations(self, points: list[tuple[float, float]]) -> list[float | None]:
        """Get elevations for many (lon, lat) points with one CRS transform.

        Args:
            points: List of (lon, lat) tuples in decimal degrees (WGS84)

        Returns:
            Elevation in meters per point, None where outside coverage or no-data.
        """
        self._ensure_loaded()
        if not points:
            return []

        lons = [p[0] for p in points]
        lats = [p[1] for p in points]
        if self._dem_crs != DEMConfig.WGS84_CRS:
            xs, ys = transform(DEMConfig.WGS84_CRS, self._dem_crs, lons, lats)
        else:
            xs, ys = lons, lats

        rows_max, cols_max = self._dem_array.shape
        inverse = ~self._dem_transform
        elevations: list[float | None] = []
        for lon, lat, x, y in zip(lons, lats, xs, ys):
            col, row = inverse * (x, y)
            col, row = int(col), int(row)

            if row < 0 or row >= rows_max or col < 0 or col >= cols_max:
                logger.warning(f"Coordinates outside DEM bounds: lon={lon}, lat={lat} (row={row}, col={col})")
                elevations.append(None)
                continue

            elev = self._dem_array[row, col]
            if self._dem_nodata is not None and elev == self._dem_nodata:
                logger.warning(f"No-data value at coordinates: lon={lon}, lat={lat} (raw_value={elev})")
                elevations.append(None)
                continue
            if np.isnan(elev):
                logger.warning(f"NaN elevation at coordinates: lon={lon}, lat={lat}")
                elevations.append(None)
                continue

            elevations.append(float(elev))

        return elevations

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return (west, south, east, north) bounds in WGS84."""
        self._ensure_loaded()
        b = self._dem.bounds

        if self._dem_crs != DEMConfig.WGS84_CRS:
            corners_x = [b.left, b.right, b.left, b.right]
            corners_y = [b.bottom, b.bottom, b.top, b.top]
            lons, lats = transform(self._dem_crs, DEMConfig.WGS84_CRS, corners_x, corners_y)
            return min(lons), min(lats), max(lons), max(lats)

        return b.left, b.bottom, b.right, b.top
