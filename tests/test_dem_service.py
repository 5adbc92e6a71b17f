"""Tests for DEMService using a tiny GeoTIFF written to tmp_path.

Raster layout (EPSG:4326, 0.5° pixels, origin lon 170 / lat -42):

    lat -42.0 .. -42.5 |  100  |  200  |
    lat -42.5 .. -43.0 |  300  | nodata|
                        170-170.5 170.5-171
"""

from pathlib import Path

import numpy as np
import pytest
import rasterio
from rasterio.transform import from_origin

from los_analyzer.core.dem_service import DEMService
from los_analyzer.core.elevation_service import DEMProfileService
from los_analyzer.core.errors import ProfileFetchError
from los_analyzer.model.geo_point import GeoPoint

NODATA = -9999.0


@pytest.fixture
def tiny_dem_path(tmp_path: Path) -> Path:
    """2x2 GeoTIFF with one no-data pixel."""
    path = tmp_path / "tiny_dem.tif"
    data = np.array([[100.0, 200.0], [300.0, NODATA]], dtype=np.float32)
    with rasterio.open(
        path,
        "w",
        driver="GTiff",
        height=2,
        width=2,
        count=1,
        dtype="float32",
        crs="EPSG:4326",
        transform=from_origin(170.0, -42.0, 0.5, 0.5),
        nodata=NODATA,
    ) as dst:
        dst.write(data, 1)
    return path


class TestDEMService:
    """DEM loading and elevation lookups."""

    def test_lazy_loading(self, tiny_dem_path: Path) -> None:
        dem = DEMService(dem_path=tiny_dem_path)
        assert not dem.is_loaded
        dem.get_elevation(lon=170.25, lat=-42.25)
        assert dem.is_loaded

    @pytest.mark.parametrize(
        "lon,lat,expected",
        [
            pytest.param(170.25, -42.25, 100.0, id="north_west"),
            pytest.param(170.75, -42.25, 200.0, id="north_east"),
            pytest.param(170.25, -42.75, 300.0, id="south_west"),
        ],
    )
    def test_get_elevation(self, tiny_dem_path: Path, lon: float, lat: float, expected: float) -> None:
        assert DEMService(dem_path=tiny_dem_path).get_elevation(lon=lon, lat=lat) == expected

    def test_nodata_is_none(self, tiny_dem_path: Path) -> None:
        assert DEMService(dem_path=tiny_dem_path).get_elevation(lon=170.75, lat=-42.75) is None

    def test_outside_bounds_is_none(self, tiny_dem_path: Path) -> None:
        assert DEMService(dem_path=tiny_dem_path).get_elevation(lon=171.5, lat=-42.25) is None

    def test_batch_lookup_keeps_order(self, tiny_dem_path: Path) -> None:
        dem = DEMService(dem_path=tiny_dem_path)
        points = [(170.75, -42.25), (171.5, -42.25), (170.25, -42.75)]
        assert dem.get_elevations(points=points) == [200.0, None, 300.0]

    def test_empty_batch(self, tiny_dem_path: Path) -> None:
        assert DEMService(dem_path=tiny_dem_path).get_elevations(points=[]) == []

    def test_bounds(self, tiny_dem_path: Path) -> None:
        west, south, east, north = DEMService(dem_path=tiny_dem_path).bounds
        assert (west, south, east, north) == pytest.approx((170.0, -43.0, 171.0, -42.0))

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        dem = DEMService(dem_path=tmp_path / "missing.tif")
        with pytest.raises(FileNotFoundError, match="DEM file not found"):
            dem.get_elevation(lon=170.25, lat=-42.25)

    def test_profile_outside_coverage_reports_bounds(self, tiny_dem_path: Path) -> None:
        provider = DEMProfileService(dem=DEMService(dem_path=tiny_dem_path))
        with pytest.raises(ProfileFetchError, match=r"lat -43.000..-42.000, lon 170.000..171.000"):
            provider.fetch_profile(
                start=GeoPoint(lat=-42.25, lon=170.25),
                end=GeoPoint(lat=-42.25, lon=171.5),
                steps=2,
            )
