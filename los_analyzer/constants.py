"""Configuration constants for Line of Sight Analyzer.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    MapConfig: Default map view parameters
    EarthConfig: Earth radius and refraction (k-factor) model
    ClearanceConfig: Clearance classification thresholds
    AntennaHeightConfig: Antenna height slider limits and defaults
    RadioConfig: Radio link defaults, antenna presets and slider ranges
    ProfileConfig: Terrain profile sampling and elevation API parameters
    DEMConfig: Local elevation data file paths
    StyleConfig: Visual colors and styling
    ChartConfig: Chart rendering dimensions
"""

from pathlib import Path

# Package root directory (where los_analyzer/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of los_analyzer/)
PROJECT_ROOT = PACKAGE_DIR.parent

# Data directory outside package (downloaded separately, not shipped with package)
DATA_DIR = PROJECT_ROOT / "data"


class AppConfig:
    """UI application settings."""

    TITLE = "Line of Sight Analyzer"
    SUBTITLE = "Click or drag points on the map and analyze visibility."
    ICON = "📡"
    LAYOUT = "wide"


class MapConfig:
    """Default map view parameters."""

    # Initial center for program start: West Coast, New Zealand
    START_CENTER_LAT = -42.715
    START_CENTER_LON = 170.965

    # Zoom levels: overview before any point is picked, closer once point A exists
    DEFAULT_ZOOM = 8
    SELECTED_ZOOM = 9
    MIN_ZOOM = 5

    # Click picking tolerance in pixels
    PICKING_RADIUS_PX = 8

    # At equator, 1 degree of latitude or longitude ≈ 111,320 meters
    # (Earth circumference 40,075 km / 360 degrees)
    METERS_PER_DEGREE_EQUATOR = 111320.0


class EarthConfig:
    """Earth model used for curvature correction."""

    # Mean Earth radius in meters (WGS84 spherical approximation)
    RADIUS_M = 6_371_000

    # Standard atmosphere refraction: rays bend as if Earth were 4/3 larger
    K_FACTOR = 4 / 3
    EFFECTIVE_RADIUS_M = RADIUS_M * K_FACTOR


class ClearanceConfig:
    """Clearance classification thresholds (meters, strict less-than).

    clearance = line_of_sight_height - effective_terrain_height
    """

    SEVERE_OBSTRUCTION_BELOW_M = -10.0
    OBSTRUCTION_BELOW_M = 0.0
    TIGHT_CLEARANCE_BELOW_M = 10.0


assert (
    ClearanceConfig.SEVERE_OBSTRUCTION_BELOW_M
    < ClearanceConfig.OBSTRUCTION_BELOW_M
    < ClearanceConfig.TIGHT_CLEARANCE_BELOW_M
), "Clearance thresholds must be strictly increasing"


class AntennaHeightConfig:
    """Antenna mast height slider settings (meters above ground)."""

    MIN_M = 1
    MAX_M = 100
    DEFAULT_A_M = 10
    DEFAULT_B_M = 10


class RadioConfig:
    """Radio link budget defaults and input ranges."""

    # FSPL constant for distance in km and frequency in MHz
    FSPL_CONSTANT_DB = 32.44

    # Rounding applied to every displayed link budget value
    RESULT_DECIMALS = 2

    DEFAULT_FREQUENCY_MHZ = 5800
    DEFAULT_TX_POWER_DBM = 20
    DEFAULT_TX_GAIN_DBI = 12
    DEFAULT_RX_GAIN_DBI = 12
    DEFAULT_RX_SENSITIVITY_DBM = -85

    # Antenna presets: (display name, gain in dBi). None = keep the entered gain.
    ANTENNA_PRESETS = {
        "omni": ("Omni-directional", 6),
        "yagi": ("Yagi", 12),
        "panel": ("Panel", 16),
        "dish": ("Dish", 24),
        "custom": ("Custom", None),
    }

    # Slider ranges (min, max, step)
    FREQUENCY_RANGE_MHZ = (200, 6000, 10)
    TX_POWER_RANGE_DBM = (0, 30, 1)
    ANTENNA_GAIN_RANGE_DBI = (0, 30, 1)
    RX_SENSITIVITY_RANGE_DBM = (-100, -60, 1)


class ProfileConfig:
    """Terrain profile sampling and elevation API parameters."""

    # Number of intervals along the path (profile has DEFAULT_STEPS + 1 samples)
    DEFAULT_STEPS = 100
    MIN_STEPS = 1

    OPEN_ELEVATION_URL = "https://api.open-elevation.com/api/v1/lookup"
    REQUEST_TIMEOUT_S = 30


class DEMConfig:
    """Local elevation data file paths."""

    # Optional local GeoTIFF used instead of the Open-Elevation API
    LOCAL_DEM_PATH = DATA_DIR / "dem.tif"
    WGS84_CRS = "EPSG:4326"


class StyleConfig:
    """Visual colors and styling."""

    # Band colors for constraint classes and the implicit "good" band
    BAND_COLORS = {
        "clearance": "#FACC15",  # Yellow-400 - tight clearance
        "obstruction": "#EF4444",  # Red-500
        "severe_obstruction": "#A855F7",  # Purple-500
        "good": "#0EA5E9",  # Sky-500
    }

    LOS_CLEAR_COLOR = "#4ADE80"  # Green-400
    LOS_BLOCKED_COLOR = "#F87171"  # Red-400
    RAW_TERRAIN_COLOR = "#64748B"  # Slate-500
    OBSTRUCTION_MARKER_COLOR = "#EF4444"

    PATH_LINE_COLOR_TOPO = "#0284C7"  # Sky-600
    PATH_LINE_COLOR_SATELLITE = "#38BDF8"  # Sky-400
    ENDPOINT_COLORS = {
        "A": "#22C55E",  # Green-500
        "B": "#F97316",  # Orange-500
    }

    PATH_LINE_WIDTH = 3
    CONSTRAINT_LINE_WIDTH = 8
    CONSTRAINT_LINE_ALPHA = 180  # 0-255, ~0.7 opacity
    ENDPOINT_RADIUS = 9

    BAND_FILL_ALPHA = 0.35


class ChartConfig:
    """Chart rendering dimensions and settings."""

    PROFILE_HEIGHT = 320
    DEFAULT_WIDTH = 800
    MAP_HEIGHT = 600

    # Y-axis padding (meters above/below data range)
    ELEVATION_PADDING_M = 20
