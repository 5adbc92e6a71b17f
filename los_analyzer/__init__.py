"""Line of Sight Analyzer - Terrain visibility and radio link planning.

Determines whether a direct line of sight exists between two ground points
over real terrain and whether a radio link between them would close:
- Terrain profile sampling from Open-Elevation or a local DEM
- Earth curvature correction (4/3 effective radius)
- First-obstruction detection and clearance band segmentation
- Free-space path loss link budget

Modules:
    core: Analysis engine (curvature, LOS, segmentation, link budget, providers)
    model: Data structures (GeoPoint, TerrainProfile, LOSResult, ConstraintSegment, RadioSpecs)
    ui: Streamlit interface components (map, profile chart, panels)

Example:
    from los_analyzer.core.path_analyzer import PathAnalyzer
    from los_analyzer.model import GeoPoint
"""
