"""User interface components for the line of sight analyzer.

File Structure (layout-based naming):
- control_panel.py: Sidebar with antenna, radio and map options
- map_renderer.py: Pydeck map with endpoints, path and constraint segments
- result_panel.py: Right column with LOS verdict, radio link and segments
- profile_chart.py: Plotly elevation profile chart below the map

Core Components:
- context.py: AnalyzerContext and its sub-contexts (session state)
- actions.py: Action functions (map click, analyze, reset)
- validators.py: Input validation with Optional[Message] returns
"""

from los_analyzer.ui.actions import handle_map_click, reset_analysis, run_analysis
from los_analyzer.ui.context import AnalyzerContext
from los_analyzer.ui.control_panel import ControlPanel
from los_analyzer.ui.map_renderer import MapRenderer
from los_analyzer.ui.profile_chart import ProfileChart
from los_analyzer.ui.result_panel import ResultPanel

__all__ = [
    "AnalyzerContext",
    "ControlPanel",
    "MapRenderer",
    "ProfileChart",
    "ResultPanel",
    "handle_map_click",
    "reset_analysis",
    "run_analysis",
]
