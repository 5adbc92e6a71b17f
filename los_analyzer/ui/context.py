"""Context Classes for the Line of Sight Analyzer UI.

This module contains the dataclasses that hold mutable UI state between
Streamlit reruns. The analysis engine itself is stateless; these contexts
only remember what the user picked and the last analysis result.

Architecture:
- All contexts inherit from BaseContext (provides clear() interface)
- AnalyzerContext composes all sub-contexts
- Any change to points or settings invalidates the previous result

Sub-contexts:
    PointSelectionContext: Endpoints A and B picked on the map
    SettingsContext: Antenna heights, curvature and radio options
    ResultContext: Last analysis or failure reason
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from los_analyzer.constants import AntennaHeightConfig
from los_analyzer.model.radio import RadioSpecs

if TYPE_CHECKING:
    from los_analyzer.model import GeoPoint, PathAnalysis


class BaseContext(ABC):
    """Abstract base class for all context dataclasses.

    All contexts should be clearable to reset to their initial state.
    """

    @abstractmethod
    def clear(self) -> None:
        """Reset context to initial state."""
        ...


@dataclass
class PointSelectionContext(BaseContext):
    """Endpoints picked on the map.

    Click cycle: first click sets A, second sets B, a third click starts
    over with a new A and no B.
    """

    point_a: GeoPoint | None = None
    point_b: GeoPoint | None = None

    def clear(self) -> None:
        self.point_a = None
        self.point_b = None

    def click(self, point: GeoPoint) -> None:
        """Apply a map click to the selection."""
        if self.point_a is None:
            self.point_a = point
        elif self.point_b is None:
            self.point_b = point
        else:
            self.point_a = point
            self.point_b = None

    def move(self, index: int, point: GeoPoint) -> None:
        """Move endpoint 0 (A) or 1 (B) to a new location."""
        if index == 0:
            self.point_a = point
        elif index == 1:
            self.point_b = point
        else:
            raise ValueError(f"Endpoint index must be 0 or 1, got {index}")

    @property
    def is_complete(self) -> bool:
        return self.point_a is not None and self.point_b is not None

    @property
    def points(self) -> list[GeoPoint]:
        """Selected endpoints in order, skipping unset ones."""
        return [p for p in (self.point_a, self.point_b) if p is not None]


@dataclass
class SettingsContext(BaseContext):
    """Analysis options from the control panel."""

    height_a_m: float = AntennaHeightConfig.DEFAULT_A_M
    height_b_m: float = AntennaHeightConfig.DEFAULT_B_M
    use_curvature: bool = True
    use_radio: bool = False
    radio_specs: RadioSpecs = field(default_factory=RadioSpecs)

    def clear(self) -> None:
        """Restore the toggles; antenna heights and radio specs survive a reset."""
        self.use_curvature = True
        self.use_radio = False


@dataclass
class ResultContext(BaseContext):
    """Outcome of the last analysis."""

    analysis: PathAnalysis | None = None
    error: str | None = None

    def clear(self) -> None:
        self.analysis = None
        self.error = None

    def set_analysis(self, analysis: PathAnalysis) -> None:
        self.analysis = analysis
        self.error = None

    def set_error(self, error: str) -> None:
        self.analysis = None
        self.error = error


@dataclass
class AnalyzerContext:
    """All UI state of the analyzer session."""

    selection: PointSelectionContext = field(default_factory=PointSelectionContext)
    settings: SettingsContext = field(default_factory=SettingsContext)
    result: ResultContext = field(default_factory=ResultContext)

    def click_map(self, point: GeoPoint) -> bool:
        """Place an endpoint; results for the old path are discarded.

        While an analysis is displayed the click cycle is locked so a stray
        click cannot wipe the result. Returns True if the click was applied.
        """
        if self.result.analysis is not None:
            return False
        self.selection.click(point)
        self.result.clear()
        return True

    def move_endpoint(self, index: int, point: GeoPoint) -> None:
        self.selection.move(index=index, point=point)
        self.result.clear()

    def apply_settings(self, settings: SettingsContext) -> bool:
        """Adopt new settings. Returns True if anything changed (result cleared)."""
        if settings == self.settings:
            return False
        self.settings = settings
        self.result.clear()
        return True

    def reset(self) -> None:
        """Drop points and result, radio off and curvature on; heights and specs are kept."""
        self.selection.clear()
        self.settings.clear()
        self.result.clear()

    @property
    def radio_specs_for_analysis(self) -> Optional[RadioSpecs]:
        """Radio specs to analyze with, None when radio analysis is off."""
        return self.settings.radio_specs if self.settings.use_radio else None
