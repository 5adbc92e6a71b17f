"""Message - User-facing messages for the Line of Sight Analyzer UI.

Architecture:
- SIDEBAR: ONE yellow instruction message for what to do NOW
- RESULTS PANEL: Red error message when an analysis fails, blue placeholder otherwise
- TOASTS: Transient feedback for invalid button presses

Design Principles:
- Messages know their own display level (error/warning/info)
- Caller controls when/how to display the message
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status/loading
    WARNING = "warning"  # Yellow - action instructions
    ERROR = "error"  # Red - failures


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for user-facing messages displayed inline.

    These messages are rendered as st.info/st.warning/st.error blocks that persist
    in the UI until replaced.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications.

    Good for: invalid button presses, quick confirmations
    Bad for: analysis results, instruction panels
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast. Override in subclasses."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger = logging.getLogger(__name__)
        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")


# =============================================================================
# TOAST MESSAGES
# =============================================================================


@dataclass(frozen=True)
class PointsNotSelectedMessage(ToastMessage):
    """User pressed Analyze before picking both endpoints."""

    @property
    def icon(self) -> str:
        return "📍"

    @property
    def message(self) -> str:
        return "Please select two points on the map."


@dataclass(frozen=True)
class CoincidentPointsMessage(ToastMessage):
    """User picked the same location for both endpoints."""

    @property
    def icon(self) -> str:
        return "📏"

    @property
    def message(self) -> str:
        return "Same Location: Point B cannot be at the same place as point A."


@dataclass(frozen=True)
class ResultLockedMessage(ToastMessage):
    """User clicked the map while an analysis is displayed."""

    @property
    def icon(self) -> str:
        return "🔒"

    @property
    def message(self) -> str:
        return "Analysis shown. Move an endpoint or press Reset to pick a new path."


# =============================================================================
# INLINE MESSAGES
# =============================================================================


@dataclass(frozen=True)
class SelectionInstructionMessage(Message):
    """What the user should do next to get an analysis."""

    has_point_a: bool
    has_point_b: bool

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        if not self.has_point_a:
            return "👆 Click the map to place point A."
        if not self.has_point_b:
            return "👆 Click the map to place point B."
        return "✅ Both points placed. Press **Analyze Path**."


@dataclass(frozen=True)
class NoResultsMessage(Message):
    """Placeholder shown before the first analysis."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return "Analysis results will be displayed here."


@dataclass(frozen=True)
class AnalysisFailedMessage(Message):
    """Fetching terrain or evaluating the path failed."""

    reason: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return f"Analysis failed. {self.reason}"


@dataclass(frozen=True)
class RadioSkippedMessage(Message):
    """Radio analysis was requested but the path is blocked."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return "📻 Radio link analysis skipped: the line of sight is obstructed."
