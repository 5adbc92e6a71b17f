"""Right panel components for the line of sight analyzer.

Shows the outcome of the last analysis:
- Placeholder before the first analysis, error block after a failure
- Clear / obstructed badge with path metrics
- Radio link budget table (or why it was skipped)
- Constraint segment summaries
"""

import logging

import streamlit as st

from los_analyzer.model.analysis import PathAnalysis
from los_analyzer.model.message import AnalysisFailedMessage, NoResultsMessage, RadioSkippedMessage
from los_analyzer.model.radio import RadioLinkResult
from los_analyzer.ui.context import ResultContext

logger = logging.getLogger(__name__)


def radio_link_rows(link: RadioLinkResult) -> list[dict[str, str]]:
    """Table rows for the radio link budget."""
    return [
        {"Metric": "Distance", "Value": f"{link.distance_km:.2f} km"},
        {"Metric": "Free-space path loss", "Value": f"{link.path_loss_db:.2f} dB"},
        {"Metric": "Received signal", "Value": f"{link.received_signal_strength_dbm:.2f} dBm"},
        {"Metric": "Link margin", "Value": f"{link.link_margin_db:.2f} dB"},
        {"Metric": "Status", "Value": link.status_label},
    ]


class ResultPanel:
    """Renders the analysis result panel."""

    def __init__(self, result: ResultContext, radio_requested: bool) -> None:
        self.result = result
        self.radio_requested = radio_requested

    def render(self) -> None:
        st.subheader("📊 Results")
        if self.result.error is not None:
            AnalysisFailedMessage(reason=self.result.error).display()
            return
        if self.result.analysis is None:
            NoResultsMessage().display()
            return

        analysis = self.result.analysis
        self._render_los(analysis=analysis)
        self._render_radio(analysis=analysis)
        self._render_segments(analysis=analysis)

    def _render_los(self, analysis: PathAnalysis) -> None:
        los = analysis.los_result
        if los.is_clear:
            st.success("✅ **Line of sight: Clear**")
        else:
            st.error("⛔ **Line of sight: Obstructed**")

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Distance", f"{analysis.total_distance_m / 1000:.2f} km")
            st.metric("Antenna A", f"{analysis.start_los_height_m:.0f}m")
        with col2:
            st.metric("Curvature", "On" if analysis.use_curvature else "Off")
            st.metric("Antenna B", f"{analysis.end_los_height_m:.0f}m")

        if los.obstruction is not None:
            obstruction = los.obstruction
            st.caption(
                f"First obstruction at {obstruction.distance_m:.0f}m: terrain "
                f"{obstruction.effective_terrain_height_m:.0f}m vs line of sight "
                f"{obstruction.line_of_sight_height_m:.0f}m ({obstruction.depth_m:.1f}m above)."
            )

    def _render_radio(self, analysis: PathAnalysis) -> None:
        if not self.radio_requested:
            return
        link = analysis.radio_link
        if link is None:
            RadioSkippedMessage().display()
            return

        st.markdown("#### 📻 Radio Link")
        if link.is_viable:
            st.success(f"Link **{link.status_label}** ({link.link_margin_db:.2f} dB margin)")
        else:
            st.warning(f"Link **{link.status_label}** ({link.link_margin_db:.2f} dB margin)")
        st.table(radio_link_rows(link=link))

    def _render_segments(self, analysis: PathAnalysis) -> None:
        segments = analysis.constraint_segments
        if not segments:
            st.caption("No tight clearance along the path.")
            return

        with st.expander(f"📋 Constraint Segments ({len(segments)})", expanded=not analysis.los_result.is_clear):
            for i, seg in enumerate(segments, 1):
                st.markdown(
                    f"{i}. **{seg.title}**: {seg.start_distance_m:.0f}m to {seg.end_distance_m:.0f}m. {seg.summary}"
                )
