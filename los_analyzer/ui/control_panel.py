"""Sidebar UI renderer for the line of sight analyzer.

Renders the left sidebar with:
- What to do next (instruction message)
- Antenna heights and earth curvature option
- Optional radio link parameters with antenna presets
- Map options (click target, basemap)
- Analyze and Reset buttons

Widget values live in st.session_state under keys starting with
WIDGET_KEY_PREFIX; a reset drops those keys so the widgets re-initialize
from the default settings.
"""

import logging
from typing import Any, Literal, cast

import streamlit as st

from los_analyzer.constants import AntennaHeightConfig, RadioConfig
from los_analyzer.model.message import SelectionInstructionMessage
from los_analyzer.model.radio import AntennaType, RadioSpecs, Side
from los_analyzer.ui.actions import WIDGET_KEY_PREFIX, ClickTarget
from los_analyzer.ui.basemap import Basemap
from los_analyzer.ui.context import AnalyzerContext, SettingsContext

logger = logging.getLogger(__name__)

CLICK_TARGET_LABELS: dict[ClickTarget, str] = {
    "auto": "Auto (A, then B)",
    "A": "Point A",
    "B": "Point B",
}

BASEMAP_LABELS: dict[Basemap, str] = {
    "topo": "🗺️ Topographic",
    "satellite": "🛰️ Satellite",
}


def _key(name: str) -> str:
    return f"{WIDGET_KEY_PREFIX}{name}"


def _specs_from_widgets() -> RadioSpecs:
    """Radio specs as currently entered in the sidebar."""
    state = st.session_state
    return RadioSpecs(
        frequency_mhz=state[_key("frequency_mhz")],
        tx_power_dbm=state[_key("tx_power_dbm")],
        tx_antenna_gain_dbi=state[_key("tx_gain")],
        rx_antenna_gain_dbi=state[_key("rx_gain")],
        rx_sensitivity_dbm=state[_key("rx_sensitivity_dbm")],
        tx_antenna_type=AntennaType(state[_key("tx_antenna_type")]),
        rx_antenna_type=AntennaType(state[_key("rx_antenna_type")]),
    )


def _on_antenna_type_change(side: Side) -> None:
    """Selecting a preset overwrites the gain slider; custom leaves it."""
    antenna = AntennaType(st.session_state[_key(f"{side}_antenna_type")])
    specs = _specs_from_widgets().with_antenna_type(side=side, antenna_type=antenna)
    st.session_state[_key(f"{side}_gain")] = getattr(specs, f"{side}_antenna_gain_dbi")


def _on_gain_change(side: Side) -> None:
    """Moving the gain slider selects the matching preset, or custom."""
    gain = st.session_state[_key(f"{side}_gain")]
    specs = _specs_from_widgets().with_antenna_gain(side=side, gain_dbi=gain)
    st.session_state[_key(f"{side}_antenna_type")] = getattr(specs, f"{side}_antenna_type").value


class ControlPanel:
    """Renders the sidebar UI and returns action flags.

    Settings edits are pushed into the context immediately; any change clears
    the previous result.
    """

    def __init__(self, context: AnalyzerContext) -> None:
        self.ctx = context

    def render(self) -> dict[str, Any]:
        """Render complete sidebar and return action flags.

        Returns:
            Dict with keys: analyze, reset, click_target, basemap
        """
        self._init_widget_state(settings=self.ctx.settings)

        with st.sidebar:
            selection = self.ctx.selection
            SelectionInstructionMessage(
                has_point_a=selection.point_a is not None,
                has_point_b=selection.point_b is not None,
            ).display()

            actions: dict[str, Any] = {"analyze": False, "reset": False}

            col_analyze, col_reset = st.columns(2)
            with col_analyze:
                actions["analyze"] = st.button(
                    "📡 Analyze Path",
                    type="primary",
                    width="stretch",
                    disabled=not selection.is_complete,
                    help="Fetch the terrain profile and check line of sight",
                )
            with col_reset:
                actions["reset"] = st.button(
                    "🔄 Reset",
                    width="stretch",
                    help="Clear both points and restore default settings",
                )
            st.divider()

            self._render_antenna_heights()
            st.divider()
            self._render_radio_settings()
            st.divider()
            actions.update(self._render_map_options())

        settings = self._settings_from_widgets()
        if self.ctx.apply_settings(settings=settings):
            logger.info(f"[SETTINGS] Changed, result cleared: {settings}")
        return actions

    def _init_widget_state(self, settings: SettingsContext) -> None:
        """Seed missing widget keys from the current settings."""
        specs = settings.radio_specs
        defaults = {
            _key("height_a_m"): settings.height_a_m,
            _key("height_b_m"): settings.height_b_m,
            _key("use_curvature"): settings.use_curvature,
            _key("use_radio"): settings.use_radio,
            _key("frequency_mhz"): specs.frequency_mhz,
            _key("tx_power_dbm"): specs.tx_power_dbm,
            _key("tx_antenna_type"): specs.tx_antenna_type.value,
            _key("tx_gain"): specs.tx_antenna_gain_dbi,
            _key("rx_antenna_type"): specs.rx_antenna_type.value,
            _key("rx_gain"): specs.rx_antenna_gain_dbi,
            _key("rx_sensitivity_dbm"): specs.rx_sensitivity_dbm,
            _key("click_target"): "auto",
        }
        for key, value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = value

    def _settings_from_widgets(self) -> SettingsContext:
        state = st.session_state
        return SettingsContext(
            height_a_m=state[_key("height_a_m")],
            height_b_m=state[_key("height_b_m")],
            use_curvature=state[_key("use_curvature")],
            use_radio=state[_key("use_radio")],
            radio_specs=_specs_from_widgets(),
        )

    def _render_antenna_heights(self) -> None:
        st.markdown("### 📏 Antennas")
        st.slider(
            "Antenna height A (m)",
            min_value=AntennaHeightConfig.MIN_M,
            max_value=AntennaHeightConfig.MAX_M,
            key=_key("height_a_m"),
        )
        st.slider(
            "Antenna height B (m)",
            min_value=AntennaHeightConfig.MIN_M,
            max_value=AntennaHeightConfig.MAX_M,
            key=_key("height_b_m"),
        )
        st.toggle(
            "🌍 Earth curvature",
            key=_key("use_curvature"),
            help="Raise the terrain by the 4/3 effective earth radius bulge",
        )

    def _render_radio_settings(self) -> None:
        """Render radio link toggle and, when enabled, its parameters."""
        st.toggle("📻 Radio link analysis", key=_key("use_radio"))
        if not st.session_state[_key("use_radio")]:
            return

        freq_min, freq_max, freq_step = RadioConfig.FREQUENCY_RANGE_MHZ
        st.slider(
            "Frequency (MHz)",
            min_value=freq_min,
            max_value=freq_max,
            step=freq_step,
            key=_key("frequency_mhz"),
        )
        power_min, power_max, power_step = RadioConfig.TX_POWER_RANGE_DBM
        st.slider(
            "TX power (dBm)",
            min_value=power_min,
            max_value=power_max,
            step=power_step,
            key=_key("tx_power_dbm"),
        )
        for side, label in (("tx", "TX"), ("rx", "RX")):
            self._render_antenna(side=cast(Side, side), label=label)

        sens_min, sens_max, sens_step = RadioConfig.RX_SENSITIVITY_RANGE_DBM
        st.slider(
            "RX sensitivity (dBm)",
            min_value=sens_min,
            max_value=sens_max,
            step=sens_step,
            key=_key("rx_sensitivity_dbm"),
        )

    def _render_antenna(self, side: Side, label: str) -> None:
        """Antenna type selector and gain slider kept in sync via callbacks."""
        gain_min, gain_max, gain_step = RadioConfig.ANTENNA_GAIN_RANGE_DBI
        st.selectbox(
            f"{label} antenna type",
            options=[a.value for a in AntennaType],
            format_func=lambda value: AntennaType(value).display_name,
            key=_key(f"{side}_antenna_type"),
            on_change=_on_antenna_type_change,
            args=(side,),
        )
        st.slider(
            f"{label} antenna gain (dBi)",
            min_value=gain_min,
            max_value=gain_max,
            step=gain_step,
            key=_key(f"{side}_gain"),
            on_change=_on_gain_change,
            args=(side,),
        )

    def _render_map_options(self) -> dict[str, Any]:
        st.markdown("### 🗺️ Map")
        click_target = st.radio(
            "Map click places",
            options=list(CLICK_TARGET_LABELS.keys()),
            format_func=lambda value: CLICK_TARGET_LABELS[value],
            key=_key("click_target"),
            horizontal=True,
        )
        basemap: Literal["topo", "satellite"] = st.radio(
            "Basemap",
            options=list(BASEMAP_LABELS.keys()),
            format_func=lambda value: BASEMAP_LABELS[value],
            key="basemap",
            horizontal=True,
        )
        return {"click_target": click_target, "basemap": basemap}
