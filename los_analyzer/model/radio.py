"""Radio - Equipment parameters and link budget results.

RadioSpecs describes both ends of the link. Antenna types are presets that
set a typical gain; entering a gain that matches no preset switches the
antenna to "custom".
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal, Optional

from los_analyzer.constants import RadioConfig

Side = Literal["tx", "rx"]


class AntennaType(Enum):
    """Antenna presets with their typical gain."""

    OMNI = "omni"
    YAGI = "yagi"
    PANEL = "panel"
    DISH = "dish"
    CUSTOM = "custom"

    @property
    def display_name(self) -> str:
        return RadioConfig.ANTENNA_PRESETS[self.value][0]

    @property
    def preset_gain_dbi(self) -> Optional[float]:
        """Typical gain for this antenna, None for custom."""
        return RadioConfig.ANTENNA_PRESETS[self.value][1]

    @classmethod
    def for_gain(cls, gain_dbi: float) -> "AntennaType":
        """First preset whose gain equals gain_dbi, otherwise CUSTOM."""
        for antenna in cls:
            if antenna.preset_gain_dbi is not None and antenna.preset_gain_dbi == gain_dbi:
                return antenna
        return cls.CUSTOM


assert {a.value for a in AntennaType} == set(RadioConfig.ANTENNA_PRESETS.keys())


@dataclass(frozen=True)
class RadioSpecs:
    """RF parameters for a point-to-point link.

    Values are validated by the caller (UI sliders bound them); the link
    budget calculator only rejects inputs that would break its logarithms.

    Attributes:
        frequency_mhz: Carrier frequency in MHz
        tx_power_dbm: Transmitter output power in dBm
        tx_antenna_gain_dbi: Transmit antenna gain in dBi
        rx_antenna_gain_dbi: Receive antenna gain in dBi
        rx_sensitivity_dbm: Minimum usable receive level in dBm
        tx_antenna_type: Preset the transmit gain came from
        rx_antenna_type: Preset the receive gain came from
    """

    frequency_mhz: float = RadioConfig.DEFAULT_FREQUENCY_MHZ
    tx_power_dbm: float = RadioConfig.DEFAULT_TX_POWER_DBM
    tx_antenna_gain_dbi: float = RadioConfig.DEFAULT_TX_GAIN_DBI
    rx_antenna_gain_dbi: float = RadioConfig.DEFAULT_RX_GAIN_DBI
    rx_sensitivity_dbm: float = RadioConfig.DEFAULT_RX_SENSITIVITY_DBM
    tx_antenna_type: AntennaType = AntennaType.CUSTOM
    rx_antenna_type: AntennaType = AntennaType.CUSTOM

    def with_antenna_type(self, side: Side, antenna_type: AntennaType) -> "RadioSpecs":
        """Select an antenna preset; custom keeps the current gain."""
        changes: dict = {f"{side}_antenna_type": antenna_type}
        if antenna_type.preset_gain_dbi is not None:
            changes[f"{side}_antenna_gain_dbi"] = antenna_type.preset_gain_dbi
        return replace(self, **changes)

    def with_antenna_gain(self, side: Side, gain_dbi: float) -> "RadioSpecs":
        """Set a gain directly and re-derive which preset (if any) it matches."""
        return replace(
            self,
            **{
                f"{side}_antenna_gain_dbi": gain_dbi,
                f"{side}_antenna_type": AntennaType.for_gain(gain_dbi),
            },
        )


@dataclass(frozen=True)
class RadioLinkResult:
    """Free-space link budget, rounded for display.

    Attributes:
        is_viable: True if link margin is strictly positive
        distance_km: Path length in km
        path_loss_db: Free-space path loss in dB
        received_signal_strength_dbm: Expected receive level in dBm
        link_margin_db: Receive level above sensitivity in dB
    """

    is_viable: bool
    distance_km: float
    path_loss_db: float
    received_signal_strength_dbm: float
    link_margin_db: float

    @property
    def status_label(self) -> str:
        return "Viable" if self.is_viable else "Not Viable"
