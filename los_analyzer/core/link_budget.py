"""Free-space radio link budget.

    FSPL [dB] = 20 log10(d [km]) + 20 log10(f [MHz]) + 32.44
    RSSI [dBm] = P_tx - FSPL + G_tx + G_rx
    Margin [dB] = RSSI - S_rx

The link is viable only for a strictly positive margin. Obstacles are not
modelled here; callers only request a budget for clear paths.
"""

import logging
from math import log10

from los_analyzer.constants import RadioConfig
from los_analyzer.core.errors import InvalidInputError
from los_analyzer.model.radio import RadioLinkResult, RadioSpecs

logger = logging.getLogger(__name__)


def free_space_path_loss_db(distance_km: float, frequency_mhz: float) -> float:
    """Free-space path loss in dB.

    Args:
        distance_km: Path length in km (> 0)
        frequency_mhz: Carrier frequency in MHz (> 0)

    Raises:
        InvalidInputError: If distance or frequency is not positive.
    """
    if not distance_km > 0:
        raise InvalidInputError(f"Link distance must be positive, got {distance_km} km")
    if not frequency_mhz > 0:
        raise InvalidInputError(f"Frequency must be positive, got {frequency_mhz} MHz")
    return 20 * log10(distance_km) + 20 * log10(frequency_mhz) + RadioConfig.FSPL_CONSTANT_DB


def compute_link_budget(total_distance_m: float, specs: RadioSpecs) -> RadioLinkResult:
    """Compute the link budget for a path.

    Math runs at full precision; only the returned values are rounded.

    Args:
        total_distance_m: Path length in meters
        specs: Radio equipment on both ends

    Returns:
        RadioLinkResult rounded to RadioConfig.RESULT_DECIMALS.
    """
    distance_km = total_distance_m / 1000
    path_loss = free_space_path_loss_db(distance_km=distance_km, frequency_mhz=specs.frequency_mhz)
    rssi = specs.tx_power_dbm - path_loss + specs.tx_antenna_gain_dbi + specs.rx_antenna_gain_dbi
    margin = rssi - specs.rx_sensitivity_dbm

    logger.info(f"Link budget: {distance_km:.2f}km @ {specs.frequency_mhz}MHz, FSPL={path_loss:.2f}dB, margin={margin:.2f}dB")

    digits = RadioConfig.RESULT_DECIMALS
    return RadioLinkResult(
        is_viable=margin > 0,
        distance_km=round(distance_km, digits),
        path_loss_db=round(path_loss, digits),
        received_signal_strength_dbm=round(rssi, digits),
        link_margin_db=round(margin, digits),
    )
