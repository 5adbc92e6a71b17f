"""Tests for the free-space link budget."""

import pytest

from los_analyzer.core.errors import InvalidInputError
from los_analyzer.core.link_budget import compute_link_budget, free_space_path_loss_db
from los_analyzer.model.radio import RadioSpecs


class TestFreeSpacePathLoss:
    """FSPL = 20 log10(km) + 20 log10(MHz) + 32.44."""

    def test_one_km_one_mhz_is_constant(self) -> None:
        assert free_space_path_loss_db(distance_km=1.0, frequency_mhz=1.0) == pytest.approx(32.44)

    def test_doubling_distance_adds_6db(self) -> None:
        near = free_space_path_loss_db(distance_km=5.0, frequency_mhz=2400)
        far = free_space_path_loss_db(distance_km=10.0, frequency_mhz=2400)
        assert far - near == pytest.approx(6.02, abs=0.01)

    @pytest.mark.parametrize(
        "distance_km,frequency_mhz",
        [
            pytest.param(0.0, 5800, id="zero_distance"),
            pytest.param(-1.0, 5800, id="negative_distance"),
            pytest.param(10.0, 0.0, id="zero_frequency"),
        ],
    )
    def test_non_positive_inputs_raise(self, distance_km: float, frequency_mhz: float) -> None:
        with pytest.raises(InvalidInputError):
            free_space_path_loss_db(distance_km=distance_km, frequency_mhz=frequency_mhz)


class TestComputeLinkBudget:
    """Link budget from path length and radio specs."""

    def test_reference_link_10km_5800mhz(self) -> None:
        """Default equipment over 10 km: FSPL 127.71, RSSI -83.71, margin 1.29, viable."""
        result = compute_link_budget(total_distance_m=10_000, specs=RadioSpecs())
        assert result.distance_km == 10.0
        assert result.path_loss_db == 127.71
        assert result.received_signal_strength_dbm == -83.71
        assert result.link_margin_db == 1.29
        assert result.is_viable
        assert result.status_label == "Viable"

    def test_long_link_not_viable(self) -> None:
        result = compute_link_budget(total_distance_m=50_000, specs=RadioSpecs())
        assert result.link_margin_db < 0
        assert not result.is_viable
        assert result.status_label == "Not Viable"

    def test_zero_margin_is_not_viable(self) -> None:
        """Viability needs a strictly positive margin."""
        base = RadioSpecs()
        fspl = free_space_path_loss_db(distance_km=10.0, frequency_mhz=base.frequency_mhz)
        rssi = base.tx_power_dbm - fspl + base.tx_antenna_gain_dbi + base.rx_antenna_gain_dbi
        specs = RadioSpecs(rx_sensitivity_dbm=rssi)

        result = compute_link_budget(total_distance_m=10_000, specs=specs)
        assert result.link_margin_db == 0
        assert not result.is_viable

    def test_results_rounded_to_two_decimals(self) -> None:
        result = compute_link_budget(total_distance_m=12_345.678, specs=RadioSpecs(frequency_mhz=2437))
        for value in (
            result.distance_km,
            result.path_loss_db,
            result.received_signal_strength_dbm,
            result.link_margin_db,
        ):
            assert round(value, 2) == value

    def test_higher_gain_antennas_increase_margin(self) -> None:
        yagi = compute_link_budget(total_distance_m=20_000, specs=RadioSpecs())
        dish = compute_link_budget(
            total_distance_m=20_000,
            specs=RadioSpecs(tx_antenna_gain_dbi=24, rx_antenna_gain_dbi=24),
        )
        assert dish.link_margin_db == pytest.approx(yagi.link_margin_db + 24, abs=0.02)

    def test_zero_distance_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            compute_link_budget(total_distance_m=0, specs=RadioSpecs())
