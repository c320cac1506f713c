import pytest

from aquasense.oxygen import estimate_dissolved_oxygen


def test_room_temperature_fresh_water():
    assert estimate_dissolved_oxygen(25.0) == pytest.approx(9.6)


def test_salinity_defaults_to_zero():
    assert estimate_dissolved_oxygen(20.0) == estimate_dissolved_oxygen(20.0, 0.0)


@pytest.mark.parametrize("temperature", [-5.0, -0.1, 50.1, 85.0, -127.0])
def test_out_of_range_temperature_falls_back_to_25(temperature):
    assert estimate_dissolved_oxygen(temperature, 300.0) == estimate_dissolved_oxygen(25.0, 300.0)


def test_cold_water_clamped_to_upper_limit():
    assert estimate_dissolved_oxygen(0.0) == 14.0


def test_very_salty_water_clamped_to_zero():
    assert estimate_dissolved_oxygen(25.0, 40000.0) == 0.0


def test_salinity_lowers_oxygen():
    fresh = estimate_dissolved_oxygen(25.0, 0.0)
    salty = estimate_dissolved_oxygen(25.0, 2000.0)
    assert salty < fresh


@pytest.mark.parametrize("temperature", [0.0, 5.0, 12.5, 25.0, 37.0, 50.0])
@pytest.mark.parametrize("salinity", [0.0, 500.0, 3000.0, 50000.0])
def test_result_always_in_range(temperature, salinity):
    value = estimate_dissolved_oxygen(temperature, salinity)
    assert 0.0 <= value <= 14.0