import itertools

import pytest

from aquasense.ph import PhSensor


def _constant(value):
    return lambda: value


def _no_sleep(_seconds):
    return None


def test_full_scale_reading_is_reference_voltage():
    sensor = PhSensor(_constant(1023), slope=1.0, intercept=0.0, sleep=_no_sleep)
    assert sensor.read_voltage() == pytest.approx(5.0)


def test_zero_reading_is_zero_volts():
    sensor = PhSensor(_constant(0), slope=-6.80, intercept=25.85, sleep=_no_sleep)
    assert sensor.read_voltage() == 0.0


def test_voltage_is_average_of_samples():
    readings = itertools.cycle([0, 1023])
    sensor = PhSensor(lambda: next(readings), slope=1.0, intercept=0.0, samples=4, sleep=_no_sleep)
    full = PhSensor(_constant(1023), slope=1.0, intercept=0.0, sleep=_no_sleep)
    assert sensor.read_voltage() == pytest.approx(full.read_voltage() / 2)


def test_reads_each_sample_and_sleeps_between():
    calls = []
    sleeps = []

    def read():
        calls.append(1)
        return 500

    sensor = PhSensor(read, slope=1.0, intercept=0.0, samples=7, sleep=sleeps.append)
    sensor.read_voltage()
    assert len(calls) == 7
    assert sleeps == [0.010] * 7


def test_linear_mapping():
    sensor = PhSensor(_constant(1023), slope=1.0, intercept=2.0, sleep=_no_sleep)
    assert sensor.read_ph() == pytest.approx(sensor.read_voltage() + 2.0)


def test_ph_clamped_high():
    sensor = PhSensor(_constant(0), slope=-6.80, intercept=25.85, sleep=_no_sleep)
    assert sensor.read_ph() == 14.0


def test_ph_clamped_low():
    sensor = PhSensor(_constant(1023), slope=-6.80, intercept=0.0, sleep=_no_sleep)
    assert sensor.read_ph() == 0.0


@pytest.mark.parametrize("reading", [0, 100, 400, 700, 1023])
def test_ph_always_in_range(reading):
    sensor = PhSensor(_constant(reading), slope=-6.80, intercept=25.85, sleep=_no_sleep)
    assert 0.0 <= sensor.read_ph() <= 14.0


@pytest.mark.parametrize("samples", [0, -3])
def test_rejects_non_positive_sample_count(samples):
    with pytest.raises(ValueError):
        PhSensor(_constant(0), slope=1.0, intercept=0.0, samples=samples)