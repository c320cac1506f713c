"""Total dissolved solids (TDS) sensor with median filtering."""

import time
from typing import Callable, Sequence

ADC_RESOLUTION = 1024.0
SAMPLE_INTERVAL_MS = 40
COMPUTE_INTERVAL_MS = 800
MIN_TDS_PPM = 0.0
MAX_TDS_PPM = 3000.0
_MILLIS_MASK = 0xFFFFFFFF


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


def median(values: Sequence[int]) -> int:
    """Return the integer median; for an even count, the truncated mean of the middle pair."""
    if not values:
        raise ValueError("median of an empty sequence")
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 1:
        return ordered[middle]
    total = ordered[middle] + ordered[middle - 1]
    return total // 2 if total >= 0 else -((-total) // 2)


def tds_from_voltage(voltage: float, temperature_c: float = 25.0) -> float:
    """Convert a probe voltage to TDS in ppm, compensated to 25 degC and clamped to 0-3000."""
    coefficient = 1.0 + 0.02 * (temperature_c - 25.0)
    if coefficient == 0:
        raise ValueError("temperature gives a zero compensation coefficient")
    v = voltage / coefficient
    raw = (133.42 * v**3 - 255.86 * v**2 + 857.39 * v) * 0.5
    return min(max(raw, MIN_TDS_PPM), MAX_TDS_PPM)


class TdsSensor:
    """Samples the probe into a ring buffer and periodically recomputes TDS.

    Call update() often; a sample is taken when more than 40 ms have passed
    since the last one, and the value is recomputed from the buffer median
    when more than 800 ms have passed since the last computation.
    """

    def __init__(
        self,
        read_analog: Callable[[], int],
        ref_voltage: float = 5.0,
        temperature_c: float = 25.0,
        sample_count: int = 30,
        clock: Callable[[], int] = _monotonic_ms,
    ) -> None:
        if sample_count < 1:
            raise ValueError("sample_count must be at least 1")
        self.read_analog = read_analog
        self.ref_voltage = ref_voltage
        self.temperature_c = temperature_c
        self._clock = clock
        self._buffer = [0] * sample_count
        self._index = 0
        self._last_sample_ms = 0
        self._last_compute_ms = 0
        self.average_voltage = 0.0
        self._tds = 0.0

    def update(self) -> None:
        """Take a sample and recompute the TDS value when their intervals have elapsed."""
        now = self._clock()

        if (now - self._last_sample_ms) & _MILLIS_MASK > SAMPLE_INTERVAL_MS:
            self._last_sample_ms = now
            self._buffer[self._index] = self.read_analog()
            self._index = (self._index + 1) % len(self._buffer)

        if (now - self._last_compute_ms) & _MILLIS_MASK > COMPUTE_INTERVAL_MS:
            self._last_compute_ms = now
            self.average_voltage = median(self._buffer) * self.ref_voltage / ADC_RESOLUTION
            self._tds = tds_from_voltage(self.average_voltage, self.temperature_c)

    @property
    def tds_value(self) -> float:
        """The most recently computed TDS in ppm."""
        return self._tds