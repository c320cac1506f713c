"""pH probe read through an analog-to-digital converter."""

import time
from typing import Callable

ADC_REFERENCE_VOLTAGE = 5.0
ADC_MAX_READING = 1023.0
SAMPLE_DELAY_S = 0.010
MIN_PH = 0.0
MAX_PH = 14.0


class PhSensor:
    """Averages several ADC samples and maps the voltage linearly to pH."""

    def __init__(
        self,
        read_analog: Callable[[], int],
        slope: float,
        intercept: float,
        samples: int = 10,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if samples < 1:
            raise ValueError("samples must be at least 1")
        self.read_analog = read_analog
        self.slope = slope
        self.intercept = intercept
        self.samples = samples
        self._sleep = sleep

    def read_voltage(self) -> float:
        """Return the probe voltage averaged over the configured samples."""
        total = 0
        for _ in range(self.samples):
            total += self.read_analog()
            self._sleep(SAMPLE_DELAY_S)
        average = total / self.samples
        return average * (ADC_REFERENCE_VOLTAGE / ADC_MAX_READING)

    def read_ph(self) -> float:
        """Return the pH, clamped to 0-14."""
        raw = self.read_voltage() * self.slope + self.intercept
        return min(max(raw, MIN_PH), MAX_PH)