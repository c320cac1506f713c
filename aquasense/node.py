"""Sensor node that emits payload lines and gateway that publishes them."""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, Protocol, Sequence

from .oxygen import estimate_dissolved_oxygen
from .ph import PhSensor
from .telemetry import (
    DEFAULT_UTC_OFFSET_HOURS,
    LineAssembler,
    Reading,
    build_message,
    format_payload,
    format_timestamp,
    parse_payload,
)

PUBLISH_TOPIC = "esp32/pub"
SUBSCRIBE_TOPIC = "esp32/sub"
DEFAULT_SERIAL_NUMBER = "SN-EXAMPLE"
DEFAULT_SAMPLE_INTERVAL_MS = 1000
_MILLIS_MASK = 0xFFFFFFFF

logger = logging.getLogger(__name__)


class _TdsSource(Protocol):
    def update(self) -> None: ...

    @property
    def tds_value(self) -> float: ...


class SensorNode:
    """Reads the probes, estimates dissolved oxygen and sends a payload line."""

    def __init__(
        self,
        read_temperature: Callable[[], float],
        tds_sensor: _TdsSource,
        ph_sensor: PhSensor,
        send: Callable[[str], None],
        interval_ms: int = DEFAULT_SAMPLE_INTERVAL_MS,
    ) -> None:
        self.read_temperature = read_temperature
        self.tds_sensor = tds_sensor
        self.ph_sensor = ph_sensor
        self.send = send
        self.interval_ms = interval_ms
        self._last_sample_ms = 0

    def sample(self) -> Reading:
        """Take one full set of readings, send it and return it."""
        temperature = self.read_temperature()
        self.tds_sensor.update()
        salinity = self.tds_sensor.tds_value
        ph = self.ph_sensor.read_ph()
        reading = Reading(
            temperature_c=temperature,
            salinity_ppm=salinity,
            ph=ph,
            dissolved_oxygen=estimate_dissolved_oxygen(temperature, salinity),
        )
        payload = format_payload(reading)
        logger.info("%s", payload.rstrip("\n"))
        self.send(payload)
        return reading

    def poll(self, now_ms: int) -> Optional[Reading]:
        """Sample when the interval has elapsed since the last sample, else return None."""
        if (now_ms - self._last_sample_ms) & _MILLIS_MASK >= self.interval_ms:
            self._last_sample_ms = now_ms
            return self.sample()
        return None


class Gateway:
    """Receives payload lines from a node and publishes the newest as JSON."""

    def __init__(
        self,
        publish: Callable[[str, str], bool],
        serial_number: str = DEFAULT_SERIAL_NUMBER,
        clock: Callable[[], float] = time.time,
        utc_offset_hours: float = DEFAULT_UTC_OFFSET_HOURS,
    ) -> None:
        self.publish = publish
        self.serial_number = serial_number
        self._clock = clock
        self.utc_offset_hours = utc_offset_hours
        self._assembler = LineAssembler()
        self.latest: Optional[Reading] = None
        self._has_new = False

    def receive(self, data) -> List[Reading]:
        """Feed serial data; return the readings parsed from completed lines."""
        readings = []
        for line in self._assembler.feed(data):
            logger.info("Received: %s", line)
            reading = parse_payload(line)
            if reading is None:
                continue
            self.latest = reading
            self._has_new = True
            readings.append(reading)
        return readings

    def publish_latest(self) -> Optional[str]:
        """Publish the newest unpublished reading; return the message, or None if none was sent."""
        if not self._has_new or self.latest is None:
            logger.info("No new data. Skipping publish.")
            return None
        self._has_new = False
        timestamp = format_timestamp(self._clock(), self.utc_offset_hours)
        message = build_message(self.latest, self.serial_number, timestamp, True)
        if not self.publish(PUBLISH_TOPIC, message):
            logger.warning("Failed to publish")
            return None
        logger.info("Published: %s", message)
        return message


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read payload lines and print the JSON message for each valid one."""
    parser = argparse.ArgumentParser(
        prog="aquasense",
        description="Turn sensor payload lines into JSON telemetry messages.",
    )
    parser.add_argument("input", nargs="?", default="-", help="file of payload lines (default: stdin)")
    parser.add_argument("--serial-number", default=DEFAULT_SERIAL_NUMBER)
    parser.add_argument("--utc-offset", type=float, default=DEFAULT_UTC_OFFSET_HOURS)
    args = parser.parse_args(argv)

    def _print(topic: str, message: str) -> bool:
        print(message)
        return True

    gateway = Gateway(_print, args.serial_number, utc_offset_hours=args.utc_offset)

    def _run(stream) -> None:
        for line in stream:
            gateway.receive(line if line.endswith("\n") else line + "\n")
            gateway.publish_latest()

    if args.input == "-":
        _run(sys.stdin)
    else:
        with open(args.input, encoding="utf-8") as stream:
            _run(stream)
    return 0