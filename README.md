# aquasense

Water-quality sensing for fish and shrimp ponds. `aquasense` turns raw
analog readings into total dissolved solids (TDS), pH and an estimate of
dissolved oxygen (DO), frames a set of measurements as a short text line
for a serial link, and turns received lines into JSON telemetry messages.

The package has no runtime dependencies. Hardware access is left to you:
the sensors take plain callables (an analog reader, a clock, a sleep
function), so they run against real devices or in tests alike.

## Installation

```
pip install aquasense
```

To run the test suite:

```
pip install "aquasense[test]"
pytest
```

## Dissolved oxygen

`aquasense.oxygen.estimate_dissolved_oxygen(temperature_c, salinity_ppm=0.0)`
gives the approximate saturated DO in mg/L at 1 atm from water temperature
and TDS in ppm. Temperatures outside 0–50 °C are replaced by 25 °C, and the
result is clamped to 0–14 mg/L.

```python
from aquasense.oxygen import estimate_dissolved_oxygen

estimate_dissolved_oxygen(25.0, 0.0)    # 9.6 mg/L
estimate_dissolved_oxygen(25.0, 500.0)  # slightly lower, salinity-corrected
```

## pH

`aquasense.ph.PhSensor(read_analog, slope, intercept, samples=10, sleep=time.sleep)`
averages `samples` analog readings (0–1023 on a 5 V scale), pausing 10 ms
after each, and converts the average to volts with `read_voltage()`.
`read_ph()` applies the linear calibration `voltage * slope + intercept`
and clamps the result to 0–14. A `samples` value below 1 raises
`ValueError`.

```python
import time
from aquasense.ph import PhSensor

def read_analog() -> int:
    ...  # return a 10-bit ADC reading from the probe

probe = PhSensor(read_analog, -6.80, 25.85, 10, time.sleep)
probe.read_voltage()
probe.read_ph()
```

## TDS

`aquasense.tds.TdsSensor(read_analog, ref_voltage=5.0, temperature_c=25.0,
sample_count=30, clock=...)` keeps a ring buffer of analog samples. Each
call to `update()` takes a sample when more than 40 ms have passed since
the last one, and recomputes TDS from the buffer median when more than
800 ms have passed since the last computation. The clock returns
milliseconds (by default from `time.monotonic()`). The latest value is the
`tds_value` property, and the voltage it came from is `average_voltage`.

`median(values)` returns the integer median (for an even count, the
truncated mean of the middle pair) and raises `ValueError` on an empty
sequence. `tds_from_voltage(voltage, temperature_c=25.0)` applies
temperature compensation and the probe's cubic curve, clamped to
0–3000 ppm.

```python
import time
from aquasense.tds import TdsSensor, median, tds_from_voltage

def clock_ms() -> int:
    return int(time.monotonic() * 1000)

sensor = TdsSensor(read_analog, 5.0, 25.0, 30, clock_ms)
sensor.update()
sensor.tds_value

median([3, 1, 2])            # 2
tds_from_voltage(1.0, 25.0)  # ppm for a probe voltage of 1 V at 25 °C
```

## Telemetry

A sensor node sends one line per sample over the serial link:

```
TEMP:25.00,SAL:120.00,PH:7.10,DO:9.50
```

In `aquasense.telemetry`, `Reading` holds `temperature_c`, `salinity_ppm`,
`ph` and `dissolved_oxygen`. `format_payload` writes a reading as such a
line (two decimals, newline-terminated) and `parse_payload` reads one back,
returning `None` when any of the four fields is missing; a field that is
not a number reads as 0.0. `LineAssembler.feed()` takes text or bytes as
they arrive and returns the complete, trimmed lines.

`build_message(reading, serial_number, timestamp, status=True)` produces the
JSON document a gateway publishes, and
`format_timestamp(epoch_seconds, utc_offset_hours=7.0)` gives the local
`YYYY-MM-DD HH:MM:SS` time at a fixed UTC offset.

```python
from aquasense.telemetry import build_message, format_timestamp, parse_payload

reading = parse_payload("TEMP:25.00,SAL:120.00,PH:7.10,DO:9.50")
stamp = format_timestamp(1_700_000_000, 7)
message = build_message(reading, "SN-EXAMPLE", stamp, True)
```

## Nodes and gateways

`aquasense.node.SensorNode(read_temperature, tds_sensor, ph_sensor, send,
interval_ms=1000)` reads the temperature, updates the TDS sensor, reads pH,
estimates DO and hands the formatted line to `send`. `sample()` does this
once and returns the `Reading`; `poll(now_ms)` does it only when
`interval_ms` has elapsed since the last sample, and otherwise returns
`None`.

`aquasense.node.Gateway(publish, serial_number="SN-EXAMPLE", clock=time.time,
utc_offset_hours=7.0)` takes incoming serial data with `receive()`, which
returns the readings parsed from completed lines and keeps the newest.
`publish_latest()` calls `publish(topic, message)` with the topic
`esp32/pub` and the JSON message for that reading, and returns the message;
it returns `None` when nothing new has arrived since the last publish or
when `publish` returns false.

## Command line

The package installs an `aquasense` command. It reads payload lines from a
file, or from standard input when none is given or it is `-`, and prints
the JSON message for each valid line:

```
aquasense readings.txt --serial-number SN-EXAMPLE --utc-offset 7
aquasense --help
```

## What it does not do

`aquasense` has no network or device code of its own. It does not connect
to Wi-Fi, an MQTT broker or a time server, and it contains no drivers for
the temperature probe, the ADC or the serial port; you supply those as
callables. The `aquasense` command prints messages to standard output
rather than publishing them anywhere.