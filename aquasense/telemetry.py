"""Line-oriented sensor payloads and the JSON messages built from them."""

import json
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_UTC_OFFSET_HOURS = 7.0

_KEYS = ("TEMP:", "SAL:", "PH:", "DO:")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class Reading:
    """One set of water-quality measurements."""

    temperature_c: float
    salinity_ppm: float
    ph: float
    dissolved_oxygen: float


def format_payload(reading: Reading) -> str:
    """Return the newline-terminated ``TEMP:..,SAL:..,PH:..,DO:..`` line for a reading."""
    return (
        f"TEMP:{reading.temperature_c:.2f}"
        f",SAL:{reading.salinity_ppm:.2f}"
        f",PH:{reading.ph:.2f}"
        f",DO:{reading.dissolved_oxygen:.2f}\n"
    )


def _leading_float(text: str) -> float:
    """Parse the number at the start of ``text``; 0.0 when there is none."""
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _substring(text: str, start: int, end: Optional[int] = None) -> str:
    if end is None:
        end = len(text)
    if start > end:
        start, end = end, start
    return text[start:end]


def parse_payload(line: str) -> Optional[Reading]:
    """Parse a payload line; return None when any of the four fields is missing.

    A field whose value is not a number reads as 0.0.
    """
    text = line.strip()
    temp_idx, sal_idx, ph_idx, do_idx = (text.find(key) for key in _KEYS)
    if -1 in (temp_idx, sal_idx, ph_idx, do_idx):
        return None
    return Reading(
        temperature_c=_leading_float(_substring(text, temp_idx + 5, sal_idx)),
        salinity_ppm=_leading_float(_substring(text, sal_idx + 4, ph_idx)),
        ph=_leading_float(_substring(text, ph_idx + 3, do_idx)),
        dissolved_oxygen=_leading_float(_substring(text, do_idx + 3)),
    )


def build_message(
    reading: Reading, serial_number: str, timestamp: str, status: bool = True
) -> str:
    """Return the JSON document published for a reading."""
    return (
        "{"
        f'"serialNumber":{json.dumps(serial_number)},'
        f'"timestamp":{json.dumps(timestamp)},'
        '"data":{'
        f'"do_value":{reading.dissolved_oxygen:.2f},'
        f'"temp_value":{reading.temperature_c:.1f},'
        f'"salinity_value":{reading.salinity_ppm:.1f},'
        f'"ph_value":{reading.ph:.1f},'
        f'"status":{"true" if status else "false"}'
        "}}"
    )


def format_timestamp(
    epoch_seconds: float, utc_offset_hours: float = DEFAULT_UTC_OFFSET_HOURS
) -> str:
    """Format a Unix time as local ``YYYY-MM-DD HH:MM:SS`` at the given UTC offset."""
    zone = timezone(timedelta(hours=utc_offset_hours))
    return datetime.fromtimestamp(int(epoch_seconds), zone).strftime(TIMESTAMP_FORMAT)


class LineAssembler:
    """Collects characters from a serial stream into complete, trimmed lines."""

    def __init__(self) -> None:
        self._pending: List[str] = []

    def feed(self, data: Union[str, bytes]) -> List[str]:
        """Add received data and return the lines it completed."""
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("latin-1")
        lines = []
        for char in data:
            if char == "\n":
                lines.append("".join(self._pending).strip())
                self._pending.clear()
            else:
                self._pending.append(char)
        return lines