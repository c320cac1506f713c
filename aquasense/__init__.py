"""Water-quality sensing: TDS, pH and dissolved-oxygen readings, serial payloads and JSON telemetry."""

__version__ = "0.1.0"

__all__ = ["node", "oxygen", "ph", "tds", "telemetry"]