"""Dissolved-oxygen estimate from water temperature and salinity."""

FALLBACK_TEMPERATURE_C = 25.0
MIN_TEMPERATURE_C = 0.0
MAX_TEMPERATURE_C = 50.0
MIN_DO_MG_L = 0.0
MAX_DO_MG_L = 14.0


def estimate_dissolved_oxygen(temperature_c: float, salinity_ppm: float = 0.0) -> float:
    """Return the approximate saturated dissolved oxygen in mg/L at 1 atm.

    Temperatures outside 0-50 degC are treated as a faulty reading and
    replaced by 25 degC. Salinity is given as TDS in ppm. The result is
    clamped to 0-14 mg/L.
    """
    if not MIN_TEMPERATURE_C <= temperature_c <= MAX_TEMPERATURE_C:
        temperature_c = FALLBACK_TEMPERATURE_C

    salinity_psu = salinity_ppm / 1000.0
    saturation = 14.6 - 0.4 * temperature_c + 0.008 * temperature_c * temperature_c
    saturation *= 1 - 0.03 * salinity_psu

    return min(max(saturation, MIN_DO_MG_L), MAX_DO_MG_L)