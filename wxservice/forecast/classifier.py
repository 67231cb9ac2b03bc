"""Coarse temperature classification."""

from wxservice.models.forecast import TemperatureCategory

# unit -> (cold at or below, hot at or above)
THRESHOLDS: dict[str, tuple[int, int]] = {
    "F": (49, 80),
    "C": (9, 27),
}


def classify_temperature(unit: str, temperature: int) -> TemperatureCategory:
    """Map a temperature to cold/moderate/hot. Unknown units are moderate."""
    bounds = THRESHOLDS.get(unit.strip().upper())
    if bounds is None:
        return TemperatureCategory.MODERATE

    cold_max, hot_min = bounds
    if temperature <= cold_max:
        return TemperatureCategory.COLD
    if temperature >= hot_min:
        return TemperatureCategory.HOT
    return TemperatureCategory.MODERATE
