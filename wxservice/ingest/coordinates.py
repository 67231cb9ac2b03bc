"""Query-parameter coordinate parsing and bounds checking."""

import math

from wxservice.errors import ValidationError
from wxservice.models.forecast import Coordinate

# NWS accepts at most 4 decimal places in /points lookups.
PRECISION_SCALE = 10_000


def parse_coordinate(raw_lat: str | None, raw_lon: str | None) -> Coordinate:
    """Parse raw ``lat``/``lon`` strings into a validated, rounded Coordinate."""
    lat_str = (raw_lat or "").strip()
    lon_str = (raw_lon or "").strip()
    if not lat_str or not lon_str:
        raise ValidationError("missing lat and/or lon query parameters")

    lat = _parse_float("lat", lat_str)
    lon = _parse_float("lon", lon_str)

    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        raise ValidationError("lat must be -90..90, lon -180..180")

    return Coordinate(lat=_round4(lat), lon=_round4(lon))


def _parse_float(label: str, value: str) -> float:
    # float() accepts digit separators ("4_0"); coordinates never carry them.
    if "_" in value:
        raise ValidationError(f"invalid {label}: unexpected '_' in {value!r}")
    try:
        parsed = float(value)
    except ValueError as e:
        raise ValidationError(f"invalid {label}: {e}") from e
    if not math.isfinite(parsed):
        raise ValidationError(f"invalid {label}: not a finite number")
    return parsed


def _round4(value: float) -> float:
    return round(value * PRECISION_SCALE) / PRECISION_SCALE
