"""Pick the forecast period that stands for "today, daytime"."""

from datetime import datetime

from wxservice.errors import SelectionError
from wxservice.models.forecast import ForecastPeriod


def select_daytime_period(
    periods: list[ForecastPeriod], now: datetime
) -> ForecastPeriod:
    """Return the earliest daytime period starting at or after ``now``.

    NWS keeps an elapsed "Today" period at the head of the list for a while,
    so past daytime periods are skipped when a current one exists. If every
    daytime period has already started, the first daytime period in upstream
    order is returned. A nighttime period is never returned.

    Raises:
        SelectionError: no daytime period exists.
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    daytime = [p for p in periods if p.is_daytime]
    if not daytime:
        raise SelectionError(
            "could not select today's daytime period: "
            "no daytime period found in forecast"
        )

    best: ForecastPeriod | None = None
    for period in daytime:
        if period.start_time < now:
            continue
        # Strict comparison keeps the first of equal start times.
        if best is None or period.start_time < best.start_time:
            best = period

    if best is not None:
        return best
    return daytime[0]
