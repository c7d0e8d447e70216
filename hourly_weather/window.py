import logging
from datetime import datetime, timedelta, timezone

from .compass import cardinal
from .errors import RowParseSkip
from .models import DisplayRow, WindowRequest

log = logging.getLogger(__name__)


def location_now(forecast, utcnow=None):
    """Naive wall-clock time at the forecast location.

    Uses the UTC offset the service reported; without one, the local clock.
    """
    if forecast.utc_offset_seconds is None:
        return datetime.now()
    utcnow = utcnow or datetime.now(timezone.utc)
    tz = timezone(timedelta(seconds=forecast.utc_offset_seconds))
    return utcnow.astimezone(tz).replace(tzinfo=None)


def parse_timestamp(stamp):
    try:
        when = datetime.fromisoformat(stamp)
    except (TypeError, ValueError) as e:
        raise RowParseSkip(f"bad timestamp {stamp!r}: {e}") from e
    if when.tzinfo is not None:
        raise RowParseSkip(f"timestamp {stamp!r} carries a UTC offset")
    return when


def wind_label(hourly, i):
    dirs, speeds = hourly.wind_directions, hourly.wind_speeds
    if dirs is None or speeds is None or i >= len(dirs) or i >= len(speeds):
        return "N/A"
    if dirs[i] is None or speeds[i] is None:
        return "N/A"
    return f"{cardinal(dirs[i])} {speeds[i]:.1f} km/h"


def build_window(hourly, now, limit):
    """The next `limit` hours at or after `now`, in source order.

    Rows with unreadable timestamps are logged and skipped without using up
    a slot.
    """
    req = WindowRequest(hourly, now, limit)
    rows = []
    for i, stamp in enumerate(req.hourly.timestamps):
        if len(rows) >= req.limit:
            break
        try:
            when = parse_timestamp(stamp)
        except RowParseSkip as e:
            log.warning("Skipping hour %d: %s", i, e)
            continue
        if when < req.now:
            continue
        rows.append(DisplayRow(
            clock_time=when.strftime("%H:%M"),
            temperature=req.hourly.temperatures[i],
            wind_label=wind_label(req.hourly, i),
        ))
    return rows
