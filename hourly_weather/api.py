"""
Open-Meteo fetchers: geocoding for --city and the forecast itself.

Both are single blocking GETs with no retry; any failure is fatal to the run.
"""

import logging

import requests

from .config import DEFAULT_TIMEOUT, FORECAST_URL, GEOCODE_URL, HOURLY_FIELDS
from .errors import (
    ForecastDecodeError,
    ForecastTransportError,
    GeocodeNotFound,
    GeocodeTransportError,
    InvalidInput,
)
from .models import Coordinate, CurrentConditions, Forecast, HourlySeries, Place

log = logging.getLogger(__name__)


def _reason(resp):
    """Open-Meteo puts the failure text in a JSON 'reason' field."""
    try:
        body = resp.json()
    except ValueError:
        return ""
    if isinstance(body, dict):
        return str(body.get("reason", ""))
    return ""


# ---------- location ----------
def resolve(city=None, lat=None, lon=None, timeout=DEFAULT_TIMEOUT):
    """Return a Place for --city, or for --lat/--lon when no city is given."""
    city = (city or "").strip()
    if city:
        return geocode(city, timeout=timeout)
    # 0.0 doubles as "not given", so the equator and prime meridian need --city
    if not lat or not lon:
        raise InvalidInput("You must provide either --city or both --lat and --lon")
    coord = Coordinate(float(lat), float(lon))
    return Place(coord, f"Lat {coord.latitude:.3f}, Lon {coord.longitude:.3f}")


def geocode(city, timeout=DEFAULT_TIMEOUT):
    params = {"name": city, "count": 1, "language": "en", "format": "json"}
    log.debug("Geocoding %r", city)
    try:
        r = requests.get(GEOCODE_URL, params=params, timeout=timeout)
        r.raise_for_status()
        j = r.json()
    except requests.HTTPError as e:
        raise GeocodeTransportError(f"Geocoding failed: {e} {_reason(e.response)}".strip()) from e
    except requests.RequestException as e:
        raise GeocodeTransportError(f"Geocoding failed: {e}") from e
    except ValueError as e:
        raise GeocodeTransportError(f"Geocoding returned invalid JSON: {e}") from e

    if not isinstance(j, dict):
        raise GeocodeTransportError("Geocoding response is malformed")
    results = j.get("results")
    if results is not None and not isinstance(results, list):
        raise GeocodeTransportError("Geocoding response is malformed")
    if not results:
        raise GeocodeNotFound(f"No results found for city: {city}")
    it = results[0]
    try:
        coord = Coordinate(float(it["latitude"]), float(it["longitude"]))
    except (KeyError, TypeError, ValueError) as e:
        raise GeocodeTransportError(f"Geocoding result is malformed: {e}") from e
    name = it.get("name") or city
    country = it.get("country", "")
    label = f"{name}, {country}" if country else name
    log.debug("Resolved %r to %s (%s)", city, label, coord)
    return Place(coord, label)


# ---------- forecast ----------
def fetch_forecast(coord, timeout=DEFAULT_TIMEOUT):
    """Current conditions plus the hourly series, in the location's own time zone."""
    params = {
        "latitude": coord.latitude,
        "longitude": coord.longitude,
        "hourly": HOURLY_FIELDS,
        "current_weather": "true",
        "timezone": "auto",
    }
    log.debug("Fetching forecast for %s", coord)
    try:
        r = requests.get(FORECAST_URL, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise ForecastTransportError(f"Forecast request failed: {e}") from e

    if not r.ok:
        reason = _reason(r)
        raise ForecastDecodeError(
            f"Forecast service answered HTTP {r.status_code}" + (f": {reason}" if reason else "")
        )
    try:
        j = r.json()
    except ValueError as e:
        raise ForecastDecodeError(f"Forecast response is not JSON: {e}") from e
    return decode_forecast(j)


def _floats(values, name, nullable):
    if values is None:
        return None
    if not isinstance(values, list):
        raise ForecastDecodeError(f"hourly.{name} is not a list")
    out = []
    for i, v in enumerate(values):
        if v is None:
            if not nullable:
                raise ForecastDecodeError(f"hourly.{name}[{i}] is null")
            out.append(None)
            continue
        try:
            out.append(float(v))
        except (TypeError, ValueError):
            raise ForecastDecodeError(f"hourly.{name}[{i}] is not a number: {v!r}") from None
    return tuple(out)


def decode_forecast(j):
    if not isinstance(j, dict):
        raise ForecastDecodeError("Forecast response is not a JSON object")
    try:
        cur = j["current_weather"]
        hourly = j["hourly"]
        current = CurrentConditions(
            temperature=float(cur["temperature"]),
            wind_speed=float(cur["windspeed"]),
            wind_direction=float(cur["winddirection"]),
            observation_time=str(cur["time"]),
        )
        times = hourly["time"]
        temps = hourly["temperature_2m"]
        coord = Coordinate(float(j["latitude"]), float(j["longitude"]))
    except (KeyError, TypeError, ValueError, InvalidInput) as e:
        raise ForecastDecodeError(f"Forecast response is missing or has bad field: {e}") from e

    if not isinstance(times, list):
        raise ForecastDecodeError("hourly.time is not a list")
    temperatures = _floats(temps, "temperature_2m", nullable=False)
    if temperatures is None or len(temperatures) != len(times):
        raise ForecastDecodeError(
            f"hourly.temperature_2m has {len(temperatures or ())} values for {len(times)} timestamps"
        )
    series = HourlySeries(
        timestamps=tuple(times),
        temperatures=temperatures,
        wind_directions=_floats(hourly.get("winddirection_10m"), "winddirection_10m", nullable=True),
        wind_speeds=_floats(hourly.get("windspeed_10m"), "windspeed_10m", nullable=True),
    )
    offset = j.get("utc_offset_seconds")
    return Forecast(
        coordinate=coord,
        timezone=j.get("timezone", ""),
        utc_offset_seconds=int(offset) if isinstance(offset, (int, float)) else None,
        current=current,
        hourly=series,
    )
