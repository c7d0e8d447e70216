"""
cli.py — resolve a place, fetch its forecast and show the coming hours

Usage:
  hourly-weather --city "New York"
  hourly-weather --lat 48.85 --lon 2.35 --hours 6
  hourly-weather --city Oslo --table
"""

import argparse
import logging

from . import __version__
from .api import fetch_forecast, resolve
from .config import configure_logging, load_settings
from .errors import InvalidInput, WeatherError
from .render import console, render_table, render_text
from .window import build_window, location_now

log = logging.getLogger(__name__)


def _hours(value):
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return n


class Parser(argparse.ArgumentParser):
    """Usage errors go to stdout in red, like every other fatal message."""

    def error(self, message):
        console.print(self.format_usage(), markup=False, highlight=False)
        console.print(f"Error: {message}", style="red", markup=False, highlight=False)
        raise SystemExit(2)


def build_parser():
    p = Parser(
        prog="hourly-weather",
        description="Hourly weather forecast from Open-Meteo (no API key).",
    )
    p.add_argument("--city", default="", help="Name of the city")
    p.add_argument("--lat", type=float, default=0.0, help="Latitude of the location")
    p.add_argument("--lon", type=float, default=0.0, help="Longitude of the location")
    p.add_argument("--hours", type=_hours, default=None,
                   help="Number of upcoming hours to show (default: 24)")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--table", dest="table", action="store_true", default=None,
                      help="Show a full-screen table")
    mode.add_argument("--text", dest="table", action="store_false", default=None,
                      help="Print plain lines (default)")
    p.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def run(args, settings):
    hours = settings.hours if args.hours is None else args.hours
    table = settings.table if args.table is None else args.table
    timeout = settings.timeout if args.timeout is None else args.timeout

    place = resolve(args.city, args.lat, args.lon, timeout=timeout)
    forecast = fetch_forecast(place.coordinate, timeout=timeout)
    now = location_now(forecast)
    rows = build_window(forecast.hourly, now, hours)
    log.debug("Showing %d of %d hourly rows", len(rows), len(forecast.hourly))

    if table:
        render_table(place, forecast, rows, now=now)
    else:
        render_text(place, forecast, rows, hours, now=now)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings()
        configure_logging("DEBUG" if args.verbose else settings.log_level)
        run(args, settings)
    except InvalidInput as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        console.print(parser.format_usage(), markup=False, highlight=False)
        return 2
    except WeatherError as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
