"""Errors raised along the resolve -> fetch -> window -> render pipeline."""


class WeatherError(Exception):
    """Base class; every fatal error the CLI reports derives from it."""


class InvalidInput(WeatherError):
    pass


class ConfigError(WeatherError):
    pass


class GeocodeNotFound(WeatherError):
    pass


class GeocodeTransportError(WeatherError):
    pass


class ForecastTransportError(WeatherError):
    pass


class ForecastDecodeError(WeatherError):
    pass


class RowParseSkip(WeatherError):
    """A single hourly row could not be read; the window builder skips it."""
