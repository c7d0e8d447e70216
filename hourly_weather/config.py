import json
import logging
import os
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

from .errors import ConfigError

# ---------- CONFIG ----------
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
GEOCODE_URL = "https://geocoding-api.open-meteo.com/v1/search"
HOURLY_FIELDS = "temperature_2m,winddirection_10m,windspeed_10m"

CFG_PATH = os.path.expanduser(os.environ.get("WEATHER_CFG", "~/.weather_cfg.json"))
DEFAULT_HOURS = 24
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"

TRUTHY = ("1", "true", "yes", "on")
FALSY = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class Settings:
    hours: int = DEFAULT_HOURS
    timeout: float = DEFAULT_TIMEOUT
    table: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


# ---------- helpers ----------
def load_cfg(path=None):
    """Read the optional JSON config file; a missing file means no overrides."""
    path = path or CFG_PATH
    try:
        with open(path, "r") as fh:
            cfg = json.load(fh)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config {path} must hold a JSON object")
    return cfg


def _as_hours(value, source):
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ConfigError(f"{source}: hours must be an integer, got {value!r}")
    try:
        hours = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{source}: hours must be an integer, got {value!r}") from None
    if hours < 0:
        raise ConfigError(f"{source}: hours must not be negative, got {hours}")
    return hours


def _as_timeout(value, source):
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{source}: timeout must be a number, got {value!r}") from None
    if timeout <= 0:
        raise ConfigError(f"{source}: timeout must be positive, got {timeout}")
    return timeout


def _as_bool(value, source):
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUTHY:
        return True
    if text in FALSY:
        return False
    raise ConfigError(f"{source}: expected a boolean, got {value!r}")


def _as_level(value, source):
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{source}: unknown log level {value!r}")
    return level


def load_settings(env=None, cfg=None):
    """Merge defaults, the config file and the environment (later wins)."""
    env = os.environ if env is None else env
    cfg = load_cfg() if cfg is None else cfg

    fields = (
        ("hours", "WEATHER_HOURS", _as_hours),
        ("timeout", "WEATHER_TIMEOUT", _as_timeout),
        ("table", "WEATHER_TABLE", _as_bool),
        ("log_level", "WEATHER_LOG_LEVEL", _as_level),
    )
    values = {}
    for key, env_key, convert in fields:
        if key in cfg:
            values[key] = convert(cfg[key], f"config '{key}'")
        if env.get(env_key, "").strip():
            values[key] = convert(env[env_key], env_key)
    return Settings(**values)


def configure_logging(level=DEFAULT_LOG_LEVEL, console=None):
    """Send package logs through rich on stderr."""
    pkg_logger = logging.getLogger("hourly_weather")
    pkg_logger.handlers.clear()
    pkg_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger.addHandler(handler)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
