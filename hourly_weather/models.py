from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from .errors import InvalidInput


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidInput(f"Latitude {self.latitude} is outside [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidInput(f"Longitude {self.longitude} is outside [-180, 180]")


@dataclass(frozen=True)
class Place:
    coordinate: Coordinate
    label: str


@dataclass(frozen=True)
class HourlySeries:
    """Index-aligned hourly arrays; index i of each refers to the same hour.

    Wind arrays are optional and may be shorter than ``timestamps`` or hold
    ``None`` entries.
    """

    timestamps: Tuple[str, ...]
    temperatures: Tuple[float, ...]
    wind_directions: Optional[Tuple[Optional[float], ...]] = None
    wind_speeds: Optional[Tuple[Optional[float], ...]] = None

    def __len__(self):
        return len(self.timestamps)


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float
    wind_speed: float
    wind_direction: float
    observation_time: str


@dataclass(frozen=True)
class Forecast:
    coordinate: Coordinate
    timezone: str
    utc_offset_seconds: Optional[int]
    current: CurrentConditions
    hourly: HourlySeries


@dataclass(frozen=True)
class DisplayRow:
    clock_time: str
    temperature: float
    wind_label: str


@dataclass(frozen=True)
class WindowRequest:
    hourly: HourlySeries
    now: datetime
    limit: int

    def __post_init__(self):
        if self.now.tzinfo is not None:
            raise ValueError("now must be naive wall-clock time at the forecast location")
        if self.limit < 0:
            raise ValueError(f"limit must not be negative, got {self.limit}")
