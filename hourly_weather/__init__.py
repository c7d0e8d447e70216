"""
hourly_weather — terminal weather viewer for the next few hours (Open-Meteo)

Usage:
  hourly-weather --city London
  hourly-weather --lat 51.5 --lon -0.12 --hours 6 --table
"""

import logging

__version__ = "0.3.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
