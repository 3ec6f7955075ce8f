"""
Mock weather data provider.

Figures are derived from a stable digest of the location name, so the same
location always reports the same weather across calls and processes. A real
weather API can replace this class behind the ``CapabilityProvider``
interface without touching the router.
"""

import hashlib
from dataclasses import dataclass
from typing import Optional

from weather_agent.interfaces import CapabilityProvider
from utils.logger import agent_logger as logger


CONDITIONS = ["Sunny", "Cloudy", "Partly Cloudy", "Overcast"]
UNKNOWN_LOCATION_NAME = "Unknown Location"

# Figures used when no location is given at all
DEFAULT_TEMPERATURE_C = 20
DEFAULT_CONDITION = "Cloudy"
DEFAULT_HUMIDITY_PCT = 50


@dataclass(frozen=True)
class WeatherReport:
    location: str
    temperature_c: int
    condition: str
    humidity_pct: int
    raining: bool


def _is_blank(location: Optional[str]) -> bool:
    return location is None or not location.strip()


def _location_digest(location: str) -> int:
    return int(hashlib.sha256(location.encode("utf-8")).hexdigest()[:16], 16)


def build_weather_report(location: Optional[str]) -> WeatherReport:
    """Build the mock report for a location (15-30°C, 40-80% humidity)."""
    if _is_blank(location):
        return WeatherReport(
            location=UNKNOWN_LOCATION_NAME,
            temperature_c=DEFAULT_TEMPERATURE_C,
            condition=DEFAULT_CONDITION,
            humidity_pct=DEFAULT_HUMIDITY_PCT,
            raining=False,
        )

    digest = _location_digest(location)
    return WeatherReport(
        location=location,
        temperature_c=15 + digest % 16,
        condition=CONDITIONS[digest % len(CONDITIONS)],
        humidity_pct=40 + digest % 41,
        raining=digest % 3 == 0,
    )


class MockWeatherProvider(CapabilityProvider):
    """Deterministic mock data for the weather, temperature and rain capabilities."""

    def get_weather(self, location: str) -> str:
        logger.info(f"Getting weather for location: {location}")
        report = build_weather_report(location)
        return (
            f"Weather in {report.location}: {report.temperature_c}°C, {report.condition}, "
            f"Humidity: {report.humidity_pct}%, {'Raining' if report.raining else 'Not raining'}"
        )

    def get_temperature(self, location: str) -> str:
        logger.info(f"Getting temperature for location: {location}")
        report = build_weather_report(location)
        return f"The current temperature in {report.location} is {report.temperature_c}°C"

    def is_raining(self, location: str) -> str:
        logger.info(f"Checking rain status for location: {location}")
        report = build_weather_report(location)
        return f"It is {'currently' if report.raining else 'not'} raining in {report.location}"
