"""Configuration settings for the weather station service."""

import os
from typing import Final, Mapping, Optional

from dotenv import load_dotenv

from weather_station.weather.models import (
    CityInfo, FloatRange, ForecastSettings, FormatSettings, IntRange,
    RangeConfig, TemperatureRange
)

load_dotenv()

SERVICE_NAME: Final[str] = "Weather Station Service"
SERVICE_VERSION: Final[str] = "0.1.0"

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Weather generation defaults, overridable through WEATHER_* variables
DEFAULT_WEATHER_SETTINGS: Final[Mapping[str, str]] = {
    "WEATHER_CITY_NAME": "Windholm",
    "WEATHER_CITY_COUNTRY": "NO",
    "WEATHER_CITY_TIMEZONE": "Europe/Oslo",
    "WEATHER_TEMPERATURE_MIN": "-15.0",
    "WEATHER_TEMPERATURE_MAX": "35.0",
    "WEATHER_TEMPERATURE_FORECAST_MIN": "-15.0",
    "WEATHER_TEMPERATURE_FORECAST_MAX": "20.0",
    "WEATHER_HUMIDITY_MIN": "20",
    "WEATHER_HUMIDITY_MAX": "100",
    "WEATHER_WIND_SPEED_MIN": "0.0",
    "WEATHER_WIND_SPEED_MAX": "50.0",
    "WEATHER_PRECIPITATION_MIN": "0",
    "WEATHER_PRECIPITATION_MAX": "100",
    "WEATHER_FORECAST_DAYS": "7",
    "WEATHER_FORMAT_TIMESTAMP": "%Y-%m-%dT%H:%M:%S",
    "WEATHER_FORMAT_DATE": "%Y-%m-%d",
    "WEATHER_FORMAT_DECIMAL_PLACES": "1",
}


def load_range_config(environ: Optional[Mapping[str, str]] = None) -> RangeConfig:
    """Build the weather range configuration from environment variables.

    Args:
        environ: Variables to read (defaults to ``os.environ``)

    Returns:
        Immutable RangeConfig with defaults applied for unset variables

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    if environ is None:
        environ = os.environ

    def setting(name: str) -> str:
        return environ.get(name, DEFAULT_WEATHER_SETTINGS[name])

    return RangeConfig(
        city=CityInfo(
            name=setting("WEATHER_CITY_NAME"),
            country=setting("WEATHER_CITY_COUNTRY"),
            timezone=setting("WEATHER_CITY_TIMEZONE") or None
        ),
        temperature=TemperatureRange(
            min=float(setting("WEATHER_TEMPERATURE_MIN")),
            max=float(setting("WEATHER_TEMPERATURE_MAX")),
            forecast_min=float(setting("WEATHER_TEMPERATURE_FORECAST_MIN")),
            forecast_max=float(setting("WEATHER_TEMPERATURE_FORECAST_MAX"))
        ),
        humidity=IntRange(
            min=int(setting("WEATHER_HUMIDITY_MIN")),
            max=int(setting("WEATHER_HUMIDITY_MAX"))
        ),
        wind_speed=FloatRange(
            min=float(setting("WEATHER_WIND_SPEED_MIN")),
            max=float(setting("WEATHER_WIND_SPEED_MAX"))
        ),
        precipitation=IntRange(
            min=int(setting("WEATHER_PRECIPITATION_MIN")),
            max=int(setting("WEATHER_PRECIPITATION_MAX"))
        ),
        forecast=ForecastSettings(days=int(setting("WEATHER_FORECAST_DAYS"))),
        format=FormatSettings(
            timestamp_pattern=setting("WEATHER_FORMAT_TIMESTAMP"),
            date_pattern=setting("WEATHER_FORMAT_DATE"),
            decimal_places=int(setting("WEATHER_FORMAT_DECIMAL_PLACES"))
        )
    )
