"""Data models for the synthetic weather station."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WeatherCondition(str, Enum):
    """Weather states a reading or forecast day can report."""
    SUNNY = "SUNNY"
    CLOUDY = "CLOUDY"
    RAINY = "RAINY"
    STORMY = "STORMY"
    SNOWY = "SNOWY"
    FOGGY = "FOGGY"
    WINDY = "WINDY"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CityInfo(_ConfigModel):
    """City identity used for display and for the local clock."""
    name: Optional[str] = Field(None, description="City name shown in responses")
    country: Optional[str] = Field(None, description="Country name or code")
    timezone: Optional[str] = Field(None, description="IANA timezone identifier")


class TemperatureRange(_ConfigModel):
    """Temperature bounds in Celsius for current and forecast sampling."""
    min: Optional[float] = None
    max: Optional[float] = None
    forecast_min: Optional[float] = None
    forecast_max: Optional[float] = None


class IntRange(_ConfigModel):
    """Closed integer range, used for percentages."""
    min: Optional[int] = None
    max: Optional[int] = None


class FloatRange(_ConfigModel):
    """Half-open floating range."""
    min: Optional[float] = None
    max: Optional[float] = None


class ForecastSettings(_ConfigModel):
    days: Optional[int] = Field(None, gt=0, description="Number of forecast days")


class FormatSettings(_ConfigModel):
    timestamp_pattern: Optional[str] = Field(None, description="strftime pattern for timestamps")
    date_pattern: Optional[str] = Field(None, description="strftime pattern for forecast dates")
    decimal_places: Optional[int] = Field(
        None, ge=0, le=15, description="Rounding precision of float values"
    )


class RangeConfig(_ConfigModel):
    """Immutable set of ranges and formats the sampler draws from.

    Range ordering is not checked here. Unset values are only detected when
    the sampler reads them.
    """
    city: CityInfo = Field(default_factory=CityInfo)
    temperature: TemperatureRange = Field(default_factory=TemperatureRange)
    humidity: IntRange = Field(default_factory=IntRange)
    wind_speed: FloatRange = Field(default_factory=FloatRange)
    precipitation: IntRange = Field(default_factory=IntRange)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    format: FormatSettings = Field(default_factory=FormatSettings)


class _ResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CurrentWeatherReading(_ResponseModel):
    """Current weather snapshot response model."""
    city: str = Field(..., description="City name")
    timestamp: str = Field(..., description="Time of the reading")
    temperature: float = Field(..., description="Temperature in Celsius")
    humidity: int = Field(..., description="Relative humidity in percent")
    wind_speed: float = Field(..., description="Wind speed in km/h")
    condition: WeatherCondition = Field(..., description="Weather condition")


class ForecastDay(_ResponseModel):
    """Single forecast day."""
    date: str = Field(..., description="Forecast date")
    temp_min: float = Field(..., description="Minimum temperature in Celsius")
    temp_max: float = Field(..., description="Maximum temperature in Celsius")
    condition: WeatherCondition = Field(..., description="Weather condition")
    precipitation: int = Field(..., description="Precipitation chance in percent")


class ForecastBundle(_ResponseModel):
    """Forecast response model."""
    city: str = Field(..., description="City name")
    generated_at: str = Field(..., description="Time the forecast was generated")
    forecast: List[ForecastDay] = Field(..., description="Forecast days in date order")


class ErrorResponse(BaseModel):
    """Error response model."""
    timestamp: str = Field(..., description="ISO 8601 time of the error")
    status: int = Field(..., description="HTTP status code")
    error: str = Field(..., description="HTTP reason phrase")
    message: str = Field(..., description="Error message safe to show to clients")
    path: str = Field(..., description="Request path")
