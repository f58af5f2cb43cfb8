"""API endpoints for the weather station service."""

import logging

from fastapi import APIRouter, Depends, Request

from weather_station.config import SERVICE_NAME, SERVICE_VERSION
from weather_station.weather.models import (
    CurrentWeatherReading, ErrorResponse, ForecastBundle, WeatherCondition
)
from weather_station.weather.service import WeatherAssembler

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/weather",
    tags=["weather"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid weather configuration"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    }
)


def get_weather_assembler(request: Request) -> WeatherAssembler:
    """Dependency returning the assembler created at application startup."""
    return request.app.state.weather_assembler


@router.get("/current", response_model=CurrentWeatherReading)
def get_current_weather(
    assembler: WeatherAssembler = Depends(get_weather_assembler)
) -> CurrentWeatherReading:
    """Get current weather conditions with randomly generated values.

    Returns:
        CurrentWeatherReading for the configured city
    """
    reading = assembler.get_current_weather()
    logger.info(f"Generated current weather for {reading.city}: {reading.condition.value}")
    return reading


@router.get("/forecast", response_model=ForecastBundle)
def get_forecast(
    assembler: WeatherAssembler = Depends(get_weather_assembler)
) -> ForecastBundle:
    """Get a randomly generated multi-day forecast starting tomorrow.

    Returns:
        ForecastBundle with one entry per configured forecast day
    """
    forecast = assembler.get_forecast()
    logger.info(f"Generated forecast for {forecast.city} with {len(forecast.forecast)} days")
    return forecast


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status response
    """
    return {"status": "healthy", "service": "weather-station"}


@router.get("/info")
def get_service_info(
    assembler: WeatherAssembler = Depends(get_weather_assembler)
) -> dict:
    """Get service information.

    Returns:
        Service information including the simulated city and forecast settings
    """
    config = assembler.config
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "city": {
            "name": config.city.name,
            "country": config.city.country,
            "timezone": config.city.timezone
        },
        "forecast_days": config.forecast.days,
        "decimal_places": config.format.decimal_places,
        "conditions": [condition.value for condition in WeatherCondition],
        "data_source": "Synthetic data drawn uniformly from configured ranges"
    }
