from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from weather_station.main import create_app
from weather_station.weather.models import (
    CityInfo, FloatRange, ForecastSettings, FormatSettings, IntRange,
    RangeConfig, TemperatureRange
)
from weather_station.weather.sampler import WeatherSampler
from weather_station.weather.service import WeatherAssembler

FIXED_NOW = datetime(2025, 1, 14, 15, 32, 0)


@pytest.fixture
def range_config() -> RangeConfig:
    return RangeConfig(
        city=CityInfo(name="Windholm", country="NO", timezone="Europe/Oslo"),
        temperature=TemperatureRange(min=-15.0, max=35.0, forecast_min=-15.0, forecast_max=20.0),
        humidity=IntRange(min=20, max=100),
        wind_speed=FloatRange(min=0.0, max=50.0),
        precipitation=IntRange(min=0, max=100),
        forecast=ForecastSettings(days=7),
        format=FormatSettings(
            timestamp_pattern="%Y-%m-%dT%H:%M:%S",
            date_pattern="%Y-%m-%d",
            decimal_places=1,
        ),
    )


@pytest.fixture
def sampler(range_config: RangeConfig) -> WeatherSampler:
    return WeatherSampler(range_config, clock=lambda: FIXED_NOW)


@pytest.fixture
def assembler(range_config: RangeConfig, sampler: WeatherSampler) -> WeatherAssembler:
    return WeatherAssembler(range_config, sampler=sampler)


@pytest.fixture
def app(range_config: RangeConfig):
    return create_app(range_config)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
