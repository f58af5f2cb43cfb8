from __future__ import annotations

from typing import List

import pytest

from weather_station.weather.models import (
    CityInfo, ForecastSettings, RangeConfig, TemperatureRange, WeatherCondition
)
from weather_station.weather.sampler import MissingWeatherDataError, WeatherSampler
from weather_station.weather.service import WeatherAssembler


class _ScriptedSampler(WeatherSampler):
    """Sampler returning fixed values and recording the call order."""

    def __init__(self, config: RangeConfig) -> None:
        super().__init__(config)
        self.calls: List[str] = []

    def current_timestamp(self) -> str:
        self.calls.append("timestamp")
        return "2025-01-14T15:32:00"

    def forecast_dates(self) -> List[str]:
        self.calls.append("dates")
        return ["2025-01-15", "2025-01-16"]

    def sample_temperature(self) -> float:
        self.calls.append("temperature")
        return 22.5

    def sample_humidity(self) -> int:
        self.calls.append("humidity")
        return 65

    def sample_wind_speed(self) -> float:
        self.calls.append("wind_speed")
        return 15.3

    def sample_condition(self) -> WeatherCondition:
        self.calls.append("condition")
        return WeatherCondition.SUNNY

    def sample_forecast_temp_min(self) -> float:
        self.calls.append("temp_min")
        return 5.2

    def sample_forecast_temp_max(self, temp_min: float) -> float:
        self.calls.append(f"temp_max({temp_min})")
        return temp_min + 9.6

    def sample_precipitation(self) -> int:
        self.calls.append("precipitation")
        return 10


def test_current_weather_assembles_sampled_values(range_config: RangeConfig) -> None:
    sampler = _ScriptedSampler(range_config)
    reading = WeatherAssembler(range_config, sampler=sampler).get_current_weather()

    assert reading.city == "Windholm"
    assert reading.timestamp == "2025-01-14T15:32:00"
    assert reading.temperature == 22.5
    assert reading.humidity == 65
    assert reading.wind_speed == 15.3
    assert reading.condition is WeatherCondition.SUNNY
    assert sorted(sampler.calls) == sorted(
        ["timestamp", "temperature", "humidity", "wind_speed", "condition"]
    )


def test_forecast_feeds_temp_min_into_temp_max(range_config: RangeConfig) -> None:
    sampler = _ScriptedSampler(range_config)
    bundle = WeatherAssembler(range_config, sampler=sampler).get_forecast()

    assert bundle.city == "Windholm"
    assert bundle.generated_at == "2025-01-14T15:32:00"
    assert [day.date for day in bundle.forecast] == ["2025-01-15", "2025-01-16"]
    assert sampler.calls.count("dates") == 1
    assert sampler.calls.count("timestamp") == 1
    assert sampler.calls.count("temp_max(5.2)") == 2
    first = sampler.calls.index("temp_min")
    assert sampler.calls[first + 1] == "temp_max(5.2)"


def test_forecast_length_matches_configured_days(assembler: WeatherAssembler) -> None:
    bundle = assembler.get_forecast()

    assert len(bundle.forecast) == 7
    assert bundle.generated_at == "2025-01-14T15:32:00"


def test_forecast_days_keep_temp_max_above_temp_min(assembler: WeatherAssembler) -> None:
    for _ in range(50):
        for day in assembler.get_forecast().forecast:
            assert day.temp_max >= day.temp_min
            assert 0 <= day.precipitation <= 100


def test_forecast_invariant_holds_with_tight_ranges(range_config: RangeConfig) -> None:
    config = range_config.model_copy(update={
        "temperature": TemperatureRange(min=0.0, max=1.0, forecast_min=0.8, forecast_max=0.9),
        "forecast": ForecastSettings(days=30),
    })
    assembler = WeatherAssembler(config)

    for day in assembler.get_forecast().forecast:
        assert 0.8 <= day.temp_min <= day.temp_max <= 1.0


def test_forecast_dates_are_in_order(assembler: WeatherAssembler) -> None:
    dates = [day.date for day in assembler.get_forecast().forecast]

    assert dates == sorted(dates)
    assert dates[0] == "2025-01-15"
    assert dates[-1] == "2025-01-21"


def test_missing_city_name_raises(range_config: RangeConfig) -> None:
    config = range_config.model_copy(update={"city": CityInfo()})

    with pytest.raises(MissingWeatherDataError):
        WeatherAssembler(config).get_current_weather()


def test_assembler_builds_default_sampler(range_config: RangeConfig) -> None:
    assembler = WeatherAssembler(range_config)

    assert isinstance(assembler.sampler, WeatherSampler)
    assert assembler.sampler.config is range_config
