"""Weather service assembling sampled values into responses."""

import logging
from typing import Optional

from weather_station.weather.models import (
    CurrentWeatherReading, ForecastBundle, ForecastDay, RangeConfig
)
from weather_station.weather.sampler import WeatherSampler, require_setting

logger = logging.getLogger(__name__)


class WeatherAssembler:
    """Service building current weather and forecast responses."""

    def __init__(
        self,
        config: RangeConfig,
        sampler: Optional[WeatherSampler] = None
    ):
        """Initialize the weather assembler.

        Args:
            config: Range configuration providing the city identity
            sampler: Value sampler (creates one over ``config`` if None)
        """
        self.config = config
        self.sampler = sampler or WeatherSampler(config)

    def get_current_weather(self) -> CurrentWeatherReading:
        """Get a randomly generated current weather reading.

        Returns:
            CurrentWeatherReading for the configured city

        Raises:
            MissingWeatherDataError: If a required setting is not configured
            ValueError: If a configured range is invalid
        """
        return CurrentWeatherReading(
            city=self._city_name(),
            timestamp=self.sampler.current_timestamp(),
            temperature=self.sampler.sample_temperature(),
            humidity=self.sampler.sample_humidity(),
            wind_speed=self.sampler.sample_wind_speed(),
            condition=self.sampler.sample_condition()
        )

    def get_forecast(self) -> ForecastBundle:
        """Get a randomly generated forecast starting tomorrow.

        The maximum temperature of each day is drawn with that day's minimum
        as its lower bound, so ``temp_max >= temp_min`` always holds.

        Returns:
            ForecastBundle with one entry per configured forecast day

        Raises:
            MissingWeatherDataError: If a required setting is not configured
            ValueError: If a configured range is invalid
        """
        days = []
        for date in self.sampler.forecast_dates():
            temp_min = self.sampler.sample_forecast_temp_min()
            temp_max = self.sampler.sample_forecast_temp_max(temp_min)

            days.append(ForecastDay(
                date=date,
                temp_min=temp_min,
                temp_max=temp_max,
                condition=self.sampler.sample_condition(),
                precipitation=self.sampler.sample_precipitation()
            ))

        logger.debug(f"Generated forecast with {len(days)} days")

        return ForecastBundle(
            city=self._city_name(),
            generated_at=self.sampler.current_timestamp(),
            forecast=days
        )

    def _city_name(self) -> str:
        return require_setting(self.config.city.name, "city.name")
