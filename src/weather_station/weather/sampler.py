"""Random weather value generation."""

import logging
import math
import random
import zoneinfo
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Tuple

from weather_station.weather.models import RangeConfig, WeatherCondition

logger = logging.getLogger(__name__)

_CONDITIONS: Tuple[WeatherCondition, ...] = tuple(WeatherCondition)


class MissingWeatherDataError(Exception):
    """Raised when a configuration value needed for sampling was never set."""
    pass


def require_setting(value, field: str):
    if value is None:
        raise MissingWeatherDataError(f"Weather setting '{field}' is not configured")
    return value


class WeatherSampler:
    """Draws one random value per call from the configured ranges.

    Every call builds its own ``random.Random`` seeded from OS entropy, so the
    sampler can be shared by concurrent requests without coordination.
    """

    def __init__(
        self,
        config: RangeConfig,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """Initialize the sampler.

        Args:
            config: Ranges and formats to sample from
            clock: Callable returning the current time (defaults to now in
                the configured city timezone)
        """
        self.config = config
        self.timezone = self._resolve_timezone()
        self.clock = clock or self._now

    def sample_temperature(self) -> float:
        """Current temperature in ``[temperature.min, temperature.max)``, rounded."""
        temperature = self.config.temperature
        return self._draw_float(
            temperature.min, temperature.max, "temperature.min", "temperature.max"
        )

    def sample_humidity(self) -> int:
        """Humidity percentage, both bounds inclusive."""
        humidity = self.config.humidity
        return self._draw_int(humidity.min, humidity.max, "humidity.min", "humidity.max")

    def sample_wind_speed(self) -> float:
        """Wind speed in ``[wind_speed.min, wind_speed.max)``, rounded."""
        wind_speed = self.config.wind_speed
        return self._draw_float(
            wind_speed.min, wind_speed.max, "wind_speed.min", "wind_speed.max"
        )

    def sample_condition(self) -> WeatherCondition:
        """Any of the weather conditions with equal probability."""
        return random.Random().choice(_CONDITIONS)

    def sample_forecast_temp_min(self) -> float:
        """Forecast minimum in ``[forecast_min, forecast_max)``, rounded."""
        temperature = self.config.temperature
        return self._draw_float(
            temperature.forecast_min,
            temperature.forecast_max,
            "temperature.forecast_min",
            "temperature.forecast_max"
        )

    def sample_forecast_temp_max(self, temp_min: float) -> float:
        """Forecast maximum in ``[temp_min, temperature.max)``, rounded.

        Args:
            temp_min: Minimum temperature already drawn for the same day

        Returns:
            Maximum temperature, never below ``temp_min``

        Raises:
            ValueError: If ``temp_min`` is not below ``temperature.max``
        """
        return self._draw_float(
            temp_min, self.config.temperature.max, "temp_min", "temperature.max"
        )

    def sample_precipitation(self) -> int:
        """Precipitation chance percentage, both bounds inclusive."""
        precipitation = self.config.precipitation
        return self._draw_int(
            precipitation.min, precipitation.max, "precipitation.min", "precipitation.max"
        )

    def current_timestamp(self) -> str:
        """Current time formatted with the configured timestamp pattern."""
        pattern = require_setting(self.config.format.timestamp_pattern, "format.timestamp_pattern")
        return self.clock().strftime(pattern)

    def forecast_dates(self) -> List[str]:
        """Dates of the forecast days, starting tomorrow.

        Returns:
            ``forecast.days`` consecutive dates formatted with the date pattern
        """
        days = require_setting(self.config.forecast.days, "forecast.days")
        pattern = require_setting(self.config.format.date_pattern, "format.date_pattern")

        tomorrow = self.clock().date() + timedelta(days=1)
        return [
            (tomorrow + timedelta(days=offset)).strftime(pattern)
            for offset in range(days)
        ]

    def _now(self) -> datetime:
        return datetime.now(self.timezone)

    def _resolve_timezone(self) -> Optional[zoneinfo.ZoneInfo]:
        """Resolve the configured city timezone, or None for local time."""
        timezone_str = self.config.city.timezone
        if not timezone_str:
            return None
        try:
            return zoneinfo.ZoneInfo(timezone_str)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
            logger.warning(f"Unknown timezone '{timezone_str}', using local time: {e}")
            return None

    def _draw_float(
        self,
        low: Optional[float],
        high: Optional[float],
        low_field: str,
        high_field: str
    ) -> float:
        """Uniform draw in ``[low, high)`` rounded to the configured precision.

        Raises:
            MissingWeatherDataError: If a bound is not configured
            ValueError: If ``low`` is not strictly below ``high``
        """
        low = require_setting(low, low_field)
        high = require_setting(high, high_field)
        if not low < high:
            raise ValueError(
                f"Invalid weather range: {low_field}={low} must be below {high_field}={high}"
            )

        value = low + (high - low) * random.Random().random()
        # Floating point error can land exactly on the exclusive bound
        if value >= high:
            value = math.nextafter(high, low)
        return self._round(value)

    def _draw_int(
        self,
        low: Optional[int],
        high: Optional[int],
        low_field: str,
        high_field: str
    ) -> int:
        low = require_setting(low, low_field)
        high = require_setting(high, high_field)
        if low > high:
            raise ValueError(
                f"Invalid weather range: {low_field}={low} exceeds {high_field}={high}"
            )
        return random.Random().randint(low, high)

    def _round(self, value: float) -> float:
        decimal_places = require_setting(self.config.format.decimal_places, "format.decimal_places")
        factor = 10 ** decimal_places
        return math.floor(value * factor + 0.5) / factor
