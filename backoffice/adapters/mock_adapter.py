"""Mock weather provider for development and testing."""
import math
from datetime import date, datetime, timedelta
from typing import Optional

from backoffice.adapters.base import ProviderRegistry, WeatherProvider
from backoffice.schemas.weather import HourlyWeatherDTO


class MockAdapter(WeatherProvider):
    """Deterministic synthetic day: mild, dry, light breeze from the west.

    Temperature follows a sine curve peaking mid-afternoon; ``rain_mm`` spreads
    that much precipitation evenly over the day when given.
    """

    provider_name = "mock"

    def __init__(self, rain_mm: float = 0.0, cloud_cover: float = 20.0, base_temperature: Optional[float] = None):
        self.rain_mm = rain_mm
        self.cloud_cover = cloud_cover
        self.base_temperature = base_temperature

    def get_hourly_weather(self, latitude: float, longitude: float, day: date) -> HourlyWeatherDTO:
        base = self.base_temperature
        if base is None:
            # Colder away from the equator, warmer in northern summer months
            base = 25.0 - abs(latitude) / 3.0 + 6.0 * math.sin((day.month - 4) / 12 * 2 * math.pi)

        start = datetime(day.year, day.month, day.day)
        times = [(start + timedelta(hours=h)).strftime("%Y-%m-%dT%H:%M") for h in range(24)]
        temperature = [round(base + 5.0 * math.sin((h - 9) / 24 * 2 * math.pi), 1) for h in range(24)]

        return HourlyWeatherDTO(
            time=times,
            temperature_2m=temperature,
            relative_humidity_2m=[60.0] * 24,
            precipitation=[self.rain_mm / 24] * 24,
            surface_pressure=[1013.0] * 24,
            cloud_cover=[self.cloud_cover] * 24,
            wind_speed_10m=[12.0] * 24,
            wind_direction_10m=[270.0] * 24,
            provider=self.provider_name,
        )


ProviderRegistry.register("mock", MockAdapter)
