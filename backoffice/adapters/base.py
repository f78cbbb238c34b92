"""Base adapter protocol for weather providers."""
from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List

from backoffice.schemas.weather import HourlyWeatherDTO

HOURLY_METRICS = [
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation",
    "surface_pressure",
    "cloud_cover",
    "wind_speed_10m",
    "wind_direction_10m",
]


class WeatherProvider(ABC):
    """Abstract base class for historical weather providers."""

    provider_name: str = "base"

    @abstractmethod
    def get_hourly_weather(self, latitude: float, longitude: float, day: date) -> HourlyWeatherDTO:
        """Get the hourly observations of one calendar day at a coordinate.

        Raises:
            WeatherUnavailableError: the provider has no data for that day/location.
            WeatherFetchError: any other transport or response failure.
        """
        pass


class ProviderRegistry:
    """Registry for weather provider adapters."""

    _adapters: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str, adapter_class: type):
        """Register a provider adapter."""
        cls._adapters[name] = adapter_class

    @classmethod
    def get_adapter(cls, name: str, **kwargs) -> WeatherProvider:
        """Get an instance of a provider adapter."""
        if name not in cls._adapters:
            available = ", ".join(sorted(cls.list_providers()))
            raise ValueError(f"Unknown provider: {name} (available: {available})")
        return cls._adapters[name](**kwargs)

    @classmethod
    def list_providers(cls) -> List[str]:
        """List available providers."""
        return list(cls._adapters.keys())
