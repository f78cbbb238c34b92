"""Open-Meteo historical archive adapter."""
from datetime import date
from typing import Optional

import requests
from pydantic import ValidationError

from backoffice.adapters.base import HOURLY_METRICS, ProviderRegistry, WeatherProvider
from backoffice.app_logging import get_logger
from backoffice.config import settings
from backoffice.errors import WeatherFetchError, WeatherUnavailableError
from backoffice.schemas.weather import HourlyWeatherDTO

logger = get_logger(__name__)


class OpenMeteoAdapter(WeatherProvider):
    """Hourly reanalysis data from archive-api.open-meteo.com (1940 onwards)."""

    provider_name = "open_meteo"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url or settings.OPEN_METEO_ARCHIVE_URL
        self.timeout = timeout if timeout is not None else settings.WEATHER_REQUEST_TIMEOUT
        self.session = session or requests.Session()

    def _build_params(self, latitude: float, longitude: float, day: date) -> dict:
        date_str = day.isoformat()
        return {
            "latitude": latitude,
            "longitude": longitude,
            "start_date": date_str,
            "end_date": date_str,
            "hourly": ",".join(HOURLY_METRICS),
            "timezone": "auto",
        }

    def get_hourly_weather(self, latitude: float, longitude: float, day: date) -> HourlyWeatherDTO:
        params = self._build_params(latitude, longitude, day)
        logger.info(f"Requesting Open-Meteo archive for ({latitude}, {longitude}) on {params['start_date']}")

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            if response.status_code == 404:
                raise WeatherUnavailableError("Weather data not available for this location/date")
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            reason = self._error_reason(e.response)
            logger.error(f"Open-Meteo request failed: {reason}")
            raise WeatherFetchError(reason) from e
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Open-Meteo request failed: {e}")
            raise WeatherFetchError(str(e)) from e

        hourly = data.get("hourly") if isinstance(data, dict) else None
        if not hourly:
            raise WeatherUnavailableError("No weather data available for this date")

        try:
            if not isinstance(hourly, dict):
                raise TypeError(f"hourly must be an object, got {type(hourly).__name__}")
            dto = HourlyWeatherDTO(
                time=hourly.get("time") or [],
                provider=self.provider_name,
                **{metric: hourly.get(metric) or [] for metric in HOURLY_METRICS},
            )
        except (ValidationError, AttributeError, TypeError) as e:
            logger.error(f"Unexpected Open-Meteo payload: {e}")
            raise WeatherFetchError(str(e)) from e

        # An all-null temperature series has no min/max to report.
        if not any(t is not None for t in dto.temperature_2m):
            raise WeatherUnavailableError("No weather data available for this date")

        return dto

    @staticmethod
    def _error_reason(response: Optional[requests.Response]) -> str:
        """Open-Meteo explains 4xx errors as {"error": true, "reason": "..."}."""
        if response is None:
            return "no response"
        try:
            reason = response.json().get("reason")
        except ValueError:
            reason = None
        return reason or f"{response.status_code} {response.reason}"


ProviderRegistry.register("open_meteo", OpenMeteoAdapter)
