"""Weather schemas: raw provider series and the per-edition daily summary."""
import enum
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from backoffice.schemas.common import CamelModel


class WeatherCondition(str, enum.Enum):
    """Daily condition, paired 1:1 with its display label."""

    RAINY = "rainy"
    LIGHT_RAIN = "light_rain"
    CLOUDY = "cloudy"
    PARTLY_CLOUDY = "partly_cloudy"
    SUNNY = "sunny"

    @property
    def text(self) -> str:
        return CONDITION_LABELS[self]


CONDITION_LABELS = {
    WeatherCondition.RAINY: "Lluvioso",
    WeatherCondition.LIGHT_RAIN: "Lluvia ligera",
    WeatherCondition.CLOUDY: "Nublado",
    WeatherCondition.PARTLY_CLOUDY: "Parcialmente nublado",
    WeatherCondition.SUNNY: "Soleado",
}


class HourlyWeatherDTO(BaseModel):
    """Hourly series for one day from a weather provider.

    All series are aligned with ``time``; missing observations are None.
    """
    time: List[str] = Field(default_factory=list)
    temperature_2m: List[Optional[float]] = Field(default_factory=list)
    relative_humidity_2m: List[Optional[float]] = Field(default_factory=list)
    precipitation: List[Optional[float]] = Field(default_factory=list)
    surface_pressure: List[Optional[float]] = Field(default_factory=list)
    cloud_cover: List[Optional[float]] = Field(default_factory=list)
    wind_speed_10m: List[Optional[float]] = Field(default_factory=list)
    wind_direction_10m: List[Optional[float]] = Field(default_factory=list)
    provider: str = "open_meteo"


class TemperatureSummary(CamelModel):
    model_config = ConfigDict(frozen=True)

    avg: float
    min: float
    max: float


class WindSummary(CamelModel):
    model_config = ConfigDict(frozen=True)

    speed: float  # km/h
    direction: int  # degrees
    direction_text: str


class EditionWeather(CamelModel):
    """Daily weather summary stored on an edition."""

    model_config = ConfigDict(frozen=True)

    date: str  # YYYY-MM-DD
    temperature: TemperatureSummary  # °C
    condition: WeatherCondition
    condition_text: str
    precipitation: float  # mm, daily total
    wind: WindSummary
    humidity: int  # %
    pressure: int  # hPa
    cloud_cover: int  # %
    fetched_at: datetime

    def to_storage(self) -> dict:
        """JSON-ready dict with camelCase keys, as stored in ``Edition.weather``."""
        return self.model_dump(mode="json", by_alias=True)
