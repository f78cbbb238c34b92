"""Edition schemas used by the weather endpoints."""
from datetime import datetime
from typing import Optional

from backoffice.schemas.common import CamelModel
from backoffice.schemas.weather import EditionWeather


class EventRef(CamelModel):
    id: str
    name: str
    slug: str
    location: Optional[str] = None


class CompetitionRef(CamelModel):
    id: str
    name: str
    slug: str
    event: EventRef


class EditionSummary(CamelModel):
    id: str
    year: int
    slug: str
    start_date: datetime
    competition: CompetitionRef


class EditionWeatherRead(CamelModel):
    edition: EditionSummary
    weather: Optional[EditionWeather] = None
    weather_fetched: bool


class EditionWeatherFetched(CamelModel):
    edition: EditionSummary
    weather: EditionWeather
