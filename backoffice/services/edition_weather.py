"""Historical weather for competition editions.

Fetching is one-shot: once an edition has weather it is only fetched again on
an explicit ``force``. Two unforced requests racing on the same edition may
both reach the provider; the last write wins and both store equivalent data.
"""
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.orm import Session

from backoffice.adapters.base import ProviderRegistry, WeatherProvider
from backoffice.app_logging import get_logger
from backoffice.config import settings
from backoffice.errors import AlreadyFetchedError, FutureDateError, NoLocationError, NotFoundError
from backoffice.models.weather_aggregator import aggregate_hourly
from backoffice.schemas.edition import EditionSummary, EditionWeatherFetched, EditionWeatherRead
from backoffice.schemas.weather import EditionWeather
from backoffice.storage.geometry import GeoPoint, GeoPointParser
from backoffice.storage.models import Edition
from backoffice.storage.repositories.edition_repo import EditionRepository

logger = get_logger(__name__)


class EditionWeatherService:
    """Resolve an edition's location and date, fetch, aggregate and store its weather."""

    def __init__(
        self,
        db: Session,
        provider: Optional[WeatherProvider] = None,
        parser: Optional[GeoPointParser] = None,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.repo = EditionRepository(db)
        self._provider = provider
        self.parser = parser or GeoPointParser()
        self.clock = clock

    @property
    def provider(self) -> WeatherProvider:
        """Configured provider, created on first fetch."""
        if self._provider is None:
            self._provider = ProviderRegistry.get_adapter(settings.WEATHER_PROVIDER)
        return self._provider

    def _load(self, edition_id: str) -> Edition:
        edition = self.repo.get_with_ancestry(edition_id)
        if not edition:
            raise NotFoundError("Edition not found")
        return edition

    def resolve_coordinates(self, edition: Edition) -> GeoPoint:
        """Edition location, else the event's, else NoLocationError."""
        if edition.location:
            return self.parser.parse(edition.location)

        event = edition.competition.event if edition.competition else None
        if event is not None and event.location:
            return self.parser.parse(event.location)

        raise NoLocationError("No location data available for this edition")

    def get_edition_weather(self, edition_id: str) -> EditionWeatherRead:
        """Stored weather of an edition, if any. Read only."""
        edition = self._load(edition_id)
        return EditionWeatherRead(
            edition=EditionSummary.model_validate(edition),
            weather=EditionWeather.model_validate(edition.weather) if edition.weather else None,
            weather_fetched=edition.weather_fetched,
        )

    def fetch_weather_for_edition(self, edition_id: str, force: bool = False) -> EditionWeatherFetched:
        """Fetch the weather of the edition's start day and store it on the edition.

        Raises:
            NotFoundError: unknown edition.
            AlreadyFetchedError: weather already stored and ``force`` not set.
            FutureDateError: the edition has not started yet.
            NoLocationError: neither the edition nor its event has a location.
            LocationFormatError: stored location is not a point.
            WeatherUnavailableError, WeatherFetchError: provider failures.
        """
        edition = self._load(edition_id)

        if edition.weather_fetched and not force:
            raise AlreadyFetchedError("Weather data already fetched. Use force=true to refetch.")

        if edition.start_date > self.clock():
            raise FutureDateError("Cannot fetch weather for future editions")

        point = self.resolve_coordinates(edition)
        day = edition.start_date.date()

        logger.info(
            f"Fetching weather for edition {edition.id} on {day.isoformat()} "
            f"at ({point.latitude}, {point.longitude}) via {self.provider.provider_name}",
            extra={"edition_id": edition.id, "provider": self.provider.provider_name},
        )
        hourly = self.provider.get_hourly_weather(
            latitude=point.latitude,
            longitude=point.longitude,
            day=day,
        )
        weather = aggregate_hourly(day, hourly)

        edition = self.repo.save_weather(edition, weather.to_storage())

        return EditionWeatherFetched(
            edition=EditionSummary.model_validate(edition),
            weather=EditionWeather.model_validate(edition.weather),
        )
