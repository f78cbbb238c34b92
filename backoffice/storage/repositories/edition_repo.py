"""Repository for edition weather reads and writes."""
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from backoffice.storage.models import Competition, Edition
from backoffice.app_logging import get_logger

logger = get_logger(__name__)


class EditionRepository:
    """Edition access with its competition/event ancestry."""

    def __init__(self, db: Session):
        self.db = db

    def get_with_ancestry(self, edition_id: str) -> Optional[Edition]:
        """Edition with competition and event loaded (the event supplies the fallback location)."""
        return (
            self.db.query(Edition)
            .options(joinedload(Edition.competition).joinedload(Competition.event))
            .filter(Edition.id == edition_id)
            .first()
        )

    def save_weather(self, edition: Edition, weather: dict) -> Edition:
        """Store the weather summary and mark the edition as fetched in one commit."""
        edition.weather = weather
        edition.weather_fetched = True
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(edition)
        logger.info(f"Stored weather for edition {edition.id}")
        return edition
