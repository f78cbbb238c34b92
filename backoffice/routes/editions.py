"""Public edition routes."""
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backoffice.deps import get_db
from backoffice.schemas.edition import EditionWeatherRead
from backoffice.services.edition_weather import EditionWeatherService

router = APIRouter()


@router.get("/{edition_id}/weather", response_model=EditionWeatherRead)
def get_edition_weather(
    edition_id: UUID,
    db: Session = Depends(get_db),
):
    """Stored weather of an edition (null until fetched)."""
    return EditionWeatherService(db).get_edition_weather(str(edition_id))
