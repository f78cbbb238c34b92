"""Organizer routes."""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backoffice.deps import get_db, require_organizer
from backoffice.schemas.common import Page
from backoffice.schemas.competition import CompetitionListItem
from backoffice.services.competition_admin import CompetitionAdminService
from backoffice.storage.models import User

router = APIRouter()


@router.get("/competitions", response_model=Page[CompetitionListItem])
def get_my_competitions(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(20, ge=1, le=100, description="Results per page"),
    user: User = Depends(require_organizer),
    db: Session = Depends(get_db),
):
    """Competitions owned by the calling organizer."""
    return CompetitionAdminService(db).get_organizer_competitions(user.id, page=page, limit=limit)
