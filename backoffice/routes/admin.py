"""Admin routes: competition moderation, dashboard stats, edition weather."""
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backoffice.deps import get_db, get_weather_provider, require_admin
from backoffice.adapters.base import WeatherProvider
from backoffice.schemas.common import Page
from backoffice.schemas.competition import (
    AdminStats,
    ApproveCompetitionRequest,
    CompetitionListItem,
    CompetitionRead,
    RejectCompetitionRequest,
    UpdateStatusRequest,
)
from backoffice.schemas.edition import EditionWeatherFetched
from backoffice.services.competition_admin import CompetitionAdminService
from backoffice.services.edition_weather import EditionWeatherService
from backoffice.storage.models import User
from backoffice.app_logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/competitions/pending", response_model=Page[CompetitionListItem])
def get_pending_competitions(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(20, ge=1, le=100, description="Results per page"),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Competitions waiting for approval."""
    return CompetitionAdminService(db).get_pending_competitions(page=page, limit=limit)


@router.post("/competitions/{competition_id}/approve", response_model=CompetitionRead)
def approve_competition(
    competition_id: UUID,
    request: ApproveCompetitionRequest,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Publish a DRAFT competition."""
    return CompetitionAdminService(db).approve_competition(
        str(competition_id), admin.id, admin_notes=request.admin_notes
    )


@router.post("/competitions/{competition_id}/reject", response_model=CompetitionRead)
def reject_competition(
    competition_id: UUID,
    request: RejectCompetitionRequest,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Reject a DRAFT competition with a reason."""
    return CompetitionAdminService(db).reject_competition(
        str(competition_id), admin.id, request.rejection_reason
    )


@router.patch("/competitions/{competition_id}/status", response_model=CompetitionRead)
def update_status(
    competition_id: UUID,
    request: UpdateStatusRequest,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Change the status of any competition."""
    return CompetitionAdminService(db).update_competition_status(
        str(competition_id), request.status, admin.id
    )


@router.get("/stats", response_model=AdminStats)
def get_stats(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Dashboard figures."""
    return CompetitionAdminService(db).get_admin_stats()


@router.post("/editions/{edition_id}/weather", response_model=EditionWeatherFetched)
def fetch_edition_weather(
    edition_id: UUID,
    force: bool = Query(False, description="Refetch even if weather is already stored"),
    admin: User = Depends(require_admin),
    provider: WeatherProvider = Depends(get_weather_provider),
    db: Session = Depends(get_db),
):
    """Fetch and store the historical weather of an edition's start day."""
    logger.info(f"Admin {admin.username} requested weather for edition {edition_id} (force={force})")
    return EditionWeatherService(db, provider=provider).fetch_weather_for_edition(str(edition_id), force=force)
