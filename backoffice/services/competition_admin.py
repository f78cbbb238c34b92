"""Admin moderation of organizer-submitted competitions."""
from typing import Dict, Optional

from sqlalchemy.orm import Session

from backoffice.app_logging import get_logger
from backoffice.errors import CompetitionStateError, NotFoundError
from backoffice.schemas.common import Page, Pagination
from backoffice.schemas.competition import (
    AdminStats,
    CompetitionCounts,
    CompetitionListItem,
    CompetitionRead,
    CompetitionStats,
    UserStats,
)
from backoffice.storage.cache import invalidate_competition
from backoffice.storage.models import Competition, CompetitionStatus, UserRole
from backoffice.storage.repositories.competition_repo import CompetitionRepository

logger = get_logger(__name__)

ADMIN_NOTES_SEPARATOR = "\n\n---\nNotas admin: "
REJECTION_SEPARATOR = "\n\n---\n⚠️ RECHAZADA: "


def _list_item(competition: Competition, counts: Dict[str, int], include_organizer: bool) -> CompetitionListItem:
    item = CompetitionRead.model_validate(competition).model_dump()
    if not include_organizer:
        item["organizer"] = None
    return CompetitionListItem(**item, counts=CompetitionCounts(**counts))


class CompetitionAdminService:
    """Approve, reject and re-status competitions; dashboard figures."""

    def __init__(self, db: Session):
        self.repo = CompetitionRepository(db)

    def _get_or_404(self, competition_id: str, with_organizer: bool = False) -> Competition:
        competition = self.repo.get(competition_id, with_organizer=with_organizer)
        if not competition:
            raise NotFoundError("Competition not found")
        return competition

    def get_pending_competitions(self, page: int = 1, limit: int = 20) -> Page[CompetitionListItem]:
        """Competitions waiting for approval (DRAFT), newest first."""
        items, total = self.repo.list_with_counts(
            counts=["categories", "translations"],
            offset=(page - 1) * limit,
            limit=limit,
            status=CompetitionStatus.DRAFT,
            with_organizer=True,
        )
        return Page[CompetitionListItem](
            data=[_list_item(c, counts, include_organizer=True) for c, counts in items],
            pagination=Pagination.build(page, limit, total),
        )

    def approve_competition(
        self,
        competition_id: str,
        admin_id: str,
        admin_notes: Optional[str] = None,
    ) -> CompetitionRead:
        """Publish a DRAFT competition, keeping the admin's notes in its description."""
        competition = self._get_or_404(competition_id, with_organizer=True)

        if competition.status != CompetitionStatus.DRAFT:
            raise CompetitionStateError("Only DRAFT competitions can be approved")

        competition.status = CompetitionStatus.PUBLISHED
        if admin_notes:
            competition.description = (competition.description or "") + ADMIN_NOTES_SEPARATOR + admin_notes
        competition = self.repo.save(competition)

        invalidate_competition(competition_id)

        logger.info(
            f"Competition {competition_id} approved by admin {admin_id}. "
            f"Organizer: {competition.organizer.email}",
            extra={"competition_id": competition_id, "admin_id": admin_id},
        )
        return CompetitionRead.model_validate(competition)

    def reject_competition(self, competition_id: str, admin_id: str, rejection_reason: str) -> CompetitionRead:
        """Record a rejection on a DRAFT competition; it stays in DRAFT."""
        competition = self._get_or_404(competition_id, with_organizer=True)

        if competition.status != CompetitionStatus.DRAFT:
            raise CompetitionStateError("Only DRAFT competitions can be rejected")

        competition.description = (competition.description or "") + REJECTION_SEPARATOR + rejection_reason
        competition = self.repo.save(competition)

        logger.warning(
            f"Competition {competition_id} rejected by admin {admin_id}. "
            f"Reason: {rejection_reason}. Organizer: {competition.organizer.email}",
            extra={"competition_id": competition_id, "admin_id": admin_id},
        )
        return CompetitionRead.model_validate(competition)

    def get_organizer_competitions(self, organizer_id: str, page: int = 1, limit: int = 20) -> Page[CompetitionListItem]:
        items, total = self.repo.list_with_counts(
            counts=["categories", "participants", "reviews"],
            offset=(page - 1) * limit,
            limit=limit,
            organizer_id=organizer_id,
        )
        return Page[CompetitionListItem](
            data=[_list_item(c, counts, include_organizer=False) for c, counts in items],
            pagination=Pagination.build(page, limit, total),
        )

    def get_admin_stats(self) -> AdminStats:
        return AdminStats(
            competitions=CompetitionStats(
                total=self.repo.count_competitions(),
                published=self.repo.count_competitions(CompetitionStatus.PUBLISHED),
                draft=self.repo.count_competitions(CompetitionStatus.DRAFT),
                cancelled=self.repo.count_competitions(CompetitionStatus.CANCELLED),
            ),
            users=UserStats(
                total=self.repo.count_users(),
                organizers=self.repo.count_users(UserRole.ORGANIZER),
            ),
        )

    def update_competition_status(
        self,
        competition_id: str,
        new_status: CompetitionStatus,
        admin_id: str,
    ) -> CompetitionRead:
        """Set any status (admin override, no transition rules)."""
        competition = self._get_or_404(competition_id)
        old_status = competition.status

        competition.status = new_status
        competition = self.repo.save(competition)

        invalidate_competition(competition_id)

        logger.info(
            f"Competition {competition_id} status changed from {old_status.value} "
            f"to {new_status.value} by admin {admin_id}",
            extra={"competition_id": competition_id, "admin_id": admin_id},
        )
        return CompetitionRead.model_validate(competition)
