"""Repository for competition administration queries."""
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from backoffice.storage.models import (
    Category,
    Competition,
    CompetitionStatus,
    CompetitionTranslation,
    Participant,
    Review,
    User,
    UserRole,
)
from backoffice.app_logging import get_logger

logger = get_logger(__name__)

# Child tables that can be counted per competition
COUNTABLE = {
    "categories": Category,
    "translations": CompetitionTranslation,
    "participants": Participant,
    "reviews": Review,
}


def _count_column(name: str):
    model = COUNTABLE[name]
    return (
        select(func.count(model.id))
        .where(model.competition_id == Competition.id)
        .correlate(Competition)
        .scalar_subquery()
        .label(name)
    )


class CompetitionRepository:
    """Competition reads and status updates."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, competition_id: str, with_organizer: bool = False) -> Optional[Competition]:
        query = self.db.query(Competition)
        if with_organizer:
            query = query.options(joinedload(Competition.organizer))
        return query.filter(Competition.id == competition_id).first()

    def list_with_counts(
        self,
        counts: List[str],
        offset: int,
        limit: int,
        status: Optional[CompetitionStatus] = None,
        organizer_id: Optional[str] = None,
        with_organizer: bool = False,
    ) -> Tuple[List[Tuple[Competition, Dict[str, int]]], int]:
        """Page of competitions, newest first, each with the requested child counts."""
        filters = []
        if status is not None:
            filters.append(Competition.status == status)
        if organizer_id is not None:
            filters.append(Competition.organizer_id == organizer_id)

        total = self.db.query(func.count(Competition.id)).filter(*filters).scalar() or 0

        query = self.db.query(Competition, *[_count_column(name) for name in counts]).filter(*filters)
        if with_organizer:
            query = query.options(joinedload(Competition.organizer))
        rows = (
            query.order_by(Competition.created_at.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

        items = [(row[0], dict(zip(counts, row[1:]))) for row in rows]
        return items, total

    def count_competitions(self, status: Optional[CompetitionStatus] = None) -> int:
        query = self.db.query(func.count(Competition.id))
        if status is not None:
            query = query.filter(Competition.status == status)
        return query.scalar() or 0

    def count_users(self, role: Optional[UserRole] = None) -> int:
        query = self.db.query(func.count(User.id))
        if role is not None:
            query = query.filter(User.role == role)
        return query.scalar() or 0

    def save(self, competition: Competition) -> Competition:
        self.db.add(competition)
        self.db.commit()
        self.db.refresh(competition)
        return competition
