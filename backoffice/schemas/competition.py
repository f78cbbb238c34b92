"""Competition administration schemas."""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from backoffice.schemas.common import CamelModel
from backoffice.storage.models import CompetitionStatus


class ApproveCompetitionRequest(CamelModel):
    admin_notes: Optional[str] = Field(default=None, max_length=500)


class RejectCompetitionRequest(CamelModel):
    rejection_reason: str

    @field_validator("rejection_reason")
    @classmethod
    def reason_long_enough(cls, value: str) -> str:
        if len(value) < 10:
            raise ValueError("Rejection reason must be at least 10 characters")
        return value


class UpdateStatusRequest(CamelModel):
    status: CompetitionStatus


class OrganizerSummary(CamelModel):
    id: str
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class CompetitionCounts(CamelModel):
    categories: Optional[int] = None
    translations: Optional[int] = None
    participants: Optional[int] = None
    reviews: Optional[int] = None


class CompetitionRead(CamelModel):
    id: str
    event_id: str
    organizer_id: str
    name: str
    slug: str
    description: str
    status: CompetitionStatus
    created_at: datetime
    updated_at: datetime
    organizer: Optional[OrganizerSummary] = None


class CompetitionListItem(CompetitionRead):
    counts: CompetitionCounts


class CompetitionStats(CamelModel):
    total: int
    published: int
    draft: int
    cancelled: int


class UserStats(CamelModel):
    total: int
    organizers: int


class AdminStats(CamelModel):
    competitions: CompetitionStats
    users: UserStats
