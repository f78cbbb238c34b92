"""Database models."""
from backoffice.storage.models.user import User, UserRole
from backoffice.storage.models.event import Event
from backoffice.storage.models.competition import Competition, CompetitionStatus
from backoffice.storage.models.edition import Edition
from backoffice.storage.models.category import Category
from backoffice.storage.models.translation import CompetitionTranslation
from backoffice.storage.models.participant import Participant
from backoffice.storage.models.review import Review

__all__ = [
    'User', 'UserRole', 'Event', 'Competition', 'CompetitionStatus', 'Edition',
    'Category', 'CompetitionTranslation', 'Participant', 'Review'
]
