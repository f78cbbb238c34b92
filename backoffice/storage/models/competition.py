"""Competition model."""
import enum

from sqlalchemy import Column, String, Text, ForeignKey, Index, Enum
from sqlalchemy.orm import relationship

from backoffice.storage.base import Base, TimestampMixin, generate_uuid


class CompetitionStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class Competition(TimestampMixin, Base):
    """Competition submitted by an organizer, published once an admin approves it."""

    __tablename__ = "competitions"
    __table_args__ = (
        Index('idx_competition_status_created', 'status', 'created_at'),
        Index('idx_competition_organizer', 'organizer_id'),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    event_id = Column(String(36), ForeignKey("events.id"), nullable=False)
    organizer_id = Column(String(36), ForeignKey("users.id"), nullable=False)

    name = Column(String(200), nullable=False)
    slug = Column(String(200), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    status = Column(
        Enum(CompetitionStatus, name="competition_status"),
        nullable=False,
        default=CompetitionStatus.DRAFT,
    )

    # Relationships
    event = relationship("Event", back_populates="competitions")
    organizer = relationship("User", back_populates="competitions")
    editions = relationship("Edition", back_populates="competition", cascade="all, delete-orphan")
    categories = relationship("Category", back_populates="competition", cascade="all, delete-orphan")
    translations = relationship("CompetitionTranslation", back_populates="competition", cascade="all, delete-orphan")
    participants = relationship("Participant", back_populates="competition", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="competition", cascade="all, delete-orphan")
