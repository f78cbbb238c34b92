"""Participant model."""
from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from backoffice.storage.base import Base, TimestampMixin, generate_uuid


class Participant(TimestampMixin, Base):
    __tablename__ = "participants"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    competition_id = Column(String(36), ForeignKey("competitions.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    competition = relationship("Competition", back_populates="participants")
