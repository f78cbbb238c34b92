"""Event model."""
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from backoffice.storage.base import Base, TimestampMixin, generate_uuid


class Event(TimestampMixin, Base):
    """A recurring sporting event; competitions are run under it."""

    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), unique=True, nullable=False, index=True)
    description = Column(Text)

    # WKT point, POINT(longitude latitude)
    location = Column(String(100))

    # Relationships
    competitions = relationship("Competition", back_populates="event")
