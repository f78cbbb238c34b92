"""Edition model."""
from sqlalchemy import Column, String, Integer, DateTime, Boolean, ForeignKey, Index, JSON
from sqlalchemy.orm import relationship

from backoffice.storage.base import Base, TimestampMixin, generate_uuid


class Edition(TimestampMixin, Base):
    """One dated run of a competition (e.g. the 2024 edition)."""

    __tablename__ = "editions"
    __table_args__ = (
        Index('idx_edition_competition_year', 'competition_id', 'year'),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    competition_id = Column(String(36), ForeignKey("competitions.id"), nullable=False)

    year = Column(Integer, nullable=False)
    slug = Column(String(200), unique=True, nullable=False, index=True)
    start_date = Column(DateTime, nullable=False)  # UTC

    # WKT point; falls back to the event's location when null
    location = Column(String(100))

    # Historical weather summary (EditionWeather as JSON), written once per fetch
    weather = Column(JSON)
    weather_fetched = Column(Boolean, default=False, nullable=False)

    # Relationships
    competition = relationship("Competition", back_populates="editions")
