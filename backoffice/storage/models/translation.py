"""Competition translation model."""
from sqlalchemy import Column, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from backoffice.storage.base import Base, generate_uuid


class CompetitionTranslation(Base):
    __tablename__ = "competition_translations"
    __table_args__ = (
        UniqueConstraint('competition_id', 'locale', name='uq_translation_locale'),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    competition_id = Column(String(36), ForeignKey("competitions.id"), nullable=False, index=True)
    locale = Column(String(5), nullable=False)
    description = Column(Text)

    competition = relationship("Competition", back_populates="translations")
