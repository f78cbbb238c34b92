"""Category model."""
from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from backoffice.storage.base import Base, generate_uuid


class Category(Base):
    """Race category of a competition (distance, age group...)."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    competition_id = Column(String(36), ForeignKey("competitions.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)

    competition = relationship("Competition", back_populates="categories")
