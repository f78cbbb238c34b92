"""User model."""
import enum

from sqlalchemy import Column, String, Boolean, Enum
from sqlalchemy.orm import relationship

from backoffice.storage.base import Base, TimestampMixin, generate_uuid


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    ORGANIZER = "ORGANIZER"
    USER = "USER"


class User(TimestampMixin, Base):
    """Platform account. Organizers own competitions, admins moderate them."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    role = Column(Enum(UserRole, name="user_role"), nullable=False, default=UserRole.USER, index=True)
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    competitions = relationship("Competition", back_populates="organizer")
