"""Common dependencies."""
from typing import Generator
from uuid import uuid4
from fastapi import Depends, Header
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from backoffice.adapters.base import ProviderRegistry, WeatherProvider
from backoffice.config import settings
from backoffice.errors import AuthenticationError, PermissionDeniedError
from backoffice.storage.db import get_db as get_database_session
from backoffice.storage.models import User, UserRole

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
security = HTTPBasic()


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """Get or generate request ID."""
    return x_request_id or str(uuid4())


def get_db() -> Generator[Session, None, None]:
    """Database session dependency."""
    yield from get_database_session()


def get_weather_provider() -> WeatherProvider:
    """Configured weather provider."""
    return ProviderRegistry.get_adapter(settings.WEATHER_PROVIDER)


def get_current_user(
    credentials: HTTPBasicCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Resolve HTTP Basic credentials to an active user."""
    user = db.query(User).filter(User.username == credentials.username).first()

    if not user or not user.is_active or not pwd_context.verify(credentials.password, user.password_hash):
        raise AuthenticationError("Invalid credentials")

    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Only admins."""
    if user.role != UserRole.ADMIN:
        raise PermissionDeniedError("Admin role required")
    return user


def require_organizer(user: User = Depends(get_current_user)) -> User:
    """Organizers and admins."""
    if user.role not in (UserRole.ORGANIZER, UserRole.ADMIN):
        raise PermissionDeniedError("Organizer role required")
    return user
