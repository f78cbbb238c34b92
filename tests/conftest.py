"""Test configuration and fixtures."""
import os

# Set test environment before the settings singleton is created
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ["ENVIRONMENT"] = "test"
os.environ["WEATHER_PROVIDER"] = "mock"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timedelta
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backoffice.app import app
from backoffice.deps import get_db, hash_password
from backoffice.storage.base import Base
from backoffice.storage.models import (
    Category,
    Competition,
    CompetitionStatus,
    CompetitionTranslation,
    Edition,
    Event,
    Participant,
    Review,
    User,
    UserRole,
)

ADMIN_AUTH = ("admin", "admin-password")
ORGANIZER_AUTH = ("organizer", "organizer-password")
USER_AUTH = ("runner", "runner-password")


@pytest.fixture(scope="function")
def test_db():
    """Create a test database with tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
    )
    db = TestingSessionLocal()

    yield db

    db.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def client(test_db):
    """Create a test client with test database."""
    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def redis_mock():
    """Replace the redis connection used for cache invalidation."""
    with patch("backoffice.storage.cache.redis_conn", MagicMock()) as mock:
        yield mock


@pytest.fixture
def users(test_db):
    """Admin, organizer and a plain user."""
    admin = User(
        username=ADMIN_AUTH[0], email="admin@example.com", first_name="Ana", last_name="Admin",
        role=UserRole.ADMIN, password_hash=hash_password(ADMIN_AUTH[1]),
    )
    organizer = User(
        username=ORGANIZER_AUTH[0], email="organizer@example.com", first_name="Oscar", last_name="Org",
        role=UserRole.ORGANIZER, password_hash=hash_password(ORGANIZER_AUTH[1]),
    )
    runner = User(
        username=USER_AUTH[0], email="runner@example.com",
        role=UserRole.USER, password_hash=hash_password(USER_AUTH[1]),
    )
    test_db.add_all([admin, organizer, runner])
    test_db.commit()
    return {"admin": admin, "organizer": organizer, "runner": runner}


@pytest.fixture
def event(test_db):
    event = Event(name="Maratón de Madrid", slug="maraton-madrid", location="POINT(-3.7038 40.4168)")
    test_db.add(event)
    test_db.commit()
    return event


@pytest.fixture
def competitions(test_db, users, event):
    """Two drafts, one published, one cancelled; the newest draft has children."""
    now = datetime.utcnow()
    organizer = users["organizer"]
    specs = [
        ("draft-old", CompetitionStatus.DRAFT, now - timedelta(days=3)),
        ("draft-new", CompetitionStatus.DRAFT, now - timedelta(days=1)),
        ("published", CompetitionStatus.PUBLISHED, now - timedelta(days=10)),
        ("cancelled", CompetitionStatus.CANCELLED, now - timedelta(days=20)),
    ]
    created = {}
    for slug, status, created_at in specs:
        competition = Competition(
            event_id=event.id,
            organizer_id=organizer.id,
            name=slug.replace("-", " ").title(),
            slug=slug,
            description="Carrera popular",
            status=status,
            created_at=created_at,
            updated_at=created_at,
        )
        test_db.add(competition)
        created[slug] = competition
    test_db.commit()

    draft = created["draft-new"]
    test_db.add_all([
        Category(competition_id=draft.id, name="10K"),
        Category(competition_id=draft.id, name="21K"),
        CompetitionTranslation(competition_id=draft.id, locale="en", description="Popular race"),
        Participant(competition_id=draft.id, user_id=users["runner"].id),
        Review(competition_id=draft.id, user_id=users["runner"].id, rating=5),
    ])
    test_db.commit()
    return created


@pytest.fixture
def edition(test_db, competitions):
    """Past edition without its own location (falls back to the event)."""
    edition = Edition(
        competition_id=competitions["published"].id,
        year=2024,
        slug="published-2024",
        start_date=datetime(2024, 4, 28, 9, 0),
    )
    test_db.add(edition)
    test_db.commit()
    return edition


def make_hourly(**overrides):
    """24 hourly values per metric, dry and clear unless overridden."""
    from backoffice.schemas.weather import HourlyWeatherDTO

    data = {
        "time": [f"2024-04-28T{h:02d}:00" for h in range(24)],
        "temperature_2m": [10.0 + h * 0.5 for h in range(24)],
        "relative_humidity_2m": [55.0] * 24,
        "precipitation": [0.0] * 24,
        "surface_pressure": [1012.0] * 24,
        "cloud_cover": [10.0] * 24,
        "wind_speed_10m": [8.0] * 24,
        "wind_direction_10m": [90.0] * 24,
    }
    data.update(overrides)
    return HourlyWeatherDTO(**data)


@pytest.fixture
def hourly_factory():
    return make_hourly


@pytest.fixture
def hourly():
    return make_hourly()
