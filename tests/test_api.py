"""API tests for the admin, organizer and edition endpoints."""
from unittest.mock import MagicMock, patch

import pytest

from backoffice.adapters.base import WeatherProvider
from backoffice.app import app
from backoffice.deps import get_weather_provider
from backoffice.errors import WeatherUnavailableError

API = "/api/v1"
ADMIN_AUTH = ("admin", "admin-password")
ORGANIZER_AUTH = ("organizer", "organizer-password")
USER_AUTH = ("runner", "runner-password")
MISSING_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def provider(client, hourly):
    provider = MagicMock(spec=WeatherProvider)
    provider.provider_name = "stub"
    provider.get_hourly_weather.return_value = hourly
    app.dependency_overrides[get_weather_provider] = lambda: provider
    yield provider
    app.dependency_overrides.pop(get_weather_provider, None)


class TestHealth:
    def test_ping(self, client):
        response = client.get("/api/ping")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["services"]["database"] == "healthy"
        assert data["services"]["weather_provider"] == "mock"

    def test_health_unknown_weather_provider(self, client):
        with patch("backoffice.routes.health.settings.WEATHER_PROVIDER", "darksky"):
            response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert data["services"]["weather_provider"] == "unknown"


class TestAuthentication:
    def test_missing_credentials(self, client, users):
        response = client.get(f"{API}/admin/stats")
        assert response.status_code == 401

    def test_wrong_password(self, client, users):
        response = client.get(f"{API}/admin/stats", auth=(ADMIN_AUTH[0], "wrong-password"))
        assert response.status_code == 401
        assert response.json()["error"]["type"] == "authentication_error"
        assert response.headers["www-authenticate"] == "Basic"

    def test_organizer_is_not_admin(self, client, users):
        response = client.get(f"{API}/admin/stats", auth=ORGANIZER_AUTH)
        assert response.status_code == 403
        assert response.json()["error"]["type"] == "permission_denied"

    def test_plain_user_is_not_organizer(self, client, users):
        response = client.get(f"{API}/organizer/competitions", auth=USER_AUTH)
        assert response.status_code == 403


class TestAdminCompetitions:
    def test_pending(self, client, competitions):
        response = client.get(f"{API}/admin/competitions/pending", auth=ADMIN_AUTH)

        assert response.status_code == 200
        body = response.json()
        assert [c["slug"] for c in body["data"]] == ["draft-new", "draft-old"]
        assert body["data"][0]["counts"]["categories"] == 2
        assert body["data"][0]["organizer"]["firstName"] == "Oscar"
        assert body["pagination"] == {"page": 1, "limit": 20, "total": 2, "pages": 1}

    def test_pending_invalid_pagination(self, client, competitions):
        response = client.get(f"{API}/admin/competitions/pending?page=0", auth=ADMIN_AUTH)
        assert response.status_code == 422
        assert response.json()["error"]["type"] == "validation_error"

    def test_approve(self, client, competitions, redis_mock):
        draft = competitions["draft-new"]

        response = client.post(
            f"{API}/admin/competitions/{draft.id}/approve",
            json={"adminNotes": "Todo correcto"},
            auth=ADMIN_AUTH,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "PUBLISHED"
        assert body["description"].endswith("Notas admin: Todo correcto")
        assert redis_mock.delete.call_count == 2

    def test_approve_notes_too_long(self, client, competitions):
        draft = competitions["draft-new"]
        response = client.post(
            f"{API}/admin/competitions/{draft.id}/approve",
            json={"adminNotes": "x" * 501},
            auth=ADMIN_AUTH,
        )
        assert response.status_code == 422

    def test_approve_non_draft(self, client, competitions):
        published = competitions["published"]
        response = client.post(f"{API}/admin/competitions/{published.id}/approve", json={}, auth=ADMIN_AUTH)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Only DRAFT competitions can be approved"

    def test_approve_invalid_id(self, client, users):
        response = client.post(f"{API}/admin/competitions/not-a-uuid/approve", json={}, auth=ADMIN_AUTH)
        assert response.status_code == 422

    def test_approve_unknown(self, client, users):
        response = client.post(f"{API}/admin/competitions/{MISSING_ID}/approve", json={}, auth=ADMIN_AUTH)
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Competition not found"

    def test_reject(self, client, competitions):
        draft = competitions["draft-old"]

        response = client.post(
            f"{API}/admin/competitions/{draft.id}/reject",
            json={"rejectionReason": "Faltan datos del recorrido"},
            auth=ADMIN_AUTH,
        )

        assert response.status_code == 200
        assert response.json()["status"] == "DRAFT"
        assert "RECHAZADA: Faltan datos del recorrido" in response.json()["description"]

    def test_reject_short_reason(self, client, competitions):
        draft = competitions["draft-old"]
        response = client.post(
            f"{API}/admin/competitions/{draft.id}/reject",
            json={"rejectionReason": "No"},
            auth=ADMIN_AUTH,
        )
        assert response.status_code == 422

    def test_update_status(self, client, competitions):
        published = competitions["published"]

        response = client.patch(
            f"{API}/admin/competitions/{published.id}/status",
            json={"status": "COMPLETED"},
            auth=ADMIN_AUTH,
        )

        assert response.status_code == 200
        assert response.json()["status"] == "COMPLETED"

    def test_update_status_invalid(self, client, competitions):
        published = competitions["published"]
        response = client.patch(
            f"{API}/admin/competitions/{published.id}/status",
            json={"status": "ARCHIVED"},
            auth=ADMIN_AUTH,
        )
        assert response.status_code == 422

    def test_stats(self, client, competitions):
        response = client.get(f"{API}/admin/stats", auth=ADMIN_AUTH)

        assert response.status_code == 200
        assert response.json() == {
            "competitions": {"total": 4, "published": 1, "draft": 2, "cancelled": 1},
            "users": {"total": 3, "organizers": 1},
        }


class TestOrganizerCompetitions:
    def test_my_competitions(self, client, competitions):
        response = client.get(f"{API}/organizer/competitions?limit=2", auth=ORGANIZER_AUTH)

        assert response.status_code == 200
        body = response.json()
        assert [c["slug"] for c in body["data"]] == ["draft-new", "draft-old"]
        assert body["data"][0]["counts"]["reviews"] == 1
        assert body["pagination"]["pages"] == 2

    def test_admin_allowed(self, client, competitions):
        response = client.get(f"{API}/organizer/competitions", auth=ADMIN_AUTH)
        assert response.status_code == 200
        assert response.json()["data"] == []


class TestEditionWeather:
    def test_read_before_fetch(self, client, edition, provider):
        response = client.get(f"{API}/editions/{edition.id}/weather")

        assert response.status_code == 200
        body = response.json()
        assert body["weather"] is None
        assert body["weatherFetched"] is False
        assert body["edition"]["competition"]["event"]["name"] == "Maratón de Madrid"

    def test_fetch_then_read(self, client, edition, provider):
        response = client.post(f"{API}/admin/editions/{edition.id}/weather", auth=ADMIN_AUTH)

        assert response.status_code == 200
        weather = response.json()["weather"]
        assert weather["date"] == "2024-04-28"
        assert weather["condition"] == "sunny"
        assert weather["conditionText"] == "Soleado"
        assert weather["wind"] == {"speed": 8.0, "direction": 90, "directionText": "E"}
        assert weather["cloudCover"] == 10

        read = client.get(f"{API}/editions/{edition.id}/weather").json()
        assert read["weatherFetched"] is True
        assert read["weather"]["temperature"] == weather["temperature"]

    def test_second_fetch_needs_force(self, client, edition, provider):
        client.post(f"{API}/admin/editions/{edition.id}/weather", auth=ADMIN_AUTH)

        response = client.post(f"{API}/admin/editions/{edition.id}/weather", auth=ADMIN_AUTH)
        assert response.status_code == 400
        assert response.json()["error"]["type"] == "already_fetched"
        assert provider.get_hourly_weather.call_count == 1

        response = client.post(f"{API}/admin/editions/{edition.id}/weather?force=true", auth=ADMIN_AUTH)
        assert response.status_code == 200
        assert provider.get_hourly_weather.call_count == 2

    def test_fetch_requires_admin(self, client, edition, provider):
        response = client.post(f"{API}/admin/editions/{edition.id}/weather", auth=ORGANIZER_AUTH)
        assert response.status_code == 403
        provider.get_hourly_weather.assert_not_called()

    def test_upstream_has_no_data(self, client, edition, provider):
        provider.get_hourly_weather.side_effect = WeatherUnavailableError("No weather data available for this date")

        response = client.post(f"{API}/admin/editions/{edition.id}/weather", auth=ADMIN_AUTH)

        assert response.status_code == 404
        assert response.json()["error"]["type"] == "weather_unavailable"

    def test_read_ignores_provider_configuration(self, client, edition):
        with patch("backoffice.services.edition_weather.ProviderRegistry.get_adapter") as get_adapter:
            get_adapter.side_effect = ValueError("Unknown provider: misconfigured")

            response = client.get(f"{API}/editions/{edition.id}/weather")

        assert response.status_code == 200
        assert response.json()["weatherFetched"] is False
        get_adapter.assert_not_called()

    def test_unknown_edition(self, client, users, provider):
        response = client.get(f"{API}/editions/{MISSING_ID}/weather")
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Edition not found"
