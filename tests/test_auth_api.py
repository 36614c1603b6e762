"""
Tests for session authentication and the profile endpoint.
"""

from django.contrib.auth import get_user_model
from django.urls import reverse

import pytest

User = get_user_model()

TEST_PASSWORD = "Str0ng-pass!"


@pytest.mark.django_db
class TestRegistration:
    def _payload(self, **overrides):
        payload = {
            "username": "ana",
            "name": "Ana Souza",
            "email": "ana@example.com",
            "password": TEST_PASSWORD,
            "confirmPassword": TEST_PASSWORD,
        }
        payload.update(overrides)
        return payload

    def test_register_logs_user_in(self, api_client):
        response = api_client.post(reverse("core:register"), self._payload(), format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "ana"
        assert data["role"] == "user"
        assert "password" not in data

        user = User.objects.get(username="ana")
        assert user.check_password(TEST_PASSWORD)

        profile = api_client.get(reverse("core:user"))
        assert profile.status_code == 200
        assert profile.json()["email"] == "ana@example.com"

    def test_duplicate_username(self, api_client, user):
        response = api_client.post(
            reverse("core:register"), self._payload(username=user.username), format="json"
        )

        assert response.status_code == 400
        assert response.json()["errors"]["username"] == ["Username already exists"]

    def test_duplicate_email(self, api_client, user):
        response = api_client.post(
            reverse("core:register"), self._payload(email=user.email.upper()), format="json"
        )

        assert response.status_code == 400
        assert response.json()["errors"]["email"] == ["Email already exists"]

    def test_password_mismatch(self, api_client):
        response = api_client.post(
            reverse("core:register"),
            self._payload(confirmPassword="Different-pass1"),
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Passwords don't match"
        assert not User.objects.filter(username="ana").exists()

    def test_short_password(self, api_client):
        response = api_client.post(
            reverse("core:register"),
            self._payload(password="a1b2", confirmPassword="a1b2"),
            format="json",
        )

        assert response.status_code == 400
        assert "password" in response.json()["errors"]


@pytest.mark.django_db
class TestLoginLogout:
    def test_login_with_username(self, api_client, user):
        response = api_client.post(
            reverse("core:login"),
            {"username": user.username, "password": TEST_PASSWORD},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["id"] == user.pk
        assert api_client.get(reverse("core:user")).status_code == 200

    def test_login_with_email(self, api_client, user):
        response = api_client.post(
            reverse("core:login"),
            {"username": "TEST@example.com", "password": TEST_PASSWORD},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["username"] == user.username

    def test_login_wrong_password(self, api_client, user):
        response = api_client.post(
            reverse("core:login"),
            {"username": user.username, "password": "wrong-password"},
            format="json",
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid username or password"}

    def test_login_missing_fields(self, api_client):
        response = api_client.post(reverse("core:login"), {}, format="json")
        assert response.status_code == 400

    def test_logout_ends_session(self, authenticated_client):
        response = authenticated_client.post(reverse("core:logout"))
        assert response.status_code == 200

        response = authenticated_client.get(reverse("core:user"))
        assert response.status_code == 401


@pytest.mark.django_db
class TestProfile:
    def test_profile_requires_authentication(self, api_client):
        response = api_client.get(reverse("core:user"))
        assert response.status_code == 401
        assert response.json()["message"]

    def test_get_profile(self, authenticated_client, user):
        response = authenticated_client.get(reverse("core:user"))

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "testuser"
        assert data["name"] == "Test User"
        assert data["avatar"] is None

    def test_update_profile_cannot_change_role(self, authenticated_client, user):
        response = authenticated_client.patch(
            reverse("core:user"), {"name": "Renamed", "role": "admin"}, format="json"
        )

        assert response.status_code == 200
        user.refresh_from_db()
        assert user.name == "Renamed"
        assert user.role == User.USER
        assert not user.is_shop_admin()

    def test_put_updates_sent_fields_only(self, authenticated_client, user):
        response = authenticated_client.put(
            reverse("core:user"), {"email": "new@example.com"}, format="json"
        )

        assert response.status_code == 200
        user.refresh_from_db()
        assert user.email == "new@example.com"
        assert user.name == "Test User"

    def test_password_change_keeps_session(self, authenticated_client, user):
        response = authenticated_client.patch(
            reverse("core:user"), {"password": "An0ther-pass!"}, format="json"
        )

        assert response.status_code == 200
        user.refresh_from_db()
        assert user.check_password("An0ther-pass!")
        assert authenticated_client.get(reverse("core:user")).status_code == 200


@pytest.mark.django_db
class TestHealthCheck:
    def test_health_check(self, client):
        response = client.get("/health/")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["database"] == "ok"
