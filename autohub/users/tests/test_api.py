import pytest
from rest_framework_simplejwt.tokens import AccessToken

from autohub.users.models import User


pytestmark = pytest.mark.django_db

REGISTRATION = {
    "name": "Ada Lovelace",
    "email": "Ada@Example.com",
    "password": "analytical",
    "phone": "+251911223344",
}


def test_register(api_client):
    response = api_client.post("/api/register", REGISTRATION, format="json")

    assert response.status_code == 201
    assert response.data == {"message": "Registration successful"}
    user = User.objects.get()
    assert user.name == "Ada Lovelace"
    assert user.check_password("analytical")
    assert user.password != "analytical"


def test_register_duplicate_email(api_client, make_user):
    make_user("ada@example.com")

    response = api_client.post("/api/register", {**REGISTRATION, "email": "ada@example.com"}, format="json")

    assert response.status_code == 400
    assert response.data["email"] == ["Email already registered"]


def test_register_short_password(api_client):
    response = api_client.post("/api/register", {**REGISTRATION, "password": "short"}, format="json")

    assert response.status_code == 400
    assert response.data["password"] == ["Password must be at least 8 characters"]


def test_register_missing_fields(api_client):
    response = api_client.post("/api/register", {"email": "ada@example.com"}, format="json")

    assert response.status_code == 400
    assert {"name", "password", "phone"} <= set(response.data)


def test_register_strips_markup_from_name(api_client):
    api_client.post("/api/register", {**REGISTRATION, "name": "<b>Ada</b>"}, format="json")

    assert User.objects.get().name == "Ada"


def test_login(api_client, make_user):
    user = make_user("ada@example.com", password="analytical", name="Ada")

    response = api_client.post("/api/login", {"email": "ada@example.com", "password": "analytical"}, format="json")

    assert response.status_code == 200
    assert response.data["user"] == {"id": user.id, "name": "Ada", "email": "ada@example.com"}
    token = AccessToken(response.data["token"])
    assert token["userId"] == user.id
    assert token["email"] == "ada@example.com"


def test_login_wrong_password(api_client, make_user):
    make_user("ada@example.com", password="analytical")

    response = api_client.post("/api/login", {"email": "ada@example.com", "password": "difference"}, format="json")

    assert response.status_code == 401
    assert response.data["detail"] == "Invalid credentials"


def test_login_unknown_email(api_client):
    response = api_client.post("/api/login", {"email": "ghost@example.com", "password": "whatever1"}, format="json")

    assert response.status_code == 401


def test_profile_with_bearer_token(api_client, make_user):
    make_user("ada@example.com", password="analytical", name="Ada", phone="+251900000001")
    login = api_client.post("/api/login", {"email": "ada@example.com", "password": "analytical"}, format="json")
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['token']}")

    response = api_client.get("/api/user/profile")

    assert response.status_code == 200
    assert response.data["email"] == "ada@example.com"
    assert response.data["phone"] == "+251900000001"
    assert "createdAt" in response.data
    assert "password" not in response.data


def test_profile_requires_token(api_client):
    assert api_client.get("/api/user/profile").status_code == 401


def test_profile_rejects_garbage_token(api_client):
    api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-jwt")

    assert api_client.get("/api/user/profile").status_code == 401
