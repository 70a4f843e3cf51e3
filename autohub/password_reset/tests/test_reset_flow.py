import re
from datetime import timedelta
from io import StringIO
from smtplib import SMTPException
from unittest import mock

import pytest
from django.core import mail
from django.core.management import call_command
from django.utils import timezone

from autohub.password_reset.models import ResetToken
from autohub.password_reset.services.reset_service import GENERIC_ACK, hash_token


pytestmark = pytest.mark.django_db

TOKEN_RE = re.compile(r"token=([0-9a-f]{64})")


@pytest.fixture
def account(make_user):
    return make_user("ada@example.com", password="old-password", name="Ada")


def request_token(api_client, email="ada@example.com"):
    response = api_client.post("/api/forgot-password", {"email": email}, format="json")
    assert response.status_code == 200
    return TOKEN_RE.search(mail.outbox[-1].body).group(1)


def test_forgot_password_sends_link(api_client, account):
    response = api_client.post("/api/forgot-password", {"email": "ada@example.com"}, format="json")

    assert response.data == {"message": GENERIC_ACK}
    assert len(mail.outbox) == 1
    message = mail.outbox[0]
    assert message.to == ["ada@example.com"]
    assert message.subject == "AutoHub - Password Reset Request"
    assert "https://autohub.test/reset-password?token=" in message.alternatives[0][0]


def test_only_the_token_hash_is_stored(api_client, account):
    raw = request_token(api_client)

    stored = ResetToken.objects.get(user=account)
    assert stored.token_hash == hash_token(raw)
    assert stored.token_hash != raw


def test_forgot_password_for_unknown_email_looks_the_same(api_client, db):
    response = api_client.post("/api/forgot-password", {"email": "ghost@example.com"}, format="json")

    assert response.status_code == 200
    assert response.data == {"message": GENERIC_ACK}
    assert mail.outbox == []
    assert not ResetToken.objects.exists()


def test_new_request_replaces_previous_token(api_client, account):
    first = request_token(api_client)
    second = request_token(api_client)

    assert ResetToken.objects.filter(user=account).count() == 1
    stale = api_client.get("/api/verify-reset-token", {"token": first, "email": "ada@example.com"})
    fresh = api_client.get("/api/verify-reset-token", {"token": second, "email": "ada@example.com"})
    assert stale.status_code == 400
    assert fresh.status_code == 200
    assert fresh.data["valid"] is True


def test_email_failure_stores_no_token(api_client, account):
    with mock.patch("autohub.password_reset.services.reset_service.send_mail", side_effect=SMTPException("down")):
        response = api_client.post("/api/forgot-password", {"email": "ada@example.com"}, format="json")

    assert response.status_code == 503
    assert not ResetToken.objects.exists()


def test_reset_password(api_client, account):
    raw = request_token(api_client)

    response = api_client.post(
        "/api/reset-password",
        {"token": raw, "email": "ada@example.com", "newPassword": "new-password"},
        format="json",
    )

    assert response.status_code == 200
    account.refresh_from_db()
    assert account.check_password("new-password")
    assert not ResetToken.objects.exists()
    assert mail.outbox[-1].subject == "AutoHub - Password Changed Successfully"

    login = api_client.post("/api/login", {"email": "ada@example.com", "password": "new-password"}, format="json")
    assert login.status_code == 200


def test_reset_token_is_single_use(api_client, account):
    raw = request_token(api_client)
    body = {"token": raw, "email": "ada@example.com", "newPassword": "new-password"}
    api_client.post("/api/reset-password", body, format="json")

    response = api_client.post("/api/reset-password", {**body, "newPassword": "third-password"}, format="json")

    assert response.status_code == 400
    assert response.data["detail"] == "Invalid or expired reset link"


def test_expired_token_is_rejected(api_client, account):
    raw = request_token(api_client)
    ResetToken.objects.update(created_at=timezone.now() - timedelta(hours=1, minutes=1))

    response = api_client.get("/api/verify-reset-token", {"token": raw, "email": "ada@example.com"})

    assert response.status_code == 400
    assert response.data["detail"] == "Invalid or expired reset link"


def test_token_for_another_email_is_rejected(api_client, account, make_user):
    make_user("eve@example.com")
    raw = request_token(api_client)

    response = api_client.get("/api/verify-reset-token", {"token": raw, "email": "eve@example.com"})

    assert response.status_code == 400


def test_reset_for_unknown_email(api_client, db):
    response = api_client.post(
        "/api/reset-password",
        {"token": "0" * 64, "email": "ghost@example.com", "newPassword": "new-password"},
        format="json",
    )

    assert response.status_code == 400
    assert response.data["detail"] == "Invalid reset link"


def test_reset_rejects_short_password(api_client, account):
    raw = request_token(api_client)

    response = api_client.post(
        "/api/reset-password",
        {"token": raw, "email": "ada@example.com", "newPassword": "short"},
        format="json",
    )

    assert response.status_code == 400
    assert response.data["newPassword"] == ["Password must be at least 8 characters"]
    account.refresh_from_db()
    assert account.check_password("old-password")


def test_purge_removes_only_expired_tokens(account, make_user):
    other = make_user("eve@example.com")
    ResetToken.objects.create(user=account, token_hash=hash_token("old"),
                              created_at=timezone.now() - timedelta(hours=2))
    fresh = ResetToken.objects.create(user=other, token_hash=hash_token("new"))
    out = StringIO()

    call_command("purge_reset_tokens", stdout=out)

    assert list(ResetToken.objects.all()) == [fresh]
    assert "Deleted 1 expired reset token(s)" in out.getvalue()
