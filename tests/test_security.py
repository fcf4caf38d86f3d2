from datetime import datetime, timedelta, timezone

from jose import jwt

from app.core.config import settings
from app.core.security import hash_password, issue_token, verify_credentials, verify_token


def test_token_valid_right_after_issue():
    now = datetime.now(timezone.utc)
    token = issue_token("admin", now=now)
    assert verify_token(token, now=now) == "admin"


def test_token_still_valid_just_before_expiry():
    now = datetime.now(timezone.utc)
    token = issue_token("admin", now=now)
    assert verify_token(token, now=now + timedelta(hours=23, minutes=59)) == "admin"


def test_token_expires_after_24_hours():
    now = datetime.now(timezone.utc)
    token = issue_token("admin", now=now)
    assert verify_token(token, now=now + timedelta(hours=24, seconds=1)) is None


def test_tampered_payload_is_rejected():
    token = issue_token("admin")
    header, payload, signature = token.split(".")
    forged = jwt.encode({"sub": "admin", "exp": 9999999999}, "another-secret", algorithm="HS256")
    forged_payload = forged.split(".")[1]
    assert verify_token(f"{header}.{forged_payload}.{signature}") is None


def test_token_signed_with_other_secret_is_rejected():
    exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "admin", "exp": exp}, "not-the-secret", algorithm="HS256")
    assert verify_token(token) is None


def test_garbage_token_is_rejected():
    assert verify_token("not-a-token") is None
    assert verify_token("") is None


def test_token_without_subject_is_rejected():
    exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"exp": exp}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    assert verify_token(token) is None


def test_verify_credentials_plain_password():
    assert verify_credentials(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    assert not verify_credentials(settings.ADMIN_USERNAME, "wrong")
    assert not verify_credentials("someone", settings.ADMIN_PASSWORD)


def test_verify_credentials_hashed_password(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", hash_password("s3cret-pass"))
    assert verify_credentials(settings.ADMIN_USERNAME, "s3cret-pass")
    # plain ADMIN_PASSWORD is ignored once a hash is configured
    assert not verify_credentials(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
