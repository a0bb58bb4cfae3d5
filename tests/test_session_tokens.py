from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from alice_api.auth.errors import SessionTokenValidationError
from alice_api.auth.models import SessionClaims
from alice_api.auth.token_manager import JWTSessionTokenManager

SECRET = "unit-test-secret"


def _claims() -> SessionClaims:
    return SessionClaims(staff_id="staff-1", business_id="biz-1", role="staff")


def test_issued_token_verifies_back_to_same_claims():
    manager = JWTSessionTokenManager(SECRET)

    token = manager.issue_token(_claims())

    assert manager.verify_token(token) == _claims()


def test_token_expires_after_lifetime():
    manager = JWTSessionTokenManager(SECRET, lifetime=timedelta(hours=8))
    issued_at = datetime.now(timezone.utc) - timedelta(hours=9)

    token = manager.issue_token(_claims(), issued_at=issued_at)

    with pytest.raises(SessionTokenValidationError):
        manager.verify_token(token)


def test_token_carries_expiry_of_lifetime():
    manager = JWTSessionTokenManager(SECRET, lifetime=timedelta(hours=8))
    issued_at = datetime(2030, 1, 1, tzinfo=timezone.utc)

    token = manager.issue_token(_claims(), issued_at=issued_at)
    payload = jwt.get_unverified_claims(token)

    assert payload["exp"] - payload["iat"] == 8 * 3600
    assert payload["businessId"] == "biz-1"


def test_token_signed_with_other_secret_is_rejected():
    token = JWTSessionTokenManager("another-secret").issue_token(_claims())

    with pytest.raises(SessionTokenValidationError) as exc:
        JWTSessionTokenManager(SECRET).verify_token(token)

    assert exc.value.status_code == 401
    assert exc.value.detail == "Invalid token"


def test_malformed_token_is_rejected():
    with pytest.raises(SessionTokenValidationError):
        JWTSessionTokenManager(SECRET).verify_token("not-a-jwt")


def test_token_without_business_claim_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "staff-1", "staffId": "staff-1", "role": "staff", "exp": int((now + timedelta(hours=1)).timestamp())},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(SessionTokenValidationError):
        JWTSessionTokenManager(SECRET).verify_token(token)
